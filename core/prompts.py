"""
Prompt fixo enviado junto com a imagem da bússola de desempenho.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

COMPASS_PROMPT = """أنت خبير في تحليل أداء الموظفين ومتخصص في نظرية أدوار فريق بلبن (Belbin Team Roles). أمامك صورة لـ 'بوصلة أداء' خاصة بمربية تعمل في مركز لذوي الاحتياجات الخاصة. قم بتحليل هذه الصورة بدقة. بناءً على البيانات والتقييمات الموجودة في الصورة، قم بما يلي:
1. لخص نقاط القوة والضعف الرئيسية للمربية في نقاط واضحة.
2. حدد أي من أدوار فريق بلبن التسعة (مثل المنفذ، المنسق، المفكر، المستكشف، إلخ) هو الأنسب لهذه المربية. يمكن تحديد دور أساسي ودور ثانوي.
3. قدم تبريرًا واضحًا لاختيارك للأدوار، مع ربطها بالبيانات المرئية في بوصلة الأداء.
4. اقترح توصيات عملية ومحددة لتطوير أداء المربية بناءً على تحليل الأدوار."""


def load_prompt(path: Path | None = None) -> str:
    """
    Retorna o prompt do arquivo informado ou o padrão.
    """
    if path is None:
        return COMPASS_PROMPT

    text = Path(path).read_text(encoding="utf-8").strip()
    if not text:
        logger.warning("Prompt file %s is empty, using default prompt", path)
        return COMPASS_PROMPT

    logger.info("Loaded prompt from %s", path)
    return text
