"""
Serviço responsável pelo streaming da análise da bússola.

Fluxo: imagem -> base64 -> Gemini -> acumulador.
"""

import logging

from core.encoder import encode_image
from core.errors import EncodingError, InvalidImageError
from core.llm_vision import AnalysisClient
from core.prompts import COMPASS_PROMPT
from core.session import AnalysisSession
from core.stream import StreamAccumulator

logger = logging.getLogger(__name__)


def analysis_stream(
    session: AnalysisSession,
    client: AnalysisClient,
    prompt: str = COMPASS_PROMPT,
) -> StreamAccumulator:
    """
    Inicia uma nova análise para a imagem da sessão.

    Retorna o acumulador (iterável de fragmentos), pronto
    para st.write_stream.
    """
    asset = session.asset
    if asset is None:
        raise InvalidImageError("No image selected")

    try:
        payload = encode_image(asset)
    except EncodingError as e:
        # Nenhuma requisição é feita
        result = session.new_result()
        result.fail(e.cause)
        logger.error("Encoding failed for %s: %s", asset.name, e.cause)
        return StreamAccumulator(result, [], is_current=lambda: False)

    return session.start_analysis(
        client.stream(payload, asset.mime_type, prompt)
    )
