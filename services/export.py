"""
Exportação do relatório como arquivo .txt (UTF-8).
"""

import logging
from pathlib import Path

from core.errors import ExportUnavailableError
from core.models import AnalysisResult

logger = logging.getLogger(__name__)

DOWNLOAD_FILENAME = "تحليل_أداء_المربية.txt"
DOWNLOAD_MIME = "text/plain"


def export_report(result: AnalysisResult) -> bytes | None:
    """
    Conteúdo do download; só existe com a análise completa.
    """
    if not result.is_complete:
        return None
    return result.text.encode("utf-8")


def save_report(result: AnalysisResult, path) -> Path:
    data = export_report(result)
    if data is None:
        raise ExportUnavailableError(
            f"analysis is '{result.status.value}', not complete"
        )

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.info("Saved report to %s (%d bytes)", path, len(data))
    return path
