"""
Estado de uma sessão do usuário: imagem selecionada + resultado atual.

Substitui o estado reativo da UI por um objeto explícito,
guardado em st.session_state pelo app.py.
"""

import logging
from typing import Iterable

from core.models import AnalysisResult, ImageAsset
from core.stream import StreamAccumulator

logger = logging.getLogger(__name__)

SUPERSEDED = "Superseded by a new analysis."
INTERRUPTED = "Analysis was interrupted before completion."


class AnalysisSession:

    def __init__(self):
        self.asset: ImageAsset | None = None
        self.result = AnalysisResult()

    # ----------------------------------
    # Imagem
    # ----------------------------------
    def select_image(self, asset: ImageAsset):
        logger.info("Selected %s (%s, %d bytes)", asset.name, asset.mime_type, asset.size)
        self._discard_current()
        self.asset = asset
        self.result = AnalysisResult()

    def reset(self):
        self._discard_current()
        self.asset = None
        self.result = AnalysisResult()

    # ----------------------------------
    # Análise
    # ----------------------------------
    def new_result(self) -> AnalysisResult:
        """
        Descarta o resultado atual e começa um novo (idle).
        """
        self._discard_current()
        self.result = AnalysisResult()
        return self.result

    def start_analysis(self, fragments: Iterable[str]) -> StreamAccumulator:
        result = self.new_result()
        return StreamAccumulator(
            result,
            fragments,
            is_current=lambda: self.result is result,
        )

    def abandon_stale_stream(self) -> bool:
        """
        Um resultado em streaming sem consumidor (execução do
        script interrompida) é marcado como falho.
        """
        if self.result.is_streaming:
            logger.warning("Found interrupted stream, marking as failed")
            self.result.fail(INTERRUPTED)
            return True
        return False

    def _discard_current(self):
        if self.result.is_streaming:
            logger.info("Discarding in-flight analysis")
            self.result.fail(SUPERSEDED)
