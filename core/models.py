"""
Modelos de dados da análise: imagem selecionada e resultado em streaming.
"""

from dataclasses import dataclass, field
from enum import Enum

from core.errors import InvalidTransitionError


@dataclass(frozen=True)
class ImageAsset:
    """
    Imagem escolhida pelo usuário (bytes + MIME type).
    """

    data: bytes = field(repr=False)
    mime_type: str
    name: str = "image"

    @property
    def size(self) -> int:
        return len(self.data)


class AnalysisStatus(str, Enum):
    IDLE = "idle"
    STREAMING = "streaming"
    COMPLETE = "complete"
    FAILED = "failed"


TERMINAL = {AnalysisStatus.COMPLETE, AnalysisStatus.FAILED}


class AnalysisResult:
    """
    Buffer de texto (somente append) + estado da análise.

    idle -> streaming -> {complete | failed}

    complete e failed são terminais: uma nova análise sempre
    cria outra instância.
    """

    def __init__(self):
        self._parts: list[str] = []
        self.status = AnalysisStatus.IDLE
        self.error: str | None = None

    # ----------------------------------
    # Leitura (qualquer momento)
    # ----------------------------------
    @property
    def text(self) -> str:
        return "".join(self._parts)

    @property
    def fragments(self) -> int:
        return len(self._parts)

    @property
    def is_streaming(self) -> bool:
        return self.status is AnalysisStatus.STREAMING

    @property
    def is_complete(self) -> bool:
        return self.status is AnalysisStatus.COMPLETE

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL

    # ----------------------------------
    # Transições
    # ----------------------------------
    def start(self):
        if self.status is not AnalysisStatus.IDLE:
            raise InvalidTransitionError(
                f"cannot start analysis from state '{self.status.value}'"
            )
        self.status = AnalysisStatus.STREAMING

    def append(self, fragment: str):
        if self.status is not AnalysisStatus.STREAMING:
            raise InvalidTransitionError(
                f"cannot append while '{self.status.value}'"
            )
        self._parts.append(fragment)

    def complete(self):
        if self.status is not AnalysisStatus.STREAMING:
            raise InvalidTransitionError(
                f"cannot complete from state '{self.status.value}'"
            )
        self.status = AnalysisStatus.COMPLETE

    def fail(self, cause: str):
        # Texto parcial é mantido
        if self.is_terminal:
            raise InvalidTransitionError(
                f"cannot fail from state '{self.status.value}'"
            )
        self.status = AnalysisStatus.FAILED
        self.error = cause or "An unknown error occurred."

    def __repr__(self):
        return (
            f"AnalysisResult(status={self.status.value!r}, "
            f"chars={len(self.text)}, error={self.error!r})"
        )
