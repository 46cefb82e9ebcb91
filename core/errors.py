"""
Hierarquia de erros da aplicação.
"""


class CompassError(Exception):
    """Base de todos os erros do analisador."""


class ConfigurationError(CompassError):
    """Configuração inválida (ex.: chave de API ausente). Fatal no início."""


class InvalidImageError(CompassError):
    """Arquivo selecionado não é uma imagem."""


class AnalysisError(CompassError):
    """Falha na análise, sempre com uma causa legível."""

    def __init__(self, cause: str):
        super().__init__(cause)
        self.cause = cause or "An unknown error occurred."


class EncodingError(AnalysisError):
    """Não foi possível ler o conteúdo da imagem."""


class InvalidTransitionError(CompassError):
    """Transição de estado não permitida no AnalysisResult."""


class ExportUnavailableError(CompassError):
    """Download pedido antes da análise terminar."""
