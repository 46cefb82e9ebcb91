"""
Configuração de logging da aplicação (console).
"""

import logging
import os

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configura o logger raiz uma única vez.

    O nível vem do argumento ou da variável LOG_LEVEL (padrão INFO).
    """
    root = logging.getLogger()
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")
        )
        root.addHandler(handler)

    return root
