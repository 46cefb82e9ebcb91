"""
Arquivo responsável por centralizar todas as configurações
globais da aplicação.

Isso facilita manutenção, troca de modelos e deploy.
"""

import os
from dataclasses import dataclass
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

from core.errors import ConfigurationError

# ===============================
# Configurações do Gemini
# ===============================
MODEL_VISION = "gemini-2.5-flash"
TEMPERATURE = 0.2

# Variáveis de ambiente aceitas para a chave (em ordem)
API_KEY_VARS = ("API_KEY", "GOOGLE_API_KEY")

DOTENV_PATH = ".env"

# ===============================
# Upload
# ===============================
IMAGE_TYPES = ["png", "jpg", "jpeg", "webp", "gif"]

PAGE_TITLE = "محلل بوصلة أداء المربيات"


@dataclass(frozen=True)
class Settings:
    """
    Configuração carregada uma única vez no início do processo.
    """

    api_key: str
    model: str = MODEL_VISION
    temperature: float = TEMPERATURE
    prompt_file: Path | None = None


def load_settings(dotenv_path: str | None = DOTENV_PATH) -> Settings:
    """
    Lê o .env e as variáveis de ambiente.

    Sem chave de API não há cliente: levanta ConfigurationError.
    """
    if dotenv_path:
        load_dotenv(dotenv_path)

    api_key = ""
    for name in API_KEY_VARS:
        api_key = os.getenv(name, "").strip()
        if api_key:
            break

    if not api_key:
        raise ConfigurationError(
            f"{API_KEY_VARS[0]} environment variable not set"
        )

    prompt_file = os.getenv("COMPASS_PROMPT_FILE")

    return Settings(
        api_key=api_key,
        model=os.getenv("GEMINI_MODEL", MODEL_VISION),
        temperature=float(os.getenv("GEMINI_TEMPERATURE", TEMPERATURE)),
        prompt_file=Path(prompt_file) if prompt_file else None,
    )


def setup_page():
    """
    Configuração inicial da página Streamlit.
    Deve ser chamada uma única vez no app.py.
    """
    st.set_page_config(
        page_title=PAGE_TITLE,
        page_icon="🧭",
        layout="wide"
    )
