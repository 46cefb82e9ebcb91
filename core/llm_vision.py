"""
Módulo responsável pela análise de imagens (multimodal) via Gemini.
"""

import logging
from typing import Iterator

from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from config.settings import Settings
from core.encoder import to_data_url
from core.errors import AnalysisError, ConfigurationError
from core.prompts import COMPASS_PROMPT

logger = logging.getLogger(__name__)


def get_vision_llm(settings: Settings):
    """
    Inicializa o modelo multimodal com a chave injetada.
    """
    return ChatGoogleGenerativeAI(
        model=settings.model,
        google_api_key=settings.api_key,
        temperature=settings.temperature,
        max_retries=0,  # sem retry: o usuário dispara de novo
    )


def chunk_text(chunk) -> str:
    """
    Extrai o texto de um AIMessageChunk.

    O conteúdo pode vir como string ou lista de blocos.
    """
    content = chunk.content
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    raise AnalysisError(f"Malformed response chunk: {type(content).__name__}")


class AnalysisClient:
    """
    Envia imagem + prompt ao Gemini e devolve o texto em streaming.

    Criado uma vez por processo; sem chave de API não é criado.
    """

    def __init__(self, settings: Settings, llm=None):
        if not settings.api_key:
            raise ConfigurationError("API_KEY environment variable not set")

        self.model = settings.model
        self.llm = llm if llm is not None else get_vision_llm(settings)

    def build_message(self, payload: str, mime_type: str, prompt: str) -> HumanMessage:
        return HumanMessage(content=[
            {
                "type": "image_url",
                "image_url": to_data_url(payload, mime_type),
            },
            {"type": "text", "text": prompt},
        ])

    def stream(
        self,
        payload: str,
        mime_type: str,
        prompt: str = COMPASS_PROMPT,
    ) -> Iterator[str]:
        """
        Analisa a imagem em modo streaming (fragmentos na ordem gerada).
        """
        message = self.build_message(payload, mime_type, prompt)
        logger.info(
            "Streaming analysis from %s (%s, %d base64 chars)",
            self.model, mime_type, len(payload),
        )

        try:
            for chunk in self.llm.stream([message]):
                text = chunk_text(chunk)
                if text:
                    yield text
        except AnalysisError:
            raise
        except Exception as e:
            logger.error("Error analyzing image with Gemini: %s", e)
            raise AnalysisError(f"Gemini API Error: {e}") from e
