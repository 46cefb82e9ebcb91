"""
Conversão de imagens para Base64 (formato exigido pelo Gemini).
"""

import base64
import logging
from pathlib import Path

from core.errors import EncodingError
from core.models import ImageAsset

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = "data:"


def read_image_bytes(source) -> bytes:
    """
    Lê todo o conteúdo de um caminho ou de um objeto file-like
    (ex.: UploadedFile do Streamlit).
    """
    try:
        if isinstance(source, (str, Path)):
            with open(source, "rb") as f:
                return f.read()

        if hasattr(source, "getvalue"):
            return source.getvalue()

        if hasattr(source, "seek"):
            source.seek(0)
        return source.read()
    except OSError as e:
        raise EncodingError(f"Failed to read image: {e}") from e


def strip_data_url_prefix(value: str) -> str:
    """
    Remove o prefixo "data:image/jpeg;base64," se existir.
    """
    if value.startswith(DATA_URL_PREFIX) and "," in value:
        return value.split(",", 1)[1]
    return value


def to_data_url(payload: str, mime_type: str) -> str:
    return f"data:{mime_type};base64,{strip_data_url_prefix(payload)}"


def encode_image(asset: ImageAsset) -> str:
    """
    Converte a imagem para Base64, sem prefixo de data URL.
    """
    if not isinstance(asset.data, (bytes, bytearray, memoryview)):
        raise EncodingError("Image content is not readable binary data")

    payload = base64.b64encode(bytes(asset.data)).decode("utf-8")
    logger.debug("Encoded %s: %d base64 chars", asset.name, len(payload))
    return payload
