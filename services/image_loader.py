"""
Responsável exclusivamente pelo carregamento da imagem enviada.

- Valida o tipo (somente image/*)
- Lê os bytes e cria o ImageAsset
"""

import mimetypes
from pathlib import Path

from core.encoder import read_image_bytes
from core.errors import InvalidImageError
from core.models import ImageAsset


def validate_image_type(mime_type: str | None, name: str = "") -> str:
    """
    Retorna o MIME type validado.

    Sem MIME type declarado, tenta adivinhar pela extensão.
    """
    if not mime_type and name:
        mime_type, _ = mimetypes.guess_type(name)

    if not mime_type or not mime_type.startswith("image/"):
        raise InvalidImageError(
            f"'{name or 'file'}' is not an image ({mime_type or 'unknown type'})"
        )
    return mime_type


def load_uploaded_image(file) -> ImageAsset:
    """
    Converte um UploadedFile do Streamlit em ImageAsset.
    """
    name = getattr(file, "name", "image")
    mime_type = validate_image_type(getattr(file, "type", None), name)

    return ImageAsset(
        data=read_image_bytes(file),
        mime_type=mime_type,
        name=name,
    )


def load_image_path(path) -> ImageAsset:
    """
    Lê uma imagem local (usado pela CLI).
    """
    path = Path(path)
    mime_type = validate_image_type(None, path.name)

    return ImageAsset(
        data=read_image_bytes(path),
        mime_type=mime_type,
        name=path.name,
    )
