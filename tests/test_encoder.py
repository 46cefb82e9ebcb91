from __future__ import annotations

import base64
import io

import pytest

from core.encoder import encode_image, read_image_bytes, strip_data_url_prefix, to_data_url
from core.errors import EncodingError
from core.models import ImageAsset


def test_encode_image_returns_plain_base64(png_asset, png_bytes):
    payload = encode_image(png_asset)

    assert not payload.startswith("data:")
    assert "," not in payload
    assert base64.b64decode(payload) == png_bytes


def test_encode_image_is_deterministic(png_asset):
    assert encode_image(png_asset) == encode_image(png_asset)


def test_encode_empty_image():
    assert encode_image(ImageAsset(data=b"", mime_type="image/png")) == ""


def test_encode_rejects_non_binary_content():
    with pytest.raises(EncodingError):
        encode_image(ImageAsset(data="not bytes", mime_type="image/png"))  # type: ignore[arg-type]


def test_strip_data_url_prefix():
    assert strip_data_url_prefix("data:image/jpeg;base64,QUJD") == "QUJD"
    assert strip_data_url_prefix("QUJD") == "QUJD"


def test_to_data_url_does_not_double_prefix():
    url = to_data_url("data:image/png;base64,QUJD", "image/png")
    assert url == "data:image/png;base64,QUJD"


def test_read_image_bytes_from_path(tmp_path, png_bytes):
    path = tmp_path / "compass.png"
    path.write_bytes(png_bytes)

    assert read_image_bytes(path) == png_bytes
    assert read_image_bytes(str(path)) == png_bytes


def test_read_image_bytes_from_file_like(png_bytes):
    buf = io.BytesIO(png_bytes)
    buf.read()
    assert read_image_bytes(buf) == png_bytes


def test_read_image_bytes_missing_file(tmp_path):
    with pytest.raises(EncodingError, match="Failed to read image"):
        read_image_bytes(tmp_path / "missing.png")


def test_read_image_bytes_io_error():
    class Broken:
        def read(self):
            raise OSError("disk gone")

    with pytest.raises(EncodingError, match="disk gone"):
        read_image_bytes(Broken())
