"""Shared pytest fixtures."""

from __future__ import annotations

import base64
import io

import pytest
from langchain_core.messages import AIMessageChunk

from config.settings import Settings
from core.llm_vision import AnalysisClient
from core.models import ImageAsset


PNG_1X1_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/x8AAwMCAO7+fJ8AAAAASUVORK5CYII="
)


class FakeVisionLLM:
    """Stands in for ChatGoogleGenerativeAI: streams canned chunks.

    Items that are exceptions are raised at that point of the stream.
    """

    def __init__(self, chunks):
        self.chunks = list(chunks)
        self.calls = []
        self.closed = False

    def stream(self, messages):
        self.calls.append(messages)
        try:
            for item in self.chunks:
                if isinstance(item, BaseException):
                    raise item
                yield AIMessageChunk(content=item)
        finally:
            self.closed = True


class FakeUpload(io.BytesIO):
    """Mimics streamlit's UploadedFile (name, type, size, getvalue)."""

    def __init__(self, data: bytes, name: str, type: str):
        super().__init__(data)
        self.name = name
        self.type = type
        self.size = len(data)


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_1X1_BYTES


@pytest.fixture
def png_asset() -> ImageAsset:
    return ImageAsset(data=PNG_1X1_BYTES, mime_type="image/png", name="compass.png")


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key")


@pytest.fixture
def make_client(settings):
    def _make(chunks):
        llm = FakeVisionLLM(chunks)
        return AnalysisClient(settings, llm=llm), llm

    return _make


@pytest.fixture
def make_upload():
    return FakeUpload
