from __future__ import annotations

import pytest

from core.errors import InvalidTransitionError
from core.models import AnalysisResult, AnalysisStatus, ImageAsset


def test_new_result_is_idle_and_empty():
    result = AnalysisResult()
    assert result.status is AnalysisStatus.IDLE
    assert result.text == ""
    assert result.error is None


def test_happy_path_transitions():
    result = AnalysisResult()
    result.start()
    result.append("A")
    result.append("B")
    result.complete()

    assert result.text == "AB"
    assert result.fragments == 2
    assert result.is_complete
    assert result.is_terminal


def test_fail_keeps_partial_text():
    result = AnalysisResult()
    result.start()
    result.append("partial")
    result.fail("network down")

    assert result.status is AnalysisStatus.FAILED
    assert result.text == "partial"
    assert result.error == "network down"


def test_fail_without_cause_gets_message():
    result = AnalysisResult()
    result.fail("")
    assert result.error


@pytest.mark.parametrize("action", ["start", "complete", "fail"])
def test_terminal_states_cannot_be_resurrected(action):
    result = AnalysisResult()
    result.start()
    result.complete()

    with pytest.raises(InvalidTransitionError):
        if action == "fail":
            result.fail("x")
        else:
            getattr(result, action)()


def test_append_requires_streaming():
    with pytest.raises(InvalidTransitionError):
        AnalysisResult().append("A")


def test_image_asset_is_immutable(png_asset):
    with pytest.raises(AttributeError):
        png_asset.mime_type = "image/jpeg"  # type: ignore[misc]
    assert png_asset.size == len(png_asset.data)
    assert "data" not in repr(ImageAsset(data=b"xyz", mime_type="image/png"))
