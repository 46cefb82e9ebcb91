from __future__ import annotations

import pytest

from core.errors import ExportUnavailableError
from core.models import AnalysisResult
from services.export import DOWNLOAD_FILENAME, export_report, save_report


def _complete(text: str) -> AnalysisResult:
    result = AnalysisResult()
    result.start()
    result.append(text)
    result.complete()
    return result


def test_export_unavailable_until_complete():
    result = AnalysisResult()
    assert export_report(result) is None

    result.start()
    result.append("partial")
    assert export_report(result) is None

    result.fail("boom")
    assert export_report(result) is None


def test_export_matches_buffer():
    text = "الدور الأساسي: المنفذ\nRole: Implementer"
    assert export_report(_complete(text)) == text.encode("utf-8")


def test_save_report(tmp_path):
    path = save_report(_complete("report"), tmp_path / "out" / DOWNLOAD_FILENAME)

    assert path.read_text(encoding="utf-8") == "report"
    assert path.name.endswith(".txt")


def test_save_report_refuses_incomplete(tmp_path):
    with pytest.raises(ExportUnavailableError):
        save_report(AnalysisResult(), tmp_path / "out.txt")
    assert not (tmp_path / "out.txt").exists()
