"""
Área de resultados: botão de análise, texto em streaming e download.
"""

import streamlit as st

from core.models import AnalysisResult
from services.export import DOWNLOAD_FILENAME, DOWNLOAD_MIME, export_report

PLACEHOLDER = "ستظهر نتائج تحليل بوصلة الأداء هنا."


def render_analyze_button(has_image: bool) -> bool:
    return st.button(
        "✨ حلل الصورة",
        disabled=not has_image,
        type="primary",
        use_container_width=True,
    )


def render_error(message: str):
    st.error(f"فشل التحليل: {message}")


def render_result(result: AnalysisResult):
    """
    Renderiza o buffer atual (inclusive parcial, em caso de falha).
    """
    st.subheader("نتائج التحليل:")

    if result.text:
        st.markdown(result.text)
    else:
        st.caption(PLACEHOLDER)

    if result.error:
        render_error(result.error)

    render_download(result)


def render_download(result: AnalysisResult):
    data = export_report(result)
    if data is None:
        return

    st.download_button(
        "⬇️ تحميل",
        data=data,
        file_name=DOWNLOAD_FILENAME,
        mime=DOWNLOAD_MIME,
    )
