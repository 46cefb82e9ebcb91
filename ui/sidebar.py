"""
Componentes visuais da sidebar.
"""

import streamlit as st

from config.settings import IMAGE_TYPES


def render_sidebar(key: str = "compass_upload"):
    """
    Renderiza a área de upload da bússola de desempenho.
    """
    st.sidebar.header("🧭 بوصلة الأداء")

    return st.sidebar.file_uploader(
        "اختر صورة",
        type=IMAGE_TYPES,
        accept_multiple_files=False,
        help="PNG, JPG, WEBP, GIF",
        key=key,
    )


def render_preview(asset) -> bool:
    """
    Mostra a imagem selecionada. Retorna True se o usuário
    pediu para removê-la.
    """
    if asset is None:
        return False

    st.sidebar.image(asset.data, caption="معاينة بوصلة الأداء")
    return st.sidebar.button("🗑️ إزالة الصورة")
