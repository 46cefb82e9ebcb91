"""
Ponto de entrada da aplicação Streamlit.

Responsável por:
- Inicialização da UI
- Controle de estado da sessão (imagem + resultado)
- Orquestração entre upload, Gemini e download
"""

import logging

import streamlit as st

from config.log import setup_logging
from config.settings import PAGE_TITLE, load_settings, setup_page
from core.errors import CompassError, ConfigurationError, InvalidImageError
from core.llm_vision import AnalysisClient
from core.prompts import load_prompt
from core.session import AnalysisSession
from services.analysis_service import analysis_stream
from services.image_loader import load_uploaded_image
from ui.report import render_analyze_button, render_error, render_result
from ui.sidebar import render_preview, render_sidebar

logger = logging.getLogger(__name__)

# ==================================================
# Configuração inicial
# ==================================================
setup_page()
setup_logging()
st.title(f"🧭 {PAGE_TITLE}")
st.caption("ارفع صورة لبوصلة الأداء واحصل على تحليل للأدوار الوظيفية حسب نظرية بلبن")


@st.cache_resource
def get_client():
    """
    Cliente Gemini único por processo (chave lida uma só vez).
    """
    settings = load_settings()
    return AnalysisClient(settings), load_prompt(settings.prompt_file)


try:
    client, prompt = get_client()
except ConfigurationError as e:
    logger.critical("Startup failed: %s", e)
    st.error(f"⚠️ {e}")
    st.stop()

# ==================================================
# Estado da sessão (UI)
# ==================================================
if "analysis_session" not in st.session_state:
    st.session_state.analysis_session = AnalysisSession()

if "upload_key" not in st.session_state:
    st.session_state.upload_key = 0
    st.session_state.upload_id = None

session = st.session_state.analysis_session

# Execução anterior interrompida no meio do stream
session.abandon_stale_stream()

# ==================================================
# Sidebar – Upload
# ==================================================
uploaded = render_sidebar(key=f"compass_upload_{st.session_state.upload_key}")

if uploaded is not None:
    upload_id = (uploaded.name, uploaded.size)
    if upload_id != st.session_state.upload_id:
        st.session_state.upload_id = upload_id
        try:
            session.select_image(load_uploaded_image(uploaded))
        except InvalidImageError as e:
            logger.warning("Rejected upload: %s", e)
            st.sidebar.error("الرجاء اختيار ملف صورة صالح.")

elif st.session_state.upload_id is not None:
    # Arquivo removido pelo próprio uploader
    session.reset()
    st.session_state.upload_id = None

if render_preview(session.asset):
    session.reset()
    st.session_state.upload_id = None
    st.session_state.upload_key += 1
    st.rerun()

# ==================================================
# Análise
# ==================================================
if render_analyze_button(session.asset is not None):
    with st.spinner("جاري التحليل..."):
        try:
            accumulator = analysis_stream(session, client, prompt)
        except CompassError as e:
            render_error(str(e))
        else:
            st.write_stream(iter(accumulator))
            st.rerun()

render_result(session.result)
