# Streamlit app: Convert HTML (or a zipped static site) into a SCORM 1.2 package (zip)
# Run with: `streamlit run streamlit_app.py`

import logging

import streamlit as st

from html2scorm import config
from html2scorm.errors import ConversionError
from html2scorm.models import InputArtifact
from html2scorm.session import ConversionSession

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger("html2scorm.app")

st.set_page_config(page_title="HTML → SCORM (1.2)", layout="centered")
st.title("HTML → SCORM 1.2 package maker")
st.write(
    "Upload a single HTML file, or a ZIP containing a static web course (HTML/CSS/JS/assets). "
    "The launch page gets a SCORM 1.2 runtime and the package gets an imsmanifest.xml, "
    "ready for LMS import."
)

# --- Session state ---

if "conversion" not in st.session_state:
    st.session_state.conversion = ConversionSession()
if "uploader_key" not in st.session_state:
    st.session_state.uploader_key = 0

session = st.session_state.conversion


def start_over():
    session.reset()
    # a fresh key clears the uploader widget
    st.session_state.uploader_key += 1


def show_result(result):
    package = result.package
    st.success("Package created successfully! Ready for download.")
    st.download_button(
        "Download SCORM package",
        data=result.data,
        file_name=result.filename,
        mime="application/zip",
        width="stretch",
    )
    st.markdown(
        f"- **Title:** {package.manifest.title}\n"
        f"- **Launch page:** `{package.entry_path}`\n"
        f"- **Files:** {package.file_count} (including imsmanifest.xml)\n"
        f"- **Size:** {result.size_kb:.1f} KB"
    )


# --- UI inputs ---

uploaded = st.file_uploader(
    "Upload a single HTML file or a ZIP (containing course files)",
    type=["html", "htm", "zip"],
    key=f"uploader_{st.session_state.uploader_key}",
)

if uploaded is None:
    if session.artifact is not None:
        session.reset()
    st.info("Upload an HTML file (.html/.htm) or a ZIP of your course to begin.")
    st.stop()

data = uploaded.getvalue()
current = session.artifact
if current is None or current.name != uploaded.name or current.data != data:
    try:
        session.select(InputArtifact.from_upload(uploaded.name, data, uploaded.type))
    except ConversionError as exc:
        logger.warning("Rejected upload: %s", exc)
        session.reset()
        st.error(exc.user_message)
        st.stop()

if session.result is None:
    if st.button("Convert to SCORM", type="primary", width="stretch"):
        with st.spinner("Building SCORM package..."):
            try:
                session.convert()
            except ConversionError:
                # already logged by the session; shown below
                pass

# stays on screen until a new file is selected or the session is reset
if session.error is not None:
    st.error(session.error.user_message)

if session.result is not None:
    show_result(session.result)
    st.button("Start over", on_click=start_over)
