import asyncio

import streamlit as st

from agents.coloring_page_agent.dependencies import build_coloring_page_controller
from agents.coloring_page_agent.utils import PNG_MIME_TYPE, base64_to_file, build_share_filename
from config.logger import setup_logging

st.set_page_config(page_title="Coloring Page Creator", page_icon="🖍️")

ss = st.session_state
if "controller" not in ss:
    setup_logging()
    ss.controller = build_coloring_page_controller()
controller = ss.controller

st.title("Coloring Page Creator")
st.write("Turn your ideas into beautiful, black-and-white coloring pages.")

prompt = st.text_area(
    "Describe your coloring page",
    key="prompt",
    placeholder="e.g., a castle in the clouds",
    height=100,
    disabled=controller.is_loading,
)
controller.set_prompt(prompt)

if st.button("✨ Generate", key="generate", disabled=not controller.can_submit, type="primary"):
    with st.spinner("Generating..."):
        asyncio.run(controller.submit())
    st.rerun()

if controller.error_message:
    st.error(f"**Oops, something went wrong!**\n\n{controller.error_message}")

with st.container(border=True):
    if controller.image_src:
        st.image(controller.image_src, caption=controller.prompt)
    else:
        st.markdown("#### 🖼️ Your image will appear here")
        st.caption("Describe what you want to color!")

if controller.can_share:
    share_col, download_col = st.columns(2)

    if share_col.button("📤 Share", key="share"):
        asyncio.run(controller.share())
        st.rerun()

    shared_file = asyncio.run(
        base64_to_file(controller.image, build_share_filename(controller.prompt), PNG_MIME_TYPE)
    )
    download_col.download_button(
        "⬇️ Download",
        data=shared_file.content,
        file_name=shared_file.filename,
        mime=shared_file.mime_type,
        key="download",
    )
