"""
Streamlit UI for the code reviewer.

Run: streamlit run frontend/client/streamlit_app.py
"""
import streamlit as st

from client.config import API_BASE_URL, LANGUAGES
from client.orchestrator import RequestOrchestrator
from client.presenter import copy_text, render
from client.view_state import Operation

ACTIONS = [
    (Operation.REVIEW, "⚡ Review"),
    (Operation.FIX, "🔧 Fix"),
    (Operation.COMPLEXITY, "📈 Complexity"),
    (Operation.DOCUMENT, "📄 Write Docs"),
    (Operation.CONVERT, "🔄 Convert"),
]


def draw_panel(slot, state):
    panel = render(state)
    with slot.container():
        st.subheader(panel.title)
        if panel.kind == "working":
            st.info(panel.body)
        elif panel.kind == "error":
            st.error(panel.body)
        elif panel.kind == "markdown":
            st.markdown(panel.body)
        elif panel.kind == "code":
            st.code(panel.body, language=panel.language)
        else:
            st.caption(panel.body)


def queue(operation):
    # runs before the rerun renders the widgets, so the buttons come up disabled
    st.session_state.pending = operation


st.set_page_config(page_title="AI Code Reviewer", layout="wide")
st.title("🤖 AI Code Reviewer")
st.caption("Not just a code reviewer: your development partner")

if "orchestrator" not in st.session_state:
    st.session_state.orchestrator = RequestOrchestrator(API_BASE_URL)
if "pending" not in st.session_state:
    st.session_state.pending = None
orchestrator: RequestOrchestrator = st.session_state.orchestrator
pending = st.session_state.pending
busy = pending is not None or orchestrator.is_loading

left, right = st.columns(2)

with left:
    st.subheader("Code Input")
    src_col, dst_col = st.columns(2)
    source_language = src_col.selectbox("From", LANGUAGES, index=LANGUAGES.index("JavaScript"))
    target_language = dst_col.selectbox("To", LANGUAGES, index=LANGUAGES.index("Python"))
    code = st.text_area("Code", height=360, placeholder="Paste your code here...", label_visibility="collapsed")

    for col, (operation, label) in zip(st.columns(len(ACTIONS)), ACTIONS):
        col.button(label, disabled=busy, on_click=queue, args=(operation,), use_container_width=True)

with right:
    slot = st.empty()
    copy_slot = st.empty()

if pending is not None:
    # one listener per run; streamlit rebuilds the slot on every rerun
    orchestrator.clear_listeners()
    orchestrator.subscribe(lambda state: draw_panel(slot, state))
    try:
        orchestrator.submit(pending, code, source_language, target_language)
    finally:
        st.session_state.pending = None
    # redraw with the buttons enabled again
    st.rerun()

draw_panel(slot, orchestrator.state)

text = copy_text(orchestrator.state)
with copy_slot.container():
    if st.button("Copy", disabled=text is None or busy):
        st.code(text, language=None)
        st.caption("Use the copy icon on the block above.")
