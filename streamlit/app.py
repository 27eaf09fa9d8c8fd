from typing import List, Dict, Any
import streamlit as st
from src.engine.lifecycle import LoadingState, ReadyState
from src.engine.pipeline import answer_query
from src.utils.logging_setup import configure_logging

configure_logging()

st.set_page_config(page_title="Gridiron Scout", page_icon="🏈", layout="wide")
st.markdown("<h2>🏈 Gridiron Scout</h2><p>Name → Categories → Grades (Power 5 + Group 5).</p>", unsafe_allow_html=True)
st.divider()


@st.cache_resource(show_spinner="Loading grade files...")
def load_engine() -> ReadyState:
    return LoadingState().load()


engine = load_engine()

# Session state init
if "messages" not in st.session_state:
    st.session_state.messages: List[Dict[str, Any]] = [
        {"role": "assistant", "content": 'Hello! Ask me about a player (e.g., "john" or "john offense").'}
    ]
if "pending_question" not in st.session_state:
    st.session_state.pending_question: str | None = None

# Sidebar with examples + load report
with st.sidebar:
    st.subheader("Actions")
    if st.button("🧹 Clear Chat"):
        st.session_state.messages = [
            {"role": "assistant", "content": "Chat cleared. Ask about another player!"}
        ]
        st.session_state.pending_question = None
        st.rerun()
    st.markdown("#### Quick Examples")
    if st.button("Smith, all categories"):
        st.session_state.pending_question = "smith"
        st.rerun()
    if st.button("Johnson on defense"):
        st.session_state.pending_question = "johnson defense"
        st.rerun()
    if st.button("Williams penalties"):
        st.session_state.pending_question = "williams penalties"
        st.rerun()

    st.markdown("#### Data")
    st.caption(f"{len(engine.players)} unique players loaded")
    for r in engine.reports:
        icon = "✅" if r.status == "loaded" else ("⚠️" if r.status == "missing" else "❌")
        st.caption(f"{icon} {r.source} ({r.rows} rows)" if r.status == "loaded" else f"{icon} {r.source}: {r.error}")


# Render existing history
for msg in st.session_state.messages:
    with st.chat_message(msg["role"], avatar=("🏈" if msg["role"] == "assistant" else "👤")):
        if msg["role"] == "assistant":
            st.text(msg["content"])
        else:
            st.write(msg["content"])


def handle_question(q: str):
    # Append user
    st.session_state.messages.append({"role": "user", "content": q})
    with st.chat_message("user", avatar="👤"):
        st.write(q)
    # Assistant
    with st.chat_message("assistant", avatar="🏈"):
        try:
            result = answer_query(engine, q)
            st.text(result.text)
            st.session_state.messages.append({"role": "assistant", "content": result.text})
        except Exception as e:
            err = f"Error: {e}"
            st.text(err)
            st.session_state.messages.append({"role": "assistant", "content": err})


# Process pending example (auto-run)
if st.session_state.pending_question:
    pq = st.session_state.pending_question
    st.session_state.pending_question = None
    handle_question(pq)

# Chat input (manual entry)
user_query = st.chat_input("Player name, then optional categories…")
if user_query:
    handle_question(user_query)
