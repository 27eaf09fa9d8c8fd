# src/tests/ui/test_streamlit_app.py
from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parents[3] / "streamlit" / "app.py"


def _boom(state, text):
    raise RuntimeError("boom")


def test_error_reply_renders_the_same_after_rerun(monkeypatch):
    monkeypatch.setattr("src.engine.pipeline.answer_query", _boom)

    at = AppTest.from_file(str(APP_PATH), default_timeout=30).run()
    at.chat_input[0].set_value("smith").run()
    assert "Error: boom" in [t.value for t in at.text]

    at.run()
    assert "Error: boom" in [t.value for t in at.text]
    assert not any("**Error" in m.value for m in at.markdown)
