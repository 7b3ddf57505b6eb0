# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Margin Calculator project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Margin Calculator - Streamlit Application

Enter any two of cost, price, profit and margin; the other two are derived
live on every edit.

Run with:
    streamlit run app/margin_calculator.py
"""

import sys
from pathlib import Path

# Fix module imports - add project root to path
_root = Path(__file__).parent.parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

import streamlit as st
from calculators.margin_config import CACHE_SIZE
from calculators.margin_engine import derive_display
from calculators.margin_models import Field, RawInputs
from calculators.source_history import SourceHistory
from utils.logging_config import get_perf_logger, log_context, setup_logger
from app.ui.styles import APP_STYLE
from app.ui.components import FIELD_LABELS, FIELD_PLACEHOLDERS, FORM_ORDER, render_result_summary

logger = setup_logger(__name__)


@st.cache_data(show_spinner=False, max_entries=CACHE_SIZE or None)
def derive_display_cached(raw: RawInputs, history: SourceHistory):
    """
    Derivation cycle with caching.

    Keyed on the four raw strings plus the edit history; the engine itself
    stays pure.
    """
    return derive_display(raw, history)


def _widget_key(field: Field) -> str:
    return f"field_{field.value}"


def init_session_state():
    """Create the calculator state slots on first run."""
    if 'raw_inputs' not in st.session_state:
        st.session_state.raw_inputs = RawInputs()
    if 'source_history' not in st.session_state:
        st.session_state.source_history = SourceHistory()
    if 'display_result' not in st.session_state:
        st.session_state.display_result = derive_display_cached(
            st.session_state.raw_inputs, st.session_state.source_history
        )
    for field in Field:
        if _widget_key(field) not in st.session_state:
            st.session_state[_widget_key(field)] = st.session_state.display_result.get(field)


def on_field_change(field: Field):
    """
    Change callback for one text input.

    Stores the raw text, records the edit, recomputes, and writes the four
    display strings back into the widgets before the rerun renders them.
    """
    text = st.session_state[_widget_key(field)]
    raw = st.session_state.raw_inputs.with_value(field, text)
    history = st.session_state.source_history.push(field)

    with get_perf_logger(logger, "derive_display", threshold_ms=50):
        result = derive_display_cached(raw, history)

    st.session_state.raw_inputs = raw
    st.session_state.source_history = history
    st.session_state.display_result = result

    for f in Field:
        st.session_state[_widget_key(f)] = result.get(f)

    logger.debug(
        f"Edited {field.value}",
        extra=log_context(history=tuple(history), error=result.category),
    )


def main():
    """Main application entry point."""
    st.set_page_config(
        page_title="Margin Calculator",
        page_icon="🧮",
        layout="centered",
    )
    st.markdown(APP_STYLE, unsafe_allow_html=True)

    init_session_state()

    st.title("Margin Calculator")

    result = st.session_state.display_result
    if result.error:
        st.error(result.error)

    for field in FORM_ORDER:
        st.text_input(
            FIELD_LABELS[field],
            key=_widget_key(field),
            placeholder=FIELD_PLACEHOLDERS[field],
            on_change=on_field_change,
            args=(field,),
        )

    summary_html = render_result_summary(result)
    if summary_html:
        st.markdown(summary_html, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
