"""
Integration Tests for the Streamlit Page

Drives the page through streamlit's AppTest harness: each text input edit
runs the change callback, which records the edit and writes all four display
strings back into the widgets.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from calculators.margin_models import Field
from calculators.source_history import SourceHistory

APP_PATH = Path(__file__).resolve().parent.parent / "app" / "margin_calculator.py"


def field_value(at, field):
    return at.text_input(key=f"field_{field.value}").value


def type_into(at, field, text):
    at.text_input(key=f"field_{field.value}").input(text).run()


class TestMarginCalculatorPage:
    """Callback wiring of the calculator page."""

    @pytest.fixture
    def at(self):
        """Fresh page, run once."""
        app = AppTest.from_file(str(APP_PATH), default_timeout=10)
        app.run()
        return app

    def test_initial_render(self, at):
        assert not at.exception
        assert at.title[0].value == "Margin Calculator"
        assert len(at.text_input) == 4
        assert at.error[0].value == "Enter any two values to calculate the others"

    def test_two_edits_fill_the_other_fields(self, at):
        type_into(at, Field.COST, "60")
        assert at.error[0].value == "Enter any two values to calculate the others"

        type_into(at, Field.PRICE, "100")

        assert not at.exception
        assert len(at.error) == 0
        assert field_value(at, Field.COST) == "60"
        assert field_value(at, Field.PRICE) == "100"
        assert field_value(at, Field.PROFIT) == "40.00"
        assert field_value(at, Field.MARGIN) == "40.00"
        assert at.session_state["source_history"] == SourceHistory((Field.PRICE, Field.COST))

    def test_third_edit_recomputes_stale_field(self, at):
        type_into(at, Field.COST, "60")
        type_into(at, Field.PRICE, "100")
        type_into(at, Field.PROFIT, "50")

        assert at.session_state["source_history"] == SourceHistory((Field.PROFIT, Field.PRICE))
        assert field_value(at, Field.COST) == "50.00"
        assert field_value(at, Field.MARGIN) == "50.00"

    def test_error_echoes_raw_text(self, at):
        type_into(at, Field.COST, "60")
        type_into(at, Field.PRICE, "abc")

        assert at.error[0].value == "Price must be a number"
        assert field_value(at, Field.PRICE) == "abc"
        assert field_value(at, Field.COST) == "60"
        assert field_value(at, Field.PROFIT) == ""
