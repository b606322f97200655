from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parents[2] / "main.py")


def _app() -> AppTest:
    return AppTest.from_file(APP, default_timeout=30).run()


def test_app_renders_all_tabs():
    at = _app()
    assert not at.exception
    assert at.title[0].value == "Calculadora de Prestaciones Mexicanas"
    assert len(at.tabs) == 4


def test_finiquito_shows_line_items():
    at = _app()
    at.button(key="calc_finiquito").click().run()
    assert not at.exception
    assert not at.error
    assert any(s.value == "Resultado del Finiquito" for s in at.subheader)
    assert len(at.dataframe) == 1


def test_ptu_with_default_inputs():
    at = _app()
    at.button(key="calc_ptu").click().run()
    assert not at.exception
    assert not at.error
    assert any(s.value == "Resultado PTU" for s in at.subheader)


def test_zero_salary_shows_validation_error():
    at = _app()
    at.sidebar.number_input[0].set_value(0.0).run()
    at.button(key="calc_aguinaldo").click().run()
    assert not at.exception
    assert len(at.error) == 1
    assert "daily_salary" in at.error[0].value


def test_finiquito_uses_uma_of_termination_year():
    at = _app()
    at.sidebar.selectbox[0].set_value(2022).run()
    at.date_input(key="fin_fecha_baja").set_value(date(2024, 6, 20))
    at.selectbox(key="fin_tipo").select_index(2)
    at.button(key="calc_finiquito").click().run()
    assert not at.exception
    assert not at.error

    tabla = at.dataframe[0].value
    antiguedad = tabla[tabla["Concepto"].str.startswith("Prima de Antigüedad")]
    assert antiguedad["Cuota Diaria"].iloc[0] == pytest.approx(217.14)
