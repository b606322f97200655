from __future__ import annotations

import json
from decimal import Decimal

import pytest

from motor import BenefitLineItem, SettlementResult, TerminationClassification, compose_settlement, constants_for_year
from reportes import COLUMNAS, ETIQUETA_TOTAL, format_mxn, line_items_frame, result_summary
from tests.fixtures.casos import CASO_CINCO_ANIOS


@pytest.fixture
def finiquito():
    return compose_settlement(CASO_CINCO_ANIOS, TerminationClassification.VOLUNTARY, constants_for_year(2024))


@pytest.mark.parametrize(
    "monto, esperado",
    [
        (Decimal("1234.5"), "$1,234.50"),
        (Decimal("0"), "$0.00"),
        (Decimal("-1000"), "-$1,000.00"),
        (Decimal("0.005"), "$0.01"),
        (128653.4, "$128,653.40"),
    ],
)
def test_format_mxn(monto, esperado):
    assert format_mxn(monto) == esperado


def test_line_items_frame_has_one_row_per_concept_plus_total(finiquito):
    tabla = line_items_frame(finiquito)

    assert list(tabla.columns) == COLUMNAS
    assert len(tabla) == len(finiquito) + 1
    assert tabla["Concepto"].iloc[-1] == ETIQUETA_TOTAL
    assert tabla["Importe"].iloc[-1] == pytest.approx(20625.00)
    assert tabla["Importe"].iloc[:-1].sum() == pytest.approx(20625.00)


def test_line_items_frame_without_total(finiquito):
    tabla = line_items_frame(finiquito, with_total=False)
    assert list(tabla["Concepto"]) == finiquito.concepts


def test_line_items_frame_negates_deductions():
    resultado = SettlementResult((
        BenefitLineItem("Salario Pendiente", 10, 100, 1000),
        BenefitLineItem("Préstamo", 0, 0, 300, is_deduction=True),
    ))
    tabla = line_items_frame(resultado)

    assert tabla["Importe"].tolist() == [1000.0, -300.0, 700.0]
    assert tabla["Deducción"].tolist() == [False, True, False]


def test_result_summary_is_json_serializable(finiquito):
    resumen = result_summary(finiquito)

    assert resumen["total"] == "20625.00"
    assert resumen["moneda"] == "MXN"
    assert len(resumen["conceptos"]) == 4
    assert resumen["conceptos"][0]["exento"] == "3257.10"
    json.dumps(resumen)
