# -*- coding: utf-8 -*-
"""
Presentación de resultados del motor: tablas de pandas y montos en pesos.
Sin Streamlit; main.py decide cómo mostrarlos.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict

import pandas as pd

from motor import CENTAVO, SettlementResult

COLUMNAS = ["Concepto", "Días", "Cuota Diaria", "Importe", "Exento", "Gravado", "Deducción"]
ETIQUETA_TOTAL = "Total a Pagar"


def format_mxn(amount) -> str:
    """Formatea un monto en pesos mexicanos: $12,345.67 / -$1,000.00"""
    monto = Decimal(str(amount)).quantize(CENTAVO, rounding=ROUND_HALF_UP)
    signo = "-" if monto < 0 else ""
    return f"{signo}${abs(monto):,.2f}"


def line_items_frame(result: SettlementResult, with_total: bool = True) -> pd.DataFrame:
    """
    Convierte un resultado en un DataFrame, un renglón por concepto.
    Las deducciones aparecen con importe negativo. Con `with_total` se
    agrega un renglón final con los totales.
    """
    filas = []
    for item in result:
        signo = -1 if item.is_deduction else 1
        filas.append({
            "Concepto": item.concept,
            "Días": round(float(item.days), 2),
            "Cuota Diaria": float(item.daily_rate),
            "Importe": signo * float(item.gross_amount),
            "Exento": signo * float(item.exempt_amount),
            "Gravado": signo * float(item.taxable_amount),
            "Deducción": item.is_deduction,
        })

    if with_total:
        filas.append({
            "Concepto": ETIQUETA_TOTAL,
            "Días": None,
            "Cuota Diaria": None,
            "Importe": float(result.total),
            "Exento": float(result.total_exempt),
            "Gravado": float(result.total_taxable),
            "Deducción": False,
        })

    return pd.DataFrame(filas, columns=COLUMNAS)


def result_summary(result: SettlementResult) -> Dict[str, Any]:
    """Diccionario serializable a JSON (montos como texto para no perder centavos)."""
    return {
        "conceptos": [
            {
                "concepto": item.concept,
                "dias": str(item.days),
                "cuota_diaria": str(item.daily_rate),
                "importe": str(item.gross_amount),
                "exento": str(item.exempt_amount),
                "gravado": str(item.taxable_amount),
                "deduccion": item.is_deduction,
            }
            for item in result
        ],
        "total": str(result.total),
        "total_exento": str(result.total_exempt),
        "total_gravado": str(result.total_taxable),
        "moneda": "MXN",
    }
