from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from errores import InvalidAmountError, InvalidDivisorError, InvalidRangeError, MissingRequiredInputError
from motor import (
    TABLA_VACACIONES,
    UMA_DIARIA,
    StatutoryConstants,
    VacationBreakpoint,
    allocate_ptu,
    constants_for_year,
    prorate,
    resolve_vacation_days,
    split_exemption,
    validate_vacation_table,
    years_of_service,
)
from tests.fixtures.casos import PTU_EMPRESA


# --- Prorrateo ---

def test_prorate_full_year_gives_whole_entitlement():
    assert prorate(15, date(2023, 1, 1), date(2023, 12, 31)) == Decimal("15")


def test_prorate_counts_both_endpoints():
    assert prorate(365, date(2023, 5, 10), date(2023, 5, 10)) == Decimal("1")
    assert prorate(365, date(2023, 5, 10), date(2023, 5, 11)) == Decimal("2")


def test_prorate_uses_given_year_length():
    assert prorate(15, date(2024, 1, 1), date(2024, 12, 31), 366) == Decimal("15")


def test_prorate_rejects_reversed_period():
    with pytest.raises(InvalidRangeError) as exc:
        prorate(15, date(2023, 6, 1), date(2023, 5, 31))
    assert exc.value.code == "INVALID_RANGE"


# --- Exención ---

def test_split_exemption_over_ceiling():
    exento, gravado = split_exemption(Decimal("3750"), 30, Decimal("108.57"))
    assert exento == Decimal("3257.10")
    assert gravado == Decimal("492.90")


def test_split_exemption_under_ceiling_is_fully_exempt():
    split = split_exemption(Decimal("1000"), 30, Decimal("108.57"))
    assert split.exempt_amount == Decimal("1000")
    assert split.taxable_amount == Decimal("0")


@pytest.mark.parametrize("bruto", ["0", "0.01", "1628.55", "1628.56", "3257.10", "99999.99"])
def test_split_exemption_parts_add_up(bruto):
    exento, gravado = split_exemption(Decimal(bruto), 15, Decimal("108.57"))
    assert exento <= Decimal(bruto)
    assert gravado >= 0
    assert exento + gravado == Decimal(bruto)


def test_split_exemption_rejects_negative_gross():
    with pytest.raises(InvalidAmountError):
        split_exemption(Decimal("-1"), 30, Decimal("108.57"))


# --- Tabla de vacaciones ---

@pytest.mark.parametrize(
    "anios, dias",
    [(0, 12), (1, 12), (5, 20), (6, 22), (10, 22), (11, 24), (15, 24), (16, 26), (30, 30), (31, 32), (45, 32)],
)
def test_resolve_vacation_days(anios, dias):
    assert resolve_vacation_days(anios) == dias


def test_vacation_table_is_monotonic():
    for anterior, siguiente in zip(TABLA_VACACIONES, TABLA_VACACIONES[1:]):
        assert siguiente.minimum_years_of_service > anterior.minimum_years_of_service
        assert siguiente.vacation_days >= anterior.vacation_days


def test_resolve_vacation_days_with_custom_table():
    tabla = [VacationBreakpoint(1, 6), VacationBreakpoint(4, 12)]
    assert resolve_vacation_days(0, tabla) == 6
    assert resolve_vacation_days(3, tabla) == 6
    assert resolve_vacation_days(4, tabla) == 12


def test_validate_vacation_table_rejects_decreasing_days():
    with pytest.raises(InvalidRangeError):
        validate_vacation_table([VacationBreakpoint(1, 14), VacationBreakpoint(2, 12)])


def test_validate_vacation_table_rejects_unsorted_years():
    with pytest.raises(InvalidRangeError):
        validate_vacation_table([VacationBreakpoint(2, 12), VacationBreakpoint(1, 14)])


def test_validate_vacation_table_rejects_empty_table():
    with pytest.raises(MissingRequiredInputError):
        resolve_vacation_days(3, [])


def test_years_of_service_truncates():
    assert years_of_service(date(2019, 1, 15), date(2024, 1, 14)) == 4
    assert years_of_service(date(2019, 1, 15), date(2024, 1, 15)) == 5


# --- PTU ---

def test_allocate_ptu_scenario():
    reparto = allocate_ptu(**PTU_EMPRESA)
    assert reparto.days_factor == Decimal("2000")
    assert reparto.salary_factor == Decimal("2500")
    assert reparto.total == Decimal("4500")
    assert reparto.days_factor + reparto.salary_factor == reparto.total


def test_allocate_ptu_single_employee_takes_whole_pool():
    reparto = allocate_ptu(Decimal("987654.32"), 365, 365, Decimal("120000"), Decimal("120000"))
    assert reparto.total == Decimal("987654.32")


@pytest.mark.parametrize("campo", ["company_total_days", "company_total_salaries"])
@pytest.mark.parametrize("valor", [0, -1])
def test_allocate_ptu_rejects_non_positive_totals(campo, valor):
    datos = dict(PTU_EMPRESA, **{campo: valor})
    with pytest.raises(InvalidDivisorError) as exc:
        allocate_ptu(**datos)
    assert exc.value.field_name == campo
    assert exc.value.code == "INVALID_DIVISOR"


def test_allocate_ptu_rejects_negative_pool():
    with pytest.raises(InvalidAmountError):
        allocate_ptu(**dict(PTU_EMPRESA, pool=Decimal("-1")))


# --- Constantes ---

def test_constants_for_year_uses_uma_table():
    constantes = constants_for_year(2024)
    assert constantes.daily_reference_unit_value == UMA_DIARIA[2024] == Decimal("108.57")
    assert constantes.minimum_annual_bonus_days == 15
    assert constantes.vacation_premium_rate == Decimal("0.25")
    assert constantes.aguinaldo_exemption_units == 30
    assert constantes.vacation_premium_exemption_units == 15
    assert constantes.seniority_premium_rate_cap_units == 2


def test_constants_for_unknown_year_requires_uma():
    with pytest.raises(MissingRequiredInputError):
        constants_for_year(1999)
    assert constants_for_year(1999, uma="90.00").daily_reference_unit_value == Decimal("90.00")


def test_statutory_constants_reject_invalid_values():
    with pytest.raises(InvalidAmountError):
        StatutoryConstants(year=2024, daily_reference_unit_value="108.57", vacation_premium_rate="-0.1")
    with pytest.raises(InvalidAmountError):
        StatutoryConstants(year=2024, daily_reference_unit_value="108.57", aguinaldo_exemption_units=0)
    with pytest.raises(InvalidAmountError):
        StatutoryConstants(year=2024, daily_reference_unit_value="0")
