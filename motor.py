# -*- coding: utf-8 -*-
"""
==============================================================================
=== MOTOR DE CÁLCULO DE PRESTACIONES (LEY FEDERAL DEL TRABAJO, MÉXICO) ===
==============================================================================

Este archivo contiene toda la lógica pura de Python para aguinaldo,
vacaciones y prima vacacional, PTU y finiquito / liquidación.
No debe contener NINGUNA importación o código de Streamlit (st.).

- Todas las funciones son puras: reciben dataclasses y devuelven dataclasses.
- Los montos se manejan con Decimal y se redondean a centavos en cada concepto.
- Los valores que cambian cada año (UMA, tabla de vacaciones) se reciben
  como parámetros; las constantes de este módulo son sólo los valores por defecto.
"""

# --- 0. IMPORTACIONES NECESARIAS ---
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union

from dateutil.relativedelta import relativedelta

from errores import (
    InvalidAmountError,
    InvalidInputError,
    InvalidDivisorError,
    InvalidRangeError,
    MissingRequiredInputError,
)

logger = logging.getLogger(__name__)

Numero = Union[Decimal, int, float, str]

# --- 1. CONSTANTES LEGALES ---

# Art. 87 LFT
DIAS_AGUINALDO = 15
# Art. 80 LFT
PRIMA_VACACIONAL = Decimal("0.25")
# Art. 93 fr. XIV LISR (aguinaldo: 30 UMA; prima vacacional y PTU: 15 UMA)
UMAS_EXENTAS_AGUINALDO = 30
UMAS_EXENTAS_PRIMA_VACACIONAL = 15
UMAS_EXENTAS_PTU = 15
# Arts. 162, 485 y 486 LFT (tope de salario para la prima de antigüedad)
UMAS_TOPE_PRIMA_ANTIGUEDAD = 2
# Art. 162 fr. I y III LFT
DIAS_PRIMA_ANTIGUEDAD_POR_ANIO = 12
ANIOS_PRIMA_ANTIGUEDAD_SIN_DESPIDO = 15
# Arts. 48 y 50 LFT
DIAS_INDEMNIZACION_CONSTITUCIONAL = 90
DIAS_POR_ANIO_INDEMNIZACION = 20
# Art. 123 LFT: la PTU se reparte mitad por días y mitad por salarios
PROPORCION_PTU_DIAS = Decimal("0.5")
PROPORCION_PTU_SALARIOS = Decimal("0.5")

DIAS_ANIO = 365
MESES_ANIO = 12
CENTAVO = Decimal("0.01")
CERO = Decimal("0")

# UMA diaria publicada por el INEGI (vigente del 1 de febrero de cada año)
UMA_DIARIA: Dict[int, Decimal] = {
    2022: Decimal("96.22"),
    2023: Decimal("103.74"),
    2024: Decimal("108.57"),
    2025: Decimal("113.14"),
}


def _a_decimal(valor: Numero) -> Decimal:
    """Convierte a Decimal pasando por str para no arrastrar errores de float."""
    if isinstance(valor, Decimal):
        return valor
    return Decimal(str(valor))


def _centavos(monto: Decimal) -> Decimal:
    return monto.quantize(CENTAVO, rounding=ROUND_HALF_UP)


# ==============================================================================
# --- 2. CLASES DE DATOS (DATACLASSES) ---
# ==============================================================================

@dataclass(frozen=True)
class StatutoryConstants:
    """Parámetros legales de un año de cálculo. Inmutable."""
    year: int
    daily_reference_unit_value: Decimal
    minimum_annual_bonus_days: int = DIAS_AGUINALDO
    vacation_premium_rate: Decimal = PRIMA_VACACIONAL
    aguinaldo_exemption_units: int = UMAS_EXENTAS_AGUINALDO
    vacation_premium_exemption_units: int = UMAS_EXENTAS_PRIMA_VACACIONAL
    seniority_premium_rate_cap_units: int = UMAS_TOPE_PRIMA_ANTIGUEDAD
    ptu_exemption_units: int = UMAS_EXENTAS_PTU

    def __post_init__(self):
        object.__setattr__(self, "daily_reference_unit_value", _a_decimal(self.daily_reference_unit_value))
        object.__setattr__(self, "vacation_premium_rate", _a_decimal(self.vacation_premium_rate))

        if self.daily_reference_unit_value <= 0:
            raise InvalidAmountError("daily_reference_unit_value", self.daily_reference_unit_value)
        if not (CERO <= self.vacation_premium_rate <= 1):
            raise InvalidAmountError("vacation_premium_rate", self.vacation_premium_rate)
        for nombre in (
            "minimum_annual_bonus_days",
            "aguinaldo_exemption_units",
            "vacation_premium_exemption_units",
            "seniority_premium_rate_cap_units",
            "ptu_exemption_units",
        ):
            valor = getattr(self, nombre)
            if not isinstance(valor, int) or valor <= 0:
                raise InvalidAmountError(nombre, valor)


@dataclass(frozen=True)
class VacationBreakpoint:
    """Un renglón de la tabla de vacaciones: a partir de N años, D días."""
    minimum_years_of_service: int
    vacation_days: int


@dataclass(frozen=True)
class EmploymentPeriod:
    """Datos de la relación laboral. Se reciben nuevos en cada cálculo."""
    hire_date: Optional[date]
    daily_salary: Optional[Decimal]
    reference_year: int
    termination_date: Optional[date] = None

    def __post_init__(self):
        if self.daily_salary is not None:
            object.__setattr__(self, "daily_salary", _a_decimal(self.daily_salary))


class TerminationClassification(Enum):
    """Causa de la terminación de la relación laboral."""
    VOLUNTARY = "voluntary"
    JUSTIFIED_DISMISSAL = "justified"
    UNJUSTIFIED_DISMISSAL = "unjustified"

    @property
    def label(self) -> str:
        return _ETIQUETAS_BAJA[self]

    @property
    def is_unjustified(self) -> bool:
        return self is TerminationClassification.UNJUSTIFIED_DISMISSAL


_ETIQUETAS_BAJA = {
    TerminationClassification.VOLUNTARY: "Renuncia Voluntaria",
    TerminationClassification.JUSTIFIED_DISMISSAL: "Despido Justificado",
    TerminationClassification.UNJUSTIFIED_DISMISSAL: "Despido Injustificado",
}


@dataclass(frozen=True)
class BenefitLineItem:
    """
    Un concepto del resultado.
    Invariantes: exento <= importe; gravado = importe - exento, nunca negativo.
    """
    concept: str
    days: Decimal
    daily_rate: Decimal
    gross_amount: Decimal
    exempt_amount: Decimal = CERO
    taxable_amount: Optional[Decimal] = None
    is_deduction: bool = False

    def __post_init__(self):
        for campo in ("days", "daily_rate", "gross_amount", "exempt_amount"):
            object.__setattr__(self, campo, _a_decimal(getattr(self, campo)))
        if self.taxable_amount is None:
            object.__setattr__(self, "taxable_amount", self.gross_amount - self.exempt_amount)
        else:
            object.__setattr__(self, "taxable_amount", _a_decimal(self.taxable_amount))

        if self.gross_amount < 0:
            raise InvalidAmountError("gross_amount", self.gross_amount)
        if self.exempt_amount < 0 or self.exempt_amount > self.gross_amount:
            raise InvalidAmountError("exempt_amount", self.exempt_amount)
        if self.taxable_amount != self.gross_amount - self.exempt_amount:
            raise InvalidAmountError("taxable_amount", self.taxable_amount)

    @property
    def signed_amount(self) -> Decimal:
        return -self.gross_amount if self.is_deduction else self.gross_amount


@dataclass(frozen=True)
class SettlementResult:
    """Secuencia ordenada de conceptos. Las deducciones restan del total."""
    items: Tuple[BenefitLineItem, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def __iter__(self) -> Iterator[BenefitLineItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def total(self) -> Decimal:
        return sum((item.signed_amount for item in self.items), CERO)

    @property
    def total_exempt(self) -> Decimal:
        return sum((-i.exempt_amount if i.is_deduction else i.exempt_amount for i in self.items), CERO)

    @property
    def total_taxable(self) -> Decimal:
        return sum((-i.taxable_amount if i.is_deduction else i.taxable_amount for i in self.items), CERO)

    @property
    def concepts(self) -> List[str]:
        return [item.concept for item in self.items]


@dataclass(frozen=True)
class PTUAllocation:
    """Participación de un trabajador en la PTU."""
    days_factor: Decimal
    salary_factor: Decimal
    total: Decimal


class ExemptionSplit(NamedTuple):
    exempt_amount: Decimal
    taxable_amount: Decimal


# Reforma 2023 "Vacaciones Dignas" (Art. 76 LFT)
TABLA_VACACIONES: Tuple[VacationBreakpoint, ...] = (
    VacationBreakpoint(1, 12),
    VacationBreakpoint(2, 14),
    VacationBreakpoint(3, 16),
    VacationBreakpoint(4, 18),
    VacationBreakpoint(5, 20),
    VacationBreakpoint(6, 22),
    VacationBreakpoint(11, 24),
    VacationBreakpoint(16, 26),
    VacationBreakpoint(21, 28),
    VacationBreakpoint(26, 30),
    VacationBreakpoint(31, 32),
)


def constants_for_year(year: int, uma: Optional[Numero] = None) -> StatutoryConstants:
    """
    Arma las constantes legales de un año.
    Si no se indica la UMA se toma de UMA_DIARIA; un año sin UMA registrada
    exige que el llamador la proporcione.
    """
    if uma is None:
        if year not in UMA_DIARIA:
            logger.warning("No hay UMA registrada para el año %s", year)
            raise MissingRequiredInputError(
                "daily_reference_unit_value", f"no hay UMA registrada para {year}"
            )
        uma = UMA_DIARIA[year]
    return StatutoryConstants(year=year, daily_reference_unit_value=uma)


# ==============================================================================
# --- 3. COMPONENTES DE CÁLCULO ---
# ==============================================================================

def prorate(
    annual_entitlement: Numero,
    period_start: date,
    period_end: date,
    year_length: Numero = DIAS_ANIO
) -> Decimal:
    """
    Proporción de un derecho anual según los días laborados en el periodo.
    Los días se cuentan incluyendo el primero y el último (el primer día
    laborado cuenta). Las fechas ya deben venir recortadas por el llamador.
    """
    if period_end < period_start:
        logger.warning("Periodo inválido para prorrateo: %s -> %s", period_start, period_end)
        raise InvalidRangeError(period_start, period_end)
    largo_anio = _a_decimal(year_length)
    if largo_anio <= 0:
        raise InvalidDivisorError("year_length", largo_anio)

    dias_laborados = (period_end - period_start).days + 1
    return _a_decimal(annual_entitlement) * Decimal(dias_laborados) / largo_anio


def split_exemption(
    gross_amount: Numero,
    exemption_units: Numero,
    reference_unit_value: Numero
) -> ExemptionSplit:
    """
    Separa la parte exenta y la gravada de una prestación.
    Base Legal: Art. 93 LISR; el tope se expresa en UMAs.
    """
    bruto = _a_decimal(gross_amount)
    if bruto < 0:
        raise InvalidAmountError("gross_amount", bruto)
    unidades = _a_decimal(exemption_units)
    uma = _a_decimal(reference_unit_value)
    if unidades < 0:
        raise InvalidAmountError("exemption_units", unidades)
    if uma < 0:
        raise InvalidAmountError("reference_unit_value", uma)

    tope_exento = unidades * uma
    exento = min(bruto, tope_exento)
    gravado = max(CERO, bruto - exento)
    return ExemptionSplit(exento, gravado)


def years_of_service(start: date, end: date) -> int:
    """Años completos entre dos fechas (se trunca, no se redondea)."""
    if end < start:
        logger.warning("Fecha de corte %s anterior al ingreso %s", end, start)
        raise InvalidRangeError(start, end, "la fecha de corte es anterior a la de ingreso")
    return relativedelta(end, start).years


def validate_vacation_table(table: Iterable[VacationBreakpoint]) -> Tuple[VacationBreakpoint, ...]:
    """Exige una tabla ascendente en años y no decreciente en días."""
    tabla = tuple(table)
    if not tabla:
        raise MissingRequiredInputError("vacation_table", "la tabla de vacaciones está vacía")

    for anterior, siguiente in zip(tabla, tabla[1:]):
        if siguiente.minimum_years_of_service <= anterior.minimum_years_of_service:
            raise InvalidRangeError(
                anterior.minimum_years_of_service,
                siguiente.minimum_years_of_service,
                "los años de la tabla de vacaciones no son ascendentes",
            )
        if siguiente.vacation_days < anterior.vacation_days:
            raise InvalidRangeError(
                anterior.vacation_days,
                siguiente.vacation_days,
                "los días de vacaciones disminuyen al aumentar la antigüedad",
            )
    return tabla


def resolve_vacation_days(
    years_of_service: int,
    table: Iterable[VacationBreakpoint] = TABLA_VACACIONES
) -> int:
    """
    Días de vacaciones que corresponden a los años cumplidos.
    Base Legal: Art. 76 LFT. Con menos de un año se usa el primer tramo.
    """
    tabla = validate_vacation_table(table)

    dias = tabla[0].vacation_days
    for tramo in tabla:
        if tramo.minimum_years_of_service > years_of_service:
            break
        dias = tramo.vacation_days
    return dias


def allocate_ptu(
    pool: Numero,
    employee_days_worked: Numero,
    company_total_days: Numero,
    employee_annual_salary: Numero,
    company_total_salaries: Numero
) -> PTUAllocation:
    """
    Reparte la PTU de un trabajador: 50% por días laborados, 50% por salarios.
    Base Legal: Art. 123 LFT.
    El tope de 3 meses de salario (o el promedio de los últimos 3 años)
    lo debe aplicar el llamador.
    """
    reparto = _a_decimal(pool)
    dias = _a_decimal(employee_days_worked)
    total_dias = _a_decimal(company_total_days)
    salario = _a_decimal(employee_annual_salary)
    total_salarios = _a_decimal(company_total_salaries)

    if total_dias <= 0:
        logger.warning("Total de días de la empresa inválido: %s", total_dias)
        raise InvalidDivisorError("company_total_days", total_dias)
    if total_salarios <= 0:
        logger.warning("Total de salarios de la empresa inválido: %s", total_salarios)
        raise InvalidDivisorError("company_total_salaries", total_salarios)
    for nombre, valor in (("pool", reparto), ("employee_days_worked", dias), ("employee_annual_salary", salario)):
        if valor < 0:
            raise InvalidAmountError(nombre, valor)

    porcion_dias = reparto * PROPORCION_PTU_DIAS
    porcion_salarios = reparto * PROPORCION_PTU_SALARIOS

    factor_dias = (dias / total_dias) * porcion_dias
    factor_salarios = (salario / total_salarios) * porcion_salarios
    logger.debug("PTU: factor días=%s, factor salarios=%s", factor_dias, factor_salarios)

    return PTUAllocation(factor_dias, factor_salarios, factor_dias + factor_salarios)


# ==============================================================================
# --- 4. FUNCIONES AUXILIARES ---
# ==============================================================================

def _validar_periodo(
    period: EmploymentPeriod,
    constants: StatutoryConstants,
    requiere_baja: bool = False
) -> None:
    """Validaciones de frontera; se ejecutan antes de producir cualquier concepto."""
    if constants.year != period.reference_year:
        logger.warning("Constantes de %s para un periodo de %s", constants.year, period.reference_year)
        raise InvalidInputError(
            "constants.year", constants.year, f"la UMA debe ser la del año {period.reference_year}"
        )
    if period.hire_date is None:
        logger.warning("Cálculo solicitado sin fecha de ingreso")
        raise MissingRequiredInputError("hire_date", "ingrese la fecha de contratación")
    if period.daily_salary is None:
        raise MissingRequiredInputError("daily_salary", "ingrese el salario diario")
    if period.daily_salary < 0:
        logger.warning("Salario diario negativo: %s", period.daily_salary)
        raise InvalidAmountError("daily_salary", period.daily_salary)
    if period.daily_salary == 0:
        raise MissingRequiredInputError("daily_salary", "el salario diario debe ser mayor a cero")
    if requiere_baja and period.termination_date is None:
        raise MissingRequiredInputError("termination_date", "ingrese la fecha de terminación")
    if period.termination_date is not None and period.termination_date < period.hire_date:
        logger.warning("Baja %s anterior al ingreso %s", period.termination_date, period.hire_date)
        raise InvalidRangeError(
            period.hire_date, period.termination_date, "la fecha de baja es anterior a la de ingreso"
        )


def _linea(
    concept: str,
    days: Decimal,
    daily_rate: Decimal,
    gross: Decimal,
    exempt: Decimal = CERO
) -> BenefitLineItem:
    bruto = _centavos(gross)
    exento = min(_centavos(exempt), bruto)
    return BenefitLineItem(concept, days, daily_rate, bruto, exento, bruto - exento)


def _linea_con_exencion(
    concept: str,
    days: Decimal,
    daily_rate: Decimal,
    gross: Decimal,
    exemption_units: int,
    constants: StatutoryConstants
) -> BenefitLineItem:
    bruto = _centavos(gross)
    exento, _ = split_exemption(bruto, exemption_units, constants.daily_reference_unit_value)
    return _linea(concept, days, daily_rate, bruto, exento)


def _porcentaje(tasa: Decimal) -> str:
    return f"{tasa * 100:.0f}%"


# ==============================================================================
# --- 5. FUNCIONES PRINCIPALES Y DE ORQUESTACIÓN ---
# ==============================================================================

def calculate_aguinaldo(period: EmploymentPeriod, constants: StatutoryConstants) -> SettlementResult:
    """
    Aguinaldo del año de referencia, proporcional a los días laborados.
    Base Legal: Art. 87 LFT (mínimo 15 días); exento hasta 30 UMA.
    """
    _validar_periodo(period, constants)

    inicio_anio = date(period.reference_year, 1, 1)
    fin_anio = date(period.reference_year, 12, 31)
    inicio = max(period.hire_date, inicio_anio)
    fin = fin_anio
    if period.termination_date is not None:
        fin = min(period.termination_date, fin_anio)

    dias = prorate(constants.minimum_annual_bonus_days, inicio, fin)
    logger.debug("Aguinaldo %s: %s días (%s -> %s)", period.reference_year, dias, inicio, fin)

    linea = _linea_con_exencion(
        "Aguinaldo",
        dias,
        period.daily_salary,
        dias * period.daily_salary,
        constants.aguinaldo_exemption_units,
        constants,
    )
    return SettlementResult((linea,))


def calculate_vacation(
    period: EmploymentPeriod,
    constants: StatutoryConstants,
    vacation_table: Iterable[VacationBreakpoint] = TABLA_VACACIONES,
    reference_date: Optional[date] = None
) -> SettlementResult:
    """
    Vacaciones del periodo en curso y su prima vacacional.
    Base Legal: Arts. 76 y 80 LFT; la prima está exenta hasta 15 UMA.
    La antigüedad se mide a la fecha de baja, o a `reference_date`, o a hoy.
    """
    _validar_periodo(period, constants)

    corte = period.termination_date or reference_date or date.today()
    anios = years_of_service(period.hire_date, corte)
    dias = Decimal(resolve_vacation_days(anios, vacation_table))
    logger.debug("Vacaciones: %s años de servicio al %s -> %s días", anios, corte, dias)

    salario = period.daily_salary
    tasa = constants.vacation_premium_rate
    pago_vacaciones = dias * salario

    return SettlementResult((
        _linea("Días de Vacaciones", dias, salario, pago_vacaciones),
        _linea_con_exencion(
            f"Prima Vacacional ({_porcentaje(tasa)})",
            dias,
            salario * tasa,
            pago_vacaciones * tasa,
            constants.vacation_premium_exemption_units,
            constants,
        ),
    ))


def calculate_ptu(
    pool: Numero,
    employee_days_worked: Numero,
    company_total_days: Numero,
    employee_annual_salary: Numero,
    company_total_salaries: Numero,
    constants: Optional[StatutoryConstants] = None
) -> SettlementResult:
    """
    PTU de un trabajador en dos conceptos (factor días y factor salarios).
    Con `constants`, la exención de 15 UMA se aplica primero al factor días.
    """
    reparto = allocate_ptu(
        pool, employee_days_worked, company_total_days, employee_annual_salary, company_total_salaries
    )
    dias = _a_decimal(employee_days_worked)
    cuota_por_dia = _a_decimal(pool) * PROPORCION_PTU_DIAS / _a_decimal(company_total_days)

    bruto_dias = _centavos(reparto.days_factor)
    bruto_salarios = _centavos(reparto.salary_factor)
    exento_dias = exento_salarios = CERO
    if constants is not None:
        exento_total, _ = split_exemption(
            bruto_dias + bruto_salarios, constants.ptu_exemption_units, constants.daily_reference_unit_value
        )
        exento_dias = min(bruto_dias, exento_total)
        exento_salarios = exento_total - exento_dias

    return SettlementResult((
        _linea(f"PTU Factor Días ({_porcentaje(PROPORCION_PTU_DIAS)})", dias, cuota_por_dia, bruto_dias, exento_dias),
        _linea(f"PTU Factor Salarios ({_porcentaje(PROPORCION_PTU_SALARIOS)})", CERO, CERO, bruto_salarios, exento_salarios),
    ))


def compose_settlement(
    period: EmploymentPeriod,
    classification: TerminationClassification,
    constants: StatutoryConstants,
    vacation_table: Iterable[VacationBreakpoint] = TABLA_VACACIONES
) -> SettlementResult:
    """
    Finiquito (toda terminación) y liquidación (despido injustificado).

    1. Aguinaldo proporcional por meses del año de la baja.
    2. Vacaciones proporcionales del tramo que se estaba acumulando (años + 1).
    3. Prima vacacional sobre el importe de 2.
    4. Salario pendiente: días del mes de la baja.
    5. Prima de antigüedad con 15 años o más, o por despido injustificado
       (Art. 162 LFT), con cuota diaria topada a 2 UMA.
    6. Sólo despido injustificado: indemnización constitucional de 3 meses
       y 20 días por año de servicio (Arts. 48 y 50 LFT).
    """
    _validar_periodo(period, constants, requiere_baja=True)
    try:
        classification = TerminationClassification(classification)
    except ValueError:
        logger.warning("Tipo de terminación desconocido: %r", classification)
        raise InvalidInputError("classification", classification, "tipo de terminación desconocido") from None

    baja = period.termination_date
    salario = period.daily_salary
    anios = years_of_service(period.hire_date, baja)
    mes_baja = Decimal(baja.month)
    logger.debug("Finiquito: %s años de servicio, baja en el mes %s", anios, baja.month)

    conceptos: List[BenefitLineItem] = []

    # 1. Aguinaldo proporcional
    dias_aguinaldo = Decimal(constants.minimum_annual_bonus_days) * mes_baja / MESES_ANIO
    conceptos.append(_linea_con_exencion(
        f"Aguinaldo Proporcional ({dias_aguinaldo:.2f} días)",
        dias_aguinaldo,
        salario,
        dias_aguinaldo * salario,
        constants.aguinaldo_exemption_units,
        constants,
    ))

    # 2. Vacaciones proporcionales
    dias_tramo = resolve_vacation_days(anios + 1, vacation_table)
    dias_vacaciones = Decimal(dias_tramo) * mes_baja / MESES_ANIO
    importe_vacaciones = dias_vacaciones * salario
    conceptos.append(_linea(
        f"Vacaciones Proporcionales ({dias_vacaciones:.2f} días)",
        dias_vacaciones,
        salario,
        importe_vacaciones,
    ))

    # 3. Prima vacacional
    tasa = constants.vacation_premium_rate
    conceptos.append(_linea_con_exencion(
        f"Prima Vacacional ({_porcentaje(tasa)})",
        dias_vacaciones,
        salario * tasa,
        importe_vacaciones * tasa,
        constants.vacation_premium_exemption_units,
        constants,
    ))

    # 4. Salario pendiente
    dias_pendientes = Decimal(baja.day)
    conceptos.append(_linea(
        f"Salario Pendiente ({baja.day} días)",
        dias_pendientes,
        salario,
        dias_pendientes * salario,
    ))

    # 5. Prima de antigüedad
    if anios >= ANIOS_PRIMA_ANTIGUEDAD_SIN_DESPIDO or classification.is_unjustified:
        dias_antiguedad = Decimal(anios * DIAS_PRIMA_ANTIGUEDAD_POR_ANIO)
        tope = constants.seniority_premium_rate_cap_units * constants.daily_reference_unit_value
        cuota_antiguedad = min(salario, tope)
        conceptos.append(_linea(
            f"Prima de Antigüedad ({dias_antiguedad} días)",
            dias_antiguedad,
            cuota_antiguedad,
            dias_antiguedad * cuota_antiguedad,
        ))

    # 6. Indemnización (despido injustificado)
    if classification.is_unjustified:
        dias_constitucional = Decimal(DIAS_INDEMNIZACION_CONSTITUCIONAL)
        conceptos.append(_linea(
            "Indemnización Constitucional (3 meses)",
            dias_constitucional,
            salario,
            dias_constitucional * salario,
        ))
        dias_por_anio = Decimal(anios * DIAS_POR_ANIO_INDEMNIZACION)
        conceptos.append(_linea(
            f"20 días por año ({anios} años)",
            dias_por_anio,
            salario,
            dias_por_anio * salario,
        ))

    resultado = SettlementResult(tuple(conceptos))
    logger.info(
        "Finiquito calculado (%s): %s conceptos, total %s",
        classification.label, len(resultado), resultado.total,
    )
    return resultado
