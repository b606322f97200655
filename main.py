# -*- coding: utf-8 -*-
"""
Calculadora de Prestaciones Mexicanas (App Streamlit)

Interfaz de usuario sobre motor.py: aguinaldo, vacaciones, PTU y
finiquito / liquidación conforme a la LFT. Toda la lógica de cálculo
vive en el motor; aquí sólo se capturan datos y se muestran resultados.

Ejecutar con:  streamlit run main.py
"""

# --- 0. IMPORTACIONES NECESARIAS ---
import logging
from datetime import date

import streamlit as st
from dateutil.relativedelta import relativedelta

from errores import BenefitsEngineError
from motor import (
    TABLA_VACACIONES,
    UMA_DIARIA,
    EmploymentPeriod,
    SettlementResult,
    TerminationClassification,
    calculate_aguinaldo,
    calculate_ptu,
    calculate_vacation,
    compose_settlement,
    constants_for_year,
)
from reportes import format_mxn, line_items_frame, result_summary

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("calculadora_prestaciones")


# ==============================================================================
# --- SECCIÓN DE HELPERS DE UI (FUNCIONES 'MOSTRAR_...') ---
# ==============================================================================

def mostrar_resultado_streamlit(titulo: str, resultado: SettlementResult, nota: str = None):
    """Muestra la tabla de conceptos, el total y el detalle JSON."""
    st.subheader(titulo)
    col1, col2, col3 = st.columns(3)
    col1.metric("Total", format_mxn(resultado.total))
    col2.metric("Exento", format_mxn(resultado.total_exempt))
    col3.metric("Gravado", format_mxn(resultado.total_taxable))

    st.dataframe(line_items_frame(resultado), hide_index=True)
    if nota:
        st.caption(nota)

    with st.expander("Ver Diccionario de Resultados (JSON)"):
        st.json(result_summary(resultado))


def mostrar_error_streamlit(error: BenefitsEngineError):
    logger.info("Validación rechazada (%s): %s", error.code, error)
    st.error(f"**Error:** {error}")


# ==============================================================================
# === INICIO DE LA APLICACIÓN STREAMLIT ===
# ==============================================================================

st.set_page_config(
    layout="wide",
    page_title="Calculadora de Prestaciones México",
    page_icon="🇲🇽"
)

st.title("Calculadora de Prestaciones Mexicanas")
st.info("Calcule aguinaldo, vacaciones, PTU y finiquito conforme a la LFT. Montos referenciales en MXN.")

# --- Datos comunes ---
hoy = date.today()
anios_disponibles = sorted(UMA_DIARIA)
anio_por_defecto = hoy.year if hoy.year in UMA_DIARIA else anios_disponibles[-1]
fecha_por_defecto = hoy if hoy.year in UMA_DIARIA else date(anio_por_defecto, 12, 31)

with st.sidebar:
    st.header("Datos del Empleado")
    in_salario_diario = st.number_input(
        "Salario Diario (MXN)", min_value=0.0, value=500.0, step=10.0,
        help="Salario diario base del trabajador."
    )
    in_fecha_ingreso = st.date_input(
        "Fecha de Contratación", value=hoy - relativedelta(years=5, months=3),
        help="Fecha de inicio de la relación laboral."
    )
    in_anio_calculo = st.selectbox(
        "Año de Cálculo", anios_disponibles, index=anios_disponibles.index(anio_por_defecto),
        help="Selecciona la UMA vigente y el año del aguinaldo."
    )
    constantes = constants_for_year(in_anio_calculo)
    st.caption(f"UMA diaria {in_anio_calculo}: {format_mxn(constantes.daily_reference_unit_value)}")

# --- Definición de Pestañas ---
tab_aguinaldo, tab_vacaciones, tab_ptu, tab_finiquito = st.tabs([
    "Aguinaldo",
    "Vacaciones",
    "PTU",
    "Finiquito",
])


# --- PESTAÑA 1: AGUINALDO ---
with tab_aguinaldo:
    st.header("Cálculo de Aguinaldo")
    st.caption("Mínimo 15 días de salario (Art. 87 LFT)")

    in_ag_con_baja = st.checkbox("¿El trabajador causó baja en el año?", value=False, key="ag_con_baja")
    in_ag_fecha_baja = None
    if in_ag_con_baja:
        in_ag_fecha_baja = st.date_input("Fecha de Baja", value=hoy, key="ag_fecha_baja")

    if st.button("Calcular Aguinaldo", type="primary", key="calc_aguinaldo"):
        try:
            periodo = EmploymentPeriod(
                hire_date=in_fecha_ingreso,
                daily_salary=in_salario_diario,
                reference_year=in_anio_calculo,
                termination_date=in_ag_fecha_baja,
            )
            resultado = calculate_aguinaldo(periodo, constantes)
        except BenefitsEngineError as e:
            mostrar_error_streamlit(e)
        else:
            mostrar_resultado_streamlit(
                "Resultado del Aguinaldo", resultado,
                nota=f"El aguinaldo exento es hasta {constantes.aguinaldo_exemption_units} UMAs "
                     f"({format_mxn(constantes.aguinaldo_exemption_units * constantes.daily_reference_unit_value)}). "
                     "El excedente se considera ingreso gravable para ISR."
            )


# --- PESTAÑA 2: VACACIONES ---
with tab_vacaciones:
    st.header("Cálculo de Vacaciones y Prima Vacacional")
    st.caption("Conforme a reforma 2023 (Art. 76 y 80 LFT)")

    with st.expander("Tabla de Días de Vacaciones (Reforma 2023)"):
        st.table({
            "A partir de (años)": [t.minimum_years_of_service for t in TABLA_VACACIONES],
            "Días": [t.vacation_days for t in TABLA_VACACIONES],
        })

    in_vac_fecha_corte = st.date_input("Fecha de Corte", value=hoy, key="vac_fecha_corte",
                                       help="La antigüedad se mide a esta fecha.")

    if st.button("Calcular Vacaciones", type="primary", key="calc_vacaciones"):
        try:
            periodo = EmploymentPeriod(
                hire_date=in_fecha_ingreso,
                daily_salary=in_salario_diario,
                reference_year=in_anio_calculo,
            )
            resultado = calculate_vacation(periodo, constantes, TABLA_VACACIONES, reference_date=in_vac_fecha_corte)
        except BenefitsEngineError as e:
            mostrar_error_streamlit(e)
        else:
            mostrar_resultado_streamlit("Resultado de Vacaciones", resultado)


# --- PESTAÑA 3: PTU ---
with tab_ptu:
    st.header("Participación de los Trabajadores en las Utilidades")
    st.caption("10% de utilidades (Art. 117-131 LFT)")

    col1, col2 = st.columns(2)
    with col1:
        in_ptu_monto = st.number_input("Monto Total de PTU a Repartir (MXN)", min_value=0.0, value=1000000.0, step=1000.0)
        in_ptu_dias = st.number_input("Días Trabajados por el Empleado", min_value=0, value=365, step=1)
        in_ptu_salario = st.number_input("Salario Anual del Empleado (MXN)", min_value=0.0, value=182500.0, step=1000.0)
    with col2:
        in_ptu_total_dias = st.number_input("Total Días Trabajados (Empresa)", min_value=0, value=36500, step=1)
        in_ptu_total_salarios = st.number_input("Total Salarios Anuales (Empresa)", min_value=0.0, value=18250000.0, step=1000.0)

    if st.button("Calcular PTU", type="primary", key="calc_ptu"):
        try:
            resultado = calculate_ptu(
                in_ptu_monto,
                in_ptu_dias,
                in_ptu_total_dias,
                in_ptu_salario,
                in_ptu_total_salarios,
                constants=constantes,
            )
        except BenefitsEngineError as e:
            mostrar_error_streamlit(e)
        else:
            mostrar_resultado_streamlit(
                "Resultado PTU", resultado,
                nota="El PTU tiene un tope de 3 meses de salario o el promedio de los últimos 3 años, "
                     "lo que resulte más favorable al trabajador (reforma 2021). Este tope no se aplica aquí."
            )


# --- PESTAÑA 4: FINIQUITO / LIQUIDACIÓN ---
with tab_finiquito:
    st.header("Cálculo de Finiquito / Liquidación")
    st.caption("Prestaciones por terminación laboral")

    col1, col2 = st.columns(2)
    with col1:
        in_fin_fecha_baja = st.date_input(
            "Fecha de Terminación", value=fecha_por_defecto, key="fin_fecha_baja",
            help="La UMA aplicada es la del año de la terminación."
        )
    with col2:
        in_fin_tipo = st.selectbox(
            "Tipo de Terminación",
            list(TerminationClassification),
            format_func=lambda c: c.label,
            key="fin_tipo",
            help="El despido injustificado agrega 3 meses de indemnización y 20 días por año (Arts. 48 y 50 LFT)."
        )

    if st.button("Calcular Finiquito", type="primary", key="calc_finiquito"):
        try:
            periodo = EmploymentPeriod(
                hire_date=in_fecha_ingreso,
                daily_salary=in_salario_diario,
                reference_year=in_fin_fecha_baja.year,
                termination_date=in_fin_fecha_baja,
            )
            constantes_baja = constants_for_year(in_fin_fecha_baja.year)
            resultado = compose_settlement(periodo, in_fin_tipo, constantes_baja, TABLA_VACACIONES)
        except BenefitsEngineError as e:
            mostrar_error_streamlit(e)
        else:
            st.info(f"**Cálculo para:** {in_fin_tipo.label} | **Ingreso:** {in_fecha_ingreso} | **Baja:** {in_fin_fecha_baja}")
            mostrar_resultado_streamlit("Resultado del Finiquito", resultado)
