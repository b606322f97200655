# -*- coding: utf-8 -*-
"""
Excepciones tipadas del motor de prestaciones.

Cada error lleva un atributo `code` legible por máquina y conserva los
valores que lo provocaron, para que la aplicación que hospeda el motor
pueda mostrar un mensaje de validación sin parsear el texto.

    BenefitsEngineError
    +-- InvalidRangeError
    +-- InvalidAmountError
    +-- InvalidDivisorError
    +-- MissingRequiredInputError
    +-- InvalidInputError
"""

from __future__ import annotations

from typing import Any


class BenefitsEngineError(Exception):
    """Base de todos los errores del motor."""

    code: str = "BENEFITS_ENGINE_ERROR"


class InvalidRangeError(BenefitsEngineError):
    """Un periodo termina antes de empezar (o la tabla de vacaciones no es ascendente)."""

    code: str = "INVALID_RANGE"

    def __init__(self, start: Any, end: Any, reason: str = "el fin es anterior al inicio"):
        self.start = start
        self.end = end
        self.reason = reason
        super().__init__(f"Rango inválido ({start} -> {end}): {reason}")


class InvalidAmountError(BenefitsEngineError):
    """Monto negativo donde la LFT sólo admite montos no negativos."""

    code: str = "INVALID_AMOUNT"

    def __init__(self, field_name: str, value: Any):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Monto inválido para '{field_name}': {value}")


class InvalidDivisorError(BenefitsEngineError):
    """Total de la empresa en cero o negativo al repartir la PTU."""

    code: str = "INVALID_DIVISOR"

    def __init__(self, field_name: str, value: Any):
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"El total '{field_name}' debe ser mayor a cero para repartir la PTU (recibido: {value})"
        )


class MissingRequiredInputError(BenefitsEngineError):
    """Falta un dato obligatorio en la frontera de la llamada."""

    code: str = "MISSING_REQUIRED_INPUT"

    def __init__(self, field_name: str, detail: str = "dato requerido"):
        self.field_name = field_name
        self.detail = detail
        super().__init__(f"Falta '{field_name}': {detail}")


class InvalidInputError(BenefitsEngineError):
    """Un dato presente pero inaceptable (tipo de baja desconocido, año de UMA distinto)."""

    code: str = "INVALID_INPUT"

    def __init__(self, field_name: str, value: Any, reason: str):
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Valor inválido para '{field_name}' ({value!r}): {reason}")
