"""
Validación de valores de campos.

Reglas aplicadas en orden (la primera falla gana):
1. Requerido
2. Vacío y opcional -> válido
3. Longitud mínima/máxima (solo valores string)
4. Formato según tipo (email, tel)
"""

import re
from typing import Any, Mapping, Optional

from dynaform.models import FieldDefinition, FieldType, FormErrors, FormSection


REQUIRED_MESSAGE = "This field is required"
EMAIL_MESSAGE = "Please enter a valid email address"
TEL_MESSAGE = "Please enter a valid 10-digit phone number"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
TEL_PATTERN = re.compile(r"^\d{10}$", re.ASCII)


def min_length_message(n: int) -> str:
    return f"Minimum {n} characters required"


def max_length_message(n: int) -> str:
    return f"Maximum {n} characters allowed"


def is_empty_value(value: Any) -> bool:
    """
    Determina si un valor cuenta como vacío.

    Vacío: None, string vacío, lista vacía, o False (checkbox sin marcar).
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def validate_field(field: FieldDefinition, value: Any) -> Optional[str]:
    """
    Valida el valor de un campo.

    Returns:
        Mensaje de error, o None si el valor es válido
    """
    if is_empty_value(value):
        if field.required:
            return field.required_message or REQUIRED_MESSAGE
        return None

    if isinstance(value, str):
        if field.min_length is not None and len(value) < field.min_length:
            return min_length_message(field.min_length)
        if field.max_length is not None and len(value) > field.max_length:
            return max_length_message(field.max_length)

        # fullmatch: "$" aceptaría un salto de línea final
        if field.type == FieldType.EMAIL and not EMAIL_PATTERN.fullmatch(value):
            return EMAIL_MESSAGE
        if field.type == FieldType.TEL and not TEL_PATTERN.fullmatch(value):
            return TEL_MESSAGE

    return None


def validate_section(section: FormSection, values: Mapping[str, Any]) -> FormErrors:
    """
    Valida todos los campos de una sección.

    Retorna el mapeo completo de errores (no solo el primero), para
    mostrar todos los problemas a la vez. Sección válida <=> mapeo vacío.
    """
    errors: FormErrors = {}
    for fld in section.fields:
        message = validate_field(fld, values.get(fld.field_id))
        if message is not None:
            errors[fld.field_id] = message
    return errors
