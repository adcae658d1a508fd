"""
Modelos de datos de dynaform.

Este módulo contiene los modelos Pydantic del esquema de formulario y de
la sesión de usuario.
"""

from dynaform.models.base import WireModel
from dynaform.models.schema import (
    FieldType,
    FieldOption,
    FieldValidation,
    FieldDefinition,
    FormSection,
    FormSchema,
    FormResponse,
    FieldValue,
    FormValues,
    FormErrors,
    SCALAR_TYPES,
    CHOICE_TYPES,
)
from dynaform.models.user import SessionUser, LoginResult

__all__ = [
    # Base
    "WireModel",
    # Esquema
    "FieldType",
    "FieldOption",
    "FieldValidation",
    "FieldDefinition",
    "FormSection",
    "FormSchema",
    "FormResponse",
    "SCALAR_TYPES",
    "CHOICE_TYPES",
    # Valores
    "FieldValue",
    "FormValues",
    "FormErrors",
    # Sesión
    "SessionUser",
    "LoginResult",
]
