"""
Motor de formularios definido por esquema.

El paquete está organizado en módulos:
- validation: Reglas de validación por campo y por sección
- store: Almacén de valores y errores (FormStore)
- navigation: Máquina de estados entre secciones (SectionNavigator)
- dispatch: Asociación tipo de campo -> control (build_control)
"""

from dynaform.core.validation import (
    REQUIRED_MESSAGE,
    EMAIL_MESSAGE,
    TEL_MESSAGE,
    is_empty_value,
    validate_field,
    validate_section,
    min_length_message,
    max_length_message,
)
from dynaform.core.store import FormStore, empty_value_for
from dynaform.core.navigation import NavResult, SectionNavigator, SubmissionSink
from dynaform.core.dispatch import (
    ControlKind,
    FieldControl,
    CONTROL_BY_TYPE,
    DEFAULT_PLACEHOLDER,
    build_control,
    control_kind,
    toggle_option,
)

__all__ = [
    # validation
    "REQUIRED_MESSAGE",
    "EMAIL_MESSAGE",
    "TEL_MESSAGE",
    "is_empty_value",
    "validate_field",
    "validate_section",
    "min_length_message",
    "max_length_message",
    # store
    "FormStore",
    "empty_value_for",
    # navigation
    "NavResult",
    "SectionNavigator",
    "SubmissionSink",
    # dispatch
    "ControlKind",
    "FieldControl",
    "CONTROL_BY_TYPE",
    "DEFAULT_PLACEHOLDER",
    "build_control",
    "control_kind",
    "toggle_option",
]
