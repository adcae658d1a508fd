"""
Almacén de valores y errores del formulario, indexados por fieldId.
"""

import logging
from copy import deepcopy
from typing import Any, Mapping, Optional

from dynaform.exceptions import InvariantViolation
from dynaform.models import FieldType, FieldValue, FormErrors, FormSchema, FormValues

logger = logging.getLogger(__name__)


def empty_value_for(field_type: FieldType) -> FieldValue:
    """Valor vacío apropiado para el tipo de campo."""
    if field_type == FieldType.MULTI_CHECKBOX:
        return []
    if field_type == FieldType.CHECKBOX:
        return False
    return ""


class FormStore:
    """
    Valores actuales y errores actuales del formulario.

    - set_value: sobrescribe el valor y borra el error del campo (siempre,
      aunque el nuevo valor siga siendo inválido)
    - set_errors: reemplaza el mapeo completo de errores
    - los valores persisten al navegar entre secciones
    """

    def __init__(self, schema: FormSchema):
        self._types: dict[str, FieldType] = {f.field_id: f.type for f in schema.iter_fields()}
        self._values: FormValues = {}
        self._errors: FormErrors = {}
        self._disposed = False

    def _check_field(self, field_id: str) -> None:
        if field_id not in self._types:
            raise InvariantViolation(f"fieldId desconocido en el esquema: {field_id!r}")

    def _check_alive(self) -> None:
        if self._disposed:
            raise InvariantViolation("Escritura en un formulario descartado")

    def set_value(self, field_id: str, value: FieldValue) -> None:
        """Sobrescribe el valor de un campo y limpia su error."""
        self._check_alive()
        self._check_field(field_id)
        if isinstance(value, (list, tuple)):
            value = list(value)
        self._values[field_id] = value
        if field_id in self._errors:
            del self._errors[field_id]

    def get_value(self, field_id: str) -> FieldValue:
        """Valor actual, o vacío según el tipo si nunca se asignó."""
        self._check_field(field_id)
        if field_id in self._values:
            return self._values[field_id]
        return empty_value_for(self._types[field_id])

    def set_errors(self, errors: Mapping[str, str]) -> None:
        """Reemplaza todos los errores (resultado de una pasada de validación)."""
        self._check_alive()
        for field_id in errors:
            self._check_field(field_id)
        self._errors = dict(errors)
        if self._errors:
            logger.debug("Errores de validación: %s", sorted(self._errors))

    def clear_errors(self) -> None:
        self.set_errors({})

    def get_error(self, field_id: str) -> Optional[str]:
        self._check_field(field_id)
        return self._errors.get(field_id)

    @property
    def errors(self) -> FormErrors:
        return dict(self._errors)

    @property
    def values(self) -> Mapping[str, Any]:
        """Vista de solo lectura de los valores asignados."""
        return dict(self._values)

    def snapshot(self) -> FormValues:
        """Copia profunda de todos los valores asignados (el registro final)."""
        return deepcopy(self._values)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Descarta el almacén; escrituras posteriores son un defecto."""
        self._disposed = True
        self._values.clear()
        self._errors.clear()
