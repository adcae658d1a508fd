"""
Modelos del esquema de formulario recibido en tiempo de ejecución.

Un FormSchema es inmutable una vez parseado: secciones y campos se
congelan para que ninguna parte del motor los modifique durante la sesión.
"""

from enum import Enum
from typing import Iterator, Optional, Union

from pydantic import ConfigDict, Field, model_validator

from dynaform.models.base import WireModel


class FieldType(str, Enum):
    """Tipos de campo soportados (variante cerrada)."""
    TEXT = "text"
    EMAIL = "email"
    TEL = "tel"
    TEXTAREA = "textarea"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    MULTI_CHECKBOX = "multi-checkbox"
    SELECT = "select"


# Tipos cuyo valor es un string escalar
SCALAR_TYPES = frozenset({
    FieldType.TEXT,
    FieldType.EMAIL,
    FieldType.TEL,
    FieldType.TEXTAREA,
    FieldType.RADIO,
    FieldType.SELECT,
})

# Tipos que requieren lista de opciones
CHOICE_TYPES = frozenset({
    FieldType.RADIO,
    FieldType.SELECT,
    FieldType.MULTI_CHECKBOX,
})


class FieldOption(WireModel):
    """Opción de un campo de selección."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    label: str
    value: str


class FieldValidation(WireModel):
    """Regla de validación personalizada (solo mensaje de requerido)."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    message: str


class FieldDefinition(WireModel):
    """Definición de un campo del formulario."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    field_id: str = Field(..., alias="fieldId", min_length=1)
    type: FieldType
    label: str
    placeholder: Optional[str] = None
    required: bool = False
    min_length: Optional[int] = Field(None, alias="minLength", ge=0)
    max_length: Optional[int] = Field(None, alias="maxLength", ge=0)
    options: tuple[FieldOption, ...] = ()
    validation: Optional[FieldValidation] = None
    data_test_id: Optional[str] = Field(None, alias="dataTestId")

    @property
    def required_message(self) -> Optional[str]:
        """Mensaje personalizado para campo requerido, si existe."""
        return self.validation.message if self.validation else None

    def option_label(self, value: str) -> str:
        """Retorna el label de la opción con ese valor (o el valor mismo)."""
        for opt in self.options:
            if opt.value == value:
                return opt.label
        return value


class FormSection(WireModel):
    """Sección del formulario: un paso de navegación."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str
    description: str = ""
    fields: tuple[FieldDefinition, ...] = ()


class FormSchema(WireModel):
    """Esquema completo del formulario."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    form_title: str = Field(..., alias="formTitle")
    form_id: str = Field(..., alias="formId")
    version: str = ""
    sections: tuple[FormSection, ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _check_unique_field_ids(self) -> "FormSchema":
        seen: set[str] = set()
        for fld in self.iter_fields():
            if fld.field_id in seen:
                raise ValueError(f"fieldId duplicado en el esquema: {fld.field_id!r}")
            seen.add(fld.field_id)
        return self

    def iter_fields(self) -> Iterator[FieldDefinition]:
        """Itera todos los campos en orden de sección."""
        for section in self.sections:
            yield from section.fields

    def get_field(self, field_id: str) -> Optional[FieldDefinition]:
        """Obtiene un campo por su fieldId."""
        for fld in self.iter_fields():
            if fld.field_id == field_id:
                return fld
        return None

    @property
    def field_ids(self) -> list[str]:
        return [f.field_id for f in self.iter_fields()]


class FormResponse(WireModel):
    """Respuesta del endpoint de formularios."""
    message: str = ""
    form: FormSchema


# Valores y errores del formulario, indexados por fieldId
FieldValue = Union[str, bool, list[str]]
FormValues = dict[str, FieldValue]
FormErrors = dict[str, str]
