"""
Despacho de campos a controles interactivos.

Cada FieldType se asocia a exactamente un ControlKind. La tabla se verifica
al importar: agregar un tipo nuevo sin su control falla de inmediato.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Sequence

from dynaform.core.store import FormStore
from dynaform.models import FieldDefinition, FieldOption, FieldType, FieldValue


DEFAULT_PLACEHOLDER = "Enter value"


class ControlKind(Enum):
    """Controles disponibles en la capa de presentación."""
    SINGLE_LINE = "single_line"   # Texto de una línea
    MULTI_LINE = "multi_line"     # Texto multilínea
    RADIO_GROUP = "radio_group"   # Opción única, todas visibles
    TOGGLE = "toggle"             # Booleano (el control lleva su label)
    DROPDOWN = "dropdown"         # Opción única en lista cerrada
    CHECK_GROUP = "check_group"   # Un toggle por opción


CONTROL_BY_TYPE: dict[FieldType, ControlKind] = {
    FieldType.TEXT: ControlKind.SINGLE_LINE,
    FieldType.EMAIL: ControlKind.SINGLE_LINE,
    FieldType.TEL: ControlKind.SINGLE_LINE,
    FieldType.TEXTAREA: ControlKind.MULTI_LINE,
    FieldType.RADIO: ControlKind.RADIO_GROUP,
    FieldType.CHECKBOX: ControlKind.TOGGLE,
    FieldType.SELECT: ControlKind.DROPDOWN,
    FieldType.MULTI_CHECKBOX: ControlKind.CHECK_GROUP,
}

_missing = set(FieldType) - set(CONTROL_BY_TYPE)
if _missing:
    raise RuntimeError(f"Tipos de campo sin control: {sorted(t.value for t in _missing)}")


@dataclass
class FieldControl:
    """Lo que la presentación necesita para dibujar un campo."""
    field_id: str
    kind: ControlKind
    label: str
    show_label: bool
    required: bool
    placeholder: str
    value: FieldValue
    error: Optional[str] = None
    options: Sequence[FieldOption] = field(default_factory=tuple)
    on_change: Optional[Callable[[FieldValue], None]] = None

    @property
    def is_choice(self) -> bool:
        return self.kind in (ControlKind.RADIO_GROUP, ControlKind.DROPDOWN, ControlKind.CHECK_GROUP)

    @property
    def is_text(self) -> bool:
        return self.kind in (ControlKind.SINGLE_LINE, ControlKind.MULTI_LINE)

    def change(self, value: FieldValue) -> None:
        """Escribe el nuevo valor a través del almacén."""
        if self.on_change is not None:
            self.on_change(value)
        self.value = value
        self.error = None


def control_kind(field_type: FieldType) -> ControlKind:
    return CONTROL_BY_TYPE[field_type]


def build_control(fld: FieldDefinition, store: FormStore) -> FieldControl:
    """Construye el control de un campo con su valor y error actuales."""
    kind = control_kind(fld.type)
    return FieldControl(
        field_id=fld.field_id,
        kind=kind,
        label=fld.label,
        show_label=kind != ControlKind.TOGGLE,
        required=fld.required,
        placeholder=fld.placeholder or DEFAULT_PLACEHOLDER,
        value=store.get_value(fld.field_id),
        error=store.get_error(fld.field_id),
        options=fld.options,
        on_change=lambda value, fid=fld.field_id: store.set_value(fid, value),
    )


def toggle_option(current: Sequence[str], option_value: str, checked: bool) -> list[str]:
    """
    Marca o desmarca una opción de un multi-checkbox.

    Marcar agrega al final si no está; desmarcar la quita. Nunca hay
    duplicados y el orden de marcado se conserva.
    """
    values = list(current)
    if checked:
        if option_value not in values:
            values.append(option_value)
    else:
        values = [v for v in values if v != option_value]
    return values
