"""
Estado de la vista interactiva del formulario.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from dynaform.core import FieldControl, NavResult, SectionNavigator, build_control


class FormAction(Enum):
    """Motivo de salida del visor."""
    SUBMITTED = "submitted"   # Formulario enviado
    LOGOUT = "logout"         # Usuario cerró sesión
    CANCEL = "cancel"         # Usuario canceló


class ViewMode(Enum):
    """Modos de interacción."""
    NAVIGATE = "navigate"
    EDIT_TEXT = "edit_text"
    EDIT_SELECT = "edit_select"
    CONFIRM_CANCEL = "confirm_cancel"


@dataclass
class ViewState:
    """Estado de la vista (cursor, buffers, mensajes) sobre un navegador."""
    navigator: SectionNavigator
    user_name: str = ""
    roll_number: str = ""
    selected_idx: int = 0
    mode: ViewMode = ViewMode.NAVIGATE
    input_buffer: str = ""
    select_idx: int = 0
    message: str = ""
    message_is_error: bool = False
    # Cuántas veces se volvió al inicio de la página (una por transición)
    scroll_resets: int = 0
    pending_clear: bool = False
    controls: list[FieldControl] = field(default_factory=list)
    # Acción de envío (p.ej. FormSession.submit); por defecto el navegador
    submit_action: Optional[Callable[[], NavResult]] = None
    # Hook de transición que el navegador ya tenía; se sigue llamando
    outer_transition: Optional[Callable[[], None]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.outer_transition = self.navigator.on_transition
        self.navigator.on_transition = self.on_transition
        self.refresh()

    def on_transition(self) -> None:
        self.scroll_to_top()
        if self.outer_transition is not None:
            self.outer_transition()

    def refresh(self) -> None:
        """Reconstruye los controles de la sección actual desde el almacén."""
        nav = self.navigator
        self.controls = [build_control(f, nav.store) for f in nav.current_section.fields]
        if self.controls:
            self.selected_idx = min(self.selected_idx, len(self.controls) - 1)
        else:
            self.selected_idx = 0

    @property
    def current(self) -> Optional[FieldControl]:
        if not self.controls:
            return None
        return self.controls[self.selected_idx]

    def scroll_to_top(self) -> None:
        """Callback de transición: cursor al primer campo, pantalla limpia."""
        self.scroll_resets += 1
        self.pending_clear = True
        self.selected_idx = 0
        self.mode = ViewMode.NAVIGATE
        self.input_buffer = ""

    def submit(self) -> NavResult:
        action = self.submit_action or self.navigator.submit
        return action()

    def say(self, text: str, error: bool = False) -> None:
        self.message = text
        self.message_is_error = error
