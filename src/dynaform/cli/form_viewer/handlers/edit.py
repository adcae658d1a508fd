"""
Handlers para los modos de edición (texto y selección).
"""

from typing import Optional

from dynaform.core import ControlKind, toggle_option

from ..models import FormAction, ViewMode, ViewState


def _finish_edit(state: ViewState) -> None:
    """Vuelve a navegación y avanza al siguiente campo."""
    label = state.current.label if state.current else ""
    state.mode = ViewMode.NAVIGATE
    state.input_buffer = ""
    state.refresh()
    if state.controls:
        state.selected_idx = (state.selected_idx + 1) % len(state.controls)
    state.say(f"{label} updated")


def handle_edit_text(key: str, state: ViewState) -> Optional[FormAction]:
    """Maneja el modo de edición de texto."""
    control = state.current

    if key == 'enter':
        control.change(state.input_buffer)
        _finish_edit(state)

    elif key == 'esc':
        state.mode = ViewMode.NAVIGATE
        state.input_buffer = ""
        state.say("")

    elif key == 'backspace':
        state.input_buffer = state.input_buffer[:-1]

    elif key == 'tab' and control.kind == ControlKind.MULTI_LINE:
        state.input_buffer += "\n"

    elif key == 'space':
        state.input_buffer += " "

    elif len(key) == 1 and key.isprintable():
        state.input_buffer += key

    return None


def handle_edit_select(key: str, state: ViewState) -> Optional[FormAction]:
    """Maneja el modo de selección (radio, select y multi-checkbox)."""
    control = state.current
    n_options = len(control.options)
    if n_options == 0:
        state.mode = ViewMode.NAVIGATE
        state.say("No options available", error=True)
        return None

    is_group = control.kind == ControlKind.CHECK_GROUP

    if key == 'up':
        state.select_idx = (state.select_idx - 1) % n_options
    elif key == 'down':
        state.select_idx = (state.select_idx + 1) % n_options

    elif key == 'space' and is_group:
        opt_value = control.options[state.select_idx].value
        current = list(control.value or [])
        control.change(toggle_option(current, opt_value, opt_value not in current))

    elif key == 'enter':
        if is_group:
            _finish_edit(state)
        else:
            control.change(control.options[state.select_idx].value)
            _finish_edit(state)

    elif key == 'space':
        control.change(control.options[state.select_idx].value)
        _finish_edit(state)

    elif key == 'esc':
        state.mode = ViewMode.NAVIGATE
        state.say("")
        state.refresh()

    return None
