"""
Handler para el modo de navegación del formulario.
"""

from typing import Optional

from dynaform.core import ControlKind, NavResult
from dynaform.exceptions import SubmissionError
from dynaform.session import FIX_ERRORS_MESSAGE

from ..models import FormAction, ViewMode, ViewState


FIX_BEFORE_NEXT_MESSAGE = "Please fix the errors before continuing"
FIRST_SECTION_MESSAGE = "Already on the first section"
LAST_SECTION_MESSAGE = "Last section: press s to submit"
SUBMIT_ONLY_LAST_MESSAGE = "Submit is available on the last section"


def _move_cursor(state: ViewState, step: int) -> None:
    if state.controls:
        state.selected_idx = (state.selected_idx + step) % len(state.controls)
    state.say("")


def start_edit(state: ViewState) -> None:
    """Entra en edición del campo seleccionado según su tipo de control."""
    # El almacén puede haber cambiado fuera de la vista
    state.refresh()
    control = state.current
    if control is None:
        return

    if control.kind == ControlKind.TOGGLE:
        control.change(not bool(control.value))
        state.refresh()
        return

    if control.is_text:
        state.mode = ViewMode.EDIT_TEXT
        state.input_buffer = str(control.value or "")
        return

    state.mode = ViewMode.EDIT_SELECT
    state.select_idx = 0
    # Para opción única, posicionar en el valor actual
    if control.kind in (ControlKind.RADIO_GROUP, ControlKind.DROPDOWN) and control.value:
        for idx, opt in enumerate(control.options):
            if opt.value == control.value:
                state.select_idx = idx
                break


def go_next(state: ViewState) -> None:
    result = state.navigator.next()
    if result == NavResult.MOVED:
        state.say("")
    elif result == NavResult.INVALID:
        state.say(FIX_BEFORE_NEXT_MESSAGE, error=True)
    else:
        state.say(LAST_SECTION_MESSAGE)
    state.refresh()


def go_previous(state: ViewState) -> None:
    result = state.navigator.previous()
    if result == NavResult.MOVED:
        state.say("")
    else:
        state.say(FIRST_SECTION_MESSAGE)
    state.refresh()


def do_submit(state: ViewState) -> Optional[FormAction]:
    if not state.navigator.is_last:
        state.say(SUBMIT_ONLY_LAST_MESSAGE)
        return None

    try:
        result = state.submit()
    except SubmissionError as e:
        state.refresh()
        state.say(str(e), error=True)
        return None
    state.refresh()
    if result == NavResult.SUBMITTED:
        return FormAction.SUBMITTED
    if result == NavResult.INVALID:
        state.say(FIX_ERRORS_MESSAGE, error=True)
    return None


def handle_navigate(key: str, state: ViewState) -> Optional[FormAction]:
    """Maneja el modo de navegación."""
    lower = key.lower() if len(key) == 1 else key

    if key == 'up':
        _move_cursor(state, -1)
    elif key == 'down':
        _move_cursor(state, 1)
    elif key in ('enter', 'space'):
        state.say("")
        start_edit(state)
    elif lower == 'n' or key == 'right':
        go_next(state)
    elif lower == 'p' or key == 'left':
        go_previous(state)
    elif lower == 's':
        return do_submit(state)
    elif lower == 'l':
        return FormAction.LOGOUT
    elif key == 'esc':
        state.mode = ViewMode.CONFIRM_CANCEL

    return None
