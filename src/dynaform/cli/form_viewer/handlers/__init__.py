"""
Handlers de teclas para el formulario interactivo.

Cada módulo maneja un modo específico del visor.
"""

from typing import Optional

from ..models import FormAction, ViewMode, ViewState

from .navigate import handle_navigate
from .edit import handle_edit_text, handle_edit_select
from .confirm import handle_confirm_cancel


_HANDLERS = {
    ViewMode.NAVIGATE: handle_navigate,
    ViewMode.EDIT_TEXT: handle_edit_text,
    ViewMode.EDIT_SELECT: handle_edit_select,
    ViewMode.CONFIRM_CANCEL: handle_confirm_cancel,
}


def handle_key(key: str, state: ViewState) -> Optional[FormAction]:
    """
    Maneja una tecla presionada.

    Returns:
        None si debe continuar el loop, FormAction si debe salir
    """
    return _HANDLERS[state.mode](key, state)


__all__ = ["handle_key"]
