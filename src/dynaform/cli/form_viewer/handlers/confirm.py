"""
Handler para la confirmación de cancelación.
"""

from typing import Optional

from ..models import FormAction, ViewMode, ViewState


def handle_confirm_cancel(key: str, state: ViewState) -> Optional[FormAction]:
    """Maneja el modo de confirmación de cancelación."""
    lower = key.lower() if len(key) == 1 else key
    if lower in ('y', 's'):
        return FormAction.CANCEL
    if lower == 'n' or key == 'esc':
        state.mode = ViewMode.NAVIGATE
        state.say("")
    return None
