"""
Visor interactivo del formulario por secciones.

Muestra la sección actual como tabla de campos editables; el usuario
navega, completa valores y avanza/retrocede entre secciones.
"""

from .models import FormAction, ViewMode, ViewState
from .main import interactive_form
from .builders import build_display, format_control_value
from .handlers import handle_key

__all__ = [
    "FormAction",
    "ViewMode",
    "ViewState",
    "interactive_form",
    "build_display",
    "format_control_value",
    "handle_key",
]
