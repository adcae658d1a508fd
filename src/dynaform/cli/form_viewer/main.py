"""
Función principal del formulario interactivo.
"""

from typing import Callable, Optional

from rich.live import Live

from dynaform.cli.theme import get_console
from dynaform.cli.terminal import clear_screen, get_key
from dynaform.core import NavResult, SectionNavigator

from .models import FormAction, ViewState
from .builders import build_display
from .handlers import handle_key


def interactive_form(
    navigator: SectionNavigator,
    user_name: str = "",
    roll_number: str = "",
    submit_action: Optional[Callable[[], NavResult]] = None,
    read_key: Callable[[], str] = get_key,
) -> FormAction:
    """
    Muestra el formulario sección por sección hasta enviar, salir o cancelar.

    Args:
        navigator: Navegador con el esquema y el almacén de la sesión
        user_name: Nombre a mostrar en el encabezado
        roll_number: Roll number a mostrar en el encabezado
        submit_action: Acción de envío (por defecto navigator.submit)
        read_key: Fuente de teclas

    Returns:
        FormAction con el motivo de salida
    """
    console = get_console()
    state = ViewState(
        navigator=navigator,
        user_name=user_name,
        roll_number=roll_number,
        submit_action=submit_action,
    )

    clear_screen()

    with Live(console=console, auto_refresh=False, screen=False) as live:
        live.update(build_display(state), refresh=True)

        while True:
            action = handle_key(read_key(), state)
            if action is not None:
                return action

            # Transición de sección: volver al inicio de la pantalla
            if state.pending_clear:
                live.stop()
                clear_screen()
                state.pending_clear = False
                live.start()

            live.update(build_display(state), refresh=True)
