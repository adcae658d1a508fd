"""
Vista de login: pide roll number y nombre hasta que el servicio acepte.
"""

from typing import Callable, Optional

import questionary

from dynaform.cli.theme import print_error, print_header, print_success
from dynaform.session import FormSession

Prompt = Callable[[str], Optional[str]]


def _ask_text(message: str) -> Optional[str]:
    """Pregunta con questionary; None si el usuario aborta (Ctrl-C)."""
    return questionary.text(message).ask()


def login_view(session: FormSession, ask: Prompt = _ask_text) -> bool:
    """
    Muestra la vista de login hasta un login exitoso.

    Returns:
        True si la sesión quedó iniciada, False si el usuario abortó
    """
    print_header("Student Login", "Enter your roll number and full name")

    while True:
        roll_number = ask("Roll Number:")
        if roll_number is None:
            return False
        name = ask("Full Name:")
        if name is None:
            return False

        outcome = session.login(roll_number, name)
        if outcome.ok:
            if outcome.message:
                print_success(outcome.message)
            return True
        print_error(outcome.message)
