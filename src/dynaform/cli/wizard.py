"""
Flujo interactivo completo: login -> carga del formulario -> llenado -> envío.
"""

import logging
from pathlib import Path
from typing import Optional

import questionary
from rich import box
from rich.panel import Panel
from rich.text import Text

from dynaform.api import FileSchemaProvider, FormApiClient
from dynaform.cli.form_viewer import FormAction, interactive_form
from dynaform.cli.login import login_view
from dynaform.cli.theme import get_console, get_palette, print_info, print_success, print_warning
from dynaform.config import Settings
from dynaform.models import FormValues, LoginResult, SessionUser
from dynaform.session import FormSession, SessionStatus
from dynaform.submission import JsonFileSink, log_sink

logger = logging.getLogger(__name__)


BACK_TO_LOGIN = "Back to Login"
LOGOUT = "Logout"
QUIT = "Quit"


def offline_login(user: SessionUser) -> LoginResult:
    """Servicio de identidad local para el modo offline (--schema)."""
    return LoginResult(success=True, message=f"Offline session for {user.name}")


def _print_error_panel(message: str) -> None:
    p = get_palette()
    get_console().print(Panel(
        Text(message, justify="center"),
        title=Text("Error Loading Form", style=f"bold {p.error}"),
        border_style=p.error,
        box=box.ROUNDED,
        width=60,
    ))


def build_session(settings: Settings, schema_file: Optional[Path] = None) -> FormSession:
    """Crea la sesión con los colaboradores según el modo (online/offline)."""
    if schema_file is not None:
        return FormSession(
            login_service=offline_login,
            schema_provider=FileSchemaProvider(schema_file).get_form,
        )

    client = FormApiClient.from_settings(settings)
    return FormSession(login_service=client.create_user, schema_provider=client.get_form)


def _attach_sinks(session: FormSession, output_dir: Path) -> JsonFileSink:
    file_sink = JsonFileSink(output_dir, session.schema, session.user)

    def sink(values: FormValues) -> None:
        log_sink(values)
        file_sink(values)

    session.sink = sink
    return file_sink


def wizard_main(settings: Settings, schema_file: Optional[Path] = None) -> None:
    """
    Ejecuta el flujo hasta que el usuario salga.
    """
    console = get_console()
    session = build_session(settings, schema_file)

    while True:
        if not login_view(session):
            print_info("Goodbye!")
            return

        with console.status("Loading your form... Please wait while we fetch the form data."):
            status = session.activate()

        if status == SessionStatus.ERROR:
            _print_error_panel(session.error_message)
            choice = questionary.select("", choices=[BACK_TO_LOGIN, QUIT]).ask()
            session.logout()
            if choice != BACK_TO_LOGIN:
                return
            continue

        file_sink = _attach_sinks(session, settings.output_dir)
        user = session.user
        action = interactive_form(
            session.navigator,
            user_name=user.name,
            roll_number=user.roll_number,
            submit_action=session.submit,
        )

        if action == FormAction.SUBMITTED:
            print_success(session.notice)
            console.print_json(data=session.submitted_values)
            if file_sink.last_path is not None:
                print_info(f"Saved to {file_sink.last_path}")
            choice = questionary.select("", choices=[LOGOUT, QUIT]).ask()
            session.logout()
            if choice != LOGOUT:
                return
        elif action == FormAction.LOGOUT:
            session.logout()
        else:
            session.logout()
            print_warning("Form discarded")
            return
