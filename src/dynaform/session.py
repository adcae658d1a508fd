"""
Controlador de la sesión de llenado de formulario.

Ciclo de vida:
    LOGGED_OUT --login ok--> LOADING --esquema--> FILLING --submit--> SUBMITTED
                                     |--sin esquema / fallo--> ERROR
    logout (desde cualquier estado) -> LOGGED_OUT, descarta todo

El estado vive aquí de forma explícita; el navegador y el almacén se crean
al recibir el esquema y se descartan al hacer logout.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from dynaform.core import FormStore, NavResult, SectionNavigator, SubmissionSink
from dynaform.exceptions import FetchError, InvariantViolation, SubmissionError
from dynaform.models import FormSchema, FormValues, LoginResult, SessionUser

logger = logging.getLogger(__name__)


FILL_ALL_FIELDS_MESSAGE = "Please fill in all fields"
UNEXPECTED_LOGIN_MESSAGE = "An unexpected error occurred. Please try again."
FETCH_FAILED_MESSAGE = "Could not fetch the form. Please try again."
SUBMIT_SUCCESS_MESSAGE = "Form submitted successfully!"
FIX_ERRORS_MESSAGE = "Please fix the errors before submitting"
SUBMIT_FAILED_MESSAGE = "Could not submit the form. Please try again."


LoginService = Callable[[SessionUser], LoginResult]
SchemaProvider = Callable[[str], Optional[FormSchema]]


class SessionStatus(Enum):
    """Estado visible de la sesión."""
    LOGGED_OUT = "logged_out"
    LOADING = "loading"
    ERROR = "error"
    FILLING = "filling"
    SUBMITTED = "submitted"


@dataclass
class LoginOutcome:
    """Resultado del intento de login, listo para mostrar."""
    ok: bool
    message: str
    service_called: bool = True


class FormSession:
    """Orquesta login, obtención del esquema, navegación y envío."""

    def __init__(
        self,
        login_service: LoginService,
        schema_provider: SchemaProvider,
        sink: Optional[SubmissionSink] = None,
        on_transition: Optional[Callable[[], None]] = None,
    ):
        self.login_service = login_service
        self.schema_provider = schema_provider
        self.sink = sink
        self.on_transition = on_transition

        self.status = SessionStatus.LOGGED_OUT
        self.user: Optional[SessionUser] = None
        self.schema: Optional[FormSchema] = None
        self.navigator: Optional[SectionNavigator] = None
        self.error_message: str = ""
        self.notice: str = ""
        self.submitted_values: Optional[FormValues] = None
        # Se incrementa en logout; descarta resultados de fetch tardíos
        self._generation = 0

    # ------------------------------------------------------------------
    # Login / logout
    # ------------------------------------------------------------------

    def login(self, roll_number: str, name: str) -> LoginOutcome:
        """
        Intenta iniciar sesión.

        Campos vacíos se rechazan sin llamar al servicio. En caso de éxito
        el usuario de sesión es el ingresado, no el que devuelva el servicio.
        """
        roll_number = (roll_number or "").strip()
        name = (name or "").strip()
        if not roll_number or not name:
            return LoginOutcome(ok=False, message=FILL_ALL_FIELDS_MESSAGE, service_called=False)

        user = SessionUser(roll_number=roll_number, name=name)
        logger.info("Login de %s", roll_number)
        try:
            result = self.login_service(user)
        except FetchError as e:
            logger.error("Fallo del servicio de identidad: %s", e)
            return LoginOutcome(ok=False, message=UNEXPECTED_LOGIN_MESSAGE)
        except Exception:
            logger.exception("Error inesperado en el login de %s", roll_number)
            return LoginOutcome(ok=False, message=UNEXPECTED_LOGIN_MESSAGE)

        if not result.success:
            logger.info("Login rechazado para %s: %s", roll_number, result.message)
            return LoginOutcome(ok=False, message=result.message or UNEXPECTED_LOGIN_MESSAGE)

        self._reset_form_state()
        self.user = user
        self.status = SessionStatus.LOADING
        return LoginOutcome(ok=True, message=result.message)

    def logout(self) -> None:
        """Descarta el usuario y todo el estado del formulario."""
        if self.user is not None:
            logger.info("Logout de %s", self.user.roll_number)
        self._generation += 1
        self._reset_form_state()
        self.user = None
        self.status = SessionStatus.LOGGED_OUT

    def _reset_form_state(self) -> None:
        if self.navigator is not None:
            self.navigator.store.dispose()
        self.schema = None
        self.navigator = None
        self.error_message = ""
        self.notice = ""
        self.submitted_values = None

    # ------------------------------------------------------------------
    # Esquema
    # ------------------------------------------------------------------

    def activate(self) -> SessionStatus:
        """
        Obtiene el esquema del usuario actual (una sola vez, sin reintentos).

        Ausencia de esquema y fallo de la llamada terminan en ERROR con el
        mismo mensaje; solo el log los distingue.
        """
        if self.user is None:
            raise InvariantViolation("activate() sin usuario de sesión")
        if self.schema is not None:
            raise InvariantViolation("Ya hay un esquema activo en la sesión")

        generation = self._generation
        roll_number = self.user.roll_number
        self.status = SessionStatus.LOADING

        try:
            schema = self.schema_provider(roll_number)
        except FetchError as e:
            if self._is_stale(generation, roll_number):
                return self.status
            logger.error("Error al obtener el formulario para %s: %s", roll_number, e)
            return self._fail()
        except Exception:
            if self._is_stale(generation, roll_number):
                return self.status
            logger.exception("Error inesperado al obtener el formulario para %s", roll_number)
            return self._fail()

        if self._is_stale(generation, roll_number):
            return self.status

        if schema is None:
            logger.warning("El proveedor no devolvió formulario para %s", roll_number)
            return self._fail()

        self.schema = schema
        self.navigator = SectionNavigator(
            schema,
            store=FormStore(schema),
            on_submit=self._deliver,
            on_transition=self.on_transition,
        )
        self.status = SessionStatus.FILLING
        logger.info(
            "Formulario %s v%s cargado (%d secciones)",
            schema.form_id, schema.version, len(schema.sections),
        )
        return self.status

    def _is_stale(self, generation: int, roll_number: str) -> bool:
        stale = (
            generation != self._generation
            or self.user is None
            or self.user.roll_number != roll_number
        )
        if stale:
            logger.debug("Resultado de fetch descartado para %s", roll_number)
        return stale

    def _fail(self) -> SessionStatus:
        self.error_message = FETCH_FAILED_MESSAGE
        self.status = SessionStatus.ERROR
        return self.status

    # ------------------------------------------------------------------
    # Envío
    # ------------------------------------------------------------------

    def _require_navigator(self) -> SectionNavigator:
        if self.navigator is None:
            raise InvariantViolation(f"Sin formulario activo (estado: {self.status.value})")
        return self.navigator

    def _deliver(self, values: FormValues) -> None:
        if self.sink is not None:
            self.sink(values)
        self.submitted_values = values

    def submit(self) -> NavResult:
        """
        Envía el formulario; muestra acuse de éxito o pide corregir errores.

        Raises:
            SubmissionError si el sink falla; el formulario sigue en FILLING
        """
        navigator = self._require_navigator()
        try:
            result = navigator.submit()
        except Exception as e:
            logger.exception("No se pudo entregar el formulario %s", navigator.schema.form_id)
            self.notice = SUBMIT_FAILED_MESSAGE
            raise SubmissionError(SUBMIT_FAILED_MESSAGE) from e
        if result == NavResult.SUBMITTED:
            self.status = SessionStatus.SUBMITTED
            self.notice = SUBMIT_SUCCESS_MESSAGE
        elif result == NavResult.INVALID:
            self.notice = FIX_ERRORS_MESSAGE
        return result
