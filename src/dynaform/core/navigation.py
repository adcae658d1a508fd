"""
Máquina de estados de navegación entre secciones.

Estados: un índice por sección (0..n-1) más el estado terminal "enviado".
Política: se valida la sección actual antes de avanzar (Next) y antes de
enviar (Submit); Previous no valida.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from dynaform.core.store import FormStore
from dynaform.core.validation import validate_section
from dynaform.models import FormErrors, FormSchema, FormSection, FormValues

logger = logging.getLogger(__name__)


SubmissionSink = Callable[[FormValues], None]


class NavResult(Enum):
    """Resultado de una acción de navegación."""
    MOVED = "moved"           # Cambió de sección
    BLOCKED = "blocked"       # Acción no disponible en el estado actual
    INVALID = "invalid"       # La sección actual tiene errores
    SUBMITTED = "submitted"   # Formulario enviado


class SectionNavigator:
    """Controlador de navegación del formulario."""

    def __init__(
        self,
        schema: FormSchema,
        store: Optional[FormStore] = None,
        on_submit: Optional[SubmissionSink] = None,
        on_transition: Optional[Callable[[], None]] = None,
    ):
        self.schema = schema
        self.store = store if store is not None else FormStore(schema)
        self.on_submit = on_submit
        self.on_transition = on_transition
        self._index = 0
        self._submitted = False

    @property
    def index(self) -> int:
        return self._index

    @property
    def total(self) -> int:
        return len(self.schema.sections)

    @property
    def current_section(self) -> FormSection:
        return self.schema.sections[self._index]

    @property
    def is_first(self) -> bool:
        return self._index == 0

    @property
    def is_last(self) -> bool:
        return self._index == self.total - 1

    @property
    def submitted(self) -> bool:
        return self._submitted

    @property
    def progress(self) -> float:
        """Fracción de avance en [0, 1]: (índice + 1) / total."""
        return (self._index + 1) / self.total

    @property
    def can_next(self) -> bool:
        return not self._submitted and not self.is_last

    @property
    def can_previous(self) -> bool:
        return not self._submitted and not self.is_first

    @property
    def can_submit(self) -> bool:
        return not self._submitted and self.is_last

    def validate_current(self) -> FormErrors:
        """Valida la sección actual y reemplaza los errores del almacén."""
        errors = validate_section(self.current_section, self.store.values)
        self.store.set_errors(errors)
        if errors:
            logger.info(
                "Sección %d/%d con %d errores", self._index + 1, self.total, len(errors)
            )
        return errors

    def _transition(self) -> None:
        if self.on_transition is not None:
            self.on_transition()

    def next(self) -> NavResult:
        """Avanza una sección si la actual es válida."""
        if not self.can_next:
            return NavResult.BLOCKED
        if self.validate_current():
            return NavResult.INVALID
        self._index += 1
        logger.debug("Avanzando a sección %d/%d", self._index + 1, self.total)
        self._transition()
        return NavResult.MOVED

    def previous(self) -> NavResult:
        """Retrocede una sección sin validar; los valores se conservan."""
        if not self.can_previous:
            return NavResult.BLOCKED
        self._index -= 1
        self.store.clear_errors()
        logger.debug("Volviendo a sección %d/%d", self._index + 1, self.total)
        self._transition()
        return NavResult.MOVED

    def submit(self) -> NavResult:
        """
        Envía el formulario desde la última sección.

        Si la sección es válida pasa al estado terminal y entrega al sink
        todos los valores acumulados (de todas las secciones visitadas).
        """
        if not self.can_submit:
            return NavResult.BLOCKED
        if self.validate_current():
            return NavResult.INVALID
        record = self.store.snapshot()
        # Si el sink falla, el formulario sigue abierto y puede reenviarse
        if self.on_submit is not None:
            self.on_submit(record)
        self._submitted = True
        logger.info("Formulario %s enviado con %d campos", self.schema.form_id, len(record))
        self._transition()
        return NavResult.SUBMITTED
