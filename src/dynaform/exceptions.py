"""
Jerarquía de errores de dynaform.

Los errores de validación por campo NO son excepciones: son datos
(FormErrors) recalculados en cada pasada de validación.
"""


class DynaformError(Exception):
    """Error base de dynaform."""


class FetchError(DynaformError):
    """Falló la obtención del esquema o el login (red, IO, servicio caído)."""


class InvariantViolation(DynaformError):
    """Defecto de programación: estado inconsistente con el esquema."""


class SubmissionError(DynaformError):
    """El sink no pudo entregar el registro; el formulario sigue abierto."""
