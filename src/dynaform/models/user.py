"""
Modelos del usuario de sesión y del resultado de login.
"""

from pydantic import Field

from dynaform.models.base import WireModel


class SessionUser(WireModel):
    """Usuario identificado; clave de búsqueda del esquema."""
    roll_number: str = Field(..., alias="rollNumber", min_length=1)
    name: str = Field(..., min_length=1)


class LoginResult(WireModel):
    """Veredicto del servicio de identidad."""
    success: bool
    message: str = ""
