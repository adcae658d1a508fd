"""
Colaboradores externos: servicio de identidad y proveedor de esquemas.

- FormApiClient: cliente HTTP (requests) del servicio de formularios
- FileSchemaProvider: lee el esquema desde un archivo JSON (modo offline)

Convención de retorno del proveedor de esquemas:
- FormSchema: esquema obtenido
- None: el proveedor respondió pero no hay esquema utilizable
- FetchError: la llamada misma falló (red, IO)
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import requests
from pydantic import ValidationError

from dynaform.config import Settings
from dynaform.exceptions import FetchError
from dynaform.models import FormResponse, FormSchema, LoginResult, SessionUser

logger = logging.getLogger(__name__)


LOGIN_PATH = "/create-user"
FORM_PATH = "/get-form"

LOGIN_OK_FALLBACK = "Login successful"
LOGIN_FAILED_FALLBACK = "Login failed. Please try again."


def parse_schema_document(document: Any) -> FormSchema:
    """
    Parsea un documento de esquema, desnudo o envuelto en {"form": ...}.

    Raises:
        pydantic.ValidationError si el documento no es un esquema válido
    """
    if isinstance(document, dict) and "form" in document:
        return FormResponse.model_validate(document).form
    return FormSchema.model_validate(document)


def _json_or_empty(response: requests.Response) -> dict:
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


class FormApiClient:
    """Cliente HTTP del servicio de usuarios y formularios."""

    def __init__(
        self,
        base_url: str,
        timeout_s: float = 10.0,
        http: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.http = http or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "FormApiClient":
        return cls(settings.base_url, timeout_s=settings.timeout_s)

    def create_user(self, user: SessionUser) -> LoginResult:
        """
        Registra/identifica al usuario.

        Returns:
            LoginResult con el veredicto y el mensaje del servicio

        Raises:
            FetchError si la llamada HTTP falla
        """
        url = f"{self.base_url}{LOGIN_PATH}"
        try:
            response = self.http.post(url, json=user.to_wire(), timeout=self.timeout_s)
        except requests.RequestException as e:
            raise FetchError(f"Login falló: {e}") from e

        payload = _json_or_empty(response)
        fallback = LOGIN_OK_FALLBACK if response.ok else LOGIN_FAILED_FALLBACK
        message = str(payload.get("message") or fallback)
        logger.debug("POST %s -> %s", url, response.status_code)
        return LoginResult(success=response.ok, message=message)

    def get_form(self, roll_number: str) -> Optional[FormSchema]:
        """
        Obtiene el esquema del formulario para un rollNumber.

        Returns:
            FormSchema, o None si el servicio no entrega un esquema válido

        Raises:
            FetchError si la llamada HTTP falla
        """
        url = f"{self.base_url}{FORM_PATH}"
        try:
            response = self.http.get(
                url, params={"rollNumber": roll_number}, timeout=self.timeout_s
            )
        except requests.RequestException as e:
            raise FetchError(f"Descarga de esquema falló: {e}") from e

        if not response.ok:
            logger.warning("GET %s -> HTTP %s", url, response.status_code)
            return None

        try:
            return parse_schema_document(_json_or_empty(response))
        except ValidationError as e:
            logger.warning("Esquema inválido recibido de %s: %d errores", url, e.error_count())
            return None


class FileSchemaProvider:
    """Proveedor de esquemas que lee un archivo JSON local."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def get_form(self, roll_number: str) -> Optional[FormSchema]:
        """El rollNumber no se usa: el archivo define un único formulario."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FetchError(f"No se pudo leer {self.path}: {e}") from e

        try:
            return parse_schema_document(json.loads(text))
        except (ValueError, ValidationError) as e:
            logger.warning("Esquema inválido en %s: %s", self.path, e)
            return None
