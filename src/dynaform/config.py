"""Configuración de la aplicación (Pydantic)."""

import os
from pathlib import Path

from pydantic import BaseModel, Field


DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_TIMEOUT_S = 10.0
DEFAULT_OUTPUT_DIR = "submissions"

ENV_API_URL = "DYNAFORM_API_URL"
ENV_TIMEOUT = "DYNAFORM_TIMEOUT"
ENV_OUTPUT_DIR = "DYNAFORM_OUTPUT_DIR"


class Settings(BaseModel):
    """Parámetros de conexión y salida."""
    api_url: str = Field(default=DEFAULT_API_URL, min_length=1, description="URL base del servicio")
    timeout_s: float = Field(default=DEFAULT_TIMEOUT_S, gt=0, description="Timeout HTTP (s)")
    output_dir: Path = Field(default=Path(DEFAULT_OUTPUT_DIR), description="Directorio de envíos")

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Construye la configuración desde variables de entorno."""
        env = os.environ if environ is None else environ
        values = {}
        if env.get(ENV_API_URL):
            values["api_url"] = env[ENV_API_URL]
        if env.get(ENV_TIMEOUT):
            values["timeout_s"] = env[ENV_TIMEOUT]
        if env.get(ENV_OUTPUT_DIR):
            values["output_dir"] = env[ENV_OUTPUT_DIR]
        return cls(**values)

    @property
    def base_url(self) -> str:
        return self.api_url.rstrip("/")
