"""
Destinos (sinks) del registro final del formulario.

Un sink es cualquier callable que recibe FormValues. El motor solo exige
que el registro se entregue; qué se hace con él queda fuera del núcleo.
"""

import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field

from dynaform.models import FormSchema, FormValues, SessionUser

logger = logging.getLogger(__name__)


class SubmissionRecord(BaseModel):
    """Registro enviado, con metadatos del formulario y del usuario."""
    form_id: str = Field(..., serialization_alias="formId")
    version: str = ""
    roll_number: str = Field(..., serialization_alias="rollNumber")
    submitted_at: str = Field(
        default_factory=lambda: datetime.now().isoformat(timespec="seconds"),
        serialization_alias="submittedAt",
    )
    values: FormValues = Field(default_factory=dict)


def log_sink(values: FormValues) -> None:
    """Sink mínimo: registra el contenido en el log."""
    logger.info("Form submission data: %s", json.dumps(values, indent=2, ensure_ascii=False))


def _safe_name(text: str) -> str:
    return re.sub(r"[^A-Za-z0-9_-]+", "-", text).strip("-") or "form"


class JsonFileSink:
    """Guarda cada envío como un archivo JSON en un directorio."""

    def __init__(self, directory: Union[str, Path], schema: FormSchema, user: SessionUser):
        self.directory = Path(directory)
        self.schema = schema
        self.user = user
        self.last_path: Optional[Path] = None

    def _record_path(self, record: SubmissionRecord) -> Path:
        stamp = record.submitted_at.replace(":", "").replace("-", "")
        name = f"{_safe_name(record.form_id)}_{_safe_name(record.roll_number)}_{stamp}.json"
        return self.directory / name

    def __call__(self, values: FormValues) -> None:
        record = SubmissionRecord(
            form_id=self.schema.form_id,
            version=self.schema.version,
            roll_number=self.user.roll_number,
            values=values,
        )
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._record_path(record)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(record.model_dump(by_alias=True), f, indent=2, ensure_ascii=False)

        self.last_path = path
        logger.info("Envío guardado en %s", path)
