"""
CLI de dynaform - Formularios multi-sección definidos por esquema.

Comandos:
- run: Flujo interactivo (login, formulario, envío)
- check: Valida un archivo de esquema y muestra su estructura
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from dynaform.logging_setup import setup_logging

# Crear aplicación principal
app = typer.Typer(
    name="dynaform",
    help="Formularios multi-sección definidos por esquema.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log detallado")] = False,
):
    """
    dynaform - Completa formularios cuya estructura llega como datos.
    """
    setup_logging(verbose)


@app.command()
def run(
    api_url: Annotated[Optional[str], typer.Option("--api-url", help="URL base del servicio")] = None,
    schema: Annotated[Optional[Path], typer.Option(
        "--schema", "-s", exists=True, dir_okay=False, help="Esquema JSON local (modo offline)",
    )] = None,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Directorio de envíos")] = None,
    timeout: Annotated[Optional[float], typer.Option("--timeout", help="Timeout HTTP (s)")] = None,
):
    """
    Inicia el flujo interactivo: login, formulario por secciones y envío.

    Ejemplo:
        dynaform run --api-url https://forms.example.org
        dynaform run --schema form.json -o ./envios
    """
    from dynaform.cli.wizard import wizard_main
    from dynaform.config import Settings

    settings = Settings.from_env()
    overrides = {
        key: value
        for key, value in (("api_url", api_url), ("output_dir", output), ("timeout_s", timeout))
        if value is not None
    }
    if overrides:
        settings = settings.model_copy(update=overrides)

    wizard_main(settings, schema_file=schema)


@app.command()
def check(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="Archivo de esquema JSON")],
):
    """
    Valida un archivo de esquema y muestra secciones y campos.

    Ejemplo:
        dynaform check form.json
    """
    from dynaform.cli.schema_view import check_schema_file

    if not check_schema_file(path):
        raise typer.Exit(code=1)


__all__ = ["app"]
