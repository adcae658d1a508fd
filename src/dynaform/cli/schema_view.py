"""
Vista no interactiva de un esquema: validación y tabla de estructura.
"""

import json
from pathlib import Path

from pydantic import ValidationError
from rich import box
from rich.table import Table

from dynaform.api import parse_schema_document
from dynaform.cli.theme import get_console, get_palette, print_error, print_header, print_success
from dynaform.core import control_kind
from dynaform.models import FieldDefinition, FormSchema


def _rules_text(fld: FieldDefinition) -> str:
    rules = []
    if fld.min_length is not None:
        rules.append(f"min {fld.min_length}")
    if fld.max_length is not None:
        rules.append(f"max {fld.max_length}")
    if fld.options:
        rules.append(f"{len(fld.options)} options")
    return ", ".join(rules) or "-"


def create_schema_table(schema: FormSchema) -> Table:
    """Tabla con una fila por campo, agrupada por sección."""
    p = get_palette()
    table = Table(
        title=f"{schema.form_title} ({schema.form_id} v{schema.version})",
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
    )
    table.add_column("Sec", justify="right")
    table.add_column("Field ID", style=p.accent)
    table.add_column("Type")
    table.add_column("Control", style=p.muted)
    table.add_column("Label")
    table.add_column("Req", justify="center")
    table.add_column("Rules", style=p.muted)

    for s_idx, section in enumerate(schema.sections, start=1):
        for f_idx, fld in enumerate(section.fields):
            table.add_row(
                str(s_idx) if f_idx == 0 else "",
                fld.field_id,
                fld.type.value,
                control_kind(fld.type).value,
                fld.label,
                "*" if fld.required else "",
                _rules_text(fld),
            )
        if not section.fields:
            table.add_row(str(s_idx), "-", "-", "-", f"({section.title}: no fields)", "", "")

    return table


def check_schema_file(path: Path) -> bool:
    """
    Valida un archivo de esquema e imprime su estructura.

    Returns:
        True si el esquema es válido
    """
    try:
        document = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        print_error(f"Cannot read {path}: {e}")
        return False

    try:
        schema = parse_schema_document(document)
    except ValidationError as e:
        print_error(f"Invalid schema in {path}: {e.error_count()} errors")
        for err in e.errors():
            loc = ".".join(str(part) for part in err["loc"])
            get_console().print(f"  {loc}: {err['msg']}", style=get_palette().error)
        return False

    n_fields = sum(len(s.fields) for s in schema.sections)
    print_header(schema.form_title, f"{len(schema.sections)} sections, {n_fields} fields")
    get_console().print(create_schema_table(schema))
    print_success("Schema is valid")
    return True
