"""
Funciones para construir componentes visuales del formulario.
"""

from rich.console import Group
from rich.table import Table
from rich.text import Text
from rich.panel import Panel
from rich import box

from dynaform.cli.theme import get_icons, get_palette, progress_bar
from dynaform.core import ControlKind, FieldControl, is_empty_value

from .models import ViewMode, ViewState


def format_control_value(control: FieldControl) -> str:
    """Formatea el valor de un control para mostrar ("" si está vacío)."""
    icons = get_icons()
    value = control.value

    if control.kind == ControlKind.TOGGLE:
        mark = icons.selected if value else icons.unselected
        return f"{mark} {control.label}"

    if control.kind == ControlKind.CHECK_GROUP:
        labels = [opt.label for opt in control.options if opt.value in (value or [])]
        return ", ".join(labels)

    if control.kind in (ControlKind.RADIO_GROUP, ControlKind.DROPDOWN):
        for opt in control.options:
            if opt.value == value:
                return opt.label
        return str(value or "")

    if control.kind == ControlKind.MULTI_LINE and value:
        return str(value).replace("\n", " / ")

    return str(value or "")


def build_header(state: ViewState) -> Panel:
    """Encabezado: título, usuario y progreso de secciones."""
    p = get_palette()
    nav = state.navigator

    content = Text()
    content.append(nav.schema.form_title, style=f"bold {p.primary}")
    if state.user_name:
        content.append(f"\nWelcome, {state.user_name}", style=p.secondary)
        content.append(f"   Roll Number: {state.roll_number}", style=p.muted)
    content.append("\n")
    content.append_text(progress_bar(nav.progress))
    content.append(f"\nSection {nav.index + 1} of {nav.total}", style=p.muted)

    return Panel(content, border_style=p.border, box=box.ROUNDED, padding=(0, 1))


def build_fields_table(state: ViewState) -> Table:
    """Tabla de campos de la sección actual con sus errores debajo."""
    p = get_palette()
    icons = get_icons()
    section = state.navigator.current_section

    table = Table(
        title=section.title,
        caption=section.description or None,
        title_style=f"bold {p.primary}",
        caption_style=f"italic {p.muted}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )
    table.add_column("#", justify="right", width=3)
    table.add_column("Field", width=28)
    table.add_column("Value", width=40)

    for idx, control in enumerate(state.controls):
        is_selected = idx == state.selected_idx

        # El checkbox lleva el label en el propio control
        label = Text()
        if control.show_label:
            label.append(control.label, style="bold" if control.required else "")
            if control.required:
                label.append(f" {icons.required}", style=f"bold {p.error}")
        elif control.required:
            label.append(icons.required, style=f"bold {p.error}")

        value_str = format_control_value(control)
        if value_str:
            value = Text(value_str, style=f"bold {p.accent}")
        else:
            value = Text(control.placeholder, style=f"dim {p.muted}")

        if is_selected:
            row_style = f"bold reverse {p.primary}"
            idx_text = Text(f"{icons.pointer}{idx + 1}", style=row_style)
            label.stylize(row_style)
            value.stylize(row_style)
        elif not is_empty_value(control.value):
            idx_text = Text(f"{icons.check}{idx + 1}", style=p.success)
        else:
            idx_text = Text(str(idx + 1), style=p.muted)

        table.add_row(idx_text, label, value)

        if control.error:
            table.add_row("", "", Text(f"{icons.cross} {control.error}", style=p.error))

    return table


def build_select_options(state: ViewState) -> Table:
    """Tabla de opciones para radio, select y multi-checkbox."""
    p = get_palette()
    icons = get_icons()
    control = state.current
    is_group = control.kind == ControlKind.CHECK_GROUP

    table = Table(
        title=f"{'Select all that apply' if is_group else 'Select one'}: {control.label}",
        title_style=f"bold {p.accent}",
        border_style=p.accent,
        box=box.ROUNDED,
        show_header=False,
        padding=(0, 1),
    )
    table.add_column("", width=3)
    table.add_column("", width=4)
    table.add_column("Option", width=40)

    selected = control.value if is_group else [control.value]
    for idx, opt in enumerate(control.options):
        is_cursor = idx == state.select_idx
        checked = opt.value in (selected or [])
        mark = icons.selected if checked else icons.unselected
        style = f"bold reverse {p.primary}" if is_cursor else ""
        table.add_row(
            Text(icons.pointer if is_cursor else " ", style=style),
            Text(mark, style=style or (p.success if checked else p.muted)),
            Text(opt.label, style=style),
        )

    return table


def build_input_line(state: ViewState) -> Panel:
    """Línea de entrada para edición de texto."""
    p = get_palette()
    control = state.current
    text = Text()
    text.append(state.input_buffer, style=f"bold {p.accent}")
    text.append("_", style=f"blink {p.accent}")
    hint = "Enter save · Esc cancel"
    if control.kind == ControlKind.MULTI_LINE:
        hint = "Tab new line · " + hint
    return Panel(
        text,
        title=Text(control.label, style=f"bold {p.secondary}"),
        subtitle=Text(hint, style=p.muted),
        border_style=p.accent,
        box=box.ROUNDED,
    )


def _key(text: Text, key: str, label: str, enabled: bool = True) -> None:
    p = get_palette()
    if not enabled:
        text.append(f"  [{key}] {label}", style=f"dim {p.muted}")
        return
    text.append("  [", style=p.muted)
    text.append(key, style=f"bold {p.nav_key}")
    text.append(f"] {label}", style=p.muted)


def build_nav_text(state: ViewState) -> Text:
    """Texto con las teclas disponibles en el modo actual."""
    nav = state.navigator
    text = Text()

    if state.mode == ViewMode.CONFIRM_CANCEL:
        text.append("  Discard this form? ", style=f"bold {get_palette().warning}")
        _key(text, "y", "Yes")
        _key(text, "n", "No")
        return text

    if state.mode == ViewMode.EDIT_SELECT:
        _key(text, "↑↓", "Move")
        if state.current.kind == ControlKind.CHECK_GROUP:
            _key(text, "Space", "Toggle")
            _key(text, "Enter", "Done")
        else:
            _key(text, "Enter", "Choose")
        _key(text, "Esc", "Back")
        return text

    _key(text, "↑↓", "Field")
    _key(text, "Enter", "Edit")
    _key(text, "p", "Previous", enabled=nav.can_previous)
    if nav.is_last:
        _key(text, "s", "Submit", enabled=nav.can_submit)
    else:
        _key(text, "n", "Next", enabled=nav.can_next)
    _key(text, "l", "Logout")
    _key(text, "Esc", "Quit")
    return text


def build_display(state: ViewState) -> Group:
    """Construye la vista completa."""
    p = get_palette()
    parts = [build_header(state), build_fields_table(state)]

    if state.mode == ViewMode.EDIT_TEXT:
        parts.append(build_input_line(state))
    elif state.mode == ViewMode.EDIT_SELECT:
        parts.append(build_select_options(state))

    parts.append(build_nav_text(state))

    if state.message:
        style = f"bold {p.error}" if state.message_is_error else p.info
        parts.append(Text(f"  {state.message}", style=style))

    return Group(*parts)
