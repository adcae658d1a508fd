"""
Tema visual de la CLI: paleta de colores, iconos y consola compartida.

Los iconos Unicode caen a ASCII si la terminal no puede codificarlos.
"""

import sys
from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich import box


@dataclass(frozen=True)
class ColorPalette:
    """Paleta de colores de la interfaz."""
    primary: str      # Títulos, destacados
    secondary: str    # Subtítulos
    accent: str       # Valores ingresados
    success: str
    warning: str
    error: str
    info: str
    muted: str        # Texto secundario
    border: str
    nav_key: str      # Teclas de navegación


PALETTE = ColorPalette(
    primary="#5f87af",
    secondary="#87afaf",
    accent="#af87af",
    success="#87af87",
    warning="#d7af5f",
    error="#d75f5f",
    info="#5f87af",
    muted="#808080",
    border="#5f5f5f",
    nav_key="#af87af",
)


@dataclass(frozen=True)
class IconSet:
    """Iconos de la interfaz."""
    pointer: str
    selected: str      # Opción marcada (checkbox / radio)
    unselected: str
    check: str
    cross: str
    warning: str
    required: str      # Marca de campo requerido
    bar_full: str
    bar_empty: str


ICONS_UNICODE = IconSet(
    pointer="❯",
    selected="◉",
    unselected="○",
    check="✓",
    cross="✗",
    warning="⚠",
    required="*",
    bar_full="█",
    bar_empty="░",
)

ICONS_ASCII = IconSet(
    pointer=">",
    selected="(*)",
    unselected="( )",
    check="+",
    cross="x",
    warning="!",
    required="*",
    bar_full="#",
    bar_empty="-",
)


def supports_unicode() -> bool:
    """Detecta si stdout puede codificar los iconos Unicode."""
    encoding = getattr(sys.stdout, "encoding", None) or "ascii"
    try:
        "❯◉○✓✗⚠█░".encode(encoding)
        return True
    except (UnicodeEncodeError, LookupError):
        return False


_console: Optional[Console] = None
_icons: Optional[IconSet] = None


def get_console() -> Console:
    """Consola compartida (creada al primer uso)."""
    global _console
    if _console is None:
        _console = Console(highlight=False)
    return _console


def get_palette() -> ColorPalette:
    return PALETTE


def get_icons() -> IconSet:
    global _icons
    if _icons is None:
        _icons = ICONS_UNICODE if supports_unicode() else ICONS_ASCII
    return _icons


def progress_bar(fraction: float, width: int = 30) -> Text:
    """Barra de progreso con porcentaje para una fracción en [0, 1]."""
    p = get_palette()
    icons = get_icons()
    fraction = min(max(fraction, 0.0), 1.0)
    filled = int(round(fraction * width))

    bar = Text()
    bar.append(icons.bar_full * filled, style=p.primary)
    bar.append(icons.bar_empty * (width - filled), style=p.muted)
    bar.append(f"  {int(round(fraction * 100))}%", style=p.muted)
    return bar


def print_header(text: str, subtitle: str = None) -> None:
    """Imprime un encabezado en panel."""
    p = get_palette()
    content = Text(text, style=f"bold {p.primary}")
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)
    get_console().print(Panel(content, border_style=p.border, box=box.ROUNDED, padding=(0, 2)))


def print_success(text: str) -> None:
    get_console().print(Text(f"{get_icons().check} {text}", style=f"bold {get_palette().success}"))


def print_error(text: str) -> None:
    get_console().print(Text(f"{get_icons().cross} {text}", style=f"bold {get_palette().error}"))


def print_warning(text: str) -> None:
    get_console().print(Text(f"{get_icons().warning} {text}", style=get_palette().warning))


def print_info(text: str) -> None:
    get_console().print(Text(text, style=get_palette().info))
