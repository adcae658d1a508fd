"""
Utilidades de terminal: limpiar pantalla y capturar teclas.
"""

import os
import sys


# Secuencias de flechas (tras ESC [ en Unix, tras 0xe0 en Windows)
_UNIX_ARROWS = {"A": "up", "B": "down", "C": "right", "D": "left"}
_WIN_ARROWS = {b"H": "up", b"P": "down", b"M": "right", b"K": "left"}

_SPECIAL = {
    "\r": "enter",
    "\n": "enter",
    " ": "space",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
}


def clear_screen() -> None:
    """Limpia la pantalla de la terminal (equivale a volver al inicio)."""
    os.system('cls' if os.name == 'nt' else 'clear')


def get_key() -> str:
    """
    Captura una tecla del usuario.

    Returns:
        'up', 'down', 'left', 'right', 'enter', 'space', 'tab',
        'backspace', 'esc', o el caracter tal cual (letras en su caso
        original; los handlers comparan en minúscula donde corresponde)
    """
    if os.name == 'nt':
        import msvcrt

        key = msvcrt.getch()
        if key in (b'\xe0', b'\x00'):
            return _WIN_ARROWS.get(msvcrt.getch(), "")
        if key == b'\x1b':
            return 'esc'
        char = key.decode('utf-8', errors='ignore')
        return _SPECIAL.get(char, char)

    import tty
    import termios

    fd = sys.stdin.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        key = sys.stdin.read(1)
        if key == '\x1b':
            if sys.stdin.read(1) == '[':
                return _UNIX_ARROWS.get(sys.stdin.read(1), 'esc')
            return 'esc'
        if key == '\x03':
            raise KeyboardInterrupt
        return _SPECIAL.get(key, key)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
