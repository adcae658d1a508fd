"""
Configuración de logging.

Los módulos usan `logging.getLogger(__name__)`; aquí se instala un único
RichHandler sobre el logger raíz del paquete.
"""

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "dynaform"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configura el logger del paquete. Idempotente.

    Args:
        verbose: DEBUG si True, WARNING en caso contrario
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        from dynaform.cli.theme import get_console

        handler = RichHandler(
            console=get_console(),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)

    return logger
