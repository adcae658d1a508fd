"""
dynaform - Formularios multi-sección definidos por esquema.
"""

__version__ = "0.1.0"
