"""Permite ejecutar: python -m encuesta"""

from encuesta.cli import app

app()
