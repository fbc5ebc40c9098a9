"""
Modo accesible: el formulario como preguntas línea por línea.

Usa questionary en lugar del panel interactivo. Respeta las mismas
reglas de validación, visibilidad de grupos y confirmación por campo.
"""

import logging
from typing import Optional

from rich.console import Console

from encuesta.form import Form, FormState
from encuesta.fields.base import Field
from encuesta.theme import get_questionary_style

logger = logging.getLogger(__name__)


def _ask_field(fld: Field, style, console: Console) -> bool:
    """
    Pregunta un campo hasta que confirme.

    Returns:
        False si el usuario abandonó (ctrl+c)
    """
    question = fld.question(style)
    if question is None:
        # Nota: solo se muestra
        if fld.title:
            console.print(fld.title, style="bold")
        if fld.description:
            console.print(fld.description)
        return True

    while True:
        answer = question.ask()
        if answer is None:
            return False
        fld.set_value(answer)
        err = fld.confirm()
        if err is None:
            return True
        console.print(f"* {err}", style="bold red")
        question = fld.question(style)


def run_accessible(form: Form, console: Optional[Console] = None) -> FormState:
    """
    Ejecuta el formulario en modo accesible.

    La visibilidad de cada grupo se evalúa justo antes de preguntarlo, de
    modo que respuestas anteriores pueden ocultar o mostrar grupos.
    """
    console = console or Console()
    style = get_questionary_style(form.theme)
    form.init()

    for idx, group in enumerate(form.groups()):
        if group.is_hidden():
            logger.debug("Grupo %d oculto, se salta", idx)
            continue
        if group.title:
            console.print(group.title, style="bold")
        for fld in group.fields():
            if not _ask_field(fld, style, console):
                form.state = FormState.ABORTED
                return form.state

    form.state = FormState.COMPLETED
    return form.state
