"""
encuesta - Formularios interactivos de varios pasos para la terminal.

Un formulario (Form) es una secuencia de grupos (Group), cada uno una
pantalla de campos (Field). Los valores se escriben en variables del
llamador solo al confirmar cada campo.
"""

__version__ = "0.1.0"

from encuesta.config import FormSettings
from encuesta.fields import (
    Accessor,
    Confirm,
    Field,
    Input,
    MultiSelect,
    Note,
    Option,
    Ref,
    Select,
    Text,
    options,
)
from encuesta.form import Form, FormState
from encuesta.group import Group
from encuesta.messages import KeyMsg, keys

__all__ = [
    "FormSettings",
    "Accessor",
    "Confirm",
    "Field",
    "Input",
    "MultiSelect",
    "Note",
    "Option",
    "Ref",
    "Select",
    "Text",
    "options",
    "Form",
    "FormState",
    "Group",
    "KeyMsg",
    "keys",
]
