"""
Campos del formulario.

- base: Clase abstracta Field (capacidades comunes)
- binding: Ref y Accessor para enlazar variables del llamador
- input / text: Entrada de texto de una y varias líneas
- select / multiselect: Selección única y múltiple (con filtro)
- confirm: Sí/No
- note: Pantalla informativa
"""

from encuesta.fields.base import Field
from encuesta.fields.binding import Ref, Accessor, as_accessor
from encuesta.fields.options import Option, OptionList, options
from encuesta.fields.input import Input
from encuesta.fields.text import Text
from encuesta.fields.select import Select
from encuesta.fields.multiselect import MultiSelect
from encuesta.fields.confirm import Confirm
from encuesta.fields.note import Note

__all__ = [
    "Field",
    "Ref",
    "Accessor",
    "as_accessor",
    "Option",
    "OptionList",
    "options",
    "Input",
    "Text",
    "Select",
    "MultiSelect",
    "Confirm",
    "Note",
]
