"""
Campo de confirmación Sí/No.
"""

from typing import Any, List, Optional, Tuple

import questionary
from rich.text import Text

from encuesta.commands import Cmd, next_field, prev_field
from encuesta.fields.base import Field
from encuesta.keys import KeyBinding, KeyMap, matches
from encuesta.theme import Theme


class Confirm(Field):
    """Pregunta booleana con dos botones."""

    def __init__(self):
        super().__init__()
        self._value = False
        self._affirmative = "Yes"
        self._negative = "No"

    def with_affirmative(self, label: str) -> "Confirm":
        self._affirmative = label
        return self

    def with_negative(self, label: str) -> "Confirm":
        self._negative = label
        return self

    def _keymap_for(self, keymap: KeyMap):
        return keymap.confirm

    def _initialize(self, bound: Any) -> None:
        self._value = bool(bound)

    def get_value(self) -> bool:
        return self._value

    def set_value(self, value: Any) -> None:
        self._value = bool(value)

    def _handle(self, msg: Any) -> Tuple[Field, Optional[Cmd]]:
        km = self._keymap
        if matches(msg, km.prev):
            return self, prev_field
        if matches(msg, km.next):
            return self, next_field
        if matches(msg, km.toggle):
            self._value = not self._value
        elif matches(msg, km.accept):
            self._value = True
        elif matches(msg, km.reject):
            self._value = False
        return self, None

    def _render_widget(self, theme: Theme, width: Optional[int]) -> Text:
        out = Text()
        out.append(f"  {self._affirmative}  ", style=theme.button(self._value))
        out.append("   ")
        out.append(f"  {self._negative}  ", style=theme.button(not self._value))
        return out

    def key_bindings(self) -> List[KeyBinding]:
        km = self._keymap
        return [km.toggle, km.next, km.prev]

    def question(self, style: Any) -> Any:
        return questionary.confirm(self._title or "Confirm", default=self._value, style=style)
