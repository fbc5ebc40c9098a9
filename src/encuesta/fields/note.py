"""
Nota informativa (sin valor).
"""

from typing import Any, List, Optional, Tuple

from rich.text import Text

from encuesta.commands import Cmd, next_field, prev_field
from encuesta.fields.base import Field
from encuesta.keys import KeyBinding, KeyMap, matches
from encuesta.theme import Theme


class Note(Field):
    """Pantalla de texto; enter continúa."""

    def __init__(self):
        super().__init__()
        self._next = False
        self._next_label = "Next"

    def with_next(self, show: bool = True) -> "Note":
        """Muestra el botón para continuar (y vuelve la nota navegable)."""
        self._next = show
        return self

    def with_next_label(self, label: str) -> "Note":
        self._next_label = label
        return self

    @property
    def interactive(self) -> bool:
        return self._next

    def _keymap_for(self, keymap: KeyMap):
        return keymap.note

    def _initialize(self, bound: Any) -> None:
        pass

    def get_value(self) -> None:
        return None

    def set_value(self, value: Any) -> None:
        pass

    def confirm(self) -> Optional[str]:
        # Una nota no tiene valor que escribir
        return self.validate()

    def _handle(self, msg: Any) -> Tuple[Field, Optional[Cmd]]:
        km = self._keymap
        if matches(msg, km.prev):
            return self, prev_field
        if matches(msg, km.next):
            return self, next_field
        return self, None

    def _render_widget(self, theme: Theme, width: Optional[int]) -> Text:
        out = Text()
        if self._next:
            out.append("\n")
            out.append(f"  {self._next_label}  ", style=theme.button(self._focused))
        return out

    def key_bindings(self) -> List[KeyBinding]:
        return [self._keymap.next]
