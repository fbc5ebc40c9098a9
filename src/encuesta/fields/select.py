"""
Campo de selección única.
"""

from typing import Any, List, Optional, Tuple

import questionary
from rich.text import Text

from encuesta.commands import Cmd, next_field, prev_field
from encuesta.fields.base import Field
from encuesta.fields.choice import ChoiceField
from encuesta.fields.options import Option, OptionList
from encuesta.keys import KeyBinding, KeyMap, matches
from encuesta.messages import KeyMsg
from encuesta.theme import Theme


class Select(ChoiceField):
    """Elegir una opción de una lista."""

    def __init__(self):
        super().__init__()
        self._inline = False

    def with_inline(self, inline: bool = True) -> "Select":
        """Muestra solo la opción actual con flechas (← Opción →)."""
        self._inline = inline
        return self

    def _keymap_for(self, keymap: KeyMap):
        return keymap.select

    def _initialize(self, bound: Any) -> None:
        self._list = OptionList(self._declared)
        if bound is not None:
            self._list.move_to(bound)

    def get_value(self) -> Any:
        current = self._list.current()
        return current.value if current is not None else None

    def set_value(self, value: Any) -> None:
        if not self._list.move_to(value):
            self._list.clear_filter()
            self._list.move_to(value)

    def _handle(self, msg: Any) -> Tuple[Field, Optional[Cmd]]:
        if not isinstance(msg, KeyMsg):
            return self, None
        km = self._keymap
        if matches(msg, km.prev):
            return self, prev_field
        if self._handle_filter(msg):
            return self, None
        if matches(msg, km.next):
            self._list.filtering = False
            if self._list.current() is None and self._list.filter:
                return self, None
            return self, next_field
        if matches(msg, km.up) or (self._inline and msg.text == "left"):
            self._list.up()
        elif matches(msg, km.down) or (self._inline and msg.text == "right"):
            self._list.down()
        return self, None

    def _render_widget(self, theme: Theme, width: Optional[int]) -> Text:
        if self._inline:
            return self._render_inline(theme)

        def marker(opt: Option, is_cursor: bool) -> Text:
            return Text(opt.label, style=theme.cursor() if is_cursor else "")

        return self._render_options(theme, marker)

    def _render_inline(self, theme: Theme) -> Text:
        out = self._render_filter(theme)
        current = self._list.current()
        if current is None:
            out.append("no matches", style=theme.muted())
            return out
        n = len(self._list.visible())
        left = theme.icons.arrow_left if self._list.cursor > 0 else " "
        right = theme.icons.arrow_right if self._list.cursor < n - 1 else " "
        out.append(f"{left} ", style=theme.cursor())
        out.append(current.label, style=theme.input_text())
        out.append(f" {right}", style=theme.cursor())
        return out

    def key_bindings(self) -> List[KeyBinding]:
        km = self._keymap
        if self._list.filtering:
            return self._filter_bindings() + [km.next, km.prev]
        return [km.up, km.down] + self._filter_bindings() + [km.next, km.prev]

    def question(self, style: Any) -> Any:
        choices = [questionary.Choice(o.label, value=o.value) for o in self._list.options]
        current = self._list.current()
        return questionary.select(
            self._title or "Select",
            choices=choices,
            default=next((c for c in choices if current is not None and c.value == current.value), None),
            style=style,
        )
