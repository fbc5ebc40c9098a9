"""
Campo de texto de una línea.
"""

from typing import Any, List, Optional, Tuple

import questionary
from rich.text import Text

from encuesta.commands import Cmd, next_field, prev_field
from encuesta.fields.base import Field
from encuesta.fields.editing import TextBuffer, apply_edit_key
from encuesta.keys import KeyBinding, KeyMap, matches
from encuesta.messages import KeyMsg
from encuesta.theme import Theme
from encuesta.validators import run_rule


class Input(Field):
    """Entrada de texto libre en una línea."""

    def __init__(self):
        super().__init__()
        self._buffer = TextBuffer()
        self._placeholder = ""
        self._prompt = "> "
        self._password = False
        self._inline = False

    def with_placeholder(self, placeholder: str) -> "Input":
        self._placeholder = placeholder
        return self

    def with_prompt(self, prompt: str) -> "Input":
        self._prompt = prompt
        return self

    def with_char_limit(self, limit: int) -> "Input":
        self._buffer.char_limit = limit or None
        return self

    def with_password(self, password: bool = True) -> "Input":
        """Oculta lo tipeado con asteriscos."""
        self._password = password
        return self

    def with_inline(self, inline: bool = True) -> "Input":
        """Título y entrada en la misma línea."""
        self._inline = inline
        return self

    def _keymap_for(self, keymap: KeyMap):
        return keymap.input

    def _initialize(self, bound: Any) -> None:
        self._buffer.reset("" if bound is None else str(bound))

    def get_value(self) -> str:
        return self._buffer.value

    def set_value(self, value: Any) -> None:
        self._buffer.reset("" if value is None else str(value))

    def _handle(self, msg: Any) -> Tuple[Field, Optional[Cmd]]:
        km = self._keymap
        if matches(msg, km.prev):
            return self, prev_field
        if matches(msg, km.next):
            return self, next_field
        if isinstance(msg, KeyMsg):
            apply_edit_key(self._buffer, msg)
        return self, None

    def render(self, theme: Optional[Theme] = None, width: Optional[int] = None) -> Text:
        if not self._inline:
            return super().render(theme, width)
        theme = theme or self._theme
        content = Text()
        if self._title:
            content.append(f"{self._title} ", style=theme.title(self._focused))
        content.append_text(self._render_widget(theme, width))
        if self._error and self._show_errors:
            content.append(f" {theme.icons.error} {self._error}", style=theme.error())
        if self._description:
            content.append("\n")
            content.append(self._description, style=theme.description())
        return self._frame(content, theme, width or self._width)

    def _render_widget(self, theme: Theme, width: Optional[int]) -> Text:
        line = Text(self._prompt, style=theme.cursor())
        value = self._buffer.value
        if not value and self._placeholder:
            if self._focused:
                line.append(self._placeholder[:1], style=theme.text_cursor())
                line.append(self._placeholder[1:], style=theme.muted())
            else:
                line.append(self._placeholder, style=theme.muted())
            return line

        shown = "*" * len(value) if self._password else value
        pos = self._buffer.pos
        start = 0
        if width:
            room = max(1, width - len(self._prompt) - 3)
            start = max(0, pos - room + 1)
            shown = shown[start:start + room]
        cursor = pos - start
        line.append(shown[:cursor], style=theme.input_text())
        if self._focused:
            line.append(shown[cursor:cursor + 1] or " ", style=theme.text_cursor())
            line.append(shown[cursor + 1:], style=theme.input_text())
        else:
            line.append(shown[cursor:], style=theme.input_text())
        return line

    def key_bindings(self) -> List[KeyBinding]:
        return [self._keymap.next, self._keymap.prev]

    def question(self, style: Any) -> Any:
        limit = self._buffer.char_limit

        def check(text: str):
            if limit and len(text) > limit:
                return f"must be at most {limit} characters"
            return run_rule(self._rule, text) or True

        factory = questionary.password if self._password else questionary.text
        return factory(
            self._title or self._prompt,
            default=self._buffer.value,
            validate=check,
            style=style,
        )
