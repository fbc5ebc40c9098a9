"""
Campo de texto de varias líneas con editor externo.
"""

from typing import Any, List, Optional, Tuple

import questionary
from rich.text import Text as RichText

from encuesta.commands import Cmd, next_field, open_editor, prev_field
from encuesta.fields.base import Field
from encuesta.fields.editing import TextBuffer, apply_edit_key
from encuesta.keys import KeyBinding, KeyMap, matches
from encuesta.messages import EditorFinishedMsg, KeyMsg
from encuesta.theme import Theme
from encuesta.validators import run_rule


class Text(Field):
    """Entrada de texto libre en varias líneas."""

    def __init__(self):
        super().__init__()
        self._buffer = TextBuffer(multiline=True)
        self._placeholder = ""
        self._lines = 5
        self._editor: Optional[str] = None
        self._editor_extension = ".md"

    def with_placeholder(self, placeholder: str) -> "Text":
        self._placeholder = placeholder
        return self

    def with_char_limit(self, limit: int) -> "Text":
        self._buffer.char_limit = limit or None
        return self

    def with_lines(self, lines: int) -> "Text":
        """Cantidad de líneas visibles."""
        self._lines = max(1, lines)
        return self

    def with_editor(self, command: Optional[str], extension: str = ".md") -> "Text":
        """Editor externo (por defecto $VISUAL / $EDITOR)."""
        self._editor = command
        self._editor_extension = extension
        return self

    def _keymap_for(self, keymap: KeyMap):
        return keymap.text

    def _initialize(self, bound: Any) -> None:
        self._buffer.reset("" if bound is None else str(bound))

    def get_value(self) -> str:
        return self._buffer.value

    def set_value(self, value: Any) -> None:
        self._buffer.reset("" if value is None else str(value))

    def _handle(self, msg: Any) -> Tuple[Field, Optional[Cmd]]:
        if isinstance(msg, EditorFinishedMsg):
            if msg.error is not None:
                self._error = f"editor failed: {msg.error}"
            else:
                self.set_value(msg.content.rstrip("\n"))
                self._error = None
            return self, None

        km = self._keymap
        if matches(msg, km.prev):
            return self, prev_field
        if matches(msg, km.new_line):
            self._buffer.insert("\n")
            return self, None
        if matches(msg, km.editor):
            return self, open_editor(self._buffer.value, self._editor, self._editor_extension)
        if matches(msg, km.next):
            return self, next_field
        if isinstance(msg, KeyMsg):
            apply_edit_key(self._buffer, msg)
        return self, None

    def _render_widget(self, theme: Theme, width: Optional[int]) -> RichText:
        out = RichText()
        if not self._buffer.value and self._placeholder:
            out.append(self._placeholder, style=theme.muted())
            return out

        lines = self._buffer.lines()
        row, col = self._buffer.row_col()
        # Ventana de líneas visibles alrededor del cursor
        first = max(0, min(row - self._lines + 1, len(lines) - self._lines))
        first = max(0, min(first, row))
        for idx in range(first, min(len(lines), first + self._lines)):
            if idx > first:
                out.append("\n")
            line = lines[idx]
            if self._focused and idx == row:
                out.append(line[:col], style=theme.input_text())
                out.append(line[col:col + 1] or " ", style=theme.text_cursor())
                out.append(line[col + 1:], style=theme.input_text())
            else:
                out.append(line, style=theme.input_text())
        return out

    def key_bindings(self) -> List[KeyBinding]:
        km = self._keymap
        return [km.next, km.new_line, km.editor, km.prev]

    def question(self, style: Any) -> Any:
        limit = self._buffer.char_limit

        def check(text: str):
            if limit and len(text) > limit:
                return f"must be at most {limit} characters"
            return run_rule(self._rule, text) or True

        return questionary.text(
            self._title or "Text",
            default=self._buffer.value,
            multiline=True,
            validate=check,
            style=style,
        )
