"""
Buffer de edición compartido por los campos de texto.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from encuesta.messages import KeyMsg


@dataclass
class TextBuffer:
    """Texto en edición con posición de cursor (índice en caracteres)."""
    value: str = ""
    pos: int = 0
    char_limit: Optional[int] = None
    multiline: bool = False

    def reset(self, value: str) -> None:
        if not self.multiline:
            value = value.replace("\n", " ")
        if self.char_limit:
            value = value[:self.char_limit]
        self.value = value
        self.pos = len(value)

    # Inserción y borrado
    def insert(self, text: str) -> None:
        if not self.multiline:
            text = text.replace("\n", " ").replace("\r", "")
        if self.char_limit:
            room = self.char_limit - len(self.value)
            if room <= 0:
                return
            text = text[:room]
        self.value = self.value[:self.pos] + text + self.value[self.pos:]
        self.pos += len(text)

    def backspace(self) -> None:
        if self.pos > 0:
            self.value = self.value[:self.pos - 1] + self.value[self.pos:]
            self.pos -= 1

    def delete(self) -> None:
        if self.pos < len(self.value):
            self.value = self.value[:self.pos] + self.value[self.pos + 1:]

    def kill_to_start(self) -> None:
        start = self._line_start()
        self.value = self.value[:start] + self.value[self.pos:]
        self.pos = start

    def kill_to_end(self) -> None:
        end = self._line_end()
        self.value = self.value[:self.pos] + self.value[end:]

    def delete_word(self) -> None:
        """Borra la palabra anterior al cursor (como ctrl+w)."""
        i = self.pos
        while i > 0 and self.value[i - 1].isspace():
            i -= 1
        while i > 0 and not self.value[i - 1].isspace():
            i -= 1
        self.value = self.value[:i] + self.value[self.pos:]
        self.pos = i

    # Movimiento
    def left(self) -> None:
        self.pos = max(0, self.pos - 1)

    def right(self) -> None:
        self.pos = min(len(self.value), self.pos + 1)

    def home(self) -> None:
        self.pos = self._line_start()

    def end(self) -> None:
        self.pos = self._line_end()

    def up(self) -> None:
        row, col = self.row_col()
        if row > 0:
            self._goto(row - 1, col)

    def down(self) -> None:
        row, col = self.row_col()
        if row < len(self.lines()) - 1:
            self._goto(row + 1, col)

    # Consultas
    def lines(self) -> list:
        return self.value.split("\n")

    def row_col(self) -> Tuple[int, int]:
        before = self.value[:self.pos]
        row = before.count("\n")
        col = len(before) - (before.rfind("\n") + 1)
        return row, col

    def _line_start(self) -> int:
        return self.value.rfind("\n", 0, self.pos) + 1

    def _line_end(self) -> int:
        end = self.value.find("\n", self.pos)
        return len(self.value) if end == -1 else end

    def _goto(self, row: int, col: int) -> None:
        lines = self.lines()
        offset = sum(len(line) + 1 for line in lines[:row])
        self.pos = offset + min(col, len(lines[row]))


_EDIT_KEYS = {
    "left": TextBuffer.left,
    "ctrl+b": TextBuffer.left,
    "right": TextBuffer.right,
    "ctrl+f": TextBuffer.right,
    "home": TextBuffer.home,
    "ctrl+a": TextBuffer.home,
    "end": TextBuffer.end,
    "backspace": TextBuffer.backspace,
    "ctrl+h": TextBuffer.backspace,
    "delete": TextBuffer.delete,
    "ctrl+d": TextBuffer.delete,
    "ctrl+u": TextBuffer.kill_to_start,
    "ctrl+k": TextBuffer.kill_to_end,
    "ctrl+w": TextBuffer.delete_word,
    "alt+backspace": TextBuffer.delete_word,
}

_MULTILINE_KEYS = {
    "up": TextBuffer.up,
    "down": TextBuffer.down,
}


def apply_edit_key(buffer: TextBuffer, msg: KeyMsg) -> bool:
    """
    Aplica una tecla de edición al buffer.

    Returns:
        True si la tecla fue consumida
    """
    if msg.key == "runes":
        buffer.insert(msg.runes)
        return True
    action = _EDIT_KEYS.get(msg.key)
    if action is None and buffer.multiline:
        action = _MULTILINE_KEYS.get(msg.key)
    if action is None:
        return False
    action(buffer)
    return True
