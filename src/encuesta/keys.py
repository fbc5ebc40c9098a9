"""
Atajos de teclado y texto de ayuda.
"""

from dataclasses import dataclass, field
from typing import Tuple

from encuesta.messages import KeyMsg


@dataclass
class KeyBinding:
    """Atajo: teclas que lo activan y cómo se muestra en la ayuda."""
    keys: Tuple[str, ...]
    help_key: str = ""
    help_desc: str = ""
    enabled: bool = True

    def matches(self, msg: KeyMsg) -> bool:
        return self.enabled and msg.text in self.keys


def binding(*keys: str, help: Tuple[str, str] = ("", ""), enabled: bool = True) -> KeyBinding:
    return KeyBinding(keys=tuple(keys), help_key=help[0], help_desc=help[1], enabled=enabled)


def matches(msg: object, *bindings: KeyBinding) -> bool:
    """True si msg es una tecla que activa alguno de los atajos."""
    if not isinstance(msg, KeyMsg):
        return False
    return any(b.matches(msg) for b in bindings)


@dataclass
class InputKeyMap:
    next: KeyBinding = field(default_factory=lambda: binding("enter", "tab", help=("enter", "next")))
    prev: KeyBinding = field(default_factory=lambda: binding("shift+tab", help=("shift+tab", "back")))


@dataclass
class TextKeyMap:
    next: KeyBinding = field(default_factory=lambda: binding("enter", "tab", help=("enter", "next")))
    prev: KeyBinding = field(default_factory=lambda: binding("shift+tab", help=("shift+tab", "back")))
    new_line: KeyBinding = field(default_factory=lambda: binding("alt+enter", "ctrl+j", help=("alt+enter / ctrl+j", "new line")))
    editor: KeyBinding = field(default_factory=lambda: binding("ctrl+e", help=("ctrl+e", "open editor")))


@dataclass
class SelectKeyMap:
    next: KeyBinding = field(default_factory=lambda: binding("enter", "tab", help=("enter", "select")))
    prev: KeyBinding = field(default_factory=lambda: binding("shift+tab", help=("shift+tab", "back")))
    up: KeyBinding = field(default_factory=lambda: binding("up", "k", "ctrl+p", help=("↑", "up")))
    down: KeyBinding = field(default_factory=lambda: binding("down", "j", "ctrl+n", help=("↓", "down")))
    filter: KeyBinding = field(default_factory=lambda: binding("/", help=("/", "filter")))
    clear_filter: KeyBinding = field(default_factory=lambda: binding("esc", help=("esc", "clear filter")))


@dataclass
class MultiSelectKeyMap:
    toggle: KeyBinding = field(default_factory=lambda: binding("x", " ", help=("x", "toggle")))
    up: KeyBinding = field(default_factory=lambda: binding("up", "k", "ctrl+p", help=("↑", "up")))
    down: KeyBinding = field(default_factory=lambda: binding("down", "j", "ctrl+n", help=("↓", "down")))
    filter: KeyBinding = field(default_factory=lambda: binding("/", help=("/", "filter")))
    clear_filter: KeyBinding = field(default_factory=lambda: binding("esc", help=("esc", "clear filter")))
    select_all: KeyBinding = field(default_factory=lambda: binding("ctrl+a", help=("ctrl+a", "select all")))
    next: KeyBinding = field(default_factory=lambda: binding("enter", "tab", help=("enter", "confirm")))
    prev: KeyBinding = field(default_factory=lambda: binding("shift+tab", help=("shift+tab", "back")))


@dataclass
class ConfirmKeyMap:
    toggle: KeyBinding = field(default_factory=lambda: binding("left", "right", "h", "l", help=("←/→", "toggle")))
    accept: KeyBinding = field(default_factory=lambda: binding("y", "Y", help=("y", "yes")))
    reject: KeyBinding = field(default_factory=lambda: binding("n", "N", help=("n", "no")))
    next: KeyBinding = field(default_factory=lambda: binding("enter", "tab", help=("enter", "next")))
    prev: KeyBinding = field(default_factory=lambda: binding("shift+tab", help=("shift+tab", "back")))


@dataclass
class NoteKeyMap:
    next: KeyBinding = field(default_factory=lambda: binding("enter", "tab", help=("enter", "next")))
    prev: KeyBinding = field(default_factory=lambda: binding("shift+tab"))


@dataclass
class KeyMap:
    """Atajos de todo el formulario."""
    quit: KeyBinding = field(default_factory=lambda: binding("ctrl+c", help=("ctrl+c", "quit")))
    input: InputKeyMap = field(default_factory=InputKeyMap)
    text: TextKeyMap = field(default_factory=TextKeyMap)
    select: SelectKeyMap = field(default_factory=SelectKeyMap)
    multi_select: MultiSelectKeyMap = field(default_factory=MultiSelectKeyMap)
    confirm: ConfirmKeyMap = field(default_factory=ConfirmKeyMap)
    note: NoteKeyMap = field(default_factory=NoteKeyMap)


def default_keymap() -> KeyMap:
    return KeyMap()
