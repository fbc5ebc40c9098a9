"""
Grupo: una pantalla de campos que se navegan juntos.
"""

from typing import Any, Callable, List, Optional, Tuple

from rich.text import Text

from encuesta.commands import Cmd, batch, clear_errors, next_group, prev_group, sequence
from encuesta.fields.base import Field
from encuesta.keys import KeyMap
from encuesta.messages import ClearErrorsMsg, NextFieldMsg, PrevFieldMsg
from encuesta.theme import Theme, get_theme


class Group:
    """Secuencia ordenada de campos con un cursor sobre el campo enfocado."""

    def __init__(self, *fields: Field):
        if not fields:
            raise ValueError("Un grupo necesita al menos un campo")
        self._fields: List[Field] = list(fields)
        self._cursor = 0
        self._title = ""
        self._description = ""
        self._hide = False
        self._hide_func: Optional[Callable[[], bool]] = None
        self._show_help = True
        self._theme: Theme = get_theme()
        self._width: Optional[int] = None

    # ------------------------------------------------------------------
    # Configuración fluida
    # ------------------------------------------------------------------

    def with_title(self, title: str) -> "Group":
        self._title = title
        return self

    def with_description(self, description: str) -> "Group":
        self._description = description
        return self

    def with_hide(self, hide: bool) -> "Group":
        """Oculta el grupo (si no hay predicado dinámico)."""
        self._hide = hide
        return self

    def with_hide_func(self, func: Optional[Callable[[], bool]]) -> "Group":
        """Predicado evaluado cada vez que el formulario considera entrar al grupo."""
        self._hide_func = func
        return self

    def with_show_help(self, show: bool) -> "Group":
        self._show_help = show
        return self

    def with_show_errors(self, show: bool) -> "Group":
        for fld in self._fields:
            fld.with_show_errors(show)
        return self

    def with_theme(self, theme: Theme) -> "Group":
        self._theme = theme
        for fld in self._fields:
            fld.with_theme(theme)
        return self

    def with_keymap(self, keymap: KeyMap) -> "Group":
        for fld in self._fields:
            fld.with_keymap(keymap)
        return self

    def with_width(self, width: Optional[int]) -> "Group":
        self._width = width
        for fld in self._fields:
            fld.with_width(width)
        return self

    # ------------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------------

    @property
    def title(self) -> str:
        return self._title

    @property
    def cursor(self) -> int:
        return self._cursor

    def fields(self) -> List[Field]:
        return list(self._fields)

    def active_field(self) -> Field:
        return self._fields[self._cursor]

    def is_hidden(self) -> bool:
        """
        Visibilidad actual del grupo.

        Un predicado dinámico, si existe, decide siempre; el indicador
        estático solo cuenta cuando no hay predicado.
        """
        if self._hide_func is not None:
            return bool(self._hide_func())
        return self._hide

    def errors(self) -> List[str]:
        return [f.error for f in self._fields if f.error]

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def _interactive(self) -> List[int]:
        return [i for i, f in enumerate(self._fields) if f.interactive]

    def _move_to(self, idx: int) -> None:
        self.active_field().blur()
        self._cursor = idx
        self.active_field().focus()

    def next(self) -> bool:
        """Avanza al siguiente campo interactivo; False si ya está en el último."""
        for idx in self._interactive():
            if idx > self._cursor:
                self._move_to(idx)
                return True
        return False

    def previous(self) -> bool:
        """Retrocede al campo interactivo anterior; False si ya está en el primero."""
        for idx in reversed(self._interactive()):
            if idx < self._cursor:
                self._move_to(idx)
                return True
        return False

    def enter_first(self) -> None:
        """Enfoca el primer campo interactivo (o el primero si no hay)."""
        indices = self._interactive()
        self.leave()
        self._cursor = indices[0] if indices else 0
        self.active_field().focus()

    def enter_last(self) -> None:
        """Enfoca el último campo interactivo (o el último si no hay)."""
        indices = self._interactive()
        self.leave()
        self._cursor = indices[-1] if indices else len(self._fields) - 1
        self.active_field().focus()

    def leave(self) -> None:
        for fld in self._fields:
            fld.blur()

    # ------------------------------------------------------------------
    # Validación
    # ------------------------------------------------------------------

    def validate_active(self) -> Optional[str]:
        return self.active_field().validate()

    def confirm_all(self) -> Optional[int]:
        """
        Confirma todos los campos en orden.

        Returns:
            Índice del primer campo inválido, o None si todos confirmaron
        """
        for idx, fld in enumerate(self._fields):
            if fld.confirm() is not None:
                return idx
        return None

    def focus_field(self, idx: int) -> None:
        self.leave()
        self._cursor = idx
        self.active_field().focus()

    # ------------------------------------------------------------------
    # Mensajes
    # ------------------------------------------------------------------

    def init(self) -> Optional[Cmd]:
        return batch(*(fld.init() for fld in self._fields))

    def update(self, msg: Any) -> Tuple["Group", Optional[Cmd]]:
        if isinstance(msg, NextFieldMsg):
            if self.active_field().confirm() is not None:
                return self, None
            if self.next():
                return self, None
            return self, sequence(clear_errors, next_group)

        if isinstance(msg, PrevFieldMsg):
            if self.previous():
                return self, None
            return self, prev_group

        if isinstance(msg, ClearErrorsMsg):
            for fld in self._fields:
                fld.clear_error()
            return self, None

        fld, cmd = self.active_field().handle_input(msg)
        self._fields[self._cursor] = fld
        return self, cmd

    # ------------------------------------------------------------------
    # Render
    # ------------------------------------------------------------------

    def render(self, theme: Optional[Theme] = None, width: Optional[int] = None) -> Text:
        theme = theme or self._theme
        width = width or self._width

        out = Text()
        if self._title:
            out.append(self._title, style=theme.title(True))
            out.append("\n")
        if self._description:
            out.append(self._description, style=theme.description())
            out.append("\n")
        if self._title or self._description:
            out.append("\n")

        for idx, fld in enumerate(self._fields):
            if idx:
                out.append("\n\n")
            out.append_text(fld.render(theme, width))

        if self._show_help:
            help_line = self.help(theme)
            if help_line.plain:
                out.append("\n\n")
                out.append_text(help_line)
        return out

    def help(self, theme: Optional[Theme] = None) -> Text:
        """Línea de ayuda del campo activo."""
        theme = theme or self._theme
        line = Text(" ")
        bindings = [b for b in self.active_field().key_bindings() if b.enabled and b.help_key]
        for idx, b in enumerate(bindings):
            if idx:
                line.append(f" {theme.icons.separator} ", style=theme.muted())
            line.append(b.help_key, style=theme.help_key())
            line.append(f" {b.help_desc}", style=theme.muted())
        if not bindings:
            return Text()
        return line
