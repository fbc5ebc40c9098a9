"""
Comportamiento común de Select y MultiSelect: opciones, cursor y filtro.
"""

from typing import Any, Iterable, List, Optional, Union

from rich.text import Text

from encuesta.fields.base import Field
from encuesta.fields.options import Option, OptionList
from encuesta.keys import matches
from encuesta.messages import KeyMsg
from encuesta.theme import Theme


class ChoiceField(Field):
    """Campo con lista de opciones navegable y filtrable."""

    def __init__(self):
        self._declared: List[Option] = []
        self._list = OptionList()
        self._filterable = True
        self._height: Optional[int] = None
        super().__init__()

    def with_options(self, *items: Union[Option, str, Iterable[Option]]) -> "ChoiceField":
        """Acepta Option, textos o listas de Option (ej: options("a", "b"))."""
        declared: List[Option] = []
        for item in items:
            if isinstance(item, Option):
                declared.append(item)
            elif isinstance(item, str):
                declared.append(Option(item, item))
            else:
                declared.extend(item)
        self._declared = declared
        self._list = OptionList(declared)
        return self

    def with_filterable(self, filterable: bool = True) -> "ChoiceField":
        self._filterable = filterable
        return self

    def with_height(self, height: Optional[int]) -> "ChoiceField":
        """Cantidad máxima de opciones visibles a la vez."""
        self._height = height
        return self

    @property
    def options(self) -> List[Option]:
        return self._list.options

    @property
    def filtering(self) -> bool:
        return self._list.filtering

    @property
    def filter_text(self) -> str:
        return self._list.filter

    @property
    def cursor(self) -> int:
        return self._list.cursor

    def blur(self) -> None:
        self._list.filtering = False
        super().blur()

    def _handle_filter(self, msg: Any) -> bool:
        """
        Teclas del modo filtro y del borrado de filtro.

        Returns:
            True si la tecla fue consumida
        """
        km = self._keymap
        if not isinstance(msg, KeyMsg):
            return False

        if self._list.filtering:
            if matches(msg, km.clear_filter):
                self._list.clear_filter()
                return True
            if msg.key == "backspace":
                if self._list.filter:
                    self._list.set_filter(self._list.filter[:-1])
                else:
                    self._list.filtering = False
                return True
            if msg.key == "runes":
                self._list.set_filter(self._list.filter + msg.runes)
                return True
            if msg.key == "up":
                self._list.up()
                return True
            if msg.key == "down":
                self._list.down()
                return True
            return False

        if self._filterable and matches(msg, km.filter):
            self._list.filtering = True
            return True
        if self._list.filter and matches(msg, km.clear_filter):
            self._list.clear_filter()
            return True
        return False

    def _filter_bindings(self) -> list:
        km = self._keymap
        bindings = []
        if self._filterable and not self._list.filtering:
            bindings.append(km.filter)
        if self._list.filter or self._list.filtering:
            bindings.append(km.clear_filter)
        return bindings

    def _render_filter(self, theme: Theme) -> Text:
        line = Text()
        if not (self._list.filtering or self._list.filter):
            return line
        line.append("/", style=theme.cursor())
        line.append(self._list.filter, style=theme.input_text())
        if self._list.filtering and self._focused:
            line.append(" ", style=theme.text_cursor())
        line.append("\n")
        return line

    def _window(self, visible: List[Option]) -> range:
        """Rango de opciones a mostrar según la altura configurada."""
        if not self._height or len(visible) <= self._height:
            return range(len(visible))
        start = min(max(0, self._list.cursor - self._height + 1), len(visible) - self._height)
        return range(start, start + self._height)

    def _render_options(self, theme: Theme, marker) -> Text:
        out = self._render_filter(theme)
        visible = self._list.visible()
        if not visible:
            out.append("no matches", style=theme.muted())
            return out
        for n, idx in enumerate(self._window(visible)):
            if n:
                out.append("\n")
            opt = visible[idx]
            is_cursor = idx == self._list.cursor
            if is_cursor:
                out.append(f"{theme.icons.pointer} ", style=theme.cursor())
            else:
                out.append("  ")
            out.append_text(marker(opt, is_cursor))
        return out
