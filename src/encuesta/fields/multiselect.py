"""
Campo de selección múltiple con límite opcional.
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


class MultiSelect(ChoiceField):
    """Marcar varias opciones de una lista."""

    def __init__(self):
        super().__init__()
        self._filterable = False
        self._limit: Optional[int] = None

    def with_limit(self, limit: Optional[int]) -> "MultiSelect":
        """Máximo de opciones marcadas (None o 0 = sin límite)."""
        self._limit = limit or None
        return self

    @property
    def limit(self) -> Optional[int]:
        return self._limit

    def _keymap_for(self, keymap: KeyMap):
        return keymap.multi_select

    def _initialize(self, bound: Any) -> None:
        self._list = OptionList(self._declared)
        if bound:
            for opt in self._list.options:
                if opt.value in bound:
                    opt.selected = True

    def get_value(self) -> List[Any]:
        return self._list.selected_values()

    def set_value(self, value: Any) -> None:
        values = list(value or [])
        for opt in self._list.options:
            opt.selected = opt.value in values

    def _can_select(self) -> bool:
        return self._limit is None or self._list.count_selected() < self._limit

    def toggle(self) -> bool:
        """
        Invierte la opción bajo el cursor.

        Desmarcar siempre se permite; marcar se rechaza en silencio
        cuando ya se alcanzó el límite.

        Returns:
            True si la opción cambió
        """
        opt = self._list.current()
        if opt is None:
            return False
        if opt.selected:
            opt.selected = False
            return True
        if not self._can_select():
            return False
        opt.selected = True
        return True

    def toggle_all(self) -> None:
        """Marca las opciones visibles (hasta el límite) o las desmarca si ya lo están todas."""
        visible = self._list.visible()
        if visible and all(o.selected for o in visible):
            for opt in visible:
                opt.selected = False
            return
        for opt in visible:
            if not opt.selected and self._can_select():
                opt.selected = True

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
            return self, next_field
        if matches(msg, km.toggle):
            self.toggle()
        elif matches(msg, km.select_all):
            self.toggle_all()
        elif matches(msg, km.up):
            self._list.up()
        elif matches(msg, km.down):
            self._list.down()
        return self, None

    def _render_widget(self, theme: Theme, width: Optional[int]) -> Text:
        def marker(opt: Option, is_cursor: bool) -> Text:
            line = Text()
            if opt.selected:
                line.append(f"{theme.icons.selected} ", style=theme.selected())
            else:
                line.append(f"{theme.icons.unselected} ", style=theme.muted())
            line.append(opt.label, style=theme.cursor() if is_cursor else "")
            return line

        return self._render_options(theme, marker)

    def key_bindings(self) -> List[KeyBinding]:
        km = self._keymap
        if self._list.filtering:
            return self._filter_bindings() + [km.next, km.prev]
        return [km.toggle, km.up, km.down] + self._filter_bindings() + [km.next, km.prev]

    def question(self, style: Any) -> Any:
        limit = self._limit
        choices = [
            questionary.Choice(o.label, value=o.value, checked=o.selected)
            for o in self._list.options
        ]

        def check(values: list):
            if limit and len(values) > limit:
                return f"select at most {limit}"
            return True

        return questionary.checkbox(
            self._title or "Select",
            choices=choices,
            validate=check,
            style=style,
        )
