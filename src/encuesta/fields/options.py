"""
Opciones de los campos de selección y su filtrado.
"""

from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Optional

# Valor por defecto de Option: se reemplaza por el texto visible
_LABEL = object()


@dataclass
class Option:
    """Una opción: texto visible y valor subyacente (por defecto, el texto)."""
    label: str
    value: Any = _LABEL
    selected: bool = False
    matches: bool = True  # Coincide con el filtro actual

    def __post_init__(self):
        if self.value is _LABEL:
            self.value = self.label

    def with_selected(self, selected: bool = True) -> "Option":
        self.selected = selected
        return self


def options(*labels: str) -> List[Option]:
    """Opciones cuyo valor es el mismo texto visible."""
    return [Option(label, label) for label in labels]


class OptionList:
    """Lista de opciones con filtro y cursor sobre las opciones visibles."""

    def __init__(self, items: Iterable[Option] = ()):
        self.options: List[Option] = [replace(o) for o in items]
        self.filter = ""
        self.filtering = False
        self.cursor = 0

    def visible(self) -> List[Option]:
        return [o for o in self.options if o.matches]

    def current(self) -> Optional[Option]:
        visible = self.visible()
        if not visible:
            return None
        return visible[min(self.cursor, len(visible) - 1)]

    def set_filter(self, text: str) -> None:
        """Filtra por texto (sin distinguir mayúsculas) y vuelve el cursor a la primera coincidencia."""
        self.filter = text
        needle = text.lower()
        for opt in self.options:
            opt.matches = needle in opt.label.lower()
        self.cursor = 0

    def clear_filter(self) -> None:
        self.set_filter("")
        self.filtering = False

    def up(self) -> bool:
        if self.cursor > 0:
            self.cursor -= 1
            return True
        return False

    def down(self) -> bool:
        if self.cursor < len(self.visible()) - 1:
            self.cursor += 1
            return True
        return False

    def move_to(self, value: Any) -> bool:
        """Ubica el cursor en la opción visible con ese valor."""
        for idx, opt in enumerate(self.visible()):
            if opt.value == value:
                self.cursor = idx
                return True
        return False

    def selected_values(self) -> List[Any]:
        return [o.value for o in self.options if o.selected]

    def count_selected(self) -> int:
        return sum(1 for o in self.options if o.selected)
