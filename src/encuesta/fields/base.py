"""
Clase base de los campos del formulario.

Todos los campos exponen el mismo conjunto de capacidades (init,
handle_input, render, validate, confirm, focus/blur) para que el grupo
y el formulario nunca inspeccionen la variante concreta.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from rich.text import Text

from encuesta.commands import Cmd
from encuesta.fields.binding import Accessor, as_accessor
from encuesta.keys import KeyBinding, KeyMap, default_keymap
from encuesta.theme import Theme, get_theme
from encuesta.validators import Rule, run_rule


class Field(ABC):
    """Unidad interactiva del formulario."""

    def __init__(self):
        self._key = ""
        self._title = ""
        self._description = ""
        self._rule: Optional[Rule] = None
        self._accessor = Accessor()
        self._error: Optional[str] = None
        self._focused = False
        self._theme: Theme = get_theme()
        self._width: Optional[int] = None
        self._show_errors = True
        self._keymap = self._keymap_for(default_keymap())

    # ------------------------------------------------------------------
    # Configuración fluida
    # ------------------------------------------------------------------

    def with_key(self, key: str) -> "Field":
        """Identificador del campo (opcional)."""
        self._key = key
        return self

    def with_title(self, title: str) -> "Field":
        self._title = title
        return self

    def with_description(self, description: str) -> "Field":
        self._description = description
        return self

    def with_validation(self, rule: Rule) -> "Field":
        """Regla de validación aplicada al confirmar."""
        self._rule = rule
        return self

    def with_value(self, target: Any) -> "Field":
        """Variable del llamador donde se escribe el valor confirmado."""
        self._accessor = as_accessor(target)
        return self

    def with_theme(self, theme: Theme) -> "Field":
        self._theme = theme
        return self

    def with_keymap(self, keymap: KeyMap) -> "Field":
        self._keymap = self._keymap_for(keymap)
        return self

    def with_width(self, width: Optional[int]) -> "Field":
        self._width = width
        return self

    def with_show_errors(self, show: bool) -> "Field":
        """Mostrar u ocultar el error junto al título."""
        self._show_errors = show
        return self

    # ------------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------------

    @property
    def key(self) -> str:
        return self._key

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def focused(self) -> bool:
        return self._focused

    @property
    def interactive(self) -> bool:
        """False si el cursor del grupo puede saltar este campo."""
        return True

    # ------------------------------------------------------------------
    # Capacidades
    # ------------------------------------------------------------------

    def init(self) -> Optional[Cmd]:
        """Prepara el estado interno a partir de la variable enlazada."""
        self._error = None
        self._initialize(self._accessor.load())
        return None

    def handle_input(self, msg: Any) -> Tuple["Field", Optional[Cmd]]:
        """Consume un mensaje; un campo sin foco lo ignora."""
        if not self._focused:
            return self, None
        return self._handle(msg)

    def validate(self) -> Optional[str]:
        """
        Aplica la regla al valor de trabajo.

        Returns:
            None si es válido, o el mensaje de error (que queda guardado)
        """
        self._error = run_rule(self._rule, self.get_value())
        return self._error

    def confirm(self) -> Optional[str]:
        """Valida y, solo si es válido, escribe el valor en la variable enlazada."""
        err = self.validate()
        if err is None:
            self._accessor.commit(self.get_value())
        return err

    def focus(self) -> None:
        self._focused = True

    def blur(self) -> None:
        self._focused = False

    def clear_error(self) -> None:
        self._error = None

    def render(self, theme: Optional[Theme] = None, width: Optional[int] = None) -> Text:
        """Título, descripción, error y widget en su estado actual."""
        theme = theme or self._theme
        width = width or self._width

        content = Text()
        if self._title:
            content.append(self._title, style=theme.title(self._focused))
        show_error = self._error and self._show_errors
        if show_error:
            if self._title:
                content.append(" ")
            content.append(f"{theme.icons.error} {self._error}", style=theme.error())
        if self._title or show_error:
            content.append("\n")
        if self._description:
            content.append(self._description, style=theme.description())
            content.append("\n")
        content.append_text(self._render_widget(theme, width))
        content.rstrip()
        return self._frame(content, theme, width)

    def _frame(self, content: Text, theme: Theme, width: Optional[int]) -> Text:
        """Agrega la barra de foco (o sangría) a cada línea."""
        prefix = f"{theme.icons.focus_bar} " if self._focused else "  "
        framed = Text()
        for idx, line in enumerate(content.split("\n", allow_blank=True)):
            if idx:
                framed.append("\n")
            framed.append(prefix, style=theme.focus_bar())
            framed.append_text(line)
        if width:
            lines = framed.split("\n", allow_blank=True)
            for line in lines:
                line.truncate(width, overflow="ellipsis")
            framed = Text("\n").join(lines)
        return framed

    # ------------------------------------------------------------------
    # A implementar por cada variante
    # ------------------------------------------------------------------

    @abstractmethod
    def _keymap_for(self, keymap: KeyMap) -> Any:
        """Sección del mapa de teclas que usa la variante."""

    @abstractmethod
    def _initialize(self, bound: Any) -> None:
        """Inicializa el estado de trabajo desde el valor enlazado (o None)."""

    @abstractmethod
    def _handle(self, msg: Any) -> Tuple["Field", Optional[Cmd]]:
        """Maneja un mensaje estando enfocado."""

    @abstractmethod
    def _render_widget(self, theme: Theme, width: Optional[int]) -> Text:
        """Widget interactivo (sin título ni descripción)."""

    @abstractmethod
    def get_value(self) -> Any:
        """Valor de trabajo actual."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """Reemplaza el valor de trabajo (no confirma)."""

    @abstractmethod
    def key_bindings(self) -> List[KeyBinding]:
        """Atajos activos, en el orden de la línea de ayuda."""

    def question(self, style: Any) -> Any:
        """Pregunta de questionary para el modo accesible (None si no hay entrada)."""
        return None
