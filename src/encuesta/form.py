"""
Formulario: controlador de navegación entre grupos.

El entorno entrega un mensaje por vez a Form.update(); el formulario
intercepta los mensajes de grupo, envío y abandono, y deriva el resto al
grupo activo. Cada paso retorna (formulario, comando diferido o None).
"""

import logging
from enum import Enum
from typing import Any, List, Optional, Tuple, Union

from rich.text import Text

from encuesta.commands import Cmd, batch
from encuesta.config import FormSettings
from encuesta.fields.base import Field
from encuesta.fields.text import Text as TextField
from encuesta.group import Group
from encuesta.keys import KeyMap, default_keymap, matches
from encuesta.messages import NextGroupMsg, PrevGroupMsg, QuitMsg, SubmitMsg
from encuesta.theme import Theme, ThemeName, get_theme

logger = logging.getLogger(__name__)


class FormState(Enum):
    """Estado global del formulario."""
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ABORTED = "aborted"


class Form:
    """Secuencia ordenada de grupos con un cursor sobre el grupo activo."""

    def __init__(self, *groups: Group):
        if not groups:
            raise ValueError("Un formulario necesita al menos un grupo")
        self._groups: List[Group] = list(groups)
        self._cursor = 0
        self.state = FormState.IN_PROGRESS
        # Valores por defecto sin leer el entorno (eso es FormSettings.from_env)
        self._settings = FormSettings.model_construct()
        self._theme: Theme = get_theme(self._settings.theme)
        self._keymap: KeyMap = default_keymap()

    # ------------------------------------------------------------------
    # Configuración fluida
    # ------------------------------------------------------------------

    def with_settings(self, settings: FormSettings) -> "Form":
        """Aplica una configuración completa (tema, ayuda, errores, ancho...)."""
        self._settings = settings
        self._theme = get_theme(settings.theme, settings.unicode is not False)
        for group in self._groups:
            group.with_theme(self._theme)
            group.with_show_help(settings.show_help)
            group.with_show_errors(settings.show_errors)
            group.with_width(settings.width)
            if settings.editor:
                for fld in group.fields():
                    if isinstance(fld, TextField):
                        fld.with_editor(settings.editor)
        return self

    def _update_settings(self, **changes: Any) -> "Form":
        return self.with_settings(self._settings.model_copy(update=changes))

    def with_theme(self, theme: Union[Theme, ThemeName, str]) -> "Form":
        if isinstance(theme, Theme):
            self._settings = self._settings.model_copy(update={"theme": theme.name})
            self._theme = theme
            for group in self._groups:
                group.with_theme(theme)
            return self
        return self._update_settings(theme=ThemeName(theme))

    def with_keymap(self, keymap: KeyMap) -> "Form":
        self._keymap = keymap
        for group in self._groups:
            group.with_keymap(keymap)
        return self

    def with_show_help(self, show: bool) -> "Form":
        return self._update_settings(show_help=show)

    def with_show_errors(self, show: bool) -> "Form":
        return self._update_settings(show_errors=show)

    def with_width(self, width: Optional[int]) -> "Form":
        return self._update_settings(width=width)

    def with_accessible(self, accessible: bool) -> "Form":
        """Modo accesible: preguntas línea por línea en lugar del panel."""
        return self._update_settings(accessible=accessible)

    # ------------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------------

    @property
    def settings(self) -> FormSettings:
        return self._settings

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def cursor(self) -> int:
        return self._cursor

    def groups(self) -> List[Group]:
        return list(self._groups)

    def active_group(self) -> Group:
        return self._groups[self._cursor]

    def active_field(self) -> Field:
        return self.active_group().active_field()

    @property
    def done(self) -> bool:
        return self.state is not FormState.IN_PROGRESS

    # ------------------------------------------------------------------
    # Transiciones
    # ------------------------------------------------------------------

    def init(self) -> Optional[Cmd]:
        """Inicializa los campos y entra al primer grupo visible."""
        self.state = FormState.IN_PROGRESS
        cmds = [group.init() for group in self._groups]
        idx = self._find_visible(0, 1)
        if idx is None:
            logger.debug("Ningún grupo visible; formulario completo")
            self._complete()
        else:
            self._enter(idx, first=True)
        return batch(*cmds)

    def _find_visible(self, start: int, step: int) -> Optional[int]:
        """Busca el próximo grupo visible evaluando is_hidden() en este momento."""
        idx = start
        while 0 <= idx < len(self._groups):
            if not self._groups[idx].is_hidden():
                return idx
            logger.debug("Grupo %d oculto, se salta", idx)
            idx += step
        return None

    def _enter(self, idx: int, first: bool) -> None:
        self.active_group().leave()
        self._cursor = idx
        group = self._groups[idx]
        if first:
            group.enter_first()
        else:
            group.enter_last()
        logger.debug("Grupo activo: %d", idx)

    def _complete(self) -> None:
        self.active_group().leave()
        self.state = FormState.COMPLETED
        logger.debug("Formulario completado")

    def _abort(self) -> None:
        self.active_group().leave()
        self.state = FormState.ABORTED
        logger.debug("Formulario abandonado en el grupo %d", self._cursor)

    def _submit(self) -> None:
        for idx, group in enumerate(self._groups):
            if group.is_hidden():
                continue
            bad = group.confirm_all()
            if bad is not None:
                self._enter(idx, first=True)
                group.focus_field(bad)
                return
        self._complete()

    def update(self, msg: Any) -> Tuple["Form", Optional[Cmd]]:
        """Aplica un mensaje; los estados terminales ignoran todo."""
        if self.done:
            return self, None

        if isinstance(msg, QuitMsg) or matches(msg, self._keymap.quit):
            self._abort()
            return self, None

        if isinstance(msg, NextGroupMsg):
            idx = self._find_visible(self._cursor + 1, 1)
            if idx is None:
                self._complete()
            else:
                self._enter(idx, first=True)
            return self, None

        if isinstance(msg, PrevGroupMsg):
            idx = self._find_visible(self._cursor - 1, -1)
            if idx is not None:
                self._enter(idx, first=False)
            return self, None

        if isinstance(msg, SubmitMsg):
            self._submit()
            return self, None

        group, cmd = self.active_group().update(msg)
        self._groups[self._cursor] = group
        return self, cmd

    # ------------------------------------------------------------------
    # Render y ejecución
    # ------------------------------------------------------------------

    def render(self, theme: Optional[Theme] = None, width: Optional[int] = None) -> Text:
        """Grupo activo; vacío cuando el formulario terminó."""
        if self.done:
            return Text()
        return self.active_group().render(theme or self._theme, width or self._settings.width)

    def view(self) -> str:
        """Render como texto plano."""
        return self.render().plain

    def run(self, console: Any = None) -> FormState:
        """Ejecuta el formulario en la terminal y retorna el estado final."""
        from encuesta.runner import run_form
        return run_form(self, console=console)
