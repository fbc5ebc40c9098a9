"""
Paletas y el valor Theme que recibe cada render.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from encuesta.theme.icons import IconSet, ICONS_UNICODE, get_icons


class ThemeName(str, Enum):
    """Temas disponibles."""
    DEFAULT = "default"
    MONOKAI = "monokai"
    NORD = "nord"
    MINIMAL = "minimal"


@dataclass(frozen=True)
class ColorPalette:
    """Colores por rol dentro del formulario."""
    title: str          # Título del campo enfocado
    description: str
    cursor: str         # Puntero y marcadores de opciones
    selected: str       # Opciones marcadas
    error: str
    muted: str          # Placeholder, ayuda, opciones sin marcar
    focus_bar: str
    help_key: str
    input_text: str
    button: str         # Botón activo (Confirm, Note)


# Pasteles
THEME_DEFAULT = ColorPalette(
    title="#5f87af",
    description="#87afaf",
    cursor="#af87af",
    selected="#87af87",
    error="#d75f5f",
    muted="#808080",
    focus_bar="#5f5f5f",
    help_key="#af87af",
    input_text="#ffffff",
    button="#5f87af",
)

THEME_MONOKAI = ColorPalette(
    title="#66d9ef",
    description="#a6e22e",
    cursor="#ae81ff",
    selected="#a6e22e",
    error="#f92672",
    muted="#75715e",
    focus_bar="#49483e",
    help_key="#ae81ff",
    input_text="#f8f8f2",
    button="#66d9ef",
)

THEME_NORD = ColorPalette(
    title="#88c0d0",
    description="#81a1c1",
    cursor="#b48ead",
    selected="#a3be8c",
    error="#bf616a",
    muted="#4c566a",
    focus_bar="#3b4252",
    help_key="#b48ead",
    input_text="#eceff4",
    button="#88c0d0",
)

# Grises con un solo acento
THEME_MINIMAL = ColorPalette(
    title="#ffffff",
    description="#b0b0b0",
    cursor="#5fafff",
    selected="#87d787",
    error="#ff8787",
    muted="#606060",
    focus_bar="#404040",
    help_key="#5fafff",
    input_text="#ffffff",
    button="#5fafff",
)

THEMES = {
    ThemeName.DEFAULT: THEME_DEFAULT,
    ThemeName.MONOKAI: THEME_MONOKAI,
    ThemeName.NORD: THEME_NORD,
    ThemeName.MINIMAL: THEME_MINIMAL,
}


@dataclass
class Theme:
    """
    Tema de un formulario: paleta más iconos.

    Es un valor explícito que el formulario recibe y pasa a cada render;
    no hay estado global de estilos.
    """
    name: ThemeName = ThemeName.DEFAULT
    palette: ColorPalette = field(default_factory=lambda: THEME_DEFAULT)
    icons: IconSet = field(default_factory=lambda: ICONS_UNICODE)

    def title(self, focused: bool) -> str:
        return f"bold {self.palette.title}" if focused else "bold"

    def description(self) -> str:
        return self.palette.description

    def error(self) -> str:
        return f"bold {self.palette.error}"

    def focus_bar(self) -> str:
        return self.palette.focus_bar

    def cursor(self) -> str:
        return f"bold {self.palette.cursor}"

    def selected(self) -> str:
        return f"bold {self.palette.selected}"

    def muted(self) -> str:
        return self.palette.muted

    def input_text(self) -> str:
        return f"bold {self.palette.input_text}"

    def text_cursor(self) -> str:
        return f"reverse {self.palette.input_text}"

    def help_key(self) -> str:
        return f"bold {self.palette.help_key}"

    def button(self, active: bool) -> str:
        if active:
            return f"bold reverse {self.palette.button}"
        return self.palette.muted


def get_theme(name: ThemeName = ThemeName.DEFAULT, unicode: Optional[bool] = True) -> Theme:
    """
    Construye un tema por nombre.

    Args:
        name: Nombre del tema
        unicode: True fuerza iconos Unicode, False ASCII, None detecta la terminal
    """
    name = ThemeName(name)
    return Theme(name=name, palette=THEMES[name], icons=get_icons(unicode))
