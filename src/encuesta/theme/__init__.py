"""
Sistema de temas para los formularios.

El paquete esta organizado en modulos:
- palette: Paletas de colores y el valor Theme que recibe cada render
- icons: Iconos Unicode con fallback ASCII
- styles: Estilo de questionary para el modo accesible
"""

from encuesta.theme.icons import (
    IconSet,
    ICONS_UNICODE,
    ICONS_ASCII,
    get_icons,
    supports_unicode,
    reset_icons_cache,
)
from encuesta.theme.palette import (
    ThemeName,
    ColorPalette,
    THEME_DEFAULT,
    THEME_MONOKAI,
    THEME_NORD,
    THEME_MINIMAL,
    THEMES,
    Theme,
    get_theme,
)
from encuesta.theme.styles import get_questionary_style

__all__ = [
    # icons
    "IconSet",
    "ICONS_UNICODE",
    "ICONS_ASCII",
    "get_icons",
    "supports_unicode",
    "reset_icons_cache",
    # palette
    "ThemeName",
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_MONOKAI",
    "THEME_NORD",
    "THEME_MINIMAL",
    "THEMES",
    "Theme",
    "get_theme",
    # styles
    "get_questionary_style",
]
