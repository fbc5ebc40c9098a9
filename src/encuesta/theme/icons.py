"""
Iconos del formulario, en Unicode o ASCII según la terminal.
"""

import codecs
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

# Caracteres que debe poder escribir la terminal para usar ICONS_UNICODE
_PROBE = "┃✓•←→↑↓"


@dataclass(frozen=True)
class IconSet:
    """Iconos que usan los renders."""
    pointer: str        # Cursor en listas de opciones
    selected: str       # Opción marcada
    unselected: str     # Opción sin marcar
    focus_bar: str      # Margen del campo enfocado
    error: str          # Prefijo de errores
    separator: str      # Entre atajos de la línea de ayuda
    arrow_left: str     # Select en línea
    arrow_right: str


ICONS_UNICODE = IconSet(
    pointer=">",
    selected="✓",
    unselected="•",
    focus_bar="┃",
    error="*",
    separator="•",
    arrow_left="←",
    arrow_right="→",
)

ICONS_ASCII = IconSet(
    pointer=">",
    selected="[x]",
    unselected="[ ]",
    focus_bar="|",
    error="*",
    separator="-",
    arrow_left="<",
    arrow_right=">",
)


@lru_cache(maxsize=1)
def supports_unicode() -> bool:
    """True si stdout puede codificar los iconos Unicode (se calcula una vez)."""
    encoding = getattr(sys.stdout, "encoding", None) or "ascii"
    try:
        codecs.encode(_PROBE, encoding)
    except (UnicodeEncodeError, LookupError):
        return False
    return True


def reset_icons_cache() -> None:
    """Olvida la detección previa (ej: tras redirigir stdout)."""
    supports_unicode.cache_clear()


def get_icons(unicode: Optional[bool] = None) -> IconSet:
    """
    Conjunto de iconos.

    Args:
        unicode: True/False fuerza el conjunto; None detecta la terminal
    """
    if unicode is None:
        unicode = supports_unicode()
    return ICONS_UNICODE if unicode else ICONS_ASCII
