"""
Mensajes que recibe el formulario.

Cada mensaje es un valor inmutable que produce exactamente un paso de
transición. Los mensajes de navegación los interceptan el grupo o el
formulario; el resto llega al campo activo.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple


@dataclass(frozen=True)
class KeyMsg:
    """Tecla ya decodificada por el colaborador de entrada.

    key es el nombre de la tecla ("enter", "tab", "shift+tab", "up",
    "ctrl+c", ...) o "runes" cuando se trata de caracteres tipeados, en
    cuyo caso runes contiene el texto.
    """
    key: str
    runes: str = ""

    @property
    def text(self) -> str:
        """Texto con el que se comparan los atajos de teclado."""
        if self.key == "runes":
            return self.runes
        return self.key

    def __str__(self) -> str:
        return self.text


def keys(*runes: str) -> KeyMsg:
    """Construye un KeyMsg con caracteres tipeados."""
    return KeyMsg("runes", "".join(runes))


@dataclass(frozen=True)
class NextFieldMsg:
    """Confirmar el campo activo y avanzar."""


@dataclass(frozen=True)
class PrevFieldMsg:
    """Retroceder al campo anterior."""


@dataclass(frozen=True)
class NextGroupMsg:
    """Avanzar al siguiente grupo visible."""


@dataclass(frozen=True)
class PrevGroupMsg:
    """Retroceder al grupo visible anterior."""


@dataclass(frozen=True)
class ClearErrorsMsg:
    """Limpiar los errores del grupo activo."""


@dataclass(frozen=True)
class SubmitMsg:
    """Confirmar todos los campos visibles y completar."""


@dataclass(frozen=True)
class QuitMsg:
    """Abandonar el formulario."""


@dataclass(frozen=True)
class EditorFinishedMsg:
    """Resultado del editor externo."""
    content: str = ""
    error: Optional[BaseException] = None


@dataclass(frozen=True)
class BatchMsg:
    """Comandos a ejecutar en orden, sin garantía de dependencia entre ellos."""
    cmds: Tuple[Callable[[], Any], ...]


@dataclass(frozen=True)
class SequenceMsg:
    """Comandos a ejecutar estrictamente en orden."""
    cmds: Tuple[Callable[[], Any], ...]


Msg = Any
