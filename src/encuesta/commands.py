"""
Comandos diferidos.

Un comando es una función sin argumentos que el entorno ejecuta y cuyo
resultado (un mensaje o None) vuelve a entrar al formulario.
"""

import logging
import os
import shlex
import subprocess
import tempfile
from typing import Any, Callable, Optional, Sequence

from encuesta.messages import (
    BatchMsg,
    ClearErrorsMsg,
    EditorFinishedMsg,
    Msg,
    NextFieldMsg,
    NextGroupMsg,
    PrevFieldMsg,
    PrevGroupMsg,
    QuitMsg,
    SequenceMsg,
    SubmitMsg,
)

logger = logging.getLogger(__name__)

Cmd = Callable[[], Optional[Msg]]


def next_field() -> Msg:
    return NextFieldMsg()


def prev_field() -> Msg:
    return PrevFieldMsg()


def next_group() -> Msg:
    return NextGroupMsg()


def prev_group() -> Msg:
    return PrevGroupMsg()


def clear_errors() -> Msg:
    return ClearErrorsMsg()


def submit() -> Msg:
    return SubmitMsg()


def quit_form() -> Msg:
    return QuitMsg()


def _compact(cmds: Sequence[Optional[Cmd]]) -> tuple:
    return tuple(c for c in cmds if c is not None)


def batch(*cmds: Optional[Cmd]) -> Optional[Cmd]:
    """Agrupa comandos; None si no queda ninguno."""
    valid = _compact(cmds)
    if not valid:
        return None
    if len(valid) == 1:
        return valid[0]
    return lambda: BatchMsg(valid)


def sequence(*cmds: Optional[Cmd]) -> Optional[Cmd]:
    """Agrupa comandos que deben aplicarse estrictamente en orden."""
    valid = _compact(cmds)
    if not valid:
        return None
    return lambda: SequenceMsg(valid)


def _run(cmd: Cmd) -> Optional[Msg]:
    return cmd()


def drain(model: Any, cmd: Optional[Cmd], execute: Callable[[Cmd], Optional[Msg]] = _run) -> Any:
    """
    Ejecuta un comando y aplica sus consecuencias sobre el modelo.

    Los comandos compuestos se resuelven en orden: cada subcomando y todos
    sus comandos derivados se aplican antes de pasar al siguiente.

    Args:
        model: Objeto con método update(msg) -> (model, cmd)
        cmd: Comando a ejecutar (puede ser None)
        execute: Función que ejecuta un comando simple

    Returns:
        El modelo actualizado
    """
    if cmd is None:
        return model

    msg = execute(cmd)
    if msg is None:
        return model

    if isinstance(msg, (BatchMsg, SequenceMsg)):
        for sub in msg.cmds:
            model = drain(model, sub, execute)
        return model

    model, follow = model.update(msg)
    return drain(model, follow, execute)


class ExecCommand:
    """Comando que necesita la terminal para sí mismo (ej: un editor)."""

    suspends_terminal = True

    def __init__(self, func: Callable[[], Msg]):
        self.func = func

    def __call__(self) -> Msg:
        return self.func()


def _default_editor() -> str:
    return os.environ.get("VISUAL") or os.environ.get("EDITOR") or "nano"


def open_editor(content: str, editor: Optional[str] = None, extension: str = ".md") -> ExecCommand:
    """
    Comando que abre un editor externo sobre el contenido dado.

    El resultado siempre es un único EditorFinishedMsg; los fallos viajan
    en su campo error.
    """
    command = editor or _default_editor()

    def run() -> Msg:
        path = None
        try:
            with tempfile.NamedTemporaryFile("w", suffix=extension, delete=False, encoding="utf-8") as tmp:
                tmp.write(content)
                path = tmp.name
            logger.debug("Abriendo editor %s sobre %s", command, path)
            subprocess.run(shlex.split(command) + [path], check=True)
            with open(path, encoding="utf-8") as fh:
                edited = fh.read()
            return EditorFinishedMsg(content=edited)
        except (OSError, ValueError, subprocess.SubprocessError) as exc:
            logger.warning("Falló el editor %s: %s", command, exc)
            return EditorFinishedMsg(error=exc)
        finally:
            if path is not None and os.path.exists(path):
                os.unlink(path)

    return ExecCommand(run)
