"""
Bucle principal: lee teclas, actualiza el formulario y redibuja.
"""

import logging
from typing import Callable, Optional

from rich.console import Console
from rich.live import Live

from encuesta.commands import Cmd, drain
from encuesta.form import Form, FormState
from encuesta.messages import KeyMsg, Msg
from encuesta.terminal import read_key
from encuesta.theme import get_theme, supports_unicode

logger = logging.getLogger(__name__)


def _executor(live: Live) -> Callable[[Cmd], Optional[Msg]]:
    """Ejecuta comandos; los que necesitan la terminal suspenden el Live."""
    def execute(cmd: Cmd) -> Optional[Msg]:
        if getattr(cmd, "suspends_terminal", False):
            live.stop()
            try:
                return cmd()
            finally:
                live.start()
        return cmd()
    return execute


def run_form(
    form: Form,
    console: Optional[Console] = None,
    key_reader: Callable[[], KeyMsg] = read_key,
) -> FormState:
    """
    Ejecuta un formulario en la terminal.

    Args:
        form: Formulario a ejecutar
        console: Consola Rich (por defecto una nueva)
        key_reader: Fuente de teclas decodificadas

    Returns:
        FormState.COMPLETED o FormState.ABORTED
    """
    if form.settings.accessible:
        from encuesta.accessible import run_accessible
        return run_accessible(form, console=console)

    console = console or Console()
    if form.settings.unicode is None and not supports_unicode():
        form.with_theme(get_theme(form.settings.theme, unicode=False))

    with Live(console=console, auto_refresh=False, transient=True) as live:
        execute = _executor(live)
        form = drain(form, form.init(), execute)
        live.update(form.render(), refresh=True)

        while not form.done:
            msg = key_reader()
            form, cmd = form.update(msg)
            form = drain(form, cmd, execute)
            live.update(form.render(), refresh=True)

    logger.debug("Formulario terminado: %s", form.state.value)
    return form.state
