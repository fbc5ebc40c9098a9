"""
CLI de encuesta.

Uso:
    encuesta --help
    encuesta demo
    encuesta demo --theme nord --accessible
    encuesta themes
"""

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from encuesta.config import FormSettings
from encuesta.form import FormState
from encuesta.theme import THEMES, ThemeName

app = typer.Typer(
    name="encuesta",
    help="Formularios interactivos de varios pasos para la terminal.",
    no_args_is_help=True,
)


@app.command()
def demo(
    theme: Annotated[Optional[ThemeName], typer.Option(help="Tema de colores")] = None,
    accessible: Annotated[bool, typer.Option("--accessible", help="Preguntas línea por línea")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Registro de depuración")] = False,
):
    """
    Ejecuta el formulario de ejemplo (pedido de tacos).

    Ejemplo:
        encuesta demo
        encuesta demo --theme monokai
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    from encuesta.demo import build_taco_form, describe_order

    settings = FormSettings.from_env(theme=theme, accessible=accessible or None)
    form, order = build_taco_form()
    form.with_settings(settings)

    state = form.run()
    if state is FormState.ABORTED:
        typer.echo("Pedido cancelado.")
        raise typer.Exit(1)

    typer.echo(describe_order(order))


@app.command()
def themes():
    """Lista los temas disponibles."""
    table = Table(title="Temas")
    table.add_column("Nombre")
    table.add_column("Título")
    table.add_column("Cursor")
    table.add_column("Error")

    for name, palette in THEMES.items():
        table.add_row(
            name.value,
            f"[{palette.title}]{palette.title}[/]",
            f"[{palette.cursor}]{palette.cursor}[/]",
            f"[{palette.error}]{palette.error}[/]",
        )
    Console().print(table)


if __name__ == "__main__":
    app()
