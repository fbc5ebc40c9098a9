"""
Estilo de questionary para el modo accesible, derivado del mismo Theme
que usa el formulario interactivo.
"""

from questionary import Style

from encuesta.theme.palette import Theme


def _fg(style: str) -> str:
    # "bold #rrggbb" (rich) -> "fg:#rrggbb bold" (prompt_toolkit)
    parts = style.split()
    colors = [f"fg:{p}" for p in parts if p.startswith("#")]
    attrs = [p for p in parts if not p.startswith("#") and p != "reverse"]
    return " ".join(colors + attrs)


def get_questionary_style(theme: Theme) -> Style:
    """Style de questionary con los roles del tema."""
    return Style([
        ("qmark", _fg(theme.cursor())),
        ("question", "bold"),
        ("answer", _fg(theme.selected())),
        ("pointer", _fg(theme.cursor())),
        ("highlighted", _fg(theme.title(True))),
        ("selected", _fg(theme.selected())),
        ("instruction", _fg(theme.muted()) + " italic"),
        ("text", _fg(theme.input_text())),
        ("disabled", _fg(theme.muted()) + " italic"),
        ("separator", _fg(theme.focus_bar())),
        ("validation-toolbar", _fg(theme.error())),
    ])
