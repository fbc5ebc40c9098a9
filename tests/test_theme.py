"""Tests para el sistema de temas."""

import io
from unittest.mock import patch

from questionary import Style

from encuesta.theme import (
    ICONS_ASCII,
    ICONS_UNICODE,
    THEMES,
    ThemeName,
    get_icons,
    get_questionary_style,
    get_theme,
    reset_icons_cache,
    supports_unicode,
)


class TestGetTheme:
    """Tests de get_theme."""

    def test_all_named_themes(self):
        for name in ThemeName:
            theme = get_theme(name)
            assert theme.name is name
            assert theme.palette is THEMES[name]

    def test_by_string(self):
        assert get_theme("monokai").name is ThemeName.MONOKAI

    def test_icons(self):
        assert get_theme(unicode=True).icons is ICONS_UNICODE
        assert get_theme(unicode=False).icons is ICONS_ASCII

    def test_styles_use_palette(self):
        theme = get_theme(ThemeName.NORD)
        assert theme.palette.error in theme.error()
        assert theme.palette.title in theme.title(True)
        assert theme.title(False) == "bold"


class TestIcons:
    """Tests de detección de Unicode."""

    def test_ascii_terminal(self):
        reset_icons_cache()
        fake = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
        with patch("encuesta.theme.icons.sys.stdout", fake):
            assert supports_unicode() is False
            assert get_icons() is ICONS_ASCII
        reset_icons_cache()

    def test_utf8_terminal(self):
        reset_icons_cache()
        fake = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
        with patch("encuesta.theme.icons.sys.stdout", fake):
            assert supports_unicode() is True
        reset_icons_cache()


class TestQuestionaryStyle:
    def test_returns_style(self):
        style = get_questionary_style(get_theme())
        assert isinstance(style, Style)

    def test_style_entries_use_palette(self):
        """Test que los colores de la paleta llegan al estilo de questionary."""
        theme = get_theme(ThemeName.MONOKAI)
        style = dict(get_questionary_style(theme).style_rules)
        assert style["qmark"] == f"fg:{theme.palette.cursor} bold"
        assert style["instruction"] == f"fg:{theme.palette.muted} italic"
