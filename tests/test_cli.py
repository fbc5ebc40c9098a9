"""Tests para cli.py."""

from unittest.mock import patch

from typer.testing import CliRunner

from encuesta.cli import app
from encuesta.form import FormState
from encuesta.theme import ThemeName


runner = CliRunner()


class TestDemo:
    """Tests del comando demo."""

    def test_completed(self):
        with patch("encuesta.form.Form.run", return_value=FormState.COMPLETED):
            result = runner.invoke(app, ["demo"])

        assert result.exit_code == 0
        assert "taco" in result.output

    def test_aborted(self):
        with patch("encuesta.form.Form.run", return_value=FormState.ABORTED):
            result = runner.invoke(app, ["demo"])

        assert result.exit_code == 1
        assert "Pedido cancelado." in result.output

    def test_options_reach_settings(self, monkeypatch):
        """Test que --theme y --accessible llegan a la configuración."""
        monkeypatch.delenv("ENCUESTA_THEME", raising=False)
        seen = []

        def fake_run(form, *args, **kwargs):
            seen.append(form.settings)
            return FormState.COMPLETED

        with patch("encuesta.form.Form.run", autospec=True, side_effect=fake_run):
            result = runner.invoke(app, ["demo", "--theme", "nord", "--accessible"])

        assert result.exit_code == 0
        assert seen[0].theme is ThemeName.NORD
        assert seen[0].accessible is True


class TestThemes:
    def test_lists_themes(self):
        result = runner.invoke(app, ["themes"])
        assert result.exit_code == 0
        for name in ThemeName:
            assert name.value in result.output
