"""Tests para Group."""

import pytest

from encuesta.commands import clear_errors, next_group, prev_group
from encuesta.fields import Input, Note, Ref
from encuesta.group import Group
from encuesta.messages import ClearErrorsMsg, KeyMsg, NextFieldMsg, PrevFieldMsg, SequenceMsg, keys
from encuesta.validators import not_empty


@pytest.fixture
def group():
    """Grupo de tres campos con una nota no navegable en el medio."""
    g = Group(
        Input().with_title("First"),
        Note().with_title("Info"),
        Input().with_title("Last"),
    )
    g.init()
    g.enter_first()
    return g


class TestConstruction:
    """Tests de construcción."""

    def test_requires_fields(self):
        """Test que un grupo vacío es un error de programación."""
        with pytest.raises(ValueError):
            Group()

    def test_fields_in_order(self, group):
        """Test orden de campos."""
        assert [f.title for f in group.fields()] == ["First", "Info", "Last"]


class TestCursor:
    """Tests del cursor del grupo."""

    def test_enter_first_focuses_one_field(self, group):
        """Test que hay exactamente un campo enfocado."""
        assert group.cursor == 0
        assert [f.focused for f in group.fields()] == [True, False, False]

    def test_next_skips_non_interactive(self, group):
        """Test que el cursor salta la nota."""
        assert group.next() is True
        assert group.cursor == 2
        assert group.active_field().title == "Last"

    def test_next_at_end(self, group):
        """Test que en el último campo next retorna False."""
        group.next()
        assert group.next() is False
        assert group.cursor == 2

    def test_previous(self, group):
        """Test retroceso."""
        group.next()
        assert group.previous() is True
        assert group.cursor == 0
        assert group.previous() is False

    def test_enter_last(self, group):
        """Test entrar por el final."""
        group.enter_last()
        assert group.cursor == 2
        assert [f.focused for f in group.fields()] == [False, False, True]

    def test_only_notes(self):
        """Test grupo sin campos interactivos."""
        g = Group(Note().with_title("A"), Note().with_title("B"))
        g.enter_first()
        assert g.cursor == 0
        g.enter_last()
        assert g.cursor == 1


class TestVisibility:
    """Tests de is_hidden()."""

    def test_visible_by_default(self):
        assert Group(Input()).is_hidden() is False

    def test_static_hide(self):
        assert Group(Input()).with_hide(True).is_hidden() is True

    def test_predicate(self):
        """Test predicado dinámico re-evaluado en cada consulta."""
        state = {"hide": True}
        g = Group(Input()).with_hide_func(lambda: state["hide"])
        assert g.is_hidden() is True
        state["hide"] = False
        assert g.is_hidden() is False

    def test_predicate_overrides_static_flag(self):
        """Test que el predicado decide aunque contradiga el indicador."""
        g = Group(Input()).with_hide(True).with_hide_func(lambda: False)
        assert g.is_hidden() is False


class TestUpdate:
    """Tests de Group.update()."""

    def test_next_field_confirms_and_moves(self):
        """Test que NextFieldMsg confirma y avanza."""
        value = Ref("")
        g = Group(Input().with_value(value), Input())
        g.init()
        g.enter_first()
        g, _ = g.update(keys("abc"))
        g, cmd = g.update(NextFieldMsg())

        assert cmd is None
        assert value.value == "abc"
        assert g.cursor == 1

    def test_next_field_stays_on_error(self):
        """Test que un error de validación no mueve el cursor."""
        g = Group(Input().with_validation(not_empty("required")), Input())
        g.init()
        g.enter_first()
        g, cmd = g.update(NextFieldMsg())

        assert cmd is None
        assert g.cursor == 0
        assert g.errors() == ["required"]

    def test_next_field_at_end_requests_next_group(self, group):
        """Test que al final pide limpiar errores y pasar de grupo, en ese orden."""
        group.next()
        _, cmd = group.update(NextFieldMsg())
        msg = cmd()

        assert isinstance(msg, SequenceMsg)
        assert msg.cmds == (clear_errors, next_group)

    def test_prev_field_at_start_requests_prev_group(self, group):
        """Test que al inicio pide el grupo anterior."""
        _, cmd = group.update(PrevFieldMsg())
        assert cmd is prev_group

    def test_prev_field_does_not_validate(self):
        """Test que retroceder no valida ni escribe."""
        value = Ref("")
        g = Group(Input(), Input().with_value(value).with_validation(not_empty()))
        g.init()
        g.enter_last()
        g, _ = g.update(keys("zz"))
        g, cmd = g.update(PrevFieldMsg())

        assert cmd is None
        assert g.cursor == 0
        assert value.value == ""
        assert g.errors() == []

    def test_clear_errors(self):
        """Test ClearErrorsMsg limpia todos los errores."""
        g = Group(Input().with_validation(not_empty("required")))
        g.init()
        g.enter_first()
        g.validate_active()
        assert g.errors() == ["required"]

        g, _ = g.update(ClearErrorsMsg())
        assert g.errors() == []

    def test_other_messages_reach_active_field(self, group):
        """Test que las teclas llegan al campo activo."""
        group, _ = group.update(keys("hey"))
        assert group.active_field().get_value() == "hey"
        assert group.fields()[2].get_value() == ""

    def test_confirm_all(self):
        """Test confirm_all retorna el primer campo inválido."""
        g = Group(Input(), Input().with_validation(not_empty()))
        g.init()
        assert g.confirm_all() == 1


class TestRender:
    """Tests de render del grupo."""

    def test_title_fields_and_help(self, theme):
        """Test título, campos separados y ayuda."""
        g = Group(Input().with_title("One"), Input().with_title("Two")).with_title("Details").with_description("All of them")
        g.init()
        g.enter_first()

        view = g.render(theme).plain
        assert view.startswith("Details\nAll of them\n")
        assert "┃ One" in view
        assert "  Two" in view
        assert view.rstrip().endswith("enter next • shift+tab back")

    def test_description_without_title(self, theme):
        """Test que la descripción se muestra aunque no haya título."""
        g = Group(Input()).with_description("Solo descripción")
        g.init()
        g.enter_first()

        view = g.render(theme).plain
        assert view.startswith("Solo descripción\n\n")
        assert "enter next" in view

    def test_hide_help(self, theme):
        """Test que with_show_help(False) oculta la ayuda."""
        g = Group(Input()).with_show_help(False)
        g.init()
        g.enter_first()
        assert "enter next" not in g.render(theme).plain

    def test_help_follows_active_field(self, theme):
        """Test que la ayuda corresponde al campo activo."""
        from encuesta.fields import Confirm

        g = Group(Input(), Confirm())
        g.init()
        g.enter_first()
        g.next()
        assert "←/→ toggle" in g.help(theme).plain

    def test_keymap_propagates(self, theme):
        """Test mapa de teclas personalizado."""
        from encuesta.keys import KeyMap, binding

        keymap = KeyMap()
        keymap.input.next = binding("ctrl+n", help=("ctrl+n", "forward"))
        g = Group(Input(), Input()).with_keymap(keymap)
        g.init()
        g.enter_first()

        g, cmd = g.update(KeyMsg("ctrl+n"))
        assert cmd is not None
        assert "ctrl+n forward" in g.help(theme).plain
