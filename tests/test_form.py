"""Tests para Form: navegación entre grupos y estados finales."""

import pytest

from encuesta.config import FormSettings
from encuesta.fields import Confirm, Input, Ref
from encuesta.form import Form, FormState
from encuesta.group import Group
from encuesta.messages import KeyMsg, NextGroupMsg, PrevGroupMsg, QuitMsg, SubmitMsg, keys
from encuesta.theme import ThemeName
from encuesta.validators import not_empty


def titled_group(title, *extra):
    return Group(Input().with_title(title), *extra)


class TestTacoOrder:
    """Escenario completo del formulario de tacos."""

    def test_first_group(self, taco):
        """Test que arranca en tortilla y base."""
        form, _ = taco
        view = form.view()

        assert "Shell?" in view
        assert "Our tortillas are made fresh in-house every day." in view
        assert "Base" in view
        assert "↑ up • ↓ down • / filter • enter select • shift+tab back" in view

    def test_full_order(self, taco, step):
        """Test recorrido completo con error de validación en el medio."""
        form, order = taco

        # Tortilla dura: error y el cursor no se mueve
        form = step(form, keys("j"))
        form = step(form, KeyMsg("tab"))
        assert "* we're out of hard shells, sorry" in form.view()
        assert form.cursor == 0
        assert form.active_group().cursor == 0

        form = step(form, keys("k"))
        form = step(form, KeyMsg("enter"))
        assert "┃ > Chicken" in form.view()
        assert "we're out of hard shells" not in form.view()

        form = step(form, KeyMsg("enter"))
        view = form.view()
        assert form.cursor == 1
        assert "Toppings" in view
        assert "Choose up to 4." in view
        assert "> ✓ Lettuce" in view
        assert "  ✓ Tomatoes" in view

        form = step(form, keys("j"))
        form = step(form, keys("j"))
        assert "> • Corn" in form.view()

        form = step(form, keys("x"))
        assert "> ✓ Corn" in form.view()

        form = step(form, KeyMsg("enter"))
        view = form.view()
        assert "What's your name?" in view
        assert "Special Instructions" in view
        assert "Would you like 15% off?" in view
        assert "> Margaret Thatcher" in view
        assert "enter next • shift+tab back" in view

        form = step(form, keys("G", "l", "e", "n"))
        assert "Glen" in form.view()
        # El nombre se escribe recién al confirmar el campo
        assert order.name == ""

        form = step(form, KeyMsg("enter"))
        assert order.taco.shell == "Soft"
        assert order.taco.base == "Chicken"
        assert order.taco.toppings == ["lettuce", "tomatoes", "corn"]
        assert len(order.taco.toppings) == 3
        assert order.name == "Glen"

        form = step(form, KeyMsg("enter"))
        form = step(form, KeyMsg("enter"))
        assert form.state is FormState.COMPLETED
        assert order.discount is False
        assert form.view() == ""

    def test_discount_shows_promo_group(self, taco, step):
        """Test que aceptar el descuento vuelve visible el último grupo."""
        form, order = taco
        for msg in [KeyMsg("enter"), KeyMsg("enter"), KeyMsg("enter"),
                    keys("Ana"), KeyMsg("enter"), KeyMsg("enter"), keys("y"), KeyMsg("enter")]:
            form = step(form, msg)

        assert order.discount is True
        assert form.state is FormState.IN_PROGRESS
        assert "Discount applied" in form.view()

        form = step(form, KeyMsg("enter"))
        assert form.state is FormState.COMPLETED


class TestHiddenGroups:
    """Grupos ocultos por indicador y por predicado."""

    @pytest.fixture
    def form(self):
        f = Form(
            titled_group("One").with_hide(True),
            titled_group("Two"),
            titled_group("Three"),
            titled_group("Four").with_hide(True).with_hide_func(lambda: False),
        )
        f.init()
        return f

    def test_starts_on_first_visible(self, form):
        """Test que el grupo inicial es el primero visible."""
        assert form.cursor == 1
        assert "Two" in form.view()

    def test_forward_reaches_predicate_group(self, form, step):
        """Test que el predicado gana sobre el indicador estático."""
        form = step(form, KeyMsg("enter"))
        assert form.cursor == 2
        form = step(form, KeyMsg("enter"))
        assert form.cursor == 3
        assert "Four" in form.view()

    def test_back_never_lands_on_hidden(self, form, step):
        """Test que retroceder desde el grupo inicial no entra al oculto."""
        form = step(form, KeyMsg("shift+tab"))
        assert form.cursor == 1
        assert form.state is FormState.IN_PROGRESS

    def test_predicate_flip_makes_group_reachable(self, step):
        """Test que un grupo que deja de estar oculto se alcanza sin reconstruir."""
        hidden = {"value": True}
        form = Form(
            titled_group("One"),
            titled_group("Two").with_hide_func(lambda: hidden["value"]),
            titled_group("Three"),
        )
        form.init()

        form = step(form, KeyMsg("enter"))
        assert form.cursor == 2

        form = step(form, KeyMsg("shift+tab"))
        assert form.cursor == 0

        hidden["value"] = False
        form = step(form, KeyMsg("enter"))
        assert form.cursor == 1

    def test_all_hidden_completes(self):
        """Test que sin grupos visibles el formulario termina al iniciar."""
        form = Form(titled_group("One").with_hide(True))
        form.init()
        assert form.state is FormState.COMPLETED


class TestNavigation:
    """Tests de avance y retroceso entre grupos."""

    def test_back_from_start_is_idempotent(self, step):
        """Test que retroceder en el primer campo del primer grupo no cambia nada."""
        form = Form(titled_group("One", Input()), titled_group("Two"))
        form.init()
        for _ in range(3):
            form = step(form, KeyMsg("shift+tab"))
            assert form.cursor == 0
            assert form.active_group().cursor == 0
            assert form.state is FormState.IN_PROGRESS

    def test_back_focuses_last_field(self, step):
        """Test que al volver de grupo se enfoca su último campo."""
        form = Form(Group(Input(), Input(), Input()), titled_group("Two"))
        form.init()
        form = step(form, NextGroupMsg())
        assert form.cursor == 1

        form = step(form, KeyMsg("shift+tab"))
        assert form.cursor == 0
        assert form.active_group().cursor == 2
        assert form.active_field().focused

    def test_prev_group_at_start_is_noop(self, step):
        form = Form(titled_group("One"))
        form.init()
        form = step(form, PrevGroupMsg())
        assert form.cursor == 0

    def test_next_group_past_end_completes(self, step):
        form = Form(titled_group("One"))
        form.init()
        form = step(form, NextGroupMsg())
        assert form.state is FormState.COMPLETED

    def test_only_active_group_focused(self, step):
        """Test que los campos de otros grupos quedan sin foco."""
        form = Form(titled_group("One"), titled_group("Two"))
        form.init()
        form = step(form, KeyMsg("enter"))
        first, second = form.groups()
        assert not first.active_field().focused
        assert second.active_field().focused


class TestTerminalStates:
    """Tests de abandono, envío y estados finales."""

    def test_quit_key_aborts(self, step):
        """Test que ctrl+c abandona sin escribir valores."""
        name = Ref("")
        form = Form(Group(Input().with_value(name)))
        form.init()
        form = step(form, keys("Ana"))
        form = step(form, KeyMsg("ctrl+c"))

        assert form.state is FormState.ABORTED
        assert name.value == ""

    def test_quit_msg_aborts(self, step):
        form = Form(titled_group("One"))
        form.init()
        form = step(form, QuitMsg())
        assert form.state is FormState.ABORTED

    def test_terminal_state_ignores_messages(self, step):
        """Test que un formulario terminado no reacciona."""
        name = Ref("")
        form = Form(Group(Input().with_value(name)))
        form.init()
        form = step(form, QuitMsg())

        form, cmd = form.update(keys("x"))
        assert cmd is None
        form, cmd = form.update(KeyMsg("enter"))
        assert cmd is None
        assert form.state is FormState.ABORTED
        assert name.value == ""

    def test_submit_goes_to_first_invalid_field(self, step):
        """Test que el envío se detiene en el primer campo inválido."""
        first, second = Ref(""), Ref("")
        form = Form(
            Group(Input().with_value(first), Input().with_value(second).with_validation(not_empty("required"))),
            titled_group("Two"),
        )
        form.init()
        form = step(form, NextGroupMsg())
        form = step(form, SubmitMsg())

        assert form.state is FormState.IN_PROGRESS
        assert form.cursor == 0
        assert form.active_group().cursor == 1
        assert "* required" in form.view()

        form = step(form, keys("ok"))
        form = step(form, SubmitMsg())
        assert form.state is FormState.COMPLETED
        assert second.value == "ok"

    def test_submit_skips_hidden_groups(self, step):
        """Test que los grupos ocultos no participan de la validación."""
        form = Form(
            titled_group("One"),
            Group(Input().with_validation(not_empty())).with_hide(True),
        )
        form.init()
        form = step(form, SubmitMsg())
        assert form.state is FormState.COMPLETED


class TestConfiguration:
    """Tests de configuración fluida."""

    def test_requires_groups(self):
        with pytest.raises(ValueError):
            Form()

    def test_with_theme_by_name(self):
        """Test tema por nombre propagado a los campos."""
        fld = Input()
        form = Form(Group(fld)).with_theme("nord")
        assert form.theme.name is ThemeName.NORD
        assert form.settings.theme is ThemeName.NORD
        assert fld._theme is form.theme

    def test_with_show_help(self):
        form = Form(titled_group("One")).with_show_help(False)
        form.init()
        assert "enter next" not in form.view()

    def test_with_show_errors(self, step):
        """Test que los errores pueden ocultarse sin dejar de bloquear."""
        form = Form(Group(Input().with_validation(not_empty("required")))).with_show_errors(False)
        form.init()
        form = step(form, KeyMsg("enter"))
        assert "required" not in form.view()
        assert form.state is FormState.IN_PROGRESS

    def test_with_settings_ascii(self):
        """Test configuración completa con iconos ASCII."""
        form = Form(titled_group("One")).with_settings(FormSettings(unicode=False))
        form.init()
        assert "| One" in form.view()

    def test_with_settings_editor(self):
        """Test que el editor configurado llega a los campos de texto."""
        from encuesta.fields import Text

        fld = Text()
        Form(Group(fld)).with_settings(FormSettings(editor="vim"))
        assert fld._editor == "vim"

    def test_with_accessible(self):
        form = Form(titled_group("One")).with_accessible(True)
        assert form.settings.accessible is True

    def test_confirm_in_form(self, step):
        """Test flujo con Confirm enlazado."""
        agree = Ref(False)
        form = Form(Group(Confirm().with_title("Agree?").with_value(agree)))
        form.init()
        form = step(form, KeyMsg("left"))
        form = step(form, KeyMsg("enter"))
        assert agree.value is True
        assert form.done
