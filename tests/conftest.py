"""Configuración de pytest para tests de encuesta."""

import pytest

from encuesta.commands import drain
from encuesta.demo import build_taco_form
from encuesta.fields import Ref
from encuesta.theme import get_theme


@pytest.fixture
def theme():
    """Tema por defecto con iconos Unicode."""
    return get_theme()


@pytest.fixture
def ascii_theme():
    """Tema por defecto con iconos ASCII."""
    return get_theme(unicode=False)


@pytest.fixture
def ref():
    """Variable enlazada vacía."""
    return Ref()


@pytest.fixture
def taco():
    """Formulario de tacos ya inicializado, con su pedido."""
    form, order = build_taco_form()
    form = drain(form, form.init())
    return form, order


@pytest.fixture
def step():
    """Aplica un mensaje y drena sus comandos, como el bucle de la terminal."""
    def apply(model, msg):
        model, cmd = model.update(msg)
        return drain(model, cmd)
    return apply
