"""
Formulario de ejemplo: pedido de tacos.

Tres grupos (tortilla y base, ingredientes, datos finales) y una nota de
promoción que solo aparece si el cliente aceptó el descuento.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from encuesta.fields import Confirm, Input, MultiSelect, Note, Option, Select, Text, options
from encuesta.form import Form
from encuesta.group import Group
from encuesta.validators import max_length


@dataclass
class Taco:
    """Taco armado por el cliente."""
    shell: str = ""
    base: str = ""
    toppings: List[str] = field(default_factory=list)


@dataclass
class Order:
    """Pedido completo."""
    taco: Taco = field(default_factory=Taco)
    name: str = ""
    instructions: str = ""
    discount: bool = False


def _no_hard_shells(shell: str) -> Optional[str]:
    if shell == "Hard":
        return "we're out of hard shells, sorry"
    return None


def _at_least_one(toppings: List[str]) -> Optional[str]:
    if not toppings:
        return "at least one topping is required"
    return None


def build_taco_form(order: Optional[Order] = None) -> Tuple[Form, Order]:
    """
    Arma el formulario de pedido enlazado a un Order.

    Args:
        order: Pedido a completar (uno nuevo si es None)

    Returns:
        Tupla (formulario, pedido)
    """
    order = order or Order()
    taco = order.taco

    form = Form(
        Group(
            Select()
            .with_options(options("Soft", "Hard"))
            .with_title("Shell?")
            .with_description("Our tortillas are made fresh in-house every day.")
            .with_validation(_no_hard_shells)
            .with_value((taco, "shell")),
            Select()
            .with_options(options("Chicken", "Beef", "Fish", "Beans"))
            .with_value((taco, "base"))
            .with_title("Base"),
        ),
        # Hasta 4 ingredientes
        Group(
            MultiSelect()
            .with_title("Toppings")
            .with_description("Choose up to 4.")
            .with_options(
                Option("Lettuce", "lettuce").with_selected(),
                Option("Tomatoes", "tomatoes").with_selected(),
                Option("Corn", "corn"),
                Option("Salsa", "salsa"),
                Option("Sour Cream", "sour cream"),
                Option("Cheese", "cheese"),
            )
            .with_validation(_at_least_one)
            .with_value((taco, "toppings"))
            .with_filterable(True)
            .with_limit(4),
        ),
        Group(
            Input()
            .with_value((order, "name"))
            .with_title("What's your name?")
            .with_placeholder("Margaret Thatcher")
            .with_description("For when your order is ready."),
            Text()
            .with_value((order, "instructions"))
            .with_placeholder("Just put it in the mailbox please")
            .with_title("Special Instructions")
            .with_description("Anything we should know?")
            .with_char_limit(400)
            .with_validation(max_length(400)),
            Confirm()
            .with_title("Would you like 15% off?")
            .with_value((order, "discount"))
            .with_affirmative("Yes!")
            .with_negative("No."),
        ),
        Group(
            Note()
            .with_title("Discount applied")
            .with_description("15% off will show up on your receipt.")
            .with_next(True)
            .with_next_label("Done"),
        ).with_hide_func(lambda: not order.discount),
    )
    return form, order


def describe_order(order: Order) -> str:
    """Resumen de una línea del pedido."""
    toppings = ", ".join(order.taco.toppings) or "no toppings"
    text = f"{order.taco.shell} {order.taco.base} taco with {toppings}"
    if order.name:
        text = f"{order.name}: {text}"
    if order.discount:
        text += " (15% off)"
    return text
