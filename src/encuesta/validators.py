"""
Validación de valores de campos.

Una regla es una función valor -> resultado. Se aceptan las mismas
convenciones que los validadores de questionary:
- None o True: válido
- False: inválido con mensaje genérico
- str: inválido con ese mensaje
- lanzar ValueError (o ValidationError): inválido con el mensaje de la excepción
"""

import re
from typing import Any, Callable, Optional, Sequence, Union

Outcome = Union[None, bool, str]
Rule = Callable[[Any], Outcome]

INVALID_VALUE = "invalid value"


def normalize_outcome(result: Outcome) -> Optional[str]:
    """Convierte el resultado de una regla en mensaje de error o None."""
    if result is None or result is True:
        return None
    if result is False:
        return INVALID_VALUE
    if isinstance(result, str):
        return result or INVALID_VALUE
    return INVALID_VALUE


def run_rule(rule: Optional[Rule], value: Any) -> Optional[str]:
    """Aplica una regla y retorna el mensaje de error (None si es válido)."""
    if rule is None:
        return None
    try:
        return normalize_outcome(rule(value))
    except ValueError as exc:
        return str(exc) or INVALID_VALUE


def compose(*rules: Rule) -> Rule:
    """Combina reglas; el primer error gana."""
    def check(value: Any) -> Optional[str]:
        for rule in rules:
            err = run_rule(rule, value)
            if err:
                return err
        return None
    return check


def not_empty(message: str = "value is required") -> Rule:
    """Texto no vacío (ignorando espacios) o lista con elementos."""
    def check(value: Any) -> Optional[str]:
        if value is None:
            return message
        if isinstance(value, str) and not value.strip():
            return message
        if isinstance(value, (list, tuple)) and not value:
            return message
        return None
    return check


def min_length(n: int, message: Optional[str] = None) -> Rule:
    def check(value: str) -> Optional[str]:
        if len(value or "") < n:
            return message or f"must be at least {n} characters"
        return None
    return check


def max_length(n: int, message: Optional[str] = None) -> Rule:
    def check(value: str) -> Optional[str]:
        if len(value or "") > n:
            return message or f"must be at most {n} characters"
        return None
    return check


def matches(pattern: str, message: Optional[str] = None) -> Rule:
    """El texto completo debe coincidir con la expresión regular."""
    regex = re.compile(pattern)

    def check(value: str) -> Optional[str]:
        if not regex.fullmatch(value or ""):
            return message or f"must match {pattern}"
        return None
    return check


def one_of(allowed: Sequence[Any], message: Optional[str] = None) -> Rule:
    def check(value: Any) -> Optional[str]:
        if value not in allowed:
            return message or f"must be one of: {', '.join(str(a) for a in allowed)}"
        return None
    return check


def min_selected(n: int, message: Optional[str] = None) -> Rule:
    """Cantidad mínima de opciones en un multi-select."""
    def check(values: Sequence[Any]) -> Optional[str]:
        if len(values or ()) < n:
            return message or f"select at least {n}"
        return None
    return check


def max_selected(n: int, message: Optional[str] = None) -> Rule:
    """Cantidad máxima de opciones en un multi-select."""
    def check(values: Sequence[Any]) -> Optional[str]:
        if len(values or ()) > n:
            return message or f"select at most {n}"
        return None
    return check
