"""
Enlace entre un campo y la variable del llamador.

El campo trabaja sobre una copia propia y solo escribe en la variable
enlazada cuando se confirma.
"""

from typing import Any, Callable, Generic, Mapping, MutableMapping, Optional, TypeVar

T = TypeVar("T")


class Ref(Generic[T]):
    """Caja mutable que el llamador conserva para leer el resultado."""

    def __init__(self, value: T = None):
        self.value = value

    def __repr__(self) -> str:
        return f"Ref({self.value!r})"


class Accessor:
    """Par lectura/escritura sobre almacenamiento del llamador."""

    def __init__(
        self,
        getter: Optional[Callable[[], Any]] = None,
        setter: Optional[Callable[[Any], None]] = None,
    ):
        self._getter = getter
        self._setter = setter

    @classmethod
    def of(cls, ref: Ref) -> "Accessor":
        def set_value(value: Any) -> None:
            ref.value = value
        return cls(lambda: ref.value, set_value)

    @classmethod
    def attr(cls, obj: Any, name: str) -> "Accessor":
        return cls(lambda: getattr(obj, name), lambda value: setattr(obj, name, value))

    @classmethod
    def item(cls, mapping: MutableMapping, key: Any) -> "Accessor":
        def set_value(value: Any) -> None:
            mapping[key] = value
        return cls(lambda: mapping.get(key), set_value)

    def load(self) -> Any:
        """Valor actual de la variable enlazada (None si no hay lector)."""
        if self._getter is None:
            return None
        return self._getter()

    def commit(self, value: Any) -> None:
        """Escribe el valor confirmado en la variable enlazada."""
        if self._setter is not None:
            self._setter(value)


def as_accessor(target: Any) -> Accessor:
    """
    Normaliza el destino de with_value().

    Acepta un Accessor, un Ref, una tupla (objeto, "atributo") o
    (dict, clave), o un callable que recibe el valor confirmado.
    """
    if isinstance(target, Accessor):
        return target
    if isinstance(target, Ref):
        return Accessor.of(target)
    if isinstance(target, tuple) and len(target) == 2:
        owner, key = target
        if isinstance(owner, Mapping):
            return Accessor.item(owner, key)
        return Accessor.attr(owner, key)
    if callable(target):
        return Accessor(setter=target)
    raise TypeError(f"No se puede enlazar un valor a {type(target).__name__}")
