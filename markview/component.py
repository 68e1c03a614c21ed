from typing import Protocol, TypeVar

from markview.vdom import ViewNode

M = TypeVar("M", contravariant=True)


class Effect:
    """Side-effect descriptor returned from ``Component.update``.

    There are no variants yet. Timers, fetches and similar instructions are
    meant to subclass it.
    """

    __slots__ = ()


class Component(Protocol[M]):
    def view(self) -> ViewNode:
        ...

    def update(self, msg: M) -> Effect | None:
        ...
