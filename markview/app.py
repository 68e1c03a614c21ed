import logging
from typing import Callable, Generic, TypeAlias, TypeVar

from markview.component import Component, Effect
from markview.render import render as render_markup
from markview.vdom import ViewNode

M = TypeVar("M")

Enqueue: TypeAlias = Callable[[Callable[[], None]], None]

logger = logging.getLogger(__name__)


class MarkupApp(Generic[M]):
    """Host that owns a root component and renders it to markup.

    The component lives outside any tree; each render pass asks it for a
    fresh ``ViewNode`` tree and throws the previous one away.
    """

    _root: Component[M]
    _target: str
    _logger: logging.Logger
    _enqueue: Enqueue
    _rendered: str | None

    def __init__(
        self,
        root: Component[M],
        target: str = "body",
        logger: logging.Logger = logger,
        enqueue: Enqueue = lambda render: render(),
    ) -> None:
        self._root = root
        self._target = target
        self._logger = logger
        self._enqueue = enqueue
        self._rendered = None

    @property
    def target(self) -> str:
        return self._target

    @property
    def rendered(self) -> str | None:
        return self._rendered

    def view(self) -> ViewNode:
        return self._root.view()

    def render(self) -> str:
        vdom = self.view()
        markup = render_markup(vdom)
        self._logger.debug("%r", vdom)
        self._logger.debug("rendered into %s:\n%s", self._target, markup)
        self._rendered = markup
        return markup

    def _render_pass(self) -> None:
        self.render()

    def dispatch(self, msg: M) -> Effect | None:
        self._logger.debug("dispatch %r", msg)
        effect = self._root.update(msg)
        self._enqueue(self._render_pass)
        return effect

    def main(self) -> None:
        self._enqueue(self._render_pass)
