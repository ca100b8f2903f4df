"""
Composable click handlers.
"""

from typing import Any, Callable, List

ClickHandler = Callable[[Any], None]


def chain_before(previous: ClickHandler, before: ClickHandler) -> ClickHandler:
    """
    Return a handler running before(item) and then previous(item).

    If before() raises, previous() is not called and the error propagates.
    """
    def handler(item: Any) -> None:
        before(item)
        previous(item)

    return handler


class ClickHandlerChain:
    """
    Click handler that can be wrapped any number of times.

    Each install() wraps the current handler, so the latest handler runs first
    and then hands over to the one installed before it, down to the base.

    Args:
        base: Handler at the bottom of the chain (the chart's own behaviour)

    Example:
        chain = ClickHandlerChain(chart_highlight)
        chain.install(others_bridge)
        chain(item)  # others_bridge(item), then chart_highlight(item)
    """

    def __init__(self, base: ClickHandler):
        if not callable(base):
            raise TypeError(f"base handler must be callable, got {type(base).__name__}")

        self._handler: ClickHandler = base
        self._installed: List[ClickHandler] = []

    @property
    def installed(self) -> List[ClickHandler]:
        """Handlers installed on top of the base, oldest first."""
        return list(self._installed)

    def install(self, before: ClickHandler) -> None:
        if not callable(before):
            raise TypeError(f"handler must be callable, got {type(before).__name__}")

        self._handler = chain_before(self._handler, before)
        self._installed.append(before)

    def __call__(self, item: Any) -> None:
        self._handler(item)
