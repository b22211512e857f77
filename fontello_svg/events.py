from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, DefaultDict, List


SVG_WRITE = "svg-write"
FETCH_ERROR = "fetch-error"

Handler = Callable[[Any], None]


@dataclass(frozen=True)
class FetchError:
    url: str
    reason: str


class Events:
    """Named progress events; every handler registered for a name is called."""

    def __init__(self) -> None:
        self._handlers: DefaultDict[str, List[Handler]] = defaultdict(list)

    def on(self, name: str, handler: Handler) -> Handler:
        self._handlers[name].append(handler)
        return handler

    def emit(self, name: str, payload: Any) -> None:
        for handler in list(self._handlers.get(name, ())):
            handler(payload)
