from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, List, Union


class EventName(str, Enum):
    INIT = "init"
    SEARCH = "search"
    SUGGEST = "suggest"
    MERGE = "merge"
    RESET = "reset"


Listener = Callable[..., None]


class EventRegistry:
    """
    Fixed event name -> ordered listener list. Append-only, no unsubscribe.
    Listeners are called synchronously, in registration order.
    """
    def __init__(self) -> None:
        self._listeners: Dict[EventName, List[Listener]] = {e: [] for e in EventName}

    def add(self, event: Union[EventName, str], listener: Listener) -> None:
        if not callable(listener):
            raise ValueError("listener must be callable")
        # EventName("bogus") raises ValueError
        self._listeners[EventName(event)].append(listener)

    def emit(self, event: EventName, *args) -> None:
        for cb in self._listeners[event]:
            cb(*args)

    def count(self, event: Union[EventName, str]) -> int:
        return len(self._listeners[EventName(event)])
