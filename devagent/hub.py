"""Event hub broadcasting messages, errors and executor events to subscribers."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from enum import Enum


class ExecEvent(Enum):
    """Status events emitted by the executor."""

    START_EXEC = "StartExec"
    RUN_START = "RunStart"
    RUN_END = "RunEnd"
    END_EXEC = "EndExec"

    def __str__(self) -> str:
        return self.value


class HubEventKind(Enum):
    MESSAGE = "message"
    ERROR = "error"
    EXECUTOR = "executor"
    DO_EXEC_REDO = "do_exec_redo"
    QUIT = "quit"


@dataclass(frozen=True)
class HubEvent:
    """One event travelling through the hub."""

    kind: HubEventKind
    message: str | None = None
    error: BaseException | None = None
    exec_event: ExecEvent | None = None


def to_hub_event(value: object) -> HubEvent:
    """Turn a string, exception, executor event or hub event into a HubEvent."""
    if isinstance(value, HubEvent):
        return value
    if isinstance(value, str):
        return HubEvent(HubEventKind.MESSAGE, message=value)
    if isinstance(value, BaseException):
        return HubEvent(HubEventKind.ERROR, error=value)
    if isinstance(value, ExecEvent):
        return HubEvent(HubEventKind.EXECUTOR, exec_event=value)
    raise TypeError(f"cannot publish value of type {type(value).__name__}")


class Hub:
    """Broadcasts every published event to all current subscribers."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: list[queue.Queue[HubEvent]] = []

    def publish(self, event: object) -> None:
        hub_event = to_hub_event(event)
        with self._lock:
            subscribers = list(self._subscribers)
        for subscriber in subscribers:
            subscriber.put(hub_event)

    def subscribe(self) -> queue.Queue[HubEvent]:
        subscriber: queue.Queue[HubEvent] = queue.Queue()
        with self._lock:
            self._subscribers.append(subscriber)
        return subscriber

    def unsubscribe(self, subscriber: queue.Queue[HubEvent]) -> None:
        with self._lock:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)


_HUB = Hub()


def get_hub() -> Hub:
    """Return the process-wide hub."""
    return _HUB