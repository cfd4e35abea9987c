"""
Notification recording and replay files.
"""

from typing import List

import orjson

from .events import Notification, parse_event


class EventRecorder:
    """
    Subscriber that keeps every notification it receives.

    Usage:
        recorder = EventRecorder()
        engine.notifier.subscribe(recorder)
        engine.run_until_game_over()
        data = recorder.dumps()
    """

    def __init__(self):
        self.events: List[Notification] = []

    def __call__(self, event: Notification) -> None:
        self.events.append(event)

    def __len__(self) -> int:
        return len(self.events)

    def of_type(self, event_type) -> List[Notification]:
        return [e for e in self.events if e.type == event_type]

    def clear(self) -> None:
        self.events = []

    def dumps(self) -> bytes:
        """Serialize the stream as JSON lines."""
        return b"".join(
            orjson.dumps(event.model_dump(mode="json")) + b"\n"
            for event in self.events
        )

    @staticmethod
    def load(data: bytes) -> List[Notification]:
        """Parse a stream written by ``dumps``."""
        return [parse_event(orjson.loads(line)) for line in data.splitlines() if line.strip()]
