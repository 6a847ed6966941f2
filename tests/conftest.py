from __future__ import annotations

import pytest


class RecordingLogger:
    """Stands in for the reporting callback and keeps every call."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def __call__(self, message: str, *args) -> None:
        self.calls.append((message, *args))

    @property
    def messages(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()
