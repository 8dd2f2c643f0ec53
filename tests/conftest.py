"""Shared pytest fixtures.

Nothing here needs XMGR installed: clients are built on a recording
transport that keeps every line it is sent, and the wire mode is switched
by patching :data:`pyxmgr.config.NAMED_PIPE`.
"""

from typing import List

import pytest

from pyxmgr import XMGR, config, session


class RecordingTransport:
    """Transport that records lines instead of delivering them."""

    def __init__(self):
        self.lines: List[str] = []
        self.closed = False
        self.detached = False

    @property
    def is_running(self) -> bool:
        return not (self.closed or self.detached)

    def send(self, line: str) -> None:
        self.lines.append(line)

    def close(self) -> None:
        self.closed = True

    def detach(self) -> None:
        self.detached = True


@pytest.fixture
def addressable(monkeypatch):
    """Named-pipe wire mode."""
    monkeypatch.setattr(config, "NAMED_PIPE", True)


@pytest.fixture
def streaming(monkeypatch):
    """Anonymous-pipe wire mode."""
    monkeypatch.setattr(config, "NAMED_PIPE", False)


@pytest.fixture
def recorder():
    return RecordingTransport()


@pytest.fixture
def client(recorder):
    """An XMGR client on a recording transport, title line discarded."""
    xm = XMGR(recorder)
    recorder.lines.clear()
    return xm


@pytest.fixture
def fresh_session(monkeypatch):
    """Session whose clients are built on recording transports."""
    transports: List[RecordingTransport] = []

    def fake_launch():
        transports.append(RecordingTransport())
        return transports[-1]

    monkeypatch.setattr("pyxmgr.client.launch", fake_launch)
    monkeypatch.setattr(session, "_current", None)
    return transports
