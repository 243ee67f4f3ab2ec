"""
Tests for the Broadcast Engine
"""

import json

import pytest
from websockets.protocol import State

from canvas_relay.room_state import Room
from canvas_relay.utils import BroadcastEngine

from fake_connection import FailingWebSocket, MockWebSocket, StalledWebSocket


@pytest.fixture
def engine():
    return BroadcastEngine()


def _room_with(*connections):
    room = Room(room_id="r1")
    for i, conn in enumerate(connections):
        room.add_member(conn, f"user{i}")
    return room


def test_broadcast_all_reaches_every_member(engine):
    a, b = MockWebSocket(), MockWebSocket()
    room = _room_with(a, b)

    delivered = engine.broadcast_all(room, {"type": "ping"})

    assert delivered == 2
    assert json.loads(a.sent_messages[0]) == {"type": "ping"}
    # Same serialized text for everyone
    assert a.sent_messages == b.sent_messages


def test_broadcast_except_skips_sender(engine):
    a, b, c = MockWebSocket(), MockWebSocket(), MockWebSocket()
    room = _room_with(a, b, c)

    delivered = engine.broadcast_except(room, a, {"type": "draw"})

    assert delivered == 2
    assert a.sent_messages == []
    assert len(b.sent_messages) == 1
    assert len(c.sent_messages) == 1


def test_broadcast_skips_connections_not_open(engine):
    open_ws = MockWebSocket()
    closing_ws = MockWebSocket(state=State.CLOSING)
    closed_ws = MockWebSocket(state=State.CLOSED)
    room = _room_with(open_ws, closing_ws, closed_ws)

    delivered = engine.broadcast_all(room, {"type": "ping"})

    assert delivered == 1
    assert closing_ws.sent_messages == []
    assert closed_ws.sent_messages == []


def test_broadcast_absorbs_write_failure(engine):
    failing = FailingWebSocket()
    healthy = MockWebSocket()
    room = _room_with(failing, healthy)

    engine.broadcast_all(room, {"type": "ping"})

    assert len(healthy.sent_messages) == 1


def test_broadcast_does_not_wait_on_slow_member(engine):
    stalled = StalledWebSocket()
    healthy = MockWebSocket()
    room = _room_with(stalled, healthy)

    delivered = engine.broadcast_all(room, {"type": "ping"})

    assert delivered == 2
    assert stalled.send_calls == 0
    assert len(stalled.sent_messages) == 1
    assert len(healthy.sent_messages) == 1


def test_broadcast_to_empty_room(engine):
    assert engine.broadcast_all(Room(room_id="r1"), {"type": "x"}) == 0


def test_send_direct(engine):
    ws = MockWebSocket()
    assert engine.send_direct(ws, {"type": "error"})
    assert json.loads(ws.sent_messages[0]) == {"type": "error"}

    closed = MockWebSocket(State.CLOSED)
    assert not engine.send_direct(closed, {})
    assert closed.sent_messages == []
