"""
Tests for Room State

Tests for the drawing log, rooms and the room registry.
"""

import pytest

from canvas_relay.room_state import DrawingLog, Room, RoomRegistry


@pytest.fixture
def registry():
    return RoomRegistry()


# ----------------------------------------------------------------------------
# DrawingLog
# ----------------------------------------------------------------------------

def test_drawing_log_keeps_events_in_order():
    log = DrawingLog()
    first = {"type": "start", "x": 1, "y": 2}
    second = {"type": "draw", "x": 3, "y": 4}

    assert log.append(first)
    assert log.append(second)

    assert log.snapshot() == [first, second]
    assert len(log) == 2


def test_drawing_log_ignores_clear_marker():
    log = DrawingLog()
    log.append({"type": "rectangle", "w": 10})

    assert not log.append({"type": "clear"})
    assert len(log) == 1


def test_drawing_log_reset_empties_history():
    log = DrawingLog()
    log.append({"type": "circle", "r": 5})
    log.reset()

    assert log.snapshot() == []
    assert len(log) == 0


def test_drawing_log_snapshot_is_a_copy():
    log = DrawingLog()
    log.append({"type": "text", "value": "hi"})

    snapshot = log.snapshot()
    snapshot.append({"type": "draw"})

    assert len(log) == 1


# ----------------------------------------------------------------------------
# Room
# ----------------------------------------------------------------------------

def test_room_tracks_members_and_usernames():
    room = Room(room_id="r1")
    conn_a, conn_b = object(), object()

    room.add_member(conn_a, "alice")
    room.add_member(conn_b, "bob")

    assert room.member_count == 2
    assert room.user_list == ["alice", "bob"]
    assert room.has_member(conn_a)
    assert room.created_at


def test_room_duplicate_usernames_collapse_but_connections_count():
    room = Room(room_id="r1")
    room.add_member(object(), "alice")
    room.add_member(object(), "alice")

    assert room.user_list == ["alice"]
    assert room.member_count == 2


def test_room_remove_member_until_empty():
    room = Room(room_id="r1")
    conn = object()
    room.add_member(conn, "alice")

    room.remove_member(conn, "alice")

    assert room.is_empty()
    assert not room.has_member(conn)


def test_room_not_empty_while_a_connection_remains():
    room = Room(room_id="r1")
    conn_a, conn_b = object(), object()
    room.add_member(conn_a, "alice")
    room.add_member(conn_b, "alice")

    room.remove_member(conn_a, "alice")

    assert room.user_list == []
    assert room.member_count == 1
    assert not room.is_empty()


# ----------------------------------------------------------------------------
# RoomRegistry
# ----------------------------------------------------------------------------

def test_create_returns_new_room(registry):
    room = registry.create("r1")

    assert room is not None
    assert room.room_id == "r1"
    assert "r1" in registry
    assert registry.get_room_count() == 1


def test_create_existing_room_returns_none_and_keeps_state(registry):
    room = registry.create("r1")
    room.add_member(object(), "alice")
    room.history.append({"type": "draw"})

    assert registry.create("r1") is None

    same = registry.get_room("r1")
    assert same is room
    assert same.user_list == ["alice"]
    assert len(same.history) == 1


def test_get_room_missing(registry):
    assert registry.get_room("missing") is None


def test_delete_if_empty_removes_empty_room(registry):
    registry.create("r1")

    assert registry.delete_if_empty("r1")
    assert registry.get_room("r1") is None


def test_delete_if_empty_keeps_occupied_room(registry):
    room = registry.create("r1")
    room.add_member(object(), "alice")

    assert not registry.delete_if_empty("r1")
    assert "r1" in registry


def test_delete_if_empty_unknown_room(registry):
    assert not registry.delete_if_empty("nope")


def test_list_rooms(registry):
    room = registry.create("r1")
    room.add_member(object(), "alice")
    registry.create("r2")

    rooms = registry.list_rooms()

    assert len(rooms) == 2
    r1 = next(r for r in rooms if r["room_id"] == "r1")
    assert r1["users"] == ["alice"]
    assert r1["member_count"] == 1
    assert r1["drawing_count"] == 0
