from __future__ import annotations

import pytest

from src.attendance_sync.attendance_sync.core.exceptions import ValidationError
from src.attendance_sync.attendance_sync.sync.actions import (
    AddRecord,
    ClearRecords,
    ClearSession,
    DeleteRecord,
    SetSession,
    parse_action,
)
from src.attendance_sync.attendance_sync.sync.model import SessionInfo


def test_parse_set_session():
    action = parse_action({"action": "SET_SESSION", "payload": {"id": "s1", "name": "Lab 4B"}})
    assert action == SetSession(SessionInfo(id="s1", name="Lab 4B"))


def test_parse_add_record_fills_optional_fields():
    action = parse_action({"action": "ADD_RECORD", "payload": {"id": "r1", "studentId": "u1", "sessionId": "s1"}})

    assert isinstance(action, AddRecord)
    assert action.record.student_name == ""
    assert action.record.session_id == "s1"


def test_parse_delete_and_clears():
    assert parse_action({"action": "DELETE_RECORD", "payload": "r1"}) == DeleteRecord("r1")
    assert isinstance(parse_action({"action": "CLEAR_RECORDS"}), ClearRecords)
    assert isinstance(parse_action({"action": "CLEAR_SESSION"}), ClearSession)


@pytest.mark.parametrize(
    "body",
    [
        {"action": "DROP_TABLE"},
        {"payload": "r1"},
        {"action": "DELETE_RECORD", "payload": {"id": "r1"}},
        {"action": "SET_SESSION", "payload": "s1"},
        {"action": "ADD_RECORD", "payload": {"id": "r1", "sessionId": "s1"}},
        ["SET_SESSION"],
    ],
)
def test_malformed_bodies_are_rejected(body):
    with pytest.raises(ValidationError):
        parse_action(body)
