from __future__ import annotations

import logging

from src.attendance_sync.attendance_sync.sync.actions import (
    AddRecord,
    ClearRecords,
    ClearSession,
    DeleteRecord,
    SetSession,
)
from src.attendance_sync.attendance_sync.sync.model import AttendanceRecord, Database, SessionInfo
from src.attendance_sync.attendance_sync.sync.router import MutationRouter


def _record(rid: str, student_id: str = "u1", session_id: str = "s1", session_name: str = "Lab 4B") -> AttendanceRecord:
    return AttendanceRecord(
        id=rid,
        student_name="An",
        student_id=student_id,
        timestamp="2026-02-02T08:30:00.000Z",
        day="Monday",
        session_id=session_id,
        session_name=session_name,
    )


def test_add_record_twice_keeps_one():
    router = MutationRouter()
    db = Database.empty()

    db = router.apply(AddRecord(_record("r1")), db)
    db = router.apply(AddRecord(_record("r2")), db)

    matching = [r for r in db.records if r.student_id == "u1" and r.session_id == "s1"]
    assert len(matching) == 1
    assert matching[0].id == "r1"


def test_same_student_other_session_is_allowed():
    router = MutationRouter()
    db = router.apply(AddRecord(_record("r1", session_id="s1")), Database.empty())
    db = router.apply(AddRecord(_record("r2", session_id="s2")), db)

    assert len(db.records) == 2


def test_add_record_prepends():
    router = MutationRouter()
    db = router.apply(AddRecord(_record("r1", student_id="u1")), Database.empty())
    db = router.apply(AddRecord(_record("r2", student_id="u2")), db)

    assert [r.id for r in db.records] == ["r2", "r1"]


def test_set_session_replaces_whole_session():
    router = MutationRouter()
    db = router.apply(SetSession(SessionInfo(id="s1", name="Lab 4B")), Database.empty())
    db = router.apply(SetSession(SessionInfo(id="s2", name="")), db)

    assert db.active_session == SessionInfo(id="s2", name="")


def test_clear_session_keeps_records_and_their_session_fields():
    router = MutationRouter()
    db = router.apply(SetSession(SessionInfo(id="s1", name="Lab 4B")), Database.empty())
    db = router.apply(AddRecord(_record("r1")), db)
    before = db.records

    db = router.apply(ClearSession(), db)

    assert db.active_session is None
    assert db.records == before
    assert db.records[0].session_name == "Lab 4B"
    assert db.records[0].session_id == "s1"


def test_clear_records_is_blocked(caplog):
    router = MutationRouter()
    db = router.apply(AddRecord(_record("r1", student_id="u1")), Database.empty())
    db = router.apply(AddRecord(_record("r2", student_id="u2")), db)

    with caplog.at_level(logging.WARNING):
        after = router.apply(ClearRecords(), db)

    assert after.records == db.records
    assert len(after.records) == 2
    assert "blocked" in caplog.text


def test_delete_record_removes_match_only():
    router = MutationRouter()
    db = router.apply(AddRecord(_record("r1", student_id="u1")), Database.empty())
    db = router.apply(AddRecord(_record("r2", student_id="u2")), db)

    db = router.apply(DeleteRecord("r1"), db)

    assert [r.id for r in db.records] == ["r2"]


def test_delete_unknown_id_is_noop():
    router = MutationRouter()
    db = router.apply(AddRecord(_record("r1")), Database.empty())

    assert router.apply(DeleteRecord("nope"), db) == db
