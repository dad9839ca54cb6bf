from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

from ..common.validators import require_mapping, require_text
from ..core.constants import KEY_ACTIVE_SESSION, KEY_RECORDS
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class SessionInfo:
    """Thực thể miền (domain): Buổi điểm danh đang phát."""

    id: str
    name: str

    @classmethod
    def from_dict(cls, data: Any) -> "SessionInfo":
        data = require_mapping(data, "session")
        return cls(
            id=require_text(data.get("id"), "session.id"),
            name=require_text(data.get("name"), "session.name"),
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Một lượt điểm danh của sinh viên.

    Session fields are copied at submission time and survive the session being cleared.
    """

    id: str
    student_name: str
    student_id: str
    timestamp: str
    day: str
    session_id: str
    session_name: str

    @classmethod
    def from_dict(cls, data: Any) -> "AttendanceRecord":
        data = require_mapping(data, "record")

        def optional(key: str) -> str:
            value = data.get(key)
            return "" if value is None else require_text(value, f"record.{key}")

        return cls(
            id=require_text(data.get("id"), "record.id"),
            student_name=optional("studentName"),
            student_id=require_text(data.get("studentId"), "record.studentId"),
            timestamp=optional("timestamp"),
            day=optional("day"),
            session_id=require_text(data.get("sessionId"), "record.sessionId"),
            session_name=optional("sessionName"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "studentName": self.student_name,
            "studentId": self.student_id,
            "timestamp": self.timestamp,
            "day": self.day,
            "sessionId": self.session_id,
            "sessionName": self.session_name,
        }


@dataclass(frozen=True)
class Database:
    """Persisted root: the single active session plus every record, newest first."""

    active_session: Optional[SessionInfo] = None
    records: tuple[AttendanceRecord, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "Database":
        return cls()

    @classmethod
    def from_parts(cls, active_session: Any, records: Any) -> "Database":
        """Build from raw stored values; a missing key (None) becomes its empty default."""
        session = SessionInfo.from_dict(active_session) if active_session else None
        if records is None:
            records = []
        if not isinstance(records, list):
            raise ValidationError("records must be a list")
        return cls(active_session=session, records=tuple(AttendanceRecord.from_dict(r) for r in records))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Database":
        data = require_mapping(data, "database")
        return cls.from_parts(data.get(KEY_ACTIVE_SESSION), data.get(KEY_RECORDS))

    def to_dict(self) -> dict:
        return {
            KEY_ACTIVE_SESSION: self.active_session.to_dict() if self.active_session else None,
            KEY_RECORDS: [r.to_dict() for r in self.records],
        }

    def has_record_for(self, *, student_id: str, session_id: str) -> bool:
        return any(r.student_id == student_id and r.session_id == session_id for r in self.records)

    def with_session(self, session: Optional[SessionInfo]) -> "Database":
        return replace(self, active_session=session)

    def with_records(self, records) -> "Database":
        return replace(self, records=tuple(records))
