from __future__ import annotations

import io
from datetime import datetime
from typing import Callable, Optional
from urllib.parse import urlencode

import qrcode

from ..common.datetime_utils import epoch_millis, now_utc
from ..common.validators import require_non_empty
from ..core.constants import SESSION_ID_PREFIX
from ..sync.actions import ClearSession, SetSession
from ..sync.model import Database, SessionInfo
from ..sync.service import SyncService


class SessionService:
    """Use case: admin starts/ends the broadcast session and shows its join code."""

    def __init__(self, sync: SyncService, *, clock: Callable[[], datetime] = now_utc):
        self._sync = sync
        self._clock = clock

    def start(self, name: str) -> SessionInfo:
        name = require_non_empty(name, "name")
        session = SessionInfo(id=f"{SESSION_ID_PREFIX}{epoch_millis(self._clock())}", name=name)
        self._sync.apply(SetSession(session))
        return session

    def end(self) -> Database:
        return self._sync.apply(ClearSession())

    def active(self) -> Optional[SessionInfo]:
        return self._sync.snapshot().active_session

    @staticmethod
    def join_url(base_url: str, session: SessionInfo) -> str:
        query = urlencode({"sessionID": session.id, "sessionName": session.name})
        return f"{base_url.rstrip('/')}/?{query}"

    @staticmethod
    def qr_png(data: str) -> bytes:
        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=10,
            border=2,
        )
        qr.add_data(data)
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")
        buf = io.BytesIO()
        img.save(buf, format="PNG")
        return buf.getvalue()
