from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .admin.controller import register as register_admin
from .container import Container, build_container
from .core.constants import DEFAULT_POLL_INTERVAL_MS
from .records.controller import register as register_records
from .sessions.controller import register as register_sessions
from .sync.controller import register as register_sync


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(overrides: Optional[dict] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    store_config = dict(getattr(settings, "STORE_CONFIG"))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["ADMIN_PASSWORD"] = getattr(settings, "ADMIN_PASSWORD", "admin123")
    app.config["POLL_INTERVAL_MS"] = int(getattr(settings, "POLL_INTERVAL_MS", DEFAULT_POLL_INTERVAL_MS))
    app.config["PUBLIC_BASE_URL"] = getattr(settings, "PUBLIC_BASE_URL", None)
    app.config["EXPORT_TZ"] = getattr(settings, "EXPORT_TZ", None)

    for key, value in (overrides or {}).items():
        if key == "STORE_CONFIG":
            store_config.update(value)
        else:
            app.config[key] = value

    configure_logging(app.config["DEBUG"])

    if container is None:
        container = build_container(
            store_config=store_config,
            admin_password=app.config["ADMIN_PASSWORD"],
            export_tz=app.config["EXPORT_TZ"],
        )

    if app.config["DEBUG"]:
        print(
            "[attendance-sync] settings=", settings_module,
            " mode=", container.coordinator.mode.value,
            " file=", container.file_store.path,
        )

    register_sync(app, container)
    register_sessions(app, container)
    register_records(app, container)
    register_admin(app, container)

    return app
