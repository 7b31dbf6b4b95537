from __future__ import annotations

"""Simple audit logging utilities."""

import datetime as dt
import json
import logging
from pathlib import Path
from typing import Any

from .config import settings
from .middleware.correlation import request_id_ctx

logger = logging.getLogger(__name__)

AUDIT_FILE_NAME = "audit.log"


def audit_file() -> Path:
    log_dir = Path(settings.logs_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / AUDIT_FILE_NAME


def log_action(action: str, user_id: int | None = None, **details: Any) -> None:
    """Append an audit log entry to ``<LOGS_DIR>/audit.log``.

    Parameters:
        action: Name of the action (register, login, password_reset_requested,
            password_reset_completed, order_placed, contact_submitted)
        user_id: ID of the acting user, if known
        details: Extra JSON-serialisable fields.  Never pass secrets here.
    """
    entry = {
        "timestamp": dt.datetime.utcnow().isoformat(),
        "action": action,
        "user_id": user_id,
        "request_id": request_id_ctx.get(None),
        **details,
    }
    try:
        with audit_file().open("a", encoding="utf-8") as f:
            f.write(json.dumps(entry, default=str) + "\n")
    except OSError as exc:
        # Audit logging must never fail a request
        logger.warning("Could not write audit entry %s: %s", action, exc)
