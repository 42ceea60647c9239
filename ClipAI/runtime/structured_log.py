import datetime
import json
import os
import uuid

from ClipAI.config import config

_SESSION_ID = str(uuid.uuid4())


def get_session_id():
    return _SESSION_ID


def _path():
    p = getattr(config, "runtime_log_path", "ClipAI/data/runtime_events.jsonl")
    return os.path.abspath(str(p))


def _echo_enabled():
    return str(getattr(config, "runtime_log_echo", "0")).lower() in ("1", "true", "yes", "on")


def log_event(event, **fields):
    row = {
        "ts": datetime.datetime.now().isoformat(timespec="seconds"),
        "event": str(event or ""),
        "session_id": _SESSION_ID,
    }
    row.update(fields or {})
    if _echo_enabled():
        print(f"[{row['ts']}] {row['event']} {json.dumps(fields or {}, ensure_ascii=False, default=str)}")
    path = _path()
    folder = os.path.dirname(path)
    try:
        if folder and not os.path.isdir(folder):
            os.makedirs(folder, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(row, ensure_ascii=False, default=str) + "\n")
    except OSError:
        return False
    return True


def log_error(context, error, **fields):
    """Print a short line for the operator and record the failure as an event."""
    print(f"{context}: {error}")
    return log_event(context, error=str(error), **fields)
