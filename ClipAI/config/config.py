import os
import tempfile
from pathlib import Path

try:
    from dotenv import load_dotenv  # type: ignore
except Exception:
    load_dotenv = None

if load_dotenv is not None:
    # Project-level .env fills in anything not already exported.
    _repo_root = Path(__file__).resolve().parents[2]
    load_dotenv(_repo_root / ".env", override=False)


# Storage
data_dir = os.getenv("CLIPAI_DATA_DIR", "ClipAI/data")
image_dir = os.getenv(
    "CLIPAI_IMAGE_DIR",
    os.path.join(tempfile.gettempdir(), "ClipAI", "Images"),
)


# Clipboard polling
poll_interval_ms = int(os.getenv("CLIPAI_POLL_INTERVAL_MS", "500"))
history_limit = int(os.getenv("CLIPAI_HISTORY_LIMIT", "100"))


# Capture toggle hotkey (pynput GlobalHotKeys syntax)
hotkey_enabled = os.getenv("CLIPAI_HOTKEY_ENABLED", "1")
capture_hotkey = os.getenv("CLIPAI_CAPTURE_HOTKEY", "<ctrl>+<shift>+c")


# AI request
#
# Defaults used when no profile has been saved yet. Profiles themselves are
# persisted in ai_configs.json under data_dir.
ai_default_api_key = os.getenv("CLIPAI_AI_API_KEY", "")
ai_default_endpoint = os.getenv(
    "CLIPAI_AI_ENDPOINT",
    "https://generativelanguage.googleapis.com/v1beta/models/",
)
ai_default_model = os.getenv("CLIPAI_AI_MODEL", "gemini-pro")
ai_timeout_s = int(os.getenv("CLIPAI_AI_TIMEOUT_S", "120"))


# Runtime / ops
runtime_log_path = os.getenv("CLIPAI_RUNTIME_LOG_PATH", "ClipAI/data/runtime_events.jsonl")
runtime_log_echo = os.getenv("CLIPAI_LOG_ECHO", "0")
