import json
import os

from ClipAI.config import config
from ClipAI.runtime import log_event

from .items import ClipItem

HISTORY_RECORD = "history"
FAVORITES_RECORD = "favorites"
WORKING_SET_RECORD = "working_set"
AI_CONFIGS_RECORD = "ai_configs"
SELECTED_CONFIG_RECORD = "selected_config"


def default_data_dir():
    return os.path.abspath(str(getattr(config, "data_dir", "ClipAI/data")))


class JsonRecordStore:
    """One logical record persisted as a JSON file.

    ``load`` never raises: an absent file yields ``default`` silently, an
    unreadable or undecodable one yields ``default`` and logs
    ``persistence_read_failed``. ``save`` returns False on failure after
    logging ``persistence_write_failed``.
    """

    def __init__(self, name, base_dir=None):
        self.name = name
        self.base_dir = base_dir or default_data_dir()
        self.path = os.path.join(self.base_dir, f"{name}.json")

    def load(self, default=None):
        if not os.path.exists(self.path):
            return default
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            log_event("persistence_read_failed", record=self.name, error=str(e))
            return default

    def save(self, data):
        folder = os.path.dirname(self.path)
        try:
            if folder and not os.path.isdir(folder):
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except (OSError, TypeError, ValueError) as e:
            log_event("persistence_write_failed", record=self.name, error=str(e))
            return False
        return True


class ClipListRepository:
    """Ordered list of ClipItem rows stored in a single JsonRecordStore."""

    def __init__(self, name, base_dir=None):
        self.record = JsonRecordStore(name, base_dir=base_dir)

    @property
    def name(self):
        return self.record.name

    def load(self):
        rows = self.record.load(default=[])
        if not isinstance(rows, list):
            log_event("persistence_read_failed", record=self.name, error="expected a list")
            return []
        try:
            return [ClipItem.from_dict(row) for row in rows]
        except (ValueError, TypeError) as e:
            # A single bad row invalidates the record, same as an undecodable file.
            log_event("persistence_read_failed", record=self.name, error=str(e))
            return []

    def save(self, items):
        return self.record.save([item.to_dict() for item in items])
