import json
import unittest

from ClipAI.brain.errors import HTTPError, MissingCredential
from ClipAI.config import config
from ClipAI.features.hotkey import CaptureHotkey
from ClipAI.runtime import get_session_id, humanize, log_event

from tests.fakes import isolated_dirs


class RuntimeTests(unittest.TestCase):
    def setUp(self):
        isolated_dirs(self)

    def _events(self):
        with open(config.runtime_log_path, "r", encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]

    def test_log_event_appends_jsonl(self):
        self.assertTrue(log_event("unit_event", count=2))
        self.assertTrue(log_event("unit_event_2"))
        rows = self._events()
        self.assertEqual([r["event"] for r in rows], ["unit_event", "unit_event_2"])
        self.assertEqual(rows[0]["count"], 2)
        self.assertEqual(rows[0]["session_id"], get_session_id())

    def test_humanize_known_and_unknown(self):
        self.assertIn("API key", humanize("missing_api_key"))
        self.assertEqual(humanize("nope"), "An unexpected error occurred.")
        self.assertTrue(humanize("http_error", "500: boom").endswith("(500: boom)"))

    def test_error_messages_are_user_facing(self):
        self.assertEqual(str(MissingCredential()), humanize("missing_api_key"))
        err = HTTPError(429, "quota")
        self.assertEqual(err.details, "429: quota")


class CaptureHotkeyTests(unittest.TestCase):
    def setUp(self):
        isolated_dirs(self)

    def test_press_forwards_to_callback(self):
        presses = []
        hotkey = CaptureHotkey(lambda: presses.append(1), hotkey="<ctrl>+<alt>+k")
        hotkey._fire()
        self.assertEqual(presses, [1])
        self.assertEqual(hotkey.hotkey, "<ctrl>+<alt>+k")

    def test_failing_callback_is_contained(self):
        def boom():
            raise RuntimeError("nope")

        CaptureHotkey(boom)._fire()

    def test_stop_without_start(self):
        hotkey = CaptureHotkey(lambda: None)
        self.assertFalse(hotkey.running)
        hotkey.stop()
        self.assertFalse(hotkey.running)


if __name__ == "__main__":
    unittest.main()
