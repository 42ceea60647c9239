import os
import tempfile

from ClipAI.clipboard.items import ClipKind
from ClipAI.clipboard.system import ClipboardContent
from ClipAI.config import config


def isolated_dirs(testcase):
    """Temp data/image dirs for one test; the event log is redirected there too."""
    td = tempfile.TemporaryDirectory()
    testcase.addCleanup(td.cleanup)
    old_log = config.runtime_log_path
    config.runtime_log_path = os.path.join(td.name, "events.jsonl")
    testcase.addCleanup(setattr, config, "runtime_log_path", old_log)
    data_dir = os.path.join(td.name, "data")
    image_dir = os.path.join(td.name, "images")
    return td.name, data_dir, image_dir


class FakeImage:
    mode = "RGB"

    def __init__(self, payload=b"\x89PNG\r\n\x1a\nfake", size=(4, 3)):
        self.payload = payload
        self.size = size
        self.saved = []
        self.tobytes_calls = 0

    def save(self, path, format=None):
        with open(path, "wb") as f:
            f.write(self.payload)
        self.saved.append((path, format))

    def getpixel(self, xy):
        x, y = xy
        return self.payload[(y * self.size[0] + x) % len(self.payload)]

    def tobytes(self):
        self.tobytes_calls += 1
        return self.payload


class FakeClipboard:
    """Scripted clipboard: every set_* call bumps the change generation."""

    def __init__(self):
        self.count = 0
        self.content = None
        self.writes = []

    def _set(self, content):
        self.count += 1
        self.content = content

    def set_text(self, text):
        self._set(ClipboardContent(kind=ClipKind.TEXT, text=text))

    def set_files(self, *paths):
        self._set(ClipboardContent(kind=ClipKind.FILE, paths=tuple(paths)))

    def set_image(self, image=None):
        self._set(ClipboardContent(kind=ClipKind.IMAGE, image=image or FakeImage()))

    def set_empty(self):
        self._set(None)

    def change_count(self):
        return self.count

    def current(self):
        return self.content

    def read(self):
        return self.content

    def write_text(self, text):
        self.writes.append(text)
        self.set_text(text)


class FailingImageArea:
    directory = "/nonexistent"

    def write_png(self, image):
        raise OSError("disk full")


class FakeResponse:
    def __init__(self, status_code=200, body=b"", text=None):
        self.status_code = status_code
        self.content = body if isinstance(body, bytes) else body.encode("utf-8")
        self.text = text if text is not None else self.content.decode("utf-8", errors="replace")
