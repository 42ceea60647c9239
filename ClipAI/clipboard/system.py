import hashlib
import os
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

import pyperclip
from PIL import ImageGrab

from ClipAI.config import config

from .items import ClipKind


@dataclass
class ClipboardContent:
    kind: ClipKind
    text: str = ""
    paths: Tuple[str, ...] = field(default_factory=tuple)
    image: Optional[Any] = None


def _grab():
    try:
        return ImageGrab.grabclipboard()
    except Exception:
        # No clipboard image backend (e.g. missing xclip / wl-paste).
        return None


def _paste():
    try:
        return pyperclip.paste()
    except Exception:
        return ""


def classify(grabbed, text):
    """Image first, then a file list, then plain text; None when nothing matches."""
    if grabbed is not None and hasattr(grabbed, "save") and not isinstance(grabbed, (list, tuple)):
        return ClipboardContent(kind=ClipKind.IMAGE, image=grabbed)
    if isinstance(grabbed, (list, tuple)):
        paths = tuple(str(p) for p in grabbed if p)
        if paths:
            return ClipboardContent(kind=ClipKind.FILE, paths=paths)
    if isinstance(text, str) and text:
        return ClipboardContent(kind=ClipKind.TEXT, text=text)
    return None


SAMPLE_GRID = 8


def image_signature(image):
    """Size, mode and a sparse grid of pixels; avoids copying the whole bitmap each poll."""
    width, height = image.size
    pixels = []
    if width and height:
        for gy in range(SAMPLE_GRID):
            for gx in range(SAMPLE_GRID):
                x = min(width - 1, gx * width // SAMPLE_GRID)
                y = min(height - 1, gy * height // SAMPLE_GRID)
                pixels.append(image.getpixel((x, y)))
    return repr((width, height, getattr(image, "mode", ""), pixels))


def fingerprint(content):
    if content is None:
        return ""
    if content.kind is ClipKind.IMAGE:
        try:
            raw = image_signature(content.image)
        except (AttributeError, TypeError, ValueError):
            raw = repr(content.image)
        return "image:" + hashlib.sha1(raw.encode("utf-8")).hexdigest()
    if content.kind is ClipKind.FILE:
        return "file:" + hashlib.sha1("\n".join(content.paths).encode("utf-8")).hexdigest()
    return "text:" + hashlib.sha1(content.text.encode("utf-8")).hexdigest()


class SystemClipboard:
    """The OS clipboard through pyperclip (text) and Pillow ImageGrab (image/files).

    Neither library exposes a native change counter, so ``change_count`` derives
    one: it increments whenever the content fingerprint differs from the
    previous read.
    """

    def __init__(self):
        self._count = 0
        self._fingerprint = None
        self._content = None

    def read(self):
        return classify(_grab(), _paste())

    def change_count(self):
        content = self.read()
        fp = fingerprint(content)
        if fp != self._fingerprint:
            self._fingerprint = fp
            self._count += 1
        self._content = content
        return self._count

    def current(self):
        """Content observed by the last ``change_count`` call, read fresh if none."""
        if self._content is None:
            self._content = self.read()
        return self._content

    def write_text(self, text):
        pyperclip.copy(text or "")


class TempImageArea:
    """Application-scoped directory where copied images are materialised as PNG."""

    def __init__(self, directory=None):
        self.directory = os.path.abspath(str(directory or getattr(config, "image_dir", "ClipAI/images")))

    def write_png(self, image):
        """Save a Pillow-compatible image; raises OSError/ValueError on failure."""
        os.makedirs(self.directory, exist_ok=True)
        path = os.path.join(self.directory, f"image_{uuid.uuid4()}.png")
        image.save(path, format="PNG")
        return path
