"""Decode generateContent / streamGenerateContent responses.

The endpoint answers with one of three shapes depending on method and
transport: a single JSON object, a JSON array of chunk objects, or
newline-delimited JSON. Each shape is an attempt in an ordered chain; an
attempt reports whether its shape matched instead of raising, and the first
match wins.
"""

import base64
import binascii
import json
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .errors import EmptyResponse


@dataclass
class AIResult:
    text: Optional[str] = None
    image_data: Optional[bytes] = None
    image_mime_type: Optional[str] = None

    @property
    def has_image(self):
        return self.image_data is not None


@dataclass
class DecodeAttempt:
    ok: bool
    texts: List[str] = field(default_factory=list)
    image: Optional[Tuple[str, bytes]] = None


def _first_dict(obj, *keys):
    for k in keys:
        value = obj.get(k)
        if isinstance(value, dict):
            return value
    return None


def _first_str(obj, *keys):
    for k in keys:
        value = obj.get(k)
        if isinstance(value, str):
            return value
    return None


def _b64decode(data):
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        return None


def extract(obj, attempt):
    """Collect text parts and inline image data from one response object."""
    candidates = obj.get("candidates")
    if not isinstance(candidates, list):
        return attempt
    for candidate in candidates:
        if not isinstance(candidate, dict):
            continue
        content = candidate.get("content")
        if not isinstance(content, dict):
            continue
        parts = content.get("parts")
        if not isinstance(parts, list):
            continue
        for part in parts:
            if not isinstance(part, dict):
                continue
            text = part.get("text")
            if isinstance(text, str):
                attempt.texts.append(text)
            inline = _first_dict(part, "inlineData", "inline_data")
            if inline is None:
                continue
            mime = _first_str(inline, "mimeType", "mime_type")
            data = inline.get("data")
            if mime is None or not isinstance(data, str):
                continue
            decoded = _b64decode(data)
            if decoded is not None:
                attempt.image = (mime, decoded)
    return attempt


def _loads(text):
    try:
        return True, json.loads(text)
    except ValueError:
        return False, None


def as_object(text):
    ok, value = _loads(text)
    if not ok or not isinstance(value, dict):
        return DecodeAttempt(ok=False)
    return extract(value, DecodeAttempt(ok=True))


def as_array(text):
    ok, value = _loads(text)
    if not ok or not isinstance(value, list):
        return DecodeAttempt(ok=False)
    attempt = DecodeAttempt(ok=True)
    for element in value:
        if isinstance(element, dict):
            extract(element, attempt)
    return attempt


def as_ndjson(text):
    attempt = DecodeAttempt(ok=False)
    for line in text.split("\n"):
        if not line.strip():
            continue
        ok, value = _loads(line)
        if not ok or not isinstance(value, dict):
            continue
        attempt.ok = True
        extract(value, attempt)
    return attempt


STRATEGIES = (as_object, as_array, as_ndjson)


def decode_response(raw):
    if isinstance(raw, (bytes, bytearray)):
        text = bytes(raw).decode("utf-8", errors="replace")
    else:
        text = str(raw or "")

    attempt = DecodeAttempt(ok=False)
    for strategy in STRATEGIES:
        attempt = strategy(text)
        if attempt.ok:
            break

    if not attempt.texts and attempt.image is None:
        raise EmptyResponse()
    result = AIResult(text="\n".join(attempt.texts) or None)
    if attempt.image is not None:
        result.image_mime_type, result.image_data = attempt.image
    return result
