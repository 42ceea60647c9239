import base64
import urllib.parse
from dataclasses import dataclass
from typing import Any, Dict

from ClipAI.clipboard.items import ClipKind
from ClipAI.runtime import log_event

from .errors import InvalidEndpoint, MissingCredential

TEXT_LABEL = "Text content:"
UNREADABLE = "(unreadable content)"
IMAGE_MIME = "image/png"

METHOD_TEXT = "generateContent"
METHOD_IMAGE = "streamGenerateContent"


@dataclass
class PreparedRequest:
    url: str
    api_method: str
    body: Dict[str, Any]

    @property
    def parts(self):
        return self.body["contents"][0]["parts"]


def read_file_text(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        log_event("file_read_failed", path=str(path), error=str(e))
        return None


def combined_content(items):
    """Render working-set items as numbered sections for the text part."""
    out = []
    for index, item in enumerate(items, 1):
        out.append(f"--- Item {index} ---\n")
        if item.kind is ClipKind.TEXT:
            out.append(item.content + "\n\n")
        elif item.kind is ClipKind.FILE:
            text = read_file_text(item.content)
            if text is None:
                out.append(f"File: {item.preview} {UNREADABLE}\n\n")
            else:
                out.append(f"File: {item.preview}\n{text}\n\n")
        else:
            out.append(f"Image: {item.preview} (attached)\n\n")
    return "".join(out)


def image_part(item):
    try:
        with open(item.content, "rb") as f:
            data = f.read()
    except OSError as e:
        log_event("file_read_failed", path=item.content, error=str(e))
        return None
    return {
        "inline_data": {
            "mime_type": IMAGE_MIME,
            "data": base64.b64encode(data).decode("ascii"),
        }
    }


def api_method_for(profile):
    return METHOD_IMAGE if profile.wants_image else METHOD_TEXT


def compose_url(profile, api_method):
    key = urllib.parse.quote(profile.api_key.strip(), safe="")
    url = f"{profile.api_endpoint}{profile.model}:{api_method}?key={key}"
    try:
        parsed = urllib.parse.urlsplit(url)
    except ValueError as e:
        raise InvalidEndpoint(str(e))
    if parsed.scheme not in ("http", "https") or not parsed.netloc or " " in url:
        raise InvalidEndpoint(profile.api_endpoint)
    return url


def generation_config(profile):
    if not profile.wants_image:
        return None
    return {
        "responseModalities": ["IMAGE", "TEXT"],
        "imageConfig": {
            "imageSize": profile.image_size.value,
            "aspectRatio": profile.aspect_ratio.value,
        },
    }


def build_request(items, prompt, profile):
    if not (profile.api_key or "").strip():
        raise MissingCredential()
    api_method = api_method_for(profile)
    url = compose_url(profile, api_method)

    items = list(items)
    parts = [{"text": f"{prompt}\n\n{TEXT_LABEL}\n{combined_content(items)}"}]
    for item in items:
        if item.kind is not ClipKind.IMAGE:
            continue
        part = image_part(item)
        if part is not None:
            parts.append(part)

    body = {"contents": [{"parts": parts}]}
    gen = generation_config(profile)
    if gen is not None:
        body["generationConfig"] = gen
    return PreparedRequest(url=url, api_method=api_method, body=body)
