import threading

import requests

from ClipAI.config import config
from ClipAI.runtime import humanize, log_event, log_error

from .errors import AIError, EmptyResponse, HTTPError, InvalidEndpoint, MissingCredential, TransportError
from .request_builder import build_request
from .response_decoder import AIResult, decode_response

_SESSION = requests.Session()


def _timeout_s(timeout_s=None):
    if timeout_s is not None:
        return timeout_s
    return int(getattr(config, "ai_timeout_s", 120))


def post_request(prepared, *, timeout_s=None):
    """POST a prepared request; returns the raw body of a 200 response."""
    headers = {"Content-Type": "application/json"}
    try:
        res = _SESSION.post(prepared.url, headers=headers, json=prepared.body, timeout=_timeout_s(timeout_s))
    except requests.RequestException as e:
        raise TransportError(str(e))
    if res.status_code != 200:
        raise HTTPError(res.status_code, res.text)
    return res.content


def generate(*, items, prompt, profile, timeout_s=None):
    prepared = build_request(items, prompt, profile)
    log_event(
        "ai_request",
        profile=profile.name,
        model=profile.model,
        api_method=prepared.api_method,
        parts=len(prepared.parts),
    )
    raw = post_request(prepared, timeout_s=timeout_s)
    log_event("ai_response_received", size=len(raw))
    result = decode_response(raw)
    log_event(
        "ai_response_decoded",
        text_chars=len(result.text or ""),
        image_mime_type=result.image_mime_type or "",
    )
    return result


class AIService:
    """Runs one AI request at a time and keeps the last outcome for display.

    ``send_request`` refuses to start while another request is outstanding; it
    does not queue. ``result`` and ``error`` describe the last finished request.
    """

    def __init__(self, *, timeout_s=None):
        self.timeout_s = timeout_s
        self.result = None
        self.error = None
        self.error_code = None
        self._loading = False
        self._lock = threading.Lock()
        self._subscribers = []

    @property
    def is_loading(self):
        return self._loading

    def subscribe(self, callback):
        self._subscribers.append(callback)

    def _claim(self):
        with self._lock:
            if self._loading:
                return False
            self._loading = True
        self.result = None
        self.error = None
        self.error_code = None
        self._emit()
        return True

    def _busy(self):
        log_event("ai_request_rejected", error_code="request_in_flight")
        return {"ok": False, "error_code": "request_in_flight"}

    def send_request(self, *, items, prompt, profile):
        if not self._claim():
            return self._busy()
        return self._run(list(items), prompt, profile)

    def send_request_async(self, *, items, prompt, profile, on_done=None):
        """Start the request on a worker thread; ``on_done(outcome)`` is called from that thread."""
        if not self._claim():
            return self._busy()
        snapshot = list(items)

        def _worker():
            outcome = self._run(snapshot, prompt, profile)
            if on_done:
                try:
                    on_done(outcome)
                except Exception as e:
                    log_error("ai_callback_failed", e)

        threading.Thread(target=_worker, daemon=True).start()
        return {"ok": True, "started": True}

    def _run(self, items, prompt, profile):
        try:
            result = generate(items=items, prompt=prompt, profile=profile, timeout_s=self.timeout_s)
        except AIError as e:
            self.error = str(e)
            self.error_code = e.error_code
            log_event("ai_request_failed", error_code=e.error_code, details=e.details[:500])
            outcome = {"ok": False, "error_code": e.error_code, "error": self.error}
        except Exception as e:
            self.error = humanize("execution_failed", str(e))
            self.error_code = "execution_failed"
            log_error("ai_request_crashed", e)
            outcome = {"ok": False, "error_code": "execution_failed", "error": self.error}
        else:
            self.result = result
            outcome = {"ok": True, "result": result}
        finally:
            with self._lock:
                self._loading = False
        self._emit()
        return outcome

    def _emit(self):
        for cb in list(self._subscribers):
            try:
                cb(self)
            except Exception as e:
                log_error("ai_subscriber_failed", e)


__all__ = [
    "AIError",
    "AIResult",
    "AIService",
    "EmptyResponse",
    "HTTPError",
    "InvalidEndpoint",
    "MissingCredential",
    "TransportError",
    "generate",
    "post_request",
]
