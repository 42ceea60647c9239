import queue

from ClipAI.runtime import log_event, log_error

from .items import ClipKind
from .system import SystemClipboard, TempImageArea


class ClipboardMonitor:
    """Polls the clipboard and routes new content into the stores.

    ``poll`` must be driven from a single context (the UI timer); history
    tracking is always on while polling, capturing additionally routes content
    into the working set. Other threads request a capture toggle through
    ``request_toggle``; it is applied at the start of the next poll.
    """

    def __init__(self, stores, *, clipboard=None, images=None, notifier=None):
        self.stores = stores
        self.clipboard = clipboard if clipboard is not None else SystemClipboard()
        self.images = images if images is not None else TempImageArea()
        self.notifier = notifier
        self._capturing = False
        self._toggles = queue.Queue()
        self._last_change = self.clipboard.change_count()

    @property
    def is_capturing(self):
        return self._capturing

    def start_capturing(self):
        if self._capturing:
            return False
        self._capturing = True
        log_event("capture_started")
        self._notify("Capture started", "Copied content will now be collected.")
        return True

    def stop_capturing(self):
        if not self._capturing:
            return False
        self._capturing = False
        log_event("capture_stopped")
        self._notify("Capture stopped", "Clipboard collection is off.")
        return True

    def toggle_capturing(self):
        if self._capturing:
            self.stop_capturing()
        else:
            self.start_capturing()
        return self._capturing

    def request_toggle(self):
        self._toggles.put_nowait(True)

    def _drain_toggles(self):
        while True:
            try:
                self._toggles.get_nowait()
            except queue.Empty:
                return
            self.toggle_capturing()

    def poll(self):
        """One polling cycle. Returns the items appended anywhere, or None when unchanged."""
        self._drain_toggles()
        count = self.clipboard.change_count()
        if count == self._last_change:
            return None
        self._last_change = count
        return self._route(self.clipboard.current())

    def _route(self, content):
        added = []
        if content is None:
            return added
        if content.kind is ClipKind.TEXT:
            item = self.stores.history.add_text(content.text)
            if item is not None:
                added.append(item)
            if self._capturing:
                added.extend(self._collect(content))
            return added
        if self._capturing:
            added.extend(self._collect(content))
        return added

    def _collect(self, content):
        working_set = self.stores.working_set
        if content is None:
            return []
        if content.kind is ClipKind.IMAGE:
            path = self._store_image(content.image)
            if path is None:
                return []
            return [working_set.add_image(path)]
        if content.kind is ClipKind.FILE:
            return [working_set.add_file(p) for p in content.paths]
        item = working_set.add_text(content.text)
        return [item] if item is not None else []

    def _store_image(self, image):
        try:
            path = self.images.write_png(image)
        except (OSError, ValueError, AttributeError) as e:
            log_error("image_write_failed", e, directory=self.images.directory)
            return None
        log_event("image_captured", path=path)
        return path

    def capture_now(self):
        """Append whatever is on the clipboard to the working set, capturing or not."""
        content = self.clipboard.read()
        if content is None:
            log_event("capture_now_empty")
            return []
        return self._collect(content)

    def set_clipboard_and_collect(self, text):
        """Put a history entry back on the clipboard and collect it.

        The change generation is re-read after the write so the next poll does
        not treat our own write as new content.
        """
        self.clipboard.write_text(text)
        self._last_change = self.clipboard.change_count()
        return self.stores.working_set.add_text(text)

    def _notify(self, title, body):
        cb = self.notifier
        if not cb:
            return
        try:
            cb(title, body)
        except Exception as e:
            log_error("notification_failed", e)
