from ClipAI.brain.llm import AIService
from ClipAI.brain.profiles import ProfileStore
from ClipAI.clipboard.monitor import ClipboardMonitor
from ClipAI.clipboard.stores import ClipStores
from ClipAI.runtime import log_event, log_error


class ClipAIAssistant:
    """Owns the stores, the clipboard monitor and the AI service.

    Everything that mutates a store runs on the caller's context; the UI
    timer calls ``tick`` and the UI actions call the other methods from the
    same thread.
    """

    def __init__(self, *, data_dir=None, clipboard=None, images=None, notifier=None, history_limit=None):
        self.stores = ClipStores(base_dir=data_dir, history_limit=history_limit)
        self.stores.load_all()
        self.profiles = ProfileStore(base_dir=data_dir)
        self.monitor = ClipboardMonitor(
            self.stores,
            clipboard=clipboard,
            images=images,
            notifier=notifier,
        )
        self.ai = AIService()

    @property
    def history(self):
        return self.stores.history

    @property
    def favorites(self):
        return self.stores.favorites

    @property
    def working_set(self):
        return self.stores.working_set

    def tick(self):
        return self.monitor.poll()

    def start_capturing(self):
        return self.monitor.start_capturing()

    def stop_capturing(self):
        return self.monitor.stop_capturing()

    @property
    def is_capturing(self):
        return self.monitor.is_capturing

    def toggle_favorite(self, item):
        return self.stores.toggle_favorite(item)

    def replay(self, item):
        """Copy a history entry back to the clipboard and collect it."""
        return self.monitor.set_clipboard_and_collect(item.content)

    def selected_profile(self):
        return self.profiles.selected()

    def send(self, *, prompt=None, profile=None, wait=False, on_done=None):
        """Send the working set with the selected profile (or ``profile``)."""
        profile = profile or self.selected_profile()
        if prompt is None:
            prompt = profile.custom_prompt
        items = self.working_set.items
        if not items:
            log_event("ai_request_skipped", error_code="empty_working_set")
        if wait:
            return self.ai.send_request(items=items, prompt=prompt, profile=profile)
        return self.ai.send_request_async(items=items, prompt=prompt, profile=profile, on_done=on_done)

    def copy_result_text(self):
        """Put the last AI text on the clipboard; returns False when there is none."""
        result = self.ai.result
        if result is None or not result.text:
            return False
        try:
            self.monitor.clipboard.write_text(result.text)
        except Exception as e:
            log_error("copy_result_failed", e)
            return False
        return True

    def save_result_image(self, path):
        result = self.ai.result
        if result is None or result.image_data is None:
            return None
        try:
            with open(path, "wb") as f:
                f.write(result.image_data)
        except OSError as e:
            log_error("save_result_image_failed", e, path=str(path))
            return None
        return str(path)
