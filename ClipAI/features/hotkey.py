from ClipAI.config import config
from ClipAI.runtime import log_event, log_error


class CaptureHotkey:
    """Global hotkey that toggles capturing.

    pynput calls back on its own listener thread, so the press is only
    forwarded to ``on_press`` (normally ``ClipboardMonitor.request_toggle``),
    which hands it to the polling context.
    """

    def __init__(self, on_press, hotkey=None):
        self.on_press = on_press
        self.hotkey = hotkey or getattr(config, "capture_hotkey", "<ctrl>+<shift>+c")
        self.listener = None

    @property
    def running(self):
        return self.listener is not None

    def _fire(self):
        log_event("capture_hotkey_pressed", hotkey=self.hotkey)
        try:
            self.on_press()
        except Exception as e:
            log_error("capture_hotkey_failed", e)

    def start(self):
        if self.listener is not None:
            return True
        try:
            from pynput import keyboard  # type: ignore
        except Exception as e:
            # No display server / accessibility permission: run without the hotkey.
            log_error("capture_hotkey_unavailable", e)
            return False
        try:
            listener = keyboard.GlobalHotKeys({self.hotkey: self._fire})
            listener.daemon = True
            listener.start()
        except Exception as e:
            log_error("capture_hotkey_unavailable", e, hotkey=self.hotkey)
            return False
        self.listener = listener
        return True

    def stop(self):
        if self.listener is None:
            return
        try:
            self.listener.stop()
        finally:
            self.listener = None
