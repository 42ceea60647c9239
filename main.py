import sys
from typing import Any, cast

from PyQt5 import QtCore, QtGui
from PyQt5.QtCore import QTimer, Qt
from PyQt5.QtWidgets import QApplication, QListWidgetItem, QMainWindow

from ClipAI import ClipAIAssistant
from ClipAI.clipboard.items import ClipKind
from ClipAI.config import config
from ClipAI.features.gui import Ui_MainWindow
from ClipAI.features.hotkey import CaptureHotkey
from ClipAI.runtime import log_event


def _as_bool(value):
    return str(value or "").strip().lower() in ("1", "true", "yes", "on")


class Main(QMainWindow):
    aiFinished = QtCore.pyqtSignal(object)
    notificationPosted = QtCore.pyqtSignal(str, str)

    def __init__(self):
        super().__init__()
        self.ui = Ui_MainWindow()
        self.ui.setupUi(self)

        notify_signal = cast(Any, self.notificationPosted)
        notify_signal.connect(self._show_notification)
        self.assistant = ClipAIAssistant(notifier=notify_signal.emit)
        self.assistant.stores.subscribe(self._on_store_changed)
        cast(Any, self.aiFinished).connect(self._on_ai_finished)

        self.ui.captureButton.clicked.connect(self.toggleCapture)  # type: ignore[attr-defined]
        self.ui.captureNowButton.clicked.connect(self.captureNow)  # type: ignore[attr-defined]
        self.ui.removeButton.clicked.connect(self.removeSelected)  # type: ignore[attr-defined]
        self.ui.clearButton.clicked.connect(self.assistant.working_set.clear)  # type: ignore[attr-defined]
        self.ui.replayButton.clicked.connect(self.replaySelected)  # type: ignore[attr-defined]
        self.ui.favoriteButton.clicked.connect(self.favoriteSelected)  # type: ignore[attr-defined]
        self.ui.clearHistoryButton.clicked.connect(self.assistant.history.clear)  # type: ignore[attr-defined]
        self.ui.sendButton.clicked.connect(self.sendToAI)  # type: ignore[attr-defined]
        self.ui.copyButton.clicked.connect(self.assistant.copy_result_text)  # type: ignore[attr-defined]

        profile = self.assistant.selected_profile()
        self.ui.promptEdit.setPlainText(profile.custom_prompt)
        self.ui.profileLabel.setText(f"Profile: {profile.name} ({profile.model})")

        self.hotkey = None
        if _as_bool(getattr(config, "hotkey_enabled", "1")):
            self.hotkey = CaptureHotkey(self.assistant.monitor.request_toggle)
            self.hotkey.start()

        self._poll_timer = QTimer(self)
        self._poll_timer.timeout.connect(self.tick)  # type: ignore[attr-defined]
        self._poll_timer.start(int(getattr(config, "poll_interval_ms", 500)))

        self._refresh_lists()
        self._refresh_capture_state()
        log_event("app_started")

    def tick(self):
        self.assistant.tick()
        self._refresh_capture_state()

    def toggleCapture(self):
        self.assistant.monitor.toggle_capturing()
        self._refresh_capture_state()

    def captureNow(self):
        self.assistant.monitor.capture_now()

    def removeSelected(self):
        row = self.ui.workingList.currentItem()
        if row is not None:
            self.assistant.working_set.remove(row.data(Qt.UserRole))

    def _selected_history_item(self):
        row = self.ui.historyList.currentItem()
        if row is None:
            return None
        return self.assistant.history.get(row.data(Qt.UserRole))

    def replaySelected(self):
        item = self._selected_history_item()
        if item is not None:
            self.assistant.replay(item)

    def favoriteSelected(self):
        item = self._selected_history_item()
        if item is not None:
            self.assistant.toggle_favorite(item)

    def sendToAI(self):
        prompt = self.ui.promptEdit.toPlainText()
        outcome = self.assistant.send(prompt=prompt, on_done=cast(Any, self.aiFinished).emit)
        if outcome.get("ok"):
            self.ui.sendButton.setEnabled(False)
            self.ui.responseText.setPlainText("Waiting for the AI response...")
            self.ui.responseImage.hide()

    def _on_ai_finished(self, outcome):
        self.ui.sendButton.setEnabled(True)
        if not outcome.get("ok"):
            self.ui.responseText.setPlainText(outcome.get("error") or outcome.get("error_code", ""))
            return
        result = outcome["result"]
        self.ui.responseText.setPlainText(result.text or "")
        if result.image_data is not None:
            pixmap = QtGui.QPixmap()
            if pixmap.loadFromData(result.image_data):
                self.ui.responseImage.setPixmap(pixmap.scaledToWidth(480, Qt.SmoothTransformation))
                self.ui.responseImage.show()

    def _on_store_changed(self, store_name, action, item):
        self._refresh_lists()

    def _refresh_lists(self):
        self.ui.workingList.clear()
        for item in self.assistant.working_set:
            label = item.preview if item.kind is ClipKind.TEXT else f"[{item.kind.value}] {item.preview}"
            row = QListWidgetItem(label)
            row.setData(Qt.UserRole, item.id)
            self.ui.workingList.addItem(row)
        self.ui.historyList.clear()
        for item in self.assistant.history:
            star = "★ " if item.is_favorite else ""
            row = QListWidgetItem(star + item.preview)
            row.setData(Qt.UserRole, item.id)
            self.ui.historyList.addItem(row)
        self.ui.itemCount.setText(f"{len(self.assistant.working_set)} items")

    def _refresh_capture_state(self):
        capturing = self.assistant.is_capturing
        self.ui.statusChip.setText("CAPTURING" if capturing else "CAPTURE OFF")
        self.ui.captureButton.setText("Stop capture" if capturing else "Start capture")

    def _show_notification(self, title, body):
        self.ui.statusbar.showMessage(f"{title}: {body}", 4000)

    def closeEvent(self, event):
        self._poll_timer.stop()
        if self.hotkey is not None:
            self.hotkey.stop()
        log_event("app_stopped")
        super().closeEvent(event)


def main():
    app = QApplication(sys.argv)
    window = Main()
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
