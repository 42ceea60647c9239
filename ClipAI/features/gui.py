# -*- coding: utf-8 -*-

from PyQt5 import QtCore, QtGui, QtWidgets


class Ui_MainWindow(object):
    def setupUi(self, MainWindow):
        MainWindow.setObjectName("ClipAI")
        MainWindow.resize(1100, 720)

        primary_font = "Segoe UI"
        if not QtGui.QFont(primary_font).exactMatch():
            primary_font = "Helvetica"

        panel_qss = (
            "QFrame{"
            "background-color: rgb(248, 249, 251);"
            "border: 1px solid rgb(222, 226, 232);"
            "border-radius: 10px;"
            "}"
        )

        self.centralwidget = QtWidgets.QWidget(MainWindow)
        self.centralwidget.setObjectName("centralwidget")
        root = QtWidgets.QHBoxLayout(self.centralwidget)
        root.setContentsMargins(14, 14, 14, 14)
        root.setSpacing(12)

        # Left: working set + history
        self.leftFrame = QtWidgets.QFrame(self.centralwidget)
        self.leftFrame.setStyleSheet(panel_qss)
        self.leftFrame.setObjectName("leftFrame")
        self.leftFrame.setMinimumWidth(360)
        left_layout = QtWidgets.QVBoxLayout(self.leftFrame)
        left_layout.setContentsMargins(12, 12, 12, 12)
        left_layout.setSpacing(8)

        self.statusChip = QtWidgets.QLabel(self.leftFrame)
        self.statusChip.setStyleSheet(
            "color: rgb(20, 60, 110);"
            "background-color: rgba(56, 161, 255, 30);"
            "border-radius: 8px;"
            "padding: 4px 8px;"
            f"font: 700 10pt \"{primary_font}\";"
        )
        self.statusChip.setObjectName("statusChip")

        self.workingTitle = QtWidgets.QLabel(self.leftFrame)
        self.workingTitle.setObjectName("workingTitle")
        self.workingList = QtWidgets.QListWidget(self.leftFrame)
        self.workingList.setObjectName("workingList")

        working_buttons = QtWidgets.QHBoxLayout()
        self.captureButton = QtWidgets.QPushButton(self.leftFrame)
        self.captureButton.setObjectName("captureButton")
        self.captureNowButton = QtWidgets.QPushButton(self.leftFrame)
        self.captureNowButton.setObjectName("captureNowButton")
        self.removeButton = QtWidgets.QPushButton(self.leftFrame)
        self.removeButton.setObjectName("removeButton")
        self.clearButton = QtWidgets.QPushButton(self.leftFrame)
        self.clearButton.setObjectName("clearButton")
        for b in (self.captureButton, self.captureNowButton, self.removeButton, self.clearButton):
            working_buttons.addWidget(b)

        self.historyTitle = QtWidgets.QLabel(self.leftFrame)
        self.historyTitle.setObjectName("historyTitle")
        self.historyList = QtWidgets.QListWidget(self.leftFrame)
        self.historyList.setObjectName("historyList")

        history_buttons = QtWidgets.QHBoxLayout()
        self.replayButton = QtWidgets.QPushButton(self.leftFrame)
        self.replayButton.setObjectName("replayButton")
        self.favoriteButton = QtWidgets.QPushButton(self.leftFrame)
        self.favoriteButton.setObjectName("favoriteButton")
        self.clearHistoryButton = QtWidgets.QPushButton(self.leftFrame)
        self.clearHistoryButton.setObjectName("clearHistoryButton")
        for b in (self.replayButton, self.favoriteButton, self.clearHistoryButton):
            history_buttons.addWidget(b)

        left_layout.addWidget(self.statusChip)
        left_layout.addWidget(self.workingTitle)
        left_layout.addWidget(self.workingList, 1)
        left_layout.addLayout(working_buttons)
        left_layout.addWidget(self.historyTitle)
        left_layout.addWidget(self.historyList, 1)
        left_layout.addLayout(history_buttons)

        # Right: prompt + response
        self.rightFrame = QtWidgets.QFrame(self.centralwidget)
        self.rightFrame.setStyleSheet(panel_qss)
        self.rightFrame.setObjectName("rightFrame")
        right_layout = QtWidgets.QVBoxLayout(self.rightFrame)
        right_layout.setContentsMargins(12, 12, 12, 12)
        right_layout.setSpacing(8)

        self.profileLabel = QtWidgets.QLabel(self.rightFrame)
        self.profileLabel.setObjectName("profileLabel")
        self.promptEdit = QtWidgets.QPlainTextEdit(self.rightFrame)
        self.promptEdit.setObjectName("promptEdit")
        self.promptEdit.setMaximumHeight(110)

        send_row = QtWidgets.QHBoxLayout()
        self.sendButton = QtWidgets.QPushButton(self.rightFrame)
        self.sendButton.setMinimumSize(QtCore.QSize(132, 36))
        self.sendButton.setCursor(QtGui.QCursor(QtCore.Qt.PointingHandCursor))
        self.sendButton.setObjectName("sendButton")
        self.copyButton = QtWidgets.QPushButton(self.rightFrame)
        self.copyButton.setObjectName("copyButton")
        self.itemCount = QtWidgets.QLabel(self.rightFrame)
        self.itemCount.setObjectName("itemCount")
        send_row.addWidget(self.sendButton)
        send_row.addWidget(self.copyButton)
        send_row.addStretch(1)
        send_row.addWidget(self.itemCount)

        self.responseTitle = QtWidgets.QLabel(self.rightFrame)
        self.responseTitle.setObjectName("responseTitle")
        self.responseImage = QtWidgets.QLabel(self.rightFrame)
        self.responseImage.setObjectName("responseImage")
        self.responseImage.setAlignment(QtCore.Qt.AlignCenter)
        self.responseImage.hide()
        self.responseText = QtWidgets.QTextBrowser(self.rightFrame)
        self.responseText.setObjectName("responseText")

        right_layout.addWidget(self.profileLabel)
        right_layout.addWidget(self.promptEdit)
        right_layout.addLayout(send_row)
        right_layout.addWidget(self.responseTitle)
        right_layout.addWidget(self.responseImage)
        right_layout.addWidget(self.responseText, 1)

        root.addWidget(self.leftFrame, 0)
        root.addWidget(self.rightFrame, 1)
        MainWindow.setCentralWidget(self.centralwidget)

        self.statusbar = QtWidgets.QStatusBar(MainWindow)
        self.statusbar.setObjectName("statusbar")
        MainWindow.setStatusBar(self.statusbar)

        self.retranslateUi(MainWindow)
        QtCore.QMetaObject.connectSlotsByName(MainWindow)

    def retranslateUi(self, MainWindow):
        _translate = QtCore.QCoreApplication.translate
        MainWindow.setWindowTitle(_translate("MainWindow", "ClipAI"))
        self.statusChip.setText(_translate("MainWindow", "CAPTURE OFF"))
        self.workingTitle.setText(_translate("MainWindow", "Collected"))
        self.captureButton.setText(_translate("MainWindow", "Start capture"))
        self.captureNowButton.setText(_translate("MainWindow", "Capture now"))
        self.removeButton.setText(_translate("MainWindow", "Remove"))
        self.clearButton.setText(_translate("MainWindow", "Clear"))
        self.historyTitle.setText(_translate("MainWindow", "Clipboard history"))
        self.replayButton.setText(_translate("MainWindow", "Copy && collect"))
        self.favoriteButton.setText(_translate("MainWindow", "Favorite"))
        self.clearHistoryButton.setText(_translate("MainWindow", "Clear history"))
        self.sendButton.setText(_translate("MainWindow", "Send to AI"))
        self.copyButton.setText(_translate("MainWindow", "Copy result"))
        self.responseTitle.setText(_translate("MainWindow", "AI response"))
        self.responseText.setPlaceholderText(_translate("MainWindow", "The AI response will appear here."))
