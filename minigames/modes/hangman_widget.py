# -*- coding: utf-8 -*-
import string

from PySide6 import QtWidgets, QtGui, QtCore

from minigames.engines.hangman import Guess, NewWord, PLAYING, LOST, masked_word
from minigames.modes.base_mode import BaseModeWidget


class GallowsView(QtWidgets.QWidget):
    """Draws the gallows and one body part per wrong guess."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.wrong = 0
        self.lost = False
        self.setMinimumSize(200, 250)

    def paintEvent(self, e: QtGui.QPaintEvent):
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.Antialiasing)
        # مختصات روی بوم 200x250 تعریف شده‌اند
        p.scale(self.width() / 200, self.height() / 250)
        p.setPen(QtGui.QPen(QtGui.QColor(230, 236, 245), 4))
        p.drawLine(10, 230, 100, 230)
        p.drawLine(30, 230, 30, 20)
        p.drawLine(30, 20, 120, 20)
        p.drawLine(120, 20, 120, 50)
        p.setPen(QtGui.QPen(QtGui.QColor(248, 113, 113) if self.lost else QtGui.QColor(230, 236, 245), 3))
        parts = [
            lambda: p.drawEllipse(QtCore.QPointF(120, 65), 15, 15),
            lambda: p.drawLine(120, 80, 120, 150),
            lambda: p.drawLine(120, 100, 90, 130),
            lambda: p.drawLine(120, 100, 150, 130),
            lambda: p.drawLine(120, 150, 90, 190),
            lambda: p.drawLine(120, 150, 150, 190),
        ]
        for draw in parts[: self.wrong]:
            draw()


class HangmanWidget(BaseModeWidget):
    def __init__(self, lang: str = "fa", parent=None):
        super().__init__(lang, parent)
        self.setFocusPolicy(QtCore.Qt.StrongFocus)
        self._build_ui()

    def _build_ui(self):
        root = QtWidgets.QHBoxLayout(self)
        root.setContentsMargins(24, 18, 24, 18)
        root.setSpacing(18)

        self.gallows = GallowsView()
        root.addWidget(self.gallows, 1)

        col = QtWidgets.QVBoxLayout()
        self.lbl_word = QtWidgets.QLabel()
        self.lbl_word.setFont(QtGui.QFont("Inter", 28, QtGui.QFont.Bold))
        self.lbl_word.setAlignment(QtCore.Qt.AlignCenter)
        self.lbl_hint = QtWidgets.QLabel()
        self.lbl_hint.setWordWrap(True)
        self.lbl_wrong = QtWidgets.QLabel()
        self.lbl_wrong.setObjectName("nbChip")
        col.addWidget(self.lbl_word)
        col.addWidget(self.lbl_hint)
        col.addWidget(self.lbl_wrong)

        keys = QtWidgets.QGridLayout()
        keys.setSpacing(4)
        self.letter_buttons = {}
        for i, ch in enumerate(string.ascii_lowercase):
            b = QtWidgets.QPushButton(ch.upper())
            b.setFixedSize(40, 40)
            b.setFocusPolicy(QtCore.Qt.NoFocus)
            b.clicked.connect(lambda _=False, ch=ch: self.dispatch(Guess(ch)))
            keys.addWidget(b, i // 7, i % 7)
            self.letter_buttons[ch] = b
        col.addLayout(keys)
        col.addStretch(1)

        self.btn_new = QtWidgets.QPushButton()
        self.btn_new.clicked.connect(lambda: self.dispatch(NewWord()))
        col.addWidget(self.btn_new)
        root.addLayout(col, 2)
        self.retranslate()

    def retranslate(self):
        self.btn_new.setText(self._t("hangman.new"))

    def keyPressEvent(self, e: QtGui.QKeyEvent):
        text = e.text()
        if len(text) == 1 and text.isalpha():
            self.dispatch(Guess(text))
            return
        super().keyPressEvent(e)

    def refresh(self):
        if self.engine is None:
            return
        st = self.engine.state
        # پس از باخت کلمه کامل نشان داده می‌شود
        shown = " ".join(st.word) if st.status == LOST else masked_word(st)
        self.lbl_word.setText(shown.upper())
        self.lbl_hint.setText(self._t("hangman.hint", hint=st.hint) if st.hint else "")
        self.lbl_wrong.setText(
            self._t("hangman.wrong", count=st.wrong_count, limit=st.max_guesses)
        )
        for ch, b in self.letter_buttons.items():
            b.setEnabled(st.status == PLAYING and ch not in st.guessed)
        self.gallows.wrong = st.wrong_count
        self.gallows.lost = st.status == LOST
        self.gallows.update()
