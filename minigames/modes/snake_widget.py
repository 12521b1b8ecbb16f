# -*- coding: utf-8 -*-
from PySide6 import QtWidgets, QtGui, QtCore

from minigames.engines.board import Direction
from minigames.engines.snake import Start, Turn, OVER, RUNNING
from minigames.modes.base_mode import BaseModeWidget

# direction -> (row, col, glyph) on the on-screen pad
PAD = {
    Direction.UP: (0, 1, "▲"),
    Direction.LEFT: (1, 0, "◀"),
    Direction.DOWN: (1, 1, "▼"),
    Direction.RIGHT: (1, 2, "▶"),
}


class SnakeBoard(QtWidgets.QWidget):
    def __init__(self, owner, parent=None):
        super().__init__(parent)
        self._owner = owner
        self.setMinimumSize(360, 360)

    def paintEvent(self, e: QtGui.QPaintEvent):
        engine = self._owner.engine
        if engine is None:
            return
        st = engine.state
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.Antialiasing)
        side = min(self.width(), self.height())
        cell = side / max(st.width, st.height)
        ox = (self.width() - cell * st.width) / 2
        oy = (self.height() - cell * st.height) / 2

        # بک‌گراند
        grad = QtGui.QLinearGradient(0, 0, side, side)
        grad.setColorAt(0, QtGui.QColor(18, 30, 58))
        grad.setColorAt(1, QtGui.QColor(22, 46, 86))
        p.fillRect(QtCore.QRectF(ox, oy, cell * st.width, cell * st.height), grad)

        p.setPen(QtCore.Qt.NoPen)
        if st.food is not None:
            p.setBrush(QtGui.QColor(239, 68, 68))
            p.drawEllipse(
                QtCore.QRectF(ox + st.food.x * cell, oy + st.food.y * cell, cell, cell).adjusted(2, 2, -2, -2)
            )
        for i, seg in enumerate(st.body):
            color = QtGui.QColor(147, 197, 253) if i == 0 else QtGui.QColor(96, 165, 250)
            if st.status == OVER:
                color = color.darker(160)
            p.setBrush(color)
            p.drawRoundedRect(
                QtCore.QRectF(ox + seg.x * cell, oy + seg.y * cell, cell, cell).adjusted(1, 1, -1, -1),
                3,
                3,
            )


class SnakeWidget(BaseModeWidget):
    def __init__(self, lang: str = "fa", parent=None):
        super().__init__(lang, parent)
        self._build_ui()

    def _build_ui(self):
        root = QtWidgets.QVBoxLayout(self)
        root.setContentsMargins(24, 18, 24, 18)
        root.setSpacing(10)

        top = QtWidgets.QHBoxLayout()
        self.lbl_score = QtWidgets.QLabel()
        self.lbl_best = QtWidgets.QLabel()
        for lab in (self.lbl_score, self.lbl_best):
            lab.setObjectName("nbChip")
            top.addWidget(lab)
        top.addStretch(1)
        self.btn_start = QtWidgets.QPushButton()
        self.btn_start.setFocusPolicy(QtCore.Qt.NoFocus)
        self.btn_start.clicked.connect(self._on_start)
        top.addWidget(self.btn_start)
        root.addLayout(top)

        self.board = SnakeBoard(self)
        root.addWidget(self.board, 1)

        # کنترل‌های لمسی
        pad = QtWidgets.QGridLayout()
        pad.setSpacing(6)
        self.pad_buttons = {}
        for direction, (row, col, glyph) in PAD.items():
            b = QtWidgets.QPushButton(glyph)
            b.setObjectName("nbCell")
            b.setFixedSize(48, 48)
            b.setFocusPolicy(QtCore.Qt.NoFocus)
            b.clicked.connect(lambda _=False, d=direction: self.dispatch(Turn(d)))
            pad.addWidget(b, row, col)
            self.pad_buttons[direction] = b
        wrap = QtWidgets.QHBoxLayout()
        wrap.addStretch(1)
        wrap.addLayout(pad)
        wrap.addStretch(1)
        root.addLayout(wrap)

        self.lbl_hint = QtWidgets.QLabel()
        self.lbl_hint.setAlignment(QtCore.Qt.AlignHCenter)
        root.addWidget(self.lbl_hint)
        self.retranslate()

    def retranslate(self):
        self.lbl_hint.setText(self._t("snake.hint"))

    def _on_start(self):
        if self.engine is None:
            return
        if self.engine.state.status == OVER:
            self.reset()
        self.dispatch(Start())

    def refresh(self):
        if self.engine is None:
            return
        st = self.engine.state
        self.lbl_score.setText(self._t("snake.score", score=st.score))
        self.lbl_best.setText(self._t("snake.best", best=max(self.engine.best, st.score)))
        self.btn_start.setText(self._t("start"))
        self.btn_start.setEnabled(st.status != RUNNING)
        for b in self.pad_buttons.values():
            b.setEnabled(st.status == RUNNING)
        self.board.update()
