# -*- coding: utf-8 -*-
from PySide6 import QtWidgets, QtCore

from minigames.engines.tictactoe import PlayAt
from minigames.modes.base_mode import BaseModeWidget

GLYPHS = {"X": "✖", "O": "⭕"}


class TicTacToeWidget(BaseModeWidget):
    def __init__(self, lang: str = "fa", parent=None):
        super().__init__(lang, parent)
        self._build_ui()

    def _build_ui(self):
        root = QtWidgets.QVBoxLayout(self)
        root.setContentsMargins(24, 18, 24, 18)
        root.setSpacing(12)

        top = QtWidgets.QHBoxLayout()
        self.cb_mode = QtWidgets.QComboBox()
        self.cb_mode.currentIndexChanged.connect(self._on_mode)
        self.lbl_status = QtWidgets.QLabel()
        self.lbl_status.setObjectName("nbChip")
        top.addWidget(self.cb_mode)
        top.addStretch(1)
        top.addWidget(self.lbl_status)
        root.addLayout(top)

        board = QtWidgets.QGridLayout()
        board.setSpacing(6)
        self.cells = []
        for i in range(9):
            b = QtWidgets.QPushButton()
            b.setFixedSize(96, 96)
            b.setObjectName("nbCell")
            b.setFocusPolicy(QtCore.Qt.NoFocus)
            b.clicked.connect(lambda _=False, i=i: self.dispatch(PlayAt(i)))
            board.addWidget(b, i // 3, i % 3)
            self.cells.append(b)
        wrap = QtWidgets.QHBoxLayout()
        wrap.addStretch(1)
        wrap.addLayout(board)
        wrap.addStretch(1)
        root.addLayout(wrap, 1)

        self.btn_reset = QtWidgets.QPushButton()
        self.btn_reset.clicked.connect(self.reset)
        root.addWidget(self.btn_reset)
        self.retranslate()

    def retranslate(self):
        self.cb_mode.blockSignals(True)
        idx = max(0, self.cb_mode.currentIndex())
        self.cb_mode.clear()
        self.cb_mode.addItem(self._t("ttt.mode.player"), "player")
        self.cb_mode.addItem(self._t("ttt.mode.computer"), "computer")
        self.cb_mode.setCurrentIndex(idx)
        self.cb_mode.blockSignals(False)
        self.btn_reset.setText(self._t("reset"))

    def _on_mode(self, _idx):
        if self.engine is not None:
            self.engine.set_mode(self.cb_mode.currentData())

    def mount(self, engine):
        engine.mode = self.cb_mode.currentData() or "player"
        super().mount(engine)

    def refresh(self):
        st = self.engine.state if self.engine is not None else None
        if st is None:
            return
        for b, v in zip(self.cells, st.cells):
            b.setText(GLYPHS[v.value] if v is not None else "")
            b.setEnabled(v is None and not st.is_over)
        if st.winner is not None:
            self.lbl_status.setText(self._t("ttt.won", mark=GLYPHS[st.winner.value]))
        elif st.is_over:
            self.lbl_status.setText(self._t("ttt.draw"))
        else:
            self.lbl_status.setText(self._t("ttt.turn", mark=GLYPHS[st.turn.value]))
