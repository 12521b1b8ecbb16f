# -*- coding: utf-8 -*-
from PySide6 import QtWidgets, QtCore

from minigames.engines.memory import Flip, NewGame, format_time
from minigames.modes.base_mode import BaseModeWidget

FACES = {
    "diamond": "💎",
    "heart": "❤",
    "star": "⭐",
    "circle": "⚪",
    "square": "🟩",
    "triangle": "🔺",
    "hexagon": "⬢",
    "crown": "👑",
}
BACK = "❓"
COLUMNS = 4


class MemoryWidget(BaseModeWidget):
    def __init__(self, lang: str = "fa", parent=None):
        super().__init__(lang, parent)
        self.card_buttons = []
        self._build_ui()

    def _build_ui(self):
        root = QtWidgets.QVBoxLayout(self)
        root.setContentsMargins(24, 18, 24, 18)
        root.setSpacing(12)

        chips = QtWidgets.QHBoxLayout()
        self.lbl_moves = QtWidgets.QLabel()
        self.lbl_pairs = QtWidgets.QLabel()
        self.lbl_time = QtWidgets.QLabel()
        for lab in (self.lbl_moves, self.lbl_pairs, self.lbl_time):
            lab.setObjectName("nbChip")
            chips.addWidget(lab)
        chips.addStretch(1)
        root.addLayout(chips)

        self.board = QtWidgets.QGridLayout()
        self.board.setSpacing(8)
        wrap = QtWidgets.QHBoxLayout()
        wrap.addStretch(1)
        wrap.addLayout(self.board)
        wrap.addStretch(1)
        root.addLayout(wrap, 1)

        self.btn_new = QtWidgets.QPushButton()
        self.btn_new.clicked.connect(lambda: self.dispatch(NewGame()))
        root.addWidget(self.btn_new)
        self.retranslate()

    def retranslate(self):
        self.btn_new.setText(self._t("memory.new"))

    def _ensure_buttons(self, n: int):
        while len(self.card_buttons) < n:
            i = len(self.card_buttons)
            b = QtWidgets.QPushButton()
            b.setFixedSize(80, 80)
            b.setObjectName("nbCell")
            b.setFocusPolicy(QtCore.Qt.NoFocus)
            b.clicked.connect(lambda _=False, i=i: self._on_click(i))
            self.board.addWidget(b, i // COLUMNS, i % COLUMNS)
            self.card_buttons.append(b)
        for i, b in enumerate(self.card_buttons):
            b.setVisible(i < n)

    def _on_click(self, pos: int):
        cards = self.engine.state.cards if self.engine is not None else ()
        if pos < len(cards):
            self.dispatch(Flip(cards[pos].id))

    def refresh(self):
        if self.engine is None:
            return
        st = self.engine.state
        self._ensure_buttons(len(st.cards))
        for b, c in zip(self.card_buttons, st.cards):
            face_up = c.is_flipped or c.is_matched
            b.setText(FACES.get(c.symbol, c.symbol) if face_up else BACK)
            b.setEnabled(not c.is_matched)
            b.setProperty("matched", c.is_matched)
            b.style().unpolish(b)
            b.style().polish(b)
        self.lbl_moves.setText(self._t("memory.moves", moves=st.move_count))
        self.lbl_pairs.setText(
            self._t("memory.pairs", done=st.pairs_matched, total=st.pairs_total)
        )
        self.lbl_time.setText(self._t("memory.time", time=format_time(st.elapsed)))
