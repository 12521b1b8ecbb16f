# -*- coding: utf-8 -*-
from PySide6 import QtWidgets, QtCore, QtGui

from minigames.engines.rps import Choose, Move, WIN, LOSE
from minigames.modes.base_mode import BaseModeWidget


class RpsWidget(BaseModeWidget):
    def __init__(self, lang: str = "fa", parent=None):
        super().__init__(lang, parent)
        self._build_ui()

    def _build_ui(self):
        root = QtWidgets.QVBoxLayout(self)
        root.setContentsMargins(24, 18, 24, 18)
        root.setSpacing(14)

        self.lbl_score = QtWidgets.QLabel()
        self.lbl_score.setObjectName("nbHeader")
        self.lbl_score.setAlignment(QtCore.Qt.AlignHCenter)
        root.addWidget(self.lbl_score)

        self.lbl_faceoff = QtWidgets.QLabel("❔  vs  ❔")
        self.lbl_faceoff.setAlignment(QtCore.Qt.AlignCenter)
        self.lbl_faceoff.setFont(QtGui.QFont("Inter", 48))
        root.addWidget(self.lbl_faceoff, 1)

        self.lbl_result = QtWidgets.QLabel()
        self.lbl_result.setAlignment(QtCore.Qt.AlignHCenter)
        root.addWidget(self.lbl_result)

        row = QtWidgets.QHBoxLayout()
        self.move_buttons = {}
        for m in Move:
            b = QtWidgets.QPushButton()
            b.setMinimumHeight(64)
            b.clicked.connect(lambda _=False, m=m: self.dispatch(Choose(m)))
            row.addWidget(b)
            self.move_buttons[m] = b
        root.addLayout(row)

        self.btn_reset = QtWidgets.QPushButton()
        self.btn_reset.clicked.connect(self.reset)
        root.addWidget(self.btn_reset)
        self.retranslate()

    def retranslate(self):
        for m, b in self.move_buttons.items():
            b.setText(f"{m.emoji}  {self._t('rps.' + m.value)}")
        self.btn_reset.setText(self._t("reset"))

    def refresh(self):
        if self.engine is None:
            return
        st = self.engine.state
        self.lbl_score.setText(
            self._t("rps.score", player=st.player_score, computer=st.computer_score)
        )
        p = st.player_choice.emoji if st.player_choice else "❔"
        c = st.computer_choice.emoji if st.computer_choice else "❔"
        self.lbl_faceoff.setText(f"{p}  vs  {c}")
        if st.last_result == WIN:
            self.lbl_result.setText(self._t("rps.win"))
        elif st.last_result == LOSE:
            self.lbl_result.setText(self._t("rps.lose"))
        elif st.last_result is not None:
            self.lbl_result.setText(self._t("rps.tie"))
        else:
            self.lbl_result.setText("")
