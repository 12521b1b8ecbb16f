import logging

from PySide6 import QtWidgets, QtGui, QtCore

from minigames.i18n import tr, FA, EN
from minigames.modes.hangman_widget import HangmanWidget
from minigames.modes.memory_widget import MemoryWidget
from minigames.modes.qt_support import QtKeySource, QtScheduler
from minigames.modes.rps_widget import RpsWidget
from minigames.modes.snake_widget import SnakeWidget
from minigames.modes.tictactoe_widget import TicTacToeWidget
from minigames.notify import Notifier
from minigames.settings import GAME_ORDER, TAGLINE, load_user_settings, save_user_settings
from minigames.shell import GAME_REGISTRY, GameShell

logger = logging.getLogger(__name__)

LANGS = {"fa": FA, "en": EN}

WIDGETS = {
    "tictactoe": TicTacToeWidget,
    "rps": RpsWidget,
    "hangman": HangmanWidget,
    "memory": MemoryWidget,
    "snake": SnakeWidget,
}


class StatusNotifier(Notifier):
    """Shows engine outcome messages in the window's status bar (our toast)."""

    COLORS = {"success": "#86efac", "info": "#93c5fd", "error": "#fca5a5"}

    def __init__(self, status_bar: QtWidgets.QStatusBar):
        self._bar = status_bar

    def show(self, level: str, message: str):
        super().show(level, message)
        self._bar.setStyleSheet(f"color: {self.COLORS.get(level, '#ffffff')};")
        self._bar.showMessage(message, 4000)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self):
        super().__init__()

        # ---- load persisted settings (lang/tab)
        self.settings = load_user_settings()
        self._lang = self.settings.get("lang", "fa")
        if self._lang not in LANGS:
            self._lang = "fa"

        self.setWindowTitle(tr("app.title", self._lang))
        self.setMinimumSize(900, 640)

        self.status = self.statusBar()
        self.status.showMessage(TAGLINE)

        # هر بازی فقط وقتی تبش فعال است موتور دارد
        self.shell = GameShell(
            scheduler=QtScheduler(self),
            notifier=StatusNotifier(self.status),
            t=lambda key, **fmt: tr(key, self._lang, **fmt),
            key_source=QtKeySource(self),
        )

        # --- toolbar
        bar = QtWidgets.QWidget()
        h = QtWidgets.QHBoxLayout(bar)
        h.setContentsMargins(8, 8, 8, 0)
        self.lbl_title = QtWidgets.QLabel()
        self.lbl_title.setObjectName("nbTitle")
        h.addWidget(self.lbl_title)
        h.addStretch(1)
        self.btn_lang = QtWidgets.QPushButton()
        self.btn_lang.setFocusPolicy(QtCore.Qt.NoFocus)
        self.btn_lang.clicked.connect(self._toggle_language)
        h.addWidget(self.btn_lang)

        # --- tabs
        self.tabs = QtWidgets.QTabWidget()
        self.views = {}
        for kind in GAME_ORDER:
            view = WIDGETS[kind](self._lang)
            self.views[kind] = view
            self.tabs.addTab(view, "")

        central = QtWidgets.QWidget()
        v = QtWidgets.QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.addWidget(bar)
        v.addWidget(self.tabs, 1)
        self.setCentralWidget(central)

        self._apply_language()

        start_kind = self.settings.get("tab")
        if start_kind not in self.views:
            start_kind = GAME_ORDER[0]
        self.tabs.setCurrentIndex(GAME_ORDER.index(start_kind))
        self.tabs.currentChanged.connect(self._on_tab)
        self._mount(start_kind)

    # ------------------------------------------------------------------
    # mounting
    def _on_tab(self, idx: int):
        if 0 <= idx < len(GAME_ORDER):
            self._mount(GAME_ORDER[idx])

    def _mount(self, kind: str):
        current = self.shell.active
        if current is not None and current.kind != kind:
            self.views[current.kind].unmount()
        active = self.shell.select(kind)
        view = self.views[kind]
        if view.engine is not active.engine:
            view.mount(active.engine)
        self.settings["tab"] = kind
        QtCore.QTimer.singleShot(0, lambda: view.setFocus(QtCore.Qt.ActiveWindowFocusReason))

    # ------------------------------------------------------------------
    # language
    def _toggle_language(self):
        self._lang = "en" if self._lang == "fa" else "fa"
        self.settings["lang"] = self._lang
        self._apply_language()
        self._save_settings()

    def _apply_language(self):
        rtl = LANGS[self._lang].rtl
        self.setLayoutDirection(QtCore.Qt.RightToLeft if rtl else QtCore.Qt.LeftToRight)
        self.setWindowTitle(tr("app.title", self._lang))
        self.lbl_title.setText(tr("app.title", self._lang))
        self.btn_lang.setText(tr("lang.switch", self._lang))
        for i, kind in enumerate(GAME_ORDER):
            self.tabs.setTabText(i, tr(GAME_REGISTRY[kind].title_key, self._lang))
            self.views[kind].set_lang(self._lang)

    def _save_settings(self):
        try:
            save_user_settings(self.settings)
        except OSError as e:
            logger.warning("could not save settings: %s", e)

    # ------------------------------------------------------------------
    def closeEvent(self, e: QtGui.QCloseEvent):
        active = self.shell.active
        if active is not None:
            self.views[active.kind].unmount()
        self.shell.unmount()
        self._save_settings()
        super().closeEvent(e)
