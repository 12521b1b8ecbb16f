from PySide6 import QtWidgets, QtGui
from minigames.main_window import MainWindow
from minigames.settings import BRAND_NAME
from minigames.utils import resource_path
import logging, sys, os


def load_qss(app):
    qss_path = resource_path("minigames/ui_style.qss")
    if os.path.exists(qss_path):
        with open(qss_path, "r", encoding="utf-8") as f:
            app.setStyleSheet(f.read())


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(BRAND_NAME)

    # فونت پیش‌فرض (فارسی اول، بعد لاتین)
    app.setFont(QtGui.QFont("Vazirmatn", 11))

    load_qss(app)

    win = MainWindow()
    win.show()
    sys.exit(app.exec())
