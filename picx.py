import logging
import sys

from PyQt5.QtWidgets import QApplication

from PX_Libs.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT
from PX_Libs.UILib.main_window import PicXMainWindow


def main() -> None:
    logging.basicConfig(format=LOG_FORMAT, level=DEFAULT_LOG_LEVEL)
    app = QApplication(sys.argv)
    window = PicXMainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
