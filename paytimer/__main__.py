"""Allow running PayTimer as a module: python -m paytimer."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import APP_NAME, PayTimerApp
from .settings import load_settings
from .ui.icons import make_timer_icon


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(
        "PayTimer ready (%d/%d min, $%.2f/h)",
        settings.work_minutes, settings.break_minutes, settings.hourly_wage,
    )

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_NAME)
    app.setWindowIcon(make_timer_icon())

    window = PayTimerApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
