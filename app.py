import logging
import sys
from PySide6.QtWidgets import QApplication
from BackEnd.core import config
from BackEnd.services.session_service import AppState

logger = logging.getLogger(__name__)

def authenticate(app_state):
    """Run setup or login as needed. Returns False if the user gave up."""
    from FrontEnd.components.auth_dialogs import LoginDialog, setup_dialog
    if app_state.needs_setup():
        return bool(setup_dialog(app_state).exec())
    if not app_state.is_authenticated:
        return bool(LoginDialog(app_state).exec())
    return True

def main():
    config.configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Study Organizer")
    app_state = AppState().init()

    from FrontEnd.ui_main import MainWindow
    windows = []

    def show_main():
        if not authenticate(app_state):
            app.quit()
            return
        win = MainWindow(app_state)
        win.logged_out.connect(show_main)
        windows[:] = [win]
        win.show()

    show_main()
    if not windows:
        logger.info("No user signed in, exiting")
        return 0
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
