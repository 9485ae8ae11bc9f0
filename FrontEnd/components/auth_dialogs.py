from PySide6.QtWidgets import (
	QDialog, QVBoxLayout, QLabel, QLineEdit, QPushButton,
)

from BackEnd.core.models import GRADE_LEVELS
from FrontEnd.components.record_dialog import RecordDialog, Field

SETUP_FIELDS = [
	Field("name", "Full name"),
	Field("school", "School"),
	Field("age", "Age", "int", minimum=10, maximum=25, default=15),
	Field("grade", "Grade level", "choice", choices=GRADE_LEVELS),
	Field("password", "Password", "password"),
	Field("confirm_password", "Confirm password", "password"),
]


def setup_dialog(app_state, parent=None):
	"""First-run profile form; accepting it also logs the user in."""
	return RecordDialog(
		"Welcome! Let's set up your profile",
		SETUP_FIELDS,
		lambda v: app_state.setup(**v),
		submit_text="Complete Setup",
		parent=parent,
	)


class LoginDialog(QDialog):
	def __init__(self, app_state, parent=None):
		super().__init__(parent)
		self.app_state = app_state
		self.setWindowTitle("Welcome back")
		self.setModal(True)
		self.setMinimumWidth(320)

		layout = QVBoxLayout()
		name = app_state.user.name if app_state.user else ""
		greeting = QLabel(f"Welcome back, {name}" if name else "Welcome back")
		greeting.setObjectName("PageTitle")
		layout.addWidget(greeting)

		self.password = QLineEdit()
		self.password.setEchoMode(QLineEdit.Password)
		self.password.setPlaceholderText("Password")
		self.password.returnPressed.connect(self._try_login)
		layout.addWidget(self.password)

		self.error = QLabel("")
		self.error.setStyleSheet("color: #EF4444;")
		layout.addWidget(self.error)

		btn = QPushButton("Sign In")
		btn.setObjectName("StartBtn")
		btn.clicked.connect(self._try_login)
		layout.addWidget(btn)
		self.setLayout(layout)

	def _try_login(self):
		if self.app_state.login(self.password.text()):
			self.accept()
			return
		self.error.setText("Incorrect password. Please try again.")
		self.password.clear()
