import logging

from PySide6.QtCore import QObject, Signal

from BackEnd.core import models
from BackEnd.core.models import UserProfile, ValidationError, require, check_choice
from BackEnd.repos import record_repo

logger = logging.getLogger(__name__)

class AppState(QObject):
	"""Current user and login flag, shared explicitly with every page.

	init() reads storage once; the in-memory copy is authoritative after
	that and every change is mirrored straight back to storage.
	"""
	auth_changed = Signal(bool)

	def __init__(self, parent=None):
		super().__init__(parent)
		self.user = None
		self.is_authenticated = False

	def init(self):
		data = record_repo.load_value(models.USER_KEY)
		self.user = None
		if data is not None:
			try:
				self.user = UserProfile.from_dict(data)
			except (TypeError, ValueError) as e:
				logger.warning("Stored user profile unreadable, starting setup again: %s", e)
		self.is_authenticated = record_repo.load_value(models.AUTH_KEY, False) is True
		if self.user is None:
			self.is_authenticated = False
		return self

	def needs_setup(self):
		return self.user is None or not self.user.is_setup

	def setup(self, name, school, age, grade, password, confirm_password):
		require(name=name, school=school, age=age, grade=grade, password=password)
		check_choice("grade level", grade, models.GRADE_LEVELS)
		if password != confirm_password:
			raise ValidationError("Passwords do not match!")
		self.user = UserProfile(
			name=name, school=school, age=str(age), grade=grade,
			password=password, is_setup=True,
		)
		record_repo.save_value(models.USER_KEY, self.user)
		self._set_authenticated(True)
		logger.info("Profile created for %s", name)
		return self.user

	def login(self, password):
		if self.user is not None and password == self.user.password:
			self._set_authenticated(True)
			return True
		logger.info("Login rejected")
		return False

	def logout(self):
		self.is_authenticated = False
		record_repo.remove(models.AUTH_KEY)
		self.auth_changed.emit(False)

	def _set_authenticated(self, value):
		self.is_authenticated = value
		record_repo.save_value(models.AUTH_KEY, value)
		self.auth_changed.emit(value)
