import logging

from PySide6.QtCore import QDate, QTime
from PySide6.QtWidgets import (
	QDialog, QFormLayout, QLineEdit, QTextEdit, QComboBox, QSpinBox,
	QDateEdit, QTimeEdit, QDialogButtonBox, QMessageBox,
)

from BackEnd.core.models import ValidationError

logger = logging.getLogger(__name__)


class Field:
	"""One input row of a RecordDialog.

	kind is one of: text, password, multiline, choice, date, time, int.
	"""

	def __init__(self, name, label, kind="text", choices=(), minimum=0, maximum=99, default=None):
		self.name = name
		self.label = label
		self.kind = kind
		self.choices = tuple(choices)
		self.minimum = minimum
		self.maximum = maximum
		self.default = default


class RecordDialog(QDialog):
	"""Modal add/edit form.

	on_submit receives {field name: value}; if it raises ValidationError the
	message is shown and the dialog stays open with nothing changed.
	"""

	def __init__(self, title, fields, on_submit, values=None, submit_text="Save", parent=None):
		super().__init__(parent)
		self.setWindowTitle(title)
		self.setModal(True)
		self.setMinimumWidth(380)
		self._fields = fields
		self._on_submit = on_submit
		self._widgets = {}

		form = QFormLayout()
		values = values or {}
		for field in fields:
			widget = self._make_widget(field, values.get(field.name, field.default))
			self._widgets[field.name] = widget
			form.addRow(field.label, widget)

		buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
		buttons.button(QDialogButtonBox.Ok).setText(submit_text)
		buttons.accepted.connect(self._submit)
		buttons.rejected.connect(self.reject)
		form.addRow(buttons)
		self.setLayout(form)

	def _make_widget(self, field, value):
		if field.kind == "multiline":
			w = QTextEdit()
			w.setPlainText(value or "")
		elif field.kind == "choice":
			w = QComboBox()
			w.addItems(list(field.choices))
			if value is not None and value in field.choices:
				w.setCurrentText(value)
		elif field.kind == "date":
			w = QDateEdit()
			w.setCalendarPopup(True)
			w.setDisplayFormat("yyyy-MM-dd")
			date = QDate.fromString(value, "yyyy-MM-dd") if value else QDate.currentDate()
			w.setDate(date if date.isValid() else QDate.currentDate())
		elif field.kind == "time":
			w = QTimeEdit()
			w.setDisplayFormat("HH:mm")
			t = QTime.fromString(value or "09:00", "HH:mm")
			w.setTime(t if t.isValid() else QTime(9, 0))
		elif field.kind == "int":
			w = QSpinBox()
			w.setRange(field.minimum, field.maximum)
			w.setValue(int(value) if value is not None else field.minimum)
		else:
			w = QLineEdit()
			w.setText("" if value is None else str(value))
			if field.kind == "password":
				w.setEchoMode(QLineEdit.Password)
		return w

	def values(self):
		result = {}
		for field in self._fields:
			w = self._widgets[field.name]
			if field.kind == "multiline":
				result[field.name] = w.toPlainText()
			elif field.kind == "choice":
				result[field.name] = w.currentText()
			elif field.kind == "date":
				result[field.name] = w.date().toString("yyyy-MM-dd")
			elif field.kind == "time":
				result[field.name] = w.time().toString("HH:mm")
			elif field.kind == "int":
				result[field.name] = w.value()
			else:
				result[field.name] = w.text().strip()
		return result

	def _submit(self):
		try:
			self._on_submit(self.values())
		except ValidationError as e:
			logger.info("Form rejected: %s", e)
			QMessageBox.warning(self, self.windowTitle(), str(e))
			return
		self.accept()
