from html import escape

from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QPushButton

from BackEnd.core.models import WEEKDAYS
from FrontEnd.components.record_dialog import RecordDialog, Field
from FrontEnd.components.widgets import (
	page_layout, scroll_list, clear_layout, card, small_button, empty_state,
)

SCHEDULE_FIELDS = [
	Field("subject", "Subject"),
	Field("teacher", "Teacher"),
	Field("time", "Time"),
	Field("room", "Room"),
	Field("day", "Day", "choice", choices=WEEKDAYS, default="Monday"),
]


class SchedulePage(QWidget):
	def __init__(self, service):
		super().__init__()
		self.service = service
		add_btn = QPushButton("Add Class")
		add_btn.setObjectName("StartBtn")
		add_btn.clicked.connect(self._add)
		page, outer = page_layout("Class Schedule", add_btn)
		scroll, self.list_layout = scroll_list()
		outer.addWidget(scroll)
		wrapper = QVBoxLayout()
		wrapper.setContentsMargins(0, 0, 0, 0)
		wrapper.addWidget(page)
		self.setLayout(wrapper)
		self.service.changed.connect(self.refresh)
		self.refresh()

	def refresh(self):
		clear_layout(self.list_layout)
		if self.service.count() == 0:
			self.list_layout.addWidget(empty_state("No classes scheduled yet."))
			return
		for day, items in self.service.by_day().items():
			header = QLabel(day)
			header.setStyleSheet("font-weight: 600; font-size: 16px; margin-top: 8px;")
			self.list_layout.addWidget(header)
			if not items:
				self.list_layout.addWidget(QLabel("No classes"))
			for item in items:
				self.list_layout.addWidget(self._row(item))

	def _row(self, item):
		row = QWidget()
		lay = QHBoxLayout()
		lay.setContentsMargins(0, 0, 0, 0)
		lay.addWidget(card(f"<b>{escape(item.subject)}</b>",
			escape(f"{item.time} • Room {item.room} • {item.teacher}")), stretch=1)
		lay.addWidget(small_button("Edit", lambda _=False, i=item.id: self._edit(i)))
		lay.addWidget(small_button("Delete", lambda _=False, i=item.id: self.service.delete(i)))
		row.setLayout(lay)
		return row

	def _add(self):
		RecordDialog("Add Class", SCHEDULE_FIELDS, lambda v: self.service.add(**v),
			submit_text="Add Class", parent=self).exec()

	def _edit(self, record_id):
		item = self.service.get(record_id)
		if item is None:
			return
		RecordDialog("Edit Class", SCHEDULE_FIELDS, lambda v: self.service.edit(record_id, **v),
			values=item.to_dict(), submit_text="Update Class", parent=self).exec()
