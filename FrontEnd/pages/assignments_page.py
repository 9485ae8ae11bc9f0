from html import escape

from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QComboBox, QPushButton

from BackEnd.core.models import PRIORITIES
from FrontEnd.components.record_dialog import RecordDialog, Field
from FrontEnd.components.widgets import (
	page_layout, scroll_list, clear_layout, dot, small_button, empty_state, confirm, rich_label,
)
from FrontEnd.styles.design_tokens import PRIORITY_COLORS, STATUS_COLORS

FILTERS = ("all", "pending", "in-progress", "completed")
STATUS_MARKS = {"pending": "○", "in-progress": "◑", "completed": "✔"}

ASSIGNMENT_FIELDS = [
	Field("title", "Title"),
	Field("subject", "Subject"),
	Field("due_date", "Due date", "date"),
	Field("priority", "Priority", "choice", choices=PRIORITIES, default="medium"),
	Field("description", "Description", "multiline"),
]


def assignment_markup(a):
	description = f"<br><i>{escape(a.description)}</i>" if a.description else ""
	return f"<b>{escape(a.title)}</b><br>{escape(a.subject)} • due {escape(a.due_date)}{description}"


class AssignmentsPage(QWidget):
	def __init__(self, service):
		super().__init__()
		self.service = service

		self.filter_combo = QComboBox()
		self.filter_combo.addItems(list(FILTERS))
		self.filter_combo.currentTextChanged.connect(lambda _: self.refresh())
		add_btn = QPushButton("Add Assignment")
		add_btn.setObjectName("StartBtn")
		add_btn.clicked.connect(self._add)

		page, outer = page_layout("Assignments", QLabel("Show:"), self.filter_combo, add_btn)
		self.counts = QLabel("")
		outer.addWidget(self.counts)
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
		total = self.service.count()
		done = self.service.completed_count()
		self.counts.setText(f"{done} of {total} completed")
		shown = self.service.filtered(self.filter_combo.currentText())
		if not shown:
			self.list_layout.addWidget(empty_state(
				"No assignments yet. Add your first one!" if total == 0 else "Nothing matches this filter."
			))
			return
		for a in shown:
			self.list_layout.addWidget(self._row(a))

	def _row(self, a):
		row = QWidget()
		row.setObjectName("Card")
		lay = QHBoxLayout()
		status_btn = small_button(STATUS_MARKS.get(a.status, "?"), lambda _=False, i=a.id: self.service.toggle_status(i))
		status_btn.setToolTip(f"Status: {a.status} (click to advance)")
		status_btn.setStyleSheet(f"color: {STATUS_COLORS.get(a.status, '#8A94A6')}; font-size: 18px;")
		lay.addWidget(status_btn)
		text = rich_label(assignment_markup(a))
		if a.status == "completed":
			f = text.font()
			f.setStrikeOut(True)
			text.setFont(f)
		lay.addWidget(text, stretch=1)
		lay.addWidget(dot(PRIORITY_COLORS.get(a.priority, '#8A94A6')))
		lay.addWidget(QLabel(a.priority))
		lay.addWidget(small_button("Delete", lambda _=False, i=a.id: self._delete(i)))
		row.setLayout(lay)
		return row

	def _add(self):
		RecordDialog("Add Assignment", ASSIGNMENT_FIELDS, lambda v: self.service.add(**v),
			submit_text="Add Assignment", parent=self).exec()

	def _delete(self, record_id):
		if confirm(self, "Delete assignment", "Delete this assignment?"):
			self.service.delete(record_id)
