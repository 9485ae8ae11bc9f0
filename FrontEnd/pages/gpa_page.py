from html import escape

from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QPushButton

from BackEnd.core.models import GRADE_SCALE, MIN_CREDITS, MAX_CREDITS
from BackEnd.services.views import grade_band
from FrontEnd.components.record_dialog import RecordDialog, Field
from FrontEnd.components.widgets import (
	page_layout, scroll_list, clear_layout, card, small_button, empty_state, plain_label,
)
from FrontEnd.styles.design_tokens import GRADE_BAND_COLORS

COURSE_FIELDS = [
	Field("name", "Course name"),
	Field("credits", "Credits", "int", minimum=MIN_CREDITS, maximum=MAX_CREDITS, default=3),
	Field("grade", "Grade", "choice", choices=list(GRADE_SCALE), default="A"),
]


class GpaPage(QWidget):
	def __init__(self, service):
		super().__init__()
		self.service = service
		add_btn = QPushButton("Add Course")
		add_btn.setObjectName("StartBtn")
		add_btn.clicked.connect(self._add)
		page, outer = page_layout("GPA Calculator", add_btn)

		stats = QHBoxLayout()
		self.gpa_value = QLabel("0.00")
		self.gpa_value.setObjectName("StatValue")
		self.credits_value = QLabel("0")
		self.credits_value.setObjectName("StatValue")
		self.course_value = QLabel("0")
		self.course_value.setObjectName("StatValue")
		for caption, value in (("Current GPA", self.gpa_value), ("Total Credits", self.credits_value),
				("Courses", self.course_value)):
			stats.addWidget(card(caption, value))
		outer.addLayout(stats)

		scroll, self.list_layout = scroll_list()
		outer.addWidget(scroll)
		wrapper = QVBoxLayout()
		wrapper.setContentsMargins(0, 0, 0, 0)
		wrapper.addWidget(page)
		self.setLayout(wrapper)
		self.service.changed.connect(self.refresh)
		self.refresh()

	def refresh(self):
		self.gpa_value.setText(self.service.gpa_text())
		self.credits_value.setText(str(self.service.total_credits()))
		self.course_value.setText(str(self.service.count()))
		clear_layout(self.list_layout)
		courses = self.service.records()
		if not courses:
			self.list_layout.addWidget(empty_state("No courses added yet. Add courses to calculate your GPA."))
			return
		for course in courses:
			row = QWidget()
			lay = QHBoxLayout()
			lay.setContentsMargins(0, 0, 0, 0)
			grade = plain_label(f"{course.grade} ({course.grade_points:.1f})")
			grade.setStyleSheet(f"color: {GRADE_BAND_COLORS[grade_band(course.grade_points)]}; font-weight: 600;")
			lay.addWidget(card(f"<b>{escape(course.name)}</b>", f"{course.credits} credits"), stretch=1)
			lay.addWidget(grade)
			lay.addWidget(small_button("Delete", lambda _=False, i=course.id: self.service.delete(i)))
			row.setLayout(lay)
			self.list_layout.addWidget(row)

	def _add(self):
		RecordDialog("Add Course", COURSE_FIELDS, lambda v: self.service.add(**v),
			submit_text="Add Course", parent=self).exec()
