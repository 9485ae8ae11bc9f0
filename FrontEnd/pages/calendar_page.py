import calendar
from html import escape
from datetime import date

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
	QWidget, QHBoxLayout, QVBoxLayout, QGridLayout, QLabel, QPushButton,
)

from BackEnd.core.models import EVENT_TYPES
from BackEnd.services import views
from FrontEnd.components.record_dialog import RecordDialog, Field
from FrontEnd.components.widgets import (
	page_layout, clear_layout, dot, small_button, empty_state, rich_label,
)
from FrontEnd.styles.design_tokens import COLORS

DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
EVENTS_PER_CELL = 2


def event_fields(default_date):
	return [
		Field("title", "Title"),
		Field("date", "Date", "date", default=default_date),
		Field("time", "Time", "time", default="09:00"),
		Field("location", "Location (optional)"),
		Field("type", "Type", "choice", choices=EVENT_TYPES, default="event"),
	]


def event_markup(e):
	where = f" • {escape(e.location)}" if e.location else ""
	return f"<b>{escape(e.title)}</b><br>{escape(e.time)}{where}"


class CalendarPage(QWidget):
	def __init__(self, service, today=None):
		super().__init__()
		self.service = service
		self.today = today or date.today()
		self.year, self.month = self.today.year, self.today.month
		self.selected = None

		add_btn = QPushButton("Add Event")
		add_btn.setObjectName("StartBtn")
		add_btn.clicked.connect(self._add)
		page, outer = page_layout("Calendar", add_btn)

		nav = QHBoxLayout()
		nav.addWidget(small_button("‹", lambda: self._navigate(-1)))
		self.month_label = QLabel("")
		self.month_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.month_label.setStyleSheet("font-size: 18px; font-weight: 600;")
		nav.addWidget(self.month_label, stretch=1)
		nav.addWidget(small_button("›", lambda: self._navigate(1)))
		outer.addLayout(nav)

		body = QHBoxLayout()
		self.grid = QGridLayout()
		self.grid.setSpacing(4)
		body.addLayout(self.grid, stretch=3)
		side = QVBoxLayout()
		self.side_title = QLabel("Today's Events")
		self.side_title.setStyleSheet("font-weight: 600;")
		side.addWidget(self.side_title)
		self.side_list = QVBoxLayout()
		side.addLayout(self.side_list)
		side.addStretch()
		body.addLayout(side, stretch=1)
		outer.addLayout(body)

		wrapper = QVBoxLayout()
		wrapper.setContentsMargins(0, 0, 0, 0)
		wrapper.addWidget(page)
		self.setLayout(wrapper)
		self.service.changed.connect(self.refresh)
		self.refresh()

	def _navigate(self, delta):
		self.year, self.month = views.shift_month(self.year, self.month, delta)
		self.refresh()

	def _select(self, date_string):
		self.selected = date_string
		self._render_side()

	def refresh(self):
		self.month_label.setText(f"{calendar.month_name[self.month]} {self.year}")
		clear_layout(self.grid)
		for col, name in enumerate(DAY_NAMES):
			header = QLabel(name)
			header.setAlignment(Qt.AlignmentFlag.AlignCenter)
			self.grid.addWidget(header, 0, col)

		first_day, days = views.month_layout(self.year, self.month)
		month_events = self.service.month(self.year, self.month)
		today_key = self.today.isoformat()
		for day in range(1, days + 1):
			cell_index = first_day + day - 1
			key = views.date_key(self.year, self.month, day)
			self.grid.addWidget(self._cell(day, key, month_events.get(day, []), key == today_key),
				1 + cell_index // 7, cell_index % 7)
		self._render_side()

	def _cell(self, day, key, events, is_today):
		lines = [str(day)] + [e.title for e in events[:EVENTS_PER_CELL]]
		if len(events) > EVENTS_PER_CELL:
			lines.append(f"+{len(events) - EVENTS_PER_CELL} more")
		btn = QPushButton("\n".join(lines))
		btn.setMinimumHeight(72)
		btn.setStyleSheet("text-align: left; padding: 4px;"
			+ (f" background: {COLORS['today_cell']}; border-color: {COLORS['primary']};" if is_today else ""))
		btn.clicked.connect(lambda _=False, k=key: self._select(k))
		return btn

	def _render_side(self):
		clear_layout(self.side_list)
		key = self.selected or self.today.isoformat()
		self.side_title.setText("Today's Events" if self.selected is None else f"Events on {key}")
		events = self.service.on(key)
		if not events:
			self.side_list.addWidget(empty_state("No events"))
			return
		for e in events:
			row = QHBoxLayout()
			row.addWidget(dot(e.color))
			row.addWidget(rich_label(event_markup(e)), stretch=1)
			row.addWidget(small_button("✕", lambda _=False, i=e.id: self.service.delete(i)))
			self.side_list.addLayout(row)

	def _add(self):
		default_date = self.selected or self.today.isoformat()
		RecordDialog("Add Event", event_fields(default_date), lambda v: self.service.add(**v),
			submit_text="Add Event", parent=self).exec()
