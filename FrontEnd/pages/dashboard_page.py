from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel

from BackEnd.core.models import STATUSES
from FrontEnd.components.widgets import page_layout, clear_layout, card, empty_state, plain_label
from FrontEnd.styles.design_tokens import STATUS_COLORS


class DashboardPage(QWidget):
	"""Read-only overview; call refresh() whenever a collection changes."""

	def __init__(self, dashboard_service, app_state):
		super().__init__()
		self.dashboard = dashboard_service
		self.app_state = app_state
		page, outer = page_layout("Dashboard")
		self.greeting = plain_label("")
		outer.addWidget(self.greeting)

		self.stats_row = QHBoxLayout()
		outer.addLayout(self.stats_row)

		columns = QHBoxLayout()
		left = QVBoxLayout()
		left.addWidget(QLabel("<b>Upcoming Assignments</b>"))
		self.upcoming_list = QVBoxLayout()
		left.addLayout(self.upcoming_list)
		left.addWidget(QLabel("<b>Today's Classes</b>"))
		self.today_list = QVBoxLayout()
		left.addLayout(self.today_list)
		left.addWidget(QLabel("<b>Recent Activity</b>"))
		self.activity_list = QVBoxLayout()
		left.addLayout(self.activity_list)
		left.addStretch()
		columns.addLayout(left, stretch=1)

		self.figure = Figure(figsize=(4, 3))
		self.canvas = FigureCanvas(self.figure)
		columns.addWidget(self.canvas, stretch=1)
		outer.addLayout(columns)

		wrapper = QVBoxLayout()
		wrapper.setContentsMargins(0, 0, 0, 0)
		wrapper.addWidget(page)
		self.setLayout(wrapper)
		self.refresh()

	def refresh(self):
		self.dashboard.reload()
		s = self.dashboard.summary()
		user = self.app_state.user
		self.greeting.setText(f"Welcome back, {user.name}!" if user else "Welcome!")

		clear_layout(self.stats_row)
		for caption, value, note in (
			("Assignments Due", len(s.upcoming),
				f"{s.total_assignments} total" if s.total_assignments else "No assignments yet"),
			("Study Hours", s.study_hours, "This semester"),
			("Current GPA", s.gpa, f"{s.course_count} courses" if s.course_count else "No courses yet"),
			("Completed Tasks", s.completed_assignments,
				f"{s.remaining_assignments} remaining" if s.total_assignments else "No tasks yet"),
		):
			value_label = QLabel(str(value))
			value_label.setObjectName("StatValue")
			self.stats_row.addWidget(card(caption, value_label, note))

		clear_layout(self.upcoming_list)
		if not s.upcoming:
			self.upcoming_list.addWidget(empty_state("All caught up!"))
		for a in s.upcoming:
			self.upcoming_list.addWidget(plain_label(f"• {a.title} ({a.subject}) due {a.due_date}"))

		clear_layout(self.today_list)
		if not s.today_schedule:
			self.today_list.addWidget(QLabel("No classes today"))
		for item in s.today_schedule:
			self.today_list.addWidget(plain_label(f"• {item.time} {item.subject}, room {item.room}"))

		clear_layout(self.activity_list)
		if not s.recent_activity:
			self.activity_list.addWidget(QLabel("Nothing yet"))
		for line in s.recent_activity:
			self.activity_list.addWidget(QLabel(f"• {line}"))

		self._update_chart()

	def _update_chart(self):
		counts = self.dashboard.status_counts()
		self.figure.clear()
		self.figure.patch.set_alpha(0.0)
		ax = self.figure.add_subplot(111)
		ax.set_facecolor('#F7FAFC')
		bars = ax.bar(list(STATUSES), [counts[s] for s in STATUSES],
			color=[STATUS_COLORS[s] for s in STATUSES], alpha=0.9)
		for bar, value in zip(bars, (counts[s] for s in STATUSES)):
			if value > 0:
				ax.text(bar.get_x() + bar.get_width()/2, bar.get_height() + 0.05, str(value),
					ha='center', va='bottom', fontsize=9, fontweight='600', color='#1E3A56')
		ax.set_title("Assignments by Status", fontsize=12, fontweight='bold', color='#1E3A56')
		ax.set_ylim(bottom=0)
		ax.yaxis.get_major_locator().set_params(integer=True)
		for spine in ['top', 'right']:
			ax.spines[spine].set_visible(False)
		self.figure.tight_layout()
		self.canvas.draw()
