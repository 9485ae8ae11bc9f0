import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QListWidget,
	QStackedWidget, QListWidgetItem,
)

from BackEnd.core.clock import today_banner
from BackEnd.services.collection_service import (
	AssignmentService, ScheduleService, NoteService, CourseService, EventService,
)
from BackEnd.services.dashboard_service import DashboardService
from BackEnd.services.timer_service import TimerService
from FrontEnd.components.footer_today import FooterToday
from FrontEnd.pages.assignments_page import AssignmentsPage
from FrontEnd.pages.calendar_page import CalendarPage
from FrontEnd.pages.dashboard_page import DashboardPage
from FrontEnd.pages.gpa_page import GpaPage
from FrontEnd.pages.notes_page import NotesPage
from FrontEnd.pages.schedule_page import SchedulePage
from FrontEnd.pages.timer_page import TimerPage
from FrontEnd.styles.design_tokens import build_stylesheet

logger = logging.getLogger(__name__)

PAGES = ("Dashboard", "Schedule", "Assignments", "Notes", "GPA Calculator", "Study Timer", "Calendar")


class MainWindow(QMainWindow):
	logged_out = Signal()

	def __init__(self, app_state):
		super().__init__()
		self.app_state = app_state
		self.setWindowTitle("Study Organizer")
		self.resize(1100, 720)
		self.setStyleSheet(build_stylesheet())

		# One service per collection; each loads its data exactly once here
		self.assignments = AssignmentService(self)
		self.schedule = ScheduleService(self)
		self.notes = NoteService(self)
		self.courses = CourseService(self)
		self.events = EventService(self)
		self.timer_service = TimerService(parent=self)
		self.dashboard_service = DashboardService()

		# --- Sidebar ---
		self.sidebar = QListWidget()
		self.sidebar.setObjectName("Sidebar")
		self.sidebar.setFixedWidth(220)
		self.sidebar.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
		self.sidebar.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
		for name in PAGES:
			self.sidebar.addItem(QListWidgetItem(name))

		self.logout_btn = QPushButton("Sign Out")
		self.logout_btn.clicked.connect(self._logout)
		side_col = QVBoxLayout()
		side_col.setContentsMargins(0, 0, 0, 16)
		side_col.addWidget(self.sidebar, stretch=1)
		side_col.addWidget(self.logout_btn)
		side_widget = QWidget()
		side_widget.setLayout(side_col)

		# --- Pages ---
		self.stack = QStackedWidget()
		self.dashboard_page = DashboardPage(self.dashboard_service, app_state)
		self.stack.addWidget(self.dashboard_page)
		self.stack.addWidget(SchedulePage(self.schedule))
		self.stack.addWidget(AssignmentsPage(self.assignments))
		self.stack.addWidget(NotesPage(self.notes))
		self.stack.addWidget(GpaPage(self.courses))
		self.stack.addWidget(TimerPage(self.timer_service))
		self.stack.addWidget(CalendarPage(self.events))

		for svc in (self.assignments, self.schedule, self.notes, self.courses, self.events):
			svc.changed.connect(self.dashboard_page.refresh)

		user = app_state.user
		self.footer_today = FooterToday(today_banner(), f"{user.name} • {user.school}" if user else "")

		content = QVBoxLayout()
		content.setContentsMargins(0, 0, 0, 0)
		content.addWidget(self.stack, stretch=1)
		content.addWidget(self.footer_today)
		content_widget = QWidget()
		content_widget.setLayout(content)

		main_layout = QHBoxLayout()
		main_layout.setContentsMargins(0, 0, 0, 0)
		main_layout.setSpacing(0)
		main_layout.addWidget(side_widget)
		main_layout.addWidget(content_widget, stretch=1)
		container = QWidget()
		container.setLayout(main_layout)
		self.setCentralWidget(container)

		self.sidebar.currentRowChanged.connect(self.stack.setCurrentIndex)
		self.sidebar.setCurrentRow(0)

	def _logout(self):
		logger.info("Signing out")
		self.timer_service.shutdown()
		self.app_state.logout()
		self.logged_out.emit()
		self.close()

	def closeEvent(self, event):
		# no timer callback may outlive the window
		self.timer_service.shutdown()
		super().closeEvent(event)
