"""Read-only rollup across every collection for the dashboard page."""
import logging
from dataclasses import dataclass, field
from datetime import date

from BackEnd.core import models
from BackEnd.core.clock import weekday_name
from BackEnd.repos import record_repo
from BackEnd.services import views

logger = logging.getLogger(__name__)

UPCOMING_LIMIT = 3


@dataclass
class DashboardSummary:
	upcoming: list = field(default_factory=list)
	total_assignments: int = 0
	completed_assignments: int = 0
	remaining_assignments: int = 0
	gpa: str = "0.00"
	course_count: int = 0
	note_count: int = 0
	today_schedule: list = field(default_factory=list)
	study_hours: int = 0
	recent_activity: list = field(default_factory=list)


class DashboardService:
	def __init__(self):
		self.reload()

	def reload(self):
		self.assignments = record_repo.load(models.ASSIGNMENTS_KEY, models.Assignment.from_dict)
		self.schedule = record_repo.load(models.SCHEDULE_KEY, models.ScheduleItem.from_dict)
		self.notes = record_repo.load(models.NOTES_KEY, models.Note.from_dict)
		self.courses = record_repo.load(models.COURSES_KEY, models.Course.from_dict)

	def study_hours(self):
		# nothing increments this counter; it is only created when missing
		value = record_repo.load_value(models.STUDY_HOURS_KEY)
		if value is None:
			record_repo.save_value(models.STUDY_HOURS_KEY, 0)
			return 0
		try:
			return int(value)
		except (TypeError, ValueError):
			logger.warning("studyHours holds %r, showing 0", value)
			return 0

	def status_counts(self):
		return {
			status: views.count_where(self.assignments, lambda a, s=status: a.status == s)
			for status in models.STATUSES
		}

	def recent_activity(self):
		lines = []
		if self.assignments:
			lines.append(f"Added {len(self.assignments)} assignments")
		if self.notes:
			lines.append(f"Created {len(self.notes)} study notes")
		if self.schedule:
			lines.append("Updated class schedule")
		return lines[:3]

	def summary(self, today=None):
		today = today or date.today()
		completed = views.completed_count(self.assignments)
		pending = views.filter_records(self.assignments, lambda a: a.status != "completed")
		return DashboardSummary(
			upcoming=pending[:UPCOMING_LIMIT],
			total_assignments=len(self.assignments),
			completed_assignments=completed,
			remaining_assignments=len(self.assignments) - completed,
			gpa=views.format_gpa(self.courses),
			course_count=len(self.courses),
			note_count=len(self.notes),
			today_schedule=views.filter_records(self.schedule, lambda s: s.day == weekday_name(today)),
			study_hours=self.study_hours(),
			recent_activity=self.recent_activity(),
		)
