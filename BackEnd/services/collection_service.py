"""Page controllers: one in-memory collection, saved after every change.

CollectionService does the load/mutate/save cycle once for any record
type; the subclasses add the operations each page needs.
"""
import logging
from dataclasses import replace

from PySide6.QtCore import QObject, Signal

from BackEnd.core import models
from BackEnd.core.clock import local_today_str
from BackEnd.core.models import (
	Assignment, CalendarEvent, Course, Note, ScheduleItem,
	ValidationError, new_id, require, check_choice,
)
from BackEnd.repos import record_repo
from BackEnd.services import views

logger = logging.getLogger(__name__)


class CollectionService(QObject):
	changed = Signal()

	key = None
	record_type = None

	def __init__(self, parent=None):
		super().__init__(parent)
		self._records = record_repo.load(self.key, self.record_type.from_dict)
		logger.debug("loaded %d %s", len(self._records), self.key)

	def records(self):
		return list(self._records)

	def count(self):
		return len(self._records)

	def get(self, record_id):
		for record in self._records:
			if record.id == record_id:
				return record
		return None

	def _index(self, record_id):
		for i, record in enumerate(self._records):
			if record.id == record_id:
				return i
		raise KeyError(record_id)

	def _commit(self):
		record_repo.save(self.key, self._records)
		self.changed.emit()

	def append(self, record, front=False):
		if front:
			self._records.insert(0, record)
		else:
			self._records.append(record)
		self._commit()
		return record

	def update(self, record):
		"""Replace the stored record that has the same id."""
		self._records[self._index(record.id)] = record
		self._commit()
		return record

	def delete(self, record_id):
		before = len(self._records)
		self._records = [r for r in self._records if r.id != record_id]
		if len(self._records) != before:
			self._commit()
			return True
		return False


class AssignmentService(CollectionService):
	key = models.ASSIGNMENTS_KEY
	record_type = Assignment

	def add(self, title, subject, due_date, priority="medium", description=""):
		require(title=title, subject=subject, due_date=due_date)
		check_choice("priority", priority, models.PRIORITIES)
		return self.append(Assignment(
			id=new_id(),
			title=title.strip(),
			subject=subject.strip(),
			due_date=due_date,
			priority=priority,
			status="pending",
			description=description or "",
		))

	def toggle_status(self, record_id):
		"""Cycle pending -> in-progress -> completed -> pending."""
		current = self._records[self._index(record_id)]
		order = models.STATUSES
		next_status = order[(order.index(current.status) + 1) % len(order)]
		return self.update(replace(current, status=next_status))

	def filtered(self, status="all"):
		if status != "all":
			check_choice("status", status, models.STATUSES)
		return views.filter_by_status(self._records, status)

	def completed_count(self):
		return views.completed_count(self._records)


class ScheduleService(CollectionService):
	key = models.SCHEDULE_KEY
	record_type = ScheduleItem

	def _validate(self, subject, teacher, time, room, day):
		require(subject=subject, teacher=teacher, time=time, room=room)
		check_choice("day", day, models.WEEKDAYS)

	def add(self, subject, teacher, time, room, day="Monday"):
		self._validate(subject, teacher, time, room, day)
		return self.append(ScheduleItem(
			id=new_id(), subject=subject, teacher=teacher, time=time, room=room, day=day,
		))

	def edit(self, record_id, **changes):
		updated = replace(self._records[self._index(record_id)], **changes)
		self._validate(updated.subject, updated.teacher, updated.time, updated.room, updated.day)
		return self.update(updated)

	def by_day(self):
		return views.group_by_day(self._records)

	def for_day(self, day):
		return views.filter_records(self._records, lambda item: item.day == day)


class NoteService(CollectionService):
	key = models.NOTES_KEY
	record_type = Note

	def add(self, title, subject, content):
		require(title=title, subject=subject, content=content)
		today = local_today_str()
		# newest notes go first
		return self.append(Note(
			id=new_id(), title=title, subject=subject, content=content,
			created_at=today, updated_at=today,
		), front=True)

	def edit(self, record_id, title, subject, content):
		require(title=title, subject=subject, content=content)
		current = self._records[self._index(record_id)]
		return self.update(replace(
			current, title=title, subject=subject, content=content,
			updated_at=local_today_str(),
		))

	def search(self, term="", subject="all"):
		return views.search_notes(self._records, term, subject)

	def subjects(self):
		return views.note_subjects(self._records)


class CourseService(CollectionService):
	key = models.COURSES_KEY
	record_type = Course

	def add(self, name, credits=3, grade="A", scale=None):
		"""Add a course; grade points are copied from scale right now.

		Later changes to the scale do not touch stored courses.
		"""
		scale = models.GRADE_SCALE if scale is None else scale
		require(name=name)
		check_choice("grade", grade, scale)
		try:
			credits = int(credits)
		except (TypeError, ValueError):
			raise ValidationError("Credits must be a whole number.")
		if not models.MIN_CREDITS <= credits <= models.MAX_CREDITS:
			raise ValidationError(
				f"Credits must be between {models.MIN_CREDITS} and {models.MAX_CREDITS}."
			)
		return self.append(Course(
			id=new_id(), name=name, credits=credits, grade=grade,
			grade_points=float(scale[grade]),
		))

	def gpa(self):
		return views.compute_gpa(self._records)

	def gpa_text(self):
		return views.format_gpa(self._records)

	def total_credits(self):
		return views.total_credits(self._records)


class EventService(CollectionService):
	key = models.EVENTS_KEY
	record_type = CalendarEvent

	def add(self, title, date, time="09:00", type="event", location=""):
		require(title=title, date=date, time=time)
		check_choice("type", type, models.EVENT_TYPES)
		return self.append(CalendarEvent(
			id=new_id(), title=title, date=date, time=time, type=type,
			color=models.EVENT_TYPE_COLORS[type],
			location=location or "",
		))

	def on(self, date_string):
		return views.events_on(self._records, date_string)

	def month(self, year, month):
		"""{day number: [events]} for every day of the month that has events."""
		_, days = views.month_layout(year, month)
		by_date = views.events_by_date(self._records)
		result = {}
		for day in range(1, days + 1):
			found = by_date.get(views.date_key(year, month, day))
			if found:
				result[day] = found
		return result
