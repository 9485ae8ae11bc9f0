"""Derived views over loaded collections.

Everything here is a pure function: it reads a list of records and returns
a new list/dict/number. Nothing is persisted.
"""
import calendar

from BackEnd.core.models import WEEKDAYS

def filter_records(records, predicate):
	"""Stable subsequence of records for which predicate is true."""
	return [r for r in records if predicate(r)]

def count_where(records, predicate):
	return sum(1 for r in records if predicate(r))

def filter_by_status(assignments, status="all"):
	if status == "all":
		return list(assignments)
	return filter_records(assignments, lambda a: a.status == status)

def completed_count(assignments):
	return count_where(assignments, lambda a: a.status == "completed")

def search_notes(notes, term="", subject="all"):
	"""Case-insensitive match on title or content, AND-ed with subject."""
	needle = (term or "").lower()

	def matches(note):
		matches_search = needle in note.title.lower() or needle in note.content.lower()
		matches_subject = subject == "all" or note.subject == subject
		return matches_search and matches_subject

	return filter_records(notes, matches)

def note_subjects(notes):
	"""'all' followed by each distinct subject in first-seen order."""
	seen = []
	for note in notes:
		if note.subject not in seen:
			seen.append(note.subject)
	return ["all", *seen]

def group_by_day(items):
	"""One bucket per school day, insertion order kept inside each bucket."""
	buckets = {day: [] for day in WEEKDAYS}
	for item in items:
		if item.day in buckets:
			buckets[item.day].append(item)
	return buckets

def events_on(events, date_string):
	return filter_records(events, lambda e: e.date == date_string)

def events_by_date(events):
	by_date = {}
	for event in events:
		by_date.setdefault(event.date, []).append(event)
	return by_date

def date_key(year, month, day):
	return f"{year:04d}-{month:02d}-{day:02d}"

def month_layout(year, month):
	"""Return (first_weekday, days_in_month) with Sunday counted as 0."""
	monday_based, days = calendar.monthrange(year, month)
	return (monday_based + 1) % 7, days

def shift_month(year, month, delta):
	"""Move (year, month) by delta months, rolling over year boundaries."""
	index = year * 12 + (month - 1) + delta
	return index // 12, index % 12 + 1

def total_credits(courses):
	return sum(c.credits for c in courses)

def compute_gpa(courses):
	"""Credit-weighted mean of grade points; 0.0 when there are no credits."""
	credits = total_credits(courses)
	if credits <= 0:
		return 0.0
	return sum(c.grade_points * c.credits for c in courses) / credits

def format_gpa(courses):
	return f"{compute_gpa(courses):.2f}"

def grade_band(grade_points):
	if grade_points >= 3.7:
		return "excellent"
	if grade_points >= 3.0:
		return "good"
	if grade_points >= 2.0:
		return "fair"
	return "poor"
