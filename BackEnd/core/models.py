import uuid
from dataclasses import dataclass, asdict, fields

# Storage keys, one per persisted entry
USER_KEY = "user"
AUTH_KEY = "authenticated"
ASSIGNMENTS_KEY = "assignments"
SCHEDULE_KEY = "schedule"
NOTES_KEY = "notes"
COURSES_KEY = "courses"
EVENTS_KEY = "events"
STUDY_HOURS_KEY = "studyHours"

PRIORITIES = ("low", "medium", "high")
STATUSES = ("pending", "in-progress", "completed")
EVENT_TYPES = ("class", "assignment", "exam", "event")
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")
GRADE_LEVELS = ("9", "10", "11", "12")

EVENT_TYPE_COLORS = {
	"class": "#3B82F6",
	"assignment": "#EAB308",
	"exam": "#EF4444",
	"event": "#22C55E",
}

GRADE_SCALE = {
	"A+": 4.0, "A": 4.0, "A-": 3.7,
	"B+": 3.3, "B": 3.0, "B-": 2.7,
	"C+": 2.3, "C": 2.0, "C-": 1.7,
	"D+": 1.3, "D": 1.0, "D-": 0.7,
	"F": 0.0,
}

MIN_CREDITS = 1
MAX_CREDITS = 6


class ValidationError(ValueError):
	"""A form submission was rejected; nothing was changed."""


def new_id():
	return uuid.uuid4().hex


def require(**values):
	"""Raise ValidationError naming the first blank field."""
	for name, value in values.items():
		if value is None or not str(value).strip():
			raise ValidationError(f"{name.replace('_', ' ').capitalize()} is required.")


def check_choice(name, value, choices):
	if value not in choices:
		raise ValidationError(f"Invalid {name}: {value!r}")


class Record:
	"""Mixin giving dataclass records a dict round trip for storage.

	from_dict checks every stored value against the field annotation and,
	for fields listed in CHOICES, against the allowed values. A mismatch
	raises TypeError or ValueError so the caller can discard the data.
	"""

	CHOICES = {}

	def to_dict(self):
		return asdict(self)

	@classmethod
	def from_dict(cls, data):
		if not isinstance(data, dict):
			raise TypeError(f"{cls.__name__} expects an object, got {type(data).__name__}")
		values = {}
		for f in fields(cls):
			if f.name not in data:
				continue
			value = data[f.name]
			if not _fits(value, f.type):
				raise TypeError(f"{cls.__name__}.{f.name} expects {f.type.__name__}, got {value!r}")
			if f.name in cls.CHOICES and value not in cls.CHOICES[f.name]:
				raise ValueError(f"{cls.__name__}.{f.name} has unknown value {value!r}")
			values[f.name] = value
		return cls(**values)


def _fits(value, kind):
	# bool is an int subclass; JSON numbers may come back as int for floats
	if kind is float:
		return isinstance(value, (int, float)) and not isinstance(value, bool)
	if kind is int:
		return isinstance(value, int) and not isinstance(value, bool)
	return isinstance(value, kind)


@dataclass
class Assignment(Record):
	CHOICES = {"priority": PRIORITIES, "status": STATUSES}

	id: str
	title: str
	subject: str
	due_date: str
	priority: str = "medium"
	status: str = "pending"
	description: str = ""


@dataclass
class CalendarEvent(Record):
	CHOICES = {"type": EVENT_TYPES}

	id: str
	title: str
	date: str
	time: str = "09:00"
	type: str = "event"
	color: str = EVENT_TYPE_COLORS["event"]
	location: str = ""


@dataclass
class Course(Record):
	id: str
	name: str
	credits: int
	grade: str
	grade_points: float


@dataclass
class Note(Record):
	id: str
	title: str
	subject: str
	content: str
	created_at: str
	updated_at: str


@dataclass
class ScheduleItem(Record):
	CHOICES = {"day": WEEKDAYS}

	id: str
	subject: str
	teacher: str
	time: str
	room: str
	day: str = "Monday"


@dataclass
class UserProfile(Record):
	name: str
	school: str
	age: str
	grade: str
	password: str
	is_setup: bool = False


@dataclass(frozen=True)
class TimerSettings:
	study_minutes: int = 25
	short_break_minutes: int = 5
	long_break_minutes: int = 15
	sessions_until_long_break: int = 4

	def __post_init__(self):
		for name in ("study_minutes", "short_break_minutes", "long_break_minutes"):
			if getattr(self, name) < 0:
				raise ValidationError(f"{name.replace('_', ' ')} cannot be negative")
		if self.sessions_until_long_break < 1:
			raise ValidationError("sessions until long break must be at least 1")

	def break_minutes(self, sessions: int) -> int:
		"""Break length after `sessions` completed study sessions."""
		if sessions % self.sessions_until_long_break == 0:
			return self.long_break_minutes
		return self.short_break_minutes


@dataclass(frozen=True)
class TimerState:
	minutes: int
	seconds: int
	running: bool
	is_break: bool
	sessions: int
	progress: float
	display: str = "00:00"
