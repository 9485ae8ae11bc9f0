from BackEnd.core.clock import fmt_mmss
from BackEnd.core.models import TimerSettings, TimerState


class TimerEngine:
	"""Study/break countdown state machine.

	Holds the remaining time as (minutes, seconds), a running flag, the
	number of completed study sessions and which phase is current. It has
	no clock of its own: something else calls tick() once per second.
	"""

	def __init__(self, settings: TimerSettings = None):
		self.settings = settings or TimerSettings()
		self.minutes = self.settings.study_minutes
		self.seconds = 0
		self.running = False
		self.is_break = False
		self.sessions = 0

	def start(self):
		if self.running:
			return
		self.running = True

	def pause(self):
		self.running = False

	def toggle(self):
		if self.running:
			self.pause()
		else:
			self.start()

	def tick(self) -> bool:
		"""Advance one second. Returns True when this tick finished a phase."""
		if not self.running:
			return False
		if self.minutes == 0 and self.seconds == 0:
			return self.session_complete()
		if self.seconds > 0:
			self.seconds -= 1
		else:
			self.minutes -= 1
			self.seconds = 59
		if self.minutes == 0 and self.seconds == 0:
			return self.session_complete()
		return False

	def session_complete(self) -> bool:
		# running always drops to False; the next phase waits for start()
		self.running = False
		if not self.is_break:
			self.sessions += 1
			self.minutes = self.settings.break_minutes(self.sessions)
			self.is_break = True
		else:
			self.minutes = self.settings.study_minutes
			self.is_break = False
		self.seconds = 0
		return True

	def reset(self):
		self.running = False
		self.minutes = self.current_phase_minutes()
		self.seconds = 0

	def apply_settings(self, settings: TimerSettings):
		self.settings = settings
		if not self.running:
			self.minutes = settings.study_minutes
			self.seconds = 0
			self.is_break = False

	def current_phase_minutes(self) -> int:
		if self.is_break:
			return self.settings.break_minutes(self.sessions)
		return self.settings.study_minutes

	def next_break_is_long(self) -> bool:
		return self.sessions % self.settings.sessions_until_long_break == 0

	def remaining_seconds(self) -> int:
		return self.minutes * 60 + self.seconds

	def progress(self) -> float:
		"""Percent of the current phase already elapsed, 0..100."""
		total = self.current_phase_minutes() * 60
		if total <= 0:
			return 100.0
		done = (total - self.remaining_seconds()) / total * 100
		return min(100.0, max(0.0, done))

	def display(self) -> str:
		return fmt_mmss(self.minutes, self.seconds)

	def snapshot(self) -> TimerState:
		return TimerState(
			minutes=self.minutes,
			seconds=self.seconds,
			running=self.running,
			is_break=self.is_break,
			sessions=self.sessions,
			progress=self.progress(),
			display=self.display(),
		)
