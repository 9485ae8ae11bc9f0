import logging

from PySide6.QtCore import QObject, Signal, QTimer

from BackEnd.core.models import TimerSettings
from BackEnd.services.timer_engine import TimerEngine

logger = logging.getLogger(__name__)

class TimerService(QObject):
	tick = Signal(str)  # emits remaining time as MM:SS
	progress_changed = Signal(float)
	state_changed = Signal(str)  # emits 'running', 'paused', 'idle'
	phase_changed = Signal(str)  # emits 'study' or 'break'

	def __init__(self, settings: TimerSettings = None, parent=None):
		super().__init__(parent)
		self.engine = TimerEngine(settings)
		self._timer = QTimer(self)
		self._timer.setInterval(1000)
		self._timer.timeout.connect(self._on_tick)

	@property
	def running(self):
		return self.engine.running

	@property
	def phase(self):
		return 'break' if self.engine.is_break else 'study'

	def is_ticking(self):
		return self._timer.isActive()

	def start(self):
		if self.engine.running:
			return
		# only one callback per timer: drop any stale one before starting
		self._timer.stop()
		self.engine.start()
		self._timer.start()
		self.state_changed.emit('running')

	def pause(self):
		self._timer.stop()
		if not self.engine.running:
			return
		self.engine.pause()
		self.state_changed.emit('paused')

	def toggle(self):
		if self.engine.running:
			self.pause()
		else:
			self.start()

	def reset(self):
		self._timer.stop()
		self.engine.reset()
		self._emit_display()
		self.state_changed.emit('idle')

	def apply_settings(self, settings: TimerSettings):
		was_break = self.engine.is_break
		self.engine.apply_settings(settings)
		logger.info("Timer settings applied: %s", settings)
		self._emit_display()
		if was_break != self.engine.is_break:
			self.phase_changed.emit(self.phase)

	def shutdown(self):
		"""Stop ticking for good; call when the owning window goes away."""
		self._timer.stop()
		self.engine.pause()

	def _emit_display(self):
		self.tick.emit(self.engine.display())
		self.progress_changed.emit(self.engine.progress())

	def _on_tick(self):
		finished = self.engine.tick()
		if finished:
			self._timer.stop()
			logger.info("Phase finished; %d session(s) completed, now %s", self.engine.sessions, self.phase)
			self._emit_display()
			self.phase_changed.emit(self.phase)
			self.state_changed.emit('idle')
			return
		self._emit_display()
