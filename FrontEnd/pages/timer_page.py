from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QPushButton

from BackEnd.core.models import TimerSettings
from FrontEnd.components.progress_ring import ProgressRing
from FrontEnd.components.record_dialog import RecordDialog, Field
from FrontEnd.components.widgets import card
from FrontEnd.styles.design_tokens import COLORS


def settings_fields(s):
	return [
		Field("study_minutes", "Study time (minutes)", "int", minimum=1, maximum=60, default=s.study_minutes),
		Field("short_break_minutes", "Short break (minutes)", "int", minimum=1, maximum=30, default=s.short_break_minutes),
		Field("long_break_minutes", "Long break (minutes)", "int", minimum=1, maximum=60, default=s.long_break_minutes),
		Field("sessions_until_long_break", "Sessions until long break", "int", minimum=2, maximum=10,
			default=s.sessions_until_long_break),
	]


class TimerPage(QWidget):
	def __init__(self, timer_service):
		super().__init__()
		self.timer_service = timer_service
		outer = QVBoxLayout()
		outer.setContentsMargins(32, 32, 32, 32)

		header = QHBoxLayout()
		title = QLabel("Study Timer")
		title.setObjectName("PageTitle")
		header.addWidget(title)
		header.addStretch()
		settings_btn = QPushButton("Settings")
		settings_btn.clicked.connect(self._open_settings)
		header.addWidget(settings_btn)
		outer.addLayout(header)

		self.ring = ProgressRing()
		outer.addWidget(self.ring, alignment=Qt.AlignmentFlag.AlignHCenter, stretch=1)

		controls = QHBoxLayout()
		controls.addStretch()
		self.start_pause_btn = QPushButton("Start")
		self.start_pause_btn.setObjectName("StartBtn")
		self.start_pause_btn.setMinimumHeight(48)
		self.reset_btn = QPushButton("Reset")
		self.reset_btn.setMinimumHeight(48)
		controls.addWidget(self.start_pause_btn)
		controls.addWidget(self.reset_btn)
		controls.addStretch()
		outer.addLayout(controls)

		stats = QHBoxLayout()
		self.sessions_value = QLabel("0")
		self.sessions_value.setObjectName("StatValue")
		self.next_break_value = QLabel("Long")
		self.next_break_value.setObjectName("StatValue")
		self.status_value = QLabel("Paused")
		self.status_value.setObjectName("StatValue")
		for caption, value in (("Sessions Completed", self.sessions_value),
				("Next Break", self.next_break_value), ("Status", self.status_value)):
			stats.addWidget(card(caption, value))
		outer.addLayout(stats)
		self.setLayout(outer)

		self.start_pause_btn.clicked.connect(self.timer_service.toggle)
		self.reset_btn.clicked.connect(self.timer_service.reset)
		self.timer_service.tick.connect(self._on_tick)
		self.timer_service.progress_changed.connect(lambda p: self.ring.update_state(progress=p))
		self.timer_service.state_changed.connect(self._on_state)
		self.timer_service.phase_changed.connect(lambda _: self._refresh())
		self._refresh()

	def _on_tick(self, text):
		self.ring.update_state(text=text)

	def _on_state(self, state):
		if state == "running":
			self.start_pause_btn.setText("Pause")
		elif state == "paused":
			self.start_pause_btn.setText("Resume")
		else:
			self.start_pause_btn.setText("Start")
		self._refresh()

	def _refresh(self):
		engine = self.timer_service.engine
		on_break = engine.is_break
		self.ring.update_state(
			progress=engine.progress(),
			text=engine.display(),
			caption="Break Time" if on_break else "Study Time",
			ring_color=COLORS['break_ring'] if on_break else COLORS['study_ring'],
		)
		self.sessions_value.setText(str(engine.sessions))
		self.next_break_value.setText("Long" if engine.next_break_is_long() else "Short")
		self.status_value.setText("Running" if engine.running else "Paused")

	def _open_settings(self):
		def submit(values):
			self.timer_service.apply_settings(TimerSettings(**values))
			self._refresh()

		RecordDialog("Timer Settings", settings_fields(self.timer_service.engine.settings), submit,
			submit_text="Save Settings", parent=self).exec()
