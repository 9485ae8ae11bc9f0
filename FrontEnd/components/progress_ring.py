from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QPainter, QPen, QColor
from PySide6.QtWidgets import QWidget

from FrontEnd.styles.design_tokens import COLORS


class ProgressRing(QWidget):
	"""Circular countdown: ring fills with progress, MM:SS in the middle."""

	def __init__(self):
		super().__init__()
		self.progress = 0.0
		self.display_text = "25:00"
		self.caption = "Study Time"
		self.ring_color = COLORS['study_ring']
		self.setMinimumSize(260, 260)

	def update_state(self, progress=None, text=None, caption=None, ring_color=None):
		if progress is not None:
			self.progress = max(0.0, min(100.0, progress))
		if text is not None:
			self.display_text = text
		if caption is not None:
			self.caption = caption
		if ring_color is not None:
			self.ring_color = ring_color
		self.update()

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		size = min(self.width(), self.height()) - 20
		rect = QRectF((self.width() - size) / 2, (self.height() - size) / 2, size, size)

		painter.setPen(QPen(QColor(COLORS['ring_track']), 10))
		painter.drawArc(rect, 0, 360 * 16)

		pen = QPen(QColor(self.ring_color), 10)
		pen.setCapStyle(Qt.RoundCap)
		painter.setPen(pen)
		# Qt angles are 1/16th degree, counter-clockwise; start at 12 o'clock
		painter.drawArc(rect, 90 * 16, -int(360 * 16 * self.progress / 100))

		painter.setPen(QColor(COLORS['text_strong']))
		font = painter.font()
		font.setPointSize(max(14, int(size * 0.14)))
		font.setBold(True)
		painter.setFont(font)
		painter.drawText(rect, Qt.AlignCenter, self.display_text)

		font.setPointSize(max(9, int(size * 0.045)))
		font.setBold(False)
		painter.setFont(font)
		caption_rect = QRectF(rect.left(), rect.center().y() + size * 0.12, rect.width(), size * 0.1)
		painter.drawText(caption_rect, Qt.AlignCenter, self.caption)
		painter.end()
