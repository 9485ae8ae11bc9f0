from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
	QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QScrollArea, QMessageBox,
)


def page_layout(title, *header_widgets):
	"""Page skeleton: title row with optional widgets on the right."""
	w = QWidget()
	outer = QVBoxLayout()
	outer.setContentsMargins(32, 32, 32, 32)
	outer.setSpacing(12)
	header = QHBoxLayout()
	label = QLabel(title)
	label.setObjectName("PageTitle")
	header.addWidget(label)
	header.addStretch()
	for hw in header_widgets:
		header.addWidget(hw)
	outer.addLayout(header)
	w.setLayout(outer)
	return w, outer


def scroll_list():
	"""Scrollable vertical container; returns (scroll area, inner layout)."""
	scroll = QScrollArea()
	scroll.setWidgetResizable(True)
	scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
	scroll.setFrameShape(QScrollArea.NoFrame)
	content = QWidget()
	layout = QVBoxLayout()
	layout.setContentsMargins(0, 0, 0, 0)
	layout.setSpacing(8)
	layout.setAlignment(Qt.AlignmentFlag.AlignTop)
	content.setLayout(layout)
	scroll.setWidget(content)
	return scroll, layout


def clear_layout(layout):
	while layout.count():
		item = layout.takeAt(0)
		if item.widget() is not None:
			item.widget().deleteLater()
		elif item.layout() is not None:
			clear_layout(item.layout())
			item.layout().deleteLater()


def card(*rows):
	"""White rounded box holding one QLabel (or widget) per row."""
	box = QWidget()
	box.setObjectName("Card")
	box.setAttribute(Qt.WA_StyledBackground, True)
	lay = QVBoxLayout()
	lay.setContentsMargins(16, 12, 16, 12)
	for row in rows:
		lay.addWidget(rich_label(row) if isinstance(row, str) else row)
	box.setLayout(lay)
	return box


def rich_label(text):
	"""QLabel that always renders HTML; escape user text before passing it in."""
	label = QLabel(text)
	label.setTextFormat(Qt.RichText)
	return label


def plain_label(text):
	label = QLabel(text)
	label.setTextFormat(Qt.PlainText)
	return label


def dot(color, size=10):
	d = QLabel()
	d.setFixedSize(size, size)
	d.setStyleSheet(f"background: {color}; border-radius: {size // 2}px;")
	return d


def small_button(text, handler):
	btn = QPushButton(text)
	btn.setCursor(Qt.PointingHandCursor)
	btn.clicked.connect(handler)
	return btn


def empty_state(text):
	label = QLabel(text)
	label.setAlignment(Qt.AlignmentFlag.AlignCenter)
	label.setStyleSheet("color: #8A94A6; padding: 32px;")
	return label


def confirm(parent, title, text):
	answer = QMessageBox.question(parent, title, text, QMessageBox.Yes | QMessageBox.No)
	return answer == QMessageBox.Yes
