from html import escape

from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLineEdit, QComboBox, QPushButton

from FrontEnd.components.record_dialog import RecordDialog, Field
from FrontEnd.components.widgets import (
	page_layout, scroll_list, clear_layout, small_button, empty_state, confirm, rich_label,
)

NOTE_FIELDS = [
	Field("title", "Title"),
	Field("subject", "Subject"),
	Field("content", "Content", "multiline"),
]


def note_markup(note):
	preview = note.content if len(note.content) <= 160 else note.content[:160] + "..."
	return (f"<b>{escape(note.title)}</b> <span style='color:#8A94A6'>({escape(note.subject)})</span>"
		f"<br>{escape(preview)}<br><small>Updated {escape(note.updated_at)}</small>")


class NotesPage(QWidget):
	def __init__(self, service):
		super().__init__()
		self.service = service
		add_btn = QPushButton("New Note")
		add_btn.setObjectName("StartBtn")
		add_btn.clicked.connect(self._add)
		page, outer = page_layout("Study Notes", add_btn)

		filters = QHBoxLayout()
		self.search = QLineEdit()
		self.search.setPlaceholderText("Search notes...")
		self.search.textChanged.connect(lambda _: self._render())
		self.subject_combo = QComboBox()
		self.subject_combo.currentTextChanged.connect(lambda _: self._render())
		filters.addWidget(self.search, stretch=1)
		filters.addWidget(self.subject_combo)
		outer.addLayout(filters)

		scroll, self.list_layout = scroll_list()
		outer.addWidget(scroll)
		wrapper = QVBoxLayout()
		wrapper.setContentsMargins(0, 0, 0, 0)
		wrapper.addWidget(page)
		self.setLayout(wrapper)
		self.service.changed.connect(self.refresh)
		self.refresh()

	def refresh(self):
		# rebuild subject choices, keeping the current one when it still exists
		current = self.subject_combo.currentText() or "all"
		subjects = self.service.subjects()
		self.subject_combo.blockSignals(True)
		self.subject_combo.clear()
		self.subject_combo.addItems(subjects)
		self.subject_combo.setCurrentText(current if current in subjects else "all")
		self.subject_combo.blockSignals(False)
		self._render()

	def _render(self):
		clear_layout(self.list_layout)
		notes = self.service.search(self.search.text(), self.subject_combo.currentText() or "all")
		if not notes:
			self.list_layout.addWidget(empty_state(
				"No notes yet. Create your first note!" if self.service.count() == 0 else "No notes match your search."
			))
			return
		for note in notes:
			self.list_layout.addWidget(self._row(note))

	def _row(self, note):
		row = QWidget()
		row.setObjectName("Card")
		lay = QHBoxLayout()
		body = rich_label(note_markup(note))
		body.setWordWrap(True)
		lay.addWidget(body, stretch=1)
		lay.addWidget(small_button("Edit", lambda _=False, i=note.id: self._edit(i)))
		lay.addWidget(small_button("Delete", lambda _=False, i=note.id: self._delete(i)))
		row.setLayout(lay)
		return row

	def _add(self):
		RecordDialog("New Note", NOTE_FIELDS, lambda v: self.service.add(**v),
			submit_text="Create Note", parent=self).exec()

	def _edit(self, record_id):
		note = self.service.get(record_id)
		if note is None:
			return
		RecordDialog("Edit Note", NOTE_FIELDS, lambda v: self.service.edit(record_id, **v),
			values=note.to_dict(), submit_text="Update Note", parent=self).exec()

	def _delete(self, record_id):
		if confirm(self, "Delete note", "Delete this note?"):
			self.service.delete(record_id)
