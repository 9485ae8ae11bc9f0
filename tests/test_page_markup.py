"""User text shown in rich-text labels is escaped."""

from BackEnd.core.models import Assignment, CalendarEvent, Note
from FrontEnd.pages.assignments_page import assignment_markup
from FrontEnd.pages.calendar_page import event_markup
from FrontEnd.pages.notes_page import note_markup


def test_note_title_and_content_escaped():
    note = Note(id="n1", title="<b", subject="Math", content="a < b & c",
                created_at="2026-10-01", updated_at="2026-10-01")
    markup = note_markup(note)
    assert "<b>&lt;b</b>" in markup
    assert "a &lt; b &amp; c" in markup


def test_note_preview_truncated_before_escaping():
    note = Note(id="n1", title="t", subject="s", content="<" * 200,
                created_at="2026-10-01", updated_at="2026-10-01")
    assert "&lt;" * 160 + "..." in note_markup(note)


def test_assignment_description_escaped():
    a = Assignment(id="a1", title="Read <Hamlet>", subject="English",
                   due_date="2026-10-20", description="<i>spoilers")
    markup = assignment_markup(a)
    assert "Read &lt;Hamlet&gt;" in markup
    assert "<i>&lt;i&gt;spoilers</i>" in markup


def test_assignment_without_description():
    a = Assignment(id="a1", title="Essay", subject="English", due_date="2026-10-20")
    assert "<i>" not in assignment_markup(a)


def test_event_location_escaped():
    e = CalendarEvent(id="e1", title="Exam", date="2026-10-20", location="Hall <A>")
    assert event_markup(e) == "<b>Exam</b><br>09:00 • Hall &lt;A&gt;"
