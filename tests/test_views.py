"""Tests for the derived views (filters, grouping, calendar math, GPA)."""

from BackEnd.core.models import Assignment, CalendarEvent, Course, Note, ScheduleItem
from BackEnd.services import views


def assignment(i, status):
    return Assignment(id=str(i), title=f"Task {i}", subject="Math", due_date="2026-10-20", status=status)


def course(credits, points, grade="A"):
    return Course(id=f"{credits}-{points}", name="Course", credits=credits, grade=grade, grade_points=points)


def note(i, title, content, subject):
    return Note(id=str(i), title=title, subject=subject, content=content,
                created_at="2026-10-01", updated_at="2026-10-01")


def test_filter_by_status_keeps_order():
    items = [assignment(1, "pending"), assignment(2, "in-progress"), assignment(3, "completed")]
    assert views.filter_by_status(items, "completed") == [items[2]]
    assert views.filter_by_status(items, "all") == items
    assert views.completed_count(items) == 1


def test_search_notes_is_case_insensitive_and_anded_with_subject():
    notes = [
        note(1, "Photosynthesis", "light reactions", "Biology"),
        note(2, "Derivatives", "chain rule and LIGHT examples", "Math"),
        note(3, "Cells", "mitochondria", "Biology"),
    ]
    assert [n.id for n in views.search_notes(notes, "light")] == ["1", "2"]
    assert [n.id for n in views.search_notes(notes, "LIGHT", "Math")] == ["2"]
    assert [n.id for n in views.search_notes(notes, "", "Biology")] == ["1", "3"]
    assert views.search_notes(notes, "nothing") == []


def test_note_subjects():
    notes = [note(1, "a", "", "Biology"), note(2, "b", "", "Math"), note(3, "c", "", "Biology")]
    assert views.note_subjects(notes) == ["all", "Biology", "Math"]


def test_group_by_day():
    items = [
        ScheduleItem(id="1", subject="Math", teacher="T", time="9:00", room="1", day="Wednesday"),
        ScheduleItem(id="2", subject="Art", teacher="T", time="8:00", room="2", day="Monday"),
        ScheduleItem(id="3", subject="PE", teacher="T", time="10:00", room="3", day="Wednesday"),
    ]
    grouped = views.group_by_day(items)
    assert list(grouped) == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    assert [i.id for i in grouped["Wednesday"]] == ["1", "3"]
    assert grouped["Tuesday"] == []


def test_events_by_exact_date():
    events = [
        CalendarEvent(id="1", title="Exam", date="2026-10-20", type="exam"),
        CalendarEvent(id="2", title="Party", date="2026-10-21"),
        CalendarEvent(id="3", title="Class", date="2026-10-20", type="class"),
    ]
    assert [e.id for e in views.events_on(events, "2026-10-20")] == ["1", "3"]
    assert sorted(views.events_by_date(events)) == ["2026-10-20", "2026-10-21"]


def test_month_layout():
    assert views.month_layout(2024, 2) == (4, 29)   # Thursday, leap year
    assert views.month_layout(2023, 2) == (3, 28)   # Wednesday
    assert views.month_layout(2026, 11) == (0, 30)  # Sunday
    assert views.month_layout(2026, 6) == (1, 30)   # Monday


def test_shift_month_rolls_years():
    assert views.shift_month(2026, 12, 1) == (2027, 1)
    assert views.shift_month(2026, 1, -1) == (2025, 12)
    assert views.shift_month(2026, 5, 0) == (2026, 5)


def test_date_key_pads():
    assert views.date_key(2026, 3, 7) == "2026-03-07"


def test_gpa_empty_is_zero():
    assert views.format_gpa([]) == "0.00"
    assert views.compute_gpa([]) == 0.0


def test_gpa_single_course():
    assert views.format_gpa([course(4, 4.0)]) == "4.00"


def test_gpa_is_credit_weighted():
    assert views.format_gpa([course(3, 4.0), course(3, 2.0)]) == "3.00"
    assert views.format_gpa([course(4, 4.0), course(1, 0.0)]) == "3.20"


def test_grade_band():
    assert views.grade_band(4.0) == "excellent"
    assert views.grade_band(3.3) == "good"
    assert views.grade_band(2.0) == "fair"
    assert views.grade_band(1.7) == "poor"
