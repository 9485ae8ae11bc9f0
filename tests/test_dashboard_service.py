"""Tests for the read-only dashboard rollup."""

from datetime import date

from BackEnd.core import models
from BackEnd.repos import record_repo
from BackEnd.services.collection_service import (
    AssignmentService, CourseService, NoteService, ScheduleService,
)
from BackEnd.services.dashboard_service import DashboardService


def test_empty_dashboard():
    s = DashboardService().summary()
    assert s.upcoming == []
    assert s.gpa == "0.00"
    assert s.study_hours == 0
    assert s.recent_activity == []
    assert record_repo.load_value(models.STUDY_HOURS_KEY) == 0


def test_summary_rolls_up_every_collection():
    assignments = AssignmentService()
    done = assignments.add("Done", "Math", "2026-10-01")
    assignments.toggle_status(done.id)
    assignments.toggle_status(done.id)
    for i in range(4):
        assignments.add(f"Open {i}", "Math", "2026-10-2{i}")
    CourseService().add("Math", 4, "A")
    NoteService().add("Cells", "Biology", "mitochondria")
    schedule = ScheduleService()
    schedule.add("Math", "Mr. Lee", "9:00", "101", "Monday")
    schedule.add("Art", "Ms. Kay", "1:00", "5", "Tuesday")

    s = DashboardService().summary(today=date(2026, 10, 19))  # a Monday
    assert [a.title for a in s.upcoming] == ["Open 0", "Open 1", "Open 2"]
    assert (s.total_assignments, s.completed_assignments, s.remaining_assignments) == (5, 1, 4)
    assert s.gpa == "4.00"
    assert s.course_count == 1
    assert s.note_count == 1
    assert [i.subject for i in s.today_schedule] == ["Math"]
    assert s.recent_activity == ["Added 5 assignments", "Created 1 study notes", "Updated class schedule"]


def test_study_hours_is_read_not_incremented():
    record_repo.save_value(models.STUDY_HOURS_KEY, 12)
    dash = DashboardService()
    assert dash.summary().study_hours == 12
    assert dash.summary().study_hours == 12


def test_status_counts():
    svc = AssignmentService()
    a = svc.add("One", "Math", "2026-10-20")
    svc.add("Two", "Math", "2026-10-20")
    svc.toggle_status(a.id)
    assert DashboardService().status_counts() == {"pending": 1, "in-progress": 1, "completed": 0}
