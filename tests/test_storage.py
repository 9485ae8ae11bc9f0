"""Tests for the key/value store and whole-collection persistence."""

from BackEnd.core.models import (
    Assignment, Course, Note, ScheduleItem, ASSIGNMENTS_KEY, COURSES_KEY, NOTES_KEY,
    SCHEDULE_KEY,
)
from BackEnd.core.paths import db_path
from BackEnd.repos import record_repo, storage_repo


def make_assignment(i, status="pending"):
    return Assignment(id=f"a{i}", title=f"Essay {i}", subject="English",
                      due_date="2026-10-20", priority="high", status=status,
                      description="")


def test_database_lives_in_data_dir(data_dir):
    storage_repo.set_item("k", "v")
    assert db_path().parent == data_dir
    assert db_path().exists()


def test_get_set_remove():
    assert storage_repo.get_item("missing") is None
    storage_repo.set_item("k", "one")
    storage_repo.set_item("k", "two")
    assert storage_repo.get_item("k") == "two"
    storage_repo.remove_item("k")
    assert storage_repo.get_item("k") is None


def test_keys_and_clear():
    storage_repo.set_item("b", "1")
    storage_repo.set_item("a", "2")
    assert storage_repo.keys() == ["a", "b"]
    assert storage_repo.clear() == 2
    assert storage_repo.keys() == []


def test_round_trip():
    items = [make_assignment(1), make_assignment(2, "completed")]
    record_repo.save(ASSIGNMENTS_KEY, items)
    assert record_repo.load(ASSIGNMENTS_KEY, Assignment.from_dict) == items


def test_round_trip_empty_collection():
    record_repo.save(ASSIGNMENTS_KEY, [])
    assert record_repo.load(ASSIGNMENTS_KEY, Assignment.from_dict) == []


def test_absent_key_loads_empty():
    assert record_repo.load("nothing-here", Assignment.from_dict) == []


def test_save_overwrites_whole_collection():
    record_repo.save(ASSIGNMENTS_KEY, [make_assignment(1), make_assignment(2)])
    record_repo.save(ASSIGNMENTS_KEY, [make_assignment(3)])
    loaded = record_repo.load(ASSIGNMENTS_KEY, Assignment.from_dict)
    assert [a.id for a in loaded] == ["a3"]


def test_unparseable_text_loads_empty():
    storage_repo.set_item(ASSIGNMENTS_KEY, "{not json")
    assert record_repo.load(ASSIGNMENTS_KEY, Assignment.from_dict) == []


def test_wrong_shape_loads_empty():
    storage_repo.set_item(COURSES_KEY, '{"name": "Math"}')
    assert record_repo.load(COURSES_KEY, Course.from_dict) == []
    storage_repo.set_item(COURSES_KEY, '[{"name": "Math"}]')
    assert record_repo.load(COURSES_KEY, Course.from_dict) == []
    storage_repo.set_item(COURSES_KEY, '[1, 2]')
    assert record_repo.load(COURSES_KEY, Course.from_dict) == []


def test_unknown_fields_are_ignored():
    storage_repo.set_item(COURSES_KEY, '[{"id": "c1", "name": "Math", "credits": 3, '
                                       '"grade": "A", "grade_points": 4.0, "color": "x"}]')
    assert record_repo.load(COURSES_KEY, Course.from_dict)[0].name == "Math"


def test_scalar_values():
    assert record_repo.load_value("studyHours", 7) == 7
    record_repo.save_value("studyHours", 0)
    assert record_repo.load_value("studyHours") == 0
    storage_repo.set_item("studyHours", "abc")
    assert record_repo.load_value("studyHours", 3) == 3


def test_wrong_value_type_loads_empty(caplog):
    storage_repo.set_item(COURSES_KEY, '[{"id": "c1", "name": "Math", "credits": "3", '
                                       '"grade": "A", "grade_points": 4.0}]')
    with caplog.at_level("WARNING"):
        assert record_repo.load(COURSES_KEY, Course.from_dict) == []
    assert "Course.credits" in caplog.text


def test_boolean_is_not_a_number():
    storage_repo.set_item(COURSES_KEY, '[{"id": "c1", "name": "Math", "credits": true, '
                                       '"grade": "A", "grade_points": 4.0}]')
    assert record_repo.load(COURSES_KEY, Course.from_dict) == []


def test_whole_number_grade_points_accepted():
    storage_repo.set_item(COURSES_KEY, '[{"id": "c1", "name": "Math", "credits": 3, '
                                       '"grade": "A", "grade_points": 4}]')
    assert record_repo.load(COURSES_KEY, Course.from_dict)[0].grade_points == 4


def test_null_field_loads_empty():
    storage_repo.set_item(NOTES_KEY, '[{"id": "n1", "title": null, "subject": "Math", '
                                     '"content": "x", "created_at": "2026-10-01", '
                                     '"updated_at": "2026-10-01"}]')
    assert record_repo.load(NOTES_KEY, Note.from_dict) == []


def test_value_outside_choices_loads_empty():
    storage_repo.set_item(ASSIGNMENTS_KEY, '[{"id": "a1", "title": "Essay", "subject": "English", '
                                           '"due_date": "2026-10-20", "status": "done"}]')
    assert record_repo.load(ASSIGNMENTS_KEY, Assignment.from_dict) == []
    storage_repo.set_item(SCHEDULE_KEY, '[{"id": "s1", "subject": "Math", "teacher": "Mr. Lee", '
                                        '"time": "9:00", "room": "101", "day": "Saturday"}]')
    assert record_repo.load(SCHEDULE_KEY, ScheduleItem.from_dict) == []


def test_one_bad_record_discards_collection():
    good = make_assignment(1).to_dict()
    bad = dict(make_assignment(2).to_dict(), priority="urgent")
    record_repo.save(ASSIGNMENTS_KEY, [good, bad])
    assert record_repo.load(ASSIGNMENTS_KEY, Assignment.from_dict) == []
