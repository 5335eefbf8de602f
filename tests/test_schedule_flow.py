from datetime import date

import pytest

from core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from core.models import DependencyType, TaskStatus


def test_create_task_computes_end_date_and_sort_order(services):
    ts = services["task_service"]

    t1 = ts.create_task("p-1", "Excavation", date(2024, 1, 1), 5, phase="sitework")
    t2 = ts.create_task("p-1", "Footings", "2024-01-08", 3, phase="foundation")

    assert t1.end_date_calculated == date(2024, 1, 5)
    assert t2.end_date_calculated == date(2024, 1, 10)
    assert (t1.sort_order, t2.sort_order) == (0, 1)
    assert t1.status == TaskStatus.PENDING


def test_create_task_validation_rules(services):
    ts = services["task_service"]

    with pytest.raises(ValidationError) as exc_title:
        ts.create_task("p-1", "   ", date(2024, 1, 1), 1)
    assert exc_title.value.code == "TASK_TITLE_EMPTY"

    with pytest.raises(ValidationError) as exc_days:
        ts.create_task("p-1", "Negative", date(2024, 1, 1), -2)
    assert exc_days.value.code == "TASK_INVALID_WORKDAYS"

    with pytest.raises(ValidationError) as exc_progress:
        ts.create_task("p-1", "Overdone", date(2024, 1, 1), 1, percent_complete=120)
    assert exc_progress.value.code == "TASK_INVALID_PROGRESS"


def test_milestone_ends_on_its_start(services):
    ts = services["task_service"]
    m = ts.create_task("p-1", "Permit issued", date(2024, 1, 6), 0, is_milestone=True)
    assert m.end_date_calculated == date(2024, 1, 6)
    assert m.is_milestone


def test_add_dependency_propagates_and_flags_critical_path(services):
    ts = services["task_service"]

    a = ts.create_task("p-1", "Excavation", date(2024, 1, 1), 5)
    b = ts.create_task("p-1", "Foundation", date(2024, 1, 3), 3)
    c = ts.create_task("p-1", "Survey", date(2024, 1, 1), 2)

    ts.add_dependency("p-1", a.id, b.id, DependencyType.FINISH_TO_START, lag_days=0)

    b_after = ts.get_task(b.id)
    assert b_after.start_date == date(2024, 1, 8)
    assert b_after.end_date_calculated == date(2024, 1, 10)

    assert ts.get_task(a.id).is_critical_path
    assert b_after.is_critical_path
    assert not ts.get_task(c.id).is_critical_path
    assert ts.recalculate_critical_path("p-1") == {a.id, b.id}


def test_add_dependency_rejects_cycles(services):
    ts = services["task_service"]

    t1 = ts.create_task("p-1", "T01", date(2024, 1, 1), 1)
    t2 = ts.create_task("p-1", "T02", date(2024, 1, 1), 1)
    t3 = ts.create_task("p-1", "T03", date(2024, 1, 1), 1)
    ts.add_dependency("p-1", t1.id, t2.id)
    ts.add_dependency("p-1", t2.id, t3.id)

    with pytest.raises(BusinessRuleError) as exc:
        ts.add_dependency("p-1", t3.id, t1.id)
    assert exc.value.code == "DEPENDENCY_CYCLE"

    with pytest.raises(ValidationError) as exc_self:
        ts.add_dependency("p-1", t1.id, t1.id)
    assert exc_self.value.code == "SELF_DEPENDENCY"

    assert len(ts.list_dependencies("p-1")) == 2


def test_add_dependency_requires_tasks_in_project(services):
    ts = services["task_service"]

    a = ts.create_task("p-1", "Alpha", date(2024, 1, 1), 1)
    other = ts.create_task("p-2", "Other", date(2024, 1, 1), 1)

    with pytest.raises(NotFoundError) as exc:
        ts.add_dependency("p-1", a.id, other.id)
    assert exc.value.code == "TASK_NOT_FOUND"


def test_non_fs_dependency_is_stored_but_inert(services):
    ts = services["task_service"]

    a = ts.create_task("p-1", "Framing", date(2024, 1, 1), 5)
    b = ts.create_task("p-1", "Electrical", date(2024, 1, 2), 2)

    dep = ts.add_dependency("p-1", a.id, b.id, DependencyType.START_TO_START, lag_days=1)

    assert dep.dependency_type == DependencyType.START_TO_START
    assert ts.get_task(b.id).start_date == date(2024, 1, 2)
    assert not ts.get_task(b.id).is_critical_path


def test_update_task_recomputes_end_and_cascades(services):
    ts = services["task_service"]

    a = ts.create_task("p-1", "Excavation", date(2024, 1, 1), 5)
    b = ts.create_task("p-1", "Foundation", date(2024, 1, 8), 3)
    c = ts.create_task("p-1", "Framing", date(2024, 1, 11), 2)
    ts.add_dependency("p-1", a.id, b.id)
    ts.add_dependency("p-1", b.id, c.id)

    updated = ts.update_task(a.id, workdays=6, title="Excavation and grading")

    assert updated.end_date_calculated == date(2024, 1, 8)
    assert updated.title == "Excavation and grading"
    assert ts.get_task(b.id).start_date == date(2024, 1, 9)
    assert ts.get_task(b.id).end_date_calculated == date(2024, 1, 11)
    assert ts.get_task(c.id).start_date == date(2024, 1, 12)
    assert ts.get_task(c.id).end_date_calculated == date(2024, 1, 15)


def test_update_missing_task_raises(services):
    ts = services["task_service"]
    with pytest.raises(NotFoundError):
        ts.update_task("nope", workdays=2)


def test_delete_task_removes_its_dependencies(services):
    ts = services["task_service"]

    a = ts.create_task("p-1", "Alpha", date(2024, 1, 1), 5)
    b = ts.create_task("p-1", "Bravo", date(2024, 1, 1), 1)
    ts.add_dependency("p-1", a.id, b.id)

    ts.delete_task(a.id)

    assert ts.list_dependencies("p-1") == []
    remaining = ts.list_tasks_for_project("p-1")
    assert [t.id for t in remaining] == [b.id]
    assert remaining[0].start_date == date(2024, 1, 8)
    assert remaining[0].is_critical_path


def test_remove_dependency_recalculates_critical_path(services):
    ts = services["task_service"]

    a = ts.create_task("p-1", "Alpha", date(2024, 1, 1), 1)
    b = ts.create_task("p-1", "Bravo", date(2024, 1, 1), 1)
    c = ts.create_task("p-1", "Charlie", date(2024, 1, 1), 3)
    dep = ts.add_dependency("p-1", a.id, b.id)
    assert not ts.get_task(a.id).is_critical_path

    ts.remove_dependency(dep.id)

    assert ts.list_dependencies("p-1") == []
    assert ts.recalculate_critical_path("p-1") == {c.id}

    with pytest.raises(NotFoundError) as exc:
        ts.remove_dependency(dep.id)
    assert exc.value.code == "DEPENDENCY_NOT_FOUND"


def test_status_and_reorder(services):
    ts = services["task_service"]

    a = ts.create_task("p-1", "Alpha", date(2024, 1, 1), 1)
    b = ts.create_task("p-1", "Bravo", date(2024, 1, 1), 1)

    ts.update_task_status(a.id, TaskStatus.IN_PROGRESS)
    ts.reorder_tasks("p-1", {a.id: 5, b.id: 2})

    ordered = ts.list_tasks_for_project("p-1")
    assert [t.id for t in ordered] == [b.id, a.id]
    assert ordered[1].status == TaskStatus.IN_PROGRESS


def test_get_schedule_scopes_to_project(services):
    ts = services["task_service"]
    wcs = services["work_calendar_service"]

    a = ts.create_task("p-1", "Alpha", date(2024, 1, 1), 1)
    b = ts.create_task("p-1", "Bravo", date(2024, 1, 1), 1)
    ts.create_task("p-2", "Elsewhere", date(2024, 1, 1), 1)
    ts.add_dependency("p-1", a.id, b.id)
    wcs.add_exception("p-1", "New Year", date(2024, 1, 1), date(2024, 1, 1))

    snapshot = ts.get_schedule("p-1")

    assert {t.id for t in snapshot.tasks} == {a.id, b.id}
    assert len(snapshot.dependencies) == 1
    assert [e.title for e in snapshot.exceptions] == ["New Year"]


def test_summarize_phases(services):
    ts = services["task_service"]

    ts.create_task("p-1", "Clear lot", date(2024, 1, 1), 2, phase="sitework", percent_complete=100)
    t2 = ts.create_task("p-1", "Grade", date(2024, 1, 3), 3, phase="sitework", percent_complete=50)
    ts.create_task("p-1", "Punch list", date(2024, 2, 1), 1)
    ts.update_task_status(t2.id, TaskStatus.COMPLETE)

    summaries = ts.summarize_phases("p-1")

    assert [s.phase for s in summaries] == ["sitework", "uncategorized"]
    site = summaries[0]
    assert site.start_date == date(2024, 1, 1)
    assert site.end_date == date(2024, 1, 5)
    assert site.progress == 75
    assert not site.is_complete
