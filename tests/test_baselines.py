from datetime import date

import pytest

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError, ValidationError
from core.models import DependencyType, TaskDependency, TaskStatus


def _two_task_project(ts, project_id="p-1"):
    a = ts.create_task(project_id, "Excavation", date(2024, 1, 1), 5, phase="sitework")
    b = ts.create_task(project_id, "Foundation", date(2024, 1, 8), 3, phase="foundation")
    dep = ts.add_dependency(project_id, a.id, b.id, DependencyType.FINISH_TO_START, lag_days=1)
    return a, b, dep


def test_create_baseline_snapshots_tasks_and_dependencies(services):
    ts = services["task_service"]
    bs = services["baseline_service"]
    a, b, dep = _two_task_project(ts)

    baseline = bs.create_baseline("p-1", "  Contract schedule ", description="Signed 2023-12-15")

    assert baseline.name == "Contract schedule"
    assert [t.id for t in baseline.tasks] == [a.id, b.id]
    assert [d.id for d in baseline.dependencies] == [dep.id]

    services["session"].expire_all()
    stored = bs.get_baseline(baseline.id)
    assert stored.description == "Signed 2023-12-15"
    assert stored.task_by_id(b.id).start_date == date(2024, 1, 9)
    assert stored.task_by_id(b.id).end_date_calculated == date(2024, 1, 11)
    assert stored.task_by_id(a.id).is_critical_path
    assert stored.task_by_id(a.id).status == TaskStatus.PENDING
    assert stored.dependencies[0].dependency_type == DependencyType.FINISH_TO_START
    assert stored.dependencies[0].lag_days == 1


def test_baseline_is_unaffected_by_later_edits(services):
    ts = services["task_service"]
    bs = services["baseline_service"]
    a, b, _ = _two_task_project(ts)

    baseline = bs.create_baseline("p-1", "Original")
    ts.update_task(a.id, workdays=8)

    assert ts.get_task(b.id).start_date == date(2024, 1, 12)
    services["session"].expire_all()
    frozen = bs.get_baseline(baseline.id)
    assert frozen.task_by_id(a.id).workdays == 5
    assert frozen.task_by_id(b.id).start_date == date(2024, 1, 9)


def test_baseline_excludes_dependencies_leaving_the_project(services):
    ts = services["task_service"]
    bs = services["baseline_service"]
    a = ts.create_task("p-1", "Alpha", date(2024, 1, 1), 1)
    other = ts.create_task("p-2", "Elsewhere", date(2024, 1, 1), 1)
    services["dependency_repo"].add(TaskDependency.create(a.id, other.id))
    services["session"].commit()

    baseline = bs.create_baseline("p-1", "Scoped")

    assert [t.id for t in baseline.tasks] == [a.id]
    assert baseline.dependencies == []


def test_empty_project_can_be_baselined(services):
    baseline = services["baseline_service"].create_baseline("p-empty", "Kickoff")
    assert baseline.tasks == []
    assert baseline.dependencies == []


def test_list_and_delete_baselines(services):
    ts = services["task_service"]
    bs = services["baseline_service"]
    _two_task_project(ts)
    first = bs.create_baseline("p-1", "First")
    second = bs.create_baseline("p-1", "Second")
    bs.create_baseline("p-2", "Other project")

    assert {b.name for b in bs.list_baselines("p-1")} == {"First", "Second"}

    bs.delete_baseline(first.id)

    assert [b.id for b in bs.list_baselines("p-1")] == [second.id]
    with pytest.raises(NotFoundError) as exc:
        bs.delete_baseline(first.id)
    assert exc.value.code == "BASELINE_NOT_FOUND"


def test_baseline_name_and_description_rules(services):
    bs = services["baseline_service"]

    with pytest.raises(ValidationError) as exc_empty:
        bs.create_baseline("p-1", "   ")
    assert exc_empty.value.code == "BASELINE_NAME_EMPTY"

    with pytest.raises(ValidationError) as exc_long:
        bs.create_baseline("p-1", "x" * 101)
    assert exc_long.value.code == "BASELINE_NAME_TOO_LONG"

    with pytest.raises(ValidationError) as exc_desc:
        bs.create_baseline("p-1", "Ok", description="d" * 501)
    assert exc_desc.value.code == "BASELINE_DESCRIPTION_TOO_LONG"

    assert bs.list_baselines("p-1") == []


def test_baseline_writes_emit_event(services):
    bs = services["baseline_service"]
    seen = []
    domain_events.baselines_changed.connect(seen.append)
    try:
        baseline = bs.create_baseline("p-7", "Snapshot")
        bs.delete_baseline(baseline.id)
    finally:
        domain_events.baselines_changed.disconnect(seen.append)

    assert seen == ["p-7", "p-7"]
