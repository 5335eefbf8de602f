""" Notify listeners when a project's schedule, calendar or baselines change """
from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.schedule_changed: Signal[str] = Signal()    # project_id
        self.exceptions_changed: Signal[str] = Signal()  # project_id
        self.baselines_changed: Signal[str] = Signal()   # project_id


# SINGLE global instance
domain_events = DomainEvents()
