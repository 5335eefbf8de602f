from .critical_path import compute_cpm, find_critical_path
from .graph import would_create_cycle
from .models import CPMNode, DateUpdate
from .propagation import propagate_dates

__all__ = [
    "would_create_cycle",
    "compute_cpm",
    "find_critical_path",
    "propagate_dates",
    "CPMNode",
    "DateUpdate",
]
