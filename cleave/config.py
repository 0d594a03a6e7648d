"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class GirvanNewmanConfig:
    """Configuration container for :class:`cleave.orchestrator.GirvanNewman`.

    The fields mirror keyword arguments accepted by
    :func:`cleave.algorithms.girvan_newman.girvan_newman`, plus
    ``copy_graph`` which keeps the caller's graph intact.
    """

    strict_attachment: bool = False
    max_splits: Optional[int] = None
    copy_graph: bool = True
    verbosity: int = 1
