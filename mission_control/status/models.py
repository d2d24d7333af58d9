"""Data models for the parsed Mission Control document."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class InProgressTask:
    task: str = ""
    started: str = ""
    status: str = ""
    notes: str = ""


@dataclass
class BacklogTask:
    task: str = ""
    priority: str = ""
    notes: str = ""


@dataclass
class CompletedTask:
    task: str = ""
    completed: str = ""
    outcome: str = ""


@dataclass
class BlockedTask:
    task: str = ""
    blocker: str = ""
    need: str = ""


@dataclass
class MissionControlData:
    """Every task table in the document, grouped by section.

    Rebuilt from the markdown on each parse; rows keep document order.
    """

    last_updated: str
    in_progress: list[InProgressTask] = field(default_factory=list)
    backlog: list[BacklogTask] = field(default_factory=list)
    completed: list[CompletedTask] = field(default_factory=list)
    blocked: list[BlockedTask] = field(default_factory=list)
