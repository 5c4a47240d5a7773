"""Domain read models for the dashboard overview."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class CountBucket:
    name: str
    count: int


@dataclass(frozen=True)
class RecentLink:
    id: str
    title: str
    url: str
    category: str
    project_name: str
    codebase_name: str | None
    updated_at: datetime


@dataclass
class DashboardStats:
    """Ownership-scoped totals and breakdowns for one user."""

    total_clients: int = 0
    total_projects: int = 0
    total_codebases: int = 0
    total_links: int = 0
    projects_by_status: list[CountBucket] = field(default_factory=list)
    codebases_by_type: list[CountBucket] = field(default_factory=list)
    links_by_category: list[CountBucket] = field(default_factory=list)
    recent_links: list[RecentLink] = field(default_factory=list)
