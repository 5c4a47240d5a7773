"""Pydantic DTOs for the dashboard overview."""

from datetime import datetime

from app.application.schemas.common import ApiModel


class CountBucketSchema(ApiModel):
    name: str
    count: int


class RecentLinkSchema(ApiModel):
    id: str
    title: str
    url: str
    category: str
    project_name: str
    codebase_name: str | None
    updated_at: datetime


class DashboardStatsResponse(ApiModel):
    total_clients: int
    total_projects: int
    total_codebases: int
    total_links: int
    projects_by_status: list[CountBucketSchema]
    codebases_by_type: list[CountBucketSchema]
    links_by_category: list[CountBucketSchema]
    recent_links: list[RecentLinkSchema]
