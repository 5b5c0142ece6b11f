"""
Dashboard schemas.
"""
from typing import List
from jobportal.schemas.base import BaseSchema
from jobportal.schemas.job import JobListItem
from jobportal.schemas.profile import ProfileResponse


class DashboardStats(BaseSchema):
    applications: int
    saved_jobs: int
    unread_notifications: int


class DashboardResponse(BaseSchema):
    profile: ProfileResponse
    stats: DashboardStats
    recent_jobs: List[JobListItem]
