"""
Company directory schemas.
"""
from typing import List
from jobportal.schemas.base import BaseSchema


class CompanyResponse(BaseSchema):
    name: str
    job_count: int
    locations: List[str]
    location_summary: str
