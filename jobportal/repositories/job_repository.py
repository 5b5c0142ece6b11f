"""
Job repository - the query builder for job listings.
"""
from typing import List, Optional, Sequence

from sqlalchemy import select, and_, or_
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.models.job import Job
from jobportal.repositories.base import BaseRepository, like_pattern


class JobRepository(BaseRepository[Job]):
    def __init__(self):
        super().__init__(Job)

    async def find_with_filters(
        self,
        db: AsyncSession,
        *,
        search: Optional[str] = None,
        location: Optional[str] = None,
        category: Optional[str] = None,
        job_type: Optional[str] = None,
        experience_level: Optional[str] = None,
        company: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Job]:
        """
        Find jobs matching every active filter, newest first.

        - search: case-insensitive substring of title, description OR company
        - location: case-insensitive substring of location
        - category / job_type / experience_level / company: exact match

        Empty or missing values do not filter.
        """
        query = select(Job)

        filters = []

        if search:
            pattern = like_pattern(search)
            filters.append(or_(
                Job.title.ilike(pattern, escape="\\"),
                Job.description.ilike(pattern, escape="\\"),
                Job.company.ilike(pattern, escape="\\"),
            ))

        if location:
            filters.append(Job.location.ilike(like_pattern(location), escape="\\"))

        if category:
            filters.append(Job.category == category)

        if job_type:
            filters.append(Job.job_type == job_type)

        if experience_level:
            filters.append(Job.experience_level == experience_level)

        if company:
            filters.append(Job.company == company)

        if filters:
            query = query.where(and_(*filters))

        query = query.order_by(Job.created_at.desc())

        if limit is not None:
            query = query.limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def latest(
        self,
        db: AsyncSession,
        limit: int,
    ) -> List[Job]:
        """The most recently posted jobs."""
        return await self.find_with_filters(db, limit=limit)

    async def company_locations(
        self,
        db: AsyncSession,
    ) -> Sequence[Row]:
        """(company, location) for every job, ordered by company name."""
        result = await db.execute(
            select(Job.company, Job.location).order_by(Job.company)
        )
        return result.all()
