"""
Company service - the company directory.

Companies are not stored on their own: the directory is derived from the
company and location of every posted job.
"""
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobportal.core.logging import get_logger
from jobportal.repositories.job_repository import JobRepository
from jobportal.schemas.company import CompanyResponse
from jobportal.services.aggregates import filter_companies, group_by_company

logger = get_logger(__name__)


class CompanyService:
    """Builds the company directory from job rows."""

    def __init__(self):
        self.job_repo = JobRepository()

    async def list_companies(
        self,
        db: AsyncSession,
        *,
        search: Optional[str] = None,
    ) -> List[CompanyResponse]:
        """
        Every company with its open position count and locations.

        ``search`` keeps companies whose name or any location contains it.
        """
        try:
            rows = await self.job_repo.company_locations(db)
        except SQLAlchemyError as e:
            logger.error("company_fetch_failed", error=str(e))
            return []

        companies = filter_companies(group_by_company(rows), search)
        return [
            CompanyResponse(
                name=company.name,
                job_count=company.job_count,
                locations=company.locations,
                location_summary=company.location_summary,
            )
            for company in companies
        ]
