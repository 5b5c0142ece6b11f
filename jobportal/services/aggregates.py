"""
In-memory filtering and aggregation over already-fetched job rows.

These run on lists the repositories have returned: they never touch the
database, and they accept any object exposing the job attributes they read
(ORM rows, result Rows, schema objects).
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional, Sequence


def extract_categories(jobs: Iterable[Any]) -> List[str]:
    """Distinct categories in first-seen order. Blank categories are skipped."""
    seen = {}
    for job in jobs:
        category = getattr(job, "category", None)
        if category and category not in seen:
            seen[category] = True
    return list(seen)


def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle in (haystack or "").casefold()


def job_matches(job: Any, term: str) -> bool:
    """True when term is a case-insensitive substring of title, company or description."""
    needle = term.casefold()
    return (
        _contains(job.title, needle)
        or _contains(job.company, needle)
        or _contains(job.description, needle)
    )


def filter_jobs(jobs: Sequence[Any], term: Optional[str]) -> List[Any]:
    """
    Re-filter a fetched page by free text without querying again.

    An empty term keeps every job, in the original order.
    """
    if not term:
        return list(jobs)
    return [job for job in jobs if job_matches(job, term)]


@dataclass
class CompanyAggregate:
    """One entry in the company directory."""

    name: str
    job_count: int = 0
    locations: List[str] = field(default_factory=list)

    @property
    def location_summary(self) -> str:
        return summarize_locations(self.locations)


def group_by_company(jobs: Iterable[Any]) -> List[CompanyAggregate]:
    """
    Group jobs by exact company name.

    Each aggregate counts its jobs and keeps the distinct locations in the
    order they were first seen. Companies appear in first-seen order.
    """
    companies = {}
    for job in jobs:
        aggregate = companies.get(job.company)
        if aggregate is None:
            aggregate = companies[job.company] = CompanyAggregate(name=job.company)
        aggregate.job_count += 1
        if job.location and job.location not in aggregate.locations:
            aggregate.locations.append(job.location)
    return list(companies.values())


def filter_companies(
    companies: Sequence[CompanyAggregate],
    term: Optional[str],
) -> List[CompanyAggregate]:
    """Keep companies whose name, or any of whose locations, contains term."""
    if not term:
        return list(companies)
    needle = term.casefold()
    return [
        company
        for company in companies
        if needle in company.name.casefold()
        or any(needle in location.casefold() for location in company.locations)
    ]


def summarize_locations(locations: Sequence[str]) -> str:
    """'Nairobi', or 'Nairobi +2 more' when there are several."""
    if not locations:
        return ""
    if len(locations) == 1:
        return locations[0]
    return f"{locations[0]} +{len(locations) - 1} more"


def time_ago(created_at: datetime, now: Optional[datetime] = None) -> str:
    """
    Render the age of a timestamp as '<h>h ago' below a day, '<d>d ago' after.

    Hours and days are floored. Naive datetimes are taken to be UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    hours = int((now - created_at).total_seconds() // 3600)
    if hours < 24:
        return f"{hours}h ago"
    return f"{hours // 24}d ago"
