"""
Seed Jobs Script
Populates the jobs table with demo listings for local development

Usage:
    python scripts/seed_jobs.py
"""
import asyncio
from datetime import date, timedelta

from loguru import logger

from workpass.core.database import get_db_session, init_db, close_db
from workpass.core.logging_config import configure_logging
from workpass.domain.entities import Job
from workpass.domain.enums import JobType
from workpass.infrastructure.persistence.repositories.job import JobRepository


def demo_jobs():
    start = date.today() + timedelta(days=14)
    return [
        Job(
            title="Electrician - Commercial Fit-out",
            company="Harbour Build Co",
            location="Sydney, NSW",
            description="Fit-out of a 12 storey office tower. Own tools required.",
            requirements={"credentials": ["white_card", "license"], "minYears": 3},
            pay_range="$55-$65/hr",
            start_date=start,
            end_date=start + timedelta(days=180),
            job_type=JobType.CONTRACT,
        ),
        Job(
            title="Carpenter - Residential Framing",
            company="Coastline Homes",
            location="Gold Coast, QLD",
            description="Framing crew for a 40 lot estate.",
            requirements={"credentials": ["white_card"], "minYears": 2},
            pay_range="$45-$52/hr",
            start_date=start,
            job_type=JobType.PERMANENT,
        ),
        Job(
            title="Site Labourer",
            company="Metro Civil",
            location="Melbourne, VIC",
            description="General labouring on a rail corridor upgrade.",
            requirements={"credentials": ["white_card", "first_aid"]},
            pay_range="$38/hr",
            start_date=start + timedelta(days=7),
            end_date=start + timedelta(days=60),
            job_type=JobType.CASUAL,
        ),
        Job(
            title="Plumber - Hydraulic Services",
            company="Westside Plumbing Group",
            location="Perth, WA",
            description="Hydraulic rough-in and fit-off for a hospital extension.",
            requirements={"credentials": ["white_card", "trade_certificate"], "minYears": 5},
            pay_range="$60-$70/hr",
            start_date=start,
            job_type=JobType.CONTRACT,
        ),
    ]


async def seed_jobs():
    """Insert the demo jobs"""
    await init_db()

    async with get_db_session() as session:
        repo = JobRepository(session)
        for job in demo_jobs():
            created = await repo.create(job)
            logger.info(f"Seeded job {created.id}: {created}")

    await close_db()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(seed_jobs())
