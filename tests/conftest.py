# ============================================================================
# Test Configuration & Fixtures
# ============================================================================
import pytest
import uuid
from datetime import datetime
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from app.api.deps import get_dashboard_service
from app.config import get_settings
from app.core.database import Base
from app.main import app
from app.models import (
    User, LoginEvent, UserRole, Department, Event, EventType,
    JobPosting, Referral, JobType, WorkType, AlumniDetails,
    AlumniJobPosition, AlumniEducation, EmploymentType, JobLocationType, ContactUs
)
from app.services.admin.dashboard_service import DashboardService
from app.services.analytics.repository import AnalyticsRepository

# Fixed instant shared by the service tests
NOW = datetime(2024, 6, 15, 12, 30)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture(scope="function")
async def engine(tmp_path):
    """File-backed SQLite database per test; every table created"""
    test_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def repo(session_factory) -> AnalyticsRepository:
    return AnalyticsRepository(session_factory)


@pytest.fixture
def seed(session_factory):
    """Persist model instances in one transaction"""
    async def _seed(*objects):
        async with session_factory() as session:
            session.add_all(objects)
            await session.commit()
        return objects
    return _seed


@pytest.fixture(scope="function")
async def client(repo, settings) -> AsyncGenerator[AsyncClient, None]:
    """Test client whose analytics run against the per-test database"""
    app.dependency_overrides[get_dashboard_service] = lambda: DashboardService(repo, settings)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ============================================================================
# Model Builders
# ============================================================================
def make_user(
    created_at: datetime = NOW,
    role: UserRole = UserRole.STUDENT,
    batch: int = 2024,
    department: Department = Department.CSE,
    verified: bool = True,
    name: str = "Test User",
) -> User:
    return User(
        id=uuid.uuid4(),
        name=name,
        college_email=f"{uuid.uuid4().hex[:12]}@college.edu",
        batch=batch,
        department=department,
        role=role,
        verified=verified,
        created_at=created_at,
    )


def make_event(date_time: datetime, type: EventType = EventType.COLLEGE, name: str = "Meetup") -> Event:
    return Event(name=name, date_time=date_time, venue="Main Hall", type=type)


def make_job(
    posted_on: datetime,
    last_apply_date: datetime,
    company: str = "Acme",
    role: str = "Engineer",
    type: JobType = JobType.FULLTIME,
    work_type: WorkType = WorkType.ONSITE,
    posted_by=None,
) -> JobPosting:
    return JobPosting(
        job_name=f"{role} at {company}",
        company=company,
        role=role,
        type=type,
        work_type=work_type,
        posted_by=posted_by,
        posted_on=posted_on,
        last_apply_date=last_apply_date,
    )


def make_referral(
    posted_on: datetime,
    last_apply_date: datetime,
    company: str = "Acme",
    role: str = "Engineer",
    number_of_referrals: int = 1,
    is_active: bool = True,
    posted_by=None,
) -> Referral:
    return Referral(
        company=company,
        role=role,
        job_title=role,
        number_of_referrals=number_of_referrals,
        is_active=is_active,
        posted_by=posted_by,
        posted_on=posted_on,
        last_apply_date=last_apply_date,
    )


def make_contact(created_at: datetime, resolved: bool = False) -> ContactUs:
    return ContactUs(
        name="Visitor",
        email="visitor@example.com",
        subject="Hello",
        message="Question",
        resolved=resolved,
        created_at=created_at,
    )


def make_login(user: User, timestamp: datetime) -> LoginEvent:
    return LoginEvent(user_id=user.id, user_role=user.role, timestamp=timestamp)


def make_alumni(
    user: User,
    verified: bool = True,
    city: str = None,
    country: str = None,
    job_positions=(),
    education=(),
) -> AlumniDetails:
    details = AlumniDetails(user=user, verified=verified, city=city, country=country)
    for position, job in enumerate(job_positions):
        job.position = position
        details.job_positions.append(job)
    for position, entry in enumerate(education):
        entry.position = position
        details.education.append(entry)
    return details


def make_job_position(
    title: str,
    start: datetime,
    end: datetime = None,
    ongoing: bool = False,
    company: str = "Acme",
    location: str = "Chennai",
    type: EmploymentType = EmploymentType.FULL_TIME,
    job_type: JobLocationType = JobLocationType.ON_SITE,
) -> AlumniJobPosition:
    return AlumniJobPosition(
        title=title, type=type, company=company, location=location,
        job_type=job_type, start=start, end=end, ongoing=ongoing,
    )


def make_education(
    degree: str,
    start: datetime,
    end: datetime = None,
    ongoing: bool = False,
    school: str = "State University",
    field_of_study: str = "Computer Science",
    location: str = "Chennai",
) -> AlumniEducation:
    return AlumniEducation(
        school=school, degree=degree, field_of_study=field_of_study,
        location=location, start=start, end=end, ongoing=ongoing,
    )
