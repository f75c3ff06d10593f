# ============================================================================
# Job Posting & Referral Models
# ============================================================================
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, Enum, Uuid
from sqlalchemy import CheckConstraint
import uuid
import enum

from app.core.database import Base
from app.core.timeutils import utc_now


class JobType(str, enum.Enum):
    FULLTIME = "fulltime"
    PARTTIME = "parttime"
    INTERNSHIP = "internship"
    OTHERS = "others"


class WorkType(str, enum.Enum):
    ONSITE = "onsite"
    REMOTE = "remote"
    HYBRID = "hybrid"


class JobPosting(Base):
    __tablename__ = "job_postings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    job_name = Column(String(100), nullable=False)
    company = Column(String(200), nullable=False, index=True)
    role = Column(String(200), nullable=False)
    type = Column(Enum(JobType), nullable=False)
    work_type = Column(Enum(WorkType), nullable=False)
    posted_by = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    posted_on = Column(DateTime, default=utc_now, nullable=False)
    last_apply_date = Column(DateTime, nullable=False, index=True)

    __table_args__ = (
        CheckConstraint("last_apply_date > posted_on", name="ck_job_apply_after_posted"),
    )

    def __repr__(self):
        return f"<JobPosting {self.role} @ {self.company}>"


class Referral(Base):
    __tablename__ = "referrals"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    is_active = Column(Boolean, default=True, nullable=False)
    number_of_referrals = Column(Integer, default=0, nullable=False)

    # Job details
    job_title = Column(String(200), nullable=False, default="")
    company = Column(String(200), nullable=False, index=True)
    role = Column(String(200), nullable=False)

    posted_by = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    posted_on = Column(DateTime, default=utc_now, nullable=False)
    last_apply_date = Column(DateTime, nullable=False)

    __table_args__ = (
        CheckConstraint("number_of_referrals >= 0", name="ck_referrals_non_negative"),
    )

    def __repr__(self):
        return f"<Referral {self.role} @ {self.company}>"
