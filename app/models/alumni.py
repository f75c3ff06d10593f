# ============================================================================
# Alumni Details Models
# ============================================================================
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, Enum, Uuid
from sqlalchemy.orm import relationship
import uuid
import enum

from app.core.database import Base
from app.core.timeutils import utc_now


class EmploymentType(str, enum.Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    FREELANCER = "freelancer"
    INTERN = "intern"
    ENTREPRENEUR = "entrepreneur"


class JobLocationType(str, enum.Enum):
    ON_SITE = "on-site"
    REMOTE = "remote"
    HYBRID = "hybrid"


class AlumniDetails(Base):
    __tablename__ = "alumni_details"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    verified = Column(Boolean, default=False, nullable=False, index=True)
    city = Column(String(100))
    country = Column(String(100))
    created_at = Column(DateTime, default=utc_now, nullable=False)

    user = relationship("User", back_populates="alumni_details")
    job_positions = relationship(
        "AlumniJobPosition",
        back_populates="alumni",
        order_by="AlumniJobPosition.position",
        cascade="all, delete-orphan",
    )
    education = relationship(
        "AlumniEducation",
        back_populates="alumni",
        order_by="AlumniEducation.position",
        cascade="all, delete-orphan",
    )


class AlumniJobPosition(Base):
    __tablename__ = "alumni_job_positions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    alumni_id = Column(Uuid, ForeignKey("alumni_details.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)  # order within the profile
    title = Column(String(200), nullable=False)
    type = Column(Enum(EmploymentType), nullable=False)
    company = Column(String(200))
    location = Column(String(200))
    job_type = Column(Enum(JobLocationType), nullable=False)
    start = Column(DateTime, nullable=False)
    end = Column(DateTime, nullable=True)
    ongoing = Column(Boolean, default=False, nullable=False)

    alumni = relationship("AlumniDetails", back_populates="job_positions")


class AlumniEducation(Base):
    __tablename__ = "alumni_education"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    alumni_id = Column(Uuid, ForeignKey("alumni_details.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    school = Column(String(200), nullable=False)
    degree = Column(String(200), nullable=False)
    field_of_study = Column(String(200), nullable=False)
    location = Column(String(200))
    start = Column(DateTime, nullable=False)
    end = Column(DateTime, nullable=True)
    ongoing = Column(Boolean, default=False, nullable=False)

    alumni = relationship("AlumniDetails", back_populates="education")
