# ============================================================================
# User & Login Models
# ============================================================================
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, Enum, Uuid
from sqlalchemy.orm import relationship
import uuid
import enum

from app.core.database import Base
from app.core.timeutils import utc_now


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    ALUMNI = "alumni"
    STUDENT = "student"


class Department(str, enum.Enum):
    AIDS = "AIDS"
    CSE = "CSE"
    ECE = "ECE"


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    college_email = Column(String(255), unique=True, nullable=False)
    batch = Column(Integer, nullable=False, index=True)  # graduation year
    department = Column(Enum(Department), nullable=False, index=True)
    role = Column(Enum(UserRole), nullable=False, default=UserRole.STUDENT)
    verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False, index=True)

    alumni_details = relationship("AlumniDetails", back_populates="user", uselist=False, cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User {self.college_email} ({self.role.value})>"


class LoginEvent(Base):
    __tablename__ = "login_events"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    user_role = Column(Enum(UserRole), nullable=False)
    timestamp = Column(DateTime, default=utc_now, nullable=False, index=True)
