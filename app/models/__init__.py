from app.models.user import User, LoginEvent, UserRole, Department
from app.models.event import Event, EventType
from app.models.job import JobPosting, Referral, JobType, WorkType
from app.models.alumni import AlumniDetails, AlumniJobPosition, AlumniEducation
from app.models.alumni import EmploymentType, JobLocationType
from app.models.contact import ContactUs

__all__ = [
    "User", "LoginEvent", "UserRole", "Department", "Event", "EventType",
    "JobPosting", "Referral", "JobType", "WorkType", "AlumniDetails",
    "AlumniJobPosition", "AlumniEducation", "EmploymentType", "JobLocationType",
    "ContactUs"
]
