"""Database models"""
from src.crew_tool.models.base import Base
from src.crew_tool.models.company import Company
from src.crew_tool.models.account import Account
from src.crew_tool.models.profile import Profile, ProfileRole, CrewStatus
from src.crew_tool.models.vessel import Vessel
from src.crew_tool.models.crew_assignment import CrewAssignment
from src.crew_tool.models.audit_log import AuditLog

__all__ = [
    "Base", "Company", "Account", "Profile", "ProfileRole", "CrewStatus",
    "Vessel", "CrewAssignment", "AuditLog",
]
