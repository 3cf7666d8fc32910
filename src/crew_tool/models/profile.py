"""Profile model - crew and shore staff records within a company"""
import enum
from datetime import datetime
from typing import Optional
from sqlalchemy import String, Integer, DateTime, Enum, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.crew_tool.models.base import Base


class ProfileRole(str, enum.Enum):
    CREW = "crew"
    MASTER = "master"
    DPA = "dpa"
    SHORE_MANAGEMENT = "shore_management"
    ADMIN = "admin"


class CrewStatus(str, enum.Enum):
    ACTIVE = "Active"
    PENDING = "Pending"
    ON_LEAVE = "On Leave"
    INVITED = "Invited"
    INACTIVE = "Inactive"


class Profile(Base):
    __tablename__ = "profiles"
    
    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("accounts.id"), unique=True, nullable=False, index=True)
    company_id: Mapped[int] = mapped_column(Integer, ForeignKey("companies.id"), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    nationality: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    rank: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    role: Mapped[ProfileRole] = mapped_column(Enum(ProfileRole), nullable=False, default=ProfileRole.CREW)
    status: Mapped[CrewStatus] = mapped_column(Enum(CrewStatus), nullable=False, default=CrewStatus.PENDING)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    
    account = relationship("Account", backref="profile")
