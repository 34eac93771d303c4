# user_api/entities/user.py
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID


class UserStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


@dataclass(frozen=True)
class User:
    user_id: UUID
    first_name: str
    last_name: str
    email: str
    phone: Optional[str]
    age: Optional[int]
    status: UserStatus
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class NewUser:
    """Values for an insert; the id and timestamps come from storage."""

    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    age: Optional[int] = None
    status: UserStatus = UserStatus.ACTIVE


@dataclass(frozen=True)
class UserChanges:
    """Partial update. ``None`` on any field means "keep the stored value"."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    age: Optional[int] = None
    status: Optional[UserStatus] = None
