# user_api/api/schemas/user_schema.py
from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    StrictInt,
    StringConstraints,
    WrapValidator,
    field_serializer,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError
from pydantic_core.core_schema import ValidatorFunctionWrapHandler

from user_api.api.schemas._datetime_serializer import serialize_dt
from user_api.entities.user import UserStatus

# E.164: "+", an optional non-zero lead digit, then 7-14 digits
E164_PATTERN = r"^\+[1-9]?[0-9]{7,14}$"


def _reject_blank(value):
    if value is None or value == "":
        raise PydanticCustomError("missing", "Field required")
    return value


def _bare_address(value, handler: ValidatorFunctionWrapHandler):
    normalized = handler(value)
    # "Name <addr>" parses as addr; only the address itself is accepted
    if isinstance(value, str) and normalized.lower() != value.lower():
        raise PydanticCustomError("value_error", "value is not a valid email address")
    return normalized


Name = Annotated[str, StringConstraints(min_length=2, max_length=50)]
Email = Annotated[EmailStr, WrapValidator(_bare_address)]

RequiredName = Annotated[Name, BeforeValidator(_reject_blank)]
RequiredEmail = Annotated[Email, BeforeValidator(_reject_blank)]

# Upper bound of the INTEGER age column
MAX_AGE = 2_147_483_647


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateUserRequest(WireModel):
    first_name: RequiredName
    last_name: RequiredName
    email: RequiredEmail
    phone: str | None = Field(default=None, pattern=E164_PATTERN)
    age: StrictInt | None = Field(default=None, gt=0, le=MAX_AGE)
    status: UserStatus | None = None


class UpdateUserRequest(WireModel):
    first_name: Name | None = None
    last_name: Name | None = None
    email: Email | None = None
    phone: str | None = Field(default=None, pattern=E164_PATTERN)
    age: StrictInt | None = Field(default=None, gt=0, le=MAX_AGE)
    status: UserStatus | None = None


class ListUsersQuery(WireModel):
    status: UserStatus | None = None


class UserResponse(WireModel):
    user_id: UUID
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    age: int | None = None
    status: UserStatus
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamps(self, value: datetime) -> str | None:
        return serialize_dt(value)


class ListUsersResponse(BaseModel):
    users: list[UserResponse]
    total: int


class MessageResponse(BaseModel):
    message: str
