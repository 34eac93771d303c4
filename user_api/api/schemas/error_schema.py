# user_api/api/schemas/error_schema.py
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    message: str
    details: dict[str, str] | None = None
