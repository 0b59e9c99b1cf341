"""
Base schema classes with common configuration.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic_core import PydanticCustomError

__all__ = [
    "BaseSchema",
    "BaseCreateSchema",
    "require_text",
    "Password",
]

# Passwords are hashed exactly as submitted
Password = Annotated[str, StringConstraints(strip_whitespace=False, min_length=1)]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    All application-facing schemas inherit from this to ensure
    consistent behaviour.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
        str_strip_whitespace=True,
    )


class BaseCreateSchema(BaseSchema):
    """Base schema for request bodies; unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")


def require_text(value: Any) -> Optional[Any]:
    """
    Treat blank strings as missing so they fail like absent fields.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("missing", "Field required")
    return value
