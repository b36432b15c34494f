"""
Bootcamp request payload schemas.

Field names are accepted in camelCase (``averageCost``) as well as
snake_case (``average_cost``).
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

CAREERS = (
    "Web Development",
    "Mobile Development",
    "UI/UX",
    "Data Science",
    "Business",
    "Other",
)

URL_PATTERN = r"^https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b([-a-zA-Z0-9()@:%_+.~#?&/=]*)$"


def _validate_careers(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is None:
        return value
    if not value:
        raise ValueError("Please add at least one career")
    invalid = [career for career in value if career not in CAREERS]
    if invalid:
        raise ValueError(f"Invalid careers: {', '.join(invalid)}")
    return value


class BootcampBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


class BootcampCreate(BootcampBase):
    """
    Payload for creating a bootcamp.

    Attributes:
        name: Unique bootcamp name
        description: Free-text description
        address: Postal address
        careers: Career tracks offered, drawn from ``CAREERS``
    """

    name: str = Field(..., min_length=1, max_length=50)
    description: str = Field(..., min_length=1, max_length=500)
    website: Optional[str] = Field(default=None, pattern=URL_PATTERN)
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[EmailStr] = None
    address: str = Field(..., min_length=1)
    careers: List[str] = Field(...)
    average_rating: Optional[float] = Field(default=None, ge=1, le=10)
    average_cost: Optional[float] = Field(default=None, ge=0)
    housing: bool = False
    job_assistance: bool = False
    job_guarantee: bool = False
    accept_gi: bool = False

    @field_validator("careers")
    def validate_careers(cls, value):
        return _validate_careers(value)


class BootcampUpdate(BootcampBase):
    """Partial update payload; only the fields sent are applied."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    description: Optional[str] = Field(default=None, min_length=1, max_length=500)
    website: Optional[str] = Field(default=None, pattern=URL_PATTERN)
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[EmailStr] = None
    address: Optional[str] = Field(default=None, min_length=1)
    careers: Optional[List[str]] = None
    average_rating: Optional[float] = Field(default=None, ge=1, le=10)
    average_cost: Optional[float] = Field(default=None, ge=0)
    housing: Optional[bool] = None
    job_assistance: Optional[bool] = None
    job_guarantee: Optional[bool] = None
    accept_gi: Optional[bool] = None

    @field_validator("careers")
    def validate_careers(cls, value):
        return _validate_careers(value)

    @field_validator("name", "description", "address", "careers", mode="before")
    def reject_null(cls, value):
        """Required fields may be omitted but not cleared."""
        if value is None:
            raise ValueError("Field cannot be null")
        return value
