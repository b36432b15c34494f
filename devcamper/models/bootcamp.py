"""
Bootcamp persistence model.
"""

import re
from typing import Any, Dict, Iterable, Optional

from sqlalchemy import JSON, Boolean, Column, Float, String, Text
from sqlalchemy.orm import validates

from devcamper.db.base import BaseModel, to_camel_case

DEFAULT_PHOTO = "no-photo.jpg"


def slugify(value: str) -> str:
    """Lowercase, hyphen-separated slug of a name."""
    value = re.sub(r"[^\w\s-]", "", value.lower())
    return re.sub(r"[-\s_]+", "-", value).strip("-")


class Bootcamp(BaseModel):
    """
    A bootcamp document.

    Attributes map to camelCase document fields, e.g. ``average_cost`` is
    exposed as ``averageCost``.
    """

    __tablename__ = "bootcamps"

    name = Column(String(50), nullable=False, unique=True)
    slug = Column(String(60), nullable=False, index=True)
    description = Column(Text, nullable=False)
    website = Column(String(255))
    phone = Column(String(20))
    email = Column(String(255))
    address = Column(String(255), nullable=False)
    careers = Column(JSON, nullable=False, default=list)
    average_rating = Column(Float)
    average_cost = Column(Float)
    photo = Column(String(255), nullable=False, default=DEFAULT_PHOTO)
    housing = Column(Boolean, nullable=False, default=False)
    job_assistance = Column(Boolean, nullable=False, default=False)
    job_guarantee = Column(Boolean, nullable=False, default=False)
    accept_gi = Column(Boolean, nullable=False, default=False)

    @validates("name")
    def _update_slug(self, key, value):
        if value:
            self.slug = slugify(value)
        return value

    def to_document(self, fields: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        """
        Serialize to a camelCase document.

        Args:
            fields: Attribute names to include; ``id`` is always included.
                    None includes every column.

        Returns:
            Document dictionary
        """
        columns = [column.key for column in self.__table__.columns]
        if fields is not None:
            wanted = set(fields)
            columns = [key for key in columns if key in wanted]
        document = {"id": self.id}
        for key in columns:
            if key != "id":
                document[to_camel_case(key)] = getattr(self, key)
        return document
