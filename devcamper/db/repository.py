import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import asc, desc, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import load_only

from devcamper.api.filtering import FilterPredicate
from devcamper.api.projection import ProjectionSpec
from devcamper.api.query import ListQuery
from devcamper.api.sorting import SortDirection, SortSpec
from devcamper.db.base import to_snake_case
from devcamper.db.filters import build_array_condition, build_condition, is_array_column
from devcamper.errors.exceptions import BadRequestError, DBError, NotFoundError

ModelType = TypeVar("ModelType")

# Document stores conventionally name the primary key ``_id``
FIELD_ALIASES = {"_id": "id"}


class BaseRepository(Generic[ModelType]):
    """
    Generic repository providing CRUD and list queries for SQLAlchemy models.

    Field names from requests may be given in camelCase or snake_case; unknown
    fields are ignored for filtering, sorting and projection.
    """

    resource_name: Optional[str] = None

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def name(self) -> str:
        return self.resource_name or self.model.__name__

    def resolve_key(self, field: str) -> Optional[str]:
        """Map a request field name to a column attribute name."""
        columns = self.model.__table__.columns
        field = FIELD_ALIASES.get(field, field)
        for key in (field, to_snake_case(field)):
            if key in columns:
                return key
        return None

    def resolve_column(self, field: str) -> Optional[Any]:
        key = self.resolve_key(field)
        return getattr(self.model, key) if key else None

    def projection_keys(self, projection: ProjectionSpec) -> Optional[List[str]]:
        """
        Attribute names selected by a projection, or None for all fields.

        A projection naming only unknown fields selects nothing but the id.
        """
        if not projection:
            return None
        keys = [self.resolve_key(field) for field in projection]
        return sorted({key for key in keys if key})

    def where_clauses(self, predicate: Optional[FilterPredicate]) -> List[Any]:
        clauses = []
        for field, value in (predicate or {}).items():
            column = self.resolve_column(field)
            if column is None:
                self.logger.debug(f"Ignoring filter on unknown field {field!r}")
                continue
            if is_array_column(column):
                clauses.append(build_array_condition(column, value))
            else:
                clauses.append(build_condition(column, value))
        return clauses

    def order_by_clauses(self, sort: SortSpec) -> List[Any]:
        clauses = []
        for sort_field in sort:
            column = self.resolve_column(sort_field.field)
            if column is None:
                self.logger.debug(f"Ignoring sort on unknown field {sort_field.field!r}")
                continue
            if sort_field.direction == SortDirection.DESC:
                clauses.append(desc(column))
            else:
                clauses.append(asc(column))
        return clauses

    async def get_by_id(self, id: Any) -> ModelType:
        """Retrieve a single record by primary key."""
        try:
            instance: Optional[ModelType] = await self.session.get(self.model, id)
            if instance is None:
                raise NotFoundError(resource_type=self.name, resource_id=id)
            self.logger.debug(f"Fetched {self.name} id={id}")
            return instance
        except NotFoundError:
            raise
        except Exception as e:
            self.logger.error(f"Error in get_by_id: {e}")
            raise DBError(message=str(e), details={"error": str(e)})

    async def find(self, query: ListQuery) -> List[ModelType]:
        """
        Run a list query: filter, project, sort, then skip and limit.

        A negative skip is treated as zero and a negative limit by its
        absolute value; a zero limit means no limit.
        """
        try:
            stmt = select(self.model).where(*self.where_clauses(query.filter))

            keys = self.projection_keys(query.projection)
            if keys:
                stmt = stmt.options(
                    load_only(*(getattr(self.model, key) for key in keys))
                )

            order_by = self.order_by_clauses(query.sort)
            if order_by:
                stmt = stmt.order_by(*order_by)

            if query.skip > 0:
                stmt = stmt.offset(query.skip)
            if query.limit:
                stmt = stmt.limit(abs(query.limit))

            result = await self.session.execute(stmt)
            items = list(result.scalars().all())
            self.logger.debug(f"Listed {len(items)} items of {self.name}")
            return items
        except Exception as e:
            self.logger.error(f"Error in find: {e}")
            raise DBError(message=str(e), details={"error": str(e)})

    async def count(self, predicate: Optional[FilterPredicate] = None) -> int:
        """Count records, optionally restricted by a filter predicate."""
        try:
            stmt = (
                select(func.count())
                .select_from(self.model)
                .where(*self.where_clauses(predicate))
            )
            total = await self.session.scalar(stmt)
            return int(total or 0)
        except Exception as e:
            self.logger.error(f"Error in count: {e}")
            raise DBError(message=str(e), details={"error": str(e)})

    async def create(self, data: Dict[str, Any]) -> ModelType:
        """Create a new record from provided data dict."""
        obj = self.model(**data)  # type: ignore
        self.session.add(obj)
        await self._flush("create")
        self.logger.debug(f"Created {self.name} id={getattr(obj, 'id', None)}")
        return obj

    async def update(self, id: Any, data: Dict[str, Any]) -> ModelType:
        """Update an existing record by id with provided data dict."""
        instance = await self.get_by_id(id)
        for key, value in data.items():
            setattr(instance, key, value)
        await self._flush("update")
        self.logger.debug(f"Updated {self.name} id={id}")
        return instance

    async def delete(self, id: Any) -> None:
        """Delete a record by primary key id."""
        instance = await self.get_by_id(id)
        await self.session.delete(instance)
        await self._flush("delete")
        self.logger.debug(f"Deleted {self.name} id={id}")

    async def _flush(self, operation: str) -> None:
        try:
            await self.session.flush()
        except IntegrityError as e:
            self.logger.warning(f"Integrity error in {operation}: {e.orig}")
            raise BadRequestError(
                message="Duplicate field value entered", details={"error": str(e.orig)}
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error in {operation}: {e}")
            raise DBError(message=str(e), details={"error": str(e)})
