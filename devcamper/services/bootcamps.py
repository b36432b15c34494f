"""
Bootcamp use cases: listing with query parameters and CRUD.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from devcamper.api.pagination import Pagination
from devcamper.api.query import QueryBuilder
from devcamper.config.base import BaseAppSettings
from devcamper.db.repository import BaseRepository
from devcamper.errors.exceptions import BadRequestError
from devcamper.logging import Logger, ensure_logger
from devcamper.models import Bootcamp
from devcamper.schemas import BootcampCreate, BootcampUpdate


class BootcampRepository(BaseRepository[Bootcamp]):
    resource_name = "Bootcamp"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Bootcamp, session)


class BootcampService:
    """
    Bootcamp operations on top of the repository.

    Args:
        repository: Bootcamp repository bound to the request's session
        settings: Application settings
        logger: Optional logger
    """

    def __init__(
        self,
        repository: BootcampRepository,
        settings: BaseAppSettings,
        logger: Optional[Logger] = None,
    ):
        self.repository = repository
        self.settings = settings
        self.logger = ensure_logger(logger, __name__, settings)

    def _check_page_window(self, builder: QueryBuilder) -> None:
        if not self.settings.PAGINATION_STRICT:
            return
        if builder.page < 1:
            raise BadRequestError("page must be a positive integer")
        if builder.limit < 1:
            raise BadRequestError("limit must be a positive integer")

    async def list(
        self, raw_params: Mapping[str, Any]
    ) -> Tuple[List[Dict[str, Any]], Pagination]:
        """
        List bootcamps for the given query parameters.

        The pagination total is the size of the whole collection unless
        ``PAGINATION_TOTAL_FILTERED`` is enabled.

        Returns:
            Tuple of (documents on this page, pagination metadata)
        """
        builder = QueryBuilder(raw_params)
        self._check_page_window(builder)
        query = builder.list_query()

        if self.settings.PAGINATION_TOTAL_FILTERED:
            total = await self.repository.count(query.filter)
        else:
            total = await self.repository.count()

        items = await self.repository.find(query)
        fields = self.repository.projection_keys(query.projection)
        documents = [item.to_document(fields) for item in items]

        self.logger.debug(
            f"Listed {len(documents)} bootcamps (filter={query.filter}, total={total})"
        )
        return documents, builder.build_pagination(total)

    async def get(self, bootcamp_id: str) -> Dict[str, Any]:
        bootcamp = await self.repository.get_by_id(bootcamp_id)
        return bootcamp.to_document()

    async def create(self, payload: BootcampCreate) -> Dict[str, Any]:
        bootcamp = await self.repository.create(payload.model_dump())
        self.logger.info(f"Created bootcamp {bootcamp.id} ({bootcamp.name})")
        return bootcamp.to_document()

    async def update(self, bootcamp_id: str, payload: BootcampUpdate) -> Dict[str, Any]:
        bootcamp = await self.repository.update(
            bootcamp_id, payload.model_dump(exclude_unset=True)
        )
        return bootcamp.to_document()

    async def delete(self, bootcamp_id: str) -> None:
        await self.repository.delete(bootcamp_id)
        self.logger.info(f"Deleted bootcamp {bootcamp_id}")

    async def set_photo(self, bootcamp_id: str, photo: str) -> None:
        await self.repository.update(bootcamp_id, {"photo": photo})
