"""Generic data access over a Tortoise model with an integer `id` primary key.

The repository is the only place that talks to the store for plain CRUD. It
maps store failures to the service error kinds so no raw Tortoise exception
leaves a write path:

- a missing row on replace/delete -> NotFoundError
- a dependent row blocking a delete -> ConstraintViolationError
- a foreign key rejected by the store -> ConstraintViolationError

Relations between tables are declared per repository instead of walked as
object graphs: `restricted_by` lists (model, fk_field) pairs that must be empty
before a row can go, `cascades_to` lists (model, fk_field) pairs removed
together with the row in the same transaction.
"""

import logging
from typing import Any, Generic, Optional, Sequence, TypeVar

from tortoise.exceptions import IntegrityError, OperationalError
from tortoise.models import Model
from tortoise.transactions import in_transaction

from .exceptions import ConstraintViolationError, NotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Model)

Dependent = tuple[type[Model], str]


class Repository(Generic[ModelT]):
    def __init__(
        self,
        model: type[ModelT],
        label: Optional[str] = None,
        restricted_by: Sequence[Dependent] = (),
        cascades_to: Sequence[Dependent] = (),
    ):
        self.model = model
        self.label = label or model.__name__
        self.restricted_by = tuple(restricted_by)
        self.cascades_to = tuple(cascades_to)

    def _not_found(self, entity_id: int) -> NotFoundError:
        return NotFoundError(f"{self.label} {entity_id} not found.")

    async def list(self) -> list[ModelT]:
        return await self.model.all().order_by("id")

    async def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        return await self.model.get_or_none(id=entity_id)

    async def get(self, entity_id: int) -> ModelT:
        entity = await self.get_by_id(entity_id)
        if entity is None:
            raise self._not_found(entity_id)
        return entity

    async def exists(self, entity_id: int) -> bool:
        return await self.model.filter(id=entity_id).exists()

    async def insert(self, **fields: Any) -> ModelT:
        try:
            async with in_transaction() as conn:
                entity = await self.model.create(using_db=conn, **fields)
        except IntegrityError as e:
            logger.warning(f"Insert into {self.label} rejected by the store: {e}")
            raise ConstraintViolationError(f"{self.label} violates a store constraint.")
        except OperationalError as e:
            logger.error(f"Error creating {self.label}: {e}", exc_info=True)
            raise
        logger.info(f"Created {self.label} {entity.id}")
        return entity

    async def replace(self, entity_id: int, **fields: Any) -> None:
        """Overwrites every given field of an existing row in one UPDATE."""
        try:
            async with in_transaction() as conn:
                updated = await self.model.filter(id=entity_id).using_db(conn).update(**fields)
        except IntegrityError as e:
            logger.warning(f"Update of {self.label} {entity_id} rejected by the store: {e}")
            raise ConstraintViolationError(f"{self.label} {entity_id} violates a store constraint.")
        except OperationalError as e:
            logger.error(f"Error updating {self.label} {entity_id}: {e}", exc_info=True)
            raise
        if not updated:
            # Either it never existed or a concurrent delete won the race
            raise self._not_found(entity_id)
        logger.info(f"Replaced {self.label} {entity_id}")

    async def delete(self, entity_id: int) -> None:
        try:
            async with in_transaction() as conn:
                if not await self.model.filter(id=entity_id).using_db(conn).exists():
                    raise self._not_found(entity_id)

                for dependent, fk_field in self.restricted_by:
                    if await dependent.filter(**{fk_field: entity_id}).using_db(conn).exists():
                        raise ConstraintViolationError(
                            f"{self.label} {entity_id} is still referenced by "
                            f"{dependent.__name__} rows and cannot be deleted."
                        )

                for dependent, fk_field in self.cascades_to:
                    removed = await dependent.filter(**{fk_field: entity_id}).using_db(conn).delete()
                    if removed:
                        logger.debug(f"Cascaded delete of {removed} {dependent.__name__} rows")

                deleted = await self.model.filter(id=entity_id).using_db(conn).delete()
                if not deleted:
                    raise self._not_found(entity_id)
        except IntegrityError as e:
            logger.warning(f"Delete of {self.label} {entity_id} rejected by the store: {e}")
            raise ConstraintViolationError(
                f"{self.label} {entity_id} is still referenced and cannot be deleted."
            )
        except OperationalError as e:
            logger.error(f"Error deleting {self.label} {entity_id}: {e}", exc_info=True)
            raise
        logger.info(f"Deleted {self.label} {entity_id}")
