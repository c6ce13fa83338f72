"""Redis implementation of StudentStore.

Each record is a hash under `<prefix>:<id>` (`student:<id>` by default)
holding the fields name, course, age, address, email, phone and gender as
plain strings. All multi-field writes go through a single HSET so a record
is never left half-written by a failed create.
"""

from collections.abc import AsyncIterator, Mapping, Sequence
from contextlib import asynccontextmanager
from typing import Any

import redis.asyncio as redis

from roster.config.models.storage import RedisConfig
from roster.db.errors import NotFoundError, StorageUnavailable
from roster.db.redis import RedisHandle
from roster.observability.logging import get_logger
from roster.observability.metrics import STORE_OPERATIONS
from roster.students.models import StudentRecord
from roster.students.store import StudentStore
from roster.students.validation import (
    select_update_fields,
    validate_identifier,
    validate_student,
)

logger = get_logger(__name__)


class RedisStudentStore(StudentStore):
    """Redis implementation of StudentStore.

    Key structure:
    - {prefix}:{student_id} - hash of the seven student fields
    """

    def __init__(
        self,
        handle: RedisHandle,
        config: RedisConfig | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            handle: Connection handle owned by the caller
            config: Key layout settings (defaults to the handle's config)
        """
        self._handle = handle
        self._config = config or handle.config
        self._prefix = self._config.key_prefix

    def _key(self, student_id: str) -> str:
        """Get the hash key for a student."""
        return f"{self._prefix}:{student_id}"

    def _id_from_key(self, key: str) -> str:
        """Recover the identifier from a hash key.

        Everything after the first prefix separator is the identifier,
        so identifiers containing ':' survive the round trip.
        """
        return key[len(self._prefix) + 1 :]

    @asynccontextmanager
    async def _command(self, operation: str, **context: Any) -> AsyncIterator[redis.Redis]:
        """Yield the client, translating Redis failures into StorageUnavailable."""
        try:
            yield await self._handle.acquire()
        except redis.RedisError as e:
            STORE_OPERATIONS.labels(operation=operation, outcome="error").inc()
            logger.error(f"redis_{operation}_error", error=str(e), **context)
            raise StorageUnavailable(f"Failed to {operation.replace('_', ' ')}: {e}", cause=e) from e
        except StorageUnavailable:
            STORE_OPERATIONS.labels(operation=operation, outcome="error").inc()
            raise
        else:
            STORE_OPERATIONS.labels(operation=operation, outcome="ok").inc()

    async def create_or_replace_fields(
        self, student_id: str, fields: Mapping[str, Any]
    ) -> None:
        student_id, values = validate_student(student_id, fields)

        async with self._command("save_student", student_id=student_id) as client:
            await client.hset(self._key(student_id), mapping=values)

        logger.info("student_saved", student_id=student_id)

    async def create_many(
        self, records: Sequence[tuple[str, Mapping[str, Any]]]
    ) -> int:
        validated = [validate_student(student_id, fields) for student_id, fields in records]
        if not validated:
            return 0

        async with self._command("save_students", count=len(validated)) as client:
            async with client.pipeline(transaction=True) as pipe:
                for student_id, values in validated:
                    pipe.hset(self._key(student_id), mapping=values)
                await pipe.execute()

        logger.info("students_saved", count=len(validated))
        return len(validated)

    async def get(self, student_id: str) -> dict[str, str] | None:
        async with self._command("get_student", student_id=student_id) as client:
            fields = await client.hgetall(self._key(student_id))

        if not fields:
            logger.debug("student_not_found", student_id=student_id)
            return None
        return fields

    async def get_all(self, search: str | None = None) -> list[StudentRecord]:
        async with self._command("list_students", search=search) as client:
            # SCAN may repeat keys; collapse them before reading
            keys = sorted({
                key
                async for key in client.scan_iter(
                    match=f"{self._prefix}:*", count=self._config.scan_count
                )
            })
            if not keys:
                return []

            async with client.pipeline(transaction=False) as pipe:
                for key in keys:
                    pipe.hgetall(key)
                hashes = await pipe.execute()

        records = [
            StudentRecord(id=self._id_from_key(key), fields=fields)
            for key, fields in zip(keys, hashes)
            if fields
        ]
        matched = [record for record in records if record.matches(search)]

        logger.debug(
            "students_listed",
            total=len(records),
            matched=len(matched),
            search=search,
        )
        return matched

    async def update_fields(
        self, student_id: str, partial_fields: Mapping[str, Any]
    ) -> dict[str, str]:
        updates = select_update_fields(partial_fields)
        student_id = validate_identifier(student_id)

        if await self.get(student_id) is None:
            raise NotFoundError(f"Student {student_id} not found")

        async with self._command("update_student", student_id=student_id) as client:
            await client.hset(self._key(student_id), mapping=updates)

        logger.info("student_updated", student_id=student_id, fields=sorted(updates))
        return updates

    async def delete(self, student_id: str) -> bool:
        async with self._command("delete_student", student_id=student_id) as client:
            removed = await client.delete(self._key(student_id))

        logger.info("student_deleted", student_id=student_id, deleted=bool(removed))
        return bool(removed)

    async def ping(self) -> bool:
        return await self._handle.health_check()
