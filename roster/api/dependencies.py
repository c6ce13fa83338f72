"""Dependency injection for API routes.

The student store is opened by the application lifespan and kept on
app.state; routes reach it through get_student_store, which tests
override with an in-memory store.
"""

from typing import Annotated

from fastapi import Depends, Request

from roster.config import get_settings
from roster.config.settings import Settings
from roster.db.errors import StorageUnavailable
from roster.db.redis import RedisHandle
from roster.importer.pipeline import BulkImporter
from roster.observability.logging import get_logger
from roster.students.store import StudentStore
from roster.students.stores.inmemory import InMemoryStudentStore
from roster.students.stores.redis import RedisStudentStore

logger = get_logger(__name__)


async def open_student_store(settings: Settings) -> tuple[StudentStore, RedisHandle | None]:
    """Create the configured store and, for Redis, its connection handle.

    A Redis server that is down at startup is logged, not fatal; the
    handle reconnects on the first request that needs it.

    Returns:
        The store and the handle the caller must close (None for in-memory)
    """
    if settings.storage.backend == "inmemory":
        logger.info("student_store_initialized", store_type="inmemory")
        return InMemoryStudentStore(), None

    handle = RedisHandle(settings.storage.redis)
    try:
        await handle.connect()
    except StorageUnavailable as e:
        logger.error("student_store_redis_unavailable", error=str(e))
    logger.info("student_store_initialized", store_type="redis")
    return RedisStudentStore(handle), handle


def get_student_store(request: Request) -> StudentStore:
    """Get the StudentStore opened by the application lifespan."""
    return request.app.state.student_store


def get_bulk_importer(
    store: Annotated[StudentStore, Depends(get_student_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> BulkImporter:
    """Get a BulkImporter bound to the store and the configured commit mode."""
    return BulkImporter(store, atomic=settings.imports.atomic)


SettingsDep = Annotated[Settings, Depends(get_settings)]
StudentStoreDep = Annotated[StudentStore, Depends(get_student_store)]
BulkImporterDep = Annotated[BulkImporter, Depends(get_bulk_importer)]
