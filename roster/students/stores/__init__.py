"""Student store implementations."""

from roster.students.store import StudentStore
from roster.students.stores.inmemory import InMemoryStudentStore
from roster.students.stores.redis import RedisStudentStore

__all__ = [
    "StudentStore",
    "InMemoryStudentStore",
    "RedisStudentStore",
]
