"""Repository-Modul: Vertrag, SQLite- und In-Memory-Implementierung."""

from repository.base import CourseRepository, RepositoryError, open_course_repository
from repository.memory_repository import InMemoryCourseRepository
from repository.sqlite_repository import CourseSqliteRepository

__all__ = [
    "CourseRepository",
    "RepositoryError",
    "open_course_repository",
    "CourseSqliteRepository",
    "InMemoryCourseRepository",
]
