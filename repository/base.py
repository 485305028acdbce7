"""Repository-Vertrag für die Kurs-Persistenz.

Verbraucher (Storage-Service, CLI) kennen nur CourseRepository und
RepositoryError. Store-spezifische Ausnahmen verlassen die
Implementierungen nie.
"""

from typing import Optional, Protocol, Sequence

from models.course import Course, InvalidCourse


class RepositoryError(Exception):
    """Fehler des Backing-Stores; die Originalausnahme steht in ``cause``."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class CourseRepository(Protocol):
    """Speichern, Auslesen und Annotieren von Kursen."""

    def save_course(self, course: Course) -> None:
        """Upsert über ``course.id``: einfügen oder alle Felder überschreiben."""
        ...

    def get_all_courses(self) -> Sequence[Course]:
        """Alle Kurse als unveränderlicher Schnappschuss (leer, nie None)."""
        ...

    def add_notes(self, course_id: str, notes: str) -> bool:
        """Setzt ``notes``; False wenn keine Zeile zu ``course_id`` existiert."""
        ...


def open_course_repository(database_file: str) -> CourseRepository:
    """Öffnet das Repository für ``database_file`` (``:memory:`` = In-Memory)."""
    if database_file == ":memory:":
        from repository.memory_repository import InMemoryCourseRepository
        return InMemoryCourseRepository()

    from repository.sqlite_repository import CourseSqliteRepository
    return CourseSqliteRepository(database_file)


def check_notes(notes: str) -> str:
    """Notizen unterliegen derselben Regel wie Course.notes."""
    if not isinstance(notes, str) or not notes.strip():
        raise InvalidCourse(["notes: darf nicht leer sein, wenn angegeben"])
    return notes
