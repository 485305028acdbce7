"""In-Memory-Implementierung des Kurs-Repositorys (Tests, ``:memory:``)."""

import logging

from models.course import Course
from repository.base import check_notes

logger = logging.getLogger(__name__)


class InMemoryCourseRepository:
    """Kurs-Repository auf Basis eines dict (ID → Course)."""

    def __init__(self):
        self._courses: dict[str, Course] = {}

    def save_course(self, course: Course) -> None:
        self._courses[course.id] = course

    def get_all_courses(self) -> tuple[Course, ...]:
        return tuple(self._courses[key] for key in sorted(self._courses))

    def add_notes(self, course_id: str, notes: str) -> bool:
        check_notes(notes)
        course = self._courses.get(course_id)
        if course is None:
            logger.warning(f"add_notes: kein Kurs mit ID {course_id!r} vorhanden")
            return False
        self._courses[course_id] = Course(**{**course.model_dump(), "notes": notes})
        return True
