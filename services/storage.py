"""Überführt RemoteCourse-Datensätze in Courses und speichert sie."""

import logging
from typing import Iterable

from config.defaults import DEFAULT_API_BASE_URL
from models.course import Course
from models.remote_course import RemoteCourse
from repository.base import CourseRepository

logger = logging.getLogger(__name__)


class CourseStorageService:
    """Mapping RemoteCourse → Course und Schreiben über das Repository.

    Keine Atomarität über die Sequenz: bricht ein Kurs ab, bleiben die
    vorher gespeicherten Kurse erhalten und der Fehler wird weitergereicht.
    """

    def __init__(self, repository: CourseRepository,
                 base_url: str = DEFAULT_API_BASE_URL):
        self.repository = repository
        self.base_url = base_url.rstrip("/")

    def to_course(self, remote: RemoteCourse) -> Course:
        return Course(
            id=remote.id,
            name=remote.title,
            length=remote.duration_in_minutes(),
            url=self.base_url + remote.content_url,
            notes=None,
        )

    def store_remote_courses(self, remote_courses: Iterable[RemoteCourse]) -> None:
        for remote in remote_courses:
            course = self.to_course(remote)
            self.repository.save_course(course)
            logger.debug(f"Gespeichert: {course.id} ({course.length} min)")
