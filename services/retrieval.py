"""Abruf der Kursliste eines Autors von der Content-API.

GET {base}/profile/data/author/{authorId}/all-content

  200  → Liste von RemoteCourse (unbekannte Felder werden ignoriert)
  404  → Autor unbekannt: leere Liste, kein Fehler
  sonst → RetrievalFailure mit Statuscode
"""

import logging
from typing import Optional
from urllib.parse import quote

import requests
from pydantic import TypeAdapter, ValidationError

from config.defaults import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT
from models.remote_course import RemoteCourse

logger = logging.getLogger(__name__)

AUTHOR_CONTENT_PATH = "/profile/data/author/{author_id}/all-content"

_REMOTE_COURSES = TypeAdapter(list[RemoteCourse])


class RetrievalFailure(Exception):
    """Abruf fehlgeschlagen (Transportfehler oder unerwarteter Status)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ResponseDecodeError(RetrievalFailure):
    """Antwort mit Status 200, deren Inhalt keine gültige Kursliste ist."""


class CourseRetrievalService:
    """HTTP-Client für die Autoren-Kursliste."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def url_for(self, author_id: str) -> str:
        """URL der Kursliste; author_id wird als ein Pfadsegment kodiert."""
        path = AUTHOR_CONTENT_PATH.format(author_id=quote(author_id, safe=""))
        return self.base_url + path

    def get_courses_for(self, author_id: str) -> list[RemoteCourse]:
        url = self.url_for(author_id)
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.exceptions.RequestException as e:
            raise RetrievalFailure(f"Zugriff auf {url} fehlgeschlagen: {e}") from e

        logger.debug(f"Antwort {response.status_code} von {url}")
        if response.status_code == 200:
            return self._decode(response)
        if response.status_code == 404:
            logger.info(f"Autor {author_id!r} nicht gefunden – keine Kurse")
            return []
        raise RetrievalFailure(
            f"Zugriff auf {url} fehlgeschlagen mit Status {response.status_code}",
            status_code=response.status_code,
        )

    @staticmethod
    def _decode(response: requests.Response) -> list[RemoteCourse]:
        try:
            return _REMOTE_COURSES.validate_json(response.content)
        except ValidationError as e:
            raise ResponseDecodeError(
                f"Antwort konnte nicht dekodiert werden: {e}",
                status_code=response.status_code,
            ) from e
