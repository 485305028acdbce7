"""Pipeline: abrufen → aktive Kurse filtern → speichern."""

import logging
from typing import Iterable, Optional

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from models.remote_course import RemoteCourse
from services.retrieval import CourseRetrievalService
from services.storage import CourseStorageService

logger = logging.getLogger(__name__)


class RetrievalReport(BaseModel):
    """Ergebnis eines Pipeline-Laufs für einen Autor."""

    author_id: str
    fetched: int      # von der API geliefert
    retired: int      # davon ausgemustert (nicht gespeichert)
    stored: int

    def print_rich(self, console: Optional[Console] = None) -> None:
        """Gibt den Report formatiert über Rich aus."""
        console = console or Console()
        if self.fetched == 0:
            lines = ["[yellow]Keine Kurse gefunden.[/yellow]"]
        else:
            lines = [
                f"Abgerufen:     [bold]{self.fetched}[/bold]",
                f"Ausgemustert:  [dim]{self.retired}[/dim]",
                f"Gespeichert:   [bold green]{self.stored}[/bold green]",
            ]
        console.print(Panel("\n".join(lines), title=f"Autor {escape(self.author_id)}",
                            border_style="cyan"))


def filter_active(courses: Iterable[RemoteCourse]) -> list[RemoteCourse]:
    """Entfernt ausgemusterte Kurse."""
    return [c for c in courses if not c.is_retired]


def retrieve_and_store(
    author_id: str,
    retrieval: CourseRetrievalService,
    storage: CourseStorageService,
) -> RetrievalReport:
    """Führt einen vollständigen Lauf aus. Fehler werden nicht abgefangen."""
    logger.info(f"Kurse für Autor {author_id!r} werden abgerufen")
    fetched = retrieval.get_courses_for(author_id)
    active = filter_active(fetched)
    logger.info(
        f"{len(fetched)} Kurse abgerufen, {len(fetched) - len(active)} ausgemustert"
    )

    storage.store_remote_courses(active)
    logger.info(f"{len(active)} Kurse gespeichert")

    return RetrievalReport(
        author_id=author_id,
        fetched=len(fetched),
        retired=len(fetched) - len(active),
        stored=len(active),
    )
