"""SQLite-Implementierung des Kurs-Repositorys.

Eine lokale Datei mit der Tabelle COURSES. Das Schema wird beim Öffnen
angelegt (CREATE TABLE IF NOT EXISTS, mehrfach ausführbar). Jede
Operation öffnet eine eigene Verbindung und ist ihre eigene Transaktion.
"""

import logging
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Union

from models.course import Course, InvalidCourse
from repository.base import RepositoryError, check_notes

logger = logging.getLogger(__name__)


SCHEMA = """
    CREATE TABLE IF NOT EXISTS COURSES (
        ID     TEXT PRIMARY KEY NOT NULL,
        NAME   TEXT NOT NULL,
        LENGTH INTEGER NOT NULL,
        URL    TEXT NOT NULL,
        NOTES  TEXT NULL
    );
"""

UPSERT_COURSE = """
    INSERT INTO COURSES (ID, NAME, LENGTH, URL, NOTES)
    VALUES (:id, :name, :length, :url, :notes)
    ON CONFLICT (ID) DO UPDATE SET
        NAME   = excluded.NAME,
        LENGTH = excluded.LENGTH,
        URL    = excluded.URL,
        NOTES  = excluded.NOTES
"""

SELECT_ALL_COURSES = "SELECT ID, NAME, LENGTH, URL, NOTES FROM COURSES ORDER BY ID"

UPDATE_NOTES = "UPDATE COURSES SET NOTES = ? WHERE ID = ?"


class CourseSqliteRepository:
    """Kurs-Repository auf Basis einer SQLite-Datei."""

    def __init__(self, database_file: Union[str, Path]):
        self.database_file = str(database_file)
        self._run("Schema konnte nicht angelegt werden", self._init_schema)

    # ─── Verbindung ───

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.database_file)
        conn.row_factory = sqlite3.Row  # Zugriff über Spaltennamen
        return conn

    def _run(self, message: str, operation, *args):
        """Führt ``operation(conn, *args)`` in einer Transaktion aus.

        Jede sqlite3.Error wird in RepositoryError verpackt.
        """
        try:
            with closing(self._connect()) as conn:
                with conn:
                    return operation(conn, *args)
        except sqlite3.Error as e:
            logger.error(f"{message} ({self.database_file}): {e}")
            raise RepositoryError(f"{message}: {e}", e) from e

    @staticmethod
    def _init_schema(conn: sqlite3.Connection) -> None:
        conn.executescript(SCHEMA)

    # ─── Operationen ───

    def save_course(self, course: Course) -> None:
        """Upsert in einem einzigen Statement."""
        self._run(
            f"Kurs {course.id!r} konnte nicht gespeichert werden",
            lambda conn: conn.execute(UPSERT_COURSE, course.model_dump()),
        )
        logger.debug(f"Kurs gespeichert: {course.id}")

    def get_all_courses(self) -> tuple[Course, ...]:
        rows = self._run(
            "Kurse konnten nicht gelesen werden",
            lambda conn: conn.execute(SELECT_ALL_COURSES).fetchall(),
        )
        try:
            return tuple(self._to_course(row) for row in rows)
        except InvalidCourse as e:
            logger.error(f"Ungültige Zeile in {self.database_file}: {e}")
            raise RepositoryError(f"Gespeicherter Kurs ist ungültig: {e}", e) from e

    def add_notes(self, course_id: str, notes: str) -> bool:
        check_notes(notes)
        updated = self._run(
            f"Notizen für {course_id!r} konnten nicht gespeichert werden",
            lambda conn: conn.execute(UPDATE_NOTES, (notes, course_id)).rowcount,
        )
        if updated == 0:
            logger.warning(f"add_notes: kein Kurs mit ID {course_id!r} vorhanden")
            return False
        return True

    @staticmethod
    def _to_course(row: sqlite3.Row) -> Course:
        return Course(
            id=row["ID"],
            name=row["NAME"],
            length=row["LENGTH"],
            url=row["URL"],
            notes=row["NOTES"],
        )
