"""Course-Info: Haupt-CLI.

Verwendung:
  course-info retrieve <autor-id>         Kurse abrufen und speichern
  course-info list                        Gespeicherte Kurse anzeigen
  course-info notes <kurs-id> <text>      Notiz zu einem Kurs setzen
  course-info config show                 Konfiguration anzeigen
  course-info config init                 Default-Konfiguration schreiben
"""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()


def _configure_logging(level: str, verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config(db: Optional[str] = None, base_url: Optional[str] = None):
    """Lädt die Konfiguration (oder Defaults) und wendet CLI-Overrides an."""
    from config.manager import ConfigManager
    from config.schema import AppConfig

    overrides = {}
    if db is not None:
        overrides["database_file"] = db
    if base_url is not None:
        overrides["api_base_url"] = base_url
    try:
        config = ConfigManager().load_or_default()
        if overrides:
            config = AppConfig.model_validate({**config.model_dump(), **overrides})
    except ValueError as e:
        console.print(f"[red bold]Konfiguration ungültig:[/red bold]\n{escape(str(e))}")
        sys.exit(1)
    return config


def _open_repository_or_abort(database_file: str):
    from repository import RepositoryError, open_course_repository
    try:
        return open_course_repository(database_file)
    except RepositoryError as e:
        console.print(f"[red bold]Datenbank nicht verfügbar:[/red bold] {escape(str(e))}")
        sys.exit(1)


db_option = click.option("--db", default=None,
                         help="Datenbankdatei (überschreibt die Konfiguration).")


# ─── RETRIEVE ─────────────────────────────────────────────────────────────────

@click.command("retrieve")
@click.argument("author_id")
@db_option
@click.option("--base-url", default=None, help="Basis-URL der Autoren-API.")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Debug-Ausgaben aktivieren.")
def cmd_retrieve(author_id: str, db: Optional[str], base_url: Optional[str],
                 verbose: bool):
    """Ruft die Kurse eines Autors ab und speichert die aktiven Kurse."""
    from models import InvalidCourse, MalformedDuration
    from repository import RepositoryError
    from services import (
        CourseRetrievalService,
        CourseStorageService,
        RetrievalFailure,
        retrieve_and_store,
    )

    config = _load_config(db, base_url)
    _configure_logging(config.log_level, verbose)

    repository = _open_repository_or_abort(config.database_file)
    retrieval = CourseRetrievalService(config.api_base_url,
                                       timeout=config.request_timeout_seconds)
    storage = CourseStorageService(repository, config.api_base_url)

    console.print(f"[bold]Kurse für Autor '{escape(author_id)}' werden abgerufen...[/bold]")
    try:
        report = retrieve_and_store(author_id, retrieval, storage)
    except RetrievalFailure as e:
        console.print(f"[red bold]Abruf fehlgeschlagen:[/red bold] {escape(str(e))}")
        sys.exit(1)
    except (MalformedDuration, InvalidCourse) as e:
        console.print(f"[red bold]Ungültige Kursdaten:[/red bold] {escape(str(e))}")
        console.print("[dim]Bereits gespeicherte Kurse bleiben erhalten.[/dim]")
        sys.exit(1)
    except RepositoryError as e:
        console.print(f"[red bold]Speichern fehlgeschlagen:[/red bold] {escape(str(e))}")
        console.print("[dim]Bereits gespeicherte Kurse bleiben erhalten.[/dim]")
        sys.exit(1)

    report.print_rich(console)
    console.print(f"[green]✓[/green] Datenbank: {config.database_file}")


# ─── LIST ─────────────────────────────────────────────────────────────────────

@click.command("list")
@db_option
def cmd_list(db: Optional[str]):
    """Zeigt alle gespeicherten Kurse an."""
    from repository import RepositoryError

    config = _load_config(db)
    _configure_logging(config.log_level)
    repository = _open_repository_or_abort(config.database_file)
    try:
        courses = repository.get_all_courses()
    except RepositoryError as e:
        console.print(f"[red bold]Lesen fehlgeschlagen:[/red bold] {escape(str(e))}")
        sys.exit(1)

    if not courses:
        console.print("[dim]Keine Kurse gespeichert.[/dim]")
        return

    table = Table(title=f"Kurse ({len(courses)})", box=box.ROUNDED)
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Min.", justify="right")
    table.add_column("URL", overflow="fold")
    table.add_column("Notizen")
    for c in courses:
        table.add_row(c.id, c.name, str(c.length), c.url, c.notes or "")
    console.print(table)


# ─── NOTES ────────────────────────────────────────────────────────────────────

@click.command("notes")
@click.argument("course_id")
@click.argument("text")
@db_option
def cmd_notes(course_id: str, text: str, db: Optional[str]):
    """Setzt die Notiz eines gespeicherten Kurses."""
    from models import InvalidCourse
    from repository import RepositoryError

    config = _load_config(db)
    _configure_logging(config.log_level)
    repository = _open_repository_or_abort(config.database_file)
    try:
        updated = repository.add_notes(course_id, text)
    except InvalidCourse as e:
        console.print(f"[red bold]Ungültige Notiz:[/red bold] {escape(str(e))}")
        sys.exit(1)
    except RepositoryError as e:
        console.print(f"[red bold]Speichern fehlgeschlagen:[/red bold] {escape(str(e))}")
        sys.exit(1)

    if not updated:
        console.print(f"[yellow]Kein Kurs mit ID '{escape(course_id)}' gefunden.[/yellow]")
        sys.exit(1)
    console.print(f"[green]✓[/green] Notiz für '{escape(course_id)}' gespeichert.")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen oder anlegen."""


@cmd_config.command("show")
def config_show():
    """Zeigt die wirksame Konfiguration an."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    try:
        config = mgr.load_or_default()
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    source = "Defaults" if mgr.first_run_check() else str(mgr.DEFAULT_CONFIG)
    table = Table(title=f"Konfiguration ({source})", box=box.ROUNDED)
    table.add_column("Parameter", style="bold")
    table.add_column("Wert")
    for k, v in config.model_dump().items():
        table.add_row(k, str(v))
    console.print(table)


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Vorhandene Konfiguration überschreiben.")
def config_init(force: bool):
    """Schreibt die Default-Konfiguration."""
    from config.defaults import default_app_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check() and not force:
        console.print(
            "[yellow]Eine Konfiguration existiert bereits.[/yellow]\n"
            "Verwenden Sie [bold]--force[/bold] zum Überschreiben."
        )
        sys.exit(1)
    path = mgr.save(default_app_config())
    console.print(f"[green]✓[/green] Konfiguration gespeichert: {path}")


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
def cli():
    """Course-Info: Kurskatalog eines Autors abrufen und lokal speichern."""


def main():
    """Einstiegspunkt."""
    if len(sys.argv) == 1:
        console.print(Panel(
            "[bold]Course-Info[/bold]\n\n"
            "Starten Sie mit: [bold]course-info retrieve <autor-id>[/bold]",
            border_style="cyan",
        ))
    cli()


# Befehle registrieren
cli.add_command(cmd_retrieve)
cli.add_command(cmd_list)
cli.add_command(cmd_notes)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
