"""Terminal rendering of the list and detail views."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from moodflix.shared.error_handling import ErrorView
from moodflix.shared.models import MovieDetails, MovieSummary

MAX_OVERVIEW_CHARS = 120
MAX_CAST_ROWS = 10


class TerminalListView:
    """List view that renders accumulated movies as a rich table.

    The scroll offset is the row index the view is positioned at; the row is
    marked when the table is rendered.
    """

    def __init__(self, console: Console) -> None:
        self.console = console
        self.offset = 0

    def scroll_to(self, offset: int) -> None:
        self.offset = offset
        self.console.print(f"[dim]Returned to row {offset + 1}.[/dim]")

    def render(
        self,
        movies: list[MovieSummary],
        *,
        mood: str,
        current_page: int,
        total_pages: int,
    ) -> None:
        display_movie_list(
            movies,
            self.console,
            mood=mood,
            current_page=current_page,
            total_pages=total_pages,
            highlight=self.offset if movies else None,
        )

    def row_of(self, movies: list[MovieSummary], movie_id: str) -> int:
        for index, movie in enumerate(movies):
            if str(movie.id) == movie_id:
                return index
        return 0


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[: limit - 1].rstrip() + "…"


def display_movie_list(
    movies: list[MovieSummary],
    console: Console,
    *,
    mood: str,
    current_page: int,
    total_pages: int,
    highlight: int | None = None,
) -> None:
    """Display accumulated search results in a table.

    Args:
        movies: Accumulated results
        console: Rich console for output
        mood: Mood the results belong to
        current_page: Last page fetched
        total_pages: Pages available
        highlight: Row index to mark, if any
    """
    if not movies:
        console.print(f"[yellow]No movies found for mood '{mood}'.[/yellow]")
        return

    table = Table(title=f"Movies for '{mood}'", caption=f"Page {current_page} of {total_pages}")
    table.add_column("", width=1)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="green")
    table.add_column("Rating", style="yellow", justify="right")
    table.add_column("Overview")

    for index, movie in enumerate(movies):
        marker = "▶" if index == highlight else ""
        table.add_row(
            marker,
            str(movie.id),
            movie.title,
            f"{movie.rating:.1f}",
            _truncate(movie.overview, MAX_OVERVIEW_CHARS),
        )

    console.print(table)
    if current_page < total_pages:
        console.print("[dim]Type 'more' to load the next page.[/dim]")


def display_movie_details(details: MovieDetails, console: Console, image_base_url: str) -> None:
    """Display the detail view of one movie."""
    header = Text(details.title, style="bold")
    if details.release_date:
        header.append(f" ({details.release_date[:4]})", style="dim")

    facts = [f"Rating {details.rating:.1f} ({details.vote_count} votes)"]
    if details.runtime:
        facts.append(f"{details.runtime} min")
    if details.content_rating:
        facts.append(details.content_rating)
    if details.genres:
        facts.append(", ".join(details.genres))

    body = Text()
    body.append(" · ".join(facts) + "\n\n", style="cyan")
    body.append(details.overview or "No overview available.")
    if details.director:
        body.append(f"\n\nDirector: {details.director.name}")
    if details.writers:
        writers = (f"{w.name} ({w.job})" if w.job else w.name for w in details.writers)
        body.append("\nWriters: " + ", ".join(writers))
    for label, video in (("Trailer", details.trailer), ("Teaser", details.teaser)):
        if video is not None:
            body.append(f"\n{label}: {video.watch_url}")
    if details.poster_path:
        body.append(f"\nPoster: {details.poster_path}", style="dim")
    if details.backdrop_path:
        body.append(f"\nBackdrop: {details.backdrop_path}", style="dim")

    console.print(Panel(body, title=header, expand=False))

    if details.cast:
        cast_table = Table(title="Cast")
        cast_table.add_column("Name", style="green")
        cast_table.add_column("Character")
        cast_table.add_column("Profile", style="dim")
        for member in details.cast[:MAX_CAST_ROWS]:
            cast_table.add_row(member.name, member.character, member.profile_url(image_base_url) or "-")
        console.print(cast_table)

    if details.similar_movies:
        similar = Table(title="Similar movies")
        similar.add_column("ID", style="cyan")
        similar.add_column("Title", style="green")
        similar.add_column("Rating", style="yellow", justify="right")
        for movie in details.similar_movies:
            similar.add_row(str(movie.id), movie.title, f"{movie.rating:.1f}")
        console.print(similar)


def display_error(view: ErrorView, console: Console) -> None:
    title = "Not found" if view.not_found else "Error"
    console.print(Panel(f"{view.message}\n[dim]{view.hint}[/dim]", title=title, style="red", expand=False))


def display_cache_entries(entries: list[tuple[str, int]], console: Console) -> None:
    table = Table(title="Cached pages")
    table.add_column("Mood", style="green")
    table.add_column("Page", style="cyan", justify="right")
    for mood, page in entries:
        table.add_row(mood, str(page))
    console.print(table)


def collect_list_data(
    movies: list[MovieSummary],
    *,
    mood: str,
    current_page: int,
    total_pages: int,
) -> dict[str, Any]:
    """Collect list view data for JSON output."""
    return {
        "mood": mood,
        "current_page": current_page,
        "total_pages": total_pages,
        "can_load_more": current_page < total_pages,
        "movies": list(movies),
    }
