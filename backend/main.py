"""
Sanctuary - operator CLI for the church website backend.

Logs in against the church REST backend, lists events and posts, exports
events to calendar apps and deletes content as an administrator. The CLI
shares its token store with the portal, so a session started here is
restored there and the other way round.
"""

import argparse
import asyncio
import getpass
import logging
import sys

from rich.console import Console
from rich.table import Table

from api.dependencies import ServiceContainer
from modules.auth.guard import ensure_access
from modules.auth.models import Role
from modules.content import CalendarProvider, calendar_export
from modules.content.models import AnalyticsDashboard, DownloadStats, Event, EventType, Post
from shared.config import Settings, get_settings
from shared.exceptions import SanctuaryError
from shared.models import Pagination

console = Console()

DELETABLE_KINDS = ("event", "post", "ministry", "resource", "gallery")

# Admin area each kind of content is managed from.
ADMIN_SECTIONS = {
    "event": "events",
    "post": "posts",
    "ministry": "ministries",
    "resource": "resources",
    "gallery": "gallery",
}


def configure_logging(settings: Settings, verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def events_table(events: list[Event]) -> Table:
    table = Table(title="Events")
    table.add_column("ID", justify="right")
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Title", style="bold")
    table.add_column("Type")
    table.add_column("Location")
    table.add_column("Featured", justify="center")
    for event in events:
        table.add_row(
            str(event.id),
            event.event_date,
            event.event_time or "",
            event.title,
            event.event_type.value,
            event.location or "",
            "*" if event.is_featured else "",
        )
    return table


def posts_table(posts: list[Post]) -> Table:
    table = Table(title="Posts")
    table.add_column("ID", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Category")
    table.add_column("Author")
    table.add_column("Published")
    for post in posts:
        table.add_row(
            str(post.id),
            post.title,
            post.category,
            post.author_name,
            post.published_at.date().isoformat() if post.published_at else "",
        )
    return table


def stats_table(traffic: AnalyticsDashboard, downloads: DownloadStats, days: int) -> Table:
    table = Table(title=f"Site activity (last {days} days)")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Sessions", str(traffic.total.total_sessions))
    table.add_row("Visitors", str(traffic.total.total_visitors))
    table.add_row("Page views", str(traffic.total.total_page_views))
    table.add_row("Page views today", str(traffic.today.today_page_views))
    table.add_row("Active now", str(traffic.active_users))
    table.add_row("Downloads today", str(downloads.today))
    table.add_row("Downloads this week", str(downloads.this_week))
    table.add_row("Downloads this month", str(downloads.this_month))
    return table


def format_pagination(pagination: Pagination) -> str:
    return f"Page {pagination.page} of {pagination.pages} ({pagination.total} total)"


async def cmd_login(args: argparse.Namespace, container: ServiceContainer) -> int:
    password = getpass.getpass("Password: ")
    result = await container.auth.login(args.identifier, password)
    if not result.success:
        console.print(f"[red]Error:[/red] {result.message}")
        return 1
    user = result.user
    console.print(
        f"[green]Logged in as[/green] {user.full_name} ({user.role.value})"
    )
    return 0


async def cmd_logout(args: argparse.Namespace, container: ServiceContainer) -> int:
    container.auth.logout()
    console.print("Logged out")
    return 0


async def cmd_whoami(args: argparse.Namespace, container: ServiceContainer) -> int:
    await container.auth.start()
    user = container.auth.user
    if user is None:
        console.print("[yellow]Not logged in[/yellow]")
        return 1
    console.print(f"[bold]{user.username}[/bold] <{user.email}>")
    if user.first_name or user.last_name:
        console.print(f"Name: {user.full_name}")
    console.print(f"Role: {user.role.value}")
    return 0


async def cmd_events(args: argparse.Namespace, container: ServiceContainer) -> int:
    response = await container.events.get_all(
        featured=True if args.featured else None,
        event_type=args.type,
        limit=args.limit,
    )
    if not response.success:
        console.print(f"[red]Error:[/red] {response.message or 'Could not load events'}")
        return 1
    events = response.data or []
    if not events:
        console.print("[dim]No events found[/dim]")
        return 0
    console.print(events_table(events))
    return 0


async def cmd_posts(args: argparse.Namespace, container: ServiceContainer) -> int:
    response = await container.posts.published(
        page=args.page,
        limit=args.limit,
        category=args.category,
        search=args.search,
    )
    if not response.success:
        console.print(f"[red]Error:[/red] {response.message or 'Could not load posts'}")
        return 1
    posts = response.data or []
    if not posts:
        console.print("[dim]No posts found[/dim]")
        return 0
    console.print(posts_table(posts))
    if response.pagination:
        console.print(f"[dim]{format_pagination(response.pagination)}[/dim]")
    return 0


async def cmd_calendar(args: argparse.Namespace, container: ServiceContainer) -> int:
    response = await container.events.get(args.event_id)
    if not response.success or response.data is None:
        console.print(f"[red]Error:[/red] {response.message or 'Event not found'}")
        return 1
    settings = container.settings
    output = calendar_export(
        response.data,
        args.provider,
        default_duration_hours=settings.default_event_duration_hours,
        timezone_name=settings.calendar_timezone,
    )
    if args.provider == CalendarProvider.ICS.value:
        # Written raw: rich strips the CR of the CRLF line endings iCalendar needs.
        console.file.write(output)
    else:
        console.print(output, markup=False, highlight=False, soft_wrap=True)
    return 0


async def cmd_delete(args: argparse.Namespace, container: ServiceContainer) -> int:
    await container.auth.start()
    ensure_access(container.auth.state, Role.ADMIN, location=f"/admin/{ADMIN_SECTIONS[args.kind]}")

    clients = {
        "event": container.events,
        "post": container.posts,
        "ministry": container.ministries,
        "resource": container.resources,
        "gallery": container.gallery,
    }
    response = await clients[args.kind].delete(args.id)
    if not response.success:
        console.print(f"[red]Error:[/red] {response.message or 'Delete failed'}")
        return 1
    console.print(f"[green]Deleted {args.kind} {args.id}[/green]")
    return 0


async def cmd_stats(args: argparse.Namespace, container: ServiceContainer) -> int:
    await container.auth.start()
    ensure_access(container.auth.state, Role.ADMIN, location="/admin")

    traffic = await container.analytics.dashboard_stats(days=args.days)
    downloads = await container.downloads.stats()
    if not traffic.ok or not downloads.ok:
        failed = traffic if not traffic.ok else downloads
        console.print(f"[red]Error:[/red] {failed.message or 'Could not load statistics'}")
        return 1
    console.print(stats_table(traffic.data, downloads.data, args.days))
    if traffic.data.top_pages:
        console.print("[bold]Top pages[/bold]")
        for page in traffic.data.top_pages[:5]:
            console.print(f"{page.total_views:>6}  {page.page_path}", markup=False, highlight=False)
    return 0


COMMANDS = {
    "login": cmd_login,
    "logout": cmd_logout,
    "whoami": cmd_whoami,
    "events": cmd_events,
    "posts": cmd_posts,
    "calendar": cmd_calendar,
    "delete": cmd_delete,
    "stats": cmd_stats,
}


async def run_command(args: argparse.Namespace, container: ServiceContainer) -> int:
    """Run one subcommand and translate client errors into exit code 1."""
    try:
        return await COMMANDS[args.command](args, container)
    except SanctuaryError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        return 1
    finally:
        await container.aclose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Command-line client for the church website backend"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    login = subparsers.add_parser("login", help="Log in and persist the session token")
    login.add_argument("identifier", help="Username or email address")

    subparsers.add_parser("logout", help="Forget the persisted session")
    subparsers.add_parser("whoami", help="Show the logged-in user")

    events = subparsers.add_parser("events", help="List events")
    events.add_argument("--featured", action="store_true", help="Only featured events")
    events.add_argument(
        "--type",
        choices=[t.value for t in EventType],
        help="Only events of this type",
    )
    events.add_argument("--limit", type=int, help="Maximum number of events")

    posts = subparsers.add_parser("posts", help="List published posts")
    posts.add_argument("--category", help="Filter by category")
    posts.add_argument("--search", help="Full-text search")
    posts.add_argument("--page", type=int, help="Page number")
    posts.add_argument("--limit", type=int, help="Posts per page")

    calendar = subparsers.add_parser("calendar", help="Export an event to a calendar app")
    calendar.add_argument("event_id", type=int, help="Event ID")
    calendar.add_argument(
        "--provider", "-p",
        choices=[p.value for p in CalendarProvider],
        default=CalendarProvider.GOOGLE.value,
        help="Calendar provider (default: google)",
    )

    delete = subparsers.add_parser("delete", help="Delete content (administrators only)")
    delete.add_argument("kind", choices=DELETABLE_KINDS, help="Kind of content")
    delete.add_argument("id", type=int, help="Record ID")

    stats = subparsers.add_parser("stats", help="Show site traffic and download counts (administrators only)")
    stats.add_argument("--days", type=int, default=30, help="Reporting window in days (default: 30)")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings, args.verbose)
    return asyncio.run(run_command(args, ServiceContainer(settings)))


if __name__ == "__main__":
    sys.exit(main())
