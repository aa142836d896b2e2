"""Command-line interface for quick lookups against the web services.

Usage:
    rsapi player "Zezima"
    rsapi player Lynx --table oldschool
    rsapi clan "Maxs Clan"
    rsapi search-beasts --area Karamja --level 50 100
    rsapi item 4151
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import click
from rich.console import Console
from rich.table import Table

from rsapi.api import RuneScapeAPI
from rsapi.config import get_settings
from rsapi.errors import UnknownSchemaError
from rsapi.utils.ranking_schema import SCHEMAS

console = Console()


def _display(value: int | None) -> str:
    return "-" if value is None else f"{value:,}"


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Query the RuneScape bestiary, Grand Exchange and hiscores."""
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level_numeric,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if ctx.obj is None:
        ctx.obj = RuneScapeAPI.create_http(settings)
        ctx.call_on_close(ctx.obj.close)


@cli.command()
@click.argument("name")
@click.option(
    "--table",
    "table",
    default="default",
    show_default=True,
    help=f"Hiscore table: {', '.join(SCHEMAS)}",
)
@click.pass_obj
def player(api: RuneScapeAPI, name: str, table: str) -> None:
    """Show a player's skills and activities."""
    try:
        found = api.hiscores.player(name, table)
    except UnknownSchemaError as exc:
        raise click.BadParameter(str(exc), param_hint="--table") from exc

    if found is None:
        console.print(f"[red]No {table} hiscores found for {name}[/red]")
        raise SystemExit(1)

    skills = Table("Skill", "Rank", "Level", "Experience", title=f"{name} ({table})")
    for skill_name, skill in found.skills.items():
        skills.add_row(skill_name, _display(skill.rank), str(skill.level), _display(skill.experience))
    console.print(skills)

    activities = Table("Activity", "Rank", "Score")
    for activity_name, activity in found.activities.items():
        if activity.rank is None and activity.score is None:
            continue
        activities.add_row(activity_name, _display(activity.rank), _display(activity.score))
    if activities.row_count:
        console.print(activities)


@cli.command()
@click.argument("name")
@click.pass_obj
def clan(api: RuneScapeAPI, name: str) -> None:
    """List the members of a clan."""
    members = api.hiscores.clan_members(name)
    if not members:
        console.print(f"[yellow]No members found for clan {name}[/yellow]")
        return

    table = Table("Name", "Rank", "Experience", "Kills", title=name)
    for member in members:
        table.add_row(member.name, member.rank, f"{member.experience:,}", str(member.kills))
    console.print(table)


@cli.command()
@click.argument("beast_id", type=int)
@click.pass_obj
def beast(api: RuneScapeAPI, beast_id: int) -> None:
    """Show the bestiary entry for a beast id."""
    found = api.bestiary.beast(beast_id)
    if found is None:
        console.print(f"[red]No beast with id {beast_id}[/red]")
        raise SystemExit(1)

    console.print(f"[bold]{found.name}[/bold] (id {found.id}, level {found.combat_level})")
    if found.description:
        console.print(found.description)
    console.print(f"Life points: {found.life_points}  Weakness: {found.weakness}")
    if found.slayer_category:
        console.print(
            f"Slayer: {found.slayer_category} (level {found.required_slayer_level})"
        )
    if found.areas:
        console.print(f"Areas: {', '.join(found.areas)}")


def _category_or_id(value: str) -> int | str:
    return int(value) if value.isdigit() else value


@cli.command("search-beasts")
@click.option("--terms", multiple=True, help="Name terms; repeat for several.")
@click.option("--letter", help="First letter of the beast's name.")
@click.option("--area", help="Area name, e.g. 'Karamja'.")
@click.option("--slayer-category", help="Slayer category id or name.")
@click.option("--weakness", help="Weakness id or name.")
@click.option("--level", nargs=2, type=int, help="Combat level range: LOW HIGH.")
@click.pass_obj
def search_beasts(
    api: RuneScapeAPI,
    terms: tuple[str, ...],
    letter: str | None,
    area: str | None,
    slayer_category: str | None,
    weakness: str | None,
    level: tuple[int, int] | None,
) -> None:
    """Find beasts matching every given filter."""
    search = api.bestiary.search()
    filters: list[Callable[[], object]] = []

    if terms:
        filters.append(lambda: search.filter_by_name_terms(*terms))
    if letter:
        filters.append(lambda: search.filter_by_name_first_letter(letter))
    if area:
        filters.append(lambda: search.filter_by_area(area))
    if slayer_category:
        filters.append(lambda: search.filter_by_slayer_category(_category_or_id(slayer_category)))
    if weakness:
        filters.append(lambda: search.filter_by_weakness(_category_or_id(weakness)))
    if level:
        filters.append(lambda: search.filter_by_level(*level))

    if not filters:
        raise click.UsageError("Provide at least one filter.")

    try:
        for apply_filter in filters:
            apply_filter()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    results = search.results()
    if not results:
        console.print("[yellow]No beasts matched every filter[/yellow]")
        return

    table = Table("Id", "Name", title=f"{len(results)} beasts")
    for key, label in sorted(results.items()):
        table.add_row(str(key), label)
    console.print(table)


@cli.command()
@click.argument("item_id", type=int)
@click.pass_obj
def item(api: RuneScapeAPI, item_id: int) -> None:
    """Show current Grand Exchange price information for an item."""
    info = api.grand_exchange.item_price_information(item_id)
    if info is None:
        console.print(f"[red]No item with id {item_id}[/red]")
        raise SystemExit(1)

    details = info.item
    console.print(f"[bold]{details.name}[/bold] (id {details.id}, {details.type})")
    console.print(f"Current price: {details.current.price} ({details.current.trend})")
    console.print(f"Today: {details.today.price} ({details.today.trend})")
    for label, change in (("30 days", details.day30), ("90 days", details.day90), ("180 days", details.day180)):
        if change is not None:
            console.print(f"{label}: {change.change} ({change.trend})")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
