"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ministryctl.domain.dates import month_name
from ministryctl.output.console import (
    create_console,
    get_output,
    style_for_tier,
    style_for_user_type,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from ministryctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: one name per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(_item_name(item) for item in items if _item_name(item))
    if "date" in result.data:
        return str(result.data["date"])
    if "name" in result.data:
        return str(result.data["name"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _item_name(item: Any) -> str:
    if isinstance(item, dict):
        return str(item.get("name") or item.get("member") or "")
    return ""


def _month_day(iso: str | None) -> str:
    """``"2025-07-22"`` → ``"July 22"``."""
    if not iso:
        return ""
    _year, month, day = iso.split("-")
    return f"{month_name(int(month))} {int(day)}"


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="min.key")
    console.print(k, Text("" if value is None else str(value)), sep="")


def _tier_text(tier: str | None) -> Text:
    return Text(tier or "", style=style_for_tier(tier))


def _type_text(user_type: str | None) -> Text:
    return Text((user_type or "").title(), style=style_for_user_type(user_type))


def _role(item: dict[str, Any]) -> Text:
    """Position for admins, service tier for members."""
    if item.get("user_type") == "admin" and item.get("position"):
        return Text(str(item["position"]))
    return _tier_text(item.get("service_tier"))


def _new_table() -> Table:
    return Table(show_header=True, show_lines=False, pad_edge=False, expand=False)


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="min.error")
    op = Text(f"  {result.op}", style="min.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Birthday renderers ────────────────────────────────────────────────


def _render_upcoming(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    window = result.data.get("window_days")
    if not items:
        console.print(f"No birthdays in the next {window} days.")
        return

    table = _new_table()
    table.add_column("Name", style="min.name")
    table.add_column("Birthday", style="min.date")
    table.add_column("In", style="min.days", justify="right")
    table.add_column("Turning", justify="right")
    table.add_column("Type")
    table.add_column("Role")
    for item in items:
        days = item.get("days_until_next_birthday", 0)
        table.add_row(
            str(item.get("name", "")),
            _month_day(item.get("next_birthday")),
            Text("today", style="min.today") if days == 0 else f"{days}d",
            str(item.get("next_age", "")),
            _type_text(item.get("user_type")),
            _role(item),
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} upcoming in the next {window} days")


def _render_month(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    label = result.data.get("month_name", "")
    console.print(f"[bold]Birthdays in {label}[/bold]")
    if not items:
        console.print("  none")
        return

    table = _new_table()
    table.add_column("Day", justify="right")
    table.add_column("Name", style="min.name")
    table.add_column("Age", justify="right")
    table.add_column("Type")
    table.add_column("Role")
    for item in items:
        day = str(item.get("birth_date", "")).rsplit("-", 1)[-1]
        table.add_row(
            str(int(day)) if day.isdigit() else day,
            str(item.get("name", "")),
            str(item.get("age", "")),
            _type_text(item.get("user_type")),
            _role(item),
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} birthdays")


def _render_today(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No birthdays today.")
        return
    console.print(Text("Today's birthdays", style="min.today"))
    for item in items:
        line = Text("  ")
        line.append(str(item.get("name", "")), style="min.name")
        line.append(f"  turns {item.get('age', '')} today")
        role = _role(item)
        if role.plain:
            line.append("  ·  ")
            line.append(role)
        console.print(line)


# ── Member renderers ──────────────────────────────────────────────────


def _render_members(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    table = _new_table()
    table.add_column("Name", style="min.name")
    table.add_column("No.", style="dim")
    table.add_column("Age", justify="right")
    table.add_column("Status")
    table.add_column("Type")
    table.add_column("Years", justify="right")
    table.add_column("Tier")
    for item in items:
        years = item.get("years_of_service")
        table.add_row(
            str(item.get("name", "")),
            str(item.get("member_number") or ""),
            str(item.get("age", "")),
            str(item.get("status", "")),
            _type_text(item.get("user_type")),
            "" if years is None else str(years),
            _tier_text(item.get("service_tier")),
        )
    console.print(table)
    total = result.data.get("total", len(items))
    console.print(f"\n{result.data.get('count', len(items))} of {total} people")


def _render_facts(result: ServiceResult, console: Console) -> None:
    d = result.data
    lines = [
        f"born: {d.get('birth_date')}",
        f"age: {d.get('age')}",
    ]
    if d.get("is_birthday_today"):
        lines.append("birthday: today")
    else:
        lines.append(
            f"next birthday: {d.get('next_birthday')} "
            f"(in {d.get('days_until_next_birthday')} days, turning {d.get('next_age')})"
        )
    if d.get("tenure_start_date"):
        lines.append(f"invested: {d.get('tenure_start_date')}")
        lines.append(f"years of service: {d.get('years_of_service')}")
        lines.append(f"tier: {d.get('service_tier')}")
    for key in ("user_type", "status", "position", "member_number"):
        if d.get(key):
            lines.append(f"{key.replace('_', ' ')}: {d[key]}")

    style = style_for_tier(d.get("service_tier")) or "dim"
    console.print(Panel("\n".join(lines), title=str(d.get("name", "?")), border_style=style, expand=False))


# ── Meeting renderers ─────────────────────────────────────────────────


def _render_anchor(result: ServiceResult, console: Console) -> None:
    d = result.data
    console.print(
        f"Meeting for [bold]{d.get('month_name')} {d.get('year')}[/bold]: "
        f"[min.date]{d.get('date')}[/min.date] at {d.get('time')}"
    )
    if d.get("is_default_day"):
        console.print(Text("  default: first Sunday of the month", style="dim"))
    else:
        console.print(Text("  overridden (not the first Sunday)", style="min.warning"))


def _render_attendance(result: ServiceResult, console: Console) -> None:
    d = result.data
    items = d.get("items", [])
    console.print(
        f"Attendance for [bold]{d.get('month_name')} {d.get('year')}[/bold] "
        f"([min.date]{d.get('meeting_date')}[/min.date])"
    )
    if not d.get("editable"):
        console.print(Text("  read-only: not the current month", style="dim"))

    table = _new_table()
    table.add_column("Member", style="min.name")
    table.add_column("Attendance")
    table.add_column("Excused")
    table.add_column("Dues", justify="right")
    for item in items:
        table.add_row(
            str(item.get("member", "")),
            str(item.get("attendance", "")),
            "yes" if item.get("excused") else "",
            f"{item.get('due_amount', 0):.2f}" if item.get("due_paid") else "",
        )
    if items:
        console.print(table)

    console.print()
    for key in ("present", "absent", "excused", "dues_paid"):
        _field(console, key.replace("_", " "), d.get(key, 0))
    _field(console, "total collected", f"{d.get('total_amount', 0):.2f}")


# ── Generic ───────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    label = Text("OK", style="min.ok")
    console.print(label, Text(f"  {result.op}", style="min.op"))
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "upcoming_birthdays": _render_upcoming,
    "birthdays_in_month": _render_month,
    "birthdays_today": _render_today,
    "list_members": _render_members,
    "member_facts": _render_facts,
    "meeting_anchor": _render_anchor,
    "attendance_summary": _render_attendance,
}
