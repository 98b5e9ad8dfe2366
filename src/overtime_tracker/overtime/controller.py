from __future__ import annotations

from functools import wraps

import click

from ..common.datetime_utils import format_date, parse_date
from ..common.duration import format_minutes, parse_duration
from ..core.constants import NO_ENTRIES_MESSAGE
from ..core.exceptions import DomainError
from ..container import Container
from .model import OvertimeReport

TIME_HELP = "Overtime duration in format like 1h30m"
DATE_HELP = "Date in format ddmmYYYY or dd.mm.YYYY"


def render_report(report: OvertimeReport) -> list[str]:
    if report.is_empty:
        return [NO_ENTRIES_MESSAGE]

    lines: list[str] = []
    for group in report.groups:
        lines.append("")
        lines.append(f"{group.year}-{group.month}:")
        lines.append("Date       | Overtime")
        lines.append("-----------+---------")
        for entry in group.entries:
            lines.append(f"{format_date(entry.date)} | {format_minutes(entry.minutes, pad_sign=True)}")

    lines.append("")
    lines.append(f"Total overtime: {format_minutes(report.total_minutes)}")
    return lines


def register(cli: click.Group, container: Container) -> None:
    def domain_errors(command):
        @wraps(command)
        def wrapper(*args, **kwargs):
            try:
                return command(*args, **kwargs)
            except DomainError as exc:
                raise click.ClickException(str(exc)) from exc

        return wrapper

    @cli.command("add", help=f"Add overtime for a specific date.\n\nTIME: {TIME_HELP}. DATE: {DATE_HELP}.")
    @click.argument("time")
    @click.argument("date")
    @domain_errors
    def add(time: str, date: str):
        minutes = parse_duration(time)
        entry_date = parse_date(date)

        container.overtime_service.add(entry_date, minutes)
        click.echo(f"Added {minutes} minutes of overtime for {format_date(entry_date)}")

    @cli.command("remove", help=f"Remove overtime for a specific date.\n\nTIME: {TIME_HELP}. DATE: {DATE_HELP}.")
    @click.argument("time")
    @click.argument("date")
    @domain_errors
    def remove(time: str, date: str):
        minutes = parse_duration(time)
        entry_date = parse_date(date)

        container.overtime_service.remove(entry_date, minutes)
        click.echo(f"Removed {minutes} minutes of overtime for {format_date(entry_date)}")

    @cli.command("list", help="List all overtime entries with a summary.")
    @domain_errors
    def list_overtime():
        for line in render_report(container.overtime_service.build_report()):
            click.echo(line)
