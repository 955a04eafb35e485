#!/usr/bin/env python3
"""Roster CLI for running salary reports."""

import argparse

import pandas as pd
import questionary
from rich.console import Console
from rich.table import Table

from roster.logger import get_logger
from roster.person.report import REPORTS, PersonReport
from roster.person.repository import PersonRepository

console = Console()
logger = get_logger(__name__)

PERSON_COLUMNS = ["id", "name", "salary", "location_id", "role_id", "manager_id"]


def select_report() -> str | None:
    """Prompt the user to pick one of the available reports."""
    return questionary.select(
        "Select a report:",
        choices=[
            questionary.Choice(title=name.replace("_", " "), value=name) for name in REPORTS
        ],
    ).ask()


def to_dataframe(result) -> pd.DataFrame:
    """Shape any report result into a DataFrame for display or export."""
    if isinstance(result, dict):
        return pd.DataFrame(list(result.items()), columns=["key", "value"])
    if isinstance(result, list):
        return pd.DataFrame(result, columns=PERSON_COLUMNS)
    return pd.DataFrame([{"value": result}])


def render(title: str, df: pd.DataFrame) -> None:
    """Print a DataFrame as a rich table."""
    table = Table(title=title)
    for column in df.columns:
        table.add_column(str(column))
    for row in df.itertuples(index=False):
        table.add_row(*["" if value is None else str(value) for value in row])
    console.print(table)


def run_report(name: str | None, csv_path: str | None = None) -> None:
    """Run a report by name, printing it or writing it to CSV."""
    if name is None:
        name = select_report()
        # User pressed Ctrl+C or Escape
        if name is None:
            console.print("[dim]Cancelled.[/]")
            return

    logger.info("Running report %s", name)
    result = getattr(PersonReport(), name)()
    df = to_dataframe(result)

    if csv_path:
        df.to_csv(csv_path, index=False)
        console.print(f"[green]Wrote {len(df)} rows to {csv_path}.[/]")
        return

    if df.empty:
        console.print("[yellow]No data.[/]")
        return
    render(name.replace("_", " "), df)


def export_directory(csv_path: str) -> None:
    """Write the people directory to CSV."""
    df = PersonRepository().directory()
    df.to_csv(csv_path, index=False)
    logger.info("Exported %d people to %s", len(df), csv_path)
    console.print(f"[green]Exported {len(df)} people to {csv_path}.[/]")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Roster CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    report_parser = subparsers.add_parser("report", help="Run a salary report")
    report_parser.add_argument("name", nargs="?", choices=REPORTS, help="Report to run")
    report_parser.add_argument("--csv", dest="csv_path", help="Write the report to a CSV file")

    export_parser = subparsers.add_parser("export", help="Export the people directory")
    export_parser.add_argument("csv_path", help="Destination CSV file")

    args = parser.parse_args(argv)

    if args.command == "report":
        run_report(args.name, args.csv_path)
    elif args.command == "export":
        export_directory(args.csv_path)


if __name__ == "__main__":
    main()
