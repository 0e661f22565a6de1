"""Command-line interface for circulation.

Built with Typer for commands and Rich for output. State lives only as long
as one command, so the commands demonstrate and inspect the circulation
rules rather than manage a standing collection.
"""

from datetime import date, datetime, timedelta
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import Config, get_config
from .lending.fees import FeeCalculator
from .lending.models import Loan, days_late
from .lending.schemas import LoanSummary
from .log import setup_logging
from .service import build_service

# Create the main app
app = typer.Typer(
    name="circulation",
    help="Lend library books and charge late fees.",
    no_args_is_help=True,
)

# Rich console for pretty output
console = Console()


# ============================================================================
# Helper Functions
# ============================================================================


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{message}[/dim]")


def format_loan_table(loans: list[Loan], title: str = "Loans") -> Table:
    """Create a rich table for displaying loans."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("ISBN", style="cyan")
    table.add_column("Title", style="cyan", max_width=30)
    table.add_column("User", style="green")
    table.add_column("Due", justify="center")
    table.add_column("Returned", justify="center")
    table.add_column("Status", style="yellow")

    for loan in loans:
        summary = LoanSummary.from_loan(loan)
        table.add_row(
            summary.isbn,
            summary.book_title,
            f"{summary.user_name} ({summary.user_id})",
            summary.due_date.date().isoformat(),
            summary.return_date.date().isoformat() if summary.return_date else "-",
            summary.status.value,
        )

    return table


def load_checked_config() -> Config:
    """Load config and stop with exit code 1 if it is invalid."""
    config = get_config()
    errors = config.validate()
    if errors:
        for error in errors:
            print_error(error)
        raise typer.Exit(1)
    setup_logging(config.log_level)
    return config


def parse_date(value: str, option: str) -> date:
    """Parse an ISO date given on the command line."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        print_error(f"Invalid date for {option}: {value} (expected YYYY-MM-DD)")
        raise typer.Exit(1)


# ============================================================================
# Commands
# ============================================================================


@app.command()
def demo(
    days: Optional[int] = typer.Option(
        None, "--days", "-d", help="Loan length in days (default: CIRCULATION_LOAN_DAYS)"
    ),
    late_by: int = typer.Option(
        0, "--late-by", "-l", help="Return this many days after the due date"
    ),
) -> None:
    """Register a book and a user, lend the book, then return it."""
    config = load_checked_config()
    loan_days = config.loan_days if days is None else days

    service = build_service(config, console)
    service.register_book("Clean Code", "Robert C. Martin", "123")
    service.register_user("João", 1)

    lent_at = datetime.now()
    if not service.lend_book(1, "123", loan_days, now=lent_at):
        print_error("Could not lend book 123 to user 1")
        raise typer.Exit(1)

    returned_at = None
    if late_by > 0:
        returned_at = lent_at + timedelta(days=loan_days + late_by)

    amount = service.return_book("123", 1, now=returned_at)
    if amount is None:
        print_error("No active loan of book 123 for user 1")
        raise typer.Exit(1)

    console.print(format_loan_table(service.loans.list_all()))
    console.print(f"Fee: {service.format_fee(amount)}", markup=False, highlight=False)


@app.command()
def fee(
    due: str = typer.Option(..., "--due", help="Due date (YYYY-MM-DD)"),
    returned: str = typer.Option(..., "--returned", help="Return date (YYYY-MM-DD)"),
    rate: Optional[float] = typer.Option(
        None, "--rate", "-r", help="Fee per day (default: CIRCULATION_DAILY_FEE)"
    ),
) -> None:
    """Compute the late fee for a due date and a return date."""
    config = load_checked_config()
    if rate is not None and rate < 0:
        print_error(f"Fee per day cannot be negative: {rate}")
        raise typer.Exit(1)
    due_date = parse_date(due, "--due")
    return_date = parse_date(returned, "--returned")

    calculator = FeeCalculator(config.daily_fee if rate is None else rate)
    due_at = datetime.combine(due_date, datetime.min.time())
    returned_at = datetime.combine(return_date, datetime.min.time())

    late = days_late(due_at, returned_at)
    if late:
        print_info(f"{late} day(s) late")
    amount = calculator.fee_between(due_at, returned_at)
    console.print(f"Fee: {config.currency} {amount:.2f}", markup=False, highlight=False)


@app.command("config")
def show_config() -> None:
    """Show the effective configuration."""
    config = get_config()

    table = Table(title="Configuration", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Daily fee", f"{config.daily_fee:.2f}")
    table.add_row("Currency", config.currency)
    table.add_row("Loan days", str(config.loan_days))
    table.add_row("Notifiers", ", ".join(config.notifiers) or "-")
    table.add_row("Log level", config.log_level)
    console.print(table)

    errors = config.validate()
    if errors:
        for error in errors:
            print_error(error)
        raise typer.Exit(1)
    print_success("Configuration is valid")


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__

    console.print(f"circulation version {__version__}")


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
