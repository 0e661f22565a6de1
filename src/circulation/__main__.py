"""Main entry point for the circulation package."""

from circulation.cli import app


def main():
    """Run the reference circulation scenario through the ``demo`` command."""
    app(["demo"], prog_name="circulation")


if __name__ == "__main__":
    main()
