"""Entry point for running legendaly as a module."""

from .cli import app


def main() -> None:
    """Main entry point for the legendaly CLI application."""
    app()


if __name__ == "__main__":
    main()
