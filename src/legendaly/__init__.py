"""legendaly - AI-generated fictional quotes for the terminal."""

__version__ = "0.1.0"
__all__ = ["generate_quotes"]


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name == "generate_quotes":
        from .api import generate_quotes

        return generate_quotes
    raise AttributeError(f"module 'legendaly' has no attribute {name!r}")
