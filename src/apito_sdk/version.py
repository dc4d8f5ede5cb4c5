"""SDK version."""

__version__ = "1.2.0"


def get_version() -> str:
    return __version__
