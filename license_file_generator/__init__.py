"""Group a project's dependency licenses into a third-party licenses file."""

__version__ = "0.1.0"
