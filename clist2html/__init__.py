"""Convert checklist definition files into HTML pages."""

__version__ = "1.0.0"

__all__ = ["checklist", "cli", "render", "textutils"]