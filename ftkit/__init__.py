"""Text, number, formatting, line-reading, colour-name and XPM utilities."""

__version__ = "0.1.0"

__all__ = [
    "charclass",
    "numbers",
    "textops",
    "formatting",
    "output",
    "linereader",
    "colornames",
    "xpm",
]