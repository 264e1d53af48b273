"""Convert Markdown files to HTML and HTML files to Markdown, from the command line or Python."""

__version__ = "1.0.0"

__all__ = ["__version__"]