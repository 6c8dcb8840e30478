"""Console reporting package for runner output and sweep summaries."""

from .console import ConsoleResultRenderer, render_format_cell, render_format_table

__all__ = ["ConsoleResultRenderer", "render_format_cell", "render_format_table"]
