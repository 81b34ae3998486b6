from .tables import render_breakdown_table, render_quote

__all__ = ["render_breakdown_table", "render_quote"]
