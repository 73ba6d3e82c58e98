"""Chart renderers for quadrant sessions."""

from .figure import axis_domain, build_quadrant_figure, format_tick_value, write_quadrant_html

__all__ = [
    "axis_domain",
    "build_quadrant_figure",
    "format_tick_value",
    "write_quadrant_html",
]
