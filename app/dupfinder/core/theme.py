"""Color theme for the dupfinder CLI.

Each match-table column has its own style so source, reference, and
destination paths stay distinguishable in long listings.
"""

from rich.theme import Theme

STYLES: dict[str, str] = {
    "muted": "#b2bec3",
    "header": "#69B9A1",
    "bold_header": "bold #69B9A1",
    "border": "#29526d",
    "dim": "#b2bec3",
    # Messages
    "success": "#03b971",
    "warning": "#f5b332",
    "error": "bold #f53263",
    "info": "#0ec1c8",
    # Match table columns
    "source": "#f5b332",
    "target": "#69B9A1",
    "destination": "#0e8ac8",
}

THEME = Theme(STYLES)
