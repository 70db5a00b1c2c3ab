"""Allow running dupfinder with ``python -m dupfinder``."""

from dupfinder.cli.main import app

app(prog_name="dupfinder")
