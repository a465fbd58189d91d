"""Allow running as `python -m skill_mobile`."""

from skill_mobile.cli import app

app()
