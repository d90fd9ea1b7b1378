"""Allow ``python -m ck_metrics``."""

from .cli.main import app

app()
