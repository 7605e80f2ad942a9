"""
Runtime settings for Oppiabot, read from the environment (and .env if present).
"""

import os

from dotenv import load_dotenv

DEFAULT_PORT = 3000


def read_private_key(value: str | None) -> str | None:
    """Accept either the PEM content itself or a path to a file holding it."""
    if value and os.path.isfile(value):
        with open(value) as f:
            return f.read()
    return value


class Settings:
    def __init__(
        self,
        app_id: str | None = None,
        private_key: str | None = None,
        token: str | None = None,
        webhook_secret: str | None = None,
    ):
        self.app_id = app_id
        self.private_key = private_key
        self.token = token
        self.webhook_secret = webhook_secret

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            app_id=os.getenv("OPPIABOT_APP_ID"),
            private_key=read_private_key(os.getenv("OPPIABOT_PRIVATE_KEY")),
            token=os.getenv("GITHUB_TOKEN"),
            webhook_secret=os.getenv("OPPIABOT_WEBHOOK_SECRET") or None,
        )


def read_port(value: str | None) -> int:
    """Parse the server port, defaulting to DEFAULT_PORT when unset."""
    if not value:
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"PORT must be a number, got {value!r}") from None
