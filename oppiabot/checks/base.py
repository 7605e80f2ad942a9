"""
Abstract base class for all Oppiabot checks.
"""

from abc import ABC, abstractmethod

# PRs carrying this label are completely skipped by all bot checks.
NO_BOT_LABEL = "no-bot"


def is_excluded_from_bot(pull_request: dict) -> bool:
    """Return True if the PR carries the no-bot exclusion label."""
    return NO_BOT_LABEL in [lbl.get("name") for lbl in pull_request.get("labels") or []]


class BaseCheck(ABC):
    """
    Every check must implement `handle`. The dispatcher calls
    handle(client, payload) for each pull request event without needing to
    know anything about the check's internals.
    """

    @abstractmethod
    def handle(self, client, payload: dict) -> None:
        """Inspect the webhook payload and act on the PR through `client`."""
        ...
