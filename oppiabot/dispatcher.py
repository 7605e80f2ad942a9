"""
Routes webhook events to the registered checks.
"""

from .checks import CHECKS
from .checks.base import BaseCheck

PULL_REQUEST_EVENT = "pull_request"
PULL_REQUEST_ACTIONS = ("opened", "reopened")


class Dispatcher:
    """
    Runs every check, in order, for each relevant pull request event.

    Checks are independent: one raising doesn't stop the others from running.
    """

    def __init__(self, checks: list[BaseCheck] | None = None):
        self.checks = list(CHECKS.values()) if checks is None else list(checks)

    def wants(self, event: str, payload: dict) -> bool:
        """Return True if `dispatch` would run the checks for this event."""
        return event == PULL_REQUEST_EVENT and payload.get("action") in PULL_REQUEST_ACTIONS

    def dispatch(self, event: str, payload: dict, client) -> int:
        """Returns the number of checks that completed."""
        action = payload.get("action")
        if not self.wants(event, payload):
            print(f"  [SKIP] Ignoring '{event}' event (action: {action}).")
            return 0

        pr_number = payload["pull_request"]["number"]
        print(f"Running {len(self.checks)} check(s) on PR #{pr_number} ({action})...")
        completed = 0
        for check in self.checks:
            try:
                check.handle(client, payload)
            except Exception as e:
                print(f"  [ERROR] {type(check).__name__} failed on PR #{pr_number}: {e}")
            else:
                completed += 1
        return completed
