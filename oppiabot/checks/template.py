"""
Template check: ping and assign authors whose PR body doesn't follow the template.
"""

from ..notify import notify_author
from ..pr_template import compose, validate
from .base import NO_BOT_LABEL, BaseCheck, is_excluded_from_bot


class TemplateCheck(BaseCheck):
    """Validates the PR body against the pull request template."""

    def __init__(self, validate=validate, compose=compose, notify=notify_author):
        self.validate = validate
        self.compose = compose
        self.notify = notify

    def handle(self, client, payload: dict) -> None:
        pr = payload["pull_request"]
        repository = payload["repository"]

        if is_excluded_from_bot(pr):
            print(f"  [SKIP] PR #{pr['number']} has '{NO_BOT_LABEL}' label. Skipping.")
            return

        author = pr["user"]["login"]
        outcome = self.validate(pr.get("body"))
        if outcome:
            names = ", ".join(d.value for d in outcome)
            print(f"  [INFO] PR #{pr['number']} template problems: {names}")

        self.notify(
            client,
            self.compose(outcome, author),
            pr["number"],
            repository["name"],
            repository["owner"]["login"],
            author,
        )
