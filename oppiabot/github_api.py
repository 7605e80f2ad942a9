"""
Issues API used by the checks, backed by PyGithub.
"""

from github import Github
from github.Issue import Issue


class IssuesClient:
    """
    Exposes the two issue calls the bot makes, keyed the same way as the
    REST endpoints (issue_number, repo, owner).
    """

    def __init__(self, gh: Github):
        self.gh = gh

    def create_comment(self, *, issue_number: int, repo: str, owner: str, body: str) -> None:
        self._get_issue(owner, repo, issue_number).create_comment(body)

    def add_assignees(
        self, *, issue_number: int, repo: str, owner: str, assignees: list[str]
    ) -> None:
        self._get_issue(owner, repo, issue_number).add_to_assignees(*assignees)

    def _get_issue(self, owner: str, repo: str, issue_number: int) -> Issue:
        return self.gh.get_repo(f"{owner}/{repo}").get_issue(issue_number)
