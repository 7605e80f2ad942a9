"""
Ping a PR author about problems with their PR.
"""


def notify_author(
    client,
    message: str | None,
    pr_number: int,
    repo_name: str,
    owner_login: str,
    author_login: str,
) -> None:
    """Comment `message` on the PR and assign its author. No-op when message is None."""
    if message is None:
        return

    print(f"  [WARN] PR #{pr_number}: pinging @{author_login} and assigning them.")
    client.create_comment(
        issue_number=pr_number,
        repo=repo_name,
        owner=owner_login,
        body=message,
    )
    client.add_assignees(
        issue_number=pr_number,
        repo=repo_name,
        owner=owner_login,
        assignees=[author_login],
    )
