"""
CLI Entrypoint for Oppiabot.
"""

import argparse
import sys

from .auth import get_github_client
from .checks import CHECKS
from .config import Settings, read_private_key
from .dispatcher import Dispatcher
from .github_api import IssuesClient


def build_payload(pr, repo) -> dict:
    """Synthesize the webhook payload GitHub would send when `pr` is opened."""
    return {
        "action": "opened",
        "pull_request": pr.raw_data,
        "repository": repo.raw_data,
    }


def main(argv=None):
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Oppiabot GitHub Bot")
    parser.add_argument("--check", choices=[*CHECKS.keys(), "all"], default="all")
    parser.add_argument("--repo", required=True, help="Repository name (e.g. oppia/oppia)")
    parser.add_argument("--pr", type=int, required=True, help="Pull request number")

    # Arguments when registering as an app on github
    parser.add_argument("--app-id", default=settings.app_id, help="GitHub App ID")
    parser.add_argument(
        "--private-key",
        default=settings.private_key,
        help="GitHub App Private Key (or path to file)",
    )

    # Arguments when using a personal access token (used for testing)
    parser.add_argument(
        "--token",
        default=settings.token,
        help="Personal Access Token or Action Token",
    )

    args = parser.parse_args(argv)

    try:
        gh = get_github_client(
            app_id=args.app_id,
            private_key=read_private_key(args.private_key),
            token=args.token,
            repo_name=args.repo,
        )
    except Exception as e:
        print(f"Authentication Error: {e}")
        sys.exit(1)

    repo = gh.get_repo(args.repo)
    payload = build_payload(repo.get_pull(args.pr), repo)

    checks = CHECKS.values() if args.check == "all" else [CHECKS[args.check]]
    Dispatcher(checks).dispatch("pull_request", payload, IssuesClient(gh))


if __name__ == "__main__":
    main()
