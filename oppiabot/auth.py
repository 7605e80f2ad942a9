"""
Authentication helpers for Oppiabot.
"""

import os

from github import Github, GithubIntegration
from github.Auth import AppAuth


def get_app_auth(app_id: str, private_key: str) -> GithubIntegration:
    """
    Returns a GithubIntegration object authenticated as an App.
    """
    if not app_id or not private_key:
        raise ValueError("APP_ID and PRIVATE_KEY are required for App authentication")

    auth = AppAuth(app_id=app_id, private_key=private_key)
    return GithubIntegration(auth=auth)


def get_installation_client(
    app_id: str,
    private_key: str,
    installation_id: int | None = None,
    repo_name: str | None = None,
) -> Github:
    """
    Returns a Github client authenticated for one installation of the App.

    Webhook deliveries carry the installation id. When it is not known (e.g.
    from the CLI) it is looked up from the repository instead.
    """
    integration = get_app_auth(app_id, private_key)

    if installation_id is None:
        if not repo_name:
            raise ValueError("Either an installation id or a repository name is required")
        owner, repo = repo_name.split("/")
        try:
            installation_id = integration.get_repo_installation(owner, repo).id
        except Exception as e:
            print(f"Error finding installation for repo {repo_name}: {e}")
            raise

    return integration.get_github_for_installation(installation_id)


def get_github_client(
    app_id: str | None = None,
    private_key: str | None = None,
    token: str | None = None,
    installation_id: int | None = None,
    repo_name: str | None = None,
) -> Github:
    """
    Factory function to get the best available Github client.
    Prioritizes App authentication if credentials are provided.
    Falls back to Token auth.
    """
    # 1. App auth, if we can tell which installation to act as
    if app_id and private_key and (installation_id or repo_name):
        try:
            return get_installation_client(
                app_id, private_key, installation_id=installation_id, repo_name=repo_name
            )
        except Exception as e:
            print(f"Failed to authenticate as App: {e}")
            print("Falling back to Token auth if available...")

    # 2. Token auth
    if token:
        return Github(token)

    # 3. Token from the environment if not passed explicitly
    env_token = os.getenv("GITHUB_TOKEN")
    if env_token:
        return Github(env_token)

    raise ValueError("No valid credentials found (APP_ID/PRIVATE_KEY or GITHUB_TOKEN)")
