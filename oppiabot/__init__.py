"""
Oppiabot: enforces the pull request template on incoming PRs.
"""
