"""Validation utilities for repository slugs and backend URLs."""

import re


def validate_owner_repo(owner_repo: str) -> str:
    """
    Validate repository name format (owner/repo).

    Args:
        owner_repo: Repository name in owner/repo format, as found in GITHUB_REPOSITORY

    Returns:
        Validated repository name

    Raises:
        ValueError: If repository name format is invalid
    """
    if not owner_repo:
        raise ValueError("Repository name cannot be empty")

    if not re.match(r'^[a-zA-Z0-9_.-]+/[a-zA-Z0-9_.-]+$', owner_repo):
        raise ValueError(
            f"Invalid repository format: {owner_repo}. Must be 'owner/repo'"
        )

    if '..' in owner_repo:
        raise ValueError(f"Invalid repository name: {owner_repo}")

    return owner_repo


def validate_base_url(url: str) -> str:
    """Require an http(s) URL and drop any trailing slash."""
    if not url.startswith(("http://", "https://")):
        raise ValueError(f"API URL must start with http:// or https://, got '{url}'")
    return url.rstrip("/")
