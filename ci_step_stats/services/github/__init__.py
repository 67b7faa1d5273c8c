from .exceptions import (
    GithubConfigurationError,
    GithubDecodeError,
    GithubError,
    GithubStatusError,
    GithubTransportError,
)
from .github_client import GitHubClient

__all__ = [
    "GitHubClient",
    "GithubError",
    "GithubConfigurationError",
    "GithubTransportError",
    "GithubDecodeError",
    "GithubStatusError",
]
