"""Custom exceptions for the GitHub API layer."""

from __future__ import annotations


class GithubError(Exception):
    """Base exception for GitHub API failures."""


class GithubConfigurationError(GithubError):
    """Raised when required configuration is missing."""


class GithubTransportError(GithubError):
    """Raised when a request could not be sent or no response arrived."""


class GithubDecodeError(GithubError):
    """Raised when a response body is not the expected JSON document."""


class GithubStatusError(GithubError):
    """Raised when the API answers with a non-success status code."""

    def __init__(self, message: str, status_code: int, url: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
