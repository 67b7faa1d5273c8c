from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from ci_step_stats.services.github.exceptions import (
    GithubConfigurationError,
    GithubDecodeError,
    GithubStatusError,
    GithubTransportError,
)

DEFAULT_API_URL = "https://api.github.com"

API_PREVIEW_HEADERS = {
    "Accept": "application/vnd.github+json",
}

_AUTH_SCHEMES = ("bearer ", "token ")

logger = logging.getLogger(__name__)


class GitHubClient:
    def __init__(
        self,
        token: str,
        api_url: str | None = None,
        timeout: float = 120.0,
        strict_status: bool = True,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize GitHubClient.

        Args:
            token: GitHub token, bare or prefixed with its auth scheme
            api_url: GitHub API URL (defaults to api.github.com)
            timeout: Seconds to wait on any single request
            strict_status: Raise on non-2xx responses instead of decoding them
            transport: Optional httpx transport (used by tests)
        """
        self._token = (token or "").strip()
        self._strict_status = strict_status

        if not self._token:
            raise GithubConfigurationError("GitHub token is required to call the API")

        self._api_url = (api_url or DEFAULT_API_URL).rstrip("/")
        # Every call is attempted exactly once
        transport = transport or httpx.HTTPTransport(retries=0)
        self._rest = httpx.Client(
            base_url=self._api_url, timeout=timeout, transport=transport
        )

    def _authorization(self) -> str:
        if self._token.lower().startswith(_AUTH_SCHEMES):
            return self._token
        return f"Bearer {self._token}"

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Authorization": self._authorization(),
            "X-GitHub-Api-Version": "2022-11-28",
        }
        headers.update(API_PREVIEW_HEADERS)
        return headers

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        if response.is_success:
            return response

        url = str(response.request.url)
        logger.warning(
            f"Received non-success status code {response.status_code} from {url}"
        )
        if self._strict_status:
            raise GithubStatusError(
                f"GitHub API returned {response.status_code} for {url}",
                status_code=response.status_code,
                url=url,
            )
        return response

    def _decode(self, response: httpx.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            raise GithubDecodeError(
                f"Malformed JSON from {response.request.url}: {exc}"
            ) from exc
        if not isinstance(data, dict):
            raise GithubDecodeError(
                f"Expected a JSON object from {response.request.url}, "
                f"got {type(data).__name__}"
            )
        return data

    def _rest_request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            response = self._rest.request(
                method, path, headers=self._headers(), **kwargs
            )
        except httpx.RequestError as exc:
            raise GithubTransportError(f"{method} {path} failed: {exc}") from exc

        response = self._handle_response(response)
        return self._decode(response)

    def list_workflow_runs(
        self, full_name: str, params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Fetch one page of workflow runs for a repository."""
        return self._rest_request(
            "GET", f"/repos/{full_name}/actions/runs", params=params or {}
        )

    def list_jobs(
        self, jobs_url: str, page: int = 1, per_page: int = 100
    ) -> Dict[str, Any]:
        """Fetch one page of the job list a workflow run points to (absolute or API-relative URL)."""
        return self._rest_request(
            "GET", jobs_url, params={"per_page": per_page, "page": page}
        )

    def close(self) -> None:
        self._rest.close()

    def __enter__(self) -> "GitHubClient":  # pragma: no cover - convenience
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - convenience
        self.close()
