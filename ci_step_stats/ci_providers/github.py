"""
GitHub Actions CI Provider - lists workflow runs and their jobs through GitHubClient.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ci_step_stats.services.github.exceptions import GithubDecodeError
from ci_step_stats.services.github.github_client import GitHubClient

from .base import CIProviderInterface
from .models import (
    MAX_PER_PAGE,
    CIProvider,
    Job,
    JobPage,
    ProviderConfig,
    RunQuery,
    Step,
    WorkflowRun,
    WorkflowRunPage,
)

logger = logging.getLogger(__name__)


class GitHubActionsProvider(CIProviderInterface):
    """
    GitHub Actions provider sharing one GitHubClient across all requests.
    """

    def __init__(self, config: ProviderConfig, client: Optional[GitHubClient] = None):
        self._client = client
        super().__init__(config)

    @property
    def provider_type(self) -> CIProvider:
        return CIProvider.GITHUB_ACTIONS

    @property
    def name(self) -> str:
        return "GitHub Actions"

    def _get_github_client(self) -> GitHubClient:
        if self._client is None:
            self._client = GitHubClient(
                token=self.config.token,
                api_url=self.config.base_url,
                timeout=self.config.timeout,
                strict_status=self.config.strict_status,
            )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def build_run_params(self, query: RunQuery, page: int, per_page: int) -> Dict[str, Any]:
        params: Dict[str, Any] = {"per_page": min(per_page, MAX_PER_PAGE), "page": page}
        if query.branch:
            params["branch"] = query.branch
        if query.status:
            params["status"] = query.status
        if query.created_after:
            params["created"] = f">={query.created_after}"
        return params

    def fetch_runs(self, query: RunQuery, page: int = 1, per_page: int = 100) -> WorkflowRunPage:
        """Fetch workflow runs from GitHub Actions (single page)."""
        params = self.build_run_params(query, page, per_page)
        logger.debug(f"Listing runs of {query.repo_name} with {params}")

        response = self._get_github_client().list_workflow_runs(query.repo_name, params)
        runs = response.get("workflow_runs") or []

        return WorkflowRunPage(
            total_count=self._total_count(response),
            workflow_runs=[self._parse_workflow_run(run) for run in runs],
        )

    def fetch_run_jobs(self, run: WorkflowRun) -> JobPage:
        """Fetch every job of a workflow run, following job pages until total_count is reached."""
        client = self._get_github_client()
        jobs: List[Job] = []
        total_count = 0
        page = 1

        while True:
            response = client.list_jobs(run.jobs_url, page=page, per_page=MAX_PER_PAGE)
            total_count = self._total_count(response)
            batch = response.get("jobs") or []
            jobs.extend(self._parse_job(job) for job in batch)

            if not batch or len(jobs) >= total_count:
                break
            page += 1

        if page > 1:
            logger.debug(f"Run {run.run_id}: {len(jobs)} jobs over {page} pages")
        return JobPage(total_count=total_count, jobs=jobs)

    @staticmethod
    def _total_count(response: Dict[str, Any]) -> int:
        try:
            return int(response.get("total_count") or 0)
        except (TypeError, ValueError) as exc:
            raise GithubDecodeError(
                f"Invalid total_count: {response.get('total_count')!r}"
            ) from exc

    def _parse_workflow_run(self, run: dict) -> WorkflowRun:
        """Parse GitHub Actions workflow run to WorkflowRun."""
        try:
            return WorkflowRun(
                run_id=str(run["id"]),
                jobs_url=run["jobs_url"],
                name=run.get("name"),
                head_branch=run.get("head_branch"),
                status=run.get("status"),
                conclusion=run.get("conclusion"),
                created_at=run.get("created_at"),
            )
        except (KeyError, TypeError, ValidationError) as exc:
            raise GithubDecodeError(f"Unexpected workflow run shape: {exc}") from exc

    def _parse_job(self, job: dict) -> Job:
        """Parse GitHub Actions job to Job."""
        try:
            steps = [
                Step(
                    name=step.get("name", "unknown"),
                    status=step.get("status"),
                    conclusion=step.get("conclusion"),
                    number=step.get("number"),
                    started_at=step.get("started_at"),
                    completed_at=step.get("completed_at"),
                )
                for step in job.get("steps") or []
            ]
            return Job(
                job_id=str(job["id"]),
                name=job.get("name", "unknown"),
                labels=job.get("labels") or [],
                status=job.get("status"),
                conclusion=job.get("conclusion"),
                started_at=job.get("started_at"),
                completed_at=job.get("completed_at"),
                steps=steps,
            )
        except (KeyError, TypeError, AttributeError, ValidationError) as exc:
            raise GithubDecodeError(f"Unexpected job shape: {exc}") from exc
