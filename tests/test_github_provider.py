"""Tests for the GitHub Actions provider parsing and query building."""
from unittest.mock import MagicMock

import pytest

from builders import TEN_SECONDS, job_payload
from ci_step_stats.ci_providers import get_configured_provider
from ci_step_stats.ci_providers.github import GitHubActionsProvider
from ci_step_stats.ci_providers.models import CIProvider, ProviderConfig, RunQuery, WorkflowRun
from ci_step_stats.config import Settings
from ci_step_stats.services.github.exceptions import GithubConfigurationError, GithubDecodeError


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def provider(client):
    config = ProviderConfig(provider=CIProvider.GITHUB_ACTIONS, token="secret")
    return GitHubActionsProvider(config, client=client)


def test_configured_provider_is_built_from_settings():
    settings = Settings(
        _env_file=None, GIT_TOKEN="secret", REQUEST_TIMEOUT=5.0, STRICT_HTTP_STATUS=False
    )

    provider = get_configured_provider(settings)

    assert isinstance(provider, GitHubActionsProvider)
    assert provider.name == "GitHub Actions"
    assert provider.config.token == "secret"
    assert provider.config.timeout == 5.0
    assert provider.config.strict_status is False


def test_provider_without_token_fails_on_first_request(caplog):
    provider = GitHubActionsProvider(ProviderConfig(provider=CIProvider.GITHUB_ACTIONS))

    assert caplog.text == ""
    with pytest.raises(GithubConfigurationError):
        provider.fetch_runs(RunQuery(repo_name="octo/repo"))


def test_run_params_carry_query_scope(provider):
    query = RunQuery(
        repo_name="octo/repo", branch="hourly", status="success", created_after="2023-04-12"
    )

    params = provider.build_run_params(query, page=3, per_page=250)

    assert params == {
        "per_page": 100,
        "page": 3,
        "branch": "hourly",
        "status": "success",
        "created": ">=2023-04-12",
    }


def test_run_params_omit_unset_filters(provider):
    params = provider.build_run_params(RunQuery(repo_name="octo/repo"), page=1, per_page=20)

    assert params == {"per_page": 20, "page": 1}


def test_fetch_runs_parses_page(provider, client):
    client.list_workflow_runs.return_value = {
        "total_count": 3,
        "workflow_runs": [
            {"id": 7, "jobs_url": "https://example.test/runs/7/jobs", "head_branch": "hourly"},
        ],
    }

    page = provider.fetch_runs(RunQuery(repo_name="octo/repo"), page=1, per_page=100)

    client.list_workflow_runs.assert_called_once_with("octo/repo", {"per_page": 100, "page": 1})
    assert page.total_count == 3
    assert page.workflow_runs[0].run_id == "7"
    assert page.workflow_runs[0].jobs_url == "https://example.test/runs/7/jobs"


def test_fetch_run_jobs_parses_steps(provider, client):
    client.list_jobs.return_value = {
        "total_count": 1,
        "jobs": [job_payload(11, "ubuntu-22.04", TEN_SECONDS)],
    }
    run = WorkflowRun(run_id="1", jobs_url="https://example.test/runs/1/jobs")

    jobs = provider.fetch_run_jobs(run)

    client.list_jobs.assert_called_once_with(
        "https://example.test/runs/1/jobs", page=1, per_page=100
    )
    assert jobs.total_count == 1
    job = jobs.jobs[0]
    assert job.job_id == "11"
    assert [s.name for s in job.steps] == ["Set up job", "Check out repository", "Setup MATLAB"]
    assert job.steps[2].started_at == TEN_SECONDS[0]


def test_run_without_jobs_url_is_a_decode_error(provider, client):
    client.list_workflow_runs.return_value = {"total_count": 1, "workflow_runs": [{"id": 1}]}

    with pytest.raises(GithubDecodeError):
        provider.fetch_runs(RunQuery(repo_name="octo/repo"))


def test_invalid_total_count_is_a_decode_error(provider, client):
    client.list_workflow_runs.return_value = {"total_count": "many", "workflow_runs": []}

    with pytest.raises(GithubDecodeError):
        provider.fetch_runs(RunQuery(repo_name="octo/repo"))


def test_close_releases_client(provider, client):
    provider.close()

    client.close.assert_called_once()


def test_fetch_run_jobs_follows_job_pages(provider, client):
    first = [job_payload(i, f"ubuntu-22.04 ({i})", TEN_SECONDS) for i in range(100)]
    second = [job_payload(100 + i, f"macos-12 ({i})", TEN_SECONDS) for i in range(30)]
    client.list_jobs.side_effect = [
        {"total_count": 130, "jobs": first},
        {"total_count": 130, "jobs": second},
    ]
    run = WorkflowRun(run_id="9", jobs_url="https://example.test/runs/9/jobs")

    jobs = provider.fetch_run_jobs(run)

    assert [c.kwargs["page"] for c in client.list_jobs.call_args_list] == [1, 2]
    assert all(c.kwargs["per_page"] == 100 for c in client.list_jobs.call_args_list)
    assert jobs.total_count == 130
    assert len(jobs.jobs) == 130
    assert jobs.jobs[-1].job_id == "129"


def test_fetch_run_jobs_stops_on_empty_job_page(provider, client):
    client.list_jobs.side_effect = [
        {"total_count": 5, "jobs": [job_payload(1, "macos-12", TEN_SECONDS)]},
        {"total_count": 5, "jobs": []},
    ]
    run = WorkflowRun(run_id="3", jobs_url="https://example.test/runs/3/jobs")

    jobs = provider.fetch_run_jobs(run)

    assert client.list_jobs.call_count == 2
    assert len(jobs.jobs) == 1
