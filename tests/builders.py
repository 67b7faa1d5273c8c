"""Builders for job fixtures and GitHub API payloads used across tests."""

from typing import List, Optional, Tuple

from ci_step_stats.ci_providers.models import Job, Step


def make_step(
    name: str,
    started_at: Optional[str] = "2023-04-12T10:00:00Z",
    completed_at: Optional[str] = "2023-04-12T10:00:01Z",
) -> Step:
    return Step(
        name=name,
        status="completed",
        conclusion="success",
        started_at=started_at,
        completed_at=completed_at,
    )


TEN_SECONDS = ("2023-04-12T10:00:00Z", "2023-04-12T10:00:10Z")


def make_job(
    name: str,
    timed: Tuple[str, str] = TEN_SECONDS,
    steps: Optional[List[Step]] = None,
) -> Job:
    """Job whose third step ("Setup MATLAB") spans the ``timed`` interval."""
    if steps is None:
        steps = [
            make_step("Set up job"),
            make_step("Check out repository"),
            make_step("Setup MATLAB", *timed),
            make_step("Run tests"),
        ]
    return Job(job_id="1", name=name, status="completed", conclusion="success", steps=steps)


def job_payload(job_id: int, name: str, step_span: Tuple[str, str]) -> dict:
    """Job as returned by the GitHub job-listing endpoint."""
    return {
        "id": job_id,
        "name": name,
        "labels": [],
        "status": "completed",
        "conclusion": "success",
        "started_at": "2023-04-12T10:00:00Z",
        "completed_at": "2023-04-12T10:05:00Z",
        "steps": [
            {
                "name": "Set up job",
                "status": "completed",
                "conclusion": "success",
                "number": 1,
                "started_at": "2023-04-12T10:00:00Z",
                "completed_at": "2023-04-12T10:00:01Z",
            },
            {
                "name": "Check out repository",
                "status": "completed",
                "conclusion": "success",
                "number": 2,
                "started_at": "2023-04-12T10:00:01Z",
                "completed_at": "2023-04-12T10:00:02Z",
            },
            {
                "name": "Setup MATLAB",
                "status": "completed",
                "conclusion": "success",
                "number": 3,
                "started_at": step_span[0],
                "completed_at": step_span[1],
            },
        ],
    }
