"""
Job Classifier - picks the timed step of a job and assigns it to an OS bucket.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ci_step_stats.ci_providers.models import OS_BUCKET_ORDER, Job, OSBucket, Step
from ci_step_stats.services.duration import duration
from ci_step_stats.services.exceptions import MissingStepError, TimestampParseError

logger = logging.getLogger(__name__)

# Jobs of the older build variant are left out of the report
EXCLUDED_JOB_MARKER = "build-v1"


class ClassificationOutcome(str, Enum):
    BUCKETED = "bucketed"
    EXCLUDED = "excluded"
    UNRECOGNIZED = "unrecognized"
    SKIPPED = "skipped"  # Timed step missing and skipping enabled


@dataclass(frozen=True)
class Classification:
    outcome: ClassificationOutcome
    bucket: Optional[OSBucket] = None
    seconds: Optional[float] = None


def is_excluded(job_name: str) -> bool:
    return EXCLUDED_JOB_MARKER in job_name


def match_bucket(job_name: str) -> Optional[OSBucket]:
    """Return the first OS bucket whose marker appears in the job name."""
    for bucket in OS_BUCKET_ORDER:
        if bucket.marker in job_name:
            return bucket
    return None


class JobClassifier:
    """
    Classifies jobs into OS buckets using the duration of one step.

    The timed step is looked up by name when ``step_name`` is given,
    otherwise by its zero-based position ``step_index``.
    """

    def __init__(
        self,
        step_index: int = 2,
        step_name: Optional[str] = None,
        skip_missing_step: bool = False,
    ):
        self.step_index = step_index
        self.step_name = step_name
        self.skip_missing_step = skip_missing_step

    def _describe_step(self) -> str:
        if self.step_name:
            return f"step named '{self.step_name}'"
        return f"step #{self.step_index + 1}"

    def find_timed_step(self, job: Job) -> Step:
        """
        Raises:
            MissingStepError: If the job has no such step
        """
        if self.step_name:
            for step in job.steps:
                if step.name == self.step_name:
                    return step
        elif 0 <= self.step_index < len(job.steps):
            return job.steps[self.step_index]

        raise MissingStepError(
            f"Job '{job.name}' has no {self._describe_step()} "
            f"({len(job.steps)} steps)",
            job_name=job.name,
        )

    def classify(self, job: Job) -> Classification:
        if is_excluded(job.name):
            logger.debug(f"Excluding job '{job.name}'")
            return Classification(ClassificationOutcome.EXCLUDED)

        try:
            step = self.find_timed_step(job)
        except MissingStepError:
            if not self.skip_missing_step:
                raise
            logger.warning(f"Skipping job '{job.name}': no {self._describe_step()}")
            return Classification(ClassificationOutcome.SKIPPED)

        step.runtime_seconds = duration(step.started_at, step.completed_at)
        if job.started_at and job.completed_at:
            try:
                job.runtime_seconds = duration(job.started_at, job.completed_at)
            except TimestampParseError as exc:
                logger.debug(f"No runtime for job '{job.name}': {exc}")

        bucket = match_bucket(job.name)
        if bucket is None:
            logger.warning(
                f"Job '{job.name}' matches no OS marker; expected one of "
                f"{[b.marker for b in OS_BUCKET_ORDER]}"
            )
            return Classification(ClassificationOutcome.UNRECOGNIZED)

        return Classification(
            ClassificationOutcome.BUCKETED, bucket=bucket, seconds=step.runtime_seconds
        )
