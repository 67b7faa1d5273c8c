"""
Pagination Aggregator - walks the run listing page by page and collects
step durations per OS bucket.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ci_step_stats.ci_providers.base import CIProviderInterface
from ci_step_stats.ci_providers.models import MAX_PER_PAGE, OS_BUCKET_ORDER, OSBucket, RunQuery
from ci_step_stats.services.job_classifier import ClassificationOutcome, JobClassifier

logger = logging.getLogger(__name__)

DEFAULT_PER_PAGE = 100
DEFAULT_MAX_TOTAL_RUNS = 1000


def _empty_buckets() -> Dict[OSBucket, List[float]]:
    return {bucket: [] for bucket in OS_BUCKET_ORDER}


@dataclass
class StepDurationSamples:
    """Duration samples per OS bucket, plus counts of jobs that gave none."""

    samples: Dict[OSBucket, List[float]] = field(default_factory=_empty_buckets)
    runs_seen: int = 0
    jobs_seen: int = 0
    excluded: int = 0
    unrecognized: int = 0
    skipped: int = 0
    dropped_negative: int = 0

    def add(self, bucket: OSBucket, seconds: float) -> bool:
        """Record a sample; negative durations are refused."""
        if seconds < 0:
            self.dropped_negative += 1
            logger.warning(f"Dropping negative duration {seconds}s for {bucket.value}")
            return False
        self.samples[bucket].append(seconds)
        return True

    def get(self, bucket: OSBucket) -> List[float]:
        return self.samples[bucket]

    @property
    def total_samples(self) -> int:
        return sum(len(values) for values in self.samples.values())


def page_count(max_total_runs: int, per_page: int) -> int:
    """Upper bound on pages to request, rounded up."""
    if per_page <= 0:
        raise ValueError(f"per_page must be positive, got {per_page}")
    return max(math.ceil(max_total_runs / per_page), 0)


def aggregate_step_durations(
    provider: CIProviderInterface,
    query: RunQuery,
    classifier: JobClassifier,
    per_page: int = DEFAULT_PER_PAGE,
    max_total_runs: int = DEFAULT_MAX_TOTAL_RUNS,
    samples: Optional[StepDurationSamples] = None,
) -> StepDurationSamples:
    """
    Fetch run pages until exhausted and classify every job of every run.

    The page size is capped at the API maximum before the page ceiling is
    derived, so the ceiling counts the pages actually requested. Stops early
    when a page reports a total count of zero or carries no runs.
    Any error raised by the provider or classifier propagates and aborts
    the aggregation.
    """
    samples = samples if samples is not None else StepDurationSamples()
    if per_page > MAX_PER_PAGE:
        logger.info(f"Page size {per_page} exceeds the API limit, using {MAX_PER_PAGE}")
        per_page = MAX_PER_PAGE
    max_pages = page_count(max_total_runs, per_page)

    for page in range(1, max_pages + 1):
        run_page = provider.fetch_runs(query, page=page, per_page=per_page)
        if run_page.total_count == 0:
            logger.info(f"No runs reported on page {page}, stopping")
            break
        if not run_page.workflow_runs:
            logger.info(f"Page {page} is empty, stopping")
            break

        logger.info(
            f"Page {page}/{max_pages}: {len(run_page.workflow_runs)} runs "
            f"(total {run_page.total_count})"
        )

        for run in run_page.workflow_runs:
            samples.runs_seen += 1
            job_page = provider.fetch_run_jobs(run)

            for job in job_page.jobs:
                samples.jobs_seen += 1
                result = classifier.classify(job)

                if result.outcome == ClassificationOutcome.BUCKETED:
                    samples.add(result.bucket, result.seconds)
                elif result.outcome == ClassificationOutcome.EXCLUDED:
                    samples.excluded += 1
                elif result.outcome == ClassificationOutcome.UNRECOGNIZED:
                    samples.unrecognized += 1
                else:
                    samples.skipped += 1

    logger.info(
        f"Collected {samples.total_samples} samples from {samples.jobs_seen} jobs "
        f"in {samples.runs_seen} runs ({samples.excluded} excluded, "
        f"{samples.unrecognized} unrecognized, {samples.skipped} skipped, "
        f"{samples.dropped_negative} negative)"
    )
    return samples
