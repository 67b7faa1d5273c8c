"""
CI Step Timing Statistics
=========================
Collects the duration of one step from every GitHub Actions job matching the
configured query, groups the durations by OS and prints summary statistics.

Usage:
    ci-step-stats [--verbose]

Configuration is read from the environment or a local .env file
(GIT_TOKEN is required).
"""

import argparse
import logging
import sys
from typing import List, Optional

from ci_step_stats.ci_providers import get_configured_provider, get_run_query
from ci_step_stats.config import Settings, settings
from ci_step_stats.services.aggregator import aggregate_step_durations
from ci_step_stats.services.exceptions import StepTimingError
from ci_step_stats.services.github.exceptions import GithubError
from ci_step_stats.services.job_classifier import JobClassifier
from ci_step_stats.services.reporter import report_all

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    # ENV=dev: INFO level with detailed format (default)
    # ENV=prod: WARNING level, minimal logs
    is_dev = settings.ENV.lower() == "dev"
    level = logging.INFO if is_dev else logging.WARNING

    logging.basicConfig(
        level=level,
        format=(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
            if is_dev
            else "%(levelname)s | %(message)s"
        ),
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        # Silence noisy libraries
        logging.getLogger("httpx").setLevel(logging.INFO)
        logging.getLogger("httpcore").setLevel(logging.INFO)


def run(app_settings: Optional[Settings] = None) -> None:
    """Fetch, aggregate and report. Any fatal error propagates."""
    app_settings = app_settings or settings

    classifier = JobClassifier(
        step_index=app_settings.TIMED_STEP_INDEX,
        step_name=app_settings.TIMED_STEP_NAME,
        skip_missing_step=app_settings.SKIP_JOBS_WITHOUT_STEP,
    )
    query = get_run_query(app_settings)

    with get_configured_provider(app_settings) as provider:
        logger.info(f"Collecting step durations for {query.repo_name} via {provider.name}")
        samples = aggregate_step_durations(
            provider,
            query,
            classifier,
            per_page=app_settings.RUNS_PER_PAGE,
            max_total_runs=app_settings.MAX_TOTAL_RUNS,
        )

    report_all(samples)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Report per-OS duration statistics of a GitHub Actions job step"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        run()
    except (GithubError, StepTimingError) as exc:
        logger.error(f"Aborting: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
