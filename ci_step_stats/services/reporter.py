from typing import List, Optional, TextIO

from ci_step_stats.ci_providers.models import OS_BUCKET_ORDER
from ci_step_stats.services.aggregator import StepDurationSamples
from ci_step_stats.services.statistics_service import DurationStatistics, compute_statistics

HEADER_WIDTH = 34


def format_header(label: str) -> str:
    return f"{label:=^{HEADER_WIDTH}}"


def format_report(
    label: str, stats: Optional[DurationStatistics], header: Optional[str] = None
) -> List[str]:
    lines = [header or format_header(label)]
    if stats is None:
        lines.append("No data")
        return lines

    lines.extend(
        [
            f"Mean: {stats.mean:.2f}",
            f"Median: {stats.median:.2f}",
            f"Min: {stats.min:.2f}",
            f"Max: {stats.max:.2f}",
            f"Standard Deviation: {stats.stddev:.2f}",
        ]
    )
    return lines


def report(
    label: str,
    stats: Optional[DurationStatistics],
    stream: Optional[TextIO] = None,
    header: Optional[str] = None,
) -> None:
    """Print one bucket's summary (stdout by default)."""
    for line in format_report(label, stats, header=header):
        print(line, file=stream)


def report_all(samples: StepDurationSamples, stream: Optional[TextIO] = None) -> None:
    """Print every bucket in the fixed macOS, Windows, Ubuntu order."""
    for bucket in OS_BUCKET_ORDER:
        report(
            bucket.label,
            compute_statistics(samples.get(bucket)),
            stream=stream,
            header=bucket.header,
        )
