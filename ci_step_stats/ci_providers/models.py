from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class CIProvider(str, Enum):
    """Supported CI/CD providers."""

    GITHUB_ACTIONS = "github_actions"


class OSBucket(str, Enum):
    """Operating-system groups that step durations are reported under."""

    MACOS = "macos"
    WINDOWS = "windows"
    UBUNTU = "ubuntu"

    @property
    def marker(self) -> str:
        """Case-sensitive substring of the job name that selects this bucket."""
        return _OS_MARKERS[self]

    @property
    def label(self) -> str:
        return _OS_LABELS[self]

    @property
    def header(self) -> str:
        """Section header printed above this bucket's statistics."""
        return _OS_HEADERS[self]


_OS_MARKERS = {
    OSBucket.MACOS: "macos-12",
    OSBucket.WINDOWS: "windows-2022",
    OSBucket.UBUNTU: "ubuntu-22.04",
}

_OS_LABELS = {
    OSBucket.MACOS: "macos",
    OSBucket.WINDOWS: "windows",
    OSBucket.UBUNTU: "Ubuntu",
}

_OS_HEADERS = {
    OSBucket.MACOS: "==============macos===============",
    OSBucket.WINDOWS: "=============windows==============",
    OSBucket.UBUNTU: "==============Ubuntu===============",
}

# GitHub caps per_page at 100
MAX_PER_PAGE = 100

# Report order and marker matching order
OS_BUCKET_ORDER = [OSBucket.MACOS, OSBucket.WINDOWS, OSBucket.UBUNTU]


class Step(BaseModel):
    """One step within a workflow job."""

    name: str
    status: Optional[str] = None
    conclusion: Optional[str] = None
    number: Optional[int] = None

    # Raw RFC 3339 strings, parsed only for the timed step
    started_at: Optional[str] = None
    completed_at: Optional[str] = None

    runtime_seconds: Optional[float] = None


class Job(BaseModel):
    """Workflow job with its ordered steps."""

    job_id: str
    name: str
    labels: List[str] = Field(default_factory=list)
    status: Optional[str] = None
    conclusion: Optional[str] = None
    started_at: Optional[str] = None
    completed_at: Optional[str] = None
    steps: List[Step] = Field(default_factory=list)

    runtime_seconds: Optional[float] = None


class JobPage(BaseModel):
    """Decoded response of the job-listing endpoint."""

    total_count: int = 0
    jobs: List[Job] = Field(default_factory=list)


class WorkflowRun(BaseModel):
    """Reference to one workflow run and its job list."""

    run_id: str = Field(..., description="Unique workflow run identifier")
    jobs_url: str
    name: Optional[str] = None
    head_branch: Optional[str] = None
    status: Optional[str] = None
    conclusion: Optional[str] = None
    created_at: Optional[str] = None


class WorkflowRunPage(BaseModel):
    """Decoded response of the run-listing endpoint."""

    total_count: int = 0
    workflow_runs: List[WorkflowRun] = Field(default_factory=list)


class RunQuery(BaseModel):
    """Fixed scope of the run-listing query."""

    repo_name: str = Field(..., description="Full repository name (owner/repo)")
    branch: Optional[str] = None
    status: Optional[str] = None
    created_after: Optional[str] = None


class ProviderConfig(BaseModel):
    """Configuration for a CI provider connection."""

    provider: CIProvider
    base_url: Optional[str] = None  # API base URL
    token: Optional[str] = None  # Auth token
    timeout: float = 120.0
    strict_status: bool = True
