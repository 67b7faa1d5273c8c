# Core exports
from .base import CIProviderInterface
from .config import get_configured_provider, get_provider_config, get_run_query
from .github import GitHubActionsProvider
from .models import (
    MAX_PER_PAGE,
    OS_BUCKET_ORDER,
    CIProvider,
    Job,
    JobPage,
    OSBucket,
    ProviderConfig,
    RunQuery,
    Step,
    WorkflowRun,
    WorkflowRunPage,
)

__all__ = [
    # Enums
    "CIProvider",
    "OSBucket",
    "OS_BUCKET_ORDER",
    "MAX_PER_PAGE",
    # Models
    "Job",
    "JobPage",
    "Step",
    "WorkflowRun",
    "WorkflowRunPage",
    "RunQuery",
    "ProviderConfig",
    # Interface
    "CIProviderInterface",
    "GitHubActionsProvider",
    # Config helpers
    "get_provider_config",
    "get_configured_provider",
    "get_run_query",
]
