from typing import Optional

from ci_step_stats.config import Settings, settings

from .github import GitHubActionsProvider
from .models import CIProvider, ProviderConfig, RunQuery


def get_provider_config(
    provider_type: CIProvider, app_settings: Optional[Settings] = None
) -> ProviderConfig:
    """
    Get ProviderConfig for a CI provider using app settings.

    Raises:
        GithubConfigurationError: If the API token is missing
    """
    app_settings = app_settings or settings

    return ProviderConfig(
        provider=provider_type,
        token=app_settings.validate_credentials(),
        base_url=app_settings.GITHUB_API_URL,
        timeout=app_settings.REQUEST_TIMEOUT,
        strict_status=app_settings.STRICT_HTTP_STATUS,
    )


def get_run_query(app_settings: Optional[Settings] = None) -> RunQuery:
    """Build the fixed run-listing scope from app settings."""
    app_settings = app_settings or settings

    return RunQuery(
        repo_name=app_settings.GITHUB_REPOSITORY,
        branch=app_settings.RUN_BRANCH or None,
        status=app_settings.RUN_STATUS or None,
        created_after=app_settings.RUN_CREATED_AFTER or None,
    )


def get_configured_provider(app_settings: Optional[Settings] = None) -> GitHubActionsProvider:
    """
    Get a GitHub Actions provider configured from app settings.

    Raises:
        GithubConfigurationError: If the API token is missing
    """
    config = get_provider_config(CIProvider.GITHUB_ACTIONS, app_settings)
    return GitHubActionsProvider(config)
