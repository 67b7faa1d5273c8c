from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from ci_step_stats.services.github.exceptions import GithubConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application
    APP_NAME: str = "CI Step Timing Statistics"
    APP_VERSION: str = "1.0.0"
    ENV: str = "dev"  # Environment: "dev", "prod"

    # GitHub
    GITHUB_API_URL: str = "https://api.github.com"
    GIT_TOKEN: Optional[str] = None
    GITHUB_REPOSITORY: str = "mathworks/ci-configuration-examples"
    REQUEST_TIMEOUT: float = 120.0  # Seconds per request
    STRICT_HTTP_STATUS: bool = True  # Abort on non-2xx instead of decoding anyway

    # --- Run query scope ---
    RUN_BRANCH: str = "hourly"
    RUN_STATUS: str = "success"
    RUN_CREATED_AFTER: Optional[str] = "2023-04-12"  # Lower bound on created date

    # --- Pagination ---
    RUNS_PER_PAGE: int = 100  # GitHub maximum
    MAX_TOTAL_RUNS: int = 1000  # Ceiling used to bound the page count

    # --- Timed step ---
    TIMED_STEP_INDEX: int = 2  # Zero-based position, the third step
    TIMED_STEP_NAME: Optional[str] = None  # Overrides the index when set
    SKIP_JOBS_WITHOUT_STEP: bool = False

    def validate_credentials(self) -> str:
        """Return the API token, failing when it is missing or blank."""
        token = (self.GIT_TOKEN or "").strip()
        if not token:
            raise GithubConfigurationError(
                "GIT_TOKEN is not set. Add it to the environment or the .env file."
            )
        return token


settings = Settings()
