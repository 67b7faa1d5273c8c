from abc import ABC, abstractmethod

from .models import CIProvider, JobPage, ProviderConfig, RunQuery, WorkflowRun, WorkflowRunPage


class CIProviderInterface(ABC):
    def __init__(self, config: ProviderConfig):
        self.config = config

    @property
    @abstractmethod
    def provider_type(self) -> CIProvider:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def fetch_runs(self, query: RunQuery, page: int = 1, per_page: int = 100) -> WorkflowRunPage:
        """
        Fetch one page of workflow runs from the CI provider.

        Args:
            query: Repository and filters the runs must match
            page: Page number for pagination (1-indexed)
            per_page: Number of runs per page

        Returns:
            WorkflowRunPage with the reported total count and this page's runs
        """
        pass

    @abstractmethod
    def fetch_run_jobs(self, run: WorkflowRun) -> JobPage:
        """
        Fetch the jobs (with their steps) of a workflow run.

        Args:
            run: Run reference returned by fetch_runs

        Returns:
            JobPage with every job of the run
        """
        pass

    def close(self) -> None:
        """Release any connection held by the provider."""
        pass

    def __enter__(self) -> "CIProviderInterface":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
