"""GitHub client adapter for the githubkit library."""

import asyncio
from functools import wraps
from typing import Any, Awaitable, Callable, Iterable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import Issue, IssueSearchResultItem
from semver import Version

from releases_site.configuration.models import GitHubAuthenticationType
from releases_site.utils.constants import ISSUES_PER_PAGE, SEARCH_RESULTS_LIMIT
from releases_site.utils.github import split_repository_in_configuration
from releases_site.versions.models import MilestoneRef, PRLabel, StabilizationPR, TrackedIssue

from .client import GitHubClient, get_github_client

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code == 422:
                try:
                    error_data = exc.response.json()
                except ValueError:
                    error_data = {}
                message = error_data.get("message", "Unprocessable Entity")
                errors = error_data.get("errors", [])
                logger.error(
                    "GitHub 422 Unprocessable Entity",
                    function=func.__name__,
                    message=message,
                    errors=errors,
                    status_code=422,
                )
                raise ValueError(f"GitHub 422 error in {func.__name__}: {message} | errors: {errors}") from exc
            raise

    return wrapper  # type: ignore


def is_stabilization_title(title: str, search_term: str) -> bool:
    """Check whether a pull request title announces a (partial) stabilization."""
    title = title.lower()
    return title.startswith(search_term) or title.startswith(f"partial {search_term}") or title.startswith(f"partially {search_term}")


def _optional_str(value: Any) -> str | None:
    # githubkit marks absent fields with a non-string UNSET sentinel.
    return value if isinstance(value, str) else None


class GitHubKitAdapter:
    """GitHub client adapter for the githubkit library.

    Maps the tracker's issue and pull request models onto the narrow records
    the rest of the application works with.
    """

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    @classmethod
    async def create(
        cls,
        repo: str,
        github_auth_type: GitHubAuthenticationType,
        github_pat_token: str | None = None,
        github_api_url: str = "https://api.github.com",
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            repo: Repository in 'owner/repo' format
            github_auth_type: Type of authentication (PAT or anonymous)
            github_pat_token: Personal access token (required for PAT auth)
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        owner, repo_name = split_repository_in_configuration(repo=repo)
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
            github_auth_type=github_auth_type.value,
        )
        client = await get_github_client(
            github_auth_type=github_auth_type,
            github_pat_token=github_pat_token,
            github_api_url=github_api_url,
        )
        return cls(client, owner, repo_name)

    async def _list_issues_page(self, page: int, per_page: int, **kwargs: Any) -> list[Issue]:
        logger.debug("Fetching issues page", page=page, per_page=per_page, **kwargs)
        response: Response[list[Issue]] = await self.client.rest.issues.async_list_for_repo(
            owner=self.owner,
            repo=self.repo_name,
            per_page=per_page,
            page=page,
            **kwargs,
        )
        return response.parsed_data

    @handle_github_422
    async def fetch_release_milestones(self, label: str, limit: int, per_page: int = ISSUES_PER_PAGE) -> dict[Version, MilestoneRef]:
        """Collect the milestones of the most recently created release-note issues.

        Closed issues carrying ``label`` are scanned newest first. Every
        milestone whose title is a version is recorded once, and scanning
        stops as soon as more than ``limit`` versions are known.
        """
        milestones: dict[Version, MilestoneRef] = {}
        page: int = 1
        while True:
            issues = await self._list_issues_page(
                page,
                per_page,
                labels=label,
                state="closed",
                sort="created",
                direction="desc",
            )
            for issue in issues:
                if not issue.milestone:
                    continue
                try:
                    version = Version.parse(issue.milestone.title)
                except ValueError:
                    logger.debug("Ignoring milestone without a version title", milestone=issue.milestone.title)
                    continue
                if version not in milestones:
                    milestones[version] = MilestoneRef(version=version, number=issue.milestone.number)
                if len(milestones) > limit:
                    logger.info("Collected release milestones", versions=sorted(str(v) for v in milestones))
                    return milestones
            if len(issues) < per_page:
                break
            page += 1

        logger.info("Collected release milestones", versions=sorted(str(v) for v in milestones))
        return milestones

    @handle_github_422
    async def fetch_milestone_issues(self, milestone_number: int, label: str, per_page: int = ISSUES_PER_PAGE) -> list[TrackedIssue]:
        """List every closed issue of a milestone that carries ``label``."""
        tracked: list[TrackedIssue] = []
        page: int = 1
        while True:
            issues = await self._list_issues_page(
                page,
                per_page,
                milestone=str(milestone_number),
                labels=label,
                state="closed",
                sort="created",
                direction="asc",
            )
            tracked.extend(TrackedIssue(title=issue.title, url=issue.html_url, closed_at=issue.closed_at) for issue in issues)
            if len(issues) < per_page:
                break
            page += 1

        logger.debug("Fetched milestone issues", milestone=milestone_number, issues=len(tracked))
        return tracked

    @handle_github_422
    async def search_open_pull_requests(self, query: str, per_page: int = ISSUES_PER_PAGE, page_delay: float = 0.0) -> list[IssueSearchResultItem]:
        """Search open pull requests of the repository, newest first, across all result pages."""
        q = f"is:pr is:open repo:{self.owner}/{self.repo_name} {query}"
        items: list[IssueSearchResultItem] = []
        page: int = 1
        while True:
            logger.debug("Searching pull requests", q=q, page=page)
            response = await self.client.rest.search.async_issues_and_pull_requests(
                q=q,
                sort="created",
                order="desc",
                per_page=per_page,
                page=page,
            )
            results = response.parsed_data
            items.extend(results.items)
            if len(results.items) < per_page or len(items) >= min(results.total_count, SEARCH_RESULTS_LIMIT):
                break
            page += 1
            if page_delay:
                # The search API has a much lower rate limit than the rest of the REST API.
                await asyncio.sleep(page_delay)
        return items

    async def fetch_stabilization_prs(self, search_terms: Iterable[str], page_delay: float = 0.0) -> dict[int, StabilizationPR]:
        """Find open pull requests whose title starts by stabilizing something.

        Results of the individual searches are merged by pull request id.
        """
        stabilization_prs: dict[int, StabilizationPR] = {}
        for search_term in search_terms:
            logger.info("Searching for stabilization PRs", search_term=search_term)
            for item in await self.search_open_pull_requests(f"in:title {search_term}", page_delay=page_delay):
                if not is_stabilization_title(item.title, search_term):
                    continue
                stabilization_prs[item.id] = StabilizationPR(
                    id=item.id,
                    title=item.title,
                    number=item.number,
                    url=item.html_url,
                    created_at=item.created_at,
                    labels=[
                        PRLabel(name=label.name, description=_optional_str(label.description))
                        for label in item.labels
                        if _optional_str(label.name) is not None
                    ],
                )

        logger.info("Found stabilization PRs", count=len(stabilization_prs))
        return stabilization_prs
