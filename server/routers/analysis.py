import logging
import re
from typing import Any

from fastapi import APIRouter, Depends, Request

from errors import AnalysisError, GENERIC_MESSAGE, INVALID_URL_MESSAGE, upstream_error
from rate_limit import ANALYZE_RATE_LIMIT, limiter
from planner import analyze_languages, build_project_summary, generate_learning_tasks
from planner.schemas import AnalyzeRequest, ErrorResponse, LanguageAnalysis, RepoInfo, RepoReport
from services.github import GitHubRestClient, get_github_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analysis"])

# owner/repo, optionally followed by a deeper path, query or fragment
GITHUB_REPO_URL = re.compile(
    r"^(?:https?://)?(?:www\.)?github\.com/([A-Za-z0-9_.-]+)/([A-Za-z0-9_.-]+)(?:[/?#].*)?$",
    re.IGNORECASE,
)

NO_DESCRIPTION = "This project doesn't have a description yet."

# Well-known agent / RL projects offered as starting points in the UI
FEATURED_REPOS = [
    "https://github.com/openai/gym",
    "https://github.com/ray-project/ray",
    "https://github.com/deepmind/lab",
    "https://github.com/Unity-Technologies/ml-agents",
    "https://github.com/deepmind/pysc2",
    "https://github.com/tensorflow/agents",
    "https://github.com/openai/spinningup",
    "https://github.com/openai/multiagent-particle-envs",
]


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def parse_repo_url(repo_url: str) -> tuple[str, str]:
    """Parse and validate GitHub repo URL. Returns (owner, repo_name)."""
    match = GITHUB_REPO_URL.match(repo_url.strip())
    if not match:
        raise AnalysisError(400, INVALID_URL_MESSAGE)

    owner, repo_name = match.group(1), match.group(2)
    # Remove .git suffix if present
    if repo_name.endswith(".git"):
        repo_name = repo_name[:-4]
    if not repo_name:
        raise AnalysisError(400, INVALID_URL_MESSAGE)

    return owner, repo_name


def build_repo_info(repo: dict[str, Any], analysis: LanguageAnalysis, contributors: int) -> RepoInfo:
    """Merge the raw repository record with the language analysis."""
    name = repo.get("name", "")
    stars = repo.get("stargazers_count") or 0

    return RepoInfo(
        name=name,
        owner=(repo.get("owner") or {}).get("login", ""),
        description=repo.get("description") or NO_DESCRIPTION,
        language=analysis.primary,
        secondary_languages=analysis.secondary,
        is_multi_language=analysis.is_multi_language,
        language_distribution=analysis.distribution,
        stars=stars,
        forks=repo.get("forks_count") or 0,
        topics=repo.get("topics") or [],
        url=repo.get("html_url", ""),
        size=repo.get("size") or 0,
        default_branch=repo.get("default_branch"),
        created_at=repo.get("created_at"),
        updated_at=repo.get("updated_at"),
        open_issues=repo.get("open_issues_count") or 0,
        contributors=contributors,
        has_wiki=bool(repo.get("has_wiki")),
        has_pages=bool(repo.get("has_pages")),
        summary=build_project_summary(
            name=name,
            description=repo.get("description"),
            size_kb=repo.get("size"),
            stars=stars,
            contributors=contributors,
            language_analysis=analysis,
        ),
    )


async def build_report(github: GitHubRestClient, owner: str, repo_name: str) -> RepoReport:
    """
    Fetch everything GitHub knows about the repository and build the plan.

    Only the repository record is required; languages, README and
    contributors fall back to empty values when their fetch fails.
    """
    # 1. Repository record (fatal on failure)
    repo_result = await github.fetch_repository(owner, repo_name)
    if repo_result.failed:
        raise upstream_error(repo_result.status_code)
    repo = repo_result.data

    # 2. Secondary reads (degrade gracefully)
    languages_result = await github.fetch_languages(owner, repo_name)
    readme_result = await github.fetch_readme(owner, repo_name)
    contributors_result = await github.fetch_contributor_count(owner, repo_name)

    degraded = [
        label for label, result in (
            ("languages", languages_result),
            ("readme", readme_result),
            ("contributors", contributors_result),
        )
        if not result.ok
    ]
    if degraded:
        logger.info(f"Analyzing {owner}/{repo_name} without: {', '.join(degraded)}")

    # 3. Analysis
    languages = languages_result.data
    analysis = analyze_languages(languages)
    tasks = generate_learning_tasks(
        repo,
        languages,
        readme_result.data,
        contributors_result.data,
        analysis,
    )

    logger.info(f"Analyzed {owner}/{repo_name}: primary={analysis.primary}, tasks={len(tasks)}")

    return RepoReport(
        repo_info=build_repo_info(repo, analysis, contributors_result.data),
        learning_tasks=tasks,
    )


# =============================================================================
# API ENDPOINTS
# =============================================================================

@router.post(
    "/analyze",
    response_model=RepoReport,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@limiter.limit(ANALYZE_RATE_LIMIT)
async def analyze_repo(
    request: Request,
    body: AnalyzeRequest,
    github: GitHubRestClient = Depends(get_github_client),
):
    """
    Analyze a GitHub repository.

    Fetches the repository record, languages, README and contributor count,
    classifies the language mix and returns the generated learning plan.
    Nothing is stored; every call analyzes from scratch.
    """
    owner, repo_name = parse_repo_url(body.repo_url)

    try:
        return await build_report(github, owner, repo_name)
    except AnalysisError:
        raise
    except Exception:
        logger.exception(f"Analysis failed for {owner}/{repo_name}")
        raise AnalysisError(500, GENERIC_MESSAGE)


@router.get("/examples")
def featured_repos():
    """Repositories the UI offers as one-click examples."""
    return {"repos": FEATURED_REPOS}
