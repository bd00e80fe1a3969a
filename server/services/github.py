import base64
import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

import httpx
from dotenv import load_dotenv

# Load .env from the server directory explicitly
env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), '.env')
load_dotenv(env_path)

logger = logging.getLogger(__name__)

GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com")
REQUEST_TIMEOUT = 30.0
USER_AGENT = "LearnGitHub"

T = TypeVar("T")


class FetchStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"  # request failed but a default value stands in
    FAILED = "failed"


@dataclass
class FetchResult(Generic[T]):
    """Outcome of one GitHub read."""
    status: FetchStatus
    data: T
    status_code: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == FetchStatus.OK

    @property
    def failed(self) -> bool:
        return self.status == FetchStatus.FAILED


def _error_message(response: httpx.Response) -> str:
    try:
        return response.json().get("message") or response.reason_phrase
    except (ValueError, AttributeError):
        return response.reason_phrase


class GitHubRestClient:
    """
    Minimal GitHub REST client for the four reads an analysis needs.

    Use as an async context manager; one underlying httpx.AsyncClient is
    shared by all reads made inside the block.
    """

    def __init__(self, token: str | None = None, base_url: str | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.token = token if token is not None else os.getenv("GITHUB_TOKEN")
        self.base_url = (base_url or GITHUB_API_URL).rstrip("/")
        self.headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": USER_AGENT,
        }
        if self.token:
            self.headers["Authorization"] = f"Bearer {self.token}"
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GitHubRestClient":
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=REQUEST_TIMEOUT,
            transport=self._transport,
            follow_redirects=True,  # renamed repositories answer 301
        )
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get(self, path: str, params: dict | None = None) -> httpx.Response:
        if self._client is None:
            raise RuntimeError("GitHubRestClient must be used inside 'async with'")
        return await self._client.get(path, params=params)

    async def fetch_repository(self, owner: str, repo: str) -> FetchResult[dict[str, Any] | None]:
        """Fetch the repository record. Any failure here is fatal to the analysis."""
        try:
            response = await self._get(f"/repos/{owner}/{repo}")
        except httpx.HTTPError as e:
            logger.error(f"Repository fetch failed for {owner}/{repo}: {e}")
            return FetchResult(FetchStatus.FAILED, None, error=str(e))

        if not response.is_success:
            logger.warning(f"Repository fetch for {owner}/{repo} returned {response.status_code}")
            return FetchResult(
                FetchStatus.FAILED,
                None,
                status_code=response.status_code,
                error=_error_message(response),
            )

        return FetchResult(FetchStatus.OK, response.json(), status_code=response.status_code)

    async def fetch_languages(self, owner: str, repo: str) -> FetchResult[dict[str, int]]:
        """Fetch the language -> bytes map. Degrades to {}."""
        try:
            response = await self._get(f"/repos/{owner}/{repo}/languages")
            if not response.is_success:
                logger.info(f"Languages fetch for {owner}/{repo} returned {response.status_code}")
                return FetchResult(FetchStatus.EMPTY, {}, status_code=response.status_code)
            languages = {str(name): int(count) for name, count in response.json().items()}
        except (httpx.HTTPError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Could not fetch languages for {owner}/{repo}: {e}")
            return FetchResult(FetchStatus.EMPTY, {}, error=str(e))

        return FetchResult(FetchStatus.OK, languages, status_code=response.status_code)

    async def fetch_readme(self, owner: str, repo: str) -> FetchResult[str]:
        """Fetch and decode the README. Degrades to ""."""
        try:
            response = await self._get(f"/repos/{owner}/{repo}/readme")
            if not response.is_success:
                logger.info(f"README fetch for {owner}/{repo} returned {response.status_code}")
                return FetchResult(FetchStatus.EMPTY, "", status_code=response.status_code)
            content = response.json()["content"]
            readme = base64.b64decode(content).decode("utf-8", errors="replace")
        except (httpx.HTTPError, ValueError, TypeError, KeyError) as e:
            logger.warning(f"Could not fetch README for {owner}/{repo}: {e}")
            return FetchResult(FetchStatus.EMPTY, "", error=str(e))

        return FetchResult(FetchStatus.OK, readme, status_code=response.status_code)

    async def fetch_contributor_count(self, owner: str, repo: str) -> FetchResult[int]:
        """
        Count contributors from the first page of a per_page=1 listing.

        With one contributor per page, the page number of the "last" link is
        the contributor count. Degrades to 0.
        """
        try:
            response = await self._get(
                f"/repos/{owner}/{repo}/contributors",
                params={"per_page": 1},
            )
            # 204 means the repository has no commits yet
            if response.status_code == 204:
                return FetchResult(FetchStatus.OK, 0, status_code=204)
            if not response.is_success:
                logger.info(f"Contributors fetch for {owner}/{repo} returned {response.status_code}")
                return FetchResult(FetchStatus.EMPTY, 0, status_code=response.status_code)

            if "link" in response.headers:
                last = response.links.get("last")
                count = int(httpx.URL(last["url"]).params.get("page", 1)) if last else 1
            else:
                count = len(response.json())
        except (httpx.HTTPError, ValueError, TypeError, KeyError) as e:
            logger.warning(f"Could not fetch contributors for {owner}/{repo}: {e}")
            return FetchResult(FetchStatus.EMPTY, 0, error=str(e))

        return FetchResult(FetchStatus.OK, count, status_code=response.status_code)


async def get_github_client():
    """FastAPI dependency: one GitHub client per request."""
    async with GitHubRestClient() as client:
        yield client
