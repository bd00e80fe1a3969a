"""
Error taxonomy for LearnGitHub API.

Every failure the API reports is an AnalysisError; main.py renders it as
{"error": message} with the given status code.
"""

# GitHub answers 403 (primary limit) or 429 (secondary limit) when throttling
RATE_LIMIT_STATUSES = (403, 429)

INVALID_URL_MESSAGE = "Invalid GitHub URL. Must look like https://github.com/owner/repo"
INVALID_BODY_MESSAGE = "Request body must be JSON with a 'repoUrl' string"
NOT_FOUND_MESSAGE = "Repository not found. Check the URL, or whether the repository is private."
RATE_LIMITED_MESSAGE = "GitHub API rate limit reached. Please try again later."
UPSTREAM_MESSAGE = "Unable to access the GitHub repository"
GENERIC_MESSAGE = "Analysis failed. Please try again."


class AnalysisError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __repr__(self):
        return f"<AnalysisError(status_code={self.status_code}, message='{self.message}')>"


def upstream_error(status_code: int | None) -> AnalysisError:
    """Map a failed repository fetch to the error reported to the caller."""
    if status_code is None:
        return AnalysisError(500, GENERIC_MESSAGE)
    if status_code == 404:
        return AnalysisError(404, NOT_FOUND_MESSAGE)
    if status_code in RATE_LIMIT_STATUSES:
        return AnalysisError(429, RATE_LIMITED_MESSAGE)
    return AnalysisError(status_code, UPSTREAM_MESSAGE)
