"""
LearnGitHub API Schema Definitions

Pydantic models defining the API contract for the analysis endpoint.
Fields are snake_case in Python and camelCase on the wire.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# =============================================================================
# ENUMS
# =============================================================================

class Difficulty(str, Enum):
    """Difficulty tier of a learning task (also used as the repo complexity tier)"""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class TaskType(str, Enum):
    """Kind of activity a learning task asks for"""
    READING = "reading"
    CODING = "coding"
    PRACTICE = "practice"


# =============================================================================
# BASE
# =============================================================================

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# LANGUAGE ANALYSIS
# =============================================================================

class LanguageShare(CamelModel):
    """One entry of the language distribution"""
    language: str = Field(..., description="Language name as reported by GitHub")
    percentage: int = Field(..., ge=0, description="Rounded share of total bytes (0-100)")
    bytes: int = Field(..., ge=0, description="Raw byte count")


class LanguageAnalysis(CamelModel):
    """
    Primary/secondary language classification.

    `distribution` is None when the repository reports no languages at all.
    Percentages are rounded independently and may not sum to 100.
    """
    primary: str = Field(..., description="Primary language, or 'Unknown'")
    secondary: list[str] = Field(default_factory=list, description="Up to 3 runner-up languages")
    is_multi_language: bool = Field(False, description="Whether the project mixes programming languages")
    distribution: list[LanguageShare] | None = Field(None, description="Candidate languages with byte shares")


# =============================================================================
# LEARNING TASKS
# =============================================================================

class LearningTask(CamelModel):
    """A single step of the generated learning plan"""
    id: int = Field(..., ge=1, description="Sequential 1-based position in the plan")
    title: str
    description: str
    difficulty: Difficulty
    estimated_time: str = Field(..., description="Free-text time estimate (e.g. '90 min')")
    type: TaskType
    resources: list[str] = Field(default_factory=list, description="Suggested material, in reading order")


# =============================================================================
# REPO INFO / RESPONSE
# =============================================================================

class RepoInfo(CamelModel):
    """Repository metadata merged with the language analysis"""
    name: str
    owner: str
    description: str
    language: str = Field(..., description="Primary language")
    secondary_languages: list[str] = Field(default_factory=list)
    is_multi_language: bool = False
    language_distribution: list[LanguageShare] | None = None
    stars: int = 0
    forks: int = 0
    topics: list[str] = Field(default_factory=list)
    url: str
    size: int = Field(0, description="Repository size in KB as reported by GitHub")
    default_branch: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    open_issues: int = 0
    contributors: int = 0
    has_wiki: bool = False
    has_pages: bool = False
    summary: str = Field("", description="One-paragraph project summary")


class RepoReport(CamelModel):
    """Response for POST /api/analyze"""
    repo_info: RepoInfo
    learning_tasks: list[LearningTask] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Body returned for every failed request"""
    error: str


# =============================================================================
# REQUEST MODELS
# =============================================================================

class AnalyzeRequest(CamelModel):
    """Request body for POST /api/analyze"""
    repo_url: str = Field(..., description="Full GitHub URL to analyze (e.g., https://github.com/user/repo)")
