"""
Learning Task Generator for LearnGitHub

Turns repository metadata, the language map, the README text and the
contributor count into an ordered learning plan.

Each rule is checked independently and in a fixed order. Task ids come from
a counter that only advances when a task is appended, so ids are always
1..N regardless of which rules fire.

Complexity tier (from repository size in KB):
- advanced:     size > 10000
- intermediate: size > 1000
- beginner:     otherwise
"""

from typing import Any

from .languages import UNKNOWN_LANGUAGE
from .schemas import Difficulty, LanguageAnalysis, LearningTask, TaskType


# =============================================================================
# CONFIGURATION
# =============================================================================

ADVANCED_SIZE_KB = 10000
INTERMEDIATE_SIZE_KB = 1000

SETUP_KEYWORDS = ("install", "setup", "getting started")
TESTING_KEYWORDS = ("test", "testing", "coverage")
DEPLOYMENT_KEYWORDS = ("deploy", "build", "production")

# Languages whose ecosystems make a testing task worthwhile on their own
TEST_HEAVY_LANGUAGES = ("JavaScript", "TypeScript")

# Time estimates per complexity tier
LANGUAGE_DEEP_DIVE_TIME = {
    Difficulty.BEGINNER: "90 min",
    Difficulty.INTERMEDIATE: "2 hours",
    Difficulty.ADVANCED: "3 hours",
}

CORE_LOGIC_TIME = {
    Difficulty.BEGINNER: "1.5 hours",
    Difficulty.INTERMEDIATE: "2.5 hours",
    Difficulty.ADVANCED: "4 hours",
}


def complexity_tier(size_kb: int | None) -> Difficulty:
    """Classify a repository by its reported size in KB."""
    size_kb = size_kb or 0
    if size_kb > ADVANCED_SIZE_KB:
        return Difficulty.ADVANCED
    if size_kb > INTERMEDIATE_SIZE_KB:
        return Difficulty.INTERMEDIATE
    return Difficulty.BEGINNER


def _mentions(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


# =============================================================================
# GENERATOR CLASS
# =============================================================================

class LearningTaskGenerator:
    """
    Builds the learning plan for one repository.

    A generator instance is single-use: construct it with the inputs of one
    request and call `generate()`.
    """

    def __init__(
        self,
        repo: dict[str, Any],
        languages: dict[str, int],
        readme: str,
        contributors: int,
        language_analysis: LanguageAnalysis,
    ):
        self.repo = repo
        self.languages = languages or {}
        self.readme = (readme or "").lower()
        self.contributors = contributors or 0
        self.analysis = language_analysis
        self.complexity = complexity_tier(repo.get("size"))

        self._tasks: list[LearningTask] = []
        self._next_id = 1

    def _add(
        self,
        title: str,
        description: str,
        difficulty: Difficulty,
        estimated_time: str,
        task_type: TaskType,
        resources: list[str],
    ) -> None:
        self._tasks.append(LearningTask(
            id=self._next_id,
            title=title,
            description=description,
            difficulty=difficulty,
            estimated_time=estimated_time,
            type=task_type,
            resources=resources,
        ))
        self._next_id += 1

    def generate(self) -> list[LearningTask]:
        """
        Run every rule in order.

        Returns:
            Ordered list of LearningTask with ids 1..N
        """
        advanced = self.complexity == Difficulty.ADVANCED
        beginner = self.complexity == Difficulty.BEGINNER
        name = self.repo.get("name") or "this project"
        primary = self.analysis.primary

        self._add(
            "Project overview and background",
            f"Learn what {name} is, why it was created, what it aims to do "
            f"and where it sits in the open-source ecosystem",
            Difficulty.BEGINNER,
            "20 min",
            TaskType.READING,
            ["README.md", "Project description", "GitHub page", "Project history"],
        )

        if self.contributors > 1:
            self._add(
                "Understand the open-source community",
                f"Get to know the project's contributors, its main maintainers and "
                f"its contribution rules ({self.contributors} contributors)",
                Difficulty.BEGINNER,
                "15 min",
                TaskType.READING,
                ["Contributors", "CONTRIBUTING.md", "Code of Conduct"],
            )

        if _mentions(self.readme, SETUP_KEYWORDS):
            self._add(
                "Set up the environment and run the project",
                "Follow the project documentation to set up a development "
                "environment, install dependencies and get the project running",
                Difficulty.INTERMEDIATE if advanced else Difficulty.BEGINNER,
                "45 min" if advanced else "30 min",
                TaskType.PRACTICE,
                ["Installation guide", "package.json", "requirements.txt", "Configuration docs"],
            )

        self._add(
            "Analyze the architecture and code structure",
            "Study how files are organized, how the code is split into modules "
            "and how the overall architecture fits together",
            Difficulty.INTERMEDIATE,
            "90 min" if advanced else "60 min",
            TaskType.READING,
            ["Source code", "File structure", "Architecture diagrams", "Design docs"],
        )

        if primary != UNKNOWN_LANGUAGE:
            self._add(
                f"Deep dive into the {primary} stack",
                f"Learn the {primary} stack, frameworks and best practices used "
                f"throughout the project",
                self.complexity,
                LANGUAGE_DEEP_DIVE_TIME[self.complexity],
                TaskType.READING,
                [f"{primary} documentation", "Framework guides", "Best practices", "Performance tuning"],
            )

        if self.analysis.is_multi_language and self.analysis.secondary:
            self._add(
                "Learn the multi-language stack",
                f"Study the other languages and stacks used in the project: "
                f"{', '.join(self.analysis.secondary)}",
                Difficulty.INTERMEDIATE if beginner else Difficulty.ADVANCED,
                "2-3 hours",
                TaskType.READING,
                ["Multi-language modules", "Cross-language integration", "Build system", "FFI/JNI interfaces"],
            )

        self._add(
            "Understand the core features and business logic",
            "Work through the core features, the business logic and the "
            "problem the project solves",
            self.complexity,
            CORE_LOGIC_TIME[self.complexity],
            TaskType.READING,
            ["Core modules", "Business logic", "Feature docs", "API docs"],
        )

        if _mentions(self.readme, TESTING_KEYWORDS) or any(
            language in self.languages for language in TEST_HEAVY_LANGUAGES
        ):
            self._add(
                "Testing strategy and quality assurance",
                "Learn how the project is tested, how test cases are written "
                "and how quality is enforced",
                Difficulty.INTERMEDIATE,
                "90 min",
                TaskType.PRACTICE,
                ["Test files", "Test framework docs", "CI/CD configuration", "Code coverage"],
            )

        if (self.repo.get("open_issues_count") or 0) > 0:
            self._add(
                "Hands-on improvement and contribution",
                "Pick a suitable open issue to fix, or add a new feature to the project",
                Difficulty.ADVANCED,
                "3-6 hours",
                TaskType.CODING,
                ["Open Issues", "Good First Issues", "Contributing guide", "Developer docs"],
            )

        if _mentions(self.readme, DEPLOYMENT_KEYWORDS) or self.repo.get("has_pages"):
            self._add(
                "Deployment and release process",
                "Learn how the project is built, deployed and released",
                Difficulty.INTERMEDIATE if beginner else Difficulty.ADVANCED,
                "2 hours",
                TaskType.PRACTICE,
                ["Deployment docs", "CI/CD configuration", "Dockerfile", "Release notes"],
            )

        if advanced:
            self._add(
                "Performance optimization and scaling",
                "Investigate performance bottlenecks, optimization strategies "
                "and how the design scales",
                Difficulty.ADVANCED,
                "4 hours",
                TaskType.READING,
                ["Profiling", "Optimization docs", "Scalability design", "Benchmarks"],
            )

        return self._tasks


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

def generate_learning_tasks(
    repo: dict[str, Any],
    languages: dict[str, int],
    readme: str,
    contributors: int,
    language_analysis: LanguageAnalysis,
) -> list[LearningTask]:
    """
    Generate the learning plan for a repository.

    Args:
        repo: Raw repository record from GET /repos/{owner}/{repo}
        languages: Language name -> byte count
        readme: Decoded README text ("" when unavailable)
        contributors: Contributor count (0 when unavailable)
        language_analysis: Result of analyze_languages(languages)

    Returns:
        Ordered list of LearningTask
    """
    generator = LearningTaskGenerator(repo, languages, readme, contributors, language_analysis)
    return generator.generate()
