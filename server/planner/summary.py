"""Project summary paragraph shown on the overview tab."""

from .schemas import Difficulty, LanguageAnalysis
from .tasks import complexity_tier


COMPLEXITY_LABELS = {
    Difficulty.BEGINNER: "a beginner-level",
    Difficulty.INTERMEDIATE: "an intermediate-level",
    Difficulty.ADVANCED: "an advanced-level",
}


def community_size(contributors: int) -> str:
    if contributors > 100:
        return "large"
    if contributors > 10:
        return "medium-sized"
    return "small"


def build_project_summary(
    name: str,
    description: str | None,
    size_kb: int | None,
    stars: int,
    contributors: int,
    language_analysis: LanguageAnalysis,
) -> str:
    """Describe the repository in one paragraph of plain English."""
    primary = language_analysis.primary
    complexity = COMPLEXITY_LABELS[complexity_tier(size_kb)]

    language_description = f"built with {primary}"
    multi = language_analysis.is_multi_language and language_analysis.secondary
    if multi:
        language_description += f", combined with {' and '.join(language_analysis.secondary[:2])}"

    if description:
        focus = f"It focuses on {description.lower()}"
        if not focus.endswith("."):
            focus += "."
    else:
        focus = "It offers a rich set of features."

    skills = f"{primary} best practices, project architecture and open-source collaboration"
    if multi:
        skills = f"multi-language development, {skills}"

    return (
        f"{name} is {complexity} project {language_description}, with "
        f"{stars:,} stars and {contributors} contributors, making it a "
        f"{community_size(contributors)} open-source community. {focus} "
        f"Studying it will teach you {skills}."
    )
