"""
Language Analyzer for LearnGitHub

Classifies a repository's GitHub language map into a primary language,
up to three secondary languages and a byte-share distribution.

Build/infra formats and markup/doc formats are excluded from the candidate
set unless the repository contains nothing else. A static per-language
weight is used for ranking only; every percentage is based on raw bytes.
"""

import math
from dataclasses import dataclass

from .schemas import LanguageAnalysis, LanguageShare


# =============================================================================
# CONFIGURATION
# =============================================================================

UNKNOWN_LANGUAGE = "Unknown"

# Build, infra and tooling formats - never primary while real code exists
CONFIG_LANGUAGES = frozenset({
    "Dockerfile",
    "Shell",
    "PowerShell",
    "Batchfile",
    "Makefile",
    "JSON",
    "YAML",
    "XML",
    "INI",
    "TOML",
    "Nix",
    "CMake",
})

# Markup and documentation formats
DOC_LANGUAGES = frozenset({
    "Markdown",
    "HTML",
    "CSS",
    "TeX",
    "Rich Text Format",
})

# Ranking weights (unlisted languages weigh 1.0)
LANGUAGE_WEIGHTS = {
    # Mainstream programming languages
    "Python": 1.2,
    "JavaScript": 1.2,
    "TypeScript": 1.2,
    "Java": 1.2,
    "C++": 1.2,
    "C": 1.2,
    "Go": 1.2,
    "Rust": 1.2,
    "Swift": 1.2,
    "Kotlin": 1.2,
    "Scala": 1.2,
    "Ruby": 1.2,
    "PHP": 1.2,
    "C#": 1.2,

    # Scripting / numeric
    "R": 1.0,
    "MATLAB": 1.0,
    "Lua": 1.0,
    "Perl": 1.0,

    # Frontend and styling
    "HTML": 0.8,
    "CSS": 0.7,
    "SCSS": 0.7,

    # Config files
    "Dockerfile": 0.3,
    "Shell": 0.5,
    "JSON": 0.2,
    "YAML": 0.2,
    "XML": 0.3,

    # Documentation
    "Markdown": 0.1,
    "TeX": 0.2,
}

DEFAULT_WEIGHT = 1.0

# Primary share (percent) below which a project with several programming
# languages counts as multi-language
MULTI_LANGUAGE_THRESHOLD = 70

MAX_SECONDARY_LANGUAGES = 3


# =============================================================================
# HELPERS
# =============================================================================

@dataclass(frozen=True)
class LanguageStat:
    """One language of the input map with its ranking data."""
    name: str
    bytes: int
    weight: float
    is_config: bool
    is_doc: bool

    @property
    def weighted_score(self) -> float:
        return self.bytes * self.weight

    @property
    def is_programming(self) -> bool:
        return not self.is_config and not self.is_doc


def get_language_weight(language: str) -> float:
    return LANGUAGE_WEIGHTS.get(language, DEFAULT_WEIGHT)


def round_percentage(part: int, total: int) -> int:
    """Percentage of `part` in `total`, rounded half-up. Zero when total is zero."""
    if total <= 0:
        return 0
    return math.floor(part / total * 100 + 0.5)


def rank_languages(languages: dict[str, int]) -> list[LanguageStat]:
    """Build LanguageStats sorted by weighted score, highest first (stable on ties)."""
    stats = [
        LanguageStat(
            name=name,
            bytes=byte_count,
            weight=get_language_weight(name),
            is_config=name in CONFIG_LANGUAGES,
            is_doc=name in DOC_LANGUAGES,
        )
        for name, byte_count in languages.items()
    ]
    return sorted(stats, key=lambda stat: stat.weighted_score, reverse=True)


# =============================================================================
# ANALYSIS
# =============================================================================

def analyze_languages(languages: dict[str, int] | None) -> LanguageAnalysis:
    """
    Classify a GitHub language map.

    Args:
        languages: Language name -> byte count, as returned by
            GET /repos/{owner}/{repo}/languages

    Returns:
        LanguageAnalysis with primary/secondary languages and distribution
    """
    if not languages:
        return LanguageAnalysis(primary=UNKNOWN_LANGUAGE, secondary=[], is_multi_language=False)

    ranked = rank_languages(languages)
    programming = [stat for stat in ranked if stat.is_programming]

    # A repo made only of config/doc files still gets a primary language
    candidates = programming if programming else ranked

    primary = candidates[0]
    total_bytes = sum(stat.bytes for stat in ranked)
    primary_share = primary.bytes / total_bytes * 100 if total_bytes > 0 else None

    is_multi_language = (
        primary_share is not None
        and primary_share < MULTI_LANGUAGE_THRESHOLD
        and len(programming) > 1
    )

    return LanguageAnalysis(
        primary=primary.name,
        secondary=[stat.name for stat in candidates[1:1 + MAX_SECONDARY_LANGUAGES]],
        is_multi_language=is_multi_language,
        distribution=[
            LanguageShare(
                language=stat.name,
                percentage=round_percentage(stat.bytes, total_bytes),
                bytes=stat.bytes,
            )
            for stat in candidates
        ],
    )
