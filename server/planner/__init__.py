"""
LearnGitHub Planner

Pure functions that turn GitHub repository data into a learning plan:
- Language Analyzer: primary/secondary language classification
- Task Generator: rule-based, ordered learning tasks
- Summary: one-paragraph project description
"""

from .languages import analyze_languages, rank_languages, LanguageStat
from .tasks import generate_learning_tasks, complexity_tier, LearningTaskGenerator
from .summary import build_project_summary

__all__ = [
    "analyze_languages",
    "rank_languages",
    "LanguageStat",
    "generate_learning_tasks",
    "complexity_tier",
    "LearningTaskGenerator",
    "build_project_summary",
]
