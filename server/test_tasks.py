"""Tests for the learning task generator and project summary."""

from __future__ import annotations

import itertools

import pytest

from planner import analyze_languages, build_project_summary, complexity_tier, generate_learning_tasks
from planner.schemas import Difficulty, TaskType


def _make_repo(**kwargs) -> dict:
    defaults = dict(
        name="demo",
        size=500,
        open_issues_count=0,
        has_pages=False,
    )
    defaults.update(kwargs)
    return defaults


def _generate(repo: dict, languages: dict | None = None, readme: str = "", contributors: int = 0):
    languages = languages or {}
    return generate_learning_tasks(repo, languages, readme, contributors, analyze_languages(languages))


def _titles(tasks) -> list[str]:
    return [task.title for task in tasks]


@pytest.mark.parametrize("size, tier", [
    (0, Difficulty.BEGINNER),
    (1000, Difficulty.BEGINNER),
    (1001, Difficulty.INTERMEDIATE),
    (10000, Difficulty.INTERMEDIATE),
    (10001, Difficulty.ADVANCED),
    (None, Difficulty.BEGINNER),
])
def test_complexity_tier(size, tier):
    assert complexity_tier(size) == tier


def test_worked_example_small_python_repo():
    """size=500, 5 contributors, 2 open issues, README mentions install and test."""
    tasks = _generate(
        _make_repo(size=500, open_issues_count=2),
        languages={"Python": 900, "Markdown": 100},
        readme="## Install\npip install demo\n\nRun the test suite with pytest.",
        contributors=5,
    )

    assert [task.id for task in tasks] == list(range(1, 9))
    assert _titles(tasks) == [
        "Project overview and background",
        "Understand the open-source community",
        "Set up the environment and run the project",
        "Analyze the architecture and code structure",
        "Deep dive into the Python stack",
        "Understand the core features and business logic",
        "Testing strategy and quality assurance",
        "Hands-on improvement and contribution",
    ]

    setup, architecture, deep_dive, core = tasks[2], tasks[3], tasks[4], tasks[5]
    assert (setup.difficulty, setup.estimated_time) == (Difficulty.BEGINNER, "30 min")
    assert architecture.estimated_time == "60 min"
    assert (deep_dive.difficulty, deep_dive.estimated_time) == (Difficulty.BEGINNER, "90 min")
    assert core.estimated_time == "1.5 hours"
    assert tasks[6].estimated_time == "90 min"
    assert (tasks[7].difficulty, tasks[7].estimated_time) == (Difficulty.ADVANCED, "3-6 hours")
    assert "5 contributors" in tasks[1].description


def test_empty_language_map_skips_deep_dive():
    tasks = _generate(_make_repo())
    assert not any("Deep dive" in title for title in _titles(tasks))
    # overview, architecture, core logic
    assert len(tasks) == 3


def test_single_contributor_skips_community_task():
    tasks = _generate(_make_repo(), contributors=1)
    assert "Understand the open-source community" not in _titles(tasks)


def test_readme_keywords_are_case_insensitive():
    tasks = _generate(_make_repo(), readme="GETTING STARTED\n...")
    assert "Set up the environment and run the project" in _titles(tasks)


def test_javascript_triggers_testing_task_without_readme():
    tasks = _generate(_make_repo(), languages={"JavaScript": 10})
    assert "Testing strategy and quality assurance" in _titles(tasks)


def test_pages_site_triggers_deployment_task():
    tasks = _generate(_make_repo(has_pages=True))
    deployment = [task for task in tasks if task.title == "Deployment and release process"]
    assert len(deployment) == 1
    assert deployment[0].difficulty == Difficulty.INTERMEDIATE
    assert deployment[0].type == TaskType.PRACTICE


def test_advanced_repo_scales_every_tiered_task():
    tasks = _generate(
        _make_repo(size=50000, open_issues_count=3),
        languages={"Python": 500, "TypeScript": 400, "Go": 100},
        readme="Install it, then build and deploy to production.",
        contributors=40,
    )
    by_title = {task.title: task for task in tasks}

    setup = by_title["Set up the environment and run the project"]
    assert (setup.difficulty, setup.estimated_time) == (Difficulty.INTERMEDIATE, "45 min")
    assert by_title["Analyze the architecture and code structure"].estimated_time == "90 min"

    deep_dive = by_title["Deep dive into the Python stack"]
    assert (deep_dive.difficulty, deep_dive.estimated_time) == (Difficulty.ADVANCED, "3 hours")

    multi = by_title["Learn the multi-language stack"]
    assert multi.difficulty == Difficulty.ADVANCED
    assert "TypeScript, Go" in multi.description

    assert by_title["Understand the core features and business logic"].estimated_time == "4 hours"
    assert by_title["Deployment and release process"].difficulty == Difficulty.ADVANCED
    assert tasks[-1].title == "Performance optimization and scaling"
    assert tasks[-1].estimated_time == "4 hours"


def test_intermediate_repo_times():
    tasks = _generate(_make_repo(size=5000), languages={"Rust": 100})
    by_title = {task.title: task for task in tasks}
    assert by_title["Deep dive into the Rust stack"].estimated_time == "2 hours"
    assert by_title["Understand the core features and business logic"].estimated_time == "2.5 hours"
    assert "Performance optimization and scaling" not in by_title


def test_multi_language_task_bumps_beginner_to_intermediate():
    tasks = _generate(_make_repo(size=10), languages={"Python": 50, "C": 50})
    multi = [task for task in tasks if task.title == "Learn the multi-language stack"]
    assert multi[0].difficulty == Difficulty.INTERMEDIATE


@pytest.mark.parametrize("contributors, readme, issues, pages, size", list(itertools.product(
    [0, 3],
    ["", "install test deploy"],
    [0, 1],
    [False, True],
    [100, 20000],
)))
def test_ids_are_gap_free(contributors, readme, issues, pages, size):
    tasks = _generate(
        _make_repo(size=size, open_issues_count=issues, has_pages=pages),
        languages={"Python": 500, "Go": 500},
        readme=readme,
        contributors=contributors,
    )
    assert [task.id for task in tasks] == list(range(1, len(tasks) + 1))


def test_project_summary_mentions_key_facts():
    analysis = analyze_languages({"Python": 500, "Go": 400, "C": 100})
    summary = build_project_summary(
        name="demo",
        description="Distributed task queues.",
        size_kb=20000,
        stars=12345,
        contributors=150,
        language_analysis=analysis,
    )
    assert summary.startswith("demo is an advanced-level project built with Python, combined with Go and C")
    assert "12,345 stars" in summary
    assert "large open-source community" in summary
    assert "It focuses on distributed task queues." in summary
    assert "multi-language development" in summary


def test_project_summary_lowercases_description():
    summary = build_project_summary("demo", "A Toolkit For OpenAI Gym", 10, 0, 1, analyze_languages({}))
    assert "It focuses on a toolkit for openai gym." in summary


def test_project_summary_without_description():
    summary = build_project_summary("demo", None, 10, 0, 1, analyze_languages({}))
    assert "built with Unknown" in summary
    assert "small open-source community" in summary
    assert "It offers a rich set of features." in summary
