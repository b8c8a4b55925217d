"""Unit tests for the review prompt."""

from commit_review.prompts.commit_review_prompt import (
    CODE_QUALITY_CATEGORIES,
    SECURITY_CATEGORIES,
    build_review_prompt,
)


def test_prompt_contains_diff_exactly_once(sample_diff) -> None:
    prompt = build_review_prompt(sample_diff)

    assert prompt.count(sample_diff) == 1
    assert f"<git_diff>\n{sample_diff}\n</git_diff>" in prompt


def test_prompt_contains_category_labels(sample_diff) -> None:
    prompt = build_review_prompt(sample_diff)

    for category in SECURITY_CATEGORIES + CODE_QUALITY_CATEGORIES:
        assert category in prompt
    assert "a) Injection flaws" in prompt
    assert "f) Duplication of code or logic" in prompt


def test_prompt_contains_reporting_schema(sample_diff) -> None:
    prompt = build_review_prompt(sample_diff)

    for tag in ("type", "severity", "description", "location", "recommendation"):
        assert f"<{tag}>" in prompt
    assert "An assessment of the overall risk" in prompt
    assert "Any positive changes or improvements" in prompt
    assert "the full report should not be output" in prompt


def test_prompt_leaves_braces_in_diff_untouched() -> None:
    diff = "+data = {'key': '{value}'}\n+template = '{{GIT_DIFF}}'\n"

    prompt = build_review_prompt(diff)

    assert prompt.count(diff) == 1
