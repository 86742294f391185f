"""Tests for scope marker linting."""

from __future__ import annotations

from quill.lint import MarkerIssue, lint_markers


def test_clean_document_has_no_issues(app_document) -> None:
    assert lint_markers(app_document) == []


def test_invalid_scope_name_reports_line_and_column() -> None:
    issues = lint_markers("a = 1\n  @dev.local\nb = 2")
    assert issues == [
        MarkerIssue(
            code="invalid_scope_name",
            line=2,
            column=3,
            token="@dev.local",
            message=(
                "Invalid scope name 'dev.local'. Scope names may only contain ASCII letters, "
                "ASCII digits, underscores, and dashes."
            ),
        )
    ]


def test_each_invalid_token_reported() -> None:
    issues = lint_markers("@dev @ @x!y")
    assert [(issue.code, issue.column, issue.token) for issue in issues] == [
        ("invalid_scope_name", 6, "@"),
        ("invalid_scope_name", 8, "@x!y"),
    ]


def test_mixed_content_points_at_stray_text() -> None:
    issues = lint_markers("@prod # live")
    assert len(issues) == 1
    assert issues[0].code == "mixed_content"
    assert issues[0].column == 7
    assert issues[0].token == "#"


def test_lines_not_starting_with_marker_ignored() -> None:
    assert lint_markers('email = "me@example.com"\nkey = @value') == []


def test_valid_headers_ignored() -> None:
    assert lint_markers("@dev @test\n@global") == []
