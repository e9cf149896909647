from pathlib import Path

import pytest

from rules_loader import RuleDocument, RuleSet, SelectionReason, explain, resolve

ROOT = Path("/project/.cursor/rules")


def make_rule_set(*documents: RuleDocument) -> RuleSet:
    return RuleSet(ROOT, {document.identifier: document for document in documents})


@pytest.fixture
def rule_set() -> RuleSet:
    """A small set covering every selection mode."""
    return make_rule_set(
        RuleDocument("ruby", description="Ruby", always_apply=True),
        RuleDocument("react", description="React", globs=("*.tsx",)),
        RuleDocument("rails/models", globs=("app/models/**/*.rb",)),
        RuleDocument("rails/all", globs=("**/*.rb", "Gemfile")),
        RuleDocument("workflows/api-design", description="API design workflow"),
    )


def identifiers(documents: list[RuleDocument]) -> list[str]:
    return [document.identifier for document in documents]


def test_always_apply_before_glob(rule_set: RuleSet) -> None:
    """Test that always-apply documents precede glob matches."""
    result = resolve(rule_set, "src/App.tsx")

    assert identifiers(result) == ["ruby", "react"]


def test_always_apply_for_unmatched_path(rule_set: RuleSet) -> None:
    """Test that always-apply documents are active for every path."""
    assert identifiers(resolve(rule_set, "README")) == ["ruby"]


def test_glob_matches_sorted_by_identifier(rule_set: RuleSet) -> None:
    """Test that several glob matches come back in identifier order."""
    result = resolve(rule_set, "app/models/user.rb")

    assert identifiers(result) == ["ruby", "rails/all", "rails/models"]


def test_recursive_glob_excludes_other_extensions(rule_set: RuleSet) -> None:
    """Test that **/*.rb does not select TypeScript files."""
    assert "rails/all" in identifiers(resolve(rule_set, "app/models/user.rb"))
    assert "rails/all" not in identifiers(resolve(rule_set, "app/models/user.ts"))


def test_explicit_first_in_request_order(rule_set: RuleSet) -> None:
    """Test that explicit requests lead, in the order given."""
    result = resolve(rule_set, "src/App.tsx", ["workflows/api-design", "rails/models"])

    assert identifiers(result) == ["workflows/api-design", "rails/models", "ruby", "react"]


def test_each_document_listed_once(rule_set: RuleSet) -> None:
    """Test that a document meeting several criteria appears only once."""
    selections = explain(rule_set, "src/App.tsx", ["react", "ruby", "react"])

    assert [(s.document.identifier, s.reason) for s in selections] == [
        ("react", SelectionReason.EXPLICIT),
        ("ruby", SelectionReason.EXPLICIT),
    ]


def test_unknown_identifiers_ignored(rule_set: RuleSet) -> None:
    """Test that requesting a missing identifier is not an error."""
    assert identifiers(resolve(rule_set, "README", ["missing"])) == ["ruby"]


def test_single_identifier_string(rule_set: RuleSet) -> None:
    """Test that a bare string is treated as one identifier."""
    result = resolve(rule_set, "README", "workflows/api-design")

    assert identifiers(result) == ["workflows/api-design", "ruby"]


def test_manual_document_only_when_requested(rule_set: RuleSet) -> None:
    """Test that documents without globs or always-apply need a request."""
    assert "workflows/api-design" not in identifiers(resolve(rule_set, "docs/api.md"))
    assert "workflows/api-design" in identifiers(
        resolve(rule_set, "docs/api.md", {"workflows/api-design"})
    )


def test_no_target_skips_globs(rule_set: RuleSet) -> None:
    """Test that without a target only always-apply and explicit rules apply."""
    assert identifiers(resolve(rule_set, None, ["react"])) == ["react", "ruby"]


def test_absolute_target_under_root(rule_set: RuleSet) -> None:
    """Test that absolute targets are matched relative to the rules root."""
    result = resolve(rule_set, ROOT / "app" / "models" / "user.rb")

    assert "rails/models" in identifiers(result)


def test_resolve_is_idempotent(rule_set: RuleSet) -> None:
    """Test that repeated queries return the same ordered output."""
    first = resolve(rule_set, "app/models/user.rb", ["react"])
    second = resolve(rule_set, "app/models/user.rb", ["react"])

    assert first == second


def test_explain_reasons(rule_set: RuleSet) -> None:
    """Test that each selection carries its highest priority reason."""
    selections = explain(rule_set, "Gemfile", ["react"])

    assert [(s.document.identifier, s.reason) for s in selections] == [
        ("react", SelectionReason.EXPLICIT),
        ("ruby", SelectionReason.ALWAYS_APPLY),
        ("rails/all", SelectionReason.GLOB),
    ]


def test_empty_rule_set() -> None:
    """Test that an empty set resolves to nothing."""
    assert resolve(make_rule_set(), "src/App.tsx", ["ruby"]) == []


def test_empty_target_skips_globs() -> None:
    """Test that an empty target path only yields always-apply documents."""
    rule_set = make_rule_set(
        RuleDocument("everything", globs=("*",)),
        RuleDocument("general", always_apply=True),
    )

    assert identifiers(resolve(rule_set, "")) == ["general"]
