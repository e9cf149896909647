"""Select the rule documents that apply to a target file."""

from collections.abc import Iterable
from pathlib import Path

from rules_loader.matching import glob_match, normalize_target
from rules_loader.models import RuleDocument, RuleSet, Selection, SelectionReason


def explain(
    rule_set: RuleSet,
    target_path: str | Path | None,
    explicit_identifiers: Iterable[str] = (),
) -> list[Selection]:
    """
    Resolve the active documents together with the reason each was selected.

    Explicitly requested documents come first in request order, then
    always-apply documents, then glob matches, the last two sorted by
    identifier. A document satisfying several criteria is listed once under
    the first of them. Unknown identifiers are ignored.

    Args:
        rule_set: The loaded rules
        target_path: File being edited, or None to skip glob matching
        explicit_identifiers: Identifiers to include regardless of globs

    Returns:
        Ordered list of selections, possibly empty
    """
    if isinstance(explicit_identifiers, str):
        explicit_identifiers = [explicit_identifiers]

    selections: list[Selection] = []
    seen: set[str] = set()

    for identifier in explicit_identifiers:
        document = rule_set.get(identifier)
        if document is None or identifier in seen:
            continue
        seen.add(identifier)
        selections.append(Selection(document, SelectionReason.EXPLICIT))

    # RuleSet iterates in identifier order
    for document in rule_set:
        if document.always_apply and document.identifier not in seen:
            seen.add(document.identifier)
            selections.append(Selection(document, SelectionReason.ALWAYS_APPLY))

    if target_path is None:
        return selections

    target = normalize_target(target_path, rule_set.root)
    for document in rule_set:
        if document.identifier in seen:
            continue
        if any(glob_match(target, pattern) for pattern in document.globs):
            seen.add(document.identifier)
            selections.append(Selection(document, SelectionReason.GLOB))

    return selections


def resolve(
    rule_set: RuleSet,
    target_path: str | Path | None,
    explicit_identifiers: Iterable[str] = (),
) -> list[RuleDocument]:
    """Return the documents that apply to ``target_path``, in priority order."""
    return [selection.document for selection in explain(rule_set, target_path, explicit_identifiers)]
