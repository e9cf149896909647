"""Turn resolved documents into output."""

from collections.abc import Iterable

from rules_loader.models import RuleDocument


def render(documents: Iterable[RuleDocument], *, separator: str = "\n\n") -> str:
    """
    Concatenate document bodies in order.

    Leading blank lines are dropped and each body ends with a newline; empty
    bodies are skipped entirely.
    """
    contents = []
    for document in documents:
        body = document.body.lstrip("\r\n")
        if not body.strip():
            continue
        # Ensure content ends with newline for proper concatenation
        if not body.endswith("\n"):
            body += "\n"
        contents.append(body)
    return separator.join(contents)


def summarize(documents: Iterable[RuleDocument]) -> list[dict[str, str]]:
    return [
        {"identifier": document.identifier, "description": document.description}
        for document in documents
    ]
