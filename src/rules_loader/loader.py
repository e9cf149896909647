"""Discover and parse a directory of rule documents."""

import warnings
from collections.abc import Iterable
from pathlib import Path

from rules_loader.errors import LoadError, ParseError, RuleParseWarning
from rules_loader.frontmatter import parse_frontmatter, split_frontmatter
from rules_loader.models import RuleDocument, RuleSet

DEFAULT_EXTENSIONS: tuple[str, ...] = (".md", ".mdc")


def load(root: str | Path, *, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> RuleSet:
    """
    Load every rule document below ``root``.

    Documents that cannot be parsed are skipped; each one is recorded in
    ``RuleSet.errors`` and reported with a ``RuleParseWarning``.

    Args:
        root: Directory containing the rule documents.
        extensions: File suffixes recognised as rule documents.

    Returns:
        The loaded rule set, possibly empty.

    Raises:
        LoadError: If ``root`` is missing, not a directory or not readable.
    """
    root_path = Path(root)
    if not root_path.exists():
        raise LoadError(root_path, "Rules root does not exist")
    if not root_path.is_dir():
        raise LoadError(root_path, "Rules root is not a directory")
    root_path = root_path.resolve()

    try:
        files = discover(root_path, extensions)
    except OSError as exc:
        raise LoadError(root_path, f"Rules root is not readable ({exc.strerror or exc})") from exc

    documents: dict[str, RuleDocument] = {}
    errors: list[ParseError] = []
    for file_path in files:
        try:
            document = parse_document(file_path, root_path)
            if document.identifier in documents:
                first = documents[document.identifier].source_path
                msg = f"Duplicate identifier {document.identifier!r} (already loaded from {first})"
                raise ParseError(file_path, msg)
        except ParseError as error:
            errors.append(error)
            warnings.warn(str(error), RuleParseWarning, stacklevel=2)
            continue
        documents[document.identifier] = document

    return RuleSet(root_path, documents, tuple(errors))


def discover(root: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> list[Path]:
    """
    List rule files below ``root`` sorted by their relative path.

    Hidden files and directories are skipped.

    Raises:
        OSError: If ``root`` itself cannot be listed.
    """
    suffixes = {ext.lower() for ext in extensions}
    # rglob ignores unreadable directories, so surface errors on the root itself
    list(root.iterdir())

    found = []
    for path in root.rglob("*"):
        relative = path.relative_to(root)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if path.suffix.lower() in suffixes and path.is_file():
            found.append(path)
    return sorted(found, key=lambda p: p.relative_to(root).as_posix())


def parse_document(path: Path, root: Path) -> RuleDocument:
    """
    Read and parse a single rule document.

    Args:
        path: The document file
        root: Rules root, used to derive the identifier

    Returns:
        The parsed document

    Raises:
        ParseError: If the file cannot be read or its frontmatter is malformed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(path, f"Document is not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise ParseError(path, f"Document is not readable ({exc.strerror or exc})") from exc

    try:
        block, body = split_frontmatter(text)
        metadata = parse_frontmatter(block)
    except ValueError as exc:
        raise ParseError(path, f"Malformed frontmatter ({exc})") from exc

    return RuleDocument(
        identifier=identifier_for(path, root),
        description=metadata.description,
        globs=metadata.globs,
        always_apply=metadata.always_apply,
        body=body,
        source_path=path,
    )


def identifier_for(path: Path, root: Path) -> str:
    """Relative POSIX path of ``path`` under ``root`` without its extension."""
    return path.relative_to(root).with_suffix("").as_posix()
