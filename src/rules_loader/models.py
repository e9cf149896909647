"""Rule document and rule set value types."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from rules_loader.errors import ParseError


@dataclass(frozen=True)
class RuleMetadata:
    description: str = ""
    globs: tuple[str, ...] = ()
    always_apply: bool = False


@dataclass(frozen=True)
class RuleDocument:
    identifier: str
    description: str = ""
    globs: tuple[str, ...] = ()
    always_apply: bool = False
    body: str = ""
    source_path: Path | None = field(default=None, compare=False)

    @property
    def is_manual(self) -> bool:
        """True when the document is only active if requested by identifier."""
        return not self.always_apply and not self.globs


class SelectionReason(Enum):
    EXPLICIT = "explicit"
    ALWAYS_APPLY = "always"
    GLOB = "glob"


@dataclass(frozen=True)
class Selection:
    document: RuleDocument
    reason: SelectionReason


class RuleSet:
    """
    Immutable collection of rule documents keyed by identifier.

    Produced by ``load``; there is no way to add or remove documents afterwards.
    """

    __slots__ = ("_documents", "_errors", "_root")

    def __init__(
        self,
        root: str | Path,
        documents: Mapping[str, RuleDocument] | None = None,
        errors: tuple[ParseError, ...] = (),
    ) -> None:
        ordered = dict(sorted((documents or {}).items()))
        object.__setattr__(self, "_root", Path(root))
        object.__setattr__(self, "_documents", MappingProxyType(ordered))
        object.__setattr__(self, "_errors", tuple(errors))

    def __setattr__(self, name: str, value: object) -> None:
        msg = "RuleSet is immutable"
        raise AttributeError(msg)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def documents(self) -> Mapping[str, RuleDocument]:
        return self._documents

    @property
    def errors(self) -> tuple[ParseError, ...]:
        return self._errors

    def get(self, identifier: str) -> RuleDocument | None:
        return self._documents.get(identifier)

    def identifiers(self) -> list[str]:
        return list(self._documents)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._documents

    def __iter__(self) -> Iterator[RuleDocument]:
        return iter(self._documents.values())

    def __len__(self) -> int:
        return len(self._documents)

    def __repr__(self) -> str:
        return f"RuleSet(root={str(self._root)!r}, documents={len(self._documents)})"
