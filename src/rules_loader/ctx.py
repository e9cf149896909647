from collections.abc import Iterable
from pathlib import Path

from rules_loader.loader import DEFAULT_EXTENSIONS, discover, load
from rules_loader.models import RuleDocument, RuleSet, Selection
from rules_loader.rendering import render
from rules_loader.resolver import explain, resolve

# (st_mtime_ns, st_size) per tracked path
_Fingerprint = dict[Path, tuple[int, int]]


class RulesLoaderContext:
    """Context class for loading and querying a rules directory."""

    def __init__(
        self,
        root: str | Path,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        caching: bool = True,
    ) -> None:
        """
        Initialize the context with the rules directory.

        Args:
            root: Path to the directory containing the rule documents.
            extensions: File suffixes recognised as rule documents
                (default: ".md" and ".mdc").
            caching: Whether to reuse the loaded rule set until a rule file or
                directory changes on disk (default: True).

        Raises:
            NotADirectoryError: If root is not a directory.
        """
        self.root = Path(root).resolve()
        if not self.root.is_dir():
            msg = f"root must be a directory, got: {self.root}"
            raise NotADirectoryError(msg)
        self.extensions = tuple(extensions)
        self.caching = caching
        self._rule_set: RuleSet | None = None
        self._fingerprint: _Fingerprint = {}

    def rule_set(self) -> RuleSet:
        """
        Return the loaded rule set, reloading it if anything changed on disk.

        Raises:
            LoadError: If the root can no longer be read.
        """
        if self.caching and self._rule_set is not None:
            # Verify all tracked paths still have the same modification time
            current = self._fingerprint_now()
            if current and current == self._fingerprint:
                return self._rule_set

        fingerprint = self._fingerprint_now() if self.caching else {}
        rule_set = load(self.root, extensions=self.extensions)
        if self.caching:
            self._rule_set = rule_set
            self._fingerprint = fingerprint
        return rule_set

    def resolve(
        self,
        target_path: str | Path | None = None,
        explicit_identifiers: Iterable[str] | None = None,
    ) -> list[RuleDocument]:
        """Documents that apply to target_path, see ``rules_loader.resolve``."""
        return resolve(self.rule_set(), target_path, explicit_identifiers or ())

    def explain(
        self,
        target_path: str | Path | None = None,
        explicit_identifiers: Iterable[str] | None = None,
    ) -> list[Selection]:
        return explain(self.rule_set(), target_path, explicit_identifiers or ())

    def load_rules(
        self,
        target_path: str | Path | None = None,
        explicit_identifiers: Iterable[str] | None = None,
    ) -> str:
        """
        Resolve the active rules and return their combined bodies as a string.

        Args:
            target_path: Optional file being edited. When None only
                always-apply and explicitly requested rules are included.
            explicit_identifiers: Optional identifiers to force-include.

        Returns:
            The bodies of the active rules joined by blank lines.
        """
        return render(self.resolve(target_path, explicit_identifiers))

    def invalidate_cache(self) -> None:
        """
        Drop the cached rule set.

        Note: Changes on disk are detected automatically, so manual invalidation
        is rarely needed.
        """
        self._rule_set = None
        self._fingerprint = {}

    def _fingerprint_now(self) -> _Fingerprint:
        fingerprint: _Fingerprint = {}
        try:
            tracked = [self.root, *discover(self.root, self.extensions)]
            tracked.extend(
                path for path in self.root.rglob("*")
                if path.is_dir() and not any(
                    part.startswith(".") for part in path.relative_to(self.root).parts
                )
            )
            for path in tracked:
                stat = path.stat()
                fingerprint[path] = (stat.st_mtime_ns, stat.st_size)
        except OSError:
            # Unreadable or vanished paths force a reload, which reports the error
            return {}
        return fingerprint
