from pathlib import Path


class RulesLoaderError(Exception):
    """Base error for the rules loader."""


class LoadError(RulesLoaderError):
    """The rules root could not be read. No rule set is produced."""

    def __init__(self, root: Path, message: str) -> None:
        self.root = root
        self.message = message
        super().__init__(f"{message}: {root}")


class ParseError(RulesLoaderError):
    """A single rule document could not be parsed and was skipped."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class RuleParseWarning(UserWarning):
    """Emitted for every document skipped during a load."""
