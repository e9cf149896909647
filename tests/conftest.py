from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def rules_dir(tmp_path: Path) -> Path:
    """Create an empty rules directory."""
    root = tmp_path / "rules"
    root.mkdir()
    return root


@pytest.fixture
def write_rule(rules_dir: Path) -> Callable[[str, str], Path]:
    """Write a rule file relative to the rules directory."""

    def _write(relative: str, text: str) -> Path:
        path = rules_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
