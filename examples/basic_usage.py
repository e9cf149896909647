"""
Example demonstrating the rules-loader library.

This script creates a sample rules directory and shows which rules apply
to a few files being edited.
"""

import shutil
import tempfile
from pathlib import Path

from rules_loader import explain, load, resolve, summarize


def create_example_rules() -> Path:
    """Create a temporary rules directory."""
    rules_dir = Path(tempfile.mkdtemp(prefix="rules_example_"))

    (rules_dir / "general.mdc").write_text("""---
description: General conventions
alwaysApply: true
---
# General
Keep functions short.
""")

    (rules_dir / "ruby.mdc").write_text("""---
description: Ruby and Rails conventions
globs: **/*.rb, Gemfile
---
# Ruby
Prefer keyword arguments.
""")

    frontend_dir = rules_dir / "frontend"
    frontend_dir.mkdir()
    (frontend_dir / "react.md").write_text("""---
description: React conventions
globs:
  - "*.tsx"
  - "*.jsx"
---
# React
One component per file.
""")

    workflows_dir = rules_dir / "workflows"
    workflows_dir.mkdir()
    (workflows_dir / "prune-tests.md").write_text("# Prune tests\nRemove redundant tests.\n")

    return rules_dir


def main() -> None:
    rules_dir = create_example_rules()

    try:
        rule_set = load(rules_dir)
        print(f"Loaded {len(rule_set)} rules: {', '.join(rule_set.identifiers())}")
        print()

        for target in ["app/models/user.rb", "src/App.tsx", "README.md"]:
            print(f"{target}:")
            for selection in explain(rule_set, target):
                print(f"  {selection.document.identifier} ({selection.reason.value})")
            print()

        # Manual rules only apply when requested by identifier
        print("Explicit request for workflows/prune-tests:")
        documents = resolve(rule_set, "spec/user_spec.rb", ["workflows/prune-tests"])
        for entry in summarize(documents):
            print(f"  {entry['identifier']}: {entry['description'] or '-'}")

    finally:
        shutil.rmtree(rules_dir)


if __name__ == "__main__":
    main()
