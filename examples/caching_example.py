"""Example demonstrating the caching feature of rules-loader."""

import shutil
import tempfile
from pathlib import Path
from time import time

from rules_loader import RulesLoaderContext


def main() -> None:
    """Demonstrate caching functionality."""
    rules_dir = Path(tempfile.mkdtemp(prefix="rules_cache_"))
    for i in range(50):
        (rules_dir / f"rule{i:02}.md").write_text(f"---\nglobs: '**/*.py'\n---\nRule {i}\n")

    try:
        print("=" * 60)
        print("Caching Example - rules-loader")
        print("=" * 60)

        ctx = RulesLoaderContext(rules_dir)

        # First load - will read from disk
        start = time()
        first = ctx.load_rules("src/app.py")
        time1 = time() - start
        print(f"First load:  {len(first)} chars in {time1*1000:.2f}ms")

        # Second load - will use cache (files haven't changed)
        start = time()
        second = ctx.load_rules("src/app.py")
        time2 = time() - start
        print(f"Second load: {len(second)} chars in {time2*1000:.2f}ms (cached)")

        # Editing a rule invalidates the cache automatically
        (rules_dir / "rule00.md").write_text("---\nglobs: '**/*.py'\n---\nRule 0, revised\n")
        third = ctx.load_rules("src/app.py")
        print(f"After edit:  {'revised' in third}")

        # Manual cache invalidation (rarely needed)
        ctx.invalidate_cache()
        print(f"After invalidate_cache: {len(ctx.rule_set())} rules")
    finally:
        shutil.rmtree(rules_dir)


if __name__ == "__main__":
    main()
