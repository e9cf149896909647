from pathlib import Path

import click

from rules_loader.errors import LoadError
from rules_loader.loader import load
from rules_loader.models import RuleDocument, RuleSet
from rules_loader.rendering import render
from rules_loader.resolver import explain

ROOT_ARGUMENT = click.argument(
    "root", type=click.Path(file_okay=False, path_type=Path)
)


def _mode(document: RuleDocument) -> str:
    if document.always_apply:
        return "always"
    if document.globs:
        return "glob"
    return "manual"


def _load_or_fail(root: Path) -> RuleSet:
    try:
        rule_set = load(root)
    except LoadError as exc:
        raise click.ClickException(str(exc)) from exc
    for error in rule_set.errors:
        click.echo(f"skipped: {error}", err=True)
    return rule_set


@click.group()
def cli() -> None:
    """Load rule documents and show which apply to a file."""


@cli.command("list")
@ROOT_ARGUMENT
def list_rules(root: Path) -> None:
    """List every rule document under ROOT."""
    rule_set = _load_or_fail(root)
    for document in rule_set:
        line = f"{document.identifier}\t{_mode(document)}"
        if document.description:
            line += f"\t{document.description}"
        click.echo(line)


@cli.command("resolve")
@ROOT_ARGUMENT
@click.argument("target", required=False)
@click.option(
    "-i",
    "--include",
    "includes",
    multiple=True,
    help="Identifier to include regardless of globs (repeatable).",
)
@click.option("--body", is_flag=True, help="Print the combined rule bodies.")
@click.option("--reason", is_flag=True, help="Show why each rule was selected.")
def resolve_rules(
    root: Path, target: str | None, includes: tuple[str, ...], body: bool, reason: bool
) -> None:
    """Show the rules under ROOT that apply to TARGET."""
    rule_set = _load_or_fail(root)
    selections = explain(rule_set, target, includes)

    if body:
        click.echo(render(selection.document for selection in selections), nl=False)
        return

    for selection in selections:
        document = selection.document
        parts = [document.identifier]
        if reason:
            parts.append(selection.reason.value)
        if document.description:
            parts.append(document.description)
        click.echo("\t".join(parts))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
