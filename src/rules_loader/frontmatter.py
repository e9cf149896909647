"""Frontmatter splitting and parsing for rule documents."""

import re

import yaml

from rules_loader.models import RuleMetadata

_DELIMITER = "---"
_BOM = "\ufeff"

# Cursor writes unquoted scalars (``globs: **/*.rb, app/**``, ``description: Rails: models``)
# that YAML reads as aliases or nested mappings
_INLINE_VALUE_RE = re.compile(
    r"^(?P<key>globs|description)[ \t]*:[ \t]*(?P<value>[^\s\[{\"'|>#~][^\n]*?)[ \t]*$",
    re.MULTILINE,
)
_TRAILING_COMMENT_RE = re.compile(r"[ \t]+#.*$")
_GLOB_SEPARATOR_RE = re.compile(r"[,\n]")
_ALWAYS_APPLY_KEYS = ("alwaysApply", "always_apply")
_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0", ""})


def split_frontmatter(text: str) -> tuple[str | None, str]:
    """
    Split a leading ``---`` delimited block from the document body.

    Args:
        text: Raw document text

    Returns:
        Tuple of (frontmatter block or None, body)

    Raises:
        ValueError: If the opening delimiter is never closed.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]

    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != _DELIMITER:
        return None, text

    for index in range(1, len(lines)):
        if lines[index].rstrip() == _DELIMITER:
            return "".join(lines[1:index]), "".join(lines[index + 1:])

    msg = "unterminated frontmatter block"
    raise ValueError(msg)


def parse_frontmatter(block: str | None) -> RuleMetadata:
    """
    Parse the recognised keys of a frontmatter block.

    Args:
        block: Text between the delimiters, or None when the document has none

    Returns:
        The rule metadata, with defaults for missing keys

    Raises:
        ValueError: If the block is not valid YAML or a key has an unusable value.
    """
    if block is None:
        return RuleMetadata()

    raw, block = _lift_inline_values(block)

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        msg = f"invalid YAML frontmatter ({exc})"
        raise ValueError(msg) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = "frontmatter must be a mapping"
        raise ValueError(msg)

    always_apply = False
    for key in _ALWAYS_APPLY_KEYS:
        if key in data:
            always_apply = _coerce_bool(data[key], key)
            break

    return RuleMetadata(
        description=_coerce_description(
            raw["description"] if "description" in raw else data.get("description")
        ),
        globs=_coerce_globs(raw["globs"] if "globs" in raw else data.get("globs")),
        always_apply=always_apply,
    )


def _lift_inline_values(block: str) -> tuple[dict[str, str | None], str]:
    """
    Take unquoted single-line ``globs`` and ``description`` values out of the block.

    Values continued on indented lines are left for YAML.

    Returns:
        Tuple of (raw values by key, remaining block)
    """
    raw: dict[str, str | None] = {}
    kept: list[str] = []
    last_end = 0
    for match in _INLINE_VALUE_RE.finditer(block):
        key = match.group("key")
        following = block[match.end():].lstrip("\r\n")
        if key in raw or following[:1] in (" ", "\t"):
            continue
        value = _TRAILING_COMMENT_RE.sub("", match.group("value"))
        raw[key] = None if value.lower() == "null" else value
        kept.append(block[last_end:match.start()])
        last_end = match.end()
    kept.append(block[last_end:])
    return raw, "".join(kept)


def _coerce_description(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        msg = "description must be a string"
        raise ValueError(msg)
    return str(value).strip()


def _coerce_globs(value: object) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        items = _GLOB_SEPARATOR_RE.split(value)
    elif isinstance(value, list):
        items = []
        for item in value:
            if item is None:
                continue
            if isinstance(item, (dict, list)):
                msg = "globs entries must be strings"
                raise ValueError(msg)
            items.append(str(item))
    else:
        msg = f"globs must be a string or a list, got {type(value).__name__}"
        raise ValueError(msg)
    return tuple(item.strip() for item in items if item.strip())


def _coerce_bool(value: object, key: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    msg = f"{key} must be a boolean, got {value!r}"
    raise ValueError(msg)
