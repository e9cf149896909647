from rules_loader.ctx import RulesLoaderContext
from rules_loader.errors import LoadError, ParseError, RuleParseWarning, RulesLoaderError
from rules_loader.loader import DEFAULT_EXTENSIONS, load
from rules_loader.matching import glob_match
from rules_loader.models import RuleDocument, RuleSet, Selection, SelectionReason
from rules_loader.rendering import render, summarize
from rules_loader.resolver import explain, resolve

__all__ = [
    "DEFAULT_EXTENSIONS",
    "LoadError",
    "ParseError",
    "RuleDocument",
    "RuleParseWarning",
    "RuleSet",
    "RulesLoaderContext",
    "RulesLoaderError",
    "Selection",
    "SelectionReason",
    "explain",
    "glob_match",
    "load",
    "render",
    "resolve",
    "summarize",
]
