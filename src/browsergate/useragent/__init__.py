"""User-Agent tokenizing and resolution."""

from .resolver import RULES, ResolutionRule, resolve_user_agent, strip_masquerading
from .tokenizer import NameVersion, TokenizedUserAgent, tokenize

__all__ = [
    "NameVersion",
    "RULES",
    "ResolutionRule",
    "TokenizedUserAgent",
    "resolve_user_agent",
    "strip_masquerading",
    "tokenize",
]
