"""CSS rule parsing: tag each top-level rule by kind and collect its declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import tinycss2


class RuleKind(str, Enum):
    STYLE = "style"  # selector { declarations }
    AT_RULE = "at_rule"  # @media, @font-face, @supports, ...
    OTHER = "other"  # parse errors and anything else tinycss2 yields at top level


_KIND_BY_NODE_TYPE = {
    "qualified-rule": RuleKind.STYLE,
    "at-rule": RuleKind.AT_RULE,
}


@dataclass
class CSSRule:
    """One top-level rule of a stylesheet."""

    kind: RuleKind
    prelude: str  # selector text for style rules, "@keyword ..." for at-rules
    declarations: list[tuple[str, str]] = field(default_factory=list)  # (name, value) in source order

    @property
    def selector_text(self) -> str:
        return self.prelude if self.kind is RuleKind.STYLE else ""


def parse_rules(css_text: str) -> list[CSSRule]:
    """
    Parse a stylesheet into CSSRule objects in document order.

    Declarations are only collected for style rules; at-rules keep their
    prelude so callers can log them but are otherwise opaque.
    """
    rules: list[CSSRule] = []
    nodes = tinycss2.parse_stylesheet(css_text, skip_comments=True, skip_whitespace=True)
    for node in nodes:
        kind = _KIND_BY_NODE_TYPE.get(node.type, RuleKind.OTHER)
        if kind is RuleKind.STYLE:
            rules.append(CSSRule(
                kind=kind,
                prelude=tinycss2.serialize(node.prelude).strip(),
                declarations=_parse_declarations(node.content or []),
            ))
        elif kind is RuleKind.AT_RULE:
            prelude = tinycss2.serialize(node.prelude).strip()
            rules.append(CSSRule(kind=kind, prelude=f"@{node.at_keyword} {prelude}".strip()))
        else:
            rules.append(CSSRule(kind=kind, prelude=""))
    return rules


def _parse_declarations(content: list) -> list[tuple[str, str]]:
    result: list[tuple[str, str]] = []
    items = tinycss2.parse_blocks_contents(content, skip_comments=True, skip_whitespace=True)
    for item in items:
        # Nested rules and parse errors inside a block contribute no declarations
        if item.type != "declaration":
            continue
        # Custom property names are case-sensitive, so use ``name`` not ``lower_name``
        result.append((item.name, tinycss2.serialize(item.value).strip()))
    return result
