"""Community stylesheet extractor: HTML page -> Snapshot of theme custom properties."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from realcolors.config import DEFAULT_STYLE_ELEMENT_ID
from realcolors.core.errors import SourceFormatError
from realcolors.core.types import Snapshot, Variant, is_custom_property
from realcolors.extractors.rules import RuleKind, parse_rules

logger = logging.getLogger(__name__)

# Evaluated in order, first match wins. Each prefix includes the trailing comma
# that separates it from the next selector in the rule's selector list.
VARIANT_PREFIXES: tuple[tuple[str, Variant], ...] = (
    (":root .sidebar-grid,", Variant.LIGHT),
    (":root .sidebar-grid .theme-beta.stickied,", Variant.LIGHT_STICKIED),
    (":root.theme-dark .sidebar-grid,", Variant.DARK),
    (":root.theme-dark .sidebar-grid .theme-beta.stickied,", Variant.DARK_STICKIED),
)


def classify_selector(
    selector_text: str,
    prefixes: tuple[tuple[str, Variant], ...] = VARIANT_PREFIXES,
) -> Variant | None:
    """Return the Variant whose prefix ``selector_text`` starts with, or None."""
    for prefix, variant in prefixes:
        if selector_text.startswith(prefix):
            return variant
    return None


class StyleExtractor:
    """
    Pulls the theme custom properties out of a subreddit page.

    The page embeds the community styles in a single ``<style>`` element with
    a well-known id. Each style rule in it is classified by selector prefix
    into a Variant; every ``--*`` declaration of a classified rule goes into
    that variant's property map. Several rules for the same variant merge,
    later declarations overriding earlier ones.
    """

    def __init__(
        self,
        style_element_id: str = DEFAULT_STYLE_ELEMENT_ID,
        prefixes: tuple[tuple[str, Variant], ...] = VARIANT_PREFIXES,
    ) -> None:
        self.style_element_id = style_element_id
        self._prefixes = prefixes

    def extract(self, html: str) -> Snapshot:
        css_text = self.find_stylesheet(html)

        collected: dict[Variant, dict[str, str]] = {}
        skipped = 0
        for rule in parse_rules(css_text):
            if rule.kind is not RuleKind.STYLE:
                skipped += 1
                continue
            variant = classify_selector(rule.selector_text, self._prefixes)
            if variant is None:
                skipped += 1
                continue
            properties = collected.setdefault(variant, {})
            for name, value in rule.declarations:
                if is_custom_property(name):
                    properties[name] = value

        snapshot = Snapshot(collected)
        logger.debug(
            "extracted %d variants (%d properties), skipped %d rules",
            len(snapshot), snapshot.property_count, skipped,
        )
        return snapshot

    def find_stylesheet(self, html: str) -> str:
        """Return the CSS text of the community style element."""
        soup = BeautifulSoup(html, "html.parser")
        element = soup.find(id=self.style_element_id)
        if element is None:
            raise SourceFormatError(
                f"no element with id {self.style_element_id!r} in page; "
                "the page layout may have changed"
            )
        style = element if element.name == "style" else element.find("style")
        if style is None:
            raise SourceFormatError(
                f"element {self.style_element_id!r} is a <{element.name}> "
                "and contains no <style> element"
            )
        return style.get_text()
