"""Facade that starts selector chains and combines finished selectors.

Usage::

    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
    # => '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("span"),
    ).stringify()
    # => 'div#main + span'
"""

from __future__ import annotations

from css.selector import Selector


class SelectorBuilder:
    """Stateless entry point; every call starts from an empty ``Selector``."""

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """Join two selectors as ``"<left> <combinator> <right>"``.

        The combinator is not validated. The result has no filled slots,
        so it can itself be nested in a further ``combine``.
        """
        return Selector(text=f"{left.stringify()} {combinator} {right.stringify()}")


css_selector_builder = SelectorBuilder()
