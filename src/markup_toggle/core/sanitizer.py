"""
Applies inline tools' sanitize rules to a document subtree.
"""

from __future__ import annotations

import logging
from typing import Dict, Union

from .document_model import ElementNode, Node

logger = logging.getLogger(__name__)

AttributeRule = Dict[str, bool]
SanitizeRule = Union[bool, AttributeRule]
SanitizeConfig = Dict[str, SanitizeRule]


def sanitize(root: Node, rules: SanitizeConfig) -> Node:
    """
    Clean the descendants of ``root`` in place.

    Elements whose tag has a rule are kept: a rule of ``True`` keeps every
    attribute, a mapping keeps only the attributes mapped to ``True`` (so an
    empty mapping keeps none). Elements without a rule are replaced by their
    children. ``root`` itself is never removed.
    """
    allowed = {tag.lower(): rule for tag, rule in rules.items()}

    for child in list(root.children):
        sanitize(child, rules)
        if not isinstance(child, ElementNode):
            continue

        rule = allowed.get(child.tag)
        if rule is None or rule is False:
            logger.debug(f"Unwrapping disallowed <{child.tag}>")
            parent = child.parent
            for grandchild in list(child.children):
                parent.insert_before(grandchild, child)
            parent.remove_child(child)
        elif rule is not True:
            child.attributes = {
                name: value for name, value in child.attributes.items() if rule.get(name) is True
            }

    return root
