"""
CSS handling: node model, style-object parsing, processing, flattening
and selector classification.
"""

from .flatten import FlatItem, FlatRule, PassthroughBlock, flatten_rules
from .nodes import AtRule, Comment, Declaration, Node, Root, Rule, split_selector_list
from .processor import CssProcessor, ProcessResult, StyleProcessor
from .selectors import Token, class_names, classify, tokenize
from .style_object import StyleObject, dashify, parse_style_object

__all__ = [
    # Nodes
    "AtRule",
    "Comment",
    "Declaration",
    "Node",
    "Root",
    "Rule",
    "split_selector_list",
    # Style objects
    "StyleObject",
    "dashify",
    "parse_style_object",
    # Processing
    "CssProcessor",
    "ProcessResult",
    "StyleProcessor",
    # Flattening
    "FlatItem",
    "FlatRule",
    "PassthroughBlock",
    "flatten_rules",
    # Selectors
    "Token",
    "class_names",
    "classify",
    "tokenize",
]
