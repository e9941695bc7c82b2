"""Hypothesis strategies for ftlextract property-based testing.

Usage:
    from tests.strategies import ftl_resources, ftl_single_select_patterns
"""

from .ftl import (
    FTL_SAFE_CHARS,
    PLURAL_KEYS,
    ftl_attribute_nodes,
    ftl_comment_nodes,
    ftl_function_references,
    ftl_identifiers,
    ftl_inline_patterns,
    ftl_inline_placeables,
    ftl_message_nodes,
    ftl_message_references,
    ftl_number_literals,
    ftl_resources,
    ftl_select_expressions,
    ftl_simple_text,
    ftl_single_select_patterns,
    ftl_string_literals,
    ftl_term_nodes,
    ftl_term_references,
    ftl_text_elements,
    ftl_text_only_patterns,
    ftl_variable_references,
)

__all__ = [
    "FTL_SAFE_CHARS",
    "PLURAL_KEYS",
    "ftl_attribute_nodes",
    "ftl_comment_nodes",
    "ftl_function_references",
    "ftl_identifiers",
    "ftl_inline_patterns",
    "ftl_inline_placeables",
    "ftl_message_nodes",
    "ftl_message_references",
    "ftl_number_literals",
    "ftl_resources",
    "ftl_select_expressions",
    "ftl_simple_text",
    "ftl_single_select_patterns",
    "ftl_string_literals",
    "ftl_term_nodes",
    "ftl_term_references",
    "ftl_text_elements",
    "ftl_text_only_patterns",
    "ftl_variable_references",
]
