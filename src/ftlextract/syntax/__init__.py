"""Fluent syntax package.

AST definitions consumed by the extraction walk. Parsing FTL source is
delegated to ftllexengine's Fluent 1.0 parser; ``parse`` is its entry point,
re-exported so callers need only one import.

Python 3.13+.
"""

from ftllexengine.enums import CommentType
from ftllexengine.syntax import parse

from .ast import (
    Annotation,
    Attribute,
    CallArguments,
    Comment,
    Entry,
    EntryValue,
    Expression,
    FunctionReference,
    Identifier,
    InlineExpression,
    Junk,
    Message,
    MessageReference,
    NamedArgument,
    NumberLiteral,
    Pattern,
    PatternElement,
    Placeable,
    Resource,
    SelectExpression,
    StringLiteral,
    Term,
    TermReference,
    TextElement,
    Unsupported,
    VariableReference,
    Variant,
    VariantExpression,
    VariantKey,
    VariantList,
)

__all__ = [
    "Annotation",
    "Attribute",
    "CallArguments",
    "Comment",
    "CommentType",
    "Entry",
    "EntryValue",
    "Expression",
    "FunctionReference",
    "Identifier",
    "InlineExpression",
    "Junk",
    "Message",
    "MessageReference",
    "NamedArgument",
    "NumberLiteral",
    "Pattern",
    "PatternElement",
    "Placeable",
    "Resource",
    "SelectExpression",
    "StringLiteral",
    "Term",
    "TermReference",
    "TextElement",
    "Unsupported",
    "VariableReference",
    "Variant",
    "VariantExpression",
    "VariantKey",
    "VariantList",
    "parse",
]
