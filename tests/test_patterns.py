"""Tests for pattern flattening (fold of text and placeables)."""

from __future__ import annotations

from ftlextract.constants import PLACEHOLDER_UNKNOWN
from ftlextract.diagnostics import DiagnosticCode
from ftlextract.extraction import (
    ExtractionContext,
    FlatText,
    FlatVariants,
    flatten_pattern,
    iter_leaves,
)
from ftlextract.syntax.ast import (
    CallArguments,
    FunctionReference,
    Identifier,
    NumberLiteral,
    Pattern,
    Placeable,
    SelectExpression,
    TextElement,
    Unsupported,
    VariableReference,
    Variant,
    VariantList,
)


def _text(value: str) -> TextElement:
    return TextElement(value=value)


def _var(name: str) -> Placeable:
    return Placeable(expression=VariableReference(id=Identifier(name=name)))


def _select(selector: str, *variants: tuple[str, str], default: str | None = None) -> Placeable:
    default_key = default if default is not None else variants[-1][0]
    return Placeable(
        expression=SelectExpression(
            selector=VariableReference(id=Identifier(name=selector)),
            variants=tuple(
                Variant(
                    key=Identifier(name=key),
                    value=Pattern(elements=(_text(text),)),
                    default=key == default_key,
                )
                for key, text in variants
            ),
        )
    )


def _leaves(pattern: Pattern, context: ExtractionContext | None = None) -> list[tuple[tuple[str, ...], str]]:
    return list(iter_leaves(flatten_pattern(pattern, context=context)))


class TestLiteralPatterns:
    """Patterns without branching placeables flatten to one string."""

    def test_text_only(self) -> None:
        """Text elements are concatenated and stripped."""
        pattern = Pattern(elements=(_text("  Hello, "), _text("world!  ")))
        assert flatten_pattern(pattern) == FlatText("Hello, world!")

    def test_empty_pattern(self) -> None:
        """No elements flatten to empty text."""
        assert flatten_pattern(Pattern(elements=())) == FlatText("")

    def test_variable_spliced_in_place(self) -> None:
        """greeting = Hello, { $name }! keeps the token where the placeable was."""
        pattern = Pattern(elements=(_text("Hello, "), _var("name"), _text("!")))
        assert flatten_pattern(pattern) == FlatText("Hello, $name !")

    def test_markup_preserved(self) -> None:
        """Markup around placeables reaches the linter intact."""
        pattern = Pattern(elements=(_text('<a href="'), _var("url"), _text('">link</a>')))
        assert flatten_pattern(pattern) == FlatText('<a href="$url ">link</a>')

    def test_function_call_padding(self) -> None:
        """Function tokens are padded with spaces on both sides."""
        call = Placeable(
            expression=FunctionReference(
                id=Identifier(name="NUMBER"), arguments=CallArguments(positional=(), named=())
            )
        )
        pattern = Pattern(elements=(_text("Total:"), call, _text("items")))
        assert flatten_pattern(pattern) == FlatText("Total: NUMBER(...) items")

    def test_list_elements_accepted(self) -> None:
        """A list of elements flattens like a tuple."""
        pattern = Pattern(elements=[_text("a"), _text("b")])  # type: ignore[arg-type]
        assert flatten_pattern(pattern) == FlatText("ab")


class TestVariantPatterns:
    """A branching placeable fans the whole pattern out."""

    def test_select_only(self) -> None:
        """color = { $count -> [one] red *[other] reds }"""
        pattern = Pattern(elements=(_select("count", ("one", "red"), ("other", "reds")),))
        assert _leaves(pattern) == [(("one",), "red"), (("other",), "reds")]

    def test_surrounding_text_kept_in_every_branch(self) -> None:
        """Text before and after the select appears in each branch."""
        pattern = Pattern(
            elements=(
                _text("You have "),
                _select("n", ("one", "one message"), ("other", "many messages")),
                _text(" in <b>"),
                _var("folder"),
                _text("</b>."),
            )
        )
        assert _leaves(pattern) == [
            (("one",), "You have one message in <b>$folder </b>."),
            (("other",), "You have many messages in <b>$folder </b>."),
        ]

    def test_branch_leaves_are_stripped(self) -> None:
        """Leading and trailing whitespace is stripped per branch."""
        pattern = Pattern(elements=(_select("n", ("one", "  a  "), ("other", " b ")), _text("  ")))
        assert _leaves(pattern) == [(("one",), "a"), (("other",), "b")]

    def test_branch_default_flag_kept(self) -> None:
        """The default marker survives flattening."""
        pattern = Pattern(
            elements=(_select("n", ("one", "a"), ("other", "b"), default="one"),)
        )
        result = flatten_pattern(pattern)

        assert isinstance(result, FlatVariants)
        assert [b.default for b in result.branches] == [True, False]

    def test_nested_select_yields_nested_keys(self) -> None:
        """A select inside a variant yields a two-key path per leaf."""
        inner = SelectExpression(
            selector=VariableReference(id=Identifier(name="count")),
            variants=(
                Variant(key=Identifier(name="one"), value=Pattern(elements=(_text("one item"),))),
                Variant(
                    key=Identifier(name="other"),
                    value=Pattern(elements=(_var("count"), _text("items"))),
                    default=True,
                ),
            ),
        )
        outer = SelectExpression(
            selector=VariableReference(id=Identifier(name="gender")),
            variants=(
                Variant(
                    key=Identifier(name="male"),
                    value=Pattern(elements=(_text("his "), Placeable(expression=inner))),
                ),
                Variant(
                    key=Identifier(name="female"),
                    value=Pattern(elements=(_text("her things"),)),
                    default=True,
                ),
            ),
        )
        pattern = Pattern(elements=(Placeable(expression=outer), _text(".")))

        assert _leaves(pattern) == [
            (("male", "one"), "his one item."),
            (("male", "other"), "his $count items."),
            (("female",), "her things."),
        ]

    def test_variant_list_value_inside_variant(self) -> None:
        """A VariantList variant value flattens as nested branches."""
        select = SelectExpression(
            selector=VariableReference(id=Identifier(name="n")),
            variants=(
                Variant(
                    key=NumberLiteral(value=1, raw="1"),
                    value=VariantList(
                        variants=(
                            Variant(
                                key=Identifier(name="short"),
                                value=Pattern(elements=(_text("x"),)),
                                default=True,
                            ),
                        )
                    ),
                    default=True,
                ),
            ),
        )
        pattern = Pattern(elements=(Placeable(expression=select),))
        assert _leaves(pattern) == [(("1", "short"), "x")]


class TestMultipleSelectors:
    """A second selector drives the structure; the first collapses to its default."""

    def test_second_selector_wins_structure(self) -> None:
        """Branches come from the last selector only, never a cross product."""
        context = ExtractionContext()
        pattern = Pattern(
            elements=(
                _select("a", ("x", "X1"), ("y", "Y1"), default="y"),
                _text(" and "),
                _select("b", ("one", "1"), ("two", "2"), ("three", "3")),
            )
        )
        leaves = _leaves(pattern, context)

        assert leaves == [
            (("one",), "Y1 and 1"),
            (("two",), "Y1 and 2"),
            (("three",), "Y1 and 3"),
        ]
        assert [d.code for d in context.diagnostics] == [DiagnosticCode.SELECTOR_COLLAPSED]
        assert context.diagnostics[0].severity == "warning"

    def test_collapse_without_default_uses_first(self) -> None:
        """When no variant is marked default, the first one is kept."""
        first = SelectExpression(
            selector=VariableReference(id=Identifier(name="a")),
            variants=(
                Variant(key=Identifier(name="x"), value=Pattern(elements=(_text("first"),))),
                Variant(key=Identifier(name="y"), value=Pattern(elements=(_text("second"),))),
            ),
        )
        pattern = Pattern(
            elements=(
                Placeable(expression=first),
                _text(" "),
                _select("b", ("k", "v")),
            )
        )
        assert _leaves(pattern) == [(("k",), "first v")]


class TestMalformedElements:
    """Malformed elements degrade to {?} instead of failing the pattern."""

    def test_text_element_without_string(self) -> None:
        """A TextElement holding no text renders as {?}."""
        context = ExtractionContext()
        pattern = Pattern(elements=(_text("Hello "), TextElement(value=None), _text("!")))  # type: ignore[arg-type]

        assert flatten_pattern(pattern, context=context) == FlatText(f"Hello {PLACEHOLDER_UNKNOWN}!")
        assert [d.code for d in context.diagnostics] == [DiagnosticCode.MALFORMED_ELEMENT]

    def test_empty_text_element(self) -> None:
        """An empty TextElement renders as {?} like a malformed one."""
        context = ExtractionContext()
        pattern = Pattern(elements=(_text("Hello "), _text(""), _text("!")))

        result = flatten_pattern(pattern, context=context)

        assert result == FlatText(f"Hello {PLACEHOLDER_UNKNOWN}!")
        assert [d.code for d in context.diagnostics] == [DiagnosticCode.MALFORMED_ELEMENT]
        assert "empty text" in context.diagnostics[0].message

    def test_unknown_element(self) -> None:
        """Unknown element kinds render as {?} and are reported."""
        context = ExtractionContext()
        pattern = Pattern(elements=(_text("a"), Unsupported(kind="Markup"), _text("b")))

        assert flatten_pattern(pattern, context=context) == FlatText(f"a{PLACEHOLDER_UNKNOWN}b")
        assert context.diagnostics[0].code == DiagnosticCode.UNKNOWN_ELEMENT
        assert context.diagnostics[0].node_kind == "Markup"

    def test_elements_not_a_sequence(self) -> None:
        """A pattern without an element sequence degrades to {?}."""
        context = ExtractionContext()
        pattern = Pattern(elements=None)  # type: ignore[arg-type]

        assert flatten_pattern(pattern, context=context) == FlatText(PLACEHOLDER_UNKNOWN)
        assert context.diagnostics[0].code == DiagnosticCode.MALFORMED_PATTERN

    def test_unknown_variant_key(self) -> None:
        """Unrenderable variant keys become {?} but keep their branch."""
        context = ExtractionContext()
        select = SelectExpression(
            selector=VariableReference(id=Identifier(name="n")),
            variants=(
                Variant(
                    key=Unsupported(kind="StringKey"),
                    value=Pattern(elements=(_text("v"),)),
                    default=True,
                ),
            ),
        )
        pattern = Pattern(elements=(Placeable(expression=select),))

        assert _leaves(pattern, context) == [((PLACEHOLDER_UNKNOWN,), "v")]
        assert context.diagnostics[0].code == DiagnosticCode.UNKNOWN_VARIANT_KEY


class TestDepthLimit:
    """Nesting beyond max_depth degrades instead of raising RecursionError."""

    def test_deep_placeable_chain(self) -> None:
        """A chain deeper than the limit renders the placeholder once."""
        expression: object = VariableReference(id=Identifier(name="x"))
        for _ in range(50):
            expression = Placeable(expression=expression)  # type: ignore[arg-type]
        pattern = Pattern(elements=(_text("a "), Placeable(expression=expression)))  # type: ignore[arg-type]

        context = ExtractionContext(max_depth=10)
        result = flatten_pattern(pattern, context=context)

        assert result == FlatText(f"a {PLACEHOLDER_UNKNOWN}")
        assert [d.code for d in context.diagnostics] == [DiagnosticCode.MAX_DEPTH_EXCEEDED]

    def test_guard_released_after_pattern(self) -> None:
        """Depth returns to zero so the context can be reused."""
        context = ExtractionContext()
        flatten_pattern(Pattern(elements=(_select("n", ("one", "a"), ("other", "b")),)), context=context)
        assert context.depth_guard.depth == 0

    def test_within_limit_untouched(self) -> None:
        """Nesting below the limit resolves normally."""
        expression: object = VariableReference(id=Identifier(name="x"))
        for _ in range(5):
            expression = Placeable(expression=expression)  # type: ignore[arg-type]
        pattern = Pattern(elements=(Placeable(expression=expression),))  # type: ignore[arg-type]

        assert flatten_pattern(pattern, context=ExtractionContext(max_depth=10)) == FlatText("$x")

    def test_deep_variant_list_under_select(self) -> None:
        """Thousands of nested variant lists stop at the limit instead of recursing."""
        value: object = Pattern(elements=(_text("leaf"),))
        for _ in range(3000):
            value = VariantList(
                variants=(Variant(key=Identifier(name="k"), value=value, default=True),)  # type: ignore[arg-type]
            )
        select = SelectExpression(
            selector=VariableReference(id=Identifier(name="n")),
            variants=(Variant(key=Identifier(name="deep"), value=value, default=True),),  # type: ignore[arg-type]
        )
        pattern = Pattern(elements=(Placeable(expression=select),))

        context = ExtractionContext()
        leaves = _leaves(pattern, context)

        assert len(leaves) == 1
        path, text = leaves[0]
        assert path[0] == "deep"
        assert text == PLACEHOLDER_UNKNOWN
        assert [d.code for d in context.diagnostics] == [DiagnosticCode.MAX_DEPTH_EXCEEDED]
        assert context.depth_guard.depth == 0
