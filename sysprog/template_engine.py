"""Line-oriented template rendering supporting several variables per line."""

from __future__ import annotations

import dataclasses
import enum
import sys
from dataclasses import dataclass, field
from typing import Mapping, Union

__all__ = [
    "TagType",
    "ExpressionData",
    "Literal",
    "TemplateVariable",
    "Tag",
    "Unrecognized",
    "check_symbol_string",
    "check_matching_pair",
    "get_index_for_symbol",
    "get_content_type",
    "generate_html_template_var",
    "get_expression_data",
    "render_line",
    "main",
]

DEFAULT_CONTEXT: Mapping[str, str] = {"name": "Bob", "city": "Boston"}


class TagType(enum.Enum):
    """Kinds of ``{% ... %}`` tag lines."""

    FOR_TAG = "for"
    IF_TAG = "if"


@dataclass
class ExpressionData:
    """A template line, the words holding its variables, and its rendered form."""

    expression: str
    var_map: list[str] = field(default_factory=list)
    gen_html: str = ""


@dataclass
class Literal:
    """A line copied to the output unchanged."""

    text: str


@dataclass
class TemplateVariable:
    """A line holding one or more ``{{variable}}`` expressions."""

    content: ExpressionData


@dataclass
class Tag:
    """A ``{% ... %}`` tag line."""

    tag_type: TagType


@dataclass
class Unrecognized:
    """A line that fits no known form."""


ContentType = Union[Literal, TemplateVariable, Tag, Unrecognized]


def check_symbol_string(input_text: str, symbol: str) -> bool:
    """Return whether ``symbol`` occurs in ``input_text``."""
    return symbol in input_text


def check_matching_pair(input_text: str, symbol1: str, symbol2: str) -> bool:
    """Return whether both symbols occur in ``input_text``."""
    return symbol1 in input_text and symbol2 in input_text


def get_index_for_symbol(input_text: str, symbol: str) -> tuple[bool, int]:
    """Return whether ``symbol`` occurs, and the index of its first occurrence (0 if absent)."""
    index = input_text.find(symbol)
    if index < 0:
        return False, 0
    return True, index


def get_content_type(input_line: str) -> ContentType:
    """Classify one template line."""
    is_tag_expression = check_matching_pair(input_line, "{%", "%}")
    is_for_tag = (
        check_symbol_string(input_line, "for") and check_symbol_string(input_line, "in")
    ) or check_symbol_string(input_line, "endfor")
    is_if_tag = check_symbol_string(input_line, "if") or check_symbol_string(
        input_line, "endif"
    )
    is_template_variable = check_matching_pair(input_line, "{{", "}}")

    if is_tag_expression and is_for_tag:
        return Tag(TagType.FOR_TAG)
    if is_tag_expression and is_if_tag:
        return Tag(TagType.IF_TAG)
    if is_template_variable:
        return TemplateVariable(get_expression_data(input_line))
    if not is_tag_expression:
        return Literal(input_line)
    return Unrecognized()


def generate_html_template_var(
    content: ExpressionData, context: Mapping[str, str]
) -> ExpressionData:
    """Return ``content`` with ``gen_html`` filled in from ``context``.

    Each word in ``var_map`` is replaced whole by its variable's value.
    Raises KeyError if a variable is missing from ``context``.
    """
    html = content.expression
    for word in content.var_map:
        _, open_index = get_index_for_symbol(word, "{")
        _, close_index = get_index_for_symbol(word, "}")
        name = word[open_index + 2 : close_index]
        if name not in context:
            raise KeyError(name)
        html = html.replace(word, context[name])
    return dataclasses.replace(content, gen_html=html)


def get_expression_data(input_line: str) -> ExpressionData:
    """Collect the whitespace-separated words of a line that hold ``{{...}}``."""
    words = [
        word
        for word in input_line.split()
        if check_symbol_string(word, "{{") and check_symbol_string(word, "}}")
    ]
    return ExpressionData(expression=input_line, var_map=words, gen_html="")


def render_line(line: str, context: Mapping[str, str]) -> str:
    """Return the output text for one template line."""
    match get_content_type(line):
        case TemplateVariable(content=content):
            return generate_html_template_var(content, context).gen_html
        case Literal(text=text):
            return text
        case Tag(tag_type=TagType.FOR_TAG):
            return "For Tag not implemented"
        case Tag(tag_type=TagType.IF_TAG):
            return "If Tag not implemented"
        case _:
            return "Unrecognized input"


def main(argv=None) -> int:
    """Render template lines from standard input to standard output."""
    context = dict(DEFAULT_CONTEXT)
    for raw in sys.stdin:
        line = raw.removesuffix("\n").removesuffix("\r")
        print(render_line(line, context))
    return 0


if __name__ == "__main__":
    sys.exit(main())