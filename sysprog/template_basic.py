"""Line-oriented template classification with a single variable per line."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Union

DEFAULT_CONTEXT = {"name": "Bob", "city": "Boston"}


class TagType(Enum):
    """Kinds of block tags recognised in a template line."""

    FOR_TAG = "for"
    IF_TAG = "if"


@dataclass
class ExpressionData:
    """A line split around its template variable."""

    head: Optional[str]
    variable: str
    tail: Optional[str]


@dataclass
class Literal:
    """A line with no template markup."""

    text: str


@dataclass
class TemplateVariable:
    """A line holding a ``{{variable}}`` expression."""

    content: ExpressionData


@dataclass
class Tag:
    """A line holding a ``{% ... %}`` block tag."""

    tag_type: TagType


@dataclass
class Unrecognized:
    """A line with markup that matches no known form."""


ContentType = Union[Literal, TemplateVariable, Tag, Unrecognized]


def check_symbol_string(input_text: str, symbol: str) -> bool:
    """Return True if ``symbol`` occurs in ``input_text``."""
    return symbol in input_text


def check_matching_pair(input_text: str, symbol1: str, symbol2: str) -> bool:
    """Return True if both symbols occur in ``input_text``."""
    return symbol1 in input_text and symbol2 in input_text


def get_index_for_symbol(input_text: str, symbol: str) -> tuple[bool, int]:
    """Return whether ``symbol`` is present and the index of its first occurrence (0 if absent)."""
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
) -> str:
    """Substitute the variable from ``context``; unknown variables render as empty."""
    return "".join(
        (content.head or "", context.get(content.variable, ""), content.tail or "")
    )


def get_expression_data(input_line: str) -> ExpressionData:
    """Split a line into head, variable and tail around its first ``{{...}}``."""
    _, open_index = get_index_for_symbol(input_line, "{")
    _, close_index = get_index_for_symbol(input_line, "}")
    if close_index < open_index + 2:
        raise ValueError(f"malformed template variable in line: {input_line!r}")
    return ExpressionData(
        head=input_line[:open_index],
        variable=input_line[open_index + 2 : close_index],
        tail=input_line[close_index + 2 :],
    )


def render_line(line: str, context: Mapping[str, str]) -> str:
    """Return the output text for one template line."""
    match get_content_type(line):
        case TemplateVariable(content=content):
            return generate_html_template_var(content, context)
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