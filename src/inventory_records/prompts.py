#!/usr/bin/env python3
"""
Console prompt helpers

Re-prompt until the entered text parses and passes validation.
"""
import math
import re
from typing import Callable, TypeVar


T = TypeVar('T')

# Plain ASCII notation only: no digit separators, no other scripts
INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')
DECIMAL_PATTERN = re.compile(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?')


def prompt_until_valid(
    prompt: str,
    parse: Callable[[str], T],
    error_message: str,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> T:
    """
    Keep asking until `parse` accepts the answer.

    Args:
        prompt: Text shown before each read
        parse: Converts the raw line, raising ValueError when it is rejected
        error_message: Shown after each rejected line
        read: Line reader (input() by default)
        write: Message sink (print() by default)

    Returns:
        The first value `parse` accepted

    Raises:
        EOFError: if input runs out before a valid value is entered
    """
    while True:
        text = read(prompt)
        try:
            return parse(text)
        except ValueError:
            write(error_message)


def parse_int(text: str) -> int:
    """Parse a whole line as a base-10 integer written with ASCII digits."""
    text = text.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


def parse_non_negative_int(text: str) -> int:
    value = parse_int(text)
    if value < 0:
        raise ValueError(f"negative value: {value}")
    return value


def parse_non_negative_float(text: str) -> float:
    text = text.strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        raise ValueError(f"not a number: {text!r}")
    value = float(text)
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"not a non-negative number: {text}")
    return value


def parse_description(text: str) -> str:
    """
    Accept a one-line description.

    A trailing carriage return (CRLF input piped in on POSIX) is dropped;
    any other line break inside the text is rejected.
    """
    text = text.rstrip('\r\n')
    if '\r' in text or '\n' in text:
        raise ValueError("description must be a single line")
    return text
