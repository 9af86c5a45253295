import logging
from typing import Callable, TypeVar

from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def read_choice(prompt: str) -> str:
    """
    Reads a single-character command. Surrounding whitespace is ignored and
    only the first character counts, so "a" and "  add" both select "a".
    An empty line comes back as "".
    """
    return input(prompt).strip()[:1]


def read_text(prompt: str) -> str:
    """Reads a free-text line, dropping leading and trailing whitespace."""
    return input(prompt).strip()


def read_value(prompt: str, adapter: TypeAdapter[T], error_message: str) -> T:
    """
    Prompts until the operator's answer validates against `adapter`.
    Malformed input is reported and the same prompt is shown again.
    """
    while True:
        raw = input(prompt).strip()
        try:
            return adapter.validate_python(raw)
        except ValidationError as e:
            logger.debug(f"Rejected input {raw!r} for {prompt.strip()!r}: {e.errors()}")
            print(error_message)


def read_until_valid(prompt: str, parse: Callable[[str], T], is_valid: Callable[[T], bool],
                     error_message: str, before_prompt: Callable[[], None] | None = None) -> T:
    """
    Generic retry loop used for category selection: optionally shows a
    listing, prompts, parses, and repeats until `is_valid` accepts the value.
    """
    while True:
        if before_prompt is not None:
            before_prompt()
        value = parse(input(prompt))
        if is_valid(value):
            return value
        logger.info(f"Rejected selection {value!r} for {prompt.strip()!r}")
        print(error_message)
