"""Argument placeholder substitution.

Placeholder syntax (matched case-insensitively):

- ``${N}``  argument N (1-based)
- ``${N+}`` arguments N through the last, joined by a space
- ``${*}``  every argument, joined by a space
"""

import re
from re import Match, Pattern
from typing import Callable, Generic, Optional, Sequence, TypeVar

M = TypeVar("M")

ARGS_PATTERN: Pattern[str] = re.compile(r"\$\{(?:(\d+)(\+)?|(\*))\}", re.IGNORECASE)

Replacement = Callable[[Match[str]], str]
ReplaceText = Callable[[M, Pattern[str], Replacement], M]
Transform = Callable[[M], M]


def replace_in_text(message: str, pattern: Pattern[str], replacement: Replacement) -> str:
    """Default text replacement for plain string payloads."""
    if not isinstance(message, str):
        raise TypeError(
            f"Cannot substitute placeholders in {type(message).__name__}; "
            "configure a replace_text function for this payload type"
        )
    return pattern.sub(replacement, message)


def _join(args: Sequence[Optional[str]]) -> str:
    return " ".join("" if arg is None else str(arg) for arg in args)


class TemplateRenderer(Generic[M]):
    """Substitutes positional arguments into resolved messages.

    The renderer is stateless; the same instance can render any number of
    messages.

    Attributes:
        pattern: Placeholder pattern. Group 1 is the 1-based index, group 2
            the continuation marker, group 3 the wildcard marker.
        replace_text: Function applying a replacement callback to every match
            of the pattern within a payload. Platforms with non-string
            payloads supply their own.
    """

    def __init__(
        self,
        pattern: Pattern[str] = ARGS_PATTERN,
        replace_text: Optional[ReplaceText] = None,
    ):
        self.pattern = pattern
        self.replace_text: ReplaceText = replace_text or replace_in_text

    def render(
        self,
        message: M,
        args: Optional[Sequence[Optional[str]]] = None,
        transform: Optional[Transform] = None,
    ) -> M:
        """Substitute arguments into a message and apply the transform.

        With args None no substitution happens and placeholders stay as they
        are. With an empty args sequence every placeholder is cleared.

        Args:
            message: Resolved message payload.
            args: Positional arguments, or None for no substitution.
            transform: Optional function applied to the substituted payload.

        Returns:
            The rendered payload.
        """
        if args is not None:
            if len(args) > 0:
                message = self.replace_text(
                    message, self.pattern, lambda match: self.substitute(match, args)
                )
            else:
                message = self.replace_text(message, self.pattern, lambda match: "")

        if transform is not None:
            message = transform(message)

        return message

    @staticmethod
    def substitute(match: Match[str], args: Sequence[Optional[str]]) -> str:
        """Compute the replacement text for a single placeholder match.

        Out-of-range indexes, None arguments and unparseable indexes all
        produce empty text.
        """
        digits, rest, wildcard = match.group(1), match.group(2), match.group(3)

        if wildcard is not None:
            return _join(args)

        try:
            index = int(digits) - 1
        except (TypeError, ValueError):
            return ""

        if index < 0 or index >= len(args):
            return ""

        if rest is not None:
            return _join(args[index:])

        value = args[index]
        return "" if value is None else str(value)
