"""
Exceptions raised while parsing hand histories.
"""

from typing import List, Optional


class FormatError(ValueError):
    """Text does not match the amount or card token grammar."""

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.text = text
        self.pattern: Optional[str] = None   # Set by the line classifier


class HandParseError(Exception):
    """
    A field extraction failed on a line that matched a pattern.

    Carries the 1-based line number, the raw line, the name of the pattern
    that matched it and the hands finalized before the failure.
    """

    def __init__(
        self,
        line_number: int,
        line: str,
        pattern: str,
        reason: str,
        hands: Optional[List] = None
    ):
        super().__init__(f"line {line_number} ({pattern}): {line!r}: {reason}")
        self.line_number = line_number
        self.line = line
        self.pattern = pattern
        self.reason = reason
        self.hands = hands if hands is not None else []

    def __reduce__(self):
        # Rebuilt from fields when crossing a process pool boundary
        return (
            self.__class__,
            (self.line_number, self.line, self.pattern, self.reason, self.hands)
        )
