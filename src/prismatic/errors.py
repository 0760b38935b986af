"""Exceptions raised by prismatic."""


class PrismaticError(Exception):
    """Base class for all prismatic errors."""


class FormatError(PrismaticError, ValueError):
    """A color string is not a valid hexadecimal numeral in the 24-bit range."""


class PreconditionViolation(PrismaticError, ValueError):
    """
    A caller broke an operation's contract.

    Raised for programming errors such as a token sequence whose length does
    not match the visible characters of the text it is applied to. These are
    not meant to be caught and recovered from.
    """
