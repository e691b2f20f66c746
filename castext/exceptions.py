class CASParseError(Exception):
    """Base error raised while parsing a CAS document."""


class InvalidInputError(CASParseError):
    """Input is empty or not text."""


class StructuralError(CASParseError):
    """Expected section boundaries are missing from the document."""


class IncorrectPasswordError(CASParseError):
    """The PDF could not be unlocked with the given password."""
