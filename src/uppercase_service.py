"""
Transformation Service

str.upper() applies the Unicode default case mapping, which does not depend
on the process locale. That gives English casing everywhere, including on
hosts configured for Turkish ('i' -> 'I', never 'İ'), and expands characters
whose uppercase form is longer ('ß' -> 'SS').
"""

from models import InvalidRequestError


def to_upper(text):
    """
    Convert text to uppercase.

    Args:
        text (str): Text to convert

    Returns:
        str: Uppercase form of text

    Raises:
        InvalidRequestError: If text is None or not a string
    """
    if text is None:
        raise InvalidRequestError("Missing input field")
    if not isinstance(text, str):
        raise InvalidRequestError("Field 'input' must be a string")

    return text.upper()
