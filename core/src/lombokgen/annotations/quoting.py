"""Quoting of raw option values into annotation literal syntax."""

import re

_BOOLEAN_LITERALS = ("true", "false")
_WORD_RUN = re.compile(r"\w+", re.ASCII)
_LIST_SEPARATOR = re.compile(r"\s*,\s*")


def quote_option_value(value: str) -> str:
    """Turn a raw configuration value into an annotation literal.

    ``true`` and ``false`` pass through unquoted. Any other value has every
    run of ASCII word characters wrapped in double quotes. A value containing a
    comma becomes an array literal first, with items separated by ``", "``.

    Examples:
        >>> quote_option_value("true")
        'true'
        >>> quote_option_value("foo")
        '"foo"'
        >>> quote_option_value("foo,bar")
        '{"foo", "bar"}'

    Args:
        value: Raw option value as it appears in the configuration

    Returns:
        The literal to place after ``key=`` in the rendered annotation
    """
    if value in _BOOLEAN_LITERALS:
        return value

    if "," in value:
        value = "{%s}" % _LIST_SEPARATOR.sub(", ", value.strip())

    return _WORD_RUN.sub(r'"\g<0>"', value)


def format_option(option_key: str, value: str) -> str:
    """Build the ``key=value`` fragment for one option."""
    return f"{option_key}={quote_option_value(value)}"
