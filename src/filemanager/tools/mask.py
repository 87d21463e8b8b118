"""
Wildcard mask translation for filename search.

A mask uses ``*`` for any run of characters (including none) and ``?`` for
exactly one character. Every other character is literal. The translated
expression is anchored at both ends and is matched against the filename only.
"""

import re


# Characters that are literal in a filename but special in a regular expression
REGEX_METACHARACTERS = frozenset('\\+^$|{}()[]')


def translate(mask: str) -> str:
    """
    Translate a wildcard mask into an anchored regular expression.

    Never fails: problems with the resulting expression surface when it is
    compiled.

    Args:
        mask: Wildcard mask such as ``*.txt`` or ``file?.log``

    Returns:
        Regular expression string, e.g. ``^.*\\.txt$``
    """
    parts = ['^']
    for char in mask:
        if char == '*':
            parts.append('.*')
        elif char == '?':
            parts.append('.')
        elif char == '.':
            parts.append('\\.')
        elif char in REGEX_METACHARACTERS:
            parts.append('\\' + char)
        else:
            parts.append(char)
    parts.append('$')
    return ''.join(parts)


def compile_mask(mask: str) -> re.Pattern:
    """
    Compile a wildcard mask into a pattern for ``fullmatch`` against filenames.

    Raises:
        re.error: If the regular expression engine rejects the translation
    """
    return re.compile(translate(mask))


def matches(pattern: re.Pattern, filename: str) -> bool:
    """Check whether a whole filename satisfies a compiled mask."""
    return pattern.fullmatch(filename) is not None
