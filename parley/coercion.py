"""
Token coercion: turn raw chat tokens into typed scalars.

Every positional token and every keyword value goes through coerce() exactly
once before it reaches a handler. The function is total: it never raises and,
for anything that is not one of the recognized literal forms, returns the
token untouched.

Order of checks
1. numeric literal   → int | float
2. "true" / "false"  → True / False
3. "nil"             → None
4. anything else     → the token itself (str)

Numeric literals
- decimal integers: "42", "-7", "+3"                  → int
- decimal reals:    "3.5", "-.5", "5.", "1e3", "2E-2" → float
- hex integers:     "0x1F", "-0XfF"                   → int
Spellings that Python's own int()/float() would accept but a chat user would
not mean as numbers ("inf", "nan", "1_000", "٣") are left as strings.
"""
import re

# Exact literal words and the values they stand for. Only exact, case-sensitive
# matches are converted; "True" or "NIL" stay strings.
LITERALS = {
    "true": True,
    "false": False,
    "nil": None,
}

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_HEXADECIMAL = re.compile(r"([+-]?)0[xX]([0-9a-fA-F]+)", re.ASCII)
_REAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _numeric(token):
    """
    Return the number spelled by token, or None when it is not a numeric literal.
    """
    if _INTEGER.fullmatch(token):
        return int(token)
    if match := _HEXADECIMAL.fullmatch(token):
        value = int(match[2], 16)
        return -value if match[1] == "-" else value
    if _REAL.fullmatch(token):
        return float(token)
    return None


def coerce(token, /):
    """
    Convert a raw token into a number, a boolean, None, or leave it as a string.

    Parameters
    - token: str (positional-only)
      A single whitespace-free token as produced by tokens.tokenize().

    Returns
    - int | float when token is a numeric literal (see module docs).
    - True / False for the exact words "true" / "false".
    - None for the exact word "nil".
    - token unchanged otherwise.

    Examples
    - coerce("42")    -> 42
    - coerce("3.5")   -> 3.5
    - coerce("false") -> False
    - coerce("nil")   -> None
    - coerce("hello") -> "hello"
    """
    # A numeric-looking token never falls through to the literal checks.
    if (number := _numeric(token)) is not None:
        return number
    try:
        return LITERALS[token]
    except KeyError:
        return token


__all__ = (
    "LITERALS",
    "coerce",
)
