"""
Tokenizing and classifying a command line.

tokenize(line)
- Splits on runs of whitespace and nothing else. There is no quoting, no
  escaping and no comma handling: `"a b"` is two tokens (`"a` and `b"`) and
  `x,y` is one.

classify(tokens)
- Partitions the tokens that follow the command token into positionals and
  keywords, coercing every value through coercion.coerce().
- A token ending in `key=value` (both sides non-empty, neither containing '=')
  is a keyword; everything else is positional.

Known sharp edge
- A positional that legitimately contains '=' with text on both sides, such as
  a search for `a=b`, is always taken as the keyword `a` with value `b`. There
  is no way to escape it. Handlers written against this behavior rely on the
  exact split, so it is kept as is.
- For a token with several '=' the trailing pair wins: `a=b=c` is the keyword
  `b` with value `c`. Tokens whose '=' has an empty side (`=x`, `x=`, `x==y`)
  are positional.
"""
import re
from typing import NamedTuple

from .coercion import coerce

_KEYWORD = re.compile(r"(?P<key>[^=]+)=(?P<value>[^=]+)\Z")


class Arguments(NamedTuple):
    """
    Classified tail of a command line.

    Fields
    - positionals: tuple of coerced values, in their original order.
    - keywords: dict mapping keyword name to coerced value (last duplicate wins).
    """
    positionals: tuple
    keywords: dict


def tokenize(line, /):
    """
    Split line on whitespace runs; empty or blank lines give an empty list.
    """
    return line.split()


def classify(tokens, /):
    """
    Classify tokens into an Arguments(positionals, keywords) pair.

    Parameters
    - tokens: Iterable[str] (positional-only)
      The tokens after the command token.

    Returns
    - Arguments: every token lands in exactly one of the two fields.

    Example
    - classify(["pos1", "key1=value1", "pos2", "pos3", "key2=value2"])
      -> Arguments(("pos1", "pos2", "pos3"), {"key1": "value1", "key2": "value2"})
    """
    positionals = []
    keywords = {}

    for token in tokens:
        # anchored at the end of the token; a leading "a=" in "a=b=c" is dropped
        if match := _KEYWORD.search(token):
            keywords[match["key"]] = coerce(match["value"])
        else:
            positionals.append(coerce(token))

    return Arguments(tuple(positionals), keywords)


__all__ = (
    "Arguments",
    "tokenize",
    "classify",
)
