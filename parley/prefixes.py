"""
Command prefixes: the literal markers that open a command line ("!", ";;", ...).

Prefixes are kept as an ordered list. Order of registration is the match
priority: match() returns the first registered prefix the line starts with,
not the longest one. With ["!", "!!"] the line "!!ban" matches "!" and the
command name is "!ban".

Duplicates are allowed; remove() takes out every occurrence of a prefix.
"""
import logging

logger = logging.getLogger(__name__)


class Prefixes:
    """
    Ordered, mutable collection of command prefixes.

    Example
        >>> prefixes = Prefixes("!", "!", "?")
        >>> prefixes.remove("!")
        ['!', '!']
        >>> list(prefixes)
        ['?']
    """
    __slots__ = ("_prefixes",)

    def __init__(self, *prefixes):
        self._prefixes = []
        if prefixes:
            self.add(*prefixes)

    def add(self, prefix, /, *more):
        """
        Append one or more prefixes, in argument order.

        No validation and no uniqueness check; non-string values are stored as
        their str() form. Always returns True.
        """
        for prefix in (prefix, *more):
            self._prefixes.append(prefix := str(prefix))
            logger.debug("added prefix %r", prefix)
        return True

    def remove(self, prefix, /, *more):
        """
        Remove every occurrence of each given prefix.

        Returns
        - list[str]: one entry per removed occurrence, in removal order. Targets
          that are not registered contribute nothing.
        """
        removed = []
        for target in map(str, (prefix, *more)):
            kept = [prefix for prefix in self._prefixes if prefix != target]
            removed.extend([target] * (len(self._prefixes) - len(kept)))
            self._prefixes[:] = kept
        if removed:
            logger.debug("removed prefixes %r", removed)
        return removed

    def match(self, line, /):
        """
        Return the first registered prefix that line starts with, or None.
        """
        for prefix in self._prefixes:
            if line.startswith(prefix):
                return prefix
        return None

    def __iter__(self):
        return iter(tuple(self._prefixes))

    def __len__(self):
        return len(self._prefixes)

    def __contains__(self, prefix):
        return prefix in self._prefixes

    def __rich_repr__(self):
        yield from self._prefixes

    def __repr__(self):
        return f"prefixes({', '.join(map(repr, self._prefixes))})"


__all__ = (
    "Prefixes",
)
