"""
"Command not found" sentinel.

This module defines a process-wide singleton `missing` and its type `missingtype`.
It is the result reported by registry mutations that target a command name that
is not registered (see Commands.toggle). Returning a dedicated object keeps the
two outcomes apart:

    state = framework.toggle_command("greet")
    if state is missing:
        ...  # no such command
    elif state:
        ...  # now activated
    else:
        ...  # now deactivated

Semantics
- Falsy: bool(missing) is False, so `if not state` still reads naturally for
  callers that do not care about the difference.
- Distinct: missing is neither None nor False and compares unequal to both.
- Stable string form: repr(missing) == "missing" (Rich uses a dim style).
- Identity: missingtype() always returns the same instance per interpreter,
  including across copy, deepcopy and pickle.
"""
import functools

from rich.text import Text


class missingtype:
    """
    Singleton type of the "command not found" result.

    Notes
    - This type is final; subclassing is blocked to preserve semantics.
    - Calling missingtype() repeatedly yields the same object.
    """

    @functools.cache
    def __new__(cls):
        """
        Return the unique instance of missingtype (per process).
        """
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __rich__(self):
        """
        Rich protocol hook: render a dim 'missing' token.
        """
        return Text(repr(self), style="dim")

    def __repr__(self):
        return "missing"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'missingtype' is not an acceptable base type")


missing = missingtype()


__all__ = (
    "missingtype",
    "missing",
)
