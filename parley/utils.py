"""
Parley utilities (internal helpers, carefully exposed)

Overview
- UnsetType / Unset
  • Singleton sentinel for "argument not provided", distinct from None and False.
  • Used where any value (including None) is a caller mistake we want to report,
    e.g. the explicit state of toggle_command().

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to bound or generated callables so the
    module-level API reads cleanly in tracebacks and reprs.

Stability and contract
- Names not in __all__ are internal and may change without notice.
"""
import builtins
import functools
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing an argument that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and False.
    - Printable: repr(Unset) -> "Unset".
    - Non-subclassable and a singleton per process.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - rename(callable, name) -> callable (updated in place)
    - rename(name) -> decorator

    Errors
    - TypeError on a non-callable target, a non-string name, a callable whose
      names cannot be updated (e.g. built-ins), or a wrong arity.
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


Unset = UnsetType()
"""
Internal sentinel for "not provided".

Use Unset as a default when None (or any other value) is something the caller
could pass by mistake and must be told about, rather than silently accepted.
"""


__all__ = (
    # Functions
    "rename",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
