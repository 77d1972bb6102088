"""
Dispatch outcomes and their rendering.

Scope
- Outcome: canonical, stable numeric identifiers for what happened to a line
  handed to the dispatcher. Exactly one of them is DISPATCHED; the others are
  the normal "this was not a (runnable) command" results, which are reported,
  never raised.
- Dispatch: the per-call result object. It carries everything computed for one
  line (prefix, command name, classified arguments, handler return value), so
  callers never have to read shared state to learn what a call did.
- render(): Rich rendering of a Dispatch, used by the framework's debug mode.

Host integration
- The host application can provide `__codes__` (Outcome → label) and
  `__styles__` (style name → rich style) mappings in __main__ to relabel codes
  and restyle the rendering.
"""
from collections import defaultdict
from enum import IntEnum
from typing import NamedTuple

from rich.console import Group
from rich.text import Text


class Outcome(IntEnum):
    """
    canonical dispatch outcomes (stable identifiers).

    grouping
    - 10xxx: the handler ran.
    - 111xx: the line was not dispatched; these are normal negative results.
    """
    DISPATCHED          = 10000

    NO_PREFIX           = 11101
    NO_NAME             = 11102
    UNKNOWN_COMMAND     = 11103
    DEACTIVATED_COMMAND = 11104

    @property
    def title(self):
        """
        short lowercased title used in renderings.
        """
        return _TITLES[self]

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


_TITLES = {
    Outcome.DISPATCHED: "dispatched",
    Outcome.NO_PREFIX: "not a command",
    Outcome.NO_NAME: "missing command name",
    Outcome.UNKNOWN_COMMAND: "unknown command",
    Outcome.DEACTIVATED_COMMAND: "deactivated command",
}


class Dispatch(NamedTuple):
    """
    Result of handing one line to the dispatcher.

    Fields
    - outcome: Outcome
    - line: str, the line as received.
    - prefix: str | None, the matched prefix (None for NO_PREFIX).
    - name: str | None, the command name (None before it could be extracted).
    - arguments: tokens.Arguments | None, set once the arguments were classified
      (only when the command is known and activated).
    - value: the handler's return value when dispatched, False otherwise.

    A Dispatch is truthy only when the handler ran.
    """
    outcome: Outcome
    line: str
    prefix: str | None = None
    name: str | None = None
    arguments: tuple | None = None
    value: object = False

    @property
    def dispatched(self):
        return self.outcome is Outcome.DISPATCHED

    @property
    def positionals(self):
        return self.arguments.positionals if self.arguments else ()

    @property
    def keywords(self):
        return self.arguments.keywords if self.arguments else {}

    def __bool__(self):
        return self.dispatched

    def __rich__(self):
        return render(self)


def render(dispatch, /, *, colorful=True):
    """
    Build a Rich renderable for a Dispatch.

    Layout
        [ parley — 11103 | Unknown Command ] !greet
          positionals: ('hello',)
          keywords: {'color': 'red'}

    Only the header is printed for lines that never reached classification.
    """
    main = __import__("__main__")

    styles = defaultdict(str, {
        "prog-name": "bold #E6E6F0",  # near-white program name
        "code": "bold #00E5FF",  # neon cyan outcome code
        "dispatched-title": "bold #9CE19C",  # gentle green when the handler ran
        "skipped-title": "bold #FF4DA6",  # friendly pinky otherwise
        "line": "#C8C8D0",  # soft light gray input echo
        "label": "dim",
    } | getattr(main, "__styles__", {}))

    def text(fragment, style=""):
        return Text(str(fragment), styles[style] if colorful else "")

    outcome = dispatch.outcome
    header = Text.assemble(
        "[ ",
        text(getattr(main, "__prog__", "parley"), "prog-name"),
        " — ",
        text(outcome.normalize(), "code"),
        " | ",
        text(outcome.title.title(), "dispatched-title" if dispatch.dispatched else "skipped-title"),
        " ] ",
        text(dispatch.line, "line"),
    )

    if dispatch.arguments is None:
        return header

    return Group(
        header,
        Text.assemble("  ", text("positionals: ", "label"), repr(dispatch.positionals)),
        Text.assemble("  ", text("keywords: ", "label"), repr(dispatch.keywords)),
    )


__all__ = (
    "Outcome",
    "Dispatch",
    "render",
)
