"""
Parley dispatcher: turn chat lines into command calls.

What this module provides
- Framework: owns a prefix list and a command registry, and dispatches lines.
  • process_command(line) → handler's return value, or False when the line is
    not a runnable command.
  • dispatch(line) → Dispatch, the full per-call result (outcome, prefix, name,
    classified arguments, return value).
  • kwargs → read-only snapshot of the keyword arguments of the last line that
    reached a known, activated command.
- A module-level default Framework and functions bound to it (add_prefix,
  process_command, ...), for hosts that need a single command table.

Dispatch, step by step
1. line must be a str (TypeError otherwise).
2. The first registered prefix the line starts with is selected; none → False.
3. The whole line is split on whitespace.
4. The first token minus the prefix length is the command name; no token → False.
5. Unknown or deactivated command → False.
6. The remaining tokens are classified into positionals and keywords.
7. The keyword snapshot is replaced (possibly by an empty mapping).
8. The handler is called with the positionals (and **keywords for commands
   registered with keywords=True); its return value is returned as-is.
Lines rejected in steps 2-5 leave the keyword snapshot untouched. Exceptions
raised by handlers are not caught.

Quick start
    from parley import Framework, ACTIVATED

    chat = Framework("!")

    def greet(*names):
        return "hello " + " ".join(map(str, names))

    chat.add_command("greet", ACTIVATED, greet)
    chat.process_command("!greet Ana Bo")  # -> "hello Ana Bo"
    chat.process_command("greet Ana")      # -> False (no prefix)

Threading
- Every Framework serializes its mutations and the snapshot-then-invoke
  sequence with a re-entrant lock, so a handler running on one thread never
  sees the keywords of a line dispatched on another. Handlers may call back
  into the same Framework.
"""
import functools
import logging
import threading
from types import MappingProxyType

from rich.console import Console

from .outcomes import Dispatch, Outcome, render
from .prefixes import Prefixes
from .registry import Commands
from .tokens import classify, tokenize
from .utils import Unset, rename

logger = logging.getLogger(__name__)

console = Console(stderr=True)


class Framework:
    """
    A command table bound to a set of prefixes.

    Parameters
    - *prefixes: str
      Initial prefixes, in priority order.
    - debug: bool (keyword-only, default False)
      Render every dispatch result to stderr through Rich.
    - colorful: bool (keyword-only, default True)
      Use colors in the debug rendering.
    """
    __slots__ = ("_prefixes", "_commands", "_kwargs", "_lock", "_debug", "_colorful")

    def __init__(self, *prefixes, debug=False, colorful=True):
        if not isinstance(debug, bool):
            raise TypeError("Framework() 'debug' must be a boolean")
        if not isinstance(colorful, bool):
            raise TypeError("Framework() 'colorful' must be a boolean")
        self._prefixes = Prefixes(*prefixes)
        self._commands = Commands()
        self._kwargs = {}
        self._lock = threading.RLock()
        self._debug = debug
        self._colorful = colorful

    @property
    def prefixes(self):
        """
        Registered prefixes, in priority order (tuple snapshot).
        """
        return tuple(self._prefixes)

    @property
    def commands(self):
        """
        Registered command names (tuple snapshot).
        """
        return tuple(self._commands)

    @property
    def kwargs(self):
        """
        Keyword arguments of the last line that reached classification (read-only).
        """
        return MappingProxyType(self._kwargs)

    @property
    def debug(self):
        return self._debug

    def add_prefix(self, prefix, /, *more):
        """
        Append one or more prefixes. Always returns True.
        """
        with self._lock:
            return self._prefixes.add(prefix, *more)

    def del_prefix(self, prefix, /, *more):
        """
        Remove every occurrence of each given prefix; return the removed ones.
        """
        with self._lock:
            return self._prefixes.remove(prefix, *more)

    def add_command(self, name, activated, handler, *, keywords=False):
        """
        Register (or replace) a command. See registry.Commands.add().
        """
        with self._lock:
            return self._commands.add(name, activated, handler, keywords=keywords)

    def get_command(self, name):
        """
        Return the Command registered under name, or None.
        """
        return self._commands.get(name)

    def run_command(self, name, /, *args, **kwargs):
        """
        Call a command's handler directly, whatever its activation state.
        """
        return self._commands.run(name, *args, **kwargs)

    def del_command(self, name):
        """
        Remove a command; True when it existed.
        """
        with self._lock:
            return self._commands.delete(name)

    def toggle_command(self, name, explicit=Unset):
        """
        Flip (or set) a command's activation; returns the new state or `missing`.
        """
        with self._lock:
            return self._commands.toggle(name, explicit)

    def dispatch(self, line, /):
        """
        Run one line through the dispatcher and describe what happened.

        Returns
        - Dispatch: outcome, prefix, name, classified arguments and the handler's
          return value (False when the handler did not run).

        Raises
        - TypeError when line is not a string.
        - Whatever the handler raises.
        """
        if not isinstance(line, str):
            raise TypeError("process_command() 'line' must be a string")

        with self._lock:
            if (prefix := self._prefixes.match(line)) is None:
                return self._report(Dispatch(Outcome.NO_PREFIX, line))

            if not (tokens := tokenize(line)):
                return self._report(Dispatch(Outcome.NO_NAME, line, prefix))

            # the prefix is cut by length, as matched against the raw line
            name = tokens[0][len(prefix):]

            if (command := self._commands.get(name)) is None:
                return self._report(Dispatch(Outcome.UNKNOWN_COMMAND, line, prefix, name))
            if not command.activated:
                return self._report(Dispatch(Outcome.DEACTIVATED_COMMAND, line, prefix, name))

            arguments = classify(tokens[1:])
            self._kwargs = dict(arguments.keywords)

            if command.keywords:
                value = command(*arguments.positionals, **arguments.keywords)
            else:
                value = command(*arguments.positionals)

            return self._report(Dispatch(Outcome.DISPATCHED, line, prefix, name, arguments, value))

    def process_command(self, line, /):
        """
        Dispatch line; return the handler's value, or False if it did not run.
        """
        dispatch = self.dispatch(line)
        return dispatch.value if dispatch.dispatched else False

    def _report(self, dispatch):
        logger.debug("%s %r (%s)", dispatch.outcome.title, dispatch.line, dispatch.outcome.normalize())
        if self._debug:
            console.print(render(dispatch, colorful=self._colorful))
        return dispatch

    def __rich_repr__(self):
        yield "prefixes", self.prefixes
        yield "commands", self.commands
        yield "debug", self._debug

    def __repr__(self):
        return f"framework({', '.join('%s=%r' % pair for pair in self.__rich_repr__())})"


default = Framework()
"""
Process-wide default Framework used by the module-level functions below.
"""


def _bind(name):
    """
    Build a module-level function forwarding to the default framework's method.
    """
    method = getattr(Framework, name)

    @functools.wraps(method)
    def function(*args, **kwargs):
        return getattr(default, name)(*args, **kwargs)

    return rename(function, name)


add_prefix = _bind("add_prefix")
del_prefix = _bind("del_prefix")
add_command = _bind("add_command")
get_command = _bind("get_command")
run_command = _bind("run_command")
del_command = _bind("del_command")
toggle_command = _bind("toggle_command")
dispatch = _bind("dispatch")
process_command = _bind("process_command")


def kwargs():
    """
    Keyword snapshot of the default framework (see Framework.kwargs).
    """
    return default.kwargs


__all__ = (
    "Framework",
    "default",
    "add_prefix",
    "del_prefix",
    "add_command",
    "get_command",
    "run_command",
    "del_command",
    "toggle_command",
    "dispatch",
    "process_command",
    "kwargs",
)
