"""
Command registry: named command records and their activation state.

What this module provides
- Command: the record stored per name. Its handler (and name/keywords policy)
  are fixed once created; only the activation flag can change.
- Commands: the name → Command mapping with add/get/delete/toggle/run.
- ACTIVATED / DEACTIVATED: readable aliases for the activation flag.

Activation
- The activation flag only gates text-driven dispatch (Framework.process_command).
  Commands.run() calls the handler of a deactivated command all the same, so
  host code can always invoke a command programmatically.

Not-found outcomes
- get() returns None, delete() returns False, run() returns None and toggle()
  returns the `missing` sentinel for unknown names. None of them raise.

Contract errors
- Wrong argument types (non-string name, non-bool activation, non-callable
  handler) raise TypeError at the call site.
"""
import logging

from .sentinel import missing
from .utils import Unset

logger = logging.getLogger(__name__)

ACTIVATED = True
DEACTIVATED = False


class Command:
    """
    A registered command.

    Attributes
    - name: str (read-only)
    - handler: Callable (read-only); replacing it means adding the command again.
    - keywords: bool (read-only); when True the dispatcher passes keyword
      arguments to the handler as Python keyword arguments.
    - activated: bool (mutable); gates text-driven dispatch only.

    Records are shared: the object returned by Commands.add() is the one the
    registry holds, so toggling is visible through every reference.
    """
    __slots__ = ("_name", "_handler", "_keywords", "_activated")

    def __init__(self, name, activated, handler, *, keywords=False):
        self._name = name
        self._handler = handler
        self._keywords = keywords
        self.activated = activated

    @property
    def name(self):
        return self._name

    @property
    def handler(self):
        return self._handler

    @property
    def keywords(self):
        return self._keywords

    @property
    def activated(self):
        return self._activated

    @activated.setter
    def activated(self, value):
        if not isinstance(value, bool):
            raise TypeError("command 'activated' must be a boolean")
        self._activated = value

    def __call__(self, *args, **kwargs):
        return self._handler(*args, **kwargs)

    def __rich_repr__(self):
        yield "name", self._name
        yield "activated", self._activated
        yield "keywords", self._keywords
        yield "handler", self._handler

    def __repr__(self):
        return f"command({', '.join('%s=%r' % pair for pair in self.__rich_repr__())})"


class Commands:
    """
    Mapping from command name (case-sensitive) to Command.

    Non-string names passed to the lookup/mutation methods are looked up by
    their str() form; add() itself requires a real string.
    """
    __slots__ = ("_commands",)

    def __init__(self):
        self._commands = {}

    def add(self, name, activated, handler, *, keywords=False):
        """
        Register handler under name, replacing any previous record wholesale.

        Parameters
        - name: str
        - activated: bool (use ACTIVATED / DEACTIVATED for readability)
        - handler: Callable invoked with the positional arguments of a call.
        - keywords: bool (keyword-only)
          pass keyword arguments to the handler as **keywords on dispatch.

        Returns
        - Command: the new record (shared reference).

        Raises
        - TypeError when an argument has the wrong type.
        """
        if not isinstance(name, str):
            raise TypeError("add_command() 'name' must be a string")
        if not isinstance(activated, bool):
            raise TypeError("add_command() 'activated' must be a boolean")
        if not callable(handler):
            raise TypeError("add_command() 'handler' must be callable")
        if not isinstance(keywords, bool):
            raise TypeError("add_command() 'keywords' must be a boolean")

        if name in self._commands:
            logger.warning("command %r is being replaced", name)
        self._commands[name] = command = Command(name, activated, handler, keywords=keywords)
        logger.debug("added command %r (activated=%s)", name, activated)
        return command

    def get(self, name):
        """
        Return the Command registered under name, or None.
        """
        return self._commands.get(str(name))

    def delete(self, name):
        """
        Remove a command. Returns True when it existed, False otherwise.
        """
        try:
            del self._commands[name := str(name)]
        except KeyError:
            return False
        logger.debug("deleted command %r", name)
        return True

    def toggle(self, name, explicit=Unset):
        """
        Flip the activation flag of a command, or set it explicitly.

        Parameters
        - name: str
        - explicit: bool (optional)
          the state to set; when omitted the current state is flipped.

        Returns
        - bool: the new activation state.
        - missing: when no command is registered under name.

        Raises
        - TypeError when explicit is given but is not a bool.
        """
        if explicit is not Unset and not isinstance(explicit, bool):
            raise TypeError("toggle_command() 'explicit' must be a boolean")
        if (command := self.get(name)) is None:
            logger.debug("cannot toggle unknown command %r", str(name))
            return missing
        command.activated = not command.activated if explicit is Unset else explicit
        logger.debug("toggled command %r (activated=%s)", command.name, command.activated)
        return command.activated

    def run(self, name, /, *args, **kwargs):
        """
        Call a command's handler directly, ignoring its activation flag.

        Returns the handler's return value, or None for unknown names. Errors
        raised by the handler propagate unchanged.
        """
        if (command := self.get(name)) is None:
            return None
        return command(*args, **kwargs)

    def __contains__(self, name):
        return str(name) in self._commands

    def __iter__(self):
        return iter(tuple(self._commands))

    def __len__(self):
        return len(self._commands)

    def __rich_repr__(self):
        yield from self._commands.values()

    def __repr__(self):
        return f"commands({', '.join(map(repr, self._commands.values()))})"


__all__ = (
    "ACTIVATED",
    "DEACTIVATED",
    "Command",
    "Commands",
)
