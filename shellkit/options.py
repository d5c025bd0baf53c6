"""Session-wide ("global") option values set with the set/unset meta-commands."""

import logging
from typing import Callable, Iterable

from .command import Invocation
from .errors import UnknownOption

logger = logging.getLogger(__name__)


class GlobalOptions:
    """Mapping of option name to string value, alive until the shell exits.

    ``known`` returns the option names set() accepts; it is called on every
    set so registrations made later are honoured.
    """

    def __init__(self, known: Callable[[], Iterable[str]]):
        self._known = known
        self._values: dict[str, str] = {}

    def set(self, name: str, value: str) -> None:
        if name not in self._known():
            raise UnknownOption(name)
        self._values[name] = value
        logger.debug("global option %s=%r", name, value)

    def unset(self, name: str) -> None:
        """Remove name. Removing an option that was never set is a no-op."""
        self._values.pop(name, None)

    def get(self, name: str) -> str | None:
        return self._values.get(name)

    def dump(self) -> str:
        """Return ``name=value`` lines sorted by name."""
        return "".join(f"{k}={v}\n" for k, v in sorted(self._values.items()))

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)

    def resolve(self, invocation: Invocation | None, name: str) -> str:
        """Resolve an option value: command line, then global, then "".

        Never raises; an unresolved option is a normal state.
        """
        if invocation is None or not name:
            return ""
        if invocation.provided(name):
            return _as_string(invocation.options[name])
        return self._values.get(name, "")

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)


def _as_string(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ",".join(value)
    return "" if value is None else str(value)
