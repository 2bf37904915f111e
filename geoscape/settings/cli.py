"""
Command-line overrides for geoscape.

Arguments take the form ``-name value`` or ``/name value``. The name is
case-insensitive and may carry a doubled leading dash (``--name value``).
Names matching an existing option overwrite it; ``data`` and ``user`` override
the data and user folders.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from .registry import OptionRegistry
from .types import CliOverrides

logger = logging.getLogger(__name__)

DATA_FLAG = "data"
USER_FLAG = "user"
HELP_FLAGS = ("help", "?")


def normalize_flag(arg: str) -> Optional[str]:
    """Return the lower-cased flag name of ``arg``, or None if it is a value."""
    if len(arg) < 2 or arg[0] not in "-/":
        return None
    if arg[1] == "-" and len(arg) > 2:
        name = arg[2:]
    else:
        name = arg[1:]
    return name.lower()


def wants_help(args: Sequence[str]) -> bool:
    """Check whether any argument asks for the usage text."""
    return any(normalize_flag(arg) in HELP_FLAGS for arg in args)


def help_text(version: str) -> str:
    """Usage text shown for ``-help``."""
    return "\n".join(
        [
            f"geoscape v{version}",
            "Usage: geoscape [OPTION]...",
            "",
            "-data PATH",
            "        use PATH as the default Data Folder instead of auto-detecting",
            "",
            "-user PATH",
            "        use PATH as the default User Folder instead of auto-detecting",
            "",
            "-KEY VALUE",
            "        set option KEY to VALUE instead of default/loaded value"
            " (eg. -displayWidth 640)",
            "",
            "-help",
            "-?",
            "        show command-line help",
            "",
        ]
    )


class CliOverlay:
    """Applies command-line overrides on top of the current options."""

    def __init__(self, registry: OptionRegistry):
        self.registry = registry

    def apply(self, args: Sequence[str]) -> CliOverrides:
        """Apply ``args`` (program name excluded) to the registry.

        Unknown flags and flags without a value are reported and skipped.
        Folder overrides are returned rather than applied.
        """
        result = CliOverrides()
        i = 0
        while i < len(args):
            name = normalize_flag(args[i])
            if name is None or name in HELP_FLAGS:
                i += 1
                continue
            if i + 1 >= len(args):
                logger.warning(f"Unknown option: {name}")
                result.unknown.append(name)
                break
            value = args[i + 1]
            key = self.registry.find_key(name)
            if key is not None:
                self.registry.set_string(key, value)
                result.options.append(key)
                logger.debug(f"Command line set {key} = {value}")
            elif name == DATA_FLAG:
                result.data_folder = Path(value)
            elif name == USER_FLAG:
                result.user_folder = Path(value)
            else:
                logger.warning(f"Unknown option: {name}")
                result.unknown.append(name)
            i += 2
        return result
