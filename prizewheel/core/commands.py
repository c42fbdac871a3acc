"""Console commands for editing the option list.

- ``add <label...>``    append a label (duplicates allowed)
- ``remove <label...>`` drop the first exact match, if any

Words after the command are joined with single spaces to form the label.
A command that changes the list hands back a new `WheelConfig`; the caller
rebuilds the wheel from it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from prizewheel.core.config import WheelConfig

logger = logging.getLogger(__name__)

COMMANDS = ("add", "remove")


@dataclass(frozen=True)
class CommandResult:
    config: WheelConfig | None
    message: str = ""

    @property
    def needs_rebuild(self) -> bool:
        return self.config is not None


def run_command(line: str, config: WheelConfig) -> CommandResult:
    parts = str(line or "").split()
    if not parts:
        return CommandResult(None)

    # Command names are case-sensitive.
    name, args = parts[0], parts[1:]
    if name not in COMMANDS:
        return CommandResult(None, f"Unknown command {name!r} (try: {', '.join(COMMANDS)})")
    if not args:
        return CommandResult(None, f"Usage: {name} <label>")

    label = " ".join(args)
    if name == "add":
        logger.info("Adding option %r", label)
        return CommandResult(config.with_option_added(label), f"Added {label!r}")

    updated = config.with_option_removed(label)
    if updated is None:
        return CommandResult(None, f"No option named {label!r}")
    logger.info("Removing option %r", label)
    return CommandResult(updated, f"Removed {label!r}")
