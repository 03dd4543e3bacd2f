"""
Builds command collections from URL query strings.
"""
import logging
from typing import Dict, Optional
from urllib.parse import parse_qsl

from .collection import CommandCollection, CommandParameter

logger = logging.getLogger(__name__)

PRESET = "preset"


def parse_query(query: str, presets: Optional[Dict[str, str]] = None) -> CommandCollection:
    """
    Parse a query string into commands.

    Names are lower-cased and the last occurrence of a repeated name wins.
    When presets are given only the 'preset' command is honoured and is
    replaced by the commands of the named preset.

    Args:
        query: Query string, with or without a leading '?'
        presets: Mapping of preset name to query string

    Returns:
        CommandCollection with the parsed commands
    """
    commands = _parse(query)
    if presets is None:
        return commands

    name = commands.get(PRESET)
    if name is None:
        return CommandCollection()

    lookup = {key.lower(): value for key, value in presets.items()}
    preset = lookup.get(name.strip().lower())
    if preset is None:
        logger.warning(f"Unknown preset requested: {name}")
        return CommandCollection()

    return _parse(preset)


def _parse(query: str) -> CommandCollection:
    commands = CommandCollection()
    for name, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        if name:
            commands.add(CommandParameter(name.lower(), value))
    return commands
