"""
Channel set and configuration for the tap console.

Channels are the named logging methods a console exposes (``log``,
``warn``, ...). The supported set is closed; anything outside it is an
extra channel registered explicitly through a channel spec.

Channel spec syntax (compact, positional):
    CHANNEL[:DEST]

    Examples:
        warn            # Known channel, default destination
        info:stderr     # Route info to stderr
        audit:stdout    # Extra channel 'audit' on stdout
"""

from dataclasses import dataclass
from typing import Optional


# Supported channels, in display order
KNOWN_CHANNELS = ('log', 'info', 'debug', 'warn', 'error')

# Names an augmented console already uses for its own attributes
RESERVED_CHANNEL_NAMES = frozenset({'tap', 'channels', 'get', 'items', 'keys', 'values'})

# Channels written to stderr unless overridden
ERROR_CHANNELS = {'warn', 'error'}

DESTINATIONS = ('stdout', 'stderr')


class InvalidChannelError(AttributeError):
    """Raised when a channel is missing from a console or not callable."""

    def __init__(self, channel: str, message: Optional[str] = None):
        self.channel = channel
        super().__init__(message or f"console has no callable channel '{channel}'")


@dataclass
class ChannelConfig:
    """Configuration for a single console channel."""
    name: str
    destination: Optional[str] = None    # 'stdout' or 'stderr'


def default_destination(channel: str) -> str:
    """Return the stream name a channel writes to when not overridden."""
    return 'stderr' if channel in ERROR_CHANNELS else 'stdout'


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse a channel spec string into a ChannelConfig.

    Args:
        spec: Channel spec string like "warn" or "info:stderr"

    Returns:
        ChannelConfig with parsed values

    Raises:
        ValueError: If the name is empty, not an identifier, or the
            destination is not one of DESTINATIONS.
    """
    name, _, dest = spec.partition(':')
    name = name.strip()
    dest = dest.strip()

    if not name or not name.isidentifier() or name.startswith('_'):
        raise ValueError(f"Invalid channel name in spec: {spec!r}")
    if dest and dest not in DESTINATIONS:
        raise ValueError(
            f"Unknown destination {dest!r} for channel '{name}' "
            f"(expected one of: {', '.join(DESTINATIONS)})"
        )

    return ChannelConfig(name=name, destination=dest or None)
