"""
log_lib — console with named channels, call-site location, tracing.

A reusable output library providing:
- A console-like facility with one method per named channel
- Per-channel destination overrides and extra channels
- Call-site location lookup from an explicit frame
- Function tracing decorator

Public API:
    Console             — channel console
    init_console        — singleton initialization
    get_console         — access singleton
    set_console         — swap singleton, returns the previous one
    ChannelConfig       — channel configuration
    parse_channel_spec  — parse a channel spec string
    KNOWN_CHANNELS      — supported channel names
    InvalidChannelError — missing or non-callable channel
    caller_frame        — frame N levels above a starting frame
    format_location     — ' - file:line' text for a frame
    LocationUnresolvableError — no caller frame available
    trace               — function tracing decorator
"""

from .console import Console, init_console, get_console, set_console
from .channels import (
    ChannelConfig, parse_channel_spec, KNOWN_CHANNELS,
    RESERVED_CHANNEL_NAMES, ERROR_CHANNELS, InvalidChannelError,
)
from .location import caller_frame, format_location, LocationUnresolvableError
from .trace import trace

__all__ = [
    'Console', 'init_console', 'get_console', 'set_console',
    'ChannelConfig', 'parse_channel_spec', 'KNOWN_CHANNELS',
    'RESERVED_CHANNEL_NAMES', 'ERROR_CHANNELS', 'InvalidChannelError',
    'caller_frame', 'format_location', 'LocationUnresolvableError',
    'trace',
]
