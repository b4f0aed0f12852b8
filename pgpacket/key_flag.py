"""Flags that may be set in a key flags signature subpacket."""

from __future__ import annotations

import enum

_DESCRIPTIONS = {
    0x01: "certification",
    0x02: "signing",
    0x04: "encryption of communications",
    0x08: "encryption of storage",
    0x10: "key may be split",
    0x20: "authentication",
    0x80: "private component may be shared",
}


class KeyFlag(enum.IntEnum):
    """A single flag in a key flags subpacket."""

    CERTIFICATION = 0x01
    SIGNING = 0x02
    ENCRYPTION_COMMUNICATIONS = 0x04
    ENCRYPTION_STORAGE = 0x08
    SPLIT_KEY = 0x10
    AUTHENTICATION = 0x20
    GROUP_KEY = 0x80

    def description(self) -> str:
        """Return a human-readable description of the flag."""
        return _DESCRIPTIONS[self.value]


def key_flag_description(flag) -> str:
    """Return the description of *flag*, given as a KeyFlag or its numeric value."""
    return KeyFlag(flag).description()