# SPDX-License-Identifier: MIT

import hashlib
from typing import Optional

from calgrid.model.event import Event

DEFAULT_COLOR = "blue"

# Group color palette, in Rich color names
GROUP_PALETTE = [
    "blue",
    "green",
    "red",
    "dark_orange",
    "hot_pink",
    "purple",
    "dark_cyan",
    "slate_blue1",
]


def color_index(group_key: str, palette_size: int) -> int:
    """Stable palette index for a group key.

    The index is derived from the first 8 bytes of the SHA-256 digest of the
    UTF-8 encoded key, so it is identical across runs and platforms.
    """
    if palette_size <= 0:
        raise ValueError("palette_size must be positive")
    digest = hashlib.sha256(group_key.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") % palette_size


def color_for_event(
    event: Event,
    palette: Optional[list[str]] = None,
    default_color: str = DEFAULT_COLOR,
) -> str:
    """Personal events use the default color, group events a palette color."""
    group_key = event.get("group_key")
    if group_key is None:
        return default_color
    palette = palette or GROUP_PALETTE
    return palette[color_index(str(group_key), len(palette))]


def compact_colors(
    events: list[Event],
    palette: Optional[list[str]] = None,
    default_color: str = DEFAULT_COLOR,
    limit: int = 3,
) -> list[str]:
    """The first distinct colors of a day's events, in event order."""
    colors: list[str] = []
    for event in events:
        if len(colors) == limit:
            break
        color = color_for_event(event, palette, default_color)
        if color not in colors:
            colors.append(color)
    return colors
