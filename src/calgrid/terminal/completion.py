# SPDX-License-Identifier: MIT

from calgrid.repository.event import EVENT_REPO


def complete_group_key(incomplete: str) -> list[str]:
    """Return the group keys of the events file for shell completion."""
    return [key for key in EVENT_REPO.get_group_keys() if key.startswith(incomplete)]
