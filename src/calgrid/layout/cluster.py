# SPDX-License-Identifier: MIT

from typing import Iterable

from calgrid.model.event import Event


def overlaps(a: Event, b: Event) -> bool:
    """Strict interval overlap. Touching intervals (a.end == b.start) do not overlap."""
    return a["start"] < b["end"] and a["end"] > b["start"]


def event_sort_key(event: Event) -> tuple:
    return (event["start"], event["end"], str(event["id"]))


def sort_events(events: Iterable[Event]) -> list[Event]:
    """Order events by start, then end, then id."""
    return sorted(events, key=event_sort_key)


def cluster_events(events: Iterable[Event]) -> list[list[Event]]:
    """
    Group events into maximal clusters of transitively overlapping intervals.

    Events are walked in start order; an event joins the most recently opened
    cluster when it overlaps any member of it, otherwise it opens a new one.
    Since every earlier cluster ended before the latest one started, checking
    the latest cluster is sufficient.

    Args:
        events: Events of a single day, in any order

    Returns:
        Non-empty clusters in start order, each sorted by start, that together
        contain every input event exactly once
    """
    clusters: list[list[Event]] = []

    for event in sort_events(events):
        if clusters and any(overlaps(member, event) for member in clusters[-1]):
            clusters[-1].append(event)
        else:
            clusters.append([event])

    return clusters
