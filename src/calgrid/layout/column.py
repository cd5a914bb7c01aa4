# SPDX-License-Identifier: MIT

from calgrid.layout.cluster import overlaps
from calgrid.model.event import Event
from calgrid.model.layout import ColumnPlacement


def assign_columns(cluster: list[Event]) -> list[ColumnPlacement]:
    """
    Place each event of a cluster into the first column it does not overlap.

    Greedy interval coloring: with events taken in start order the number of
    columns equals the largest number of events active at a single instant.

    Args:
        cluster: Events sorted by start, as produced by cluster_events

    Returns:
        One placement per event, in cluster order
    """
    if not cluster:
        raise ValueError("Cannot assign columns to an empty cluster")

    columns: list[list[Event]] = []
    assigned: list[tuple[Event, int]] = []

    for event in cluster:
        for index, column in enumerate(columns):
            if not any(overlaps(member, event) for member in column):
                column.append(event)
                assigned.append((event, index))
                break
        else:
            columns.append([event])
            assigned.append((event, len(columns) - 1))

    column_count = len(columns)
    return [
        {"event_id": event["id"], "column": index, "column_count": column_count}
        for event, index in assigned
    ]
