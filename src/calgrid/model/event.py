# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

import pendulum

EventId = str


class Event(TypedDict):
    id: EventId
    start: pendulum.DateTime
    end: pendulum.DateTime
    group_key: Optional[str]
    title: NotRequired[Optional[str]]
