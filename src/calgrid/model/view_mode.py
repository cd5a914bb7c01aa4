# SPDX-License-Identifier: MIT

from enum import Enum


class ViewMode(Enum):
    MONTH = "month"
    WEEK = "week"
    DAY = "day"


class FilterScope(Enum):
    ALL = "all"
    PERSONAL_ONLY = "personal_only"
    GROUPS_ONLY = "groups_only"
