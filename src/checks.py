#!/usr/bin/env python3
"""
Aggregation of check run statuses
"""

from typing import Iterable
from models import AggregateStatus, CheckRun

IN_PROGRESS_STATUSES = ("queued", "in_progress")


def get_status_of_checks(check_runs: Iterable[CheckRun], action_name: str) -> AggregateStatus:
    """Reduce the check runs of a commit to a single aggregate status.

    The run named after this action is ignored, since it stays in progress
    for as long as we are polling. A completed failure wins over anything
    still running, so a fast failing check does not wait on slower ones.
    An empty set of checks counts as a success.
    """
    filtered_checks = [cr for cr in check_runs if cr.name != action_name]

    if any(cr.status == "completed" and cr.conclusion == "failure" for cr in filtered_checks):
        return AggregateStatus.FAILURE

    if any(cr.status in IN_PROGRESS_STATUSES for cr in filtered_checks):
        return AggregateStatus.IN_PROGRESS

    return AggregateStatus.SUCCESS
