#!/usr/bin/env python3
"""
Data models for the CI Gif Notifier
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AggregateStatus(Enum):
    """Combined status of all check runs on a commit"""
    FAILURE = "FAILURE"
    IN_PROGRESS = "IN_PROGRESS"
    SUCCESS = "SUCCESS"


@dataclass(frozen=True)
class CheckRun:
    """A single check run attached to a commit"""
    name: str
    status: str
    conclusion: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict) -> "CheckRun":
        return cls(
            name=data.get("name", ""),
            status=data.get("status", ""),
            conclusion=data.get("conclusion"),
        )


@dataclass(frozen=True)
class Gif:
    """A gif picked from Giphy"""
    title: str
    image_url: str
