#!/usr/bin/env python3
"""
Configuration for the CI Gif Notifier, read once from the Actions environment
"""

import json
import math
import os
from dataclasses import dataclass
from typing import Optional

from constants import (
    EXIT_NEUTRAL_WORKFLOW,
    EXIT_SUCCESS,
    FAILURE_TAG,
    GLOBAL_TIMEOUT,
    POLL_INTERVAL,
    SUCCESS_TAG,
)


def _first_env(*names: str) -> str:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return ""


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return float(default)
    try:
        value = float(raw)
    except ValueError:
        value = None
    if value is None or not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}")
    return value


@dataclass(frozen=True)
class NotifierConfig:
    """Settings shared by every component of a single run"""
    event_path: str = ""
    action_name: str = ""
    repository: str = ""
    sha: str = ""
    github_token: str = ""
    giphy_api_key: str = ""
    in_workflow: bool = False
    success_tag: str = SUCCESS_TAG
    failure_tag: str = FAILURE_TAG
    poll_interval: float = POLL_INTERVAL
    timeout: float = GLOBAL_TIMEOUT

    @classmethod
    def from_env(cls) -> "NotifierConfig":
        return cls(
            event_path=os.getenv("GITHUB_EVENT_PATH", ""),
            action_name=os.getenv("GITHUB_ACTION", ""),
            repository=os.getenv("GITHUB_REPOSITORY", ""),
            sha=os.getenv("GITHUB_SHA", ""),
            github_token=_first_env("INPUT_GITHUB_TOKEN", "GITHUB_TOKEN"),
            giphy_api_key=_first_env("INPUT_GIPHY_API_KEY", "GIPHY_API_KEY"),
            in_workflow=bool(os.getenv("GITHUB_WORKFLOW")),
            success_tag=os.getenv("INPUT_SUCCESS_TAG") or SUCCESS_TAG,
            failure_tag=os.getenv("INPUT_FAILURE_TAG") or FAILURE_TAG,
            poll_interval=_float_env("INPUT_POLL_INTERVAL", POLL_INTERVAL),
            timeout=_float_env("INPUT_TIMEOUT", GLOBAL_TIMEOUT),
        )

    @property
    def neutral_exit_code(self) -> int:
        """Exit code for a skipped run; workflows get 78 so the step shows as neutral"""
        return EXIT_NEUTRAL_WORKFLOW if self.in_workflow else EXIT_SUCCESS

    def validate(self) -> None:
        required = {
            "github_token": self.github_token,
            "giphy_api_key": self.giphy_api_key,
            "repository": self.repository,
            "sha": self.sha,
        }
        missing = [name for name, value in required.items() if not value]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")


def load_event(event_path: str) -> Optional[dict]:
    """Load the webhook payload that triggered the workflow, if there is one"""
    if not event_path or not os.path.exists(event_path):
        return None

    with open(event_path, "r") as f:
        return json.load(f)
