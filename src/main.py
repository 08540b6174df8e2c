#!/usr/bin/env python3
"""
CI Gif Notifier - GitHub Action that answers the checks of a pull request with a gif
"""

import os
import sys
import threading
import time
from typing import Optional

from checks import get_status_of_checks
from config import NotifierConfig, load_event
from constants import EXIT_FAILURE, TRIGGER_ACTIONS
from github_client import GitHubClient
from giphy_client import GiphyClient, format_gif_comment
from models import AggregateStatus


class NotifierTimeoutError(Exception):
    """Raised when the checks do not settle before the global timeout"""


def should_run(event: Optional[dict]) -> bool:
    """Only pull request events that open or update the PR are handled"""
    return isinstance(event, dict) and event.get("action") in TRIGGER_ACTIONS


class GifNotifier:
    """Main class for the gif notifier"""

    def __init__(self, config: NotifierConfig, pr_number: int, sleep=time.sleep, clock=time.monotonic):
        self.config = config
        self.pr_number = pr_number
        self.sleep = sleep
        self.clock = clock
        self.deadline = clock() + config.timeout

        # Initialize clients
        self.github = GitHubClient(config, pr_number)
        self.giphy = GiphyClient(config.giphy_api_key)

    def run(self) -> None:
        """Main execution method"""
        print("🔍 Scanning checks...")

        deleted = self.github.delete_existing_comments()
        if deleted:
            print(f"🧹 Removed {deleted} previous comment(s)")

        status = self.wait_for_checks()

        if status is AggregateStatus.FAILURE:
            self.post_giphy_gif_for_tag(self.config.failure_tag)
        else:
            self.post_giphy_gif_for_tag(self.config.success_tag)

        print("✅ Done!")

    def wait_for_checks(self) -> AggregateStatus:
        """Poll the check runs until they either fail or all succeed"""
        while True:
            self._check_deadline()

            status = get_status_of_checks(self.github.fetch_checks(), self.config.action_name)
            print(f"📊 Aggregate status of checks: {status.value}")
            if status is not AggregateStatus.IN_PROGRESS:
                return status

            remaining = self.deadline - self.clock()
            self.sleep(max(0.0, min(self.config.poll_interval, remaining)))

    def _check_deadline(self) -> None:
        if self.clock() >= self.deadline:
            raise NotifierTimeoutError(f"Reached maximum timeout of {self.config.timeout:g}s")

    def post_giphy_gif_for_tag(self, tag: str) -> None:
        gif = self.giphy.get_gif_for_tag(tag)
        print(f"🎞️  Posting comment with gif '{gif.title}' for tag '{tag}'...")
        self.github.post_comment(format_gif_comment(gif))


def start_watchdog(timeout: float) -> threading.Timer:
    """Kill the process once the timeout passes, even with a request in flight"""
    def _abort():
        print("⏰ Reached maximum timeout.", flush=True)
        os._exit(EXIT_FAILURE)

    timer = threading.Timer(timeout, _abort)
    timer.daemon = True
    timer.start()
    return timer


def main():
    """Entry point for the gif notifier"""
    try:
        config = NotifierConfig.from_env()
        event = load_event(config.event_path)
    except Exception as e:
        print(f"❌ Could not read the workflow context: {e}")
        sys.exit(EXIT_FAILURE)

    if not should_run(event):
        action = event.get("action") if isinstance(event, dict) else None
        print(f"ℹ️  GitHub event payload not found or Pull Request event does not have desired action. Action was {action}.")
        sys.exit(config.neutral_exit_code)

    watchdog = start_watchdog(config.timeout)
    try:
        config.validate()
        print(f"🚀 Running {config.action_name} for Pull Request #{event['number']} triggered by action {event['action']}.")
        GifNotifier(config, event["number"]).run()
    except Exception as e:
        print(f"❌ CI Gif Notifier failed: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(EXIT_FAILURE)
    finally:
        watchdog.cancel()


if __name__ == "__main__":
    main()
