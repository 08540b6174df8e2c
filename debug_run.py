#!/usr/bin/env python3
"""
Quick script to see what the notifier would decide for a commit
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from checks import get_status_of_checks
from config import NotifierConfig
from github_client import GitHubClient


def show_checks(config: NotifierConfig):
    """Print every check run on the commit and the aggregate status"""
    client = GitHubClient(config, pr_number=0)
    runs = client.fetch_checks()

    print(f"🔍 Commit: {config.sha}")
    print(f"📦 Repository: {config.repository}")
    print("\n" + "="*60 + "\n")

    for run in runs:
        marker = "⏭️  (ignored, this action)" if run.name == config.action_name else ""
        print(f"🔧 Check: {run.name} {marker}")
        print(f"   Status: {run.status} / {run.conclusion}")

    print("\n" + "="*60 + "\n")
    status = get_status_of_checks(runs, config.action_name)
    print(f"📊 Aggregate status: {status.value}")


if __name__ == "__main__":
    # Usage: GITHUB_TOKEN=... GITHUB_REPOSITORY=owner/repo python debug_run.py <sha> [action-name]
    if len(sys.argv) < 2:
        print("Usage: debug_run.py <sha> [action-name]")
        sys.exit(1)

    os.environ["GITHUB_SHA"] = sys.argv[1]
    if len(sys.argv) > 2:
        os.environ["GITHUB_ACTION"] = sys.argv[2]

    show_checks(NotifierConfig.from_env())
