#!/usr/bin/env python3
"""
GitHub client utilities
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List

import requests
from github import Github
from github.IssueComment import IssueComment

from config import NotifierConfig
from constants import COMMENT_FOOTER, GITHUB_ACCEPT_HEADER, GITHUB_API_URL, REQUEST_TIMEOUT
from models import CheckRun


class GitHubClient:
    def __init__(self, config: NotifierConfig, pr_number: int):
        self.config = config
        self.pr_number = pr_number
        self.github = Github(config.github_token)
        self._issue = None

    @property
    def issue(self):
        """The pull request as an issue, fetched lazily"""
        if self._issue is None:
            repo = self.github.get_repo(self.config.repository, lazy=True)
            self._issue = repo.get_issue(self.pr_number)
        return self._issue

    def _headers(self) -> dict:
        return {
            "Authorization": f"token {self.config.github_token}",
            "Accept": GITHUB_ACCEPT_HEADER,
        }

    def fetch_checks(self) -> List[CheckRun]:
        """Get all check runs for the commit under test"""
        url = f"{GITHUB_API_URL}/repos/{self.config.repository}/commits/{self.config.sha}/check-runs"
        response = requests.get(url, headers=self._headers(), timeout=REQUEST_TIMEOUT)
        response.raise_for_status()

        return [CheckRun.from_api(cr) for cr in response.json().get("check_runs", [])]

    def get_issue_comments(self) -> List[IssueComment]:
        """Get the comments on the pull request.

        Only the first page is read; on a very long thread an older comment
        of ours can be missed and survive cleanup.
        """
        return self.issue.get_comments().get_page(0)

    def delete_comments_from_action(self, comments: List[IssueComment]) -> int:
        """Delete the comments carrying our footer, all at once. Returns how many were deleted."""
        own_comments = [c for c in comments if c.body and COMMENT_FOOTER in c.body]
        if not own_comments:
            return 0

        print(f"🗑️  Found {len(own_comments)} existing comment(s). Deleting...")

        with ThreadPoolExecutor(max_workers=len(own_comments)) as executor:
            futures = [executor.submit(comment.delete) for comment in own_comments]
            # Re-raises the first failed deletion
            for future in futures:
                future.result()

        return len(own_comments)

    def delete_existing_comments(self) -> int:
        """Remove comments left on this pull request by earlier runs"""
        return self.delete_comments_from_action(self.get_issue_comments())

    def post_comment(self, body: str) -> IssueComment:
        """Create a new comment on the pull request"""
        comment = self.issue.create_comment(body)
        print(f"💬 Created new comment on PR #{self.pr_number}")
        return comment
