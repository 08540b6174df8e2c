#!/usr/bin/env python3
"""
Constants for the CI Gif Notifier action
"""

# Footer appended to every comment we post; used to find our comments for cleanup
COMMENT_FOOTER = "<sub>;)</sub>"

# GitHub API
GITHUB_API_URL = "https://api.github.com"
GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json; application/vnd.github.antiope-preview+json"

# Giphy API
GIPHY_RANDOM_GIF_URL = "https://api.giphy.com/v1/gifs/random"
GIPHY_RATING = "pg-13"

# Default gif tags per aggregate status
SUCCESS_TAG = "thumbs-up"
FAILURE_TAG = "thumbs-down"

# Pull request actions that trigger a run
TRIGGER_ACTIONS = ("opened", "synchronize")

# Timing (seconds)
POLL_INTERVAL = 5
GLOBAL_TIMEOUT = 300
REQUEST_TIMEOUT = 30

# Process exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_NEUTRAL_WORKFLOW = 78
