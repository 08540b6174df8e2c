#!/usr/bin/env python3
"""
Giphy client for picking a gif to post
"""

import requests
from constants import COMMENT_FOOTER, GIPHY_RANDOM_GIF_URL, GIPHY_RATING, REQUEST_TIMEOUT
from models import Gif


class GiphyClient:
    """Client for the Giphy random gif endpoint"""

    def __init__(self, api_key: str):
        self.api_key = api_key
        self.base_url = GIPHY_RANDOM_GIF_URL

    def get_gif_for_tag(self, tag: str) -> Gif:
        """Get a random gif matching the tag"""
        params = {
            "tag": tag,
            "rating": GIPHY_RATING,
            "fmt": "json",
            "api_key": self.api_key,
        }
        response = requests.get(self.base_url, params=params, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()

        return self._parse_gif(response.json().get("data"), tag)

    def _parse_gif(self, data, tag: str) -> Gif:
        # Giphy answers with an empty list instead of an object when nothing matches
        if not data:
            raise ValueError(f"No gif found on Giphy for tag '{tag}'")

        original = data.get("images", {}).get("original", {})
        image_url = original.get("webp") or original.get("url")
        if not image_url:
            raise ValueError(f"Gif '{data.get('id', 'unknown')}' has no usable image url")

        return Gif(title=data.get("title", ""), image_url=image_url)


def format_gif_comment(gif: Gif) -> str:
    """Build the comment body for a gif, ending with our footer"""
    return f"![{gif.title}]({gif.image_url})\n{COMMENT_FOOTER}"
