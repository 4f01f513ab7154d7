import logging
import re
import time

import requests

logger = logging.getLogger(__name__)


def parse_file_key(url):
    # Support both old /file/ and new /design/ URLs
    # Also sometimes it is /proto/ for prototypes
    match = re.search(r"/(?:file|design|proto)/([a-zA-Z0-9]+)", url)
    if match:
        return match.group(1)
    return None


class FigmaClient:
    def __init__(self, token, base_url="https://api.figma.com/v1"):
        self.base_url = base_url
        self.headers = {
            "X-Figma-Token": token
        }

    def _get(self, url, params=None):
        response = requests.get(url, headers=self.headers, params=params)

        # Simple retry logic for 429
        if response.status_code == 429:
            retry_after = int(response.headers.get("Retry-After", 60))
            logger.warning("Rate limited. Waiting %s seconds...", retry_after)
            time.sleep(retry_after)
            # Retry once
            response = requests.get(url, headers=self.headers, params=params)

        response.raise_for_status()
        return response.json()

    def get_file(self, file_key):
        """
        Fetches the Figma file content.
        The 'styles' map of the response lists the paint styles of the file.
        """
        # Let app.py handle exceptions so we can show them to user
        return self._get(f"{self.base_url}/files/{file_key}")

    def get_file_nodes(self, file_key, ids):
        """
        Fetches specific nodes from a file.
        ids: list of node IDs (strings)
        """
        if not ids:
            return {"nodes": {}}
        return self._get(
            f"{self.base_url}/files/{file_key}/nodes",
            params={"ids": ",".join(ids)},
        )
