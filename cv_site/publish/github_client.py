"""github_client.py
Minimal client for the GitHub repository contents API.
"""
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.exceptions import PublishError

GITHUB_API_URL = "https://api.github.com"
COMMITTER = {"name": "HTML Generator", "email": "noreply@example.com"}


class GitHubContentsClient:
    """
    Reads file SHAs and creates or updates files in a single repository branch.

    Attributes:
        owner (str): Repository owner.
        repo (str): Repository name.
        branch (str): Branch read from and committed to.
    """

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        branch: str = "main",
        timeout: float = GENERATOR_DEFAULTS.FETCH_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
        api_url: str = GITHUB_API_URL,
    ):
        self.owner = owner
        self.repo = repo
        self.branch = branch
        self.timeout = timeout
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    def _contents_url(self, path: str) -> str:
        return f"{self.api_url}/repos/{self.owner}/{self.repo}/contents/{quote(path.lstrip('/'))}"

    def get_file_sha(self, path: str) -> Optional[str]:
        """
        Return the blob SHA of `path` on the branch, or None if it does not exist.

        Raises:
            PublishError: For any failure other than 404.
        """
        try:
            response = self.session.get(
                self._contents_url(path),
                headers=self.headers,
                params={"ref": self.branch},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise PublishError(f"Could not read '{path}': {e}")

        if response.status_code == 404:
            return None
        if not response.ok:
            raise PublishError(
                f"Could not read '{path}'",
                status_code=response.status_code,
                response_text=response.text,
            )

        body = response.json()
        # A directory listing comes back as a list
        if isinstance(body, dict):
            return body.get("sha")
        return None

    def put_file(
        self,
        path: str,
        content_b64: str,
        message: str,
        sha: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create `path`, or update it when `sha` (its current blob SHA) is given.

        Args:
            path (str): Repository path.
            content_b64 (str): Base64 encoded file content.
            message (str): Commit message.
            sha (str | None): Current SHA for updates.

        Returns:
            Dict[str, Any]: The API response body.

        Raises:
            PublishError: On any non-2xx response.
        """
        payload = {
            "message": message,
            "content": content_b64,
            "branch": self.branch,
            "committer": COMMITTER,
        }
        if sha:
            payload["sha"] = sha

        try:
            response = self.session.put(
                self._contents_url(path),
                headers=self.headers,
                json=payload,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise PublishError(f"Could not write '{path}': {e}")

        if not response.ok:
            raise PublishError(
                f"Could not write '{path}'",
                status_code=response.status_code,
                response_text=response.text,
            )
        return response.json()
