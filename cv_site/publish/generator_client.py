"""generator_client.py
Thin HTTP client for the generator service's /upload-cv and /generate endpoints.
"""
import os
from typing import Any, Dict

import requests

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.exceptions import PublishError
from cv_site.models import ThemeConfig


class GeneratorClient:
    """
    Talks to a running generator service.

    Attributes:
        base_url (str): Service root, e.g. "http://localhost:3000".
        timeout (float): Per-request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = GENERATOR_DEFAULTS.FETCH_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _read_json(self, response: requests.Response, step: str) -> Dict[str, Any]:
        """Return the JSON body of a successful `ok: true` response."""
        if not response.ok:
            raise PublishError(
                f"{step} failed",
                status_code=response.status_code,
                response_text=response.text,
            )
        try:
            body = response.json()
        except ValueError:
            raise PublishError(
                f"{step} returned a non-JSON body",
                status_code=response.status_code,
                response_text=response.text,
            )
        if not isinstance(body, dict) or not body.get("ok"):
            error = body.get("error") if isinstance(body, dict) else None
            raise PublishError(
                f"{step} was rejected: {error or 'unknown error'}",
                status_code=response.status_code,
                response_text=response.text,
            )
        return body

    def upload_file(self, file_path: str) -> str:
        """
        Upload `file_path` as the `cv` form field.

        Returns:
            str: The server-side path of the stored upload.
        """
        try:
            with open(file_path, "rb") as f:
                response = self.session.post(
                    f"{self.base_url}/upload-cv",
                    files={"cv": (os.path.basename(file_path), f)},
                    timeout=self.timeout,
                )
        except requests.exceptions.RequestException as e:
            raise PublishError(f"Upload request failed: {e}")

        body = self._read_json(response, "Upload")
        uploaded_path = body.get("localPath") or body.get("url") or body.get("originalname")
        if not uploaded_path:
            raise PublishError("Upload response did not include a file path", response_text=response.text)
        return uploaded_path

    def generate_html(self, uploaded_path: str, theme: ThemeConfig) -> str:
        """Ask the service to render the uploaded file and return the page."""
        payload = {
            "uploadedFilePath": uploaded_path,
            "themeType": theme.theme_type,
            "themeColors": theme.theme_colors,
            "professional": theme.professional,
        }
        try:
            response = self.session.post(
                f"{self.base_url}/generate",
                json=payload,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise PublishError(f"Generate request failed: {e}")

        body = self._read_json(response, "Generate")
        html = body.get("html")
        if not html:
            raise PublishError("Generate response did not include HTML", response_text=response.text)
        return html
