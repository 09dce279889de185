"""settings.py
Environment-backed settings for the repository publisher.
"""
import os
from dataclasses import dataclass, field, fields
from typing import Mapping, Optional

from dotenv import load_dotenv

from cv_site.exceptions import PublishConfigError

load_dotenv()

REQUIRED_VARIABLES = ["GITHUB_TOKEN", "GITHUB_OWNER", "GITHUB_REPO"]


@dataclass
class PublishSettings:
    """
    Where and how a generated page is committed.

    Use `PublishSettings.from_env()` to build it from the environment (a `.env`
    file is loaded at import time).
    """
    github_token: str = field(
        metadata={"description": "Token with contents write access to the target repository."}
    )
    github_owner: str = field(metadata={"description": "Owner (user or organisation) of the target repository."})
    github_repo: str = field(metadata={"description": "Name of the target repository."})
    github_path: str = field(
        default="generated/cv.html",
        metadata={"description": "Repository path the generated page is written to."}
    )
    github_branch: str = field(
        default="main",
        metadata={"description": "Branch the commit is made on and the raw URL points at."}
    )
    commit_message: str = field(
        default="Update generated CV page",
        metadata={"description": "Commit message used for create and update."}
    )
    generate_endpoint: str = field(
        default="http://localhost:3000",
        metadata={"description": "Base URL of the running generator service."}
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PublishSettings":
        """
        Build settings from `environ` (defaults to `os.environ`).

        Raises:
            PublishConfigError: If any of GITHUB_TOKEN, GITHUB_OWNER or GITHUB_REPO
                is missing or blank.
        """
        environ = os.environ if environ is None else environ

        for variable_name in REQUIRED_VARIABLES:
            if not (environ.get(variable_name) or "").strip():
                raise PublishConfigError(variable_name)

        defaults = {f.name: f.default for f in fields(cls)}
        return cls(
            github_token=environ["GITHUB_TOKEN"].strip(),
            github_owner=environ["GITHUB_OWNER"].strip(),
            github_repo=environ["GITHUB_REPO"].strip(),
            github_path=environ.get("GITHUB_PATH") or defaults["github_path"],
            github_branch=environ.get("GITHUB_BRANCH") or defaults["github_branch"],
            commit_message=environ.get("COMMIT_MSG") or defaults["commit_message"],
            generate_endpoint=(environ.get("GENERATE_ENDPOINT") or defaults["generate_endpoint"]).rstrip("/"),
        )

    @property
    def raw_url(self) -> str:
        return (
            f"https://raw.githubusercontent.com/{self.github_owner}/{self.github_repo}/"
            f"{self.github_branch}/{self.github_path}"
        )
