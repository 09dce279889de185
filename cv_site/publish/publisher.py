"""publisher.py
Uploads a local CV to the generator service and commits the sanitized page.
"""
import base64
from typing import Optional

from cv_site.logging import LoggerFactory, mask_secret
from cv_site.models import PublishResult, ThemeConfig
from cv_site.publish.generator_client import GeneratorClient
from cv_site.publish.github_client import GitHubContentsClient
from cv_site.publish.sanitize import sanitize_generated_html
from cv_site.publish.settings import PublishSettings

logger_factory = LoggerFactory()
logger = logger_factory.get_logger(
    name="cv_publisher",
    logger_type="publish"
)


class CvPublisher:
    """
    Runs the publish flow: upload -> generate -> sanitize -> create or update.

    Clients default to ones built from `settings`; pass your own to point the
    publisher at stubs.
    """

    def __init__(
        self,
        settings: PublishSettings,
        generator_client: Optional[GeneratorClient] = None,
        github_client: Optional[GitHubContentsClient] = None,
    ):
        self.settings = settings
        mask_secret(logger, settings.github_token)
        self.generator_client = generator_client or GeneratorClient(settings.generate_endpoint)
        self.github_client = github_client or GitHubContentsClient(
            token=settings.github_token,
            owner=settings.github_owner,
            repo=settings.github_repo,
            branch=settings.github_branch,
        )

    def publish(self, local_file: str, theme: Optional[ThemeConfig] = None) -> PublishResult:
        """
        Publish `local_file` rendered with `theme`.

        Raises:
            PublishError: If any remote step fails. Nothing is committed when an
                earlier step fails.
        """
        theme = theme or ThemeConfig()
        path = self.settings.github_path

        logger.info(f"Uploading '{local_file}' to {self.settings.generate_endpoint}")
        uploaded_path = self.generator_client.upload_file(local_file)

        logger.info(f"Generating HTML for '{uploaded_path}'")
        html = self.generator_client.generate_html(uploaded_path, theme)

        clean_html = sanitize_generated_html(html)
        content_b64 = base64.b64encode(clean_html.encode("utf-8")).decode("ascii")

        sha = self.github_client.get_file_sha(path)
        if sha:
            logger.info(f"Updating existing file '{path}' (sha {sha})")
        else:
            logger.info(f"Creating new file '{path}'")

        body = self.github_client.put_file(
            path=path,
            content_b64=content_b64,
            message=self.settings.commit_message,
            sha=sha,
        )

        content = body.get("content") or {}
        result = PublishResult(
            path=path,
            html_url=content.get("html_url"),
            raw_url=self.settings.raw_url,
            sha=content.get("sha"),
            created=sha is None,
        )
        logger.info(f"Committed '{path}'. Raw URL: {result.raw_url}")
        return result
