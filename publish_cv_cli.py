"""publish_cv_cli.py
Upload a local CV to a running generator service and commit the page to GitHub.
Example: `python publish_cv_cli.py path/to/cv.pdf --theme-colors "#123456"`

Reads GITHUB_TOKEN, GITHUB_OWNER, GITHUB_REPO (required), GITHUB_PATH,
GITHUB_BRANCH, COMMIT_MSG and GENERATE_ENDPOINT from the environment or .env.
"""
import argparse
import sys

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.exceptions import PublishConfigError, PublishError
from cv_site.models import ThemeConfig
from cv_site.publish.publisher import CvPublisher
from cv_site.publish.settings import PublishSettings


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a CV page and commit it to a repository.")
    parser.add_argument("file_path", help="Local CV file to upload")
    parser.add_argument("--theme-type", default=GENERATOR_DEFAULTS.DEFAULT_THEME_TYPE)
    parser.add_argument("--theme-colors", default=GENERATOR_DEFAULTS.DEFAULT_THEME_COLORS)
    parser.add_argument("--not-professional", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    theme = ThemeConfig(
        theme_type=args.theme_type,
        theme_colors=args.theme_colors,
        professional=not args.not_professional,
    )

    try:
        settings = PublishSettings.from_env()
        result = CvPublisher(settings).publish(args.file_path, theme)
    except (PublishConfigError, PublishError, OSError) as e:
        print(f"Publish failed: {e}", file=sys.stderr)
        return 1

    print("Publish result:")
    print(f"Path: {result.path}")
    print(f"Action: {'created' if result.created else 'updated'}")
    print(f"HTML URL: {result.html_url or 'n/a'}")
    print(f"Raw URL (public repos): {result.raw_url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
