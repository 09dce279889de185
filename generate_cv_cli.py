"""generate_cv_cli.py
Run CvSiteFramework from the command line.
Example: `python generate_cv_cli.py path/to/cv.pdf --out cv.html`
"""
import argparse
import sys

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.exceptions import CvSiteError
from cv_site.models import GenerateRequestData, ThemeConfig
from cv_site.parse_classes.cv_site_framework import CvSiteFramework


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a static CV page from a document.")
    parser.add_argument("file_path", nargs="?", default=None, help="CV file (.pdf, .docx, .doc, .txt)")
    parser.add_argument("--url", default="", help="Public shared-page link to scrape first")
    parser.add_argument("--theme-type", default=GENERATOR_DEFAULTS.DEFAULT_THEME_TYPE)
    parser.add_argument("--theme-colors", default=GENERATOR_DEFAULTS.DEFAULT_THEME_COLORS)
    parser.add_argument("--not-professional", action="store_true")
    parser.add_argument("--out", default=None, help="Write the page here instead of stdout")
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    request = GenerateRequestData(
        deepseek_url=args.url,
        uploaded_file_path=args.file_path,
        theme=ThemeConfig(
            theme_type=args.theme_type,
            theme_colors=args.theme_colors,
            professional=not args.not_professional,
        ),
    )

    try:
        html = CvSiteFramework().generate(request)
    except CvSiteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(html)
        print(f"Wrote {args.out}")
    else:
        print(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
