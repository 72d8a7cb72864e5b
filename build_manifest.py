"""Validate the branding descriptor and write the web app manifest.

Usage:
    python build_manifest.py                 # validate, then write manifest.json
    python build_manifest.py --check         # validate only
    python build_manifest.py --assets web/icons --output web/manifest.json

Defaults come from BRAND_ASSETS_DIR, BRAND_MANIFEST_OUTPUT and
BRAND_ICON_BASE_URL (environment or .env).
"""

import argparse
import logging
import sys

from vegnbio.helpers import dotenv
from vegnbio.helpers.branding import ICON_CONFIG
from vegnbio.helpers.branding_validation import validate_descriptor
from vegnbio.helpers.manifest import write_manifest

logger = logging.getLogger("build_manifest")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--assets",
        default=dotenv.get_dotenv_value("BRAND_ASSETS_DIR"),
        help="directory holding the icon files",
    )
    parser.add_argument(
        "--output",
        default=dotenv.get_dotenv_value("BRAND_MANIFEST_OUTPUT"),
        help="where to write manifest.json",
    )
    parser.add_argument(
        "--icon-base-url",
        default=dotenv.get_dotenv_value("BRAND_ICON_BASE_URL"),
        help="prefix for icon src entries",
    )
    parser.add_argument(
        "--check", action="store_true", help="validate without writing"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    problems = validate_descriptor(ICON_CONFIG, assets_dir=args.assets)
    if problems:
        logger.error("Branding descriptor has %d problem(s)", len(problems))
        return 1

    if args.check:
        logger.info("Branding descriptor OK")
        return 0

    write_manifest(
        ICON_CONFIG,
        args.output,
        icon_base_url=args.icon_base_url,
        assets_dir=args.assets,
    )
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    dotenv.load_dotenv()
    sys.exit(main())
