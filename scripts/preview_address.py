#!/usr/bin/env python3
"""Preview how the address element formats sample values.

Submits the element's test values through a one-element webform and prints
the formatted result.

Usage::

    python scripts/preview_address.py
    python scripts/preview_address.py --text
    python scripts/preview_address.py --random --count 3 --countries US,DE,JP --seed 42
    python scripts/preview_address.py --format list --yaml
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from webform_address.config import WebformAddressConfig
from webform_address.elements import ElementManager
from webform_address.logging import setup_logging
from webform_address.render import render_html
from webform_address.serialization import submission_to_yaml
from webform_address.webform import Webform, submit_webform

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Preview address element formatting")
    parser.add_argument("--format", default="value", choices=["value", "list", "raw"], help="Item format")
    parser.add_argument("--items-format", default="ul", choices=["ul", "ol", "comma", "hr"])
    parser.add_argument("--countries", default="", help="Comma separated available countries")
    parser.add_argument("--random", action="store_true", help="Generate random addresses")
    parser.add_argument("--count", type=int, default=1, help="Number of random addresses")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--text", action="store_true", help="Print plain text instead of HTML")
    output.add_argument("--yaml", action="store_true", help="Print the submission as YAML")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = WebformAddressConfig.from_env()
    setup_logging(config.log_level, config.log_format)

    countries = [code.strip().upper() for code in args.countries.split(",") if code.strip()]
    webform = Webform(
        id="address_preview",
        elements={
            "address": {
                "type": "address",
                "multiple": True,
                "format": args.format,
                "format_items": args.items_format,
                "available_countries": countries,
            },
        },
    )
    manager = ElementManager(config)
    element = webform.get_element("address")
    plugin = manager.get_element_instance(element)

    values = plugin.get_test_values(
        element, webform, {"random": args.random, "count": args.count, "seed": args.seed}
    )
    logger.info("Previewing %d address(es)", len(values))
    submission = submit_webform(webform, {"address": values}, manager)

    if args.yaml:
        print(submission_to_yaml(submission), end="")
    elif args.text:
        print(plugin.format_text(element, submission))
    else:
        print(render_html(plugin.format_html(element, submission)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
