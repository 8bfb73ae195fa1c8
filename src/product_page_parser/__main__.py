# 🚀 product_page_parser/__main__.py
"""
🚀 CLI: `python -m product_page_parser page.html` друкує JSON-документ сторінки.

Приклади:
    python -m product_page_parser page.html
    python -m product_page_parser page.html --optional-reviews --report
    cat page.html | python -m product_page_parser -
"""

from __future__ import annotations

# 🔠 Системні імпорти
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

# 🧩 Внутрішні модулі проєкту
from product_page_parser.config.config_service import ConfigService
from product_page_parser.errors import ParsingError
from product_page_parser.infrastructure.parsers import ParserInfraOptions, parse_page_with_report
from product_page_parser.shared.utils.logger import get_logger, init_logging_from_config

logger = get_logger("cli")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="product_page_parser",
        description="Extract meta, product, suggested items and reviews from a product page.",
    )
    parser.add_argument("source", help="HTML file path, or '-' for stdin")
    parser.add_argument(
        "--html-parser",
        choices=("lxml", "html.parser", "html5lib"),
        default=None,
        help="tree builder (default: lxml or $PARSER_HTML_PARSER); html5lib needs the 'html5lib' extra",
    )
    parser.add_argument(
        "--optional-reviews",
        action="store_true",
        help="treat a missing reviews region as an empty list",
    )
    parser.add_argument("--report", action="store_true", help="also print degraded fields")
    parser.add_argument("--indent", type=int, default=2)
    return parser


def _read_source(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    options = ParserInfraOptions.from_env().merge(
        html_parser=args.html_parser,
        require_reviews=False if args.optional_reviews else None,
    )

    logging_config = dict(ConfigService().get("logging") or {})
    if options.log_level:
        logging_config["level"] = options.log_level.upper()
    init_logging_from_config(logging_config)

    try:
        html = _read_source(args.source)
    except OSError as e:
        logger.error("❌ Не вдалося прочитати %s: %s", args.source, e)
        return 2

    try:
        report = parse_page_with_report(html, options=options)
    except ParsingError as e:
        logger.error("❌ %s", e, extra=e.to_log_extra())
        return 1

    payload = report.document.to_dict()
    if args.report:
        payload = {
            "document": payload,
            "issues": [
                {"field": issue.field, "selector": issue.selector, "reason": issue.reason}
                for issue in report.issues
            ],
        }
    print(json.dumps(payload, ensure_ascii=False, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
