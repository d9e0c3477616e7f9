#!/usr/bin/env python3
"""
Hide sold out vintage products

Usage:
    python -m vintagehider                      # pages 1..100
    python -m vintagehider 5 12                 # pages 5..12
    python -m vintagehider product_id=12345     # a single product

Output:
    data/hide_sold_out_vintage_products_<timestamp>.json
"""

import argparse
import logging
import os
import re
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from vintagehider.config import END_PAGE, START_PAGE, ConfigError, load_config
from vintagehider.outcomes import OutcomeTally
from vintagehider.processor import PageDriver, ProductProcessor
from vintagehider.store_client import StoreClient

logger = logging.getLogger('vintagehider')

PRODUCT_ID_PATTERN = re.compile(r'^product_id=(\d+)$')
PAGE_PATTERN = re.compile(r'^\d+$')

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


@dataclass
class Command:
    """What the operator asked for: one product id or a page range"""
    product_id: Optional[str] = None
    start_page: int = START_PAGE
    end_page: int = END_PAGE


def parse_command(parser: argparse.ArgumentParser, words) -> Command:
    if not words:
        return Command()
    if len(words) == 1:
        match = PRODUCT_ID_PATTERN.match(words[0])
        if match:
            return Command(product_id=match.group(1))
    if len(words) == 2 and all(PAGE_PATTERN.match(w) for w in words):
        start_page, end_page = int(words[0]), int(words[1])
        if start_page > end_page:
            parser.error(f"start page {start_page} is after end page {end_page}")
        return Command(start_page=start_page, end_page=end_page)
    parser.error(f"expected 'product_id=<digits>' or '<start> <end>', got: {' '.join(words)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='vintagehider',
        description="Unpublish sold out vintage products from the store catalog",
    )
    parser.add_argument('command', nargs='*',
                        help="'product_id=<digits>' for one product, or '<start> <end>' pages (default 1 100)")
    parser.add_argument('--config', type=str, default=None, help='Path to the YAML secrets file')
    parser.add_argument('--output-dir', type=str, default=None, help='Directory for the JSON report')
    parser.add_argument('--delay', type=float, default=None, help='Seconds to wait before every API request')
    parser.add_argument('--keep-going', action='store_true',
                        help='Continue with the next product after a processing error')
    parser.add_argument('--log-file', type=str, default=None)
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser


def setup_logging(log_file=None, log_level='INFO'):
    """Log to stdout, and to log_file as well when one is given"""
    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        # If only a filename is given, place it in the logs folder
        if not os.path.dirname(log_file):
            os.makedirs('logs', exist_ok=True)
            log_file = os.path.join('logs', log_file)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, log_level),
        format=log_format,
        handlers=handlers
    )


def run_command(driver: PageDriver, command: Command):
    if command.product_id is not None:
        return driver.process_product_by_id(command.product_id)
    return driver.process_page_range(command.start_page, command.end_page)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    command = parse_command(parser, args.command)

    setup_logging(args.log_file, args.log_level)

    try:
        config = load_config(args.config, delay=args.delay, report_dir=args.output_dir)
    except ConfigError as e:
        logger.error(f"❌ {e}")
        return EXIT_USAGE

    tally = OutcomeTally()
    logger.info(f"🚀 Starting at {datetime.now()}")

    try:
        with StoreClient(config) as client:
            processor = ProductProcessor(client, tally)
            driver = PageDriver(client, processor, stop_on_error=not args.keep_going)
            result = run_command(driver, command)
    except Exception as e:
        logger.exception("Fatal error in main")
        print(f"Fatal error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if not result.completed:
        failure = result.first_failure
        print(f"Run aborted on product {failure.product_id}: {failure.error}", file=sys.stderr)
        return EXIT_FAILURE

    finished_at = datetime.now()
    logger.info(f"🏁 Finished at {finished_at}")
    logger.info(f"📊 Processed {result.processed} products on {len(result.pages)} pages")
    try:
        tally.write_report(config.report_dir, finished_at)
    except Exception as e:
        logger.exception("Could not write report")
        print(f"Fatal error: {e}", file=sys.stderr)
        logger.info(tally.summary())
        return EXIT_FAILURE
    logger.info(tally.summary())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
