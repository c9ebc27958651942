"""
Normalize company names from the command line.

Usage:
    python -m legal_form.cli.normalize_names "Example GmbH & Co. KG" --country DE
    python -m legal_form.cli.normalize_names --input names.txt --mode middle

Output:
    One JSON object per name (JSON Lines) on stdout or in --output.
"""

import argparse
import json
import logging
import sys
from typing import Iterable, Optional, TextIO

from pydantic import ValidationError

from ..config_loader import Config, build_normalizer, load_config
from ..normalization import CompanyNormalizer

logger = logging.getLogger(__name__)


def _read_names(lines: Iterable[str]) -> list[str]:
    return [line.strip() for line in lines if line.strip()]


def write_results(
    normalizer: CompanyNormalizer,
    names: list[str],
    out: TextIO,
    country: Optional[str] = None,
) -> int:
    """Write one JSON line per name and return how many had a legal form."""
    found = 0
    for name in names:
        result = normalizer.normalize(name, country)
        if result.has_legal_form:
            found += 1
        record = result.model_dump()
        record["key"] = normalizer.key(name, country)
        out.write(json.dumps(record, ensure_ascii=False) + "\n")
    return found


def main(argv: Optional[list[str]] = None) -> int:
    """Normalize company names and print the results."""
    parser = argparse.ArgumentParser(description="Strip and resolve company legal forms")
    parser.add_argument("names", nargs="*", help="Company names (default: read from --input or stdin)")
    parser.add_argument("--config", default=None, help="Path to config file")
    parser.add_argument("--input", default=None, help="File with one company name per line")
    parser.add_argument("--output", default=None, help="Output file (default: stdout)")
    parser.add_argument("--country", default=None, help="Country code for alias lookup")
    parser.add_argument("--mode", choices=["suffix", "middle"], default=None, help="Strip mode")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else Config()
        if args.mode:
            config = config.model_copy(update={"STRIP_MODE": args.mode})

        logging.basicConfig(
            level=config.LOG_LEVEL.upper(),
            format='%(asctime)s - %(levelname)s - %(message)s'
        )

        normalizer = build_normalizer(config)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        logger.error(f"Configuration error: {e}")
        return 1

    if args.names:
        names = list(args.names)
    elif args.input:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                names = _read_names(f)
        except FileNotFoundError:
            logger.error(f"Input file not found: {args.input}")
            return 1
    else:
        names = _read_names(sys.stdin)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as out:
            found = write_results(normalizer, names, out, args.country)
    else:
        found = write_results(normalizer, names, sys.stdout, args.country)

    logger.info(f"Normalized {len(names)} names, {found} with legal form")
    return 0


if __name__ == "__main__":
    sys.exit(main())
