"""
Command-line language detection.

Examples:
    python -m langsniff "Bonjour tout le monde"
    echo "Guten Morgen" | python -m langsniff --json
    python -m langsniff --expect en fr --scripts "Hello world"
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from langsniff.config import DetectorConfig
from langsniff.detector import LanguageDetector
from langsniff.engine import get_script_summary
from langsniff.errors import CatalogLoadError


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='langsniff',
        description="Detect the language of text (reads stdin when no TEXT is given)"
    )
    parser.add_argument(
        'text',
        nargs='*',
        help='Text to analyze; multiple words are joined with spaces'
    )
    parser.add_argument(
        '--expect',
        nargs='+',
        metavar='CODE',
        default=None,
        help='Expected input languages as BCP-47 tags (e.g. en fr-CA)'
    )
    parser.add_argument(
        '--backend',
        choices=['trigram', 'langdetect'],
        default=None,
        help='Detection backend (default: LANGSNIFF_BACKEND or trigram)'
    )
    parser.add_argument(
        '--scripts',
        action='store_true',
        help='Also print the Unicode script breakdown'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print results as JSON'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)'
    )
    return parser


def _print_table(results, summary) -> None:
    for rank, result in enumerate(results, 1):
        print(f"{rank:>2}. {result.detected_language:<4} {result.confidence:.4f}")
    if summary is not None:
        mixed = ", mixed" if summary.is_mixed_script else ""
        print(f"\nScripts (dominant: {summary.dominant_script or 'none'}{mixed}):")
        for info in summary.scripts:
            print(f"    {info.script:<12} {info.count:>6}  {info.ratio:.3f}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    text = ' '.join(args.text) if args.text else sys.stdin.read()

    try:
        config = DetectorConfig.from_env()
        detector = LanguageDetector.create(
            expected_input_languages=args.expect,
            backend=args.backend,
            config=config,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except CatalogLoadError as e:
        print(f"Error: could not load language profiles: {e}", file=sys.stderr)
        return 1

    with detector:
        results = detector.detect(text)
    summary = get_script_summary(text) if args.scripts else None

    if args.json:
        payload = {"results": [r.model_dump() for r in results]}
        if summary is not None:
            payload["scripts"] = [s.model_dump() for s in summary.scripts]
            payload["script_summary"] = summary.model_dump(exclude={"scripts"})
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _print_table(results, summary)
    return 0
