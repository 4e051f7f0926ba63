import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .config import AnalyzerSettings
from .deck_analyzer import DeckAnalyzer, rule_check_report
from .errors import DeckAnalysisError

logger = logging.getLogger('deckscore')


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='deckscore', description='Analyze a pitch deck (PDF or PPTX)')
    parser.add_argument('deck', help='Path to the deck file')
    parser.add_argument('--rules-only', action='store_true', help='Run structural checks without calling the AI')
    parser.add_argument('--out', default=None, help='Write JSON here instead of stdout')
    parser.add_argument('--env', default=None, help='Path to .env (optional)')
    parser.add_argument('--verbose', '-v', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if args.env:
        load_dotenv(args.env, override=True)

    path = Path(args.deck)
    if not path.is_file():
        print(f'File not found: {path}', file=sys.stderr)
        return 2

    buffer = path.read_bytes()
    try:
        if args.rules_only:
            payload = rule_check_report(buffer, path.name)
        else:
            analyzer = DeckAnalyzer.from_settings(AnalyzerSettings.from_env())
            result = asyncio.run(analyzer.analyze_deck(buffer, path.name))
            payload = result.to_dict()
    except DeckAnalysisError as e:
        logger.debug('Analysis failed', exc_info=True)
        print(f'{type(e).__name__}: {e}', file=sys.stderr)
        return 1

    output = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.out:
        Path(args.out).write_text(output, encoding='utf-8')
    else:
        print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
