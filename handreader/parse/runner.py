"""
Main orchestrator for parsing replayer hand histories.
Reads input text, runs the accumulator (or the parallel block builder) and
backs the command-line interface.
"""

import logging
import argparse
import sys
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence, Union

from handreader.config import ConfigError, load_config
from handreader.export import write_hands
from handreader.stats import compute_stats, format_stats

from .accumulator import HandAccumulator
from .errors import HandParseError
from .hand_splitter import build_hand, split_hand_blocks_with_tail
from .schemas import Hand

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_PARSE_FAILURE = 3


def split_lines(text: str) -> List[str]:
    """Split on newlines, dropping a trailing carriage return per line."""
    lines = [line[:-1] if line.endswith('\r') else line for line in text.split('\n')]
    if lines and lines[-1] == '':
        lines.pop()
    return lines


class ParserRunner:
    """Runs parse passes over replayer text."""

    def __init__(self, workers: int = 1, encoding: str = 'utf-8'):
        """
        Initialize the parser runner.

        Args:
            workers: Processes used to build hands; 1 runs a single sequential pass
            encoding: Text encoding of input files
        """
        if workers < 1:
            raise ValueError(f"workers must be positive, got {workers}")
        self.workers = workers
        self.encoding = encoding

    def parse_text(self, text: str, source: str = 'unknown') -> List[Hand]:
        """
        Parse hand history text.

        Args:
            text: Complete replayer text
            source: Identifier for this text, used in log messages

        Returns:
            Hands in source order

        Raises:
            HandParseError: on the first malformed amount or card, carrying
                the hands finalized before it
        """
        lines = split_lines(text)

        if self.workers == 1:
            hands = HandAccumulator().consume(lines)
        else:
            hands = self._parse_parallel(lines)

        logger.info(f"Parsed {len(hands)} hands from {source}")
        return hands

    def _parse_parallel(self, lines: List[str]) -> List[Hand]:
        blocks, tail = split_hand_blocks_with_tail(lines)
        hands: List[Hand] = []

        try:
            with ProcessPoolExecutor(max_workers=self.workers) as pool:
                # map yields in block order, so the first failure in source order surfaces
                for hand in pool.map(build_hand, blocks):
                    hands.append(hand)

            # Trailing lines never form a hand but their tokens must still parse
            if tail is not None:
                HandAccumulator().consume(tail.lines, tail.first_line_number)
        except HandParseError as e:
            e.hands = list(hands)
            raise

        return hands

    def parse_file(self, file_path: Union[str, Path]) -> List[Hand]:
        """
        Parse a single file containing hand histories.

        The whole file is read before parsing starts.
        """
        file_path = Path(file_path)
        text = file_path.read_text(encoding=self.encoding)
        return self.parse_text(text, source=file_path.name)


def parse_text(text: str, workers: int = 1) -> List[Hand]:
    """Parse hand history text with a fresh runner."""
    return ParserRunner(workers=workers).parse_text(text)


def parse_file(
    file_path: Union[str, Path],
    encoding: str = 'utf-8',
    workers: int = 1
) -> List[Hand]:
    """Parse a hand history file with a fresh runner."""
    return ParserRunner(workers=workers, encoding=encoding).parse_file(file_path)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='handreader',
        description='Parse poker hands from the replayer export format to JSON',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('-i', '--input', required=True, help='Input hand history file')
    parser.add_argument('-o', '--output', default=None,
                        help='Output file (default: output.json)')
    parser.add_argument('-f', '--format', choices=('json', 'jsonl'), default=None,
                        help='Output format (default: json)')
    parser.add_argument('-s', '--stats', action='store_true', help='Print hand statistics')
    parser.add_argument('-d', '--debug', action='store_true',
                        help='Print parsed hands and enable debug logging')
    parser.add_argument('-w', '--workers', type=int, default=None,
                        help='Processes used to build hands (default: 1)')
    parser.add_argument('-c', '--config', default=None, help='YAML configuration file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point; returns the process exit status."""
    args = build_arg_parser().parse_args(argv)

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    # Command-line flags win over the config file
    output = args.output or cfg['output']
    fmt = args.format or cfg['format']
    workers = args.workers if args.workers is not None else cfg['workers']
    log_level = logging.DEBUG if (args.verbose or args.debug) else getattr(logging, cfg['log_level'])

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if workers < 1:
        print(f"Error: workers must be positive, got {workers}", file=sys.stderr)
        return EXIT_ERROR

    runner = ParserRunner(workers=workers, encoding=cfg['encoding'])

    try:
        hands = runner.parse_file(args.input)
    except HandParseError as e:
        logger.error(f"Parse failed after {len(e.hands)} hands: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PARSE_FAILURE
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        write_hands(hands, output, fmt=fmt, indent=cfg['indent'])
    except OSError as e:
        print(f"Error: cannot write {output}: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.debug:
        for hand in hands:
            print(hand.model_dump_json(indent=2))

    if args.stats:
        print(format_stats(compute_stats(hands)))

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
