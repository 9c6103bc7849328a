#!/usr/bin/env python3
import argparse
import logging
import sys
import os
from typing import Optional, List, TextIO

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from listequals.algorithms.lcs import diff_entries
from listequals.checkers.list_equals import SequenceValidationError, validate, sequences_equal
from listequals.formatters.base import FormatterConfig, FormatterFactory

logger = logging.getLogger(__name__)

__version__ = '1.0.0'


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


class Printer:
    def __init__(self, output: Optional[TextIO] = None):
        self.output = output or sys.stdout

    def print(self, text: str, end: str = '\n'):
        self.output.write(text + end)

    def print_error(self, text: str):
        sys.stderr.write(f"Error: {text}\n")


class CLIApplication:
    def __init__(self):
        self.parser = self._create_parser()
        self.printer: Optional[Printer] = None

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog='list-equals',
            description='Compare two lists element by element and describe how they differ',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog='''
Examples:
  %(prog)s obtained.txt expected.txt
  %(prog)s --json obtained.json expected.json
  %(prog)s --summary obtained.txt expected.txt
  %(prog)s --max-entries 10 --no-color obtained.txt expected.txt
            '''
        )
        parser.add_argument('obtained', help='File holding the obtained list')
        parser.add_argument('expected', help='File holding the expected list')
        parser.add_argument(
            '--json',
            action='store_true',
            help='Read each file as a JSON array instead of one element per line'
        )
        parser.add_argument(
            '-s', '--summary',
            action='store_true',
            help='Print only counts of unexpected, missing and changed elements'
        )
        parser.add_argument(
            '-n', '--max-entries',
            type=int,
            default=None,
            metavar='NUM',
            help='Show at most NUM differences'
        )
        parser.add_argument(
            '-q', '--quiet',
            action='store_true',
            help='Report only whether the lists differ'
        )
        parser.add_argument(
            '--no-color',
            action='store_true',
            help='Disable colored output'
        )
        parser.add_argument(
            '-o', '--output',
            type=str,
            metavar='FILE',
            help='Write output to file'
        )
        parser.add_argument(
            '--ignore-whitespace',
            action='store_true',
            help='Strip surrounding whitespace from each line'
        )
        parser.add_argument(
            '--ignore-case',
            action='store_true',
            help='Compare lines case-insensitively'
        )
        parser.add_argument(
            '--verbose',
            action='store_true',
            help='Enable debug logging'
        )
        parser.add_argument(
            '-v', '--version',
            action='version',
            version=f'%(prog)s {__version__}'
        )
        return parser

    def run(self, argv: Optional[List[str]] = None) -> int:
        args = self.parser.parse_args(argv)
        setup_logging(args.verbose)
        if args.max_entries is not None and args.max_entries < 0:
            self.parser.error("--max-entries must be non-negative")
        output_file = None
        if args.output:
            try:
                output_file = open(args.output, 'w', encoding='utf-8')
            except OSError as e:
                Printer().print_error(f"Cannot open output file: {e}")
                return 2
            self.printer = Printer(output_file)
            use_color = False
        else:
            self.printer = Printer()
            use_color = not args.no_color and sys.stdout.isatty()
        try:
            result = self._execute(args, use_color)
        except KeyboardInterrupt:
            self.printer.print_error("Interrupted")
            result = 130
        finally:
            if output_file is not None:
                output_file.close()
        return result

    def _load(self, args, path: str) -> list:
        from listequals.fs.readers import read_file_lines, load_json_sequence
        if args.json:
            return load_json_sequence(path)
        lines = read_file_lines(path)
        if args.ignore_whitespace:
            lines = [line.strip() for line in lines]
        if args.ignore_case:
            lines = [line.lower() for line in lines]
        return lines

    def _execute(self, args, use_color: bool) -> int:
        try:
            obtained = self._load(args, args.obtained)
            expected = self._load(args, args.expected)
        except (OSError, ValueError) as e:
            self.printer.print_error(str(e))
            return 2
        logger.debug("Loaded %d obtained and %d expected elements", len(obtained), len(expected))

        try:
            validate(obtained, expected)
        except SequenceValidationError as e:
            self.printer.print_error(str(e))
            return 2
        if sequences_equal(obtained, expected):
            return 0
        if args.quiet:
            self.printer.print(f"Lists {args.obtained} and {args.expected} differ")
            return 1

        config = FormatterConfig(use_color=use_color, max_entries=args.max_entries)
        formatter = FormatterFactory.create("summary" if args.summary else "report", config)
        self.printer.print(formatter.format(diff_entries(obtained, expected)))
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    app = CLIApplication()
    return app.run(argv)


if __name__ == '__main__':
    sys.exit(main())
