"""
Lox command-line driver.

Usage:
    lox [options] [script]

With a script path the whole file is scanned once as a single buffer.
Without one, each line read from standard input is scanned on its own
by a fresh scanner, so line numbers restart at 1 for every input line
and a string literal cannot continue onto the next line typed.

Options:
    --json          Print tokens as JSON objects, one per line
    -v, --verbose   Enable debug logging
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, TextIO

from .lexer.errors import report
from .lexer.scanner import ScanResult, scan_source

logger = logging.getLogger(__name__)

# Exit statuses (BSD sysexits)
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


def run(
    source: str,
    filename: str = "<stdin>",
    as_json: bool = False,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> ScanResult:
    """Scan one buffer, report its diagnostics and print its tokens."""
    out = out or sys.stdout
    err = err or sys.stderr

    result = scan_source(source, filename)

    for e in result.errors:
        report(e.line, e.diagnostic.location, e.message, err)

    for token in result.tokens:
        if as_json:
            print(json.dumps(token.to_dict()), file=out)
        else:
            print(token, file=out)

    return result


def run_file(path: str, as_json: bool = False) -> int:
    """Scan a whole file as one buffer."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Unable to read file at {path}: {e}", file=sys.stderr)
        return EX_NOINPUT

    logger.debug("read %d characters from %s", len(source), path)
    result = run(source, path, as_json)

    # The driver decides that lexical errors fail a script run
    return EX_DATAERR if result.has_errors else EX_OK


def run_prompt(stream: Optional[TextIO] = None, as_json: bool = False) -> int:
    """Scan each input line as an independent buffer until end of input."""
    stream = stream or sys.stdin
    interactive = stream.isatty()

    while True:
        if interactive:
            print("> ", end="", flush=True)
        line = stream.readline()
        if not line:
            break
        run(line.rstrip("\n"), "<stdin>", as_json)

    return EX_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lox driver"""

    parser = argparse.ArgumentParser(
        prog="lox",
        description="Scan Lox source and print its tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    lox script.lox            # Scan a file
    lox                       # Scan lines typed at the prompt
    lox --json script.lox     # Tokens as JSON
        """
    )

    parser.add_argument('script', nargs='*',
                        help='Lox source file to scan')
    parser.add_argument('--json', action='store_true',
                        help='Output tokens in JSON format')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if len(args.script) > 1:
        print("Usage: lox [script]", file=sys.stderr)
        return EX_USAGE
    if args.script:
        return run_file(args.script[0], args.json)
    return run_prompt(as_json=args.json)


if __name__ == "__main__":
    sys.exit(main())
