from __future__ import annotations
import argparse, sys
from typing import Optional

from tagcloud import Engine, TagCountError, make_separators, render, validate_tag_count
from tagcloud.config import DEFAULT_FORMAT, DEFAULT_TAG_COUNT
from tagcloud.render import RENDERERS
from . import configure_logging


class _Abort(Exception):
    """User closed the prompt (EOF / Ctrl-C)."""


def _ask(prompt: str) -> str:
    print(prompt)
    try:
        return input().strip()
    except (EOFError, KeyboardInterrupt):
        raise _Abort()


def _prompt_tag_count(distinct: int) -> int:
    """Keep asking until the answer is a valid tag count for this document."""
    if distinct == 0:
        raise TagCountError("the document contains no words")
    answer = _ask("Enter the number of words to be in the tag cloud: ")
    while True:
        try:
            return validate_tag_count(int(answer), distinct)
        except ValueError:
            print(f"enter the correct size of the tag cloud! (1..{distinct})")
            answer = _ask("> ")


def _write(text: str, path: Optional[str]) -> None:
    if not path or path == "-":
        sys.stdout.write(text)
        return
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Tag cloud generator: top-N words of a text document")
    p.add_argument("-i", "--input", default=None, help="Input text file ('-' for stdin)")
    p.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    p.add_argument("-n", type=int, default=None, help=f"Number of words in the cloud (default {DEFAULT_TAG_COUNT})")
    p.add_argument("--format", choices=sorted(RENDERERS), default=DEFAULT_FORMAT, help="Output format")
    p.add_argument("--separators", default=None, help="Characters that split words (replaces the default set)")
    p.add_argument("--encoding", default=None, help="Input file encoding")
    p.add_argument("--prompt", action="store_true", help="Ask for missing input/output/N interactively")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    configure_logging(args.verbose)
    interactive = args.prompt or args.input is None
    separators = make_separators(args.separators) if args.separators else None

    eng = Engine()
    try:
        input_path = args.input or _ask("What is the input file name?: ")
        try:
            eng.load(input_path, encoding=args.encoding, separators=separators)
        except OSError as e:
            print(f"Error opening file: {e}", file=sys.stderr)
            return 1

        output_path = args.output
        if output_path is None and interactive:
            output_path = _ask("What is the output file name? (empty for stdout): ") or None

        try:
            if args.n is None and interactive:
                n = _prompt_tag_count(eng.distinct_words)
            else:
                n = args.n if args.n is not None else DEFAULT_TAG_COUNT
            cloud = eng.cloud(n)
        except TagCountError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2

        try:
            _write(render(cloud, args.format), output_path)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
        return 0
    except _Abort:
        print(file=sys.stderr)
        return 1
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
