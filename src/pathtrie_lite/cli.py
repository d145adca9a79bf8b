"""pathtrie-lite CLI entry point.

Usage: pathtrie-lite [-v] {match,dump,profile} ...
"""
import argparse
import logging
import sys

log = logging.getLogger(__name__)


def _add_pattern_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--patterns", required=True, metavar="FILE",
        help="Pattern file: one pattern per line, '#' starts a comment.",
    )
    p.add_argument(
        "-i", "--ignore-case", action="store_true",
        help="Fold ASCII A-Z to lowercase in patterns and candidates.",
    )


def _add_match_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "match",
        help="Check candidate paths against a pattern file.",
    )
    _add_pattern_args(p)
    p.add_argument("candidates", nargs="+", help="Paths to check.")


def _add_dump_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "dump",
        help="Print every trie node with its flags.",
    )
    _add_pattern_args(p)


def _add_profile_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "profile",
        help="Time the trie against the naive matcher.",
    )
    p.add_argument(
        "--requests", type=int, default=10_000,
        help="Total requests to generate (default: 10000)",
    )
    p.add_argument(
        "--patterns", type=int, default=200,
        help="Number of route patterns (default: 200)",
    )
    p.add_argument(
        "--paths", type=int, default=500,
        help="Number of distinct request paths (default: 500)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile on the trie loop and print top functions.",
    )


def read_patterns(path: str) -> list[str]:
    """Load patterns from a file, skipping blank lines and '#' comments."""
    patterns = []
    with open(path, encoding="utf-8") as fh:
        for line in fh:
            line = line.rstrip("\r\n")
            if not line.strip() or line.lstrip().startswith("#"):
                continue
            patterns.append(line)
    return patterns


def _load_matcher(args: argparse.Namespace):
    from pathtrie_lite.trie.matcher import GlobPathMatcher

    try:
        patterns = read_patterns(args.patterns)
    except OSError as exc:
        print(f"pathtrie-lite: cannot read {args.patterns}: {exc.strerror}", file=sys.stderr)
        sys.exit(2)
    log.debug("loaded %d patterns from %s", len(patterns), args.patterns)
    return GlobPathMatcher.from_patterns(patterns, case_insensitive=args.ignore_case)


def _run_match(args: argparse.Namespace) -> int:
    matcher = _load_matcher(args)
    all_matched = True
    for candidate in args.candidates:
        ok = matcher.match(candidate)
        all_matched = all_matched and ok
        print(f"{'match' if ok else 'no-match'}\t{candidate}")
    return 0 if all_matched else 1


def _run_dump(args: argparse.Namespace) -> int:
    matcher = _load_matcher(args)
    for line in matcher.dump():
        print(line)
    print(
        f"{matcher.node_count()} nodes, {matcher.pattern_count} patterns, "
        f"~{matcher.memory_usage_bytes()} bytes"
    )
    return 0


def _run_profile(args: argparse.Namespace) -> int:
    from pathtrie_lite.profiling.harness import run_matching
    from pathtrie_lite.profiling.report import format_comparison, format_report

    result = run_matching(
        total_requests=args.requests,
        num_patterns=args.patterns,
        num_paths=args.paths,
        seed=args.seed,
        profile=args.cprofile,
    )
    print(format_report(result))
    print()
    print(format_comparison(result))
    if result.cprofile_stats:
        print()
        print("--- cProfile top functions ---")
        print(result.cprofile_stats)
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pathtrie-lite",
        description="Wildcard path matching on a compact trie.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug output to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_match_parser(subparsers)
    _add_dump_parser(subparsers)
    _add_profile_parser(subparsers)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
            stream=sys.stderr,
        )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    handlers = {
        "match": _run_match,
        "dump": _run_dump,
        "profile": _run_profile,
    }
    sys.exit(handlers[args.command](args))


if __name__ == "__main__":
    main()
