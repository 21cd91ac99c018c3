#!/usr/bin/env python3
"""
token-check: estimate the brute-force resistance of tokens and passwords
"""
import sys
import argparse
import os

from .analyzer import analyze
from .config_loader import load_config
from .guess_space import parse_rate
from .json_output import VERSION, analysis_response, to_json
from .output import filter_by_min_rating, format_report, mask_token, print_batch
from .rating import RATING_ORDER, RatingLevel, parse_thresholds
from .samples import SAMPLES, get_sample

RATING_CHOICES = [level.value for level in RATING_ORDER]


def print_header(args):
    if args.quiet or args.json:
        return
    print(f"token-check v{VERSION}: token strength estimator")
    print()


def build_parser():
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--rate", "-r", default=None, help="guesses per second (default 1e9)")
    common.add_argument("--thresholds", "-t", default=None, help="weak,ok,strong bit thresholds (default 64,80,100)")
    common.add_argument("--config", "-c", default=None, help="path to config file (default ./.tokencheck.yml)")
    common.add_argument("--approximate", action="store_true", help="compute the guess space in floating point")
    common.add_argument("--json", action="store_true", help="Output results in JSON format.")
    common.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    common.add_argument("--quiet", action="store_true", help="suppress the header")
    common.add_argument("--verbose", action="store_true", help="print effective settings to stderr")
    common.add_argument("--fail-under", choices=RATING_CHOICES, default=None,
                        help="exit 1 if any token rates below this level or cannot be evaluated")

    parser = argparse.ArgumentParser(prog="token-check",
        description="token-check: estimate entropy, guess space and brute-force time of a token")
    parser.add_argument("--version", action="store_true", help="print version")
    subparsers = parser.add_subparsers(dest="command")

    analyze_cmd = subparsers.add_parser("analyze", parents=[common], help="Analyze a single token")
    analyze_cmd.add_argument("token", nargs="?", default=None, help="token to analyze ('-' or omitted reads stdin)")
    analyze_cmd.add_argument("--sample", choices=list(SAMPLES), help="analyze a built-in sample token")

    subparsers.add_parser("samples", parents=[common], help="Analyze every built-in sample")

    batch_cmd = subparsers.add_parser("batch", parents=[common], help="Analyze one token per line of a file")
    batch_cmd.add_argument("file", help="file with one token per line ('-' for stdin)")
    batch_cmd.add_argument("--min-rating", choices=RATING_CHOICES, default=None,
                           help="Only list tokens rated at least this level.")
    batch_cmd.add_argument("--ci", action="store_true", help="Compact CI output (minimal lines / JSON summary).")
    return parser


def resolve_settings(args):
    """Merge config file values with command-line overrides."""
    if args.config and not os.path.exists(args.config):
        print(f"ERROR: Config file not found: {args.config}", file=sys.stderr)
        sys.exit(2)
    cfg = load_config(".", args.config)

    settings = {
        "rate": parse_rate(args.rate if args.rate is not None else cfg["rate"]),
        "thresholds": parse_thresholds(args.thresholds if args.thresholds is not None else cfg["thresholds"]),
        "exact": cfg["exact"] and not args.approximate,
        "color": cfg["color"] and not args.no_color,
    }
    if args.verbose:
        t = settings["thresholds"]
        print(f"config: {cfg.get('source', 'defaults')}", file=sys.stderr)
        print(f"rate: {settings['rate']:g} guesses/sec", file=sys.stderr)
        print(f"thresholds: weak={t.weak:g} ok={t.ok:g} strong={t.strong:g}", file=sys.stderr)
        print(f"guess space: {'exact' if settings['exact'] else 'approximate'}", file=sys.stderr)
    return settings


def read_stdin_token():
    line = sys.stdin.readline()
    return line.rstrip("\r\n")


def read_tokens(path):
    if path == "-":
        lines = sys.stdin.readlines()
    else:
        with open(path, "r", encoding="utf-8") as fh:
            lines = fh.readlines()
    tokens = [line.rstrip("\r\n") for line in lines]
    return [t for t in tokens if t]


def exit_code(results, fail_under):
    if fail_under is None:
        return 0
    floor = RatingLevel(fail_under).rank
    for r in results:
        if not r.rating or r.rating.level.rank < floor:
            return 1
    return 0


def run(settings, tokens):
    return [
        analyze(token, settings["rate"], settings["thresholds"], exact=settings["exact"])
        for token in tokens
    ]


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"token-check {VERSION}")
        sys.exit(0)

    if not args.command:
        parser.print_help()
        sys.exit(2)

    settings = resolve_settings(args)
    print_header(args)

    if args.command == "analyze":
        if args.sample:
            token = get_sample(args.sample)
        elif args.token is None or args.token == "-":
            token = read_stdin_token()
        else:
            token = args.token

        results = run(settings, [token])
        if args.json:
            print(to_json(analysis_response("analyze", results), pretty=True))
        else:
            print(format_report(results[0], use_color=settings["color"]))
        sys.exit(exit_code(results, args.fail_under))

    elif args.command == "samples":
        names = list(SAMPLES)
        tokens = [SAMPLES[n] for n in names]
        results = run(settings, tokens)
        if args.json:
            print(to_json(analysis_response("samples", results, tokens=tokens), pretty=True))
        else:
            for name, token, result in zip(names, tokens, results):
                print(f"{name}: {token}")
                print(format_report(result, use_color=settings["color"]))
                print()
        sys.exit(exit_code(results, args.fail_under))

    elif args.command == "batch":
        try:
            tokens = read_tokens(args.file)
        except (OSError, UnicodeDecodeError) as e:
            print(f"ERROR: Failed to read tokens: {e}", file=sys.stderr)
            sys.exit(2)

        results = run(settings, tokens)
        if args.json:
            masked = [mask_token(t) for t in tokens]
            print(to_json(analysis_response("batch", results, tokens=masked), pretty=True))
        else:
            pairs = filter_by_min_rating(list(zip(tokens, results)), args.min_rating)
            if not pairs and not args.ci:
                print("No tokens (after rating filter).")
            else:
                print_batch(pairs, ci=args.ci, use_color=settings["color"])
        sys.exit(exit_code(results, args.fail_under))


if __name__ == "__main__":
    main()
