import argparse
import json
import logging
import sys

from gradient_pace.analyzer import analyze
from gradient_pace.config import DEFAULTS, build_filter_settings, get_defaults
from gradient_pace.loader import collect_bins, load_results_file
from gradient_pace.models import STAT_TYPES
from gradient_pace.report import format_analysis_report, format_summary
from gradient_pace.summary import summarize_results, summary_to_dict


def build_parser(config: dict | None = None) -> argparse.ArgumentParser:
    """Build argument parser with defaults from config file."""
    if config is None:
        config = {}

    def get_default(key: str):
        return config.get(key, DEFAULTS[key])

    parser = argparse.ArgumentParser(
        description="Compare pace vs gradient in analysed runs with the literature grade-adjustment model."
    )
    parser.add_argument("results_file", help="Path to analysis results JSON")
    parser.add_argument(
        "--stat",
        choices=STAT_TYPES,
        default=get_default("stat_type"),
        help=f"Statistic used for adjustment factors (default: {DEFAULTS['stat_type']})",
    )
    parser.add_argument(
        "--remove-unreliable",
        action="store_true",
        default=get_default("remove_unreliable_bins"),
        help="Drop bins with extreme gradients, unrealistic speeds, or zero time/distance",
    )
    parser.add_argument(
        "--max-gradient",
        type=float,
        default=get_default("max_gradient"),
        help=f"Maximum absolute gradient in percent for reliable bins (default: {DEFAULTS['max_gradient']})",
    )
    parser.add_argument(
        "--min-speed",
        type=float,
        default=get_default("min_speed"),
        help=f"Minimum speed in km/h for reliable bins (default: {DEFAULTS['min_speed']})",
    )
    parser.add_argument(
        "--max-speed",
        type=float,
        default=get_default("max_speed"),
        help=f"Maximum speed in km/h for reliable bins (default: {DEFAULTS['max_speed']})",
    )
    parser.add_argument(
        "--min-hr",
        type=float,
        default=get_default("min_hr"),
        help="Keep only bins with average heart rate at or above this (bpm)",
    )
    parser.add_argument(
        "--max-hr",
        type=float,
        default=get_default("max_hr"),
        help="Keep only bins with average heart rate at or below this (bpm)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the analysis as JSON instead of a text report",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    config = get_defaults()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        results = load_results_file(args.results_file)
    except FileNotFoundError:
        print(f"Error: File not found: {args.results_file}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error reading results: {e}", file=sys.stderr)
        sys.exit(1)

    settings = build_filter_settings(
        args.remove_unreliable,
        args.max_gradient,
        args.min_speed,
        args.max_speed,
        args.min_hr,
        args.max_hr,
    )
    result = analyze(collect_bins(results), settings, args.stat)
    summary = summarize_results(results)

    if args.json:
        output = result.to_dict()
        output["summary"] = summary_to_dict(summary)
        print(json.dumps(output, indent=2))
        return

    print(format_summary(summary))
    print("")
    print(format_analysis_report(result))
