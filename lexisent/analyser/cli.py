"""
Command-line entry point for sentiment analysis.

Example:
    lexisent --records data/tweets --lexicon data/lexicons --show-live
"""

import argparse
import sys
from typing import List, Optional
import bittensor as bt

from lexisent.analyser.analysis_runner import run_analysis
from lexisent.analyser.reporting import ResultPresenter
from lexisent.analyser.utils.config import DEFAULT_OUTPUT_DIR, EVENTS_RETENTION_SIZE
from lexisent.utils.logging import setup_events_logger


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser, including bittensor logging flags."""
    parser = argparse.ArgumentParser(
        description="Score tweets for sentiment against one or more word,score lexicons"
    )
    bt.logging.add_args(parser)

    parser.add_argument(
        "--records",
        type=str,
        default=None,
        help="Tweet file, or directory of tweet files (one tweet per line) (required)"
    )

    parser.add_argument(
        "--lexicon",
        type=str,
        default=None,
        help="Lexicon file, or directory of lexicon files (word,score per line) (required)"
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Directory for output.txt (default: {DEFAULT_OUTPUT_DIR})"
    )

    parser.add_argument(
        "--show-live",
        action="store_true",
        help="Print the scored tweets to the console once scoring completes"
    )

    parser.add_argument(
        "--events-dir",
        type=str,
        default=None,
        help="Write run events to a rotating log in this directory"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run one analysis. Returns the process exit code."""
    try:
        parser = build_parser()

        args_list = list(sys.argv[1:] if argv is None else argv)

        # Add info logging if no logging level specified
        if not any(arg.startswith('--logging.') for arg in args_list):
            args_list.insert(0, '--logging.info')

        config = bt.config(parser, args=args_list)
        bt.logging.set_config(config=config.logging)

        if not config.records:
            raise ValueError("--records is required")
        if not config.lexicon:
            raise ValueError("--lexicon is required")

        events_logger = None
        if config.events_dir:
            events_logger = setup_events_logger(config.events_dir, EVENTS_RETENTION_SIZE)

        presenter = ResultPresenter()
        report = run_analysis(
            records_path=config.records,
            lexicon_path=config.lexicon,
            output_dir=config.output_dir,
            show_live=config.show_live,
            events_logger=events_logger,
            presenter=presenter
        )

        for warning in report.warnings:
            print(f"⚠️  {warning}")

        if report.results:
            presenter.render_summary(report.summary)
            if report.output_file:
                print(f"\n✅ Results written to: {report.output_file}")
            else:
                print("\n❌ Results could not be written")
                return 1
        else:
            print("\n⚠️  No tweets were scored")

        return 0

    except KeyboardInterrupt:
        print("\n\n❌ Cancelled by user")
        return 1
    except (ValueError, TimeoutError, RuntimeError) as e:
        bt.logging.error(f"Sentiment analysis failed: {e}")
        print(f"❌ Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
