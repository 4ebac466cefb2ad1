"""
End-to-end sentiment analysis run.

Loads lexicons, reads tweets, scores them, writes the report and
summarises the outcome.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union
import bittensor as bt

from lexisent.analyser.lexicon import load_lexicons
from lexisent.analyser.reporting import ResultPresenter
from lexisent.analyser.tweet_scoring import ScoredResult, TweetScorer, read_records
from lexisent.analyser.utils.config import DEFAULT_OUTPUT_DIR
from lexisent.analyser.utils.error_handling import ErrorMessages, log_and_raise_config_error
from lexisent.utils.logging import format_event


@dataclass
class AnalysisReport:
    """Outcome of one analysis run."""
    results: List[ScoredResult] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    output_file: Optional[Path] = None
    summary: Dict[str, int] = field(default_factory=dict)
    lexicon_size: int = 0
    execution_time_seconds: float = 0.0


def validate_analysis_config(
    records_path: Union[str, Path, None],
    lexicon_path: Union[str, Path, None],
    output_dir: Union[str, Path, None]
) -> None:
    """
    Check that every path a run needs has been configured.

    Raises:
        ValueError: If a required path is missing
    """
    if not records_path:
        log_and_raise_config_error(ErrorMessages.RECORDS_PATH_MISSING, config_key="records_path")
    if not lexicon_path:
        log_and_raise_config_error(ErrorMessages.LEXICON_PATH_MISSING, config_key="lexicon_path")
    if not output_dir:
        log_and_raise_config_error("No output directory provided", config_key="output_dir")


def run_analysis(
    records_path: Union[str, Path],
    lexicon_path: Union[str, Path],
    output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR,
    show_live: bool = False,
    events_logger=None,
    scorer: Optional[TweetScorer] = None,
    presenter: Optional[ResultPresenter] = None
) -> AnalysisReport:
    """
    Run a complete sentiment analysis.

    Args:
        records_path: Tweet file or directory of tweet files
        lexicon_path: Lexicon file or directory of lexicon files
        output_dir: Directory for the output report
        show_live: Render results to the console once scoring completes
        events_logger: Optional logger from setup_events_logger
        scorer: Scoring engine (default: a new TweetScorer)
        presenter: Result presenter (default: a new ResultPresenter)

    Returns:
        AnalysisReport with ordered results, lexicon warnings and summary

    Raises:
        ValueError: If configuration is incomplete or the lexicon is empty
        BatchTimeoutError: If lexicon loading or scoring times out
    """
    start_time = time.time()
    validate_analysis_config(records_path, lexicon_path, output_dir)

    presenter = presenter or ResultPresenter()
    scorer = scorer or TweetScorer(presenter=presenter)

    bt.logging.info(f"🔍 Starting sentiment analysis: records={records_path}, lexicon={lexicon_path}")
    if events_logger:
        events_logger.event(format_event("analysis started", records=records_path, lexicon=lexicon_path))

    # Step 1: Combine lexicons
    lexicon, warnings = load_lexicons(lexicon_path)
    if not lexicon:
        log_and_raise_config_error(ErrorMessages.EMPTY_LEXICON, config_key="lexicon_path", config_value=str(lexicon_path))

    # Step 2: Read tweets
    records = read_records(records_path)
    if not records:
        bt.logging.warning(f"No tweets found at {records_path}, nothing to score")
        return AnalysisReport(
            warnings=warnings,
            summary=presenter.summarise([]),
            lexicon_size=len(lexicon),
            execution_time_seconds=round(time.time() - start_time, 2)
        )

    # Step 3: Score
    results = scorer.score_records(records, lexicon, show_live=show_live)

    # Step 4: Report
    output_file = presenter.write_results(output_dir, results)
    summary = presenter.summarise(results)

    report = AnalysisReport(
        results=results,
        warnings=warnings,
        output_file=output_file,
        summary=summary,
        lexicon_size=len(lexicon),
        execution_time_seconds=round(time.time() - start_time, 2)
    )

    bt.logging.info(
        f"✅ Sentiment analysis complete: {len(results)} tweets "
        f"({summary['Positive']} positive, {summary['Negative']} negative, "
        f"{summary['Neutral']} neutral) in {report.execution_time_seconds:.1f}s"
    )
    if events_logger:
        events_logger.event(format_event(
            "analysis complete",
            tweets=len(results),
            lexicon_entries=len(lexicon),
            warnings=len(warnings),
            output=output_file
        ))

    return report
