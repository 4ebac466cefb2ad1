"""
Main tweet scoring engine.

Scores every tweet in its own worker task and reassembles the results in
the order the tweets were submitted, whatever order the tasks finish in.
"""

import time
from concurrent.futures import ThreadPoolExecutor, as_completed, TimeoutError as FuturesTimeoutError
from typing import Callable, List, Mapping, Optional, Sequence
import bittensor as bt

from lexisent.analyser.utils.config import ANALYSIS_MAX_WORKERS, SCORING_TIMEOUT
from lexisent.analyser.utils.error_handling import (
    ErrorMessages,
    log_and_raise_processing_error,
    log_and_raise_timeout
)
from .models import BatchState, ScoredResult
from .sentiment_calculator import SentimentCalculator


class TweetScorer:
    """Concurrent, order-preserving tweet scorer."""

    def __init__(
        self,
        calculator_factory: Callable[[Mapping[int, float]], SentimentCalculator] = SentimentCalculator,
        max_workers: Optional[int] = None,
        timeout: Optional[float] = None,
        presenter=None
    ):
        """
        Initialize scorer.

        Args:
            calculator_factory: Builds the per-batch calculator from a lexicon
            max_workers: Worker pool size (default: ANALYSIS_MAX_WORKERS)
            timeout: Bounded wait in seconds per batch (default: SCORING_TIMEOUT)
            presenter: Console presenter used when show_live is set
        """
        self.calculator_factory = calculator_factory
        self.max_workers = max_workers or ANALYSIS_MAX_WORKERS
        self.timeout = SCORING_TIMEOUT if timeout is None else timeout
        self.presenter = presenter
        self.state = BatchState.IDLE

    def score_records(
        self,
        records: Sequence[str],
        lexicon: Mapping[int, float],
        show_live: bool = False
    ) -> List[ScoredResult]:
        """
        Score a batch of tweets.

        Each tweet is tagged with its position, scored in its own task and
        written back into a result slot addressed by that position. Results
        are emitted only once the whole batch has finished.

        Args:
            records: Tweets in submission order
            lexicon: Combined fingerprint -> score lexicon
            show_live: Render the ordered results to the console when done

        Returns:
            Scored results, element i belonging to records[i]

        Raises:
            BatchTimeoutError: If the batch does not finish within the timeout;
                no results are returned in that case
            RuntimeError: If scoring a tweet fails unexpectedly
        """
        start_time = time.time()
        self.state = BatchState.DISPATCHING

        calculator = self.calculator_factory(lexicon)
        slots: List[Optional[ScoredResult]] = [None] * len(records)

        bt.logging.info(f"Scoring {len(records)} tweets with {self.max_workers} workers")

        executor = ThreadPoolExecutor(max_workers=self.max_workers)
        try:
            future_to_index = {
                executor.submit(calculator.score_tweet, index, text): index
                for index, text in enumerate(records)
            }
            self.state = BatchState.AWAITING_COMPLETION

            try:
                for future in as_completed(future_to_index, timeout=self.timeout):
                    index = future_to_index[future]
                    try:
                        slots[index] = future.result()
                    except Exception as e:
                        self.state = BatchState.FAILED
                        log_and_raise_processing_error(e, ErrorMessages.SCORING_FAILED, {'index': index})
            except FuturesTimeoutError:
                self.state = BatchState.FAILED
                pending = sum(1 for f in future_to_index if not f.done())
                log_and_raise_timeout(ErrorMessages.SCORING_FAILED, self.timeout, pending)
        finally:
            # Outstanding tasks are abandoned, not interrupted
            executor.shutdown(wait=False, cancel_futures=True)

        self.state = BatchState.ASSEMBLING
        results = list(slots)
        self.state = BatchState.DONE

        bt.logging.info(
            f"  → Scored {len(results)} tweets ({time.time() - start_time:.1f}s)"
        )

        if show_live and results:
            presenter = self.presenter
            if presenter is None:
                # Deferred: the presenter module imports the scoring models
                from lexisent.analyser.reporting.result_presenter import ResultPresenter
                presenter = ResultPresenter()
            presenter.render(results)

        return results


def score_records(
    records: Sequence[str],
    lexicon: Mapping[int, float],
    show_live: bool = False
) -> List[ScoredResult]:
    """Score tweets with a default TweetScorer."""
    return TweetScorer().score_records(records, lexicon, show_live=show_live)
