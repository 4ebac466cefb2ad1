"""
Presentation of scored tweets.

Formats scored results into output blocks, renders them to the console in
their sentiment colour and writes them to the output file.
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union
import bittensor as bt
from rich.console import Console
from rich.table import Table

from lexisent.analyser.tweet_scoring.models import ScoredResult, SentimentLabel
from lexisent.analyser.utils.config import OUTPUT_FILENAME


class ResultPresenter:
    """Renders and writes ordered scoring results."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    @staticmethod
    def format_results(results: Sequence[ScoredResult]) -> List[str]:
        """One output block per result, in the given order."""
        return [result.formatted for result in results]

    def render(self, results: Sequence[ScoredResult]) -> None:
        """Print each result block in its sentiment style."""
        for result in results:
            # Tweets are user text; never interpret [brackets] as rich markup
            self.console.print(result.formatted, style=result.style, markup=False, highlight=False)

    @staticmethod
    def summarise(results: Sequence[ScoredResult]) -> Dict[str, int]:
        """Count results per sentiment label (every label present, zero if unseen)."""
        summary = {label.value: 0 for label in SentimentLabel}
        for result in results:
            summary[result.label.value] += 1
        return summary

    def render_summary(self, summary: Dict[str, int]) -> None:
        """Print the per-label counts as a table."""
        table = Table(title="Sentiment summary", show_lines=True)
        table.add_column("Sentiment")
        table.add_column("Tweets", justify="right")

        for label, count in summary.items():
            table.add_row(label, str(count))

        self.console.print(table)

    def write_results(
        self,
        output_dir: Union[str, Path],
        results: Sequence[ScoredResult],
        filename: str = OUTPUT_FILENAME
    ) -> Optional[Path]:
        """
        Write result blocks to <output_dir>/<filename>.

        Args:
            output_dir: Directory for the output file (created if missing)
            results: Ordered scored results
            filename: Output file name

        Returns:
            Path of the written file, or None if writing failed
        """
        output_file = Path(output_dir) / filename

        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            with open(output_file, 'w', encoding='utf-8') as f:
                for block in self.format_results(results):
                    f.write(block)
                    f.write('\n')
        except OSError as e:
            bt.logging.error(f"Error writing to file {output_file}: {e}")
            return None

        bt.logging.info(f"Results written to: {output_file.resolve()}")
        return output_file
