import os
from dotenv import load_dotenv
from pathlib import Path
import bittensor as bt

env_path = Path(__file__).parents[1] / '.env'
load_dotenv(dotenv_path=env_path)

__version__ = "1.0.0"

# Lexicon sources
LEXICON_FILE_EXTENSIONS = tuple(
    ext.strip().lower()
    for ext in os.getenv('LEXICON_FILE_EXTENSIONS', '.txt,.csv').split(',')
    if ext.strip()
)

# Batch waits (seconds)
LEXICON_LOAD_TIMEOUT = float(os.getenv('LEXICON_LOAD_TIMEOUT', '60'))
SCORING_TIMEOUT = float(os.getenv('SCORING_TIMEOUT', '60'))

# Worker pool shared by lexicon loading, record reading and scoring
ANALYSIS_MAX_WORKERS = int(os.getenv('ANALYSIS_MAX_WORKERS', str(min(32, (os.cpu_count() or 1) + 4))))

# Scoring
SCORE_DECIMAL_PLACES = 1

# Output
DEFAULT_OUTPUT_DIR = os.getenv('DEFAULT_OUTPUT_DIR', 'output')
OUTPUT_FILENAME = 'output.txt'
RESULT_SEPARATOR = '-----------------------------------'

# Events log rotation
EVENTS_RETENTION_SIZE = int(os.getenv('EVENTS_RETENTION_SIZE', str(2 * 1024 * 1024)))  # 2 MB

bt.logging.info(f"LEXICON_FILE_EXTENSIONS: {LEXICON_FILE_EXTENSIONS}")
bt.logging.info(f"LEXICON_LOAD_TIMEOUT: {LEXICON_LOAD_TIMEOUT}s")
bt.logging.info(f"SCORING_TIMEOUT: {SCORING_TIMEOUT}s")
bt.logging.info(f"ANALYSIS_MAX_WORKERS: {ANALYSIS_MAX_WORKERS}")
bt.logging.info(f"DEFAULT_OUTPUT_DIR: {DEFAULT_OUTPUT_DIR}")
