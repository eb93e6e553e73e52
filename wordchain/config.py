import os
from pathlib import Path

# --- Path Configuration ---
# Use the WORDCHAIN_HOME env var for the project root, with a fallback.
# The default corpus is resolved from the project root.
PROJECT_ROOT = Path(os.environ.get('WORDCHAIN_HOME', Path(__file__).parent.parent))
DEFAULT_CORPUS_PATH = PROJECT_ROOT / 'sample.txt'

# --- Tokenizer Configuration ---
# The stop character marks the end of a sequence. It doubles as the key of the
# start table, so it must never appear inside a word.
STOP_CHAR = '\n'
SPACE_CHAR = ' '
CORPUS_ENCODING = 'utf-8'

# --- Generation Configuration ---
DEFAULT_COUNT = 20
DEFAULT_MAX_SENTENCE_TOKENS = 200

# Seed for the random source. Leave WORDCHAIN_SEED unset for a fresh seed per run.
_seed = os.environ.get('WORDCHAIN_SEED')
try:
    SEED = int(_seed) if _seed else None
except ValueError:
    print(f"Warning: WORDCHAIN_SEED={_seed!r} is not an integer. Using a random seed.")
    SEED = None

# --- Logging ---
LOG_FORMAT = '%(levelname)s: %(message)s'
