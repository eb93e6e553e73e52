import logging
from pathlib import Path

from wordchain import config
from wordchain.markov_chain.errors import CorpusUnreadable
from wordchain.markov_chain.markov_chain import ChainModel

logger = logging.getLogger(__name__)


def read_corpus(paths, encoding=config.CORPUS_ENCODING):
    """
    Reads and concatenates corpus files. Each file is closed off with a stop
    character so its last sentence never runs into the next file.
    """
    if isinstance(paths, (str, Path)):
        paths = [paths]

    parts = []
    for path in paths:
        path = Path(path)
        try:
            content = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusUnreadable(path, e) from e
        logger.info("Read %d characters from %s", len(content), path)
        if content and not content.endswith(config.STOP_CHAR):
            content += config.STOP_CHAR
        parts.append(content)
    return ''.join(parts)


def load_model(paths, rng=None, progress=False):
    """Builds and caches a ChainModel from one or more corpus files."""
    text = read_corpus(paths)
    return ChainModel(rng=rng).build(text, progress=progress)
