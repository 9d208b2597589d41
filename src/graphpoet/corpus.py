from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from graphpoet.core.exceptions import CorpusReadError

logger = logging.getLogger(__name__)


def tokenize(text: str) -> List[str]:
    """Split on any whitespace and lowercase each token; punctuation stays attached."""

    return [token.lower() for token in text.split()]


def read_corpus(path: Union[str, Path]) -> List[str]:
    """Read a UTF-8 corpus file into its ordered lowercase tokens."""

    corpus_path = Path(path)
    try:
        text = corpus_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusReadError(f"Cannot read corpus {corpus_path}: {e}") from e

    words = tokenize(text)
    logger.info(f"Read {len(words)} tokens from {corpus_path}")
    return words
