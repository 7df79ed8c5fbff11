# soundex_utils.py
# text coercion, alpha filtering, logging helpers and the demo names loader

import re
import sys
import logging
from typing import List, Optional

_non_alpha_re = re.compile(r"[^A-Z]")

ESZETT = {"ß": "SS", "ẞ": "SS"}

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """module logger; the library never attaches handlers itself"""
    return logging.getLogger(name)


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for scripts (the demo runner).
    level: DEBUG, INFO, WARNING ... defaults to INFO.
    """
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    root_logger.addHandler(handler)


logger = get_logger(__name__)


def to_text(value) -> str:
    """
    Coerce input to str.
    bytes-like values are decoded as utf-8, dropping undecodable bytes,
    so dirty data yields fewer letters instead of an error.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="ignore")
    logger.debug("unsupported input type %s, treating as empty", type(value).__name__)
    return ""


def expand_eszett(text: str) -> str:
    for ch, repl in ESZETT.items():
        text = text.replace(ch, repl)
    return text


def keep_alpha(text: str) -> str:
    """drop everything that is not an ASCII uppercase letter"""
    return _non_alpha_re.sub("", text)


def load_names_corpus(limit=None) -> List[str]:
    """
    loads the nltk `names` corpus (male + female first names) as a list.
    if limit provided, returns only the first `limit` names.
    downloads the corpus on first use if it is missing.
    """
    try:
        from nltk.corpus import names
        all_names = list(names.words())
    except LookupError:
        import nltk
        nltk.download("names")
        from nltk.corpus import names
        all_names = list(names.words())
    if limit:
        all_names = all_names[:limit]
    return all_names
