# soundex.py
# Soundex phonetic codes: tag letters -> compress to a fixed point -> encode

from typing import List, NamedTuple

from soundex_utils import expand_eszett, get_logger, keep_alpha, to_text

logger = get_logger(__name__)

# ----- parameters -----
CODE_DIGITS = 3
PAD_DIGIT = "0"

VOWEL = "vowel"
HW = "hw"      # not coded, but decides how letters around them compress
NONE = "none"

SOUNDEX_GROUPS = {
    "BFPV": "1", "CGJKQSXZ": "2",
    "DT": "3", "L": "4",
    "MN": "5", "R": "6",
    "HW": HW,
    "AEIOUY": VOWEL,
}
DIGIT_CLASSES = frozenset("123456")

_CLASS_OF = {ch: cls for letters, cls in SOUNDEX_GROUPS.items() for ch in letters}


class Tag(NamedTuple):
    letter: str
    cls: str


# ----------------- classifier -----------------

def classify(letter: str) -> str:
    """phonetic class of a single letter; NONE when it is not in the table"""
    return _CLASS_OF.get(letter.upper(), NONE)


def tag_letter(letter: str) -> Tag:
    return Tag(letter, classify(letter))


def is_digit_class(cls: str) -> bool:
    return cls in DIGIT_CLASSES


# ----------------- tagger -----------------

def tag_string(value) -> List[Tag]:
    """
    Tag the letters of `value` with their Soundex classes.
    Punctuation, digits, whitespace and non-ASCII letters are dropped,
    except the eszett which counts as two S's.

    tag_string("O'Brien")
    -> [O/vowel, B/1, R/6, I/vowel, E/vowel, N/5]
    """
    letters = keep_alpha(expand_eszett(to_text(value).upper()))
    return [tag_letter(ch) for ch in letters]


def untag(tags: List[Tag]) -> str:
    """reassemble the (uppercase) letters of a tagged sequence"""
    return "".join(t.letter for t in tags)


# ----------------- compressor -----------------

def compress_adjacent(tags: List[Tag]) -> List[Tag]:
    """if consecutive tags share a class, keep only the first"""
    out: List[Tag] = []
    for t in tags:
        if out and out[-1].cls == t.cls:
            continue
        out.append(t)
    return out


def compress_hw(tags: List[Tag]) -> List[Tag]:
    """
    If two tags with an H or W between them share a class, drop the H/W
    and the second tag. The scan retries the same position after a drop,
    so chains like S-H-C-H-Z collapse to S.
    """
    out = list(tags)
    i = 0
    while i < len(out):
        if i + 2 < len(out) and out[i + 1].cls == HW and out[i].cls == out[i + 2].cls:
            del out[i + 1:i + 3]
            continue
        i += 1
    return out


def compress(tags: List[Tag]) -> List[Tag]:
    """apply both compression rules until the sequence stops changing"""
    current = list(tags)
    rounds = 0
    while True:
        rounds += 1
        compressed = compress_hw(compress_adjacent(current))
        if compressed == current:
            logger.debug("fixed point after %d round(s): %s", rounds, untag(compressed))
            return compressed
        current = compressed


# ----------------- encoder -----------------

def concat_tags_to_code(tags: List[Tag], code_len: int = CODE_DIGITS) -> str:
    """
    digit part of a code: classes of the first `code_len` digit-bearing
    tags, right-padded with zeros to exactly `code_len` characters
    """
    digits = [t.cls for t in tags if is_digit_class(t.cls)][:code_len]
    return "".join(digits).ljust(code_len, PAD_DIGIT)


def encode(tags: List[Tag]) -> str:
    if not tags:
        return ""
    first, rest = tags[0], tags[1:]
    return first.letter + concat_tags_to_code(rest, CODE_DIGITS)


def soundex(value) -> str:
    """
    Soundex code of a name -> 4-char code, or "" when no letters survive.

    Never raises: bytes are decoded leniently and unsupported inputs give "".

    soundex("Robert")   -> "R163"
    soundex("Ashcraft") -> "A261"   (S and C bridged by H count once)
    soundex("Tymczak")  -> "T522"   (vowel-separated repeats are kept)
    soundex("Piñata")   -> "P300"   (ñ is dropped, not read as n)
    soundex("123.45")   -> ""
    """
    return encode(compress(tag_string(value)))


compute = soundex


if __name__ == "__main__":
    print(soundex("robert"))   # expectation: R163
    print(soundex("rupert"))
    print(soundex("rubin"))
