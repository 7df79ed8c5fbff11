# run_example.py
# demo runner: prints the soundex code for a few names
import argparse

from soundex import soundex, tag_string, compress, untag
from soundex_utils import get_logger, load_names_corpus, setup_logging

logger = get_logger(__name__)

# demo names if none provided
DEMO_NAMES = [
    "Robert",
    "Rupert",
    "Rubin",
    "Ashcraft",
    "Tymczak",
    "Pfister",
    "O'Brien",
    "Van Deusen",
    "Straßer",
    "Piñata",
]


def format_row(name: str, show_tags: bool = False) -> str:
    code = soundex(name) or "(no letters)"
    row = f"{name:<20} {code}"
    if show_tags:
        row += f"   [{untag(compress(tag_string(name)))}]"
    return row


def main(argv=None):
    parser = argparse.ArgumentParser(description="demo runner for soundex")
    parser.add_argument("--q", nargs="*", help="names to encode")
    parser.add_argument("--corpus", type=int, default=0,
                        help="encode the first N names of the nltk names corpus")
    parser.add_argument("--tags", action="store_true", help="show the compressed letters")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "WARNING")

    names = DEMO_NAMES
    if args.q:
        names = args.q
    elif args.corpus:
        names = load_names_corpus(limit=args.corpus)
        logger.info("loaded %d names from nltk corpus", len(names))

    for name in names:
        print(format_row(name, show_tags=args.tags))


if __name__ == "__main__":
    main()
