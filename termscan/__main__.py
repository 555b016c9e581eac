"""
Example searches.

Usage:
    python -m termscan
"""

from __future__ import annotations

from termscan.logging import get_logger, setup_logging
from termscan.matcher import find_term_instances

EXAMPLES = [
    ("The Customer is always right", "Customer, you"),
    ("The Customer is not our client", "Customer, us"),
    ("My rights cannot be abridged by myself, only the Client", "I, Client"),
    ("i) In this clause my documents are read", "Me"),
]


def main():
    setup_logging()
    logger = get_logger("demo")
    logger.info("Running %d example searches", len(EXAMPLES))

    for text, terms in EXAMPLES:
        print(find_term_instances(text, terms))


if __name__ == "__main__":
    main()
