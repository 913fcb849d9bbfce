import logging
import sys

from kappa.config import get_log_level
from kappa.repl import repl


def main() -> None:
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    repl(sys.stdin)


if __name__ == "__main__":
    main()
