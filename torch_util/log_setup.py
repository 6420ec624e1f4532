import logging
import sys


def setup_logging(level: int = logging.INFO):
    """
    Configure the root logger.

    Uses the format "timestamp - logger name - level - message" and writes
    records to stdout.
    """
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
