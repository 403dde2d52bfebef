import logging
import os


def get_logger(name='indexedpq'):
    logger = logging.getLogger(name)
    logging.basicConfig(format="[%(asctime)s %(levelname)s]: %(message)s")
    debug = os.environ.get('INDEXEDPQ_DEBUG', False)
    debug = debug == 'true' or debug == '1'
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return logger


def parent(i: int) -> int:
    return (i - 1) // 2


def left_child(i: int) -> int:
    return 2 * i + 1


def right_child(i: int) -> int:
    return 2 * i + 2
