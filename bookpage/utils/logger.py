import logging
import os
from logging.handlers import RotatingFileHandler
from dotenv import load_dotenv

load_dotenv()


def setup_logging(name="book_extractor"):
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Module may be imported more than once (tests, reloads)
    if logger.handlers:
        return logger

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # File logging only when asked for; extraction itself writes no files
    log_file = os.getenv("LOG_FILE")
    if log_file:
        # Rotate log file after 1MB, keep 5 backup files
        fh = RotatingFileHandler(log_file, maxBytes=1024*1024, backupCount=5)
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger

logger = setup_logging()
