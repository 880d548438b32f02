# flagyard - MIT Licensed
"""Package-wide logger for flagyard."""
import logging

logger: logging.Logger = logging.getLogger("flagyard")
logger.addHandler(logging.NullHandler())
