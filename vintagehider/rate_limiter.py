import logging
import time

from vintagehider.config import DELAY_BETWEEN_REQUESTS

logger = logging.getLogger(__name__)


class RateLimiter:
    """Fixed pause before every API request"""

    def __init__(self, delay: float = DELAY_BETWEEN_REQUESTS, sleep=time.sleep):
        self.delay = delay
        self.sleep = sleep
        self.request_count = 0

    def wait(self):
        """Sleep for the configured delay. Not adaptive, no backoff."""
        if self.delay > 0:
            self.sleep(self.delay)
        self.request_count += 1
        logger.debug(f"⏱️ Request {self.request_count} after {self.delay}s pause")
