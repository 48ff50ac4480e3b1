import logging
import math

import requests

logger = logging.getLogger(__name__)


class RateLookupError(Exception):
    """The rate service could not give a usable rate for a zip code."""

    def __init__(self, zip_code: str, reason: str):
        super().__init__(f"rate lookup for {zip_code!r} failed: {reason}")
        self.zip_code = zip_code
        self.reason = reason


class RateLookupClient:
    """
    Talks to the external sales tax rate service.

    The service takes the raw zip code as the POST body and answers 200 with
    the rate as plain text (e.g. "0.07"). Anything else counts as a failure.
    """

    def __init__(self, url: str, timeout: float):
        self.url = url
        self.timeout = timeout

    def find_rate(self, zip_code: str) -> float:
        """
        Look up the tax rate for a zip code.

        Raises:
            RateLookupError: on connection errors, timeouts, a status other
                than 200, or a body that is not a finite number.
        """
        try:
            response = requests.post(
                self.url,
                data=zip_code.encode("utf-8"),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise RateLookupError(zip_code, f"request error: {e}") from e

        if response.status_code != 200:
            raise RateLookupError(zip_code, f"HTTP {response.status_code}")

        try:
            rate = float(response.text.strip())
        except ValueError as e:
            raise RateLookupError(zip_code, f"unparseable rate {response.text!r}") from e
        if not math.isfinite(rate):
            raise RateLookupError(zip_code, f"non-finite rate {response.text!r}")

        logger.debug("Rate for zip %s is %s", zip_code, rate)
        return rate
