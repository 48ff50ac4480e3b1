import json
import logging

from fastapi import Response

from .models import Order
from .rates import RateLookupClient, RateLookupError
from .responses import build_response, error_response

logger = logging.getLogger(__name__)

NO_RATE_MESSAGE = "The zip code ({zip}) in the order does not have a corresponding sales tax rate."


def apply_rate(subtotal: float, rate: float) -> float:
    """Total after tax. No rounding is applied."""
    return subtotal * (1.0 + rate)


def calculate_total(order: Order, client: RateLookupClient) -> Response:
    """
    Fill in order.total from the zip code's tax rate.

    Returns the pretty-printed order on success, or the error envelope naming
    the zip code when no rate could be obtained. Both answer HTTP 200.
    """
    try:
        rate = client.find_rate(order.shipping_zip)
    except RateLookupError as e:
        logger.warning("No tax rate for zip %s (%s)", order.shipping_zip, e.reason)
        return error_response(NO_RATE_MESSAGE.format(zip=order.shipping_zip))

    order.total = apply_rate(order.subtotal, rate)
    logger.debug("Order %s total %s (subtotal %s, rate %s)", order.order_id, order.total, order.subtotal, rate)

    # A total that overflows to inf is not valid JSON; let it fail as an internal error.
    return build_response(json.dumps(order.model_dump(), indent=2, ensure_ascii=False, allow_nan=False))
