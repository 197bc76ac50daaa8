"""Order confirmation email.

Sent once the order has been committed. Delivery is best effort: a failure
is logged and the order stands.
"""

from storefront.channel import get_email_channel
from storefront.channel.email_port import delivered
from storefront.domain import logger
from storefront.order.order import Order
from storefront.templates.order_confirmation import OrderConfirmationTemplate


def send_order_confirmation(order: Order) -> bool:
    detail = order.detail()
    message = OrderConfirmationTemplate.render({"order_id": detail.pop("id"), **detail})

    try:
        result = get_email_channel().deliver(order.shipping_details.email, message)
    except Exception:
        logger.exception("order_confirmation_failed", order_id=str(order.id))
        return False

    if not delivered(result):
        logger.warning("order_confirmation_failed", order_id=str(order.id), error=result.get("error"))
        return False

    logger.info("order_confirmation_sent", order_id=str(order.id), message_id=result.get("message_id"))
    return True
