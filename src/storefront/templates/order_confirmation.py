"""Order confirmation template — sent to the shipping email once an order is placed."""

from html import escape


def _money(amount) -> str:
    return f"${float(amount or 0):.2f}"


class OrderConfirmationTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        shipping = context.get("shipping_details", {})
        items = context.get("items", [])

        name = f"{shipping.get('first_name', '')} {shipping.get('last_name', '')}".strip()
        lines = [
            f"  {item['title'] or item['product_id']} x {item['quantity']} = {_money(item['price'] * item['quantity'])}"
            for item in items
        ]

        body = (
            f"Thank you for your order, {name or 'customer'}!\n\n"
            f"Order ID: {order_id}\n"
            f"Status: {context.get('status', 'Pending')}\n\n"
            "Items:\n" + "\n".join(lines) + "\n\n"
            f"Subtotal: {_money(context.get('subtotal'))}\n"
            f"Shipping: {_money(context.get('shipping'))}\n"
            f"Total: {_money(context.get('total'))}\n\n"
            f"Shipping to: {shipping.get('address', '')}, {shipping.get('city', '')}, {shipping.get('country', '')}\n\n"
            "Contact us: support@swiftcart.com"
        )

        rows = "".join(
            f"<tr><td>{escape(str(item['title'] or item['product_id']))}</td>"
            f"<td>{item['quantity']}</td><td>{_money(item['price'] * item['quantity'])}</td></tr>"
            for item in items
        )
        html_body = (
            "<h1>SwiftCart Order Confirmation</h1>"
            f"<p><strong>Order ID:</strong> {escape(str(order_id))}</p>"
            f"<p><strong>Status:</strong> {escape(str(context.get('status', 'Pending')))}</p>"
            "<table><thead><tr><th>Product</th><th>Quantity</th><th>Total</th></tr></thead>"
            f"<tbody>{rows}</tbody></table>"
            f"<p><strong>Total:</strong> {_money(context.get('total'))}</p>"
        )

        return {
            "subject": f"SwiftCart Order Confirmation - {order_id}",
            "body": body,
            "html_body": html_body,
        }
