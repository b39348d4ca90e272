"""Order update template — sent when an order changes status."""


class OrderUpdateTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        status = context.get("status", "updated")
        return {
            "subject": f"Order #{order_id} update: {status}",
            "body": (
                f"Dear customer, the status of your order #{order_id} is now: {status}.\n\n"
                "Thank you for shopping with us!"
            ),
        }
