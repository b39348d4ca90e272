"""Sale alert template — sent to past buyers and taste-profile matches."""


class SaleAlertTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        product_name = context.get("product_name", "A product you may like")
        price = context.get("price", "a reduced price")
        return {
            "subject": f"Sale Alert! {product_name} is on sale!",
            "body": (
                f"Dear customer, {product_name} is now on sale for ${price}. "
                "Based on your past purchases or taste preferences, "
                "we thought you'd like to know!"
            ),
        }
