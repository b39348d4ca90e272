"""Low stock alert template — internal notification to the inventory admin."""


class LowStockAlertTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        product_name = context.get("product_name", "N/A")
        product_id = context.get("product_id", "N/A")
        stock_quantity = context.get("stock_quantity", "unknown")
        return {
            "subject": f"[Low Stock] {product_name}",
            "body": (
                f"Low stock alert for {product_name}\n\n"
                f"Product ID: {product_id}\n"
                f"Current Stock: {stock_quantity}\n\n"
                "Please review and reorder as needed."
            ),
        }
