from pydantic import BaseModel, ConfigDict


# Defines the order record accepted by POST /compute and echoed back with a total.
class Order(BaseModel):
    # Reject "5" for ints and 10001 for the zip, like the original wire schema.
    model_config = ConfigDict(strict=True)

    order_id: int # Business-level order identifier.
    product_id: int # Product being ordered.
    quantity: int # Quantity of the product ordered.
    subtotal: float # Pre-tax amount.
    shipping_address: str # Free-text delivery address.
    shipping_zip: str # Rate lookup key, kept as text to preserve leading zeros.
    total: float = 0.0 # Computed output; whatever the client sends is overwritten.


class ErrorEnvelope(BaseModel):
    """Body returned for every domain-level failure."""
    status: str = "error"
    message: str
