"""Business identity shown in emails, the dashboard and cart totals."""

from pydantic import BaseModel


class ShippingPolicy(BaseModel):
    """Flat-rate shipping with a free-shipping threshold (amounts in cents)."""

    free_threshold: int
    standard_rate: int
    processing_days: str
    delivery_days: str

    def cost_for(self, subtotal: int) -> int:
        """Shipping charge for a cart subtotal. Empty carts ship free."""
        if subtotal <= 0 or subtotal >= self.free_threshold:
            return 0
        return self.standard_rate


class BusinessInfo(BaseModel):
    name: str
    tagline: str
    address: str
    phone: str
    email: str
    hours: str
    service_area: str
    response_time: str


BUSINESS = BusinessInfo(
    name="Model Home Art",
    tagline="Custom framing that looks high-end - without the high-end price.",
    address="2550 S. Fairview St., Santa Ana, CA 92704",
    phone="(714) 878-2919",
    email="modelhomeart@gmail.com",
    hours="Mon-Sat: 10am-5pm, Sun: Closed",
    service_area="Orange County, CA and nationwide in the United States",
    response_time="24 business hours",
)

SHIPPING = ShippingPolicy(
    free_threshold=15000,
    standard_rate=999,
    processing_days="3-5 business days",
    delivery_days="5-7 business days",
)
