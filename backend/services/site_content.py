"""
Marketing site content for the public home page.

Static copy served as data; layout and styling belong to the frontend.
"""

BRAND_NAME = "The Fruit Union"

HERO = {
    "title": "Fresh Fruits, Delivered to Your Door",
    "subtitle": (
        "Skip the market hassle. Get farm-fresh, organic fruits delivered "
        "straight to your home."
    ),
}

FEATURES = [
    {
        "key": "organic",
        "title": "100% Organic",
        "description": (
            "All our fruits are sourced from certified organic farms, ensuring "
            "you get the freshest and healthiest produce."
        ),
    },
    {
        "key": "fast_delivery",
        "title": "Fast Delivery",
        "description": (
            "Same-day delivery available! Your fruits are picked fresh and "
            "delivered straight to your doorstep."
        ),
    },
    {
        "key": "community",
        "title": "Trusted by Thousands",
        "description": (
            "Join our growing community of health-conscious customers who trust "
            "us for their daily fruit needs."
        ),
    },
]

PRICING_PLANS = [
    {
        "name": "Weekly Plan",
        "price": "₹299",
        "period": "/week",
        "features": [
            "Fresh fruits delivery every week",
            "Seasonal variety selection",
            "Free delivery within city",
            "Cancel anytime",
        ],
        "popular": False,
    },
    {
        "name": "Bi-Weekly Plan",
        "price": "₹549",
        "period": "/2 weeks",
        "features": [
            "Fresh fruits delivery twice a month",
            "Premium seasonal fruits",
            "Free delivery",
            "Flexible scheduling",
        ],
        "popular": True,
    },
    {
        "name": "Monthly Plan",
        "price": "₹999",
        "period": "/month",
        "features": [
            "Weekly fresh fruit deliveries",
            "Premium exotic fruits included",
            "Priority delivery slots",
            "Dedicated support",
        ],
        "popular": False,
    },
]

CALL_TO_ACTION = {
    "title": "Ready to Start Your Healthy Journey?",
    "description": (
        "Join thousands of satisfied customers enjoying fresh, organic fruits "
        "delivered to their homes."
    ),
}

FOOTER = {
    "tagline": "Fresh fruits, delivered with love.",
    "copyright": f"© 2025 {BRAND_NAME}. All rights reserved.",
}


def get_pricing_plans() -> list[dict]:
    return [dict(plan, features=list(plan["features"])) for plan in PRICING_PLANS]


def get_home_content() -> dict:
    return {
        "brand": BRAND_NAME,
        "hero": dict(HERO),
        "features": [dict(f) for f in FEATURES],
        "pricing_plans": get_pricing_plans(),
        "call_to_action": dict(CALL_TO_ACTION),
        "footer": dict(FOOTER),
    }
