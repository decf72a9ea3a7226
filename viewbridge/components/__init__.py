"""
Component Namespace
===================

View components the bridge can render, keyed by the name a host uses in
its requests. Modules are imported on first use.
"""

NAMESPACE = {
    "Greeting": "viewbridge.components.greeting:Greeting",
    "Widget": "viewbridge.components.widget:Widget",
    "ProductCard": "viewbridge.components.product_card:ProductCard",
}

__all__ = ["NAMESPACE"]
