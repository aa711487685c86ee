from typing import Optional

DESCRIPTION_TEMPLATE = """
<p><strong>{title}</strong> — designed for happy, healthy pets.</p>
<h3>Key Benefits</h3>
<ul>
<li>Supports healthy posture</li>
<li>Reduces mess & choking</li>
<li>Durable for daily use</li>
<li>Easy to clean</li>
</ul>
<h3>Product Details</h3>
<ul>
<li>Brand: {brand}</li>
<li>Material: Pet-safe materials</li>
</ul>
<h3>Shipping & Returns</h3>
<p>Fast US shipping. 30-day hassle-free returns.</p>
"""


def build_description(title: str, vendor: Optional[str], default_brand: str) -> str:
    """Render the standard product description. Depends only on title and vendor."""
    return DESCRIPTION_TEMPLATE.format(
        title=title,
        brand=vendor or default_brand,
    ).strip()
