"""
Seed data for the merchandise catalog.
Dimensioned products are ordered by size (one unit each); the rest by quantity.
"""

PRODUCTS = [
    {
        "name": "Business Cards",
        "category": "Stationery",
        "sku": "STN-BC-001",
        "description": "Premium 350gsm matte business cards, double sided.",
        "unit_type": "pack of 100",
        "min_quantity": 5,
        "requires_dimensions": False,
    },
    {
        "name": "Branded Pens",
        "category": "Stationery",
        "sku": "STN-PEN-002",
        "description": "Blue ink ball pens with dealer logo print.",
        "unit_type": "box of 50",
        "min_quantity": 2,
        "requires_dimensions": False,
    },
    {
        "name": "Polo T-Shirts",
        "category": "Apparel",
        "sku": "APP-TS-003",
        "description": "Cotton polo t-shirts with embroidered logo.",
        "unit_type": "pieces",
        "min_quantity": 10,
        "requires_dimensions": False,
    },
    {
        "name": "Flex Banners",
        "category": "Signage",
        "sku": "SGN-BNR-004",
        "description": "Outdoor flex banner printed to the requested size.",
        "unit_type": None,
        "min_quantity": None,
        "requires_dimensions": True,
    },
    {
        "name": "Showroom Backdrop",
        "category": "Signage",
        "sku": "SGN-BDP-005",
        "description": "Fabric backdrop for showroom events, custom size.",
        "unit_type": None,
        "min_quantity": None,
        "requires_dimensions": True,
    },
    {
        "name": "Keychains",
        "category": "Giveaways",
        "sku": "GIV-KEY-006",
        "description": "Metal keychains with enamel logo.",
        "unit_type": "pieces",
        "min_quantity": 25,
        "requires_dimensions": False,
    },
    {
        "name": "Coffee Mugs",
        "category": "Giveaways",
        "sku": "GIV-MUG-007",
        "description": "Ceramic mugs, 330ml, full-wrap print.",
        "unit_type": "pieces",
        "min_quantity": 12,
        "requires_dimensions": False,
    },
]
