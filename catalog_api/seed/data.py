"""Seed dataset for the product catalog.

Field sets are passed verbatim to ``ProductCreate``.
"""

from typing import Any

SEED_PRODUCTS: list[dict[str, Any]] = [
    {
        "title": "Men's Chill Crew Neck Sweatshirt",
        "description": (
            "Introducing the Tesla Chill Collection. The Men's Chill Crew Neck "
            "Sweatshirt has a premium, heavyweight exterior and soft fleece interior."
        ),
        "price": 75,
        "stock": 7,
        "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
        "gender": "men",
        "tags": ["sweatshirt"],
        "images": ["1740176-00-A_0_2000.jpg", "1740176-00-A_1.jpg"],
    },
    {
        "title": "Men's Quilted Shirt Jacket",
        "description": (
            "The Men's Quilted Shirt Jacket features a uniquely fit, quilted design "
            "for warmth and mobility in cold weather seasons."
        ),
        "price": 200,
        "stock": 5,
        "sizes": ["XS", "S", "M", "XL", "XXL"],
        "gender": "men",
        "tags": ["jacket"],
        "images": ["1740507-00-A_0_2000.jpg", "1740507-00-A_1.jpg"],
    },
    {
        "title": "Men's Raven Lightweight Zip Up Bomber Jacket",
        "description": (
            "Introducing the Tesla Raven Collection. The Men's Raven Lightweight "
            "Zip Up Bomber has a premium, modern silhouette."
        ),
        "price": 130,
        "stock": 10,
        "sizes": ["S", "M", "L", "XL", "XXL"],
        "gender": "men",
        "tags": ["shirt"],
        "images": ["1740250-00-A_0_2000.jpg", "1740250-00-A_1.jpg"],
    },
    {
        "title": "Men's Turbine Long Sleeve Tee",
        "description": (
            "Introducing the Tesla Turbine Collection. Designed for style, comfort "
            "and everyday lifestyle."
        ),
        "price": 45,
        "stock": 50,
        "sizes": ["XS", "S", "M", "L"],
        "gender": "men",
        "tags": ["shirt"],
        "images": ["1740280-00-A_0_2000.jpg", "1740280-00-A_1.jpg"],
    },
    {
        "title": "Men's Turbine Short Sleeve Tee",
        "description": (
            "Introducing the Tesla Turbine Collection. The Men's Turbine Short "
            "Sleeve Tee features a subtle, water-based Tesla wordmark."
        ),
        "price": 40,
        "stock": 50,
        "sizes": ["M", "L", "XL", "XXL"],
        "gender": "men",
        "tags": ["shirt"],
        "images": ["1741416-00-A_0_2000.jpg", "1741416-00-A_1.jpg"],
    },
    {
        "title": "Men's Cybertruck Owl Tee",
        "description": (
            "Designed for comfort, the Cybertruck Owl Tee is made from 100% cotton "
            "and features our signature Cybertruck icon on the back."
        ),
        "price": 35,
        "stock": 0,
        "sizes": ["M", "L", "XL", "XXL"],
        "gender": "men",
        "tags": ["shirt"],
        "images": ["7654393-00-A_2_2000.jpg", "7654393-00-A_3.jpg"],
    },
    {
        "title": "Women's Cropped Puffer Jacket",
        "description": (
            "The Women's Cropped Puffer Jacket features a uniquely cropped "
            "silhouette for the perfect, modern style while on the go."
        ),
        "price": 225,
        "stock": 85,
        "sizes": ["XS", "S", "M"],
        "gender": "women",
        "tags": ["hoodie"],
        "images": ["1740535-00-A_0_2000.jpg", "1740535-00-A_1.jpg"],
    },
    {
        "title": "Women's Chill Half Zip Cropped Hoodie",
        "description": (
            "Introducing the Tesla Chill Collection. The Women's Chill Half Zip "
            "Cropped Hoodie has a premium, soft fleece exterior."
        ),
        "price": 130,
        "stock": 10,
        "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
        "gender": "women",
        "tags": ["hoodie"],
        "images": ["1740226-00-A_0_2000.jpg", "1740226-00-A_1.jpg"],
    },
    {
        "title": "Women's Raven Slouchy Crew Sweatshirt",
        "description": (
            "Introducing the Tesla Raven Collection. The Women's Raven Slouchy Crew "
            "Sweatshirt has a premium, relaxed silhouette."
        ),
        "price": 110,
        "stock": 9,
        "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
        "gender": "women",
        "tags": ["hoodie"],
        "images": ["1740260-00-A_0_2000.jpg", "1740260-00-A_1.jpg"],
    },
    {
        "title": "Kids Cybertruck Long Sleeve Tee",
        "description": (
            "Designed for fit, comfort and style, the Kids Cybertruck Graffiti "
            "Long Sleeve Tee features a water-based Cybertruck graffiti wordmark."
        ),
        "price": 30,
        "stock": 10,
        "sizes": ["XS", "S", "M"],
        "gender": "kid",
        "tags": ["shirt"],
        "images": ["1742694-00-A_1_2000.jpg", "1742694-00-A_3.jpg"],
    },
    {
        "title": "Kids Scribble T Logo Tee",
        "description": (
            "The Kids Scribble T Logo Tee highlights the Tesla T logo in scribble "
            "on the front. Made from 100% Peruvian cotton."
        ),
        "price": 25,
        "stock": 0,
        "sizes": ["XS", "S", "M"],
        "gender": "kid",
        "tags": ["shirt"],
        "images": ["8529312-00-A_0_2000.jpg", "8529312-00-A_1.jpg"],
    },
    {
        "title": "Tesla Logo Baseball Cap",
        "description": (
            "A structured cotton twill cap with the Tesla T logo embroidered on "
            "the front and an adjustable strap at the back."
        ),
        "price": 30,
        "stock": 25,
        "sizes": [],
        "gender": "unisex",
        "tags": ["hat"],
        "images": ["1657932-00-A_0_2000.jpg"],
    },
]
