from __future__ import annotations

import random
from datetime import date, timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.constants import VALID_CATEGORIES, VALID_DEMOGRAPHICS, VALID_TYPES
from modules.products.dtos import CreateProductDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

COLORS = [
    "#000000",
    "#ffffff",
    "#39add1",
    "#3079ab",
    "#c25975",
    "#e15258",
    "#f9845b",
    "#838cc7",
    "#7d669e",
    "#53bbb4",
    "#51b46d",
    "#e0ab18",
    "#637a91",
    "#f092b0",
    "#b7c0c7",
]
# Sorted so a given --seed always yields the same products.
DEMOGRAPHICS = sorted(VALID_DEMOGRAPHICS)
CATEGORIES = sorted(VALID_CATEGORIES)
TYPES = sorted(VALID_TYPES)
ADJECTIVES = [
    "Lightweight",
    "Slim",
    "Shock Absorbing",
    "Exotic",
    "Elastic",
    "Fashionable",
    "Trendy",
    "Next Gen",
    "Colorful",
    "Comfortable",
    "Water Resistant",
    "Wicking",
    "Heavy Duty",
]
MATERIALS = ["Leather", "Suede", "Synthetic", "Cotton", "Polyester"]
BRANDS = ["Under Armour", "Nike", "Adidas"]

FIRST_RELEASE = date(2019, 1, 1)


def random_product(rng: random.Random) -> CreateProductDTO:
    """Build one random product that satisfies every catalog rule."""
    demographic = rng.choice(DEMOGRAPHICS)
    category = rng.choice(CATEGORIES)
    product_type = rng.choice(TYPES)
    style_number = "sc" + "".join(rng.choices("0123456789", k=5))
    span = (date.today() - FIRST_RELEASE).days
    release = FIRST_RELEASE + timedelta(days=rng.randint(0, max(span, 0)))

    return CreateProductDTO(
        name=f"{rng.choice(ADJECTIVES)} {category} {product_type}",
        description=f"{category} {demographic} {rng.choice(ADJECTIVES)}",
        demographic=demographic,
        category=category,
        type=product_type,
        release_date=release.strftime("%m/%d/%Y"),
        price=Decimal(rng.randint(1, 50000)) / 100,
        quantity=rng.randint(0, 2500),
        brand=rng.choice(BRANDS),
        material=rng.choice(MATERIALS),
        primary_color_code=rng.choice(COLORS),
        secondary_color_code=rng.choice(COLORS),
        style_number=style_number,
        global_product_code="po-" + "".join(rng.choices("0123456789", k=7)),
        img_src=f"https://picsum.photos/seed/{style_number}/400",
        active=rng.random() < 0.5,
    )


class Command(BaseCommand):
    help = "Seed the catalog with random, valid sports products."

    def add_arguments(self, parser):
        parser.add_argument("--count", type=int, default=500)
        parser.add_argument("--seed", type=int, default=None)

    def handle(self, *args, **options):
        rng = random.Random(options["seed"])
        count = options["count"]
        service = ProductService(repository=ProductDjangoRepository())

        self.stdout.write(f"Creating {count} products...")
        for _ in range(count):
            service.create_product(random_product(rng))
        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={count}"))
