"""
Load the starter shop catalog (collections and products).

Safe to run repeatedly: records are matched on slug and updated in place.

Usage:
    uv run python apps/web/manage.py seed_catalog
    uv run python apps/web/manage.py seed_catalog --dry-run
"""

import logging
from typing import Any

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.web.shop.models import Collection, Product

logger = logging.getLogger(__name__)

COLLECTIONS: list[dict[str, Any]] = [
    {
        "slug": "modern",
        "name": "Modern Frames",
        "description": "Clean lines and contemporary styles for today's spaces.",
        "featured": True,
        "display_order": 1,
    },
    {
        "slug": "classic",
        "name": "Classic Frames",
        "description": "Timeless traditional frames that never go out of style.",
        "featured": True,
        "display_order": 2,
    },
    {
        "slug": "gallery-sets",
        "name": "Gallery Sets",
        "description": "Curated frame collections for stunning gallery walls.",
        "featured": True,
        "display_order": 3,
    },
    {
        "slug": "shadow-boxes",
        "name": "Shadow Boxes",
        "description": "Deep frames perfect for 3D displays and memorabilia.",
        "featured": False,
        "display_order": 4,
    },
    {
        "slug": "floating",
        "name": "Floating Frames",
        "description": "Modern floating edge designs for a contemporary look.",
        "featured": False,
        "display_order": 5,
    },
]

PRODUCTS: list[dict[str, Any]] = [
    {
        "collection": "modern",
        "slug": "modern-black-8x10",
        "name": "Modern Black Frame",
        "description": "A sleek, contemporary frame with clean lines.",
        "price": 2499,
        "sizes": ["5×7", "8×10", "11×14", "16×20"],
        "materials": "Solid wood with matte black finish, glass front",
        "inventory": 50,
        "featured": True,
    },
    {
        "collection": "modern",
        "slug": "modern-white-8x10",
        "name": "Modern White Frame",
        "description": "Clean white frame perfect for bright, airy spaces.",
        "price": 2499,
        "sizes": ["5×7", "8×10", "11×14", "16×20"],
        "materials": "Solid wood with matte white finish, glass front",
        "inventory": 45,
        "featured": True,
    },
    {
        "collection": "modern",
        "slug": "slim-metal-black",
        "name": "Slim Metal Frame",
        "description": "Ultra-thin metal profile for a minimalist look.",
        "price": 1999,
        "sizes": ["5×7", "8×10", "11×14"],
        "materials": "Aluminum with anodized finish, glass front",
        "inventory": 60,
        "featured": False,
    },
    {
        "collection": "classic",
        "slug": "classic-walnut-11x14",
        "name": "Classic Walnut Frame",
        "description": "Rich walnut finish with a traditional profile.",
        "price": 3499,
        "sizes": ["8×10", "11×14", "16×20"],
        "materials": "Solid walnut wood, UV-protective glass, acid-free backing",
        "inventory": 35,
        "featured": True,
    },
    {
        "collection": "classic",
        "slug": "gold-ornate-8x10",
        "name": "Gold Ornate Frame",
        "description": "Elegant gold frame with decorative details.",
        "price": 3999,
        "sizes": ["5×7", "8×10", "11×14"],
        "materials": "Composite wood with gold leaf finish",
        "inventory": 25,
        "featured": False,
    },
    {
        "collection": "shadow-boxes",
        "slug": "shadow-box-8x8",
        "name": "Shadow Box Frame",
        "description": "Deep frame for displaying 3D items and keepsakes.",
        "price": 4299,
        "sizes": ["8×8", "12×12", "16×16"],
        "materials": 'Solid wood construction, 2" depth, glass front',
        "inventory": 20,
        "featured": True,
    },
    {
        "collection": "floating",
        "slug": "floating-12x12",
        "name": "Floating Frame",
        "description": "Floating design that shows off your art with a modern edge.",
        "price": 3799,
        "sizes": ["8×8", "12×12", "16×16", "20×20"],
        "materials": "Wood frame with acrylic panels",
        "inventory": 30,
        "featured": False,
    },
    {
        "collection": "gallery-sets",
        "slug": "gallery-set-5pc",
        "name": "Gallery Wall Set - 5 Pieces",
        "description": "Curated set of 5 coordinating frames for a gallery wall.",
        "price": 8999,
        "sizes": ["Set of 5 (various sizes)"],
        "materials": "Solid wood frames, glass fronts, hanging hardware included",
        "inventory": 15,
        "featured": True,
    },
]


class Command(BaseCommand):
    help = "Create or update the starter shop collections and products"

    def add_arguments(self, parser: Any) -> None:
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would change without writing",
        )

    def handle(self, *_args: Any, **options: Any) -> None:
        if options["dry_run"]:
            self.stdout.write(
                f"Would seed {len(COLLECTIONS)} collections "
                f"and {len(PRODUCTS)} products"
            )
            return

        created, updated = self.seed()
        self.stdout.write(
            self.style.SUCCESS(f"Catalog seeded: {created} created, {updated} updated")
        )

    @transaction.atomic
    def seed(self) -> tuple[int, int]:
        """Upsert every collection and product. Returns (created, updated)."""
        created = 0
        updated = 0

        collections: dict[str, Collection] = {}
        for data in COLLECTIONS:
            fields = {k: v for k, v in data.items() if k != "slug"}
            collection, was_created = Collection.objects.update_or_create(
                slug=data["slug"], defaults=fields
            )
            collections[collection.slug] = collection
            created += was_created
            updated += not was_created

        for data in PRODUCTS:
            fields = {k: v for k, v in data.items() if k not in ("slug", "collection")}
            fields["collection"] = collections[data["collection"]]
            fields["in_stock"] = data["inventory"] > 0
            _product, was_created = Product.objects.update_or_create(
                slug=data["slug"], defaults=fields
            )
            created += was_created
            updated += not was_created

        logger.info("Seeded catalog: %d created, %d updated", created, updated)
        return created, updated
