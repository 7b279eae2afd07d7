"""Demo catalogue for local development and demos.

``SeedCatalogue`` wipes the catalogue and loads :data:`DEMO_PRODUCTS`. It is
reachable through ``manage.py seed`` and the admin-only ``POST /api/seed``.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product

logger = structlog.get_logger(__name__)

_UNSPLASH = "https://images.unsplash.com/photo-{}?w=400&h=300&fit=crop"
_PEXELS = "https://images.pexels.com/photos/{0}/pexels-photo-{0}.jpeg?auto=compress&cs=tinysrgb&w=400"


def _item(name, description, price, original_price, category, image, unit, discount, stock, rating):
    return {
        "name": name,
        "description": description,
        "price": price,
        "original_price": original_price,
        "category": category,
        "image": image,
        "unit": unit,
        "discount": discount,
        "stock": stock,
        "rating": rating,
    }


_VEG = "Vegetables & Fruits"
_DAIRY = "Dairy & Breakfast"
_MUNCHIES = "Munchies"
_DRINKS = "Cold Drinks & Juices"
_BAKERY = "Bakery & Biscuits"
_TEA = "Tea Coffee & Health Drinks"
_SWEET = "Sweet Tooth"

DEMO_PRODUCTS = [
    _item("Fresh Tomatoes", "Fresh red tomatoes, locally sourced", 40, 50, _VEG,
          _UNSPLASH.format("1546094096-0df4bcaaa337"), "500g", 20, 50, 4.2),
    _item("Fresh Bananas", "Premium ripe bananas", 50, 60, _VEG,
          _UNSPLASH.format("1603833665858-e61d17a86224"), "1 dozen", 17, 40, 4.4),
    _item("Fresh Apples", "Crispy red apples from Kashmir", 80, 100, _VEG,
          _UNSPLASH.format("1560806887-1e4cd0b6cbd6"), "1kg", 20, 45, 4.5),
    _item("Fresh Carrots", "Organic carrots, farm fresh", 35, 45, _VEG,
          _UNSPLASH.format("1598170845058-32b9d6a5da37"), "500g", 22, 60, 4.3),
    _item("Fresh Onions", "Red onions, essential for cooking", 30, 38, _VEG,
          _UNSPLASH.format("1618512496248-a07fe83aa8cb"), "1kg", 21, 80, 4.1),
    _item("Amul Milk", "Fresh toned milk", 28, 30, _DAIRY,
          _UNSPLASH.format("1550583724-b2692b85b150"), "500ml", 7, 100, 4.5),
    _item("Amul Butter", "Creamy salted butter", 55, 60, _DAIRY,
          _UNSPLASH.format("1589985270826-4b7bb135bc9d"), "100g", 8, 70, 4.6),
    _item("Yogurt Cup", "Fresh homemade style yogurt", 45, 50, _DAIRY,
          _UNSPLASH.format("1488477181946-6428a0291777"), "400g", 10, 60, 4.4),
    _item("Paneer", "Fresh cottage cheese", 90, 100, _DAIRY,
          _UNSPLASH.format("1628088062854-d1870b4553da"), "200g", 10, 35, 4.5),
    _item("Cheese Slices", "Premium cheddar cheese slices", 120, 140, _DAIRY,
          _UNSPLASH.format("1452195100486-9cc805987862"), "200g", 14, 50, 4.3),
    _item("Lays Classic Chips", "Crispy salted potato chips", 20, 20, _MUNCHIES,
          _UNSPLASH.format("1566478989037-eec170784d0b"), "50g", 0, 75, 4.0),
    _item("Kurkure Masala", "Crunchy spicy snack", 20, 20, _MUNCHIES,
          _UNSPLASH.format("1613919234083-5c217d28300f"), "60g", 0, 80, 4.2),
    _item("Haldiram Bhujia", "Traditional Indian snack", 50, 55, _MUNCHIES,
          _UNSPLASH.format("1599490659213-e2b9527bd087"), "200g", 9, 40, 4.5),
    _item("Pringles Original", "Stackable potato crisps", 150, 170, _MUNCHIES,
          _UNSPLASH.format("1621939514649-280e2ee25f60"), "107g", 12, 30, 4.4),
    _item("Bingo Mad Angles", "Uniquely shaped tangy chips", 20, 20, _MUNCHIES,
          _UNSPLASH.format("1566478989037-eec170784d0b"), "52g", 0, 65, 4.1),
    _item("Coca Cola", "Refreshing cola drink", 40, 45, _DRINKS, _PEXELS.format(2983100), "750ml", 11, 60, 4.3),
    _item("Pepsi", "Bold cola taste", 40, 45, _DRINKS, _PEXELS.format(4057659), "750ml", 11, 55, 4.2),
    _item("Tropicana Orange", "100% orange juice", 120, 140, _DRINKS, _PEXELS.format(1337824), "1L", 14, 40, 4.6),
    _item("Real Mixed Fruit", "Delicious mixed fruit juice", 100, 120, _DRINKS,
          _PEXELS.format(1537635), "1L", 17, 45, 4.4),
    _item("Sprite", "Lemon lime flavored drink", 40, 45, _DRINKS, _PEXELS.format(3593923), "750ml", 11, 50, 4.2),
    _item("Britannia Bread", "Soft white bread", 35, 40, _BAKERY, _PEXELS.format(1775043), "400g", 13, 80, 4.1),
    _item("Parle-G Biscuits", "Classic glucose biscuits", 20, 20, _BAKERY, _PEXELS.format(890577), "200g", 0, 100, 4.5),
    _item("Good Day Cookies", "Butter cookies", 30, 35, _BAKERY, _PEXELS.format(230325), "150g", 14, 75, 4.3),
    _item("Oreo Biscuits", "Cream filled cookies", 40, 45, _BAKERY, _PEXELS.format(1854652), "120g", 11, 60, 4.6),
    _item("Cake Rusk", "Crunchy tea time snack", 50, 60, _BAKERY, _PEXELS.format(298218), "300g", 17, 40, 4.2),
    _item("Tata Tea Gold", "Premium black tea", 150, 180, _TEA,
          _UNSPLASH.format("1564890369478-c89ca6d9cde9"), "250g", 17, 50, 4.5),
    _item("Nescafe Classic", "Instant coffee", 200, 220, _TEA,
          _UNSPLASH.format("1511920170033-f8396924c348"), "100g", 9, 45, 4.6),
    _item("Green Tea", "Healthy herbal tea", 180, 200, _TEA,
          _UNSPLASH.format("1564890369478-c89ca6d9cde9"), "100 bags", 10, 30, 4.7),
    _item("Horlicks", "Health drink for all ages", 250, 280, _TEA,
          _UNSPLASH.format("1517487881594-2787fef5ebf7"), "500g", 11, 35, 4.4),
    _item("Bournvita", "Chocolate health drink", 240, 270, _TEA,
          _UNSPLASH.format("1517487881594-2787fef5ebf7"), "500g", 11, 40, 4.5),
    _item("Dairy Milk Chocolate", "Smooth milk chocolate", 80, 90, _SWEET,
          _UNSPLASH.format("1511381939415-e44015466834"), "150g", 11, 70, 4.8),
    _item("KitKat", "Crispy wafer chocolate", 40, 45, _SWEET,
          _UNSPLASH.format("1582176604856-e824b4736522"), "37g", 11, 80, 4.6),
    _item("Chocolate Cake", "Rich chocolate sponge cake", 120, 150, _SWEET,
          _UNSPLASH.format("1578985545062-69928b1d9587"), "500g", 20, 25, 4.7),
    _item("Gulab Jamun", "Traditional Indian sweet", 100, 120, _SWEET,
          _UNSPLASH.format("1626132647523-66f5bf380027"), "1kg", 17, 20, 4.5),
    _item("Ice Cream Tub", "Vanilla ice cream", 180, 200, _SWEET,
          _UNSPLASH.format("1497034825429-c343d7c6a68f"), "1L", 10, 30, 4.6),
]


@catalogue.command(part_of="Product")
class SeedCatalogue:
    """Replace the whole catalogue with the demo products."""

    requested_by: Identifier()


@catalogue.command_handler(part_of=Product)
class SeedCatalogueHandler:
    @handle(SeedCatalogue)
    def seed_catalogue(self, command):
        repo = current_domain.repository_for(Product)
        for product in repo.all_products():
            repo._dao.delete(product)

        for data in DEMO_PRODUCTS:
            repo.add(Product.create(**data))

        logger.info("Seeded demo catalogue", count=len(DEMO_PRODUCTS), requested_by=command.requested_by)
        return len(DEMO_PRODUCTS)
