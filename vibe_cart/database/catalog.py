"""Default product catalog"""

from ..models.product import Product

# Seeded once into an empty store; ids and prices are part of the client contract
DEFAULT_PRODUCTS: list[Product] = [
    Product(id="p1", name="Bluetooth Headphones", price=1999, image="🎧"),
    Product(id="p2", name="Wireless Mouse", price=699, image="🖱️"),
    Product(id="p3", name="Mechanical Keyboard", price=3499, image="⌨️"),
    Product(id="p4", name="USB-C Cable", price=299, image="🔌"),
    Product(id="p5", name="Portable SSD 500GB", price=4999, image="💾"),
    Product(id="p6", name="Smartwatch", price=5999, image="⌚"),
    Product(id="p7", name="Phone Stand", price=249, image="📱"),
]
