"""AddProduct — admin command that puts a new product into the catalog."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product, ProductAvailability
from storefront.domain import logger, storefront


@storefront.command(part_of="Product")
class AddProduct:
    title = String(required=True, max_length=255)
    brand = String(required=True, max_length=100)
    category = String(required=True, max_length=100)
    sku = String(required=True, max_length=64)
    price = Float(required=True, min_value=0.0)
    original_price = Float(min_value=0.0)
    description = Text(required=True)
    main_image = String(required=True, max_length=1024)
    quantity = Integer(required=True, min_value=1)
    availability = String(choices=ProductAvailability)
    thumbnails = Text()  # JSON array of image URLs


@storefront.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        repo = current_domain.repository_for(Product)

        if repo.find_by_sku(command.sku) is not None:
            raise ValidationError({"sku": ["SKU must be unique"]})

        product = Product.create(
            title=command.title,
            brand=command.brand,
            category=command.category,
            sku=command.sku,
            price=command.price,
            original_price=command.original_price,
            description=command.description,
            main_image=command.main_image,
            quantity=command.quantity,
            availability=command.availability,
            thumbnails=json.loads(command.thumbnails) if command.thumbnails else [],
        )
        repo.add(product)

        logger.info("product_added", product_id=str(product.id), sku=product.sku)
        return str(product.id)
