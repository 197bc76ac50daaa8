"""Catalog maintenance — popularity tracking and product removal."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import logger, storefront


@storefront.command(part_of="Product")
class IncrementPopularity:
    product_id = Identifier(required=True)
    increment_by = Integer(default=1, min_value=1)


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(IncrementPopularity)
    def increment_popularity(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.increase_popularity(command.increment_by or 1)
        repo.add(product)
        return product.popularity_score

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
        logger.info("product_deleted", product_id=str(command.product_id), sku=product.sku)
