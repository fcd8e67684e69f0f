"""Product image application service.

Manages product galleries: capacity limits, display order assignment and
batch reordering.
"""

from typing import Any, Mapping

import structlog

from app.domain.entities import (
    MAX_IMAGES_PER_PRODUCT,
    MIN_IMAGES_PER_PRODUCT,
    ProductImage,
    utc_now,
)
from app.domain.exceptions import BusinessRuleError, NotFoundError
from app.infrastructure.store import CatalogStores, get_catalog_stores
from app.schemas import (
    ProductImageCreateRequest,
    ProductImageReorderRequest,
    ProductImageUpdateRequest,
    validate_input,
)

logger = structlog.get_logger()


class ProductImageService:
    """Service for product gallery operations."""

    def __init__(self, stores: CatalogStores) -> None:
        """Initialize service with the catalog stores.

        Args:
            stores: Catalog stores.
        """
        self.stores = stores

    def _images_of(self, product_id: int) -> list[ProductImage]:
        return [img for img in self.stores.images.get_all() if img.product_id == product_id]

    def _require_product(self, product_id: int) -> None:
        if not self.stores.products.exists(product_id):
            raise NotFoundError("Product not found")

    def _require_image(self, image_id: int) -> ProductImage:
        image = self.stores.images.get_by_id(image_id)
        if image is None:
            raise NotFoundError("Product image not found")
        return image

    def list_images(self, product_id: int) -> list[ProductImage]:
        """Images of a product by ascending display order.

        Raises:
            NotFoundError: If the product does not exist.
        """
        self._require_product(product_id)
        return sorted(self._images_of(product_id), key=lambda img: img.display_order)

    def get_image(self, image_id: int) -> ProductImage:
        """Get image by ID.

        Raises:
            NotFoundError: If the image does not exist.
        """
        return self._require_image(image_id)

    def create_image(
        self,
        product_id: int,
        data: ProductImageCreateRequest | Mapping[str, Any],
    ) -> ProductImage:
        """Add an image to a product gallery.

        Without an explicit display order the image goes after the current
        last one (or first, in an empty gallery).

        Args:
            product_id: Owning product.
            data: Image fields.

        Returns:
            Created image.

        Raises:
            ValidationError: If input is invalid.
            NotFoundError: If the product does not exist.
            BusinessRuleError: If the gallery is full.
        """
        params = validate_input(ProductImageCreateRequest, data)
        self._require_product(product_id)

        existing = self._images_of(product_id)
        if len(existing) >= MAX_IMAGES_PER_PRODUCT:
            logger.warning(
                "Gallery full",
                product_id=product_id,
                image_count=len(existing),
            )
            raise BusinessRuleError(
                f"Maximum of {MAX_IMAGES_PER_PRODUCT} images per product"
            )

        display_order = params.display_order
        if display_order is None:
            display_order = max((img.display_order for img in existing), default=0) + 1

        now = utc_now()
        image = self.stores.images.add(
            ProductImage(
                id=self.stores.images.next_id(),
                product_id=product_id,
                image_url=params.image_url,
                thumbnail_url=params.thumbnail_url,
                high_res_url=params.high_res_url,
                display_order=display_order,
                caption=params.caption,
                alt_text=params.alt_text,
                view_angle=params.view_angle,
                date_created=now,
                date_modified=now,
            )
        )

        logger.info(
            "Product image created",
            image_id=image.id,
            product_id=product_id,
            display_order=display_order,
        )
        return image

    def update_image(
        self,
        image_id: int,
        data: ProductImageUpdateRequest | Mapping[str, Any],
    ) -> ProductImage:
        """Replace the editable fields of an image.

        Raises:
            ValidationError: If input is invalid.
            NotFoundError: If the image does not exist.
        """
        params = validate_input(ProductImageUpdateRequest, data)
        self._require_image(image_id)

        updated = self.stores.images.update(
            image_id,
            image_url=params.image_url,
            thumbnail_url=params.thumbnail_url,
            high_res_url=params.high_res_url,
            display_order=params.display_order,
            caption=params.caption,
            alt_text=params.alt_text,
            view_angle=params.view_angle,
            date_modified=utc_now(),
        )
        logger.info("Product image updated", image_id=image_id)
        return updated

    def delete_image(self, image_id: int) -> None:
        """Delete an image unless it is the last one of its product.

        Raises:
            NotFoundError: If the image does not exist.
            BusinessRuleError: If the gallery would become empty.
        """
        image = self._require_image(image_id)

        if len(self._images_of(image.product_id)) <= MIN_IMAGES_PER_PRODUCT:
            raise BusinessRuleError("Cannot delete the last image of a product")

        self.stores.images.delete(image_id)
        logger.info("Product image deleted", image_id=image_id, product_id=image.product_id)

    def reorder_images(
        self,
        product_id: int,
        data: ProductImageReorderRequest | Mapping[str, Any],
    ) -> None:
        """Assign new display orders to images of one product.

        Every image is checked before any is changed, so an invalid entry
        leaves the whole gallery untouched.

        Args:
            product_id: Owning product.
            data: ``imageOrder`` list of ``{id, displayOrder}``.

        Raises:
            ValidationError: If input is invalid.
            NotFoundError: If the product does not exist.
            BusinessRuleError: If an image belongs to another product.
        """
        params = validate_input(ProductImageReorderRequest, data)
        self._require_product(product_id)

        for item in params.image_order:
            image = self.stores.images.get_by_id(item.id)
            if image is None or image.product_id != product_id:
                raise BusinessRuleError(
                    f"Image {item.id} does not belong to product {product_id}"
                )

        for item in params.image_order:
            self.stores.images.update(
                item.id,
                display_order=item.display_order,
                date_modified=utc_now(),
            )

        logger.info(
            "Product images reordered",
            product_id=product_id,
            image_count=len(params.image_order),
        )


def get_product_image_service() -> ProductImageService:
    """Get ProductImageService bound to the process-wide stores."""
    return ProductImageService(get_catalog_stores())
