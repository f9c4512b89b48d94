"""
Products API: Product Service
=============================

What:  Business logic for the products resource: validate, run parameterized
       statements, and read back what the store persisted.
How:   Every method receives the request's AsyncSession (drawn from the
       shared pool) and builds SQLAlchemy statements, so every value is sent
       as a bound parameter. Store failures are wrapped in DatabaseError.
Who:   Called by the route handlers in app/routes/products.py.

Write Flow (create / update):
    ┌──────────┐    ┌─────────────┐    ┌──────────┐    ┌───────────┐    ┌────────┐
    │ Candidate│───▶│  Validator  │───▶│  Write   │───▶│ Read back │───▶│ Commit │
    └──────────┘    └─────────────┘    └──────────┘    └───────────┘    └────────┘
                     errors → 400                       no row → 404

    The write and the read-back run in the same session, and therefore the
    same transaction. The read-back bypasses the identity map
    (populate_existing) so the response carries the stored values.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, NotFoundError, ProductsAPIError, ValidationError
from app.models.product import Product
from app.schemas.product import MessageResponse, ProductCandidate, ProductResponse
from app.services.product_validator import validate_product

logger = logging.getLogger(__name__)


def _driver_message(exc: Exception) -> str:
    """The underlying DBAPI error text when SQLAlchemy wrapped one, else str(exc)."""
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc)


class ProductService:
    """
    Stateless operations on the `products` table.

    Responsibilities:
        - list_products(): every row, storage order
        - get_product(): one row or NotFoundError
        - create_product(): validate → insert → read back
        - update_product(): validate → update → read back (NotFoundError when gone)
        - delete_product(): unconditional delete with confirmation message

    Error Handling Strategy:
        ValidationError is raised before any statement runs. NotFoundError
        propagates as-is. Anything else raised while talking to the store is
        logged and re-raised as DatabaseError with the driver's message.
    """

    async def list_products(self, db: AsyncSession) -> List[ProductResponse]:
        """Return every product; an empty table yields an empty list."""
        try:
            result = await db.execute(select(Product))
            products = result.scalars().all()
            return [ProductResponse.model_validate(product) for product in products]
        except Exception as e:
            raise self._database_error("list_products", e)

    async def get_product(self, db: AsyncSession, product_id: int) -> ProductResponse:
        """
        Retrieve a single product by id.

        Raises:
            NotFoundError: No row has this id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            return await self._read_product(db, product_id)
        except NotFoundError:
            raise
        except Exception as e:
            raise self._database_error("get_product", e, product_id=product_id)

    async def create_product(
        self,
        db: AsyncSession,
        candidate: ProductCandidate,
    ) -> ProductResponse:
        """
        Validate and insert a new product, then return the stored row.

        Workflow Steps:
            1. Validate the candidate (ValidationError → 400, nothing written)
            2. Stamp created_at with the server clock (UTC)
            3. INSERT and flush to obtain the store-assigned id
            4. SELECT the row by that id
            5. Commit

        Raises:
            ValidationError: One or more fields missing or malformed
            DatabaseError: Insert, read-back or commit failed
        """
        values = self._validated_values(candidate)

        try:
            product = Product(**values, created_at=datetime.now(timezone.utc))
            db.add(product)
            await db.flush()
            product_id = product.id
            logger.info("Product created: id=%s", product_id)

            created = await self._read_product(db, product_id)
            await db.commit()
            return created

        except NotFoundError:
            # Row vanished between insert and read-back
            raise
        except Exception as e:
            raise self._database_error("create_product", e)

    async def update_product(
        self,
        db: AsyncSession,
        product_id: int,
        candidate: ProductCandidate,
    ) -> ProductResponse:
        """
        Overwrite the five business fields of a product and return the stored row.

        id and created_at are never touched. The read-back decides existence:
        an id with no row raises NotFoundError, the same outcome as get_product.

        Raises:
            ValidationError: One or more fields missing or malformed
            NotFoundError: No row has this id
            DatabaseError: Update, read-back or commit failed
        """
        values = self._validated_values(candidate)

        try:
            await db.execute(
                update(Product)
                .where(Product.id == product_id)
                .values(**values)
            )
            updated = await self._read_product(db, product_id)
            await db.commit()
            logger.info("Product updated: id=%s", product_id)
            return updated

        except NotFoundError:
            logger.info("Update skipped, no product with id=%s", product_id)
            raise
        except Exception as e:
            raise self._database_error("update_product", e, product_id=product_id)

    async def delete_product(self, db: AsyncSession, product_id: int) -> MessageResponse:
        """
        Delete a product by id without checking that it exists.

        Returns the same confirmation whether zero or one row was removed.
        """
        try:
            await db.execute(delete(Product).where(Product.id == product_id))
            await db.commit()
        except Exception as e:
            raise self._database_error("delete_product", e, product_id=product_id)

        logger.info("Product deleted: id=%s", product_id)
        return MessageResponse(message=f"Product with ID {product_id} deleted successfully")

    # ── Helpers ───────────────────────────────────────────────────────────

    def _validated_values(self, candidate: ProductCandidate) -> Dict[str, Any]:
        """Run the validator and return column values ready for binding."""
        result = validate_product(candidate.as_record())
        if result.has_errors:
            raise ValidationError(errors=result.errors)

        return {
            "name": candidate.name,
            "brand": candidate.brand,
            "category": candidate.category,
            "price": float(candidate.price),
            "description": candidate.description,
        }

    async def _read_product(self, db: AsyncSession, product_id: int) -> ProductResponse:
        result = await db.execute(
            select(Product)
            .where(Product.id == product_id)
            .execution_options(populate_existing=True)
        )
        product = result.scalar_one_or_none()
        if product is None:
            raise NotFoundError(resource="product", resource_id=product_id)
        return ProductResponse.model_validate(product)

    def _database_error(self, operation: str, exc: Exception, **context: Any) -> ProductsAPIError:
        if isinstance(exc, ProductsAPIError):
            return exc
        logger.error("Database error in %s: %s", operation, str(exc), exc_info=True)
        return DatabaseError(
            message=_driver_message(exc),
            context={"operation": operation, "error_type": type(exc).__name__, **context},
        )


# ── Singleton Instance ────────────────────────────────────────────────────
product_service = ProductService()
