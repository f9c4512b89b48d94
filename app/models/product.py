"""
Products API: Product SQLAlchemy Model
======================================

What:  ORM model representing the `products` table.
How:   Inherits from the shared DeclarativeBase in app.database.
Who:   Used by ProductService for every statement, and by the test suite to
       create the schema from metadata.

Columns:
    - id: Integer surrogate key, assigned by the store (autoincrement)
    - name, brand, category, description: Required text
    - price: NUMERIC(10, 2), read back as float so it serializes as a JSON number
    - created_at: Set once by the service at creation time (UTC); never updated
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Product(Base):
    """
    A product row.

    Lifecycle:
        1. Inserted by create (store assigns id, service sets created_at)
        2. Business fields overwritten in place by update
        3. Hard-deleted by delete
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    brand: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(255), nullable=False)

    price: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False),
        nullable=False,
    )

    description: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}', brand='{self.brand}')>"
