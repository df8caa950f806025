from sqlalchemy import Column, Integer, String, Numeric, DateTime
from sqlalchemy.sql import func
from catalog_server.database import Base


class Product(Base):
    __tablename__ = "products"
    # Ids are never reused, even after the newest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    price = Column(Numeric(18, 2), nullable=False)
    # Assigned by the service layer; the server default only covers raw inserts
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"
