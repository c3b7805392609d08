"""
StockStar Master Data Models
Sites, items and the brand / model catalogues items refer to
"""
from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from stockstar.core.database import Base


class Brand(Base):
    """Brand catalogue entry"""
    __tablename__ = "brands"

    id = Column(Integer, primary_key=True, autoincrement=True, doc="Brand ID")
    name = Column(String(100), unique=True, nullable=False, doc="Brand name")


class ItemModel(Base):
    """Model catalogue entry (stored in the "models" table)"""
    __tablename__ = "models"

    id = Column(Integer, primary_key=True, autoincrement=True, doc="Model ID")
    name = Column(String(100), unique=True, nullable=False, doc="Model name")


class Item(Base):
    """Stock-keeping item"""
    __tablename__ = "items"

    id = Column(Integer, primary_key=True, autoincrement=True, doc="Item ID")
    code = Column(String(50), unique=True, nullable=False, doc="Item code")
    name = Column(String(200), nullable=False, doc="Item name")
    brand_id = Column(Integer, ForeignKey("brands.id"), nullable=True, doc="Brand ID")
    model_id = Column(Integer, ForeignKey("models.id"), nullable=True, doc="Model ID")
    is_active = Column(Boolean, nullable=False, default=True, doc="Active item flag")

    # Relationships
    brand = relationship("Brand")
    model = relationship("ItemModel")


class Site(Base):
    """Physical or logical stock location (warehouse, job site)"""
    __tablename__ = "sites"

    id = Column(Integer, primary_key=True, autoincrement=True, doc="Site ID")
    code = Column(String(50), unique=True, nullable=False, doc="Site code")
    name = Column(String(200), nullable=False, doc="Site name")
    address = Column(Text, nullable=True, doc="Site address")
    type = Column(String(50), nullable=False, doc="Site category, e.g. Warehouse or Site")
    is_active = Column(Boolean, nullable=False, default=True, doc="Active site flag")
