"""User model definitions."""

from sqlalchemy import Column, Integer, String
from softjobs.database import Base


class User(Base):
    """A registered account; one row per email."""
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column("password", String, nullable=False)
    rol = Column(String, nullable=False)
    lenguage = Column(String, nullable=False)
