from typing import Optional
from sqlmodel import Field, Relationship
from .base import TimestampMixin


class Employee(TimestampMixin, table=True):
    __tablename__ = "employee"

    id: Optional[int] = Field(default=None, primary_key=True)
    employee_name: str
    pet_store_id: Optional[int] = Field(default=None, foreign_key="pet_store.id", nullable=False, index=True)

    # Relationships
    pet_store: Optional["PetStore"] = Relationship(back_populates="employees")
