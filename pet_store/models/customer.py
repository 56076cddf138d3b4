from typing import List, Optional
from sqlmodel import Field, Relationship
from .base import TimestampMixin
from .pet_store import PetStoreCustomerLink


class Customer(TimestampMixin, table=True):
    __tablename__ = "customer"

    id: Optional[int] = Field(default=None, primary_key=True)
    customer_name: str
    customer_email: Optional[str] = Field(default=None, index=True)

    # Relationships
    pet_stores: List["PetStore"] = Relationship(back_populates="customers", link_model=PetStoreCustomerLink)
