from typing import List, Optional
from sqlmodel import Field, SQLModel, Relationship
from .base import TimestampMixin


class PetStoreCustomerLink(SQLModel, table=True):
    __tablename__ = "pet_store_customer"

    pet_store_id: int = Field(foreign_key="pet_store.id", primary_key=True)
    customer_id: int = Field(foreign_key="customer.id", primary_key=True)


class PetStore(TimestampMixin, table=True):
    __tablename__ = "pet_store"

    id: Optional[int] = Field(default=None, primary_key=True)
    store_name: str = Field(index=True)

    # Relationships
    # Employees are owned: removing one from the collection deletes it
    employees: List["Employee"] = Relationship(
        back_populates="pet_store",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
    # Customers are shared: only the link rows go away
    customers: List["Customer"] = Relationship(back_populates="pet_stores", link_model=PetStoreCustomerLink)
