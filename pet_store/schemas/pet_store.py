"""
Transfer objects for the pet store API.

These are the shapes that cross the HTTP boundary.  A ``PetStoreData``
is a flat view of a persisted store: its scalar fields plus two
unordered collections of child transfer objects.  Child transfer
objects convert back into bare records (no identity, no owner) which
the service layer then attaches and persists.
"""

from typing import List, Optional
from sqlmodel import Field, SQLModel

from ..models import Customer, Employee, PetStore


class PetStoreEmployee(SQLModel):
    id: Optional[int] = None
    employee_name: str

    @classmethod
    def from_employee(cls, employee: Employee) -> "PetStoreEmployee":
        return cls(id=employee.id, employee_name=employee.employee_name)

    def to_employee(self) -> Employee:
        """Return a new, unsaved employee carrying this object's fields."""
        return Employee(employee_name=self.employee_name)

    def copy_to(self, employee: Employee) -> Employee:
        employee.employee_name = self.employee_name
        return employee


class PetStoreCustomer(SQLModel):
    id: Optional[int] = None
    customer_name: str
    customer_email: Optional[str] = None

    @classmethod
    def from_customer(cls, customer: Customer) -> "PetStoreCustomer":
        return cls(
            id=customer.id,
            customer_name=customer.customer_name,
            customer_email=customer.customer_email,
        )

    def to_customer(self) -> Customer:
        """Return a new, unsaved customer carrying this object's fields."""
        return Customer(customer_name=self.customer_name, customer_email=self.customer_email)

    def copy_to(self, customer: Customer) -> Customer:
        customer.customer_name = self.customer_name
        customer.customer_email = self.customer_email
        return customer


class PetStoreData(SQLModel):
    id: Optional[int] = None
    store_name: str
    employees: List[PetStoreEmployee] = Field(default_factory=list)
    customers: List[PetStoreCustomer] = Field(default_factory=list)

    @classmethod
    def from_pet_store(cls, pet_store: PetStore) -> "PetStoreData":
        return cls(
            id=pet_store.id,
            store_name=pet_store.store_name,
            employees=[PetStoreEmployee.from_employee(e) for e in pet_store.employees],
            customers=[PetStoreCustomer.from_customer(c) for c in pet_store.customers],
        )

    def summary(self) -> "PetStoreData":
        """Copy of this store with both child collections stripped."""
        return PetStoreData(id=self.id, store_name=self.store_name)

    def copy_to(self, pet_store: PetStore) -> PetStore:
        pet_store.store_name = self.store_name
        return pet_store
