from .base import TimestampMixin
from .pet_store import PetStore, PetStoreCustomerLink
from .employee import Employee
from .customer import Customer

__all__ = ["TimestampMixin", "PetStore", "PetStoreCustomerLink", "Employee", "Customer"]
