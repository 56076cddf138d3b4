"""
Service layer for pet stores, their employees and their customers.

Every public function takes an open ``Session``.  Mutating operations
run inside a single ``transaction`` so that a failed lookup or a
database error leaves nothing committed.  Lookups raise the errors in
``core.exceptions``; the API layer turns them into HTTP responses.

Two kinds of child writes exist and they behave differently:

* ``save_pet_store`` replaces a store's employees and customers
  wholesale.  Every child in the payload becomes a new record and any
  child ids in the payload are ignored.
* ``save_employee`` / ``save_customer`` upsert a single child by id,
  checking that an existing child belongs to the store first.
"""

import logging
from typing import List

from sqlmodel import Session, select

from ..core.exceptions import (
    CustomerNotFound,
    EmployeeNotFound,
    OwnershipMismatch,
    PetStoreNotFound,
)
from ..database import transaction
from ..models import Customer, Employee, PetStore
from ..schemas import PetStoreCustomer, PetStoreData, PetStoreEmployee

logger = logging.getLogger(__name__)


def _add_unique(collection: list, item) -> None:
    # relationship collections are lists; membership is by identity
    if not any(existing is item for existing in collection):
        collection.append(item)


# Lookup

# Widest value an INTEGER primary key column can hold
MAX_ID = 2**63 - 1


def _get(session: Session, model, record_id: int):
    if not -MAX_ID - 1 <= record_id <= MAX_ID:
        return None
    return session.get(model, record_id)


def find_pet_store(session: Session, pet_store_id: int) -> PetStore:
    pet_store = _get(session, PetStore, pet_store_id)
    if not pet_store:
        raise PetStoreNotFound(pet_store_id)
    return pet_store


def find_employee(session: Session, pet_store_id: int, employee_id: int) -> Employee:
    """Return the employee, which must work at ``pet_store_id``."""
    employee = _get(session, Employee, employee_id)
    if not employee:
        raise EmployeeNotFound(employee_id)
    if employee.pet_store_id != pet_store_id:
        raise OwnershipMismatch("Employee", employee_id, pet_store_id)
    return employee


def find_customer(session: Session, pet_store_id: int, customer_id: int) -> Customer:
    """Return the customer, which must be linked to ``pet_store_id``."""
    customer = _get(session, Customer, customer_id)
    if not customer:
        raise CustomerNotFound(customer_id)
    if not any(store.id == pet_store_id for store in customer.pet_stores):
        raise OwnershipMismatch("Customer", customer_id, pet_store_id)
    return customer


def _find_or_create_pet_store(session: Session, pet_store_id) -> PetStore:
    if pet_store_id is None:
        return PetStore()
    return find_pet_store(session, pet_store_id)


def _find_or_create_employee(session: Session, pet_store_id: int, employee_id) -> Employee:
    if employee_id is None:
        return Employee()
    return find_employee(session, pet_store_id, employee_id)


def _find_or_create_customer(session: Session, pet_store_id: int, customer_id) -> Customer:
    if customer_id is None:
        return Customer()
    return find_customer(session, pet_store_id, customer_id)


# Reconciliation

def save_pet_store(session: Session, pet_store_data: PetStoreData) -> PetStoreData:
    """Create or overwrite a store, replacing all of its children.

    The store's current employees and customers are discarded and
    rebuilt from ``pet_store_data``.  Discarded employees are deleted;
    discarded customers are only unlinked from this store.
    """
    with transaction(session):
        pet_store = _find_or_create_pet_store(session, pet_store_data.id)
        pet_store_data.copy_to(pet_store)

        pet_store.customers.clear()
        for customer_data in pet_store_data.customers:
            _add_unique(pet_store.customers, customer_data.to_customer())

        pet_store.employees.clear()
        for employee_data in pet_store_data.employees:
            employee = employee_data.to_employee()
            employee.pet_store = pet_store
            _add_unique(pet_store.employees, employee)

        session.add(pet_store)

    session.refresh(pet_store)
    logger.info(
        "Saved pet store %s with %d employees and %d customers",
        pet_store.id, len(pet_store.employees), len(pet_store.customers),
    )
    return PetStoreData.from_pet_store(pet_store)


def save_employee(session: Session, pet_store_id: int, employee_data: PetStoreEmployee) -> PetStoreEmployee:
    with transaction(session):
        pet_store = find_pet_store(session, pet_store_id)
        employee = _find_or_create_employee(session, pet_store_id, employee_data.id)
        employee_data.copy_to(employee)

        employee.pet_store = pet_store
        _add_unique(pet_store.employees, employee)

        session.add(employee)

    session.refresh(employee)
    logger.info("Saved employee %s for pet store %s", employee.id, pet_store_id)
    return PetStoreEmployee.from_employee(employee)


def save_customer(session: Session, pet_store_id: int, customer_data: PetStoreCustomer) -> PetStoreCustomer:
    with transaction(session):
        pet_store = find_pet_store(session, pet_store_id)
        customer = _find_or_create_customer(session, pet_store_id, customer_data.id)
        customer_data.copy_to(customer)

        _add_unique(pet_store.customers, customer)

        session.add(customer)

    session.refresh(customer)
    logger.info("Saved customer %s for pet store %s", customer.id, pet_store_id)
    return PetStoreCustomer.from_customer(customer)


# Queries

def retrieve_all_pet_stores(session: Session) -> List[PetStoreData]:
    """Summaries of every store, without employees or customers."""
    pet_stores = session.exec(select(PetStore).order_by(PetStore.id)).all()
    return [PetStoreData.from_pet_store(pet_store).summary() for pet_store in pet_stores]


def retrieve_pet_store_by_id(session: Session, pet_store_id: int) -> PetStoreData:
    return PetStoreData.from_pet_store(find_pet_store(session, pet_store_id))


def delete_pet_store_by_id(session: Session, pet_store_id: int) -> None:
    """Delete a store and its employees.  Its customers survive."""
    with transaction(session):
        pet_store = find_pet_store(session, pet_store_id)
        session.delete(pet_store)
    logger.info("Deleted pet store %s", pet_store_id)
