"""Errors raised by the service layer.

The API layer maps ``NotFound`` to 404 and ``OwnershipMismatch`` to 400.
"""


class PetStoreError(Exception):
    """Base class for pet store domain errors."""


class NotFound(PetStoreError):
    entity = "Record"

    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(f"{self.entity} with ID={entity_id} not found.")


class PetStoreNotFound(NotFound):
    entity = "Pet store"


class EmployeeNotFound(NotFound):
    entity = "Employee"


class CustomerNotFound(NotFound):
    entity = "Customer"


class OwnershipMismatch(PetStoreError):
    """A child record exists but is not linked to the requested store."""

    def __init__(self, entity: str, entity_id: int, pet_store_id: int):
        self.entity = entity
        self.entity_id = entity_id
        self.pet_store_id = pet_store_id
        super().__init__(
            f"{entity} with ID={entity_id} does not belong to pet store with ID={pet_store_id}."
        )
