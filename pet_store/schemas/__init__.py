from .pet_store import PetStoreCustomer, PetStoreData, PetStoreEmployee

__all__ = ["PetStoreData", "PetStoreEmployee", "PetStoreCustomer"]
