from . import pet_store_service

__all__ = ["pet_store_service"]
