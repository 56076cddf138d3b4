from .pet_store import router as pet_store_router

__all__ = ["pet_store_router"]
