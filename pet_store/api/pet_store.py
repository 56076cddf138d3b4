from fastapi import APIRouter, Depends, Request, status
from sqlmodel import Session
from typing import Dict, List
import logging

from ..core import limiter, write_rate_limit
from ..database import get_read_session, get_write_session
from ..schemas import PetStoreCustomer, PetStoreData, PetStoreEmployee
from ..services import pet_store_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=PetStoreData)
@limiter.limit(write_rate_limit)
def create_pet_store(
    request: Request,
    pet_store_data: PetStoreData,
    session: Session = Depends(get_write_session)
):
    logger.info("Creating pet store: %s", pet_store_data)
    return pet_store_service.save_pet_store(session, pet_store_data)


@router.post("/{pet_store_id}/employee", response_model=PetStoreEmployee, status_code=status.HTTP_201_CREATED)
@limiter.limit(write_rate_limit)
def add_employee_to_pet_store(
    request: Request,
    pet_store_id: int,
    pet_store_employee: PetStoreEmployee,
    session: Session = Depends(get_write_session)
):
    logger.info("Adding employee to pet store ID=%s: %s", pet_store_id, pet_store_employee)
    return pet_store_service.save_employee(session, pet_store_id, pet_store_employee)


@router.post("/{pet_store_id}/customer", response_model=PetStoreCustomer, status_code=status.HTTP_201_CREATED)
@limiter.limit(write_rate_limit)
def add_customer_to_pet_store(
    request: Request,
    pet_store_id: int,
    pet_store_customer: PetStoreCustomer,
    session: Session = Depends(get_write_session)
):
    logger.info("Adding customer to pet store ID=%s: %s", pet_store_id, pet_store_customer)
    return pet_store_service.save_customer(session, pet_store_id, pet_store_customer)


@router.get("", response_model=List[PetStoreData])
def retrieve_all_pet_stores(session: Session = Depends(get_read_session)):
    logger.info("Retrieving all pet stores")
    return pet_store_service.retrieve_all_pet_stores(session)


@router.get("/{pet_store_id}", response_model=PetStoreData)
def retrieve_pet_store_by_id(
    pet_store_id: int,
    session: Session = Depends(get_read_session)
):
    logger.info("Retrieving pet store with ID=%s", pet_store_id)
    return pet_store_service.retrieve_pet_store_by_id(session, pet_store_id)


@router.delete("/{pet_store_id}", response_model=Dict[str, str])
@limiter.limit(write_rate_limit)
def delete_pet_store_by_id(
    request: Request,
    pet_store_id: int,
    session: Session = Depends(get_write_session)
):
    logger.info("Deleting pet store with ID=%s", pet_store_id)
    pet_store_service.delete_pet_store_by_id(session, pet_store_id)
    return {"message": f"Pet store with ID={pet_store_id} was deleted successfully."}
