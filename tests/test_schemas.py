from pet_store.models import Customer, Employee, PetStore
from pet_store.schemas import PetStoreCustomer, PetStoreData, PetStoreEmployee


def _pet_store() -> PetStore:
    pet_store = PetStore(id=3, store_name="Paws")
    pet_store.employees = [Employee(id=1, employee_name="Alice")]
    pet_store.customers = [Customer(id=2, customer_name="Bob", customer_email="bob@example.com")]
    return pet_store


def test_from_pet_store_flattens_children():
    data = PetStoreData.from_pet_store(_pet_store())

    assert data.id == 3
    assert data.store_name == "Paws"
    assert data.employees == [PetStoreEmployee(id=1, employee_name="Alice")]
    assert data.customers == [PetStoreCustomer(id=2, customer_name="Bob", customer_email="bob@example.com")]


def test_summary_strips_children():
    data = PetStoreData.from_pet_store(_pet_store())

    summary = data.summary()

    assert summary == PetStoreData(id=3, store_name="Paws")
    assert len(data.employees) == 1


def test_to_records_have_no_identity_or_owner():
    employee = PetStoreEmployee(id=8, employee_name="Alice").to_employee()
    customer = PetStoreCustomer(id=9, customer_name="Bob").to_customer()

    assert employee.id is None
    assert employee.pet_store_id is None
    assert employee.employee_name == "Alice"
    assert customer.id is None
    assert customer.customer_email is None


def test_copy_to_overwrites_scalars_only():
    employee = Employee(id=4, employee_name="Alice", pet_store_id=1)

    PetStoreEmployee(id=99, employee_name="Alicia").copy_to(employee)

    assert (employee.id, employee.employee_name, employee.pet_store_id) == (4, "Alicia", 1)
