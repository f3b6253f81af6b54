# app/store.py
import logging
import threading
from typing import Iterable, List, Optional

from app.exceptions import EmployeeNotFoundError, InvalidEmployeeError
from app.models.employee import EmployeeModel
from app.schemas.employee import EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYEES = [
    {"id": 1, "name": "John Doe", "gender": "Male", "city": "New York", "age": 30, "department": "HR"},
    {"id": 2, "name": "Jane Smith", "gender": "Female", "city": "Los Angeles", "age": 25, "department": "Finance"},
    {"id": 3, "name": "Mike Johnson", "gender": "Male", "city": "Chicago", "age": 40, "department": "IT"},
]


class EmployeeStore:
    """In-memory collection of employee records.

    All access goes through a single lock. Records handed to callers are
    copies, so the collection only changes through create/update/delete.
    Ids come from a counter that only moves forward and are never reused
    after a delete.
    """

    def __init__(self, employees: Optional[Iterable[EmployeeModel]] = None) -> None:
        self._lock = threading.Lock()
        self._employees: List[EmployeeModel] = []
        self._next_id = 1
        if employees:
            self.load(employees)

    def __len__(self) -> int:
        with self._lock:
            return len(self._employees)

    def load(self, employees: Iterable[EmployeeModel], only_if_empty: bool = False) -> bool:
        """Add existing records, keeping their ids.

        Nothing is added if any id is duplicated, or if ``only_if_empty`` is
        set and the store already has records. Returns whether records were
        added.
        """
        records = [employee.model_copy() for employee in employees]
        with self._lock:
            if only_if_empty and self._employees:
                return False

            seen = {e.id for e in self._employees}
            for employee in records:
                if employee.id in seen:
                    raise ValueError(f"Duplicate employee ID {employee.id}")
                seen.add(employee.id)

            self._employees.extend(records)
            if records:
                self._next_id = max(self._next_id, max(e.id for e in records) + 1)
            return True

    def _find(self, employee_id: int) -> Optional[EmployeeModel]:
        return next((e for e in self._employees if e.id == employee_id), None)

    def list(self) -> List[EmployeeModel]:
        with self._lock:
            return [e.model_copy() for e in self._employees]

    def get(self, employee_id: int) -> EmployeeModel:
        with self._lock:
            employee = self._find(employee_id)
            if employee is None:
                raise EmployeeNotFoundError(employee_id)
            return employee.model_copy()

    def create(self, candidate: Optional[EmployeeCreate]) -> EmployeeModel:
        if candidate is None:
            raise InvalidEmployeeError("Request body is missing")
        if not candidate.name:
            raise InvalidEmployeeError("Name is required")

        with self._lock:
            employee = EmployeeModel(
                id=self._next_id,
                name=candidate.name,
                gender=candidate.gender,
                city=candidate.city,
                age=candidate.age,
                department=candidate.department,
            )
            self._next_id += 1
            self._employees.append(employee)
            logger.info("Created employee %d", employee.id)
            return employee.model_copy()

    def update(self, employee_id: int, candidate: Optional[EmployeeUpdate]) -> None:
        if candidate is None:
            raise InvalidEmployeeError("Request body is missing")
        if candidate.id != employee_id:
            raise InvalidEmployeeError(f"Body ID {candidate.id} does not match path ID {employee_id}")
        if not candidate.name:
            raise InvalidEmployeeError("Name is required")

        with self._lock:
            existing = self._find(employee_id)
            if existing is None:
                raise EmployeeNotFoundError(employee_id)

            existing.name = candidate.name
            existing.gender = candidate.gender
            existing.city = candidate.city
            existing.age = candidate.age
            existing.department = candidate.department
            logger.info("Updated employee %d", employee_id)

    def delete(self, employee_id: int) -> None:
        with self._lock:
            employee = self._find(employee_id)
            if employee is None:
                raise EmployeeNotFoundError(employee_id)
            self._employees = [e for e in self._employees if e.id != employee_id]
            logger.info("Deleted employee %d", employee_id)


store = EmployeeStore()


def get_store() -> EmployeeStore:
    return store


def insert_sample_data(target: Optional[EmployeeStore] = None) -> bool:
    """Seed the store with the sample employees unless it already has data."""
    target = target if target is not None else store
    if not target.load((EmployeeModel(**data) for data in SAMPLE_EMPLOYEES), only_if_empty=True):
        logger.info("Sample data already exists. Skipping insertion.")
        return False

    logger.info("Inserted %d sample employees", len(SAMPLE_EMPLOYEES))
    return True
