# app/models/employee.py
from typing import Optional
from pydantic import BaseModel

class EmployeeModel(BaseModel):
    id: int
    name: str
    gender: Optional[str] = None
    city: Optional[str] = None
    age: Optional[int] = None
    department: Optional[str] = None

    class Config:
        validate_assignment = True
