# app/schemas/employee.py
from typing import Optional
from pydantic import BaseModel, Field

class EmployeeBase(BaseModel):
    name: Optional[str] = None
    gender: Optional[str] = None
    city: Optional[str] = None
    age: Optional[int] = None
    department: Optional[str] = None

class EmployeeCreate(EmployeeBase):
    # Ignored on create, the store assigns ids
    id: Optional[int] = Field(default=None, description="Employee ID")

class EmployeeUpdate(EmployeeBase):
    id: Optional[int] = Field(default=None, description="Must match the ID in the path")

class EmployeeOut(BaseModel):
    id: int
    name: str
    gender: Optional[str] = None
    city: Optional[str] = None
    age: Optional[int] = None
    department: Optional[str] = None

    class Config:
        from_attributes = True
