# app/models.py
from pydantic import BaseModel
from typing import Union


class Product(BaseModel):
    id: str
    name: str
    description: str
    price: Union[int, float]
    category: str
    inStock: bool


class ErrorOut(BaseModel):
    error: str
