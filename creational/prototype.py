from datetime import date
from typing import List

from pydantic import BaseModel


class IdInfo(BaseModel):
    id_number: int


class Person(BaseModel):
    name: str
    age: int
    birth_date: date
    id: IdInfo

    def shallow_copy(self) -> "Person":
        """Copy the fields, but share nested models with the original.

        Reassigning a field on the copy is safe; mutating copy.id changes the original's id too.
        """
        return self.model_copy()

    def deep_copy(self) -> "Person":
        """Copy everything, nested models included. Nothing is shared with the original."""
        return self.model_copy(deep=True)


def display_values(p: Person) -> List[str]:
    return [
        f"Name: {p.name}, Age: {p.age}, BirthDate: {p.birth_date:%m/%d/%y}",
        f"ID#: {p.id.id_number}",
    ]
