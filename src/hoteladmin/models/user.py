from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict


@dataclass
class User:
    """Staff account as returned by the `/staffs` collection."""

    id: str
    username: str
    email: str = field(default="")
    password: str = field(default="")

    ROLE_ADMIN: ClassVar[str] = "admin"
    ROLE_STAFF: ClassVar[str] = "staff"

    role: str = field(default=ROLE_STAFF)

    def is_admin(self) -> bool:
        return self.role == self.ROLE_ADMIN

    def is_staff(self) -> bool:
        return self.role == self.ROLE_STAFF

    def to_dict(self, include_password: bool = True) -> Dict[str, Any]:
        data = self.__dict__.copy()
        if not include_password:
            data.pop("password", None)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> User:
        data = data.copy()
        # json-server ids can be numeric
        if "id" in data and data["id"] is not None:
            data["id"] = str(data["id"])

        field_names = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in field_names}

        return cls(**filtered_data)
