from __future__ import annotations

import time
import uuid
from typing import Any, Literal, Mapping, get_args

from pydantic import BaseModel, ConfigDict, Field, JsonValue, PrivateAttr, field_validator

Resource = Literal["projects", "certificates", "partners", "signals"]
RESOURCES: tuple[str, ...] = get_args(Resource)


class Item(BaseModel):
    """
    One entry of a resource list. Only ``id`` is known; every other key is an
    opaque JSON value supplied by the admin UI and kept verbatim.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)
    __pydantic_extra__: dict[str, JsonValue]

    # Older data used numeric timestamps as ids.
    id: str

    @classmethod
    def from_fields(cls, item_id: str, fields: Mapping[str, Any]) -> "Item":
        body = {k: v for k, v in fields.items() if k != "id"}
        return cls.model_validate({"id": item_id, **body})


class AdminRecord(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)
    __pydantic_extra__: dict[str, JsonValue]

    password: str


class PortfolioDocument(BaseModel):
    """
    Mirrors the persisted document exactly:
      {
        "projects": [...], "certificates": [...], "partners": [...], "signals": [...],
        "admin": { "password": "..." }
      }

    Unknown top-level keys are kept as they are and written back unchanged.
    """

    model_config = ConfigDict(extra="allow")
    __pydantic_extra__: dict[str, JsonValue]

    projects: list[Item] = Field(default_factory=list)
    certificates: list[Item] = Field(default_factory=list)
    partners: list[Item] = Field(default_factory=list)
    signals: list[Item] = Field(default_factory=list)
    admin: AdminRecord

    # Set when read() fell back to defaults because stored data could not be
    # loaded; such a document must not be written over the stored one.
    _fallback: bool = PrivateAttr(default=False)

    @field_validator(*RESOURCES, mode="before")
    @classmethod
    def null_list_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def is_fallback(self) -> bool:
        return self._fallback

    @classmethod
    def default(cls, admin_password: str) -> "PortfolioDocument":
        return cls(admin=AdminRecord(password=admin_password))

    @classmethod
    def fallback(cls, admin_password: str) -> "PortfolioDocument":
        doc = cls.default(admin_password)
        doc._fallback = True
        return doc

    @classmethod
    def from_disk_doc(cls, doc: Mapping[str, Any], *, admin_password: str) -> "PortfolioDocument":
        # Older documents may predate a resource list or the admin block.
        data = dict(doc)
        if data.get("admin") is None:
            data["admin"] = {"password": admin_password}
        return cls.model_validate(data)

    def to_disk_doc(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_public_doc(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude={"admin"})

    def items(self, resource: str) -> list[Item]:
        if resource not in RESOURCES:
            raise KeyError(resource)
        return getattr(self, resource)

    def set_items(self, resource: str, items: list[Item]) -> None:
        if resource not in RESOURCES:
            raise KeyError(resource)
        setattr(self, resource, items)


def new_item_id() -> str:
    """
    Millisecond timestamp plus a random suffix: sorts by creation time and
    does not collide when two creates land in the same millisecond.
    """
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"
