from typing import Any

from pydantic import BaseModel

from linkboard.domain.entities import Direction, Link


class LinkResponse(BaseModel):
    id: str
    name: str
    url: str
    order_index: int
    page_id: str

    @classmethod
    def from_link(cls, link: Link) -> "LinkResponse":
        return cls(**link.model_dump())


class LinkListResponse(BaseModel):
    page_id: str | None
    items: list[LinkResponse]
    total: int


class TableResponse(BaseModel):
    markup: str
    clear_all_visible: bool


class StatusResponse(BaseModel):
    message: str
    is_error: bool
    displayed: bool
    opacity: float
    action_in_progress: bool


class LinkCreateRequest(BaseModel):
    name: str
    url: str


class LinkUpdateRequest(BaseModel):
    name: str
    url: str
    page_id: str | None = None


class MoveRequest(BaseModel):
    direction: Direction


class PageSelectRequest(BaseModel):
    page_id: str | None


class DispatchRequest(BaseModel):
    role: str
    link_id: str | None = None
    data: dict[str, Any] = {}


class ErrorDetail(BaseModel):
    code: str
    message: str
    field: str | None = None


class ActionResponse(BaseModel):
    action: str | None
    kind: str
    message: str | None = None
    errors: list[ErrorDetail] = []
