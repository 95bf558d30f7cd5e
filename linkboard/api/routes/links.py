"""Routes exposing the link table and its actions."""

from fastapi import APIRouter, Depends, HTTPException

from linkboard.api.deps import PageSession, get_engine, get_session
from linkboard.api.schemas import (
    ActionResponse,
    DispatchRequest,
    ErrorDetail,
    LinkCreateRequest,
    LinkListResponse,
    LinkResponse,
    LinkUpdateRequest,
    MoveRequest,
    PageSelectRequest,
    StatusResponse,
    TableResponse,
)
from linkboard.components.actions import ActionOutcome
from linkboard.domain.entities import UiElement
from linkboard.engine import SyncEngine

router = APIRouter()

STATUS_CODES = {
    "rejected": 409,
    "invalid": 400,
    "failed": 502,
    "not_found": 404,
}


def to_response(outcome: ActionOutcome) -> ActionResponse:
    """Convert an outcome, raising for the kinds that map to an HTTP error."""
    response = ActionResponse(
        action=outcome.action,
        kind=outcome.kind,
        message=outcome.message,
        errors=[
            ErrorDetail(code=e.code, message=e.message, field=e.field) for e in outcome.errors
        ],
    )
    status_code = STATUS_CODES.get(outcome.kind)
    if status_code is not None:
        raise HTTPException(status_code=status_code, detail=response.model_dump())
    return response


# --- Views ---


@router.get("", response_model=LinkListResponse)
async def list_links(engine: SyncEngine = Depends(get_engine)) -> LinkListResponse:
    """Current snapshot in display order."""
    links = engine.snapshot.sorted()
    return LinkListResponse(
        page_id=engine.coordinator.active_page_id(),
        items=[LinkResponse.from_link(link) for link in links],
        total=len(links),
    )


@router.get("/table", response_model=TableResponse)
async def get_table(session: PageSession = Depends(get_session)) -> TableResponse:
    """Rendered table body; a render waiting for its frame is flushed first."""
    session.engine.renderer.flush()
    return TableResponse(
        markup=session.table.markup,
        clear_all_visible=session.table.clear_all_visible,
    )


@router.get("/status", response_model=StatusResponse)
async def get_status(session: PageSession = Depends(get_session)) -> StatusResponse:
    state = session.banner.state
    return StatusResponse(**state.model_dump(), action_in_progress=session.engine.gate.held)


@router.post("/reload", response_model=ActionResponse)
async def reload_links(engine: SyncEngine = Depends(get_engine)) -> ActionResponse:
    loaded = await engine.coordinator.load_active_page()
    return ActionResponse(action=None, kind="ok" if loaded else "ignored")


@router.post("/page", response_model=ActionResponse)
async def select_page(
    data: PageSelectRequest,
    session: PageSession = Depends(get_session),
) -> ActionResponse:
    """Switch the active page and load its links."""
    session.pages.select(data.page_id)
    loaded = await session.engine.coordinator.load_active_page()
    return ActionResponse(action=None, kind="ok" if loaded else "ignored")


# --- Actions ---


@router.post("", response_model=ActionResponse, status_code=201)
async def create_link(
    data: LinkCreateRequest,
    engine: SyncEngine = Depends(get_engine),
) -> ActionResponse:
    return to_response(await engine.actions.add(data.name, data.url))


@router.put("/{link_id}", response_model=ActionResponse)
async def update_link(
    link_id: str,
    data: LinkUpdateRequest,
    session: PageSession = Depends(get_session),
) -> ActionResponse:
    """Open the edit modal on the link, apply the changes and save."""
    actions = session.engine.actions
    opened = await actions.edit(link_id)
    if not opened.ok:
        return to_response(opened)

    session.modal.fill(name=data.name, url=data.url, page_id=data.page_id)
    return to_response(await actions.save_edit())


@router.post("/{link_id}/move", response_model=ActionResponse)
async def move_link(
    link_id: str,
    data: MoveRequest,
    engine: SyncEngine = Depends(get_engine),
) -> ActionResponse:
    return to_response(await engine.actions.move(link_id, data.direction))


@router.delete("/{link_id}", response_model=ActionResponse)
async def delete_link(link_id: str, engine: SyncEngine = Depends(get_engine)) -> ActionResponse:
    return to_response(await engine.actions.delete(link_id))


@router.delete("", response_model=ActionResponse)
async def clear_links(engine: SyncEngine = Depends(get_engine)) -> ActionResponse:
    return to_response(await engine.actions.clear_all())


@router.post("/dispatch", response_model=ActionResponse)
async def dispatch(
    data: DispatchRequest,
    engine: SyncEngine = Depends(get_engine),
) -> ActionResponse:
    """Delegated click: the element's role decides which action runs."""
    element = UiElement(role=data.role, link_id=data.link_id, data=data.data)
    return to_response(await engine.actions.dispatch(element))
