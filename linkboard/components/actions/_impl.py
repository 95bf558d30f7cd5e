"""
LinkActions - user-triggered actions on the link table.

Every mutating action runs inside ActionGate.guard(): a second action while
one is in flight is dropped, and the gate is released on every exit path.
While the gate is held, non-mutating actions (open url, edit) are dropped too.

Mutating action lifecycle:
    Idle -> Mutating -> Settling -> Reloading -> Idle
A remote failure goes straight from Mutating back to Idle with an error
status. Validation failures never reach the store.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from linkboard.components.action_gate import ActionGate
from linkboard.components.ordering import OrderReconciler
from linkboard.components.page_loader import PageLoadCoordinator
from linkboard.components.sync_status import SyncStatusNotifier
from linkboard.domain.entities import Direction, UiElement
from linkboard.ports.store import RemoteLinkStorePort
from linkboard.ports.ui import BrowserPort, ConfirmPort, EditModalPort, LinkFormPort
from linkboard.rules.models import MessageRules

from .models import ROLE_ACTIONS, ActionOutcome, ActionTag, LinkValidationError

logger = logging.getLogger(__name__)

Handler = Callable[[UiElement], Awaitable[ActionOutcome]]


# --- Validation Functions ---


def validate_link_data(name: str, url: str) -> list[LinkValidationError]:
    """Both fields are required once surrounding whitespace is removed."""
    errors: list[LinkValidationError] = []

    if not name or not name.strip():
        errors.append(
            LinkValidationError(code="name_required", message="Name is required", field="name")
        )
    if not url or not url.strip():
        errors.append(
            LinkValidationError(code="url_required", message="URL is required", field="url")
        )

    return errors


def resolve_action(element: UiElement) -> ActionTag | None:
    """Map the clicked element's role to an action, None for anything else."""
    return ROLE_ACTIONS.get(element.role)


# --- Link Actions ---


class LinkActions:
    def __init__(
        self,
        *,
        store: RemoteLinkStorePort,
        coordinator: PageLoadCoordinator,
        reconciler: OrderReconciler,
        gate: ActionGate,
        notifier: SyncStatusNotifier,
        modal: EditModalPort,
        confirm: ConfirmPort,
        browser: BrowserPort,
        form: LinkFormPort,
        messages: MessageRules | None = None,
    ) -> None:
        self._store = store
        self._coordinator = coordinator
        self._reconciler = reconciler
        self._gate = gate
        self._notifier = notifier
        self._modal = modal
        self._confirm = confirm
        self._browser = browser
        self._form = form
        self._messages = messages or MessageRules()

        self._handlers: dict[ActionTag, Handler] = {
            "open_url": self._on_open_url,
            "delete": self._on_delete,
            "move_up": self._on_move_up,
            "move_down": self._on_move_down,
            "edit": self._on_edit,
            "add": self._on_add,
            "clear_all": self._on_clear_all,
            "save_edit": self._on_save_edit,
        }

    # --- Dispatch ---

    async def dispatch(self, element: UiElement) -> ActionOutcome:
        tag = resolve_action(element)
        if tag is None:
            return ActionOutcome(action=None, kind="ignored")
        return await self._handlers[tag](element)

    async def _on_open_url(self, element: UiElement) -> ActionOutcome:
        url = element.data.get("url")
        if not url and element.link_id:
            link = self._coordinator.snapshot.get(element.link_id)
            url = link.url if link else None
        return await self.open_url(url or "")

    async def _on_delete(self, element: UiElement) -> ActionOutcome:
        return await self.delete(element.link_id or "")

    async def _on_move_up(self, element: UiElement) -> ActionOutcome:
        return await self.move(element.link_id or "", "up")

    async def _on_move_down(self, element: UiElement) -> ActionOutcome:
        return await self.move(element.link_id or "", "down")

    async def _on_edit(self, element: UiElement) -> ActionOutcome:
        return await self.edit(element.link_id or "")

    async def _on_add(self, element: UiElement) -> ActionOutcome:
        return await self.add_from_form()

    async def _on_clear_all(self, element: UiElement) -> ActionOutcome:
        return await self.clear_all()

    async def _on_save_edit(self, element: UiElement) -> ActionOutcome:
        return await self.save_edit()

    # --- Helpers ---

    def _rejected(self, action: ActionTag) -> ActionOutcome:
        return ActionOutcome(action=action, kind="rejected")

    def _invalid(
        self, action: ActionTag, message: str, errors: list[LinkValidationError]
    ) -> ActionOutcome:
        self._notifier.notify(True, message, is_error=True)
        return ActionOutcome(action=action, kind="invalid", message=message, errors=tuple(errors))

    def _failed(self, action: ActionTag, message: str) -> ActionOutcome:
        self._notifier.notify(True, message, is_error=True)
        return ActionOutcome(action=action, kind="failed", message=message)

    async def _finish(self, action: ActionTag, message: str) -> ActionOutcome:
        """Settle, reload, then announce success."""
        await self._coordinator.settle_and_reload()
        self._notifier.notify(True, message)
        return ActionOutcome(action=action, kind="ok", message=message)

    # --- Non-mutating actions ---

    async def open_url(self, url: str) -> ActionOutcome:
        if self._gate.held:
            return self._rejected("open_url")
        if not url:
            return ActionOutcome(action="open_url", kind="invalid")
        self._browser.open_url(url)
        return ActionOutcome(action="open_url", kind="ok")

    async def edit(self, link_id: str) -> ActionOutcome:
        if self._gate.held:
            return self._rejected("edit")
        link = self._coordinator.snapshot.get(link_id)
        if link is None:
            return ActionOutcome(action="edit", kind="not_found")
        self._modal.open(link.id, link.name, link.url)
        return ActionOutcome(action="edit", kind="ok")

    # --- Mutating actions ---

    async def add_from_form(self) -> ActionOutcome:
        name, url = self._form.read()
        outcome = await self.add(name, url)
        if outcome.ok:
            self._form.clear()
        return outcome

    async def add(self, name: str, url: str) -> ActionOutcome:
        if self._gate.held:
            return self._rejected("add")

        name, url = name.strip(), url.strip()
        errors = validate_link_data(name, url)
        if errors:
            return self._invalid("add", self._messages.missing_fields, errors)

        page_id = self._coordinator.active_page_id()
        if not page_id:
            return self._invalid(
                "add",
                self._messages.no_page,
                [LinkValidationError(code="no_active_page", message="No page is selected")],
            )

        with self._gate.guard() as acquired:
            if not acquired:
                return self._rejected("add")

            self._notifier.notify(True, self._messages.adding)
            order_index = self._coordinator.snapshot.next_order_index()
            if not await self._store.create_link(name, url, order_index, page_id):
                logger.error(f"Create of {name!r} on page {page_id} failed")
                return self._failed("add", self._messages.add_failed)

            logger.info(f"Added {name!r} to page {page_id} at order {order_index}")
            return await self._finish("add", self._messages.added)

    async def delete(self, link_id: str) -> ActionOutcome:
        if self._gate.held:
            return self._rejected("delete")
        if self._coordinator.snapshot.get(link_id) is None:
            return ActionOutcome(action="delete", kind="not_found")
        if not self._confirm.confirm(self._messages.confirm_delete):
            return ActionOutcome(action="delete", kind="cancelled")

        with self._gate.guard() as acquired:
            if not acquired:
                return self._rejected("delete")

            self._notifier.notify(True, self._messages.deleting)
            if not await self._store.delete_link(link_id):
                logger.error(f"Delete of {link_id} failed")
                return self._failed("delete", self._messages.delete_failed)

            return await self._finish("delete", self._messages.deleted)

    async def move(self, link_id: str, direction: Direction) -> ActionOutcome:
        action: ActionTag = "move_up" if direction == "up" else "move_down"
        if self._gate.held:
            return self._rejected(action)

        snapshot = self._coordinator.snapshot
        if snapshot.get(link_id) is None:
            return ActionOutcome(action=action, kind="not_found")
        if snapshot.neighbor(link_id, direction) is None:
            return ActionOutcome(action=action, kind="boundary")

        with self._gate.guard() as acquired:
            if not acquired:
                return self._rejected(action)

            progress = self._messages.moving_up if direction == "up" else self._messages.moving_down
            self._notifier.notify(True, progress)
            result = await self._reconciler.move_adjacent(link_id, direction)

            if result == "failed":
                return self._failed(action, self._messages.move_failed)
            if result == "swapped":
                return ActionOutcome(action=action, kind="ok")

            self._notifier.notify(False)
            return ActionOutcome(action=action, kind=result)

    async def clear_all(self) -> ActionOutcome:
        if self._gate.held:
            return self._rejected("clear_all")

        links = self._coordinator.snapshot.all()
        if not links:
            return ActionOutcome(action="clear_all", kind="ignored")

        # Destructive: two separate confirmations
        if not self._confirm.confirm(self._messages.confirm_clear):
            return ActionOutcome(action="clear_all", kind="cancelled")
        if not self._confirm.confirm(self._messages.confirm_clear_again):
            return ActionOutcome(action="clear_all", kind="cancelled")

        with self._gate.guard() as acquired:
            if not acquired:
                return self._rejected("clear_all")

            self._notifier.notify(True, self._messages.clearing)
            # Every delete settles before the gate is released, raising or not
            results = await asyncio.gather(
                *(self._store.delete_link(link.id) for link in links),
                return_exceptions=True,
            )
            errors = [result for result in results if isinstance(result, BaseException)]
            if errors:
                logger.error(f"Bulk delete failed: {errors[0]!r}")
                return self._failed("clear_all", self._messages.clear_failed)

            succeeded = sum(1 for result in results if result is True)
            total = len(links)
            if succeeded == total:
                return await self._finish("clear_all", self._messages.cleared)

            # Successful deletes stay deleted; reload so the survivors show
            logger.warning(f"Bulk delete partially failed: {succeeded}/{total}")
            await self._coordinator.settle_and_reload()
            return self._failed(
                "clear_all",
                self._messages.clear_partial.format(succeeded=succeeded, total=total),
            )

    async def save_edit(self) -> ActionOutcome:
        if self._gate.held:
            return self._rejected("save_edit")

        if not self._modal.is_valid():
            return self._invalid(
                "save_edit",
                self._messages.missing_fields,
                [LinkValidationError(code="edit_invalid", message="Name and URL are required")],
            )
        data = self._modal.get_edited_data()

        with self._gate.guard() as acquired:
            if not acquired:
                return self._rejected("save_edit")

            self._notifier.notify(True, self._messages.saving)
            if not await self._store.update_link(data.id, data.name.strip(), data.url.strip()):
                logger.error(f"Update of {data.id} failed")
                return self._failed("save_edit", self._messages.save_failed)

            current_page = self._coordinator.active_page_id()
            if data.page_id and data.page_id != current_page:
                logger.info(f"Moving {data.id} to page {data.page_id}")
                if not await self._store.move_link_to_page(data.id, data.page_id):
                    logger.error(f"Move of {data.id} to page {data.page_id} failed")
                    return self._failed("save_edit", self._messages.save_failed)

            self._modal.close()
            return await self._finish("save_edit", self._messages.saved)
