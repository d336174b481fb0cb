# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# List views re-issue short ids when set, from clear_ids_on_view or --clear-ids
_clear_ids_on_view: ContextVar[bool] = ContextVar("clear_ids_on_view", default=True)


def set_clear_ids(value: bool) -> None:
    _clear_ids_on_view.set(value)


def get_clear_ids() -> bool:
    return _clear_ids_on_view.get()
