# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Views print the app header unless --no-header or show_header: false
_show_header: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header.set(value)


def get_show_header() -> bool:
    return _show_header.get()
