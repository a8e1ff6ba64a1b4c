"""
Query capability required by assertion steps.
"""

from typing import Optional, Protocol, Tuple, runtime_checkable

@runtime_checkable
class Driver(Protocol):
    """Typed queries against a live browser session.

    Every method is a coroutine. Any of them may raise a
    :class:`~browser_assertions.driver.errors.DriverError`.
    """

    async def get_cookie(self, name: str) -> Optional[str]: ...

    async def cookie_exists(self, name: str) -> bool: ...

    async def cookie_not_exists(self, name: str) -> bool: ...

    async def get_url(self) -> str: ...

    async def get_title(self) -> str: ...

    async def get_page_html(self) -> str: ...

    async def count_elements(self, selector: str) -> int: ...

    async def get_attribute(self, selector: str, name: str) -> Optional[str]: ...

    async def get_css_property(self, selector: str, name: str) -> Optional[str]: ...

    async def get_element_html(self, selector: str) -> str: ...

    async def get_text(self, selector: str) -> str: ...

    async def get_value(self, selector: str) -> str: ...

    async def element_exists(self, selector: str) -> bool: ...

    async def element_enabled(self, selector: str) -> bool: ...

    async def element_visible(self, selector: str) -> bool: ...

    async def element_visible_within_viewport(self, selector: str) -> bool: ...

    async def option_is_selected(self, selector: str) -> bool: ...

    async def get_element_size(self, selector: str) -> Tuple[int, int]: ...

    async def get_element_position(self, selector: str) -> Tuple[int, int]: ...

    async def get_element_view_position(self, selector: str) -> Tuple[int, int]: ...
