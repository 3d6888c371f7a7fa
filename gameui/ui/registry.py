"""Process-scoped map of live interface components."""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Iterator
from gameui.core.component import UIComponent
from gameui.core.errors import ComponentNotFoundError, InvalidComponentError

if TYPE_CHECKING:
    from gameui.ui.ui_manager import UIManager

logger = logging.getLogger(__name__)


class ComponentRegistry:
    """Unique ``name -> UIComponent`` mapping owned by one manager.

    Every stored component has ``manager`` pointing back at the owner.
    """

    def __init__(self, owner: "UIManager"):
        self.owner = owner
        self._components: dict[str, UIComponent] = {}

    def add(self, component: UIComponent) -> UIComponent:
        """Store ``component`` under its name. Last write wins."""
        if not isinstance(component, UIComponent):
            raise InvalidComponentError(component)
        previous = self._components.get(component.name)
        if previous is not None and previous is not component:
            logger.debug("Replacing registered component %r", component.name)
        component.manager = self.owner
        self._components[component.name] = component
        return component

    def get(self, name: str) -> UIComponent:
        try:
            return self._components[name]
        except KeyError:
            raise ComponentNotFoundError(name) from None

    def discard(self, component: UIComponent) -> bool:
        """Drop ``component`` if it is still the entry under its name."""
        if self._components.get(component.name) is component:
            del self._components[component.name]
            return True
        return False

    def remove_all(self) -> int:
        """Call remove() once on every component present right now.

        Components re-registering themselves from their remove hook stay in the map.
        A component detached by an earlier removal in the same pass (a dialog
        taking its overlay down) is not removed a second time.
        """
        snapshot = [(component, component.attached) for component in self._components.values()]
        for component, was_attached in snapshot:
            if was_attached and not component.attached:
                continue
            component.remove()
        return len(snapshot)

    def clear(self) -> None:
        self._components.clear()

    def names(self) -> list[str]:
        return list(self._components)

    def __contains__(self, name: object) -> bool:
        return name in self._components

    def __iter__(self) -> Iterator[UIComponent]:
        return iter(list(self._components.values()))

    def __len__(self) -> int:
        return len(self._components)


__all__ = ["ComponentRegistry"]
