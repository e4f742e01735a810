# state.py
"""
Change notification shared by the diagram state machines.
Renderers subscribe a callback and are called synchronously after
every state transition.
"""
from typing import Callable, List


class ChangeNotifier:
    """Mixin holding a list of change listeners."""

    def _init_listeners(self):
        self._listeners: List[Callable] = []

    def subscribe(self, callback: Callable):
        """Registers a callback receiving the machine after each change."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: Callable):
        """Removes a callback. Unknown callbacks are ignored."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def clear_listeners(self):
        self._listeners.clear()

    def _notify(self):
        # Copy so a listener may unsubscribe itself
        for callback in list(self._listeners):
            callback(self)
