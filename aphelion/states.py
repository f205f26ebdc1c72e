"""A stack of game states with deferred structural changes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Protocol


class Gui(Protocol):
    """Anything that can show and hide the widgets built by states."""

    def add(self, widget: Any) -> None: ...

    def remove(self, widget: Any) -> None: ...


class AbstractState:
    """Base class for a screen of the game.

    Each handler returns ``True`` to stop the states below it from running.
    By default a state lets everything through to the states below it;
    subclasses either override the handlers or set the ``blocks_*`` flags.
    """

    blocks_updates: bool = False
    blocks_events: bool = False
    blocks_inputs: bool = False

    def __init__(self, stack: StateStack, widget: Any = None) -> None:
        self.stack = stack
        self.widget = widget

    def build_gui(self) -> Any:
        """Return the widget shown while this state is on the stack."""
        return self.widget

    def update(self, dt: float) -> bool:
        return self.blocks_updates

    def handle_event(self, event: Any) -> bool:
        return self.blocks_events

    def handle_continuous_inputs(self, dt: float) -> bool:
        return self.blocks_inputs


@dataclass
class _Entry:
    state: AbstractState
    widget: Any


class StateStack:
    """Runs states from the top down; pushes and pops are applied on the next update."""

    def __init__(self, gui: Gui | None = None) -> None:
        self._gui = gui
        self._stack: list[_Entry] = []
        self._actions: deque[Callable[[], None]] = deque()

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def states(self) -> list[AbstractState]:
        """The states currently on the stack, bottom first."""
        return [entry.state for entry in self._stack]

    def _pop(self) -> None:
        entry = self._stack.pop()
        if self._gui is not None and entry.widget is not None:
            self._gui.remove(entry.widget)

    def _require_not_empty(self) -> None:
        if not self._stack:
            raise RuntimeError("the state stack is empty")

    def push_state(self, state: AbstractState) -> None:
        def action() -> None:
            widget = state.build_gui()
            if self._gui is not None and widget is not None:
                self._gui.add(widget)
            self._stack.append(_Entry(state, widget))

        self._actions.append(action)

    def pop_states_up_to(self, state: AbstractState) -> None:
        """Pop every state above ``state``, keeping ``state`` itself."""

        def action() -> None:
            self._require_not_empty()
            while self._stack and self._stack[-1].state is not state:
                self._pop()

        self._actions.append(action)

    def pop_states_until(self, state: AbstractState) -> None:
        """Pop every state above ``state`` and ``state`` itself."""

        def action() -> None:
            self._require_not_empty()
            found = False
            while self._stack and not found:
                found = self._stack[-1].state is state
                self._pop()

        self._actions.append(action)

    def clear_states(self) -> None:
        def action() -> None:
            while self._stack:
                self._pop()

        self._actions.append(action)

    def update(self, dt: float) -> None:
        while self._actions:
            self._actions.popleft()()
        for entry in reversed(self._stack):
            if entry.state.update(dt):
                break

    def handle_event(self, event: Any) -> None:
        for entry in reversed(self._stack):
            if entry.state.handle_event(event):
                break

    def handle_continuous_inputs(self, dt: float) -> None:
        for entry in reversed(self._stack):
            if entry.state.handle_continuous_inputs(dt):
                break

    def is_empty(self) -> bool:
        return not self._stack