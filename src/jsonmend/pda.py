from __future__ import annotations

from typing import Generic, List, TypeVar

Context = TypeVar("Context")
State = TypeVar("State")


class PushDownAutomata(Generic[Context, State]):
    """
    State plus a stack of pending items. The escape decoders keep the raw
    characters of an unfinished escape token on the stack so the token can be
    either consumed or released verbatim.
    """

    def __init__(self, start_state: State) -> None:
        self._start_state: State = start_state
        self._stack: List[Context] = []
        self._state: State = start_state

    @property
    def state(self) -> State:
        return self._state

    @property
    def depth(self) -> int:
        return len(self._stack)

    def set_state(self, new_state: State) -> None:
        self._state = new_state

    def push(self, item: Context) -> None:
        self._stack.append(item)

    def drain(self) -> List[Context]:
        """Empty the stack, returning its items bottom first."""
        items, self._stack = self._stack, []
        return items

    def reset(self) -> None:
        self._stack = []
        self._state = self._start_state
