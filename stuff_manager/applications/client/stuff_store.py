from typing import Callable, List

from stuff_manager.applications.client.stuff_state import StuffAction, StuffState, reduce_stuff

Listener = Callable[[StuffState], None]


class StuffStore:
    def __init__(self, initial_state: StuffState | None = None):
        self._state = initial_state or StuffState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> StuffState:
        return self._state

    def dispatch(self, action: StuffAction) -> StuffState:
        next_state = reduce_stuff(self._state, action)
        if next_state is not self._state:
            self._state = next_state
            for listener in list(self._listeners):
                listener(next_state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
