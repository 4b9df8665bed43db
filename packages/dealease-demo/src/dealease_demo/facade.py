"""Read-side facade over the session store for UI collaborators.

DemoModeFacade keeps a DemoModeState snapshot (is_active, data, stats)
and re-derives it on every store change, then forwards the new snapshot
to its own subscribers. It performs no generation or validation of its
own; lifecycle calls are passed straight to the store.

Example:
    >>> facade = DemoModeFacade(DemoSessionStore(MemoryStorage()))
    >>> facade.subscribe(lambda state: print(state.is_active))
    >>> facade.init("light")
    True
    >>> facade.stats.total_matches
    2
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from dealease_demo.schemas.session import DemoSession, DemoStats
from dealease_demo.schemas.settings import DensityTier
from dealease_demo.stats import aggregate
from dealease_demo.store import DemoSessionStore

StateListener = Callable[["DemoModeState"], None]


class DemoModeState(BaseModel):
    """Snapshot consumed by UI collaborators.

    Attributes:
        is_active: Whether demo mode is on.
        data: The current session while active, otherwise None.
        stats: Stats derived from data, otherwise None.
    """

    model_config = ConfigDict(frozen=True)

    is_active: bool = False
    data: DemoSession | None = None
    stats: DemoStats | None = None

    @classmethod
    def from_session(cls, session: DemoSession) -> DemoModeState:
        """Derive the snapshot from a session."""
        if not session.is_active or session.dataset is None:
            return cls()
        return cls(is_active=True, data=session, stats=aggregate(session.dataset))


class DemoModeFacade:
    """UI-facing accessor for demo mode.

    Attributes:
        store: The session store this facade reads from and delegates to.
    """

    def __init__(self, store: DemoSessionStore) -> None:
        self.store = store
        self._state = DemoModeState.from_session(store.session)
        self._listeners: list[StateListener] = []
        self._unsubscribe: Callable[[], None] | None = store.subscribe(self._on_session_change)

    @property
    def state(self) -> DemoModeState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state.is_active

    @property
    def data(self) -> DemoSession | None:
        return self._state.data

    @property
    def stats(self) -> DemoStats | None:
        return self._state.stats

    def is_demo(self) -> bool:
        """Boolean projection of is_active for callers that need only the flag."""
        return self._state.is_active

    def init(self, density: DensityTier | str = DensityTier.medium, **settings: bool) -> None:
        self.store.init(density, **settings)

    def exit(self) -> None:
        self.store.exit()

    def reset(self) -> None:
        self.store.reset()

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with each new DemoModeState.

        Returns:
            Function that unregisters the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        """Detach from the store. Subsequent store changes are not observed."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._listeners.clear()

    def _on_session_change(self, session: DemoSession) -> None:
        self._state = DemoModeState.from_session(session)
        for listener in list(self._listeners):
            listener(self._state)
