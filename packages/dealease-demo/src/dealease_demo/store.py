"""Demo session store.

DemoSessionStore is the single writer of the demo session. It owns the
Inactive/Active state machine, persists the session under a fixed key
after every transition, and notifies subscribers synchronously.

Transitions:

    Inactive --init(tier)--> Active      generate dataset, persist
    Active   --init(tier)--> Active      regenerate with new settings, persist
    Active   --reset()-----> Active      regenerate with current settings, persist
    Active   --exit()------> Inactive    discard dataset, persist inactive session
    any      --import------> Active/Inactive per payload, persist

Every transition runs under one re-entrant lock, so concurrent callers
cannot interleave and the dataset is present exactly when the session is
active.

Example:
    >>> store = DemoSessionStore(MemoryStorage())
    >>> store.init("light")
    >>> store.stats.total_buyers
    3
    >>> payload = store.export_demo_data()
    >>> store.exit()
    >>> store.import_demo_data(payload)
    >>> store.is_active
    True
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import date, datetime
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError as PydanticValidationError

from dealease_demo.activity import ActivityEvent, apply_activity
from dealease_demo.config import DEFAULT_STORAGE_KEY, DemoStoreConfig
from dealease_demo.distributions.temporal import utc_now
from dealease_demo.errors import (
    InvalidStateError,
    MalformedPayloadError,
    PersistenceFailureError,
)
from dealease_demo.generators.base import DatasetGenerator
from dealease_demo.generators.marketplace import MarketplaceGenerator
from dealease_demo.integrity import check_integrity
from dealease_demo.profiles import profile_for
from dealease_demo.schemas.session import (
    EXPORT_FORMAT_VERSION,
    DemoDataset,
    DemoExport,
    DemoSession,
    DemoStats,
)
from dealease_demo.schemas.settings import WIRE_CONTEXT, DemoSettings, DensityTier, parse_density
from dealease_demo.stats import aggregate
from dealease_demo.storage.base import StorageBackend
from dealease_demo.storage.file import FileStorage

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

logger = structlog.get_logger(__name__)

SessionListener = Callable[[DemoSession], None]

EXPORT_FILENAME_PREFIX = "dealease-demo-data"


def export_filename(today: date | None = None) -> str:
    """File name for an export taken on the given date.

    Example:
        >>> export_filename(date(2024, 1, 16))
        'dealease-demo-data-2024-01-16.json'
    """
    day = today or date.today()
    return f"{EXPORT_FILENAME_PREFIX}-{day.isoformat()}.json"


def format_validation_problems(err: PydanticValidationError) -> list[str]:
    """Flatten a Pydantic ValidationError into ``path: message`` lines."""
    details: list[ErrorDetails] = err.errors()
    problems: list[str] = []
    for detail in details:
        loc = ".".join(str(part) for part in detail["loc"]) or "<root>"
        problems.append(f"{loc}: {detail['msg']}")
    return problems


class DemoSessionStore:
    """Holder and single mutator of the demo session.

    Attributes:
        storage: Backend the session record is persisted to.
        storage_key: Fixed key of the session record.
        generator: Dataset generator used by init and reset.
    """

    def __init__(
        self,
        storage: StorageBackend,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        generator: DatasetGenerator | None = None,
        clock: Callable[[], datetime] = utc_now,
        rehydrate: bool = True,
    ) -> None:
        """Initialize the store, rehydrating any persisted session.

        Args:
            storage: Persistence backend.
            storage_key: Key the session record lives under.
            generator: Dataset generator (default: MarketplaceGenerator).
            clock: Source of "now" for exports and generation.
            rehydrate: Load the persisted session immediately.

        Raises:
            PersistenceFailureError: If the persisted record cannot be read
                or does not describe a valid session.
        """
        self.storage = storage
        self.storage_key = storage_key
        self.clock = clock
        self.generator = generator or MarketplaceGenerator(clock=clock)
        self._lock = threading.RLock()
        self._listeners: list[SessionListener] = []
        self._session = DemoSession.inactive()
        self._stats: DemoStats | None = None

        if rehydrate:
            self.reload()

    @classmethod
    def from_config(cls, config: DemoStoreConfig, **kwargs: object) -> DemoSessionStore:
        """Build a file-backed store from DemoStoreConfig.

        Args:
            config: Store configuration.
            **kwargs: Extra keyword arguments for the constructor.

        Returns:
            DemoSessionStore persisting under config.storage_dir.
        """
        clock = kwargs.get("clock", utc_now)
        kwargs.setdefault(
            "generator",
            MarketplaceGenerator(seed=config.seed, clock=clock),  # type: ignore[arg-type]
        )
        return cls(
            FileStorage(config.storage_dir),
            storage_key=config.storage_key,
            **kwargs,  # type: ignore[arg-type]
        )

    # -- read accessors ---------------------------------------------------

    @property
    def session(self) -> DemoSession:
        """Current session (immutable snapshot)."""
        return self._session

    @property
    def is_active(self) -> bool:
        return self._session.is_active

    @property
    def settings(self) -> DemoSettings:
        return self._session.settings

    @property
    def dataset(self) -> DemoDataset | None:
        return self._session.dataset

    @property
    def stats(self) -> DemoStats | None:
        """Stats of the current dataset, or None while inactive."""
        return self._stats

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a change listener.

        Listeners are called synchronously, once per transition, with the
        new session.

        Args:
            listener: Callable receiving the new DemoSession.

        Returns:
            Function that unregisters the listener.
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    # -- lifecycle --------------------------------------------------------

    def init(
        self,
        density: DensityTier | str = DensityTier.medium,
        *,
        auto_generate_activity: bool = True,
        simulate_real_time: bool = True,
        enable_notifications: bool = True,
    ) -> DemoSession:
        """Activate demo mode with a freshly generated dataset.

        When already active, the session is re-initialized with the new
        settings.

        Args:
            density: Density tier.
            auto_generate_activity: Allow hosts to schedule simulated activity.
            simulate_real_time: Anchor timestamps to the current time.
            enable_notifications: Allow hosts to surface notifications.

        Returns:
            The new active session.

        Raises:
            InvalidArgumentError: If density is not a known tier (no state change).
            PersistenceFailureError: If the write failed (in-memory state is updated).
        """
        tier = parse_density(density)
        settings = DemoSettings(
            data_density=tier,
            auto_generate_activity=auto_generate_activity,
            simulate_real_time=simulate_real_time,
            enable_notifications=enable_notifications,
        )
        with self._lock:
            dataset = self.generator.generate(profile_for(tier), settings)
            self._commit(
                DemoSession(is_active=True, settings=settings, dataset=dataset),
                "demo_initialized",
            )
            return self._session

    def reset(self, density: DensityTier | str | None = None) -> DemoSession:
        """Regenerate the dataset in place, keeping the session active.

        Args:
            density: Optional new tier; defaults to the current one.

        Returns:
            The regenerated session.

        Raises:
            InvalidArgumentError: If density is not a known tier (no state change).
            InvalidStateError: If demo mode is inactive (no state change).
            PersistenceFailureError: If the write failed (in-memory state is updated).
        """
        tier = parse_density(density) if density is not None else None
        with self._lock:
            if not self._session.is_active:
                raise InvalidStateError("reset", "inactive")

            settings = self._session.settings
            if tier is not None:
                settings = settings.model_copy(update={"data_density": tier})
            dataset = self.generator.generate(profile_for(settings.data_density), settings)
            self._commit(
                DemoSession(is_active=True, settings=settings, dataset=dataset),
                "demo_reset",
            )
            return self._session

    def exit(self) -> None:
        """Deactivate demo mode and discard the dataset.

        The inactive session keeps the last settings so a configuration UI
        can pre-fill them. Exiting while inactive is a no-op.

        Raises:
            PersistenceFailureError: If the write failed (in-memory state is updated).
        """
        with self._lock:
            if not self._session.is_active:
                logger.debug("demo_exit_ignored", reason="inactive")
                return
            self._commit(
                DemoSession.inactive(self._session.settings),
                "demo_exited",
            )

    def record_activity(self, event: ActivityEvent) -> DemoSession:
        """Apply one simulated activity event to the active dataset.

        Args:
            event: Event proposed by ActivitySimulator (or built by a host).

        Returns:
            The updated session.

        Raises:
            InvalidStateError: If demo mode is inactive.
            InvalidArgumentError: If the event does not fit the dataset.
            MalformedPayloadError: If the event introduces a dangling reference.
            PersistenceFailureError: If the write failed (in-memory state is updated).
        """
        with self._lock:
            dataset = self._session.dataset
            if dataset is None:
                raise InvalidStateError("record activity", "inactive")

            updated = apply_activity(dataset, event)
            check_integrity(updated)
            self._commit(
                self._session.model_copy(update={"dataset": updated}),
                "demo_activity_recorded",
                kind=event.kind,
            )
            return self._session

    # -- export / import --------------------------------------------------

    def export_demo_data(self) -> str:
        """Serialize the current session, with derived stats, as JSON text.

        Read-only: no state change and no storage access.

        Returns:
            UTF-8 JSON document (see DemoExport).
        """
        with self._lock:
            envelope = DemoExport(
                format_version=EXPORT_FORMAT_VERSION,
                exported_at=self.clock(),
                session=self._session,
                stats=self._stats,
            )
        logger.info("demo_exported", is_active=envelope.session.is_active)
        return envelope.model_dump_json(by_alias=True, indent=2)

    def import_demo_data(self, payload: str | bytes) -> DemoSession:
        """Replace the session with one read from an export document.

        Args:
            payload: Text produced by export_demo_data().

        Returns:
            The imported session.

        Raises:
            MalformedPayloadError: If the payload is not a valid export
                (current state is left untouched).
            PersistenceFailureError: If the write failed (in-memory state is updated).
        """
        envelope = self._parse_export(payload)
        with self._lock:
            self._commit(envelope.session, "demo_imported")
            return self._session

    def reload(self) -> DemoSession:
        """Re-read the persisted session, replacing the in-memory one.

        An absent record means an inactive session with default settings.

        Raises:
            PersistenceFailureError: If the record cannot be read or parsed.
        """
        with self._lock:
            raw = self._read_storage()
            if raw is None:
                session = DemoSession.inactive()
            else:
                session = self._parse_persisted(raw)
            self._session = session
            self._stats = aggregate(session.dataset) if session.dataset is not None else None
            logger.debug("demo_rehydrated", key=self.storage_key, is_active=session.is_active)
            self._notify()
            return session

    # -- internals --------------------------------------------------------

    def _parse_export(self, payload: str | bytes) -> DemoExport:
        try:
            envelope = DemoExport.model_validate_json(payload, context=WIRE_CONTEXT)
        except PydanticValidationError as e:
            problems = format_validation_problems(e)
            raise MalformedPayloadError(
                "Demo data import failed: payload is not a valid demo export",
                problems=problems,
                internal_details="; ".join(problems[:20]),
            ) from None

        dataset = envelope.session.dataset
        if dataset is not None:
            check_integrity(dataset)
            recomputed = aggregate(dataset)
            if envelope.stats != recomputed:
                raise MalformedPayloadError(
                    "Demo data import failed: stats do not match the dataset",
                    problems=["stats: embedded counters differ from the dataset"],
                    internal_details=f"embedded={envelope.stats!r} recomputed={recomputed!r}",
                )
        return envelope

    def _parse_persisted(self, raw: str) -> DemoSession:
        try:
            session = DemoSession.model_validate_json(raw, context=WIRE_CONTEXT)
            if session.dataset is not None:
                check_integrity(session.dataset)
        except PydanticValidationError as e:
            raise PersistenceFailureError(
                self.storage_key,
                "read",
                internal_details="; ".join(format_validation_problems(e)[:20]),
            ) from None
        except MalformedPayloadError as e:
            raise PersistenceFailureError(
                self.storage_key,
                "read",
                internal_details="; ".join(e.problems[:20]),
            ) from None
        return session

    def _read_storage(self) -> str | None:
        try:
            return self.storage.get_item(self.storage_key)
        except OSError as e:
            raise PersistenceFailureError(self.storage_key, "read", internal_details=str(e)) from e

    def _commit(self, session: DemoSession, event: str, **log_fields: object) -> None:
        """Install a new session, persist it once, then notify listeners.

        The in-memory state changes first. Every listener sees the new state
        even when the write failed; the PersistenceFailureError is raised
        afterwards.
        """
        self._session = session
        self._stats = aggregate(session.dataset) if session.dataset is not None else None
        write_error: PersistenceFailureError | None = None
        try:
            self._write_storage(session)
        except PersistenceFailureError as e:
            write_error = e

        self._notify()

        logger.info(
            event,
            is_active=session.is_active,
            persisted=write_error is None,
            density=session.settings.data_density.value,
            **(self._stats.model_dump() if self._stats is not None else {}),
            **log_fields,
        )
        if write_error is not None:
            raise write_error

    def _write_storage(self, session: DemoSession) -> None:
        try:
            self.storage.set_item(self.storage_key, session.model_dump_json(by_alias=True))
        except OSError as e:
            raise PersistenceFailureError(self.storage_key, "write", internal_details=str(e)) from e

    def _notify(self) -> None:
        """Call every listener with the current session.

        A listener that raises is logged and skipped; it never stops the
        remaining listeners or the transition that triggered it.
        """
        for listener in list(self._listeners):
            try:
                listener(self._session)
            except Exception:
                logger.exception("demo_listener_failed", listener=repr(listener))
