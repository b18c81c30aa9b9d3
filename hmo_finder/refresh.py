"""Store refresh from a record generator, on demand and on a schedule."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Sequence

from hmo_finder.config import RefreshConfig
from hmo_finder.exceptions import GeneratorError
from hmo_finder.generators.base import RecordGenerator
from hmo_finder.generators.cities import available_cities
from hmo_finder.models.property import PropertyRecord
from hmo_finder.store.memory import PropertyStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefreshResult:
    """Outcome of a successful refresh."""

    city: str
    max_price: int
    min_size: int
    properties: list[PropertyRecord]


class RefreshService:
    """Replace the store snapshot with freshly generated listings.

    Refreshes are serialized. A generator that raises or returns nothing
    leaves the current snapshot in place.

    Parameters
    ----------
    store : PropertyStore
        Store whose snapshot is replaced.
    generator : RecordGenerator
        Source of candidate listings.
    config : RefreshConfig | None
        Defaults for city, price ceiling and minimum size.
    seed_source : RecordGenerator | None
        Source tried first by ``seed()``, typically the curated listings.
    """

    def __init__(
        self,
        store: PropertyStore,
        generator: RecordGenerator,
        config: RefreshConfig | None = None,
        seed_source: RecordGenerator | None = None,
    ) -> None:
        self.store = store
        self.generator = generator
        self.config = config or RefreshConfig()
        self.seed_source = seed_source
        self._lock = threading.Lock()

    @property
    def in_progress(self) -> bool:
        return self._lock.locked()

    def refresh(
        self,
        city: str | None = None,
        max_price: int | None = None,
        min_size: int | None = None,
    ) -> RefreshResult:
        """Generate listings and swap them into the store, waiting for any
        refresh already running.

        Raises
        ------
        GeneratorError
            If the generator fails or yields no listings. The store is left
            unchanged.
        """
        with self._lock:
            return self._run(self.generator, city, max_price, min_size)

    def refresh_if_idle(
        self,
        city: str | None = None,
        max_price: int | None = None,
        min_size: int | None = None,
    ) -> RefreshResult | None:
        """Like ``refresh`` but return ``None`` at once if one is running."""
        if not self._lock.acquire(blocking=False):
            logger.info("Refresh already in progress, skipping")
            return None
        try:
            return self._run(self.generator, city, max_price, min_size)
        finally:
            self._lock.release()

    def refill_if_empty(self) -> RefreshResult | None:
        """Refresh with the defaults only if the store is still empty.

        Callers that found the store empty queue on the refresh lock; all
        but the first find it filled and return ``None``, so they read the
        snapshot the first one built.
        """
        with self._lock:
            if len(self.store):
                return None
            return self._run(self.generator, None, None, None)

    def seed(self) -> RefreshResult:
        """Populate the store for the default city at start-up.

        Tries the seed source first and falls back to the generator when it
        has nothing for the city or fails.
        """
        with self._lock:
            if self.seed_source is not None:
                try:
                    return self._run(self.seed_source, None, None, None)
                except GeneratorError:
                    logger.warning("Seed source gave no listings, using generator")
            return self._run(self.generator, None, None, None)

    def _run(
        self,
        source: RecordGenerator,
        city: str | None,
        max_price: int | None,
        min_size: int | None,
    ) -> RefreshResult:
        city = city or self.config.default_city
        max_price = self.config.max_price if max_price is None else max_price
        min_size = self.config.min_size if min_size is None else min_size

        logger.info(
            "Refreshing properties for %s (max price %d, min size %d sqm)",
            city,
            max_price,
            min_size,
        )
        try:
            candidates = source.generate(city, max_price, min_size)
        except Exception as exc:
            logger.exception("Record generator failed for %s", city)
            raise GeneratorError(f"Record generator failed for {city}: {exc}") from exc

        if not candidates:
            logger.error("Record generator returned no properties for %s", city)
            raise GeneratorError(f"Record generator returned no properties for {city}")

        records = self.store.replace_all(PropertyRecord.create(c) for c in candidates)
        logger.info("Refreshed store with %d properties from %s", len(records), city)
        return RefreshResult(city, max_price, min_size, records)


class AutoRefresher:
    """Refresh the store periodically on a daemon thread.

    Waits ``initial_delay_seconds`` after ``start()``, then refreshes every
    ``interval_seconds``, cycling through ``cities``. A tick that finds a
    refresh already running is skipped; failures are logged and the loop
    carries on.
    """

    def __init__(
        self,
        service: RefreshService,
        config: RefreshConfig | None = None,
        cities: Sequence[str] | None = None,
    ) -> None:
        self.service = service
        self.config = config or service.config
        self.cities = list(cities or available_cities())
        self._city_index = 0
        self._next_run_at: float | None = None
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def current_city(self) -> str:
        return self.cities[self._city_index % len(self.cities)]

    def start(self) -> None:
        """Start the refresh loop, restarting it if already running."""
        if self.running:
            self.stop()

        logger.info(
            "Starting auto-refresh every %.0fs across %d cities",
            self.config.interval_seconds,
            len(self.cities),
        )
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._loop, args=(self._stop,), name="hmo-auto-refresh", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        """Stop the refresh loop and wait for the thread to exit."""
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join(timeout)
        self._thread = None
        self._next_run_at = None
        logger.info("Stopped auto-refresh")

    def seconds_until_next(self) -> float | None:
        """Seconds until the next scheduled tick, or ``None`` when stopped."""
        if self._next_run_at is None:
            return None
        return max(0.0, self._next_run_at - time.monotonic())

    def status(self) -> dict[str, object]:
        return {
            "running": self.running,
            "current_city": self.current_city,
            "seconds_until_next": self.seconds_until_next(),
            "interval_seconds": self.config.interval_seconds,
        }

    def tick(self) -> RefreshResult | None:
        """Run one scheduled refresh for the current city and advance the cycle.

        A tick skipped because another refresh is running keeps the city, so
        it is retried on the next tick. A failed refresh moves on.
        """
        city = self.current_city
        result = None
        try:
            result = self.service.refresh_if_idle(city)
        except GeneratorError as exc:
            logger.error("Auto-refresh for %s failed, keeping current listings: %s", city, exc)
        except Exception:
            logger.exception("Unexpected error during auto-refresh for %s", city)
        else:
            if result is None:
                logger.info("Auto-refresh for %s skipped, retrying next tick", city)
                return None

        self._city_index += 1
        if self._city_index >= len(self.cities):
            self._city_index = 0
            logger.info("Completed full city cycle, restarting")
        return result

    def _loop(self, stop: threading.Event) -> None:
        delay = self.config.initial_delay_seconds
        while True:
            self._next_run_at = time.monotonic() + delay
            if stop.wait(delay):
                return
            self.tick()
            delay = self.config.interval_seconds
