"""Application services shared by the request handlers."""

from dataclasses import dataclass

from hmo_finder.config import HmoFinderConfig
from hmo_finder.generators.base import RecordGenerator
from hmo_finder.generators.curated import CuratedPropertySource
from hmo_finder.generators.property import PropertyGenerator
from hmo_finder.planning import Article4Checker
from hmo_finder.refresh import AutoRefresher, RefreshService
from hmo_finder.search.pipeline import PropertySearch
from hmo_finder.store.memory import PropertyStore
from hmo_finder.store.searches import SearchLog


@dataclass
class Services:
    """Everything a request handler needs, built once per application."""

    config: HmoFinderConfig
    store: PropertyStore
    searches: SearchLog
    search: PropertySearch
    refresh: RefreshService
    auto_refresher: AutoRefresher
    article4: Article4Checker


def build_services(
    config: HmoFinderConfig | None = None,
    store: PropertyStore | None = None,
    generator: RecordGenerator | None = None,
    seed_source: RecordGenerator | None = None,
) -> Services:
    """Wire the store, generators and search pipeline together.

    Parameters
    ----------
    config : HmoFinderConfig | None
        Application configuration. Defaults to ``HmoFinderConfig()``.
    store : PropertyStore | None
        Existing store to serve. A new empty store when omitted.
    generator : RecordGenerator | None
        Source for refreshes. Defaults to ``PropertyGenerator``.
    seed_source : RecordGenerator | None
        Source for the start-up seed. Defaults to ``CuratedPropertySource``.
    """
    config = config or HmoFinderConfig()
    store = store if store is not None else PropertyStore()
    refresh = RefreshService(
        store,
        generator or PropertyGenerator(seed=config.seed),
        config.refresh,
        seed_source=seed_source or CuratedPropertySource(seed=config.seed),
    )
    return Services(
        config=config,
        store=store,
        searches=SearchLog(config.max_logged_searches),
        search=PropertySearch(store, refill=refresh.refill_if_empty, policy=config.search),
        refresh=refresh,
        auto_refresher=AutoRefresher(refresh, config.refresh),
        article4=Article4Checker(seed=config.seed),
    )
