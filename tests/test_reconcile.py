import asyncio

import pytest

from fflclient.config import SeasonEras
from fflclient.errors import NotFoundError, ReconciliationImpossible, UpstreamError
from fflclient.mapping import ConstructionParams
from fflclient.models import PlayerSeason
from fflclient.reconcile import SeasonReconciler, SeasonSources, SourceAvailability, merge_player_seasons
from tests.payloads import PLAYER_ID, draft_transaction, player_season_document, waiver_transaction


def _season(season_id, transactions, stat_value=2.3):
    document = player_season_document(season=season_id)
    document["transactions"] = transactions
    document["player"]["stats"][1]["appliedStats"]["24"] = stat_value
    return PlayerSeason.from_response(document, ConstructionParams(season_id=season_id))


class RecordingFetch:
    def __init__(self, result=None, error=None, delay=0.0):
        self.result = result
        self.error = error
        self.delay = delay
        self.calls = []

    async def __call__(self, season_id, player_id):
        self.calls.append((season_id, player_id))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.result


def test_availability_covers_all_combinations():
    modern = _season(2020, [draft_transaction()])
    historical = _season(2020, [waiver_transaction()])

    assert SeasonSources(2020, PLAYER_ID, modern, historical).availability is SourceAvailability.BOTH
    assert SeasonSources(2020, PLAYER_ID, modern=modern).availability is SourceAvailability.MODERN_ONLY
    assert SeasonSources(2020, PLAYER_ID, historical=historical).availability is SourceAvailability.HISTORICAL_ONLY
    assert SeasonSources(2020, PLAYER_ID).availability is SourceAvailability.NEITHER


def test_single_source_is_returned_unchanged():
    modern = _season(2020, [draft_transaction()])
    historical = _season(2016, [waiver_transaction()])

    assert merge_player_seasons(SeasonSources(2020, PLAYER_ID, modern=modern)) is modern
    assert merge_player_seasons(SeasonSources(2016, PLAYER_ID, historical=historical)) is historical


def test_both_sources_after_pricing_threshold_take_modern_transactions():
    modern = _season(2019, [draft_transaction()], stat_value=50.0)
    historical = _season(2019, [waiver_transaction()])

    merged = merge_player_seasons(SeasonSources(2019, PLAYER_ID, modern, historical))

    assert merged.transactions == modern.transactions
    assert merged.season_actual == historical.season_actual
    assert merged.season_actual.points.stats[24] == 2.3
    # Inputs are left untouched.
    assert historical.transactions[0].action == "DROP"


def test_both_sources_before_pricing_threshold_keep_historical_transactions():
    modern = _season(2018, [draft_transaction()])
    historical = _season(2018, [waiver_transaction()])

    merged = merge_player_seasons(SeasonSources(2018, PLAYER_ID, modern, historical))

    assert merged.transactions == historical.transactions


def test_merge_is_idempotent():
    sources = SeasonSources(2020, PLAYER_ID, _season(2020, [draft_transaction()]), _season(2020, None))

    assert merge_player_seasons(sources) == merge_player_seasons(sources)


def test_merge_with_no_sources_is_an_error():
    with pytest.raises(ReconciliationImpossible) as exc_info:
        merge_player_seasons(SeasonSources(2020, PLAYER_ID))
    assert exc_info.value.player_id == PLAYER_ID


def test_thresholds_are_configurable():
    eras = SeasonEras(historical_only_through=2010, priced_transactions_from=2021)
    modern = _season(2020, [draft_transaction()])
    historical = _season(2020, [waiver_transaction()])

    merged = merge_player_seasons(SeasonSources(2020, PLAYER_ID, modern, historical), eras)

    assert merged.transactions == historical.transactions


@pytest.mark.anyio
async def test_historical_era_never_queries_modern_backend():
    historical = _season(2017, [waiver_transaction()])
    fetch_modern = RecordingFetch(result=_season(2017, []))
    fetch_historical = RecordingFetch(result=historical)

    result = await SeasonReconciler(fetch_modern, fetch_historical).reconcile(2017, PLAYER_ID)

    assert result is historical
    assert fetch_modern.calls == []
    assert fetch_historical.calls == [(2017, PLAYER_ID)]


@pytest.mark.anyio
async def test_historical_era_not_found_propagates():
    reconciler = SeasonReconciler(RecordingFetch(), RecordingFetch(error=NotFoundError("history")))

    with pytest.raises(NotFoundError):
        await reconciler.reconcile(2015, PLAYER_ID)


@pytest.mark.anyio
async def test_historical_era_missing_player_is_an_error():
    reconciler = SeasonReconciler(RecordingFetch(), RecordingFetch(result=None))

    with pytest.raises(ReconciliationImpossible):
        await reconciler.reconcile(2015, PLAYER_ID)


@pytest.mark.anyio
async def test_current_season_historical_not_found_is_absorbed():
    modern = _season(2024, [draft_transaction()])
    fetch_modern = RecordingFetch(result=modern)
    fetch_historical = RecordingFetch(error=NotFoundError("history"))

    result = await SeasonReconciler(fetch_modern, fetch_historical).reconcile(2024, PLAYER_ID)

    assert result is modern
    assert fetch_historical.calls == [(2024, PLAYER_ID)]


@pytest.mark.anyio
async def test_other_historical_failures_propagate():
    reconciler = SeasonReconciler(
        RecordingFetch(result=_season(2024, [])),
        RecordingFetch(error=UpstreamError(500, "history")),
    )

    with pytest.raises(UpstreamError):
        await reconciler.reconcile(2024, PLAYER_ID)


@pytest.mark.anyio
async def test_modern_failure_propagates():
    reconciler = SeasonReconciler(
        RecordingFetch(error=UpstreamError(503, "modern")),
        RecordingFetch(result=_season(2024, [])),
    )

    with pytest.raises(UpstreamError) as exc_info:
        await reconciler.reconcile(2024, PLAYER_ID)
    assert exc_info.value.status_code == 503


@pytest.mark.anyio
async def test_fetches_run_concurrently():
    historical_started = asyncio.Event()
    modern = _season(2020, [draft_transaction()])
    historical = _season(2020, [waiver_transaction()])

    async def fetch_modern(season_id, player_id):
        # Only completes if the historical fetch starts while this one is pending.
        await asyncio.wait_for(historical_started.wait(), timeout=1.0)
        return modern

    async def fetch_historical(season_id, player_id):
        historical_started.set()
        return historical

    sources = await SeasonReconciler(fetch_modern, fetch_historical).gather(2020, PLAYER_ID)

    assert sources.availability is SourceAvailability.BOTH
    assert sources.modern is modern
    assert sources.historical is historical


@pytest.mark.anyio
async def test_both_backends_empty_is_an_error():
    reconciler = SeasonReconciler(RecordingFetch(result=None), RecordingFetch(error=NotFoundError("history")))

    with pytest.raises(ReconciliationImpossible):
        await reconciler.reconcile(2024, PLAYER_ID)
