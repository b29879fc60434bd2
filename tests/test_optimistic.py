from animelog.core.enums import AnimeStatus
from animelog.core.optimistic import EntryState, OptimisticEntry, next_status
from animelog.schemas.anime import ActionResult, UserAnimeResponse


def entry(is_favorite=False, status=None):
    return UserAnimeResponse(id=1, mal_id=5, title="Title", is_favorite=is_favorite, status=status)


def test_next_status_clears_on_same_click():
    assert next_status(AnimeStatus.WATCHING, AnimeStatus.WATCHING) is None
    assert next_status(AnimeStatus.WATCHING, AnimeStatus.WATCHED) == AnimeStatus.WATCHED
    assert next_status(None, AnimeStatus.WATCHED) == AnimeStatus.WATCHED


def test_favorite_toggle_is_shown_before_confirmation():
    state = OptimisticEntry()

    assert state.toggle_favorite() is True
    assert state.is_pending
    assert state.current.is_favorite is True
    assert state.confirmed.is_favorite is False


def test_success_adopts_server_entry():
    state = OptimisticEntry()
    state.click_status(AnimeStatus.WATCHING)

    shown, kept = state.reconcile(ActionResult(success=True, entry=entry(status=AnimeStatus.WATCHING)))

    assert kept
    assert shown == EntryState(is_favorite=False, status=AnimeStatus.WATCHING)
    assert not state.is_pending


def test_failure_reverts_to_last_confirmed():
    state = OptimisticEntry(EntryState(is_favorite=True, status=AnimeStatus.WATCHED))
    sent = state.click_status(AnimeStatus.WATCHED)
    assert sent is None
    assert state.current.status is None

    shown, kept = state.reconcile(ActionResult(success=False, error="Not authenticated"))

    assert not kept
    assert shown == EntryState(is_favorite=True, status=AnimeStatus.WATCHED)
    assert state.current == shown


def test_absent_entry_means_not_in_list():
    state = OptimisticEntry(EntryState(is_favorite=True))
    state.toggle_favorite()

    shown, kept = state.reconcile(ActionResult(success=True, entry=None))

    assert kept
    assert shown == EntryState()


def test_client_round_trip_against_action_endpoints(client, auth_headers):
    state = OptimisticEntry()

    state.toggle_favorite()
    resp = client.post("/anime/5/favorite", json={"title": "Title"}, headers=auth_headers)
    shown, kept = state.reconcile(ActionResult.model_validate(resp.json()))
    assert kept
    assert shown == EntryState(is_favorite=True)

    sent = state.click_status(AnimeStatus.WATCHING)
    resp = client.put("/anime/5/status", json={"title": "Title", "status": sent.value}, headers=auth_headers)
    shown, kept = state.reconcile(ActionResult.model_validate(resp.json()))
    assert shown == EntryState(is_favorite=True, status=AnimeStatus.WATCHING)

    state.toggle_favorite()
    resp = client.post("/anime/5/favorite", json={"title": "Title"})
    assert resp.status_code == 401
    shown, kept = state.reconcile(ActionResult.model_validate(resp.json()))
    assert not kept
    assert shown == EntryState(is_favorite=True, status=AnimeStatus.WATCHING)
