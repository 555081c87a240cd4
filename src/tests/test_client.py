import httpx
import pytest

from src.client import (
    Alert,
    ApiError,
    CollectionApiClient,
    CollectionState,
    GameDetailsState,
    GameNotFoundError,
)
from src.client.collection_state import ValidationFailure, build_payload
from src.domain.models.game import GameStatus, completed_for, status_of


@pytest.fixture
def api(client):
    return CollectionApiClient(http=client)


@pytest.fixture
def offline_api():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    return CollectionApiClient(http=httpx.Client(base_url="http://api.test", transport=httpx.MockTransport(refuse)))


class TestCollectionApiClient:

    def test_crud_round_trip(self, api):
        created = api.create_game({"title": "Hades", "platform": "PC"})
        assert created["status"] == "CREATE ENTRY SUCCESFUL"

        assert api.get_game(created["id"])["title"] == "Hades"
        api.update_game(created["id"], {"title": "Hades", "completed": True})
        assert api.get_game(created["id"])["completed"] is True

        api.delete_game(created["id"])
        with pytest.raises(GameNotFoundError) as exc_info:
            api.get_game(created["id"])
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Game not found"

    def test_replace_and_delete_all(self, api):
        api.replace_all([{"title": "A"}, {"title": "B"}])
        assert len(api.list_games()) == 2

        api.delete_all()
        assert api.list_games() == []

    def test_validation_error_raises_api_error(self, api):
        with pytest.raises(ApiError) as exc_info:
            api.create_game({"title": ""})
        assert exc_info.value.status_code == 422

    def test_transport_failure(self, offline_api):
        with pytest.raises(ApiError) as exc_info:
            offline_api.list_games()
        assert exc_info.value.status_code is None


def _api_answering(status_code, content):
    def respond(request):
        return httpx.Response(status_code, content=content)

    return CollectionApiClient(http=httpx.Client(base_url="http://api.test", transport=httpx.MockTransport(respond)))


class TestMalformedResponses:

    def test_non_json_success_raises_api_error(self):
        api = _api_answering(200, b"<html>gateway</html>")

        with pytest.raises(ApiError) as exc_info:
            api.list_games()
        assert exc_info.value.status_code == 200

    def test_create_without_id_raises_api_error(self):
        api = _api_answering(200, b'{"status": "CREATE ENTRY SUCCESFUL"}')

        with pytest.raises(ApiError):
            api.create_game({"title": "Hades"})

    def test_state_alerts_instead_of_crashing(self):
        state = CollectionState(_api_answering(200, b"not json"))
        state.games = [{"id": 1, "title": "Hades"}]

        assert state.fetch() is False
        assert state.add_game({"title": "Celeste"}) is None
        assert state.games == [{"id": 1, "title": "Hades"}]
        assert [a.message for a in state.alerts] == ["Failed to load games", "Failed to add game"]


class TestCollectionState:

    def test_fetch_clears_loading(self, api):
        api.create_game({"title": "Hades"})
        state = CollectionState(api)
        assert state.loading is True

        assert state.fetch() is True
        assert state.loading is False
        assert [g["title"] for g in state.games] == ["Hades"]

    def test_refresh_reruns_list(self, api):
        state = CollectionState(api)
        state.fetch()
        api.create_game({"title": "Added elsewhere"})

        assert state.refresh() is True
        assert state.refreshing is False
        assert [g["title"] for g in state.games] == ["Added elsewhere"]

    def test_add_game_appends_with_server_id(self, api):
        state = CollectionState(api)
        state.fetch()

        created = state.add_game({"title": " Hades ", "platform": "PC", "status": "Completed"})

        assert created["id"] == api.list_games()[0]["id"]
        assert created["title"] == "Hades"
        assert created["completed"] is True
        assert state.games == [created]

    def test_blank_title_never_reaches_server(self, api):
        state = CollectionState(api)
        state.fetch()

        assert state.add_game({"title": "  "}) is None
        assert state.alerts == [Alert("Error", "Game title is required")]
        assert api.list_games() == []

    def test_update_game_replaces_mirror_entry(self, api):
        state = CollectionState(api)
        state.add_game({"title": "Hades"})
        state.add_game({"title": "Celeste"})
        game = dict(state.games[0], platform="Switch")

        assert state.update_game(game) is True
        assert state.games[0]["platform"] == "Switch"
        assert state.games[1]["title"] == "Celeste"
        assert api.get_game(game["id"])["platform"] == "Switch"

    def test_update_missing_game_keeps_mirror(self, api):
        state = CollectionState(api)
        state.add_game({"title": "Hades"})
        stale = dict(state.games[0])
        api.delete_all()

        assert state.update_game(dict(stale, title="Renamed")) is False
        assert state.games == [stale]
        assert state.alerts[-1] == Alert("Error", "Failed to update game")

    def test_delete_game_and_delete_all(self, api):
        state = CollectionState(api)
        first = state.add_game({"title": "A"})
        state.add_game({"title": "B"})

        assert state.delete_game(first["id"]) is True
        assert [g["title"] for g in state.games] == ["B"]

        assert state.delete_all() is True
        assert state.games == []
        assert state.alerts[-1] == Alert("Success", "All games have been deleted")

    def test_failures_leave_state_unchanged(self, offline_api):
        state = CollectionState(offline_api)
        state.games = [{"id": 1, "title": "Hades"}]

        assert state.fetch() is False
        assert state.loading is False
        assert state.delete_game(1) is False
        assert state.delete_all() is False
        assert state.add_game({"title": "Celeste"}) is None
        assert state.games == [{"id": 1, "title": "Hades"}]
        assert [a.message for a in state.alerts] == [
            "Failed to load games",
            "Failed to delete game",
            "Failed to delete all games",
            "Failed to add game",
        ]


class TestGameDetailsState:

    def test_load_existing_game(self, api):
        game_id = api.create_game({"title": "Hades", "hours_played": 5})["id"]
        details = GameDetailsState(api)

        assert details.load(game_id)["title"] == "Hades"
        assert details.not_found is False
        assert details.status is GameStatus.IN_PROGRESS

    def test_load_missing_game(self, api):
        details = GameDetailsState(api)

        assert details.load(404) is None
        assert details.not_found is True
        assert details.alerts == [Alert("Error", "Failed to load game details")]

    def test_load_transport_failure_alerts(self, offline_api):
        details = GameDetailsState(offline_api)

        assert details.load(1) is None
        assert details.alerts == [Alert("Error", "Failed to load game details")]


class TestGameStatus:
    # status 沒有對應的資料庫欄位：伺服器端忽略 status，由用戶端轉換為 completed

    def test_status_derived_from_persisted_fields(self):
        assert status_of({"completed": True}) is GameStatus.COMPLETED
        assert status_of({"hours_played": 3, "completed": False}) is GameStatus.IN_PROGRESS
        assert status_of({"hours_played": None, "completed": None}) is GameStatus.NOT_STARTED

    def test_client_status_takes_precedence(self):
        assert status_of({"status": "Not Started", "completed": True}) is GameStatus.NOT_STARTED

    def test_completed_for_status(self):
        assert completed_for(GameStatus.COMPLETED) is True
        assert completed_for(GameStatus.IN_PROGRESS) is False
        assert completed_for(None) is None

    def test_payload_maps_status_to_completed(self):
        payload = build_payload({"id": 3, "title": "Hades", "status": "In Progress"})

        assert payload == {
            "title": "Hades",
            "platform": None,
            "genre": None,
            "hours_played": None,
            "completed": False,
        }

    def test_payload_rejects_unknown_status(self):
        with pytest.raises(ValidationFailure):
            build_payload({"title": "Hades", "status": "Abandoned"})
