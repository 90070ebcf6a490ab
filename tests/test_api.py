import json

import pytest
from httpx import ASGITransport, AsyncClient

from lineupfair.api import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


def _competitor(cid: str, team: str, hcp: float, **history) -> dict:
    return {"competitor_id": cid, "name": f"Player {cid}", "team": team, "handicap_index": hcp, **history}


def _worked_request() -> dict:
    return {
        "team_a": [_competitor("A1", "A", 20), _competitor("A2", "A", 10)],
        "team_b": [_competitor("B1", "B", 8), _competitor("B2", "B", 18)],
        "session": {"format_name": "singles", "match_count": 2},
    }


def _lopsided_matches() -> list[dict]:
    return [
        {"match_number": 1, "team_a": [_competitor("a0", "A", 0)], "team_b": [_competitor("b20", "B", 20)]},
        {"match_number": 2, "team_a": [_competitor("a20", "A", 20)], "team_b": [_competitor("b0", "B", 0)]},
    ]


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_formats(client: AsyncClient):
    resp = await client.get("/formats")
    assert resp.status_code == 200
    by_name = {item["name"]: item for item in resp.json()}
    assert by_name["singles"]["players_per_team"] == 1
    assert by_name["fourball"]["players_per_team"] == 2


@pytest.mark.anyio
async def test_balance_worked_example(client: AsyncClient):
    resp = await client.post("/balance", json=_worked_request())
    assert resp.status_code == 200
    payload = resp.json()

    lineup = [
        ([p["competitor_id"] for p in match["team_a"]], [p["competitor_id"] for p in match["team_b"]])
        for match in payload["matches"]
    ]
    assert lineup == [(["A2"], ["B1"]), (["A1"], ["B2"])]
    assert payload["fairness"]["overall"] == 94
    assert payload["fairness"]["handicap_balance"] == 90
    assert payload["fairness"]["warnings"] == []
    assert [m["handicap_gap"] for m in payload["fairness"]["matches"]] == [pytest.approx(2), pytest.approx(2)]
    assert payload["refinement"]["swaps_applied"] == 0
    assert payload["refinement"]["stop_reason"] == "target_reached"
    assert payload["unassigned"] == {"team_a": [], "team_b": []}


@pytest.mark.anyio
async def test_balance_reports_unassigned(client: AsyncClient):
    body = _worked_request()
    body["session"] = {"players_per_team": 1, "match_count": 1}
    resp = await client.post("/balance", json=body)
    assert resp.status_code == 200
    payload = resp.json()
    assert [p["competitor_id"] for p in payload["unassigned"]["team_a"]] == ["A1"]
    assert [p["competitor_id"] for p in payload["unassigned"]["team_b"]] == ["B2"]


@pytest.mark.anyio
async def test_balance_rejects_wrong_team(client: AsyncClient):
    body = _worked_request()
    body["team_a"].append(_competitor("B9", "B", 5))
    resp = await client.post("/balance", json=body)
    assert resp.status_code == 400
    assert "B9" in resp.json()["detail"]


@pytest.mark.anyio
async def test_balance_rejects_duplicate_ids(client: AsyncClient):
    body = _worked_request()
    body["team_b"][0]["competitor_id"] = "A1"
    resp = await client.post("/balance", json=body)
    assert resp.status_code == 400
    assert "Duplicate" in resp.json()["detail"]


@pytest.mark.anyio
async def test_balance_rejects_bad_session(client: AsyncClient):
    body = _worked_request()
    body["session"] = {"format_name": "scramble", "match_count": 2}
    resp = await client.post("/balance", json=body)
    assert resp.status_code == 400

    body["session"] = {"players_per_team": 3, "match_count": 2}
    resp = await client.post("/balance", json=body)
    assert resp.status_code == 422

    body["session"] = {"match_count": 2}
    resp = await client.post("/balance", json=body)
    assert resp.status_code == 400

    body["session"] = {"format_name": "fourball", "players_per_team": 1, "match_count": 2}
    resp = await client.post("/balance", json=body)
    assert resp.status_code == 400


@pytest.mark.anyio
async def test_fairness_endpoint(client: AsyncClient):
    resp = await client.post("/fairness", json={"matches": _lopsided_matches()})
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["overall"] == 40
    assert payload["warnings"] == ["2 match(es) have handicap difference > 10"]
    assert [m["fairness"] for m in payload["matches"]] == [40, 40]


@pytest.mark.anyio
async def test_fairness_empty_lineup(client: AsyncClient):
    resp = await client.post("/fairness", json={"matches": []})
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["overall"] == 0
    assert payload["warnings"] == ["No players assigned yet"]


@pytest.mark.anyio
async def test_fairness_custom_weights(client: AsyncClient):
    body = {
        "matches": _lopsided_matches(),
        "weights": {"handicap": 0.0, "experience": 0.5, "win_rate": 0.5},
    }
    resp = await client.post("/fairness", json=body)
    assert resp.status_code == 200
    assert resp.json()["overall"] == 100


@pytest.mark.anyio
async def test_suggestions_endpoint(client: AsyncClient):
    resp = await client.post("/suggestions", json={"matches": _lopsided_matches()})
    assert resp.status_code == 200
    suggestions = resp.json()
    assert [(s["side"], s["improvement"]) for s in suggestions] == [("A", 60), ("B", 60)]
    assert suggestions[0]["player"]["competitor_id"] == "a0"
    assert suggestions[0]["swap_with"]["competitor_id"] == "a20"


@pytest.mark.anyio
async def test_suggestions_reject_misplaced_players(client: AsyncClient):
    matches = _lopsided_matches()
    matches[0]["team_a"], matches[0]["team_b"] = matches[0]["team_b"], matches[0]["team_a"]
    resp = await client.post("/suggestions", json={"matches": matches})
    assert resp.status_code == 400


@pytest.mark.anyio
@pytest.mark.parametrize("token", ["Infinity", "-Infinity", "NaN"])
async def test_non_finite_handicap_is_rejected(client: AsyncClient, token: str):
    body = json.dumps({"matches": _lopsided_matches()}).replace('"handicap_index": 0', f'"handicap_index": {token}', 1)
    assert token in body
    resp = await client.post("/fairness", content=body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 422

    request = _worked_request()
    request["team_b"][0]["handicap_index"] = float("nan")
    resp = await client.post(
        "/balance",
        content=json.dumps(request),
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 422
