import httpx
import respx
from httpx import Response

PLACES_URL = "http://places.test/api/getPlaces"

PLACES = [
    {"id": 10, "name": "Sagrada Família", "rating": 4.8, "address": "C/ de Mallorca, 401"},
    {"id": 20, "name": "Park Güell", "description": "Parque de Gaudí"},
    {"name": "Casa Batlló"},
]


def _mock_places(places=PLACES):
    return respx.get(PLACES_URL).mock(return_value=Response(200, json={"places": places}))


@respx.mock
async def test_root_mounts_home_and_loads(client):
    route = _mock_places()

    resp = await client.get("/")

    assert resp.status_code == 200
    data = resp.json()
    assert data["route"] == "Home"
    assert data["depth"] == 1
    assert data["view"]["status"] == "loaded"
    assert [i["title"] for i in data["view"]["items"]] == [
        "Sagrada Família", "Park Güell", "Casa Batlló",
    ]
    assert [i["key"] for i in data["view"]["items"]] == ["id:10", "id:20", "idx:2"]
    assert route.call_count == 1


@respx.mock
async def test_list_places_default_params(client):
    route = _mock_places()

    resp = await client.get("/lugares")

    assert resp.status_code == 200
    data = resp.json()
    assert data["subtitle"] == "Barcelona"
    assert len(data["items"]) == 3
    params = route.calls.last.request.url.params
    assert params["location"] == "Barcelona"
    assert params["category"] == "attraction"


@respx.mock
async def test_list_places_reloads_only_on_param_change(client):
    route = _mock_places()

    await client.get("/lugares")
    await client.get("/lugares")
    await client.get("/lugares", params={"location": "Madrid"})

    assert route.call_count == 2
    assert route.calls.last.request.url.params["location"] == "Madrid"


@respx.mock
async def test_list_places_without_places_field_is_empty(client):
    respx.get(PLACES_URL).mock(return_value=Response(200, json={"message": "nothing"}))

    data = (await client.get("/lugares")).json()

    assert data["status"] == "loaded"
    assert data["items"] == []
    assert data["empty"]["title"] == "No se encontraron lugares turísticos"
    assert data["error"] is None


@respx.mock
async def test_network_failure_then_retry_recovers(client):
    route = respx.get(PLACES_URL)
    route.side_effect = [
        httpx.ConnectError("offline"),
        Response(200, json={"places": PLACES}),
    ]

    data = (await client.get("/lugares")).json()
    assert data["status"] == "failed"
    assert data["items"] == []
    assert data["error"]["message"] == (
        "Error al cargar los lugares. Por favor, intenta nuevamente."
    )

    data = (await client.post("/lugares/reintentar")).json()
    assert data["status"] == "loaded"
    assert len(data["items"]) == 3


@respx.mock
async def test_select_place_pushes_details(client):
    _mock_places()
    await client.get("/lugares")

    resp = await client.post("/lugares/id:10/seleccionar")

    assert resp.status_code == 200
    data = resp.json()
    assert data["route"] == "PlaceDetails"
    assert data["transition"] == "slide_from_right"
    assert data["depth"] == 2
    assert data["view"]["name"] == "Sagrada Família"
    assert data["view"]["place"]["id"] == "10"


@respx.mock
async def test_select_unknown_place(client):
    _mock_places()
    await client.get("/lugares")

    resp = await client.post("/lugares/id:99/seleccionar")

    assert resp.status_code == 404


@respx.mock
async def test_select_place_without_id_next_to_matching_id(client):
    _mock_places([{"id": "1", "name": "A"}, {"name": "B"}])
    await client.get("/lugares")

    data = (await client.post("/lugares/idx:1/seleccionar")).json()

    assert data["view"]["name"] == "B"


@respx.mock
async def test_select_place_with_slash_in_id(client):
    _mock_places([{"id": "poi/42", "name": "Casa Vicens"}])
    await client.get("/lugares")

    data = (await client.post("/lugares/id:poi/42/seleccionar")).json()

    assert data["view"]["name"] == "Casa Vicens"


@respx.mock
async def test_navigation_state_is_shared_by_all_clients(client):
    from lugares.main import app

    _mock_places()
    await client.get("/lugares")
    await client.post("/lugares/id:10/seleccionar")

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as other:
        data = (await other.get("/")).json()

    assert data["route"] == "PlaceDetails"
