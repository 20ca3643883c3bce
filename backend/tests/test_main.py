"""Application-level behaviour: health, CORS, schema document, request errors."""
import pytest
from httpx import ASGITransport, AsyncClient

from employee_api.config import Settings
from employee_api.main import OPENAPI_URL, create_app


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_cors_allows_any_origin(client: AsyncClient) -> None:
    response = await client.get("/api/employees", headers={"Origin": "https://example.org"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_cors_preflight(client: AsyncClient) -> None:
    response = await client.options(
        "/api/employees/1",
        headers={
            "Origin": "https://example.org",
            "Access-Control-Request-Method": "DELETE",
            "Access-Control-Request-Headers": "X-Custom-Header",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "DELETE" in response.headers["access-control-allow-methods"]


@pytest.mark.asyncio
async def test_openapi_document_describes_employee_routes(client: AsyncClient) -> None:
    response = await client.get(OPENAPI_URL)

    assert response.status_code == 200
    document = response.json()
    assert document["info"]["title"] == "Employee Management API"
    assert document["info"]["version"] == "v1.0.0"
    assert set(document["paths"]["/api/employees"]) == {"get", "post"}
    assert set(document["paths"]["/api/employees/{id}"]) == {"get", "put", "delete"}
    assert document["paths"]["/api/employees"]["post"]["summary"] == "Create a new employee"
    assert document["info"]["description"].endswith("contract testing using Specmatic.")
    assert document["info"]["contact"] == {"name": "Development Team", "email": "dev@company.com"}
    assert "404" in document["paths"]["/api/employees/{id}"]["get"]["responses"]
    assert document["paths"]["/api/employees/{id}"]["get"]["parameters"][0]["name"] == "id"


@pytest.mark.asyncio
async def test_swagger_ui_served_at_root(client: AsyncClient) -> None:
    response = await client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]


@pytest.mark.asyncio
async def test_swagger_ui_can_be_disabled() -> None:
    app = create_app(settings=Settings(app_env="production", enable_swagger=False))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        ui_response = await client.get("/")
        schema_response = await client.get(OPENAPI_URL)

    assert ui_response.status_code == 404
    assert schema_response.status_code == 200


@pytest.mark.asyncio
async def test_malformed_json_is_a_client_error(client: AsyncClient) -> None:
    response = await client.post(
        "/api/employees",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"


@pytest.mark.asyncio
async def test_wrong_field_type_is_a_client_error(client: AsyncClient) -> None:
    response = await client.post(
        "/api/employees", json={"name": "Ann", "email": "a@x.com", "salary": "lots"}
    )

    assert response.status_code == 400
    assert response.json()["errors"]


@pytest.mark.asyncio
async def test_non_integer_id_is_a_client_error(client: AsyncClient) -> None:
    response = await client.get("/api/employees/abc")

    assert response.status_code == 400


def test_settings_unseeded_app_starts_empty() -> None:
    app = create_app(settings=Settings(seed_employees=False))

    assert app.state.store.list_all() == []


@pytest.mark.asyncio
async def test_openapi_document_lists_400_instead_of_422(client: AsyncClient) -> None:
    document = (await client.get(OPENAPI_URL)).json()

    for path, path_item in document["paths"].items():
        for method, operation in path_item.items():
            assert "422" not in operation["responses"], f"{method.upper()} {path}"
    assert "HTTPValidationError" not in document["components"]["schemas"]

    bad_request_schemas = [
        document["paths"]["/api/employees"]["post"]["responses"]["400"],
        document["paths"]["/api/employees/{id}"]["put"]["responses"]["400"],
        document["paths"]["/api/employees/{id}"]["get"]["responses"]["400"],
        document["paths"]["/api/employees/{id}"]["delete"]["responses"]["400"],
    ]
    for response in bad_request_schemas:
        schema_ref = response["content"]["application/json"]["schema"]["$ref"]
        assert schema_ref == "#/components/schemas/ValidationMessage"

    rejected = await client.post(
        "/api/employees", json={"name": "Ann", "email": "a@x.com", "salary": "lots"}
    )
    assert rejected.status_code == 400
    assert set(rejected.json()) == {"message", "errors"}
