import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from expense_tracker.crud import budget as budget_crud
from expense_tracker.main import create_app


async def _add_category(client, name, type_="expense"):
    response = await client.post("/api/categories", json={"name": name, "type": type_})
    return int(response.text.rsplit(":", 1)[1])


async def test_first_budget_is_created(client, food_category):
    response = await client.post("/api/budgets", json={"categoryId": food_category, "amount": 100})

    assert response.status_code == 201
    assert response.text == "Budget Created Successfully with ID: 1"


async def test_second_budget_for_category_updates_amount(client, food_category):
    await client.post("/api/budgets", json={"categoryId": food_category, "amount": 100})

    response = await client.post("/api/budgets", json={"categoryId": food_category, "amount": 150})

    assert response.status_code == 200
    assert response.text == "Budget Updated Successfully"
    assert (await client.get("/api/budgets")).json() == [{"categoryLabel": "Food", "amount": 150.0}]


async def test_repeated_updates_keep_one_row_per_category(client, food_category):
    rent = await _add_category(client, "Rent")
    for amount in (10, 20, 30):
        await client.post("/api/budgets", json={"categoryId": food_category, "amount": amount})
    await client.post("/api/budgets", json={"categoryId": rent, "amount": 800})

    budgets = (await client.get("/api/budgets")).json()

    assert sorted(budgets, key=lambda b: b["categoryLabel"]) == [
        {"categoryLabel": "Food", "amount": 30.0},
        {"categoryLabel": "Rent", "amount": 800.0},
    ]


async def test_list_budgets_projects_category_name(client):
    await _add_category(client, "Groceries")
    await _add_category(client, "Travel")
    await client.post("/api/budgets", json={"categoryId": 2, "amount": 250})

    budgets = (await client.get("/api/budgets")).json()

    assert budgets == [{"categoryLabel": "Travel", "amount": 250.0}]


async def test_budget_for_unknown_category_is_accepted_by_default(client):
    response = await client.post("/api/budgets", json={"categoryId": 77, "amount": 5})

    assert response.status_code == 201
    # The inner join hides budgets without a category
    assert (await client.get("/api/budgets")).json() == []


async def test_delete_budget_by_category_name(client, food_category):
    rent = await _add_category(client, "Rent")
    await client.post("/api/budgets", json={"categoryId": food_category, "amount": 100})
    await client.post("/api/budgets", json={"categoryId": rent, "amount": 800})

    response = await client.delete("/api/budgets/Food")

    assert response.status_code == 200
    assert response.text == "Budget for category 'Food' deleted successfully."
    assert (await client.get("/api/budgets")).json() == [{"categoryLabel": "Rent", "amount": 800.0}]


async def test_delete_budget_for_unknown_name_succeeds_without_effect(client, food_category):
    await client.post("/api/budgets", json={"categoryId": food_category, "amount": 100})

    response = await client.delete("/api/budgets/Nope")

    assert response.status_code == 200
    assert response.text == "Budget for category 'Nope' deleted successfully."
    assert (await client.get("/api/budgets")).json() == [{"categoryLabel": "Food", "amount": 100.0}]


async def test_delete_budget_by_name_with_spaces(client):
    category_id = await _add_category(client, "Eating Out")
    await client.post("/api/budgets", json={"categoryId": category_id, "amount": 60})

    response = await client.delete("/api/budgets/Eating%20Out")

    assert response.status_code == 200
    assert (await client.get("/api/budgets")).json() == []


async def test_budget_can_be_recreated_after_delete(client, food_category):
    await client.post("/api/budgets", json={"categoryId": food_category, "amount": 100})
    await client.delete("/api/budgets/Food")

    response = await client.post("/api/budgets", json={"categoryId": food_category, "amount": 40})

    assert response.status_code == 201
    assert response.text == "Budget Created Successfully with ID: 2"


async def test_delete_all_budgets(client, food_category):
    rent = await _add_category(client, "Rent")
    await client.post("/api/budgets", json={"categoryId": food_category, "amount": 100})
    await client.post("/api/budgets", json={"categoryId": rent, "amount": 800})

    response = await client.delete("/api/budgets")

    assert response.status_code == 200
    assert response.text == "All budgets deleted successfully."
    assert (await client.get("/api/budgets")).json() == []


async def test_delete_all_budgets_on_empty_store(client):
    response = await client.delete("/api/budgets")

    assert response.status_code == 200
    assert (await client.get("/api/budgets")).json() == []


@pytest_asyncio.fixture
async def strict_client(settings, engine):
    strict = settings.model_copy(update={"BUDGET_REQUIRE_CATEGORY": True})
    app = create_app(strict, engine)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


async def test_strict_mode_rejects_budget_for_unknown_category(strict_client):
    response = await strict_client.post("/api/budgets", json={"categoryId": 77, "amount": 5})

    assert response.status_code == 400
    assert response.text == "Invalid category ID"


async def test_strict_mode_accepts_known_category(strict_client):
    category_id = await _add_category(strict_client, "Food")

    created = await strict_client.post("/api/budgets", json={"categoryId": category_id, "amount": 5})
    updated = await strict_client.post("/api/budgets", json={"categoryId": category_id, "amount": 6})

    assert created.status_code == 201
    assert updated.status_code == 200


async def test_budget_without_category_is_rejected_as_plain_text(client):
    response = await client.post("/api/budgets", json={"amount": 5})

    assert response.status_code == 422
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Invalid request: body.categoryId Field required"
    assert (await client.get("/api/budgets")).json() == []


async def test_set_budget_without_upsert_support_maps_to_500(client, food_category, monkeypatch):
    monkeypatch.delitem(budget_crud.UPSERT_INSERTS, "sqlite")

    response = await client.post("/api/budgets", json={"categoryId": food_category, "amount": 5})

    assert response.status_code == 500
    assert response.text == "Error creating/updating budget"
