from suggestion_box.domain.models.category import Category
from suggestion_box.domain.models.suggestion import Suggestion
from suggestion_box.infrastructure.repositories.category_repository import SQLAlchemyCategoryRepository


def test_list_sorted_by_name(client, admin_headers, member_headers):
    for name, color in (("Performance", "#F59E0B"), ("General", "#6B7280")):
        assert client.post("/api/categories", json={"name": name, "color": color}, headers=admin_headers).status_code == 201

    response = client.get("/api/categories", headers=member_headers)
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["General", "Performance"]
    assert response.json()[0]["isActive"] is True


def test_create_validates_fields(client, admin_headers):
    bad_color = client.post("/api/categories", json={"name": "Ops", "color": "red"}, headers=admin_headers)
    assert bad_color.status_code == 400

    long_name = client.post("/api/categories", json={"name": "x" * 51, "color": "#000000"}, headers=admin_headers)
    assert long_name.status_code == 400

    long_description = client.post(
        "/api/categories",
        json={"name": "Ops", "color": "#000000", "description": "x" * 201},
        headers=admin_headers,
    )
    assert long_description.status_code == 400


def test_create_duplicate_name_conflicts(client, admin_headers, category):
    response = client.post("/api/categories", json={"name": "Bug Report", "color": "#000000"}, headers=admin_headers)
    assert response.status_code == 409
    assert response.json()["error"] == "Category with this name already exists"


def test_create_requires_admin(client, member_headers):
    response = client.post("/api/categories", json={"name": "Ops", "color": "#000000"}, headers=member_headers)
    assert response.status_code == 403


def test_get_and_update(client, admin_headers, member_headers, category):
    fetched = client.get(f"/api/categories/{category.id}", headers=member_headers)
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Bug Report"

    updated = client.put(
        f"/api/categories/{category.id}",
        json={"description": "Things that are broken", "isActive": False},
        headers=admin_headers,
    ).json()
    assert updated["name"] == "Bug Report"
    assert updated["description"] == "Things that are broken"
    assert updated["isActive"] is False


def test_rename_onto_existing_name_conflicts(client, admin_headers, category):
    other = client.post("/api/categories", json={"name": "General", "color": "#6B7280"}, headers=admin_headers).json()

    response = client.put(f"/api/categories/{other['id']}", json={"name": "Bug Report"}, headers=admin_headers)
    assert response.status_code == 409

    same = client.put(f"/api/categories/{category.id}", json={"name": "Bug Report"}, headers=admin_headers)
    assert same.status_code == 200


def test_missing_category(client, admin_headers):
    assert client.get("/api/categories/999", headers=admin_headers).status_code == 404
    assert client.put("/api/categories/999", json={"name": "X"}, headers=admin_headers).status_code == 404
    assert client.delete("/api/categories/999", headers=admin_headers).status_code == 404


def test_delete_leaves_suggestions_uncategorized(client, db, admin_headers, member_headers, category, make_suggestion):
    suggestion = make_suggestion(member_headers)

    response = client.delete(f"/api/categories/{category.id}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Category deleted successfully"}

    fetched = client.get(f"/api/suggestions/{suggestion['id']}", headers=member_headers).json()["suggestion"]
    assert fetched["category"] is None
    db.expire_all()
    assert db.get(Suggestion, suggestion["id"]).category_id is None


def test_seed_default_categories(client, admin_headers, member_headers):
    assert client.post("/api/admin/seed-categories", headers=member_headers).status_code == 403

    response = client.post("/api/admin/seed-categories", headers=admin_headers)
    assert response.status_code == 201
    assert response.json()["categories"] == 6

    names = [c["name"] for c in client.get("/api/categories", headers=admin_headers).json()]
    assert "Feature Request" in names and "UI/UX" in names

    again = client.post("/api/admin/seed-categories", headers=admin_headers)
    assert again.status_code == 409


def test_concurrent_duplicate_name_conflicts(client, db, admin_headers, category, monkeypatch):
    # Both requests passed the name check before either one committed
    monkeypatch.setattr(SQLAlchemyCategoryRepository, "get_by_name", lambda self, name: None)

    response = client.post("/api/categories", json={"name": "Bug Report", "color": "#000000"}, headers=admin_headers)
    assert response.status_code == 409
    assert response.json()["error"] == "Category with this name already exists"
    assert db.query(Category).filter(Category.name == "Bug Report").count() == 1


def test_concurrent_rename_conflicts(client, db, admin_headers, category, monkeypatch):
    other = client.post("/api/categories", json={"name": "General", "color": "#6B7280"}, headers=admin_headers).json()
    monkeypatch.setattr(SQLAlchemyCategoryRepository, "get_by_name", lambda self, name: None)

    response = client.put(f"/api/categories/{other['id']}", json={"name": "Bug Report"}, headers=admin_headers)
    assert response.status_code == 409

    names = sorted(name for (name,) in db.query(Category.name).all())
    assert names == ["Bug Report", "General"]
