from sqlalchemy import func

from suggestion_box.application.services.upvote_service import remove_upvote, upvote, upvote_status
from suggestion_box.core.exceptions import DuplicateUpvoteException
from suggestion_box.domain.models.upvote import Upvote
from suggestion_box.infrastructure.repositories.upvote_repository import SQLAlchemyUpvoteRepository

import pytest


def _upvote_rows(db, suggestion_id, user_id=None):
    query = db.query(func.count(Upvote.id)).filter(Upvote.suggestion_id == suggestion_id)
    if user_id is not None:
        query = query.filter(Upvote.user_id == user_id)
    return query.scalar()


def test_upvote_then_duplicate_is_rejected(client, member, member_headers, make_suggestion, db):
    suggestion = make_suggestion(member_headers)
    url = f"/api/suggestions/{suggestion['id']}/upvote"

    first = client.post(url, headers=member_headers)
    assert first.status_code == 200
    assert first.json() == {"success": True, "upvoteCount": 1}

    second = client.post(url, headers=member_headers)
    assert second.status_code == 400
    assert second.json()["error"] == "Already upvoted"

    assert client.get(url, headers=member_headers).json() == {"upvoteCount": 1, "hasUpvoted": True}
    assert _upvote_rows(db, suggestion["id"], member.id) == 1


def test_remove_upvote_is_idempotent(client, member_headers, other_headers, make_suggestion):
    suggestion = make_suggestion(member_headers)
    url = f"/api/suggestions/{suggestion['id']}/upvote"
    client.post(url, headers=member_headers)
    client.post(url, headers=other_headers)

    removed = client.delete(url, headers=member_headers)
    assert removed.status_code == 200
    assert removed.json() == {"success": True, "upvoteCount": 1, "removed": True, "message": "Upvote removed"}

    again = client.delete(url, headers=member_headers)
    assert again.status_code == 200
    assert again.json() == {
        "success": True,
        "upvoteCount": 1,
        "removed": False,
        "message": "Upvote was already removed",
    }

    assert client.get(url, headers=member_headers).json() == {"upvoteCount": 1, "hasUpvoted": False}
    assert client.get(url, headers=other_headers).json() == {"upvoteCount": 1, "hasUpvoted": True}


def test_toggle_sequence_keeps_one_row_per_user(client, member, member_headers, make_suggestion, db):
    suggestion = make_suggestion(member_headers)
    url = f"/api/suggestions/{suggestion['id']}/upvote"

    for method in ("post", "post", "delete", "delete", "post", "delete", "post"):
        getattr(client, method)(url, headers=member_headers)
        rows = _upvote_rows(db, suggestion["id"], member.id)
        assert rows <= 1
        status = client.get(url, headers=member_headers).json()
        assert status["hasUpvoted"] is (rows == 1)

    assert client.get(url, headers=member_headers).json() == {"upvoteCount": 1, "hasUpvoted": True}


def test_upvote_missing_suggestion(client, member_headers):
    response = client.post("/api/suggestions/999/upvote", headers=member_headers)
    assert response.status_code == 404


def test_upvote_requires_session(client, member_headers, make_suggestion):
    suggestion = make_suggestion(member_headers)
    assert client.post(f"/api/suggestions/{suggestion['id']}/upvote").status_code == 401


def test_concurrent_duplicate_is_absorbed(member, db, member_headers, make_suggestion, monkeypatch):
    suggestion = make_suggestion(member_headers)
    repo = SQLAlchemyUpvoteRepository(db)
    assert upvote(repo, suggestion["id"], member.id).upvote_count == 1

    # The second request passed its pre-check before the first one committed
    monkeypatch.setattr(repo, "get_for_user", lambda suggestion_id, user_id: None)
    result = upvote(repo, suggestion["id"], member.id)

    assert result.success is True
    assert result.upvote_count == 1
    assert result.message == "Already upvoted"
    assert _upvote_rows(db, suggestion["id"], member.id) == 1


def test_concurrent_requests_over_http_count_once(client, member, member_headers, make_suggestion, db, monkeypatch):
    suggestion = make_suggestion(member_headers)
    url = f"/api/suggestions/{suggestion['id']}/upvote"

    # Both requests see "not upvoted yet"; only the unique constraint decides
    monkeypatch.setattr(SQLAlchemyUpvoteRepository, "get_for_user", lambda self, suggestion_id, user_id: None)
    responses = [client.post(url, headers=member_headers) for _ in range(2)]

    assert [r.status_code for r in responses] == [200, 200]
    assert [r.json()["upvoteCount"] for r in responses] == [1, 1]
    assert _upvote_rows(db, suggestion["id"], member.id) == 1


def test_service_rejects_precheck_duplicate(member, db, member_headers, make_suggestion):
    suggestion = make_suggestion(member_headers)
    repo = SQLAlchemyUpvoteRepository(db)
    upvote(repo, suggestion["id"], member.id)

    with pytest.raises(DuplicateUpvoteException):
        upvote(repo, suggestion["id"], member.id)

    assert upvote_status(repo, suggestion["id"], member.id).has_upvoted is True
    assert remove_upvote(repo, suggestion["id"], member.id).removed is True
    assert upvote_status(repo, suggestion["id"], member.id).upvote_count == 0
