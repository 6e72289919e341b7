import pytest

from suggestion_box.application.services.comment_service import remove_comment
from suggestion_box.core.exceptions import EntityNotFoundException
from suggestion_box.domain.models.comment import Comment
from suggestion_box.domain.models.user import User
from suggestion_box.infrastructure.repositories.comment_repository import SQLAlchemyCommentRepository
from suggestion_box.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def _post_comment(client, suggestion_id, headers, content, internal=False):
    return client.post(
        f"/api/suggestions/{suggestion_id}/comments",
        json={"content": content, "isInternal": internal},
        headers=headers,
    )


def test_internal_comments_hidden_from_members(client, member_headers, admin_headers, make_suggestion):
    suggestion = make_suggestion(member_headers)
    public = _post_comment(client, suggestion["id"], admin_headers, "Thanks, we are looking into it")
    internal = _post_comment(client, suggestion["id"], admin_headers, "Needs budget approval", internal=True)
    assert public.status_code == 201
    assert internal.status_code == 201
    assert public.json()["message"] == "Comment created successfully"

    url = f"/api/suggestions/{suggestion['id']}/comments"
    member_view = client.get(url, headers=member_headers).json()["comments"]
    assert [c["content"] for c in member_view] == ["Thanks, we are looking into it"]

    admin_view = client.get(url, headers=admin_headers).json()["comments"]
    assert [c["content"] for c in admin_view] == ["Thanks, we are looking into it", "Needs budget approval"]
    assert [c["isInternal"] for c in admin_view] == [False, True]
    assert admin_view[0]["author"]["name"] == "Admin"


def test_only_admins_can_comment(client, member_headers, make_suggestion):
    suggestion = make_suggestion(member_headers)
    assert _post_comment(client, suggestion["id"], member_headers, "Me too").status_code == 403
    assert _post_comment(client, suggestion["id"], {}, "Me too").status_code == 401


def test_comment_content_is_validated(client, member_headers, admin_headers, make_suggestion):
    suggestion = make_suggestion(member_headers)
    assert _post_comment(client, suggestion["id"], admin_headers, "x" * 1001).status_code == 400
    assert _post_comment(client, suggestion["id"], admin_headers, "   ").status_code == 400


def test_comment_on_missing_suggestion(client, admin_headers):
    assert _post_comment(client, 999, admin_headers, "Hello").status_code == 404


def test_delete_requires_comment_id(client, member_headers, make_suggestion):
    suggestion = make_suggestion(member_headers)
    response = client.delete(f"/api/suggestions/{suggestion['id']}/comments", headers=member_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "Comment ID is required"


def test_delete_missing_comment(client, admin_headers, member_headers, make_suggestion):
    suggestion = make_suggestion(member_headers)
    response = client.delete(
        f"/api/suggestions/{suggestion['id']}/comments", params={"commentId": 999}, headers=admin_headers
    )
    assert response.status_code == 404
    assert response.json()["error"] == "Comment not found"


def test_non_author_member_cannot_delete(client, member_headers, admin_headers, make_suggestion):
    suggestion = make_suggestion(member_headers)
    comment = _post_comment(client, suggestion["id"], admin_headers, "Public answer").json()["comment"]

    response = client.delete(
        f"/api/suggestions/{suggestion['id']}/comments",
        params={"commentId": comment["id"]},
        headers=member_headers,
    )
    assert response.status_code == 403


def test_author_can_delete_own_comment(client, db, member, member_headers, admin_headers, make_suggestion):
    suggestion = make_suggestion(member_headers)
    # A member-authored comment, e.g. left behind after a role change
    own = Comment(suggestion_id=suggestion["id"], author_id=member.id, content="Mine")
    db.add(own)
    db.commit()
    own_id = own.id

    response = client.delete(
        f"/api/suggestions/{suggestion['id']}/comments",
        params={"commentId": own_id},
        headers=member_headers,
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Comment deleted successfully"}
    assert db.query(Comment).filter(Comment.id == own_id).count() == 0


def test_admin_can_delete_any_comment(client, member_headers, admin_headers, make_suggestion):
    suggestion = make_suggestion(member_headers)
    comment = _post_comment(client, suggestion["id"], admin_headers, "Remove me", internal=True).json()["comment"]

    url = f"/api/suggestions/{suggestion['id']}/comments"
    assert client.delete(url, params={"commentId": comment["id"]}, headers=admin_headers).status_code == 200
    assert client.get(url, headers=admin_headers).json()["comments"] == []


def test_remove_by_unknown_caller_is_not_found(db, member, member_headers, make_suggestion):
    suggestion = make_suggestion(member_headers)
    comment = Comment(suggestion_id=suggestion["id"], author_id=member.id, content="Still here")
    db.add(comment)
    db.commit()
    comment_id = comment.id

    with pytest.raises(EntityNotFoundException) as exc_info:
        remove_comment(
            SQLAlchemyCommentRepository(db, Comment),
            SQLAlchemyUserRepository(db, User),
            comment_id,
            caller_id=999,
            caller_is_admin=False,
        )

    assert exc_info.value.message == "User not found"
    assert db.query(Comment).filter(Comment.id == comment_id).count() == 1
