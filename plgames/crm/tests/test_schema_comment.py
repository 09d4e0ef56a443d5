import pytest

from crm.exceptions import Forbidden, NotFound
from crm.models import Comment

COMMENTS_QUERY = """
query ($issueId: ID!) {
  crmCommentsByIssue(issueId: $issueId) { content authorId author { name } }
}
"""

CREATE_COMMENT = """
mutation ($input: CreateCommentInput!) {
  createCrmComment(input: $input) { id content authorId issueId }
}
"""

UPDATE_COMMENT = """
mutation ($id: ID!, $input: UpdateCommentInput!) {
  updateCrmComment(id: $id, input: $input) { id content }
}
"""

DELETE_COMMENT = """
mutation ($id: ID!) {
  deleteCrmComment(id: $id) { id content }
}
"""


@pytest.mark.django_db
def test_list_comments(gql, member, outsider, issue, comment):
    result = gql(COMMENTS_QUERY, member, issueId=str(issue.id))
    assert result.errors is None
    assert result.data["crmCommentsByIssue"] == [
        {"content": "Looking into it", "authorId": str(member.pk), "author": {"name": "Ana Le"}},
    ]

    denied = gql(COMMENTS_QUERY, outsider, issueId=str(issue.id))
    assert isinstance(denied.errors[0].original_error, Forbidden)


@pytest.mark.django_db
def test_comment_author_is_always_the_caller(gql, teammate, issue):
    result = gql(CREATE_COMMENT, teammate, input={"issueId": str(issue.id), "content": "Repro attached"})

    assert result.errors is None
    assert result.data["createCrmComment"]["authorId"] == str(teammate.pk)
    assert result.data["createCrmComment"]["issueId"] == str(issue.id)


@pytest.mark.django_db
def test_author_updates_own_comment(gql, member, comment):
    result = gql(UPDATE_COMMENT, member, id=str(comment.id), input={"content": "Fixed in main"})

    assert result.errors is None
    assert result.data["updateCrmComment"]["content"] == "Fixed in main"


@pytest.mark.django_db
def test_other_member_cannot_update_comment(gql, teammate, comment):
    result = gql(UPDATE_COMMENT, teammate, id=str(comment.id), input={"content": "hijacked"})

    error = result.errors[0].original_error
    assert isinstance(error, Forbidden)
    assert str(error) == "Can only edit your own comments"
    comment.refresh_from_db()
    assert comment.content == "Looking into it"


@pytest.mark.django_db
def test_outsider_fails_membership_before_ownership(gql, outsider, comment):
    result = gql(DELETE_COMMENT, outsider, id=str(comment.id))

    assert str(result.errors[0].original_error) == "No access to this issue"


@pytest.mark.django_db
def test_missing_comment_is_not_found(gql, member):
    result = gql(DELETE_COMMENT, member, id="9f1d2c3b-4a5e-4f60-8a7b-1c2d3e4f5a6b")

    assert isinstance(result.errors[0].original_error, NotFound)


@pytest.mark.django_db
def test_author_deletes_comment(gql, member, teammate, comment):
    denied = gql(DELETE_COMMENT, teammate, id=str(comment.id))
    assert isinstance(denied.errors[0].original_error, Forbidden)

    result = gql(DELETE_COMMENT, member, id=str(comment.id))
    assert result.data["deleteCrmComment"]["id"] == str(comment.id)
    assert not Comment.objects.filter(id=comment.id).exists()
