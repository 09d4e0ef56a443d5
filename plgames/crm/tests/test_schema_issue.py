import pytest

from crm.exceptions import ConstraintViolation, Forbidden, NotFound
from crm.models import Issue, Project, Sprint

ISSUE_QUERY = """
query ($id: ID!) {
  crmIssue(id: $id) {
    id title status priority type projectId reporterId
    commentsCount timeLogsCount totalTimeSpent
    reporter { id name }
    comments { content }
    timeLogs { timeSpent }
    subtasks { title }
  }
}
"""

ISSUES_QUERY = """
query ($projectId: ID!, $status: IssueStatus, $assigneeId: ID, $type: IssueType) {
  crmIssuesByProject(projectId: $projectId, status: $status, assigneeId: $assigneeId, type: $type) { title }
}
"""

STATUS_COUNTS = """
query ($projectId: ID!) {
  crmIssueStatusCounts(projectId: $projectId) { status count }
}
"""

CREATE_ISSUE = """
mutation ($input: CreateIssueInput!) {
  createCrmIssue(input: $input) { id title status type reporterId sprintId parentId }
}
"""

UPDATE_ISSUE = """
mutation ($id: ID!, $input: UpdateIssueInput!) {
  updateCrmIssue(id: $id, input: $input) { id title status priority sprintId }
}
"""

DELETE_ISSUE = """
mutation ($id: ID!) {
  deleteCrmIssue(id: $id) { id title }
}
"""


@pytest.mark.django_db
def test_member_reads_full_issue(gql, member, issue, comment, time_log):
    result = gql(ISSUE_QUERY, member, id=str(issue.id))

    assert result.errors is None
    data = result.data["crmIssue"]
    assert data["title"] == "Login fails"
    assert data["status"] == "BACKLOG"
    assert data["type"] == "TASK"
    assert data["reporterId"] == str(member.pk)
    assert data["reporter"]["name"] == "Ana Le"
    assert data["commentsCount"] == 1
    assert data["timeLogsCount"] == 1
    assert data["totalTimeSpent"] == 30
    assert data["comments"] == [{"content": "Looking into it"}]
    assert data["subtasks"] == []


@pytest.mark.django_db
def test_outsider_cannot_read_issue(gql, outsider, issue):
    result = gql(ISSUE_QUERY, outsider, id=str(issue.id))

    assert result.data is None
    assert isinstance(result.errors[0].original_error, Forbidden)


@pytest.mark.django_db
def test_malformed_issue_id_is_not_found(gql, member):
    result = gql(ISSUE_QUERY, member, id="42")

    assert isinstance(result.errors[0].original_error, NotFound)


@pytest.mark.django_db
def test_list_issues_with_filters(gql, member, project, issues, teammate):
    result = gql(ISSUES_QUERY, member, projectId=str(project.id), status="TODO")
    assert result.errors is None
    assert {i["title"] for i in result.data["crmIssuesByProject"]} == {"A", "B"}

    result = gql(ISSUES_QUERY, member, projectId=str(project.id), status="TODO", assigneeId=str(teammate.pk))
    assert result.data["crmIssuesByProject"] == [{"title": "B"}]

    result = gql(ISSUES_QUERY, member, projectId=str(project.id), type="BUG")
    assert result.data["crmIssuesByProject"] == [{"title": "C"}]


@pytest.mark.django_db
def test_status_counts_cover_every_status(gql, member, project, issues):
    result = gql(STATUS_COUNTS, member, projectId=str(project.id))

    assert result.errors is None
    counts = {row["status"]: row["count"] for row in result.data["crmIssueStatusCounts"]}
    assert counts == {
        "BACKLOG": 0, "TODO": 2, "IN_PROGRESS": 0, "IN_REVIEW": 0, "DONE": 1, "CANCELLED": 0,
    }


@pytest.mark.django_db
def test_create_issue_defaults_reporter_to_caller(gql, teammate, project):
    result = gql(CREATE_ISSUE, teammate, input={
        "title": "Export CSV", "projectId": str(project.id), "type": "STORY", "status": "TODO",
    })

    assert result.errors is None
    data = result.data["createCrmIssue"]
    assert data["reporterId"] == str(teammate.pk)
    assert data["type"] == "STORY"
    assert Issue.objects.get(id=data["id"]).issue_type == "STORY"


@pytest.mark.django_db
def test_create_issue_keeps_explicit_reporter(gql, teammate, member, project, issue):
    result = gql(CREATE_ISSUE, teammate, input={
        "title": "Subtask", "projectId": str(project.id), "reporterId": str(member.pk), "parentId": str(issue.id),
    })

    assert result.errors is None
    assert result.data["createCrmIssue"]["reporterId"] == str(member.pk)
    assert result.data["createCrmIssue"]["parentId"] == str(issue.id)


@pytest.mark.django_db
def test_create_issue_rejects_sprint_of_another_project(gql, member, project, workspace, sprint):
    other = Project.objects.create(name="Other", key="OTH", workspace=workspace)
    foreign = Sprint.objects.create(name="S", project=other, start_date=sprint.start_date, end_date=sprint.end_date)

    result = gql(CREATE_ISSUE, member, input={
        "title": "Wrong sprint", "projectId": str(project.id), "sprintId": str(foreign.id),
    })

    assert isinstance(result.errors[0].original_error, ConstraintViolation)
    assert not Issue.objects.filter(title="Wrong sprint").exists()


@pytest.mark.django_db
def test_create_issue_in_foreign_project_is_forbidden(gql, outsider, project):
    result = gql(CREATE_ISSUE, outsider, input={"title": "Sneaky", "projectId": str(project.id)})

    assert isinstance(result.errors[0].original_error, Forbidden)


@pytest.mark.django_db
def test_update_issue_moves_into_sprint(gql, member, issue, sprint):
    result = gql(UPDATE_ISSUE, member, id=str(issue.id), input={
        "status": "IN_PROGRESS", "priority": "HIGHEST", "sprintId": str(sprint.id),
    })

    assert result.errors is None
    assert result.data["updateCrmIssue"] == {
        "id": str(issue.id), "title": "Login fails", "status": "IN_PROGRESS",
        "priority": "HIGHEST", "sprintId": str(sprint.id),
    }


@pytest.mark.django_db
def test_update_issue_can_clear_sprint(gql, member, issues):
    target = issues[1]
    result = gql(UPDATE_ISSUE, member, id=str(target.id), input={"sprintId": None})

    assert result.errors is None
    assert result.data["updateCrmIssue"]["sprintId"] is None


@pytest.mark.django_db
def test_delete_issue(gql, member, outsider, issue):
    denied = gql(DELETE_ISSUE, outsider, id=str(issue.id))
    assert isinstance(denied.errors[0].original_error, Forbidden)

    result = gql(DELETE_ISSUE, member, id=str(issue.id))
    assert result.data["deleteCrmIssue"] == {"id": str(issue.id), "title": "Login fails"}
    assert not Issue.objects.filter(id=issue.id).exists()


@pytest.mark.django_db
def test_unparseable_assignee_filter_matches_nothing(gql, member, project, issues):
    result = gql(ISSUES_QUERY, member, projectId=str(project.id), assigneeId="abc")

    assert result.errors is None
    assert result.data["crmIssuesByProject"] == []


@pytest.mark.django_db
def test_unparseable_user_reference_on_write_is_constraint_violation(gql, member, project, issue):
    created = gql(CREATE_ISSUE, member, input={
        "title": "Bad assignee", "projectId": str(project.id), "assigneeId": "abc",
    })
    error = created.errors[0].original_error
    assert isinstance(error, ConstraintViolation)
    assert error.code == "CONSTRAINT_VIOLATION"
    assert not Issue.objects.filter(title="Bad assignee").exists()

    updated = gql(UPDATE_ISSUE, member, id=str(issue.id), input={"assigneeId": "abc"})
    assert isinstance(updated.errors[0].original_error, ConstraintViolation)
