import pytest

from crm.exceptions import Forbidden, NotFound
from crm.models import Project

PROJECT_QUERY = """
query ($id: ID!) {
  crmProject(id: $id) { id name key workspaceId leadId issuesCount lead { name } }
}
"""

PROJECTS_QUERY = """
query ($workspaceId: ID!) {
  crmProjectsByWorkspace(workspaceId: $workspaceId) { key issuesCount }
}
"""

CREATE_PROJECT = """
mutation ($input: CreateProjectInput!) {
  createCrmProject(input: $input) { id name key workspaceId leadId }
}
"""

UPDATE_PROJECT = """
mutation ($id: ID!, $input: UpdateProjectInput!) {
  updateCrmProject(id: $id, input: $input) { id name description }
}
"""

DELETE_PROJECT = """
mutation ($id: ID!) {
  deleteCrmProject(id: $id) { id name }
}
"""


@pytest.mark.django_db
def test_member_reads_project(gql, member, project, issues):
    result = gql(PROJECT_QUERY, member, id=str(project.id))

    assert result.errors is None
    data = result.data["crmProject"]
    assert data["key"] == "PLT"
    assert data["workspaceId"] == str(project.workspace_id)
    assert data["issuesCount"] == 3
    assert data["lead"]["name"] == "u3"


@pytest.mark.django_db
def test_non_member_is_forbidden(gql, outsider, project):
    result = gql(PROJECT_QUERY, outsider, id=str(project.id))

    assert isinstance(result.errors[0].original_error, Forbidden)


@pytest.mark.django_db
def test_anonymous_is_forbidden(gql, project):
    result = gql(PROJECT_QUERY, id=str(project.id))

    assert isinstance(result.errors[0].original_error, Forbidden)
    assert str(result.errors[0].original_error) == "Authentication required"


@pytest.mark.django_db
def test_missing_project_is_not_found_even_for_outsiders(gql, outsider):
    result = gql(PROJECT_QUERY, outsider, id="3d7c1a52-0c0e-4b8a-8f6b-0d3e2a9d4c11")

    assert isinstance(result.errors[0].original_error, NotFound)


@pytest.mark.django_db
def test_list_projects_by_workspace(gql, member, outsider, project, issues):
    result = gql(PROJECTS_QUERY, member, workspaceId=str(project.workspace_id))
    assert result.errors is None
    assert result.data["crmProjectsByWorkspace"] == [{"key": "PLT", "issuesCount": 3}]

    denied = gql(PROJECTS_QUERY, outsider, workspaceId=str(project.workspace_id))
    assert isinstance(denied.errors[0].original_error, Forbidden)


@pytest.mark.django_db
def test_create_project_checks_target_workspace(gql, member, workspace, other_workspace):
    ok = gql(CREATE_PROJECT, member, input={"name": "Mobile", "key": "MOB", "workspaceId": str(workspace.id)})
    assert ok.errors is None
    assert ok.data["createCrmProject"]["workspaceId"] == str(workspace.id)
    assert ok.data["createCrmProject"]["leadId"] is None

    denied = gql(CREATE_PROJECT, member, input={"name": "X", "key": "X", "workspaceId": str(other_workspace.id)})
    assert isinstance(denied.errors[0].original_error, Forbidden)
    assert not Project.objects.filter(key="X").exists()


@pytest.mark.django_db
def test_update_project_changes_only_given_fields(gql, member, project):
    result = gql(UPDATE_PROJECT, member, id=str(project.id), input={"description": "Core services"})

    assert result.errors is None
    assert result.data["updateCrmProject"] == {
        "id": str(project.id), "name": "Platform", "description": "Core services",
    }


@pytest.mark.django_db
def test_delete_project_returns_deleted_record(gql, member, outsider, project):
    denied = gql(DELETE_PROJECT, outsider, id=str(project.id))
    assert isinstance(denied.errors[0].original_error, Forbidden)
    assert Project.objects.filter(id=project.id).exists()

    result = gql(DELETE_PROJECT, member, id=str(project.id))
    assert result.errors is None
    assert result.data["deleteCrmProject"] == {"id": str(project.id), "name": "Platform"}
    assert not Project.objects.filter(id=project.id).exists()
