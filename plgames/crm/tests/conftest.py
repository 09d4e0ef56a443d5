import pytest
from datetime import timedelta
from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.utils import timezone

from crm.context import attach_crm
from crm.models import Comment, Issue, Project, Sprint, TimeLog
from crm.store import Store
from plgames.schema import schema
from workspaces.models import Workspace, WorkspaceMember

User = get_user_model()


@pytest.fixture
def store(db):
    return Store()


@pytest.fixture
def member(db):
    return User.objects.create_user(username="u1", password="pass", first_name="Ana", last_name="Le")


@pytest.fixture
def outsider(db):
    return User.objects.create_user(username="u2", password="pass")


@pytest.fixture
def teammate(db):
    return User.objects.create_user(username="u3", password="pass")


@pytest.fixture
def workspace(db, member, teammate):
    ws = Workspace.objects.create(name="W1")
    WorkspaceMember.objects.create(workspace=ws, user=member, role=WorkspaceMember.Role.OWNER)
    WorkspaceMember.objects.create(workspace=ws, user=teammate)
    return ws


@pytest.fixture
def other_workspace(db, outsider):
    ws = Workspace.objects.create(name="W2")
    WorkspaceMember.objects.create(workspace=ws, user=outsider, role=WorkspaceMember.Role.OWNER)
    return ws


@pytest.fixture
def project(workspace, teammate):
    return Project.objects.create(name="Platform", key="PLT", workspace=workspace, lead=teammate)


@pytest.fixture
def sprint(project):
    start = timezone.now()
    return Sprint.objects.create(name="Sprint 1", project=project, start_date=start, end_date=start + timedelta(days=14))


@pytest.fixture
def issue(project, member):
    return Issue.objects.create(title="Login fails", project=project, reporter=member)


@pytest.fixture
def issues(project, member, teammate, sprint):
    return [
        Issue.objects.create(title="A", project=project, reporter=member, status=Issue.Status.TODO),
        Issue.objects.create(title="B", project=project, reporter=member, status=Issue.Status.TODO,
                             assignee=teammate, sprint=sprint),
        Issue.objects.create(title="C", project=project, reporter=teammate, status=Issue.Status.DONE,
                             issue_type=Issue.IssueType.BUG, priority=Issue.Priority.HIGH),
    ]


@pytest.fixture
def comment(issue, member):
    return Comment.objects.create(issue=issue, author=member, content="Looking into it")


@pytest.fixture
def time_log(issue, member):
    return TimeLog.objects.create(issue=issue, user=member, time_spent=30, logged_at=timezone.now())


@pytest.fixture
def gql(rf):
    """Run an operation against the root schema as the given user."""
    def execute(query, user=None, **variables):
        request = rf.post("/graphql/")
        request.user = user or AnonymousUser()
        attach_crm(request)
        return schema.execute(query, variable_values=variables, context_value=request)
    return execute
