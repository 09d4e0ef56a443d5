# ============================================
# crm/schema/issue.py
# ============================================
import graphene

from crm.exceptions import ConstraintViolation
from crm.models import Issue
from crm.repositories import IssueFilters
from crm.schema.access import authorize_project, crm, current_user, enum_value, input_data
from crm.schema.inputs import ISSUE_RENAMES, CreateIssueInput, UpdateIssueInput
from crm.schema.types import (
    CrmIssueType,
    IssuePriorityEnum,
    IssueStatusCount,
    IssueStatusEnum,
    IssueTypeEnum,
)


def _check_links(info, project, data):
    """Sprint and parent must belong to the issue's own project."""
    service = crm(info).service
    if data.get('sprint_id') is not None:
        sprint = service.get_sprint(data['sprint_id'])
        if sprint.project_id != project.id:
            raise ConstraintViolation('move an issue into another project\'s sprint')
    if data.get('parent_id') is not None:
        parent = service.get_issue(data['parent_id'])
        if parent.project_id != project.id:
            raise ConstraintViolation('attach a subtask to an issue in another project')


class IssueQuery(graphene.ObjectType):
    crm_issue = graphene.Field(
        CrmIssueType,
        required=True,
        id=graphene.ID(required=True),
    )
    crm_issues_by_project = graphene.List(
        graphene.NonNull(CrmIssueType),
        required=True,
        project_id=graphene.ID(required=True),
        status=IssueStatusEnum(),
        assignee_id=graphene.ID(),
        sprint_id=graphene.ID(),
        type=IssueTypeEnum(),
        priority=IssuePriorityEnum(),
    )
    crm_issue_status_counts = graphene.List(
        graphene.NonNull(IssueStatusCount),
        required=True,
        project_id=graphene.ID(required=True),
    )

    def resolve_crm_issue(root, info, id):
        current_user(info)
        issue = crm(info).service.get_issue(id)
        authorize_project(info, issue.project, 'No access to this issue')
        return issue

    def resolve_crm_issues_by_project(root, info, project_id, status=None, assignee_id=None,
                                      sprint_id=None, type=None, priority=None):
        current_user(info)
        project = crm(info).service.get_project(project_id)
        authorize_project(info, project, 'No access to this project')
        filters = IssueFilters(
            status=enum_value(status),
            assignee_id=assignee_id,
            sprint_id=sprint_id,
            issue_type=enum_value(type),
            priority=enum_value(priority),
        )
        return crm(info).service.get_issues_by_project(project_id, filters)

    def resolve_crm_issue_status_counts(root, info, project_id):
        current_user(info)
        project = crm(info).service.get_project(project_id)
        authorize_project(info, project, 'No access to this project')
        counts = crm(info).service.get_issue_status_count(project_id)
        return [IssueStatusCount(status=s, count=counts[s]) for s in Issue.Status.values]


class CreateCrmIssue(graphene.Mutation):
    class Arguments:
        input = CreateIssueInput(required=True)

    Output = CrmIssueType

    def mutate(root, info, input):
        user = current_user(info)
        data = input_data(input, ISSUE_RENAMES)
        project = crm(info).service.get_project(data['project_id'])
        authorize_project(info, project, 'No access to this project')
        _check_links(info, project, data)
        if data.get('reporter_id') is None:
            data['reporter_id'] = user.pk
        return crm(info).service.create_issue(data)


class UpdateCrmIssue(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)
        input = UpdateIssueInput(required=True)

    Output = CrmIssueType

    def mutate(root, info, id, input):
        current_user(info)
        issue = crm(info).service.get_issue(id)
        authorize_project(info, issue.project, 'No access to this issue')
        data = input_data(input, ISSUE_RENAMES)
        _check_links(info, issue.project, data)
        return crm(info).service.update_issue(id, data)


class DeleteCrmIssue(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)

    Output = CrmIssueType

    def mutate(root, info, id):
        current_user(info)
        issue = crm(info).service.get_issue(id)
        authorize_project(info, issue.project, 'No access to this issue')
        return crm(info).service.delete_issue(id)


class IssueMutation(graphene.ObjectType):
    create_crm_issue = CreateCrmIssue.Field()
    update_crm_issue = UpdateCrmIssue.Field()
    delete_crm_issue = DeleteCrmIssue.Field()
