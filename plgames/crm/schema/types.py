# ============================================
# crm/schema/types.py
# ============================================
import graphene
from graphene_django import DjangoObjectType

from crm.models import Comment, Issue, Project, Sprint, TimeLog
from crm.schema.access import crm

# Enum values mirror the model choices
IssueStatusEnum = graphene.Enum('IssueStatus', [(v, v) for v in Issue.Status.values])
IssuePriorityEnum = graphene.Enum('IssuePriority', [(v, v) for v in Issue.Priority.values])
IssueTypeEnum = graphene.Enum('IssueType', [(v, v) for v in Issue.IssueType.values])


class UserInfo(graphene.ObjectType):
    id = graphene.ID(required=True)
    name = graphene.String(required=True)
    email = graphene.String(required=True)
    avatar_url = graphene.String()

    def resolve_name(user, info):
        return user.get_full_name() or user.get_username()


class CrmProjectType(DjangoObjectType):
    workspace_id = graphene.ID(required=True)
    lead_id = graphene.ID()
    lead = graphene.Field(UserInfo)
    issues_count = graphene.Int()

    class Meta:
        model = Project
        name = 'CrmProjectType'
        fields = ('id', 'name', 'key', 'description', 'created_at', 'updated_at')

    def resolve_issues_count(project, info):
        count = getattr(project, 'issues_count', None)
        if count is None:
            count = crm(info).service.count_issues_by_project(project.id)
        return count


class CrmCommentType(DjangoObjectType):
    issue_id = graphene.ID(required=True)
    author_id = graphene.ID(required=True)
    author = graphene.Field(UserInfo)

    class Meta:
        model = Comment
        name = 'CrmCommentType'
        fields = ('id', 'content', 'created_at', 'updated_at')


class CrmTimeLogType(DjangoObjectType):
    issue_id = graphene.ID(required=True)
    user_id = graphene.ID(required=True)
    user = graphene.Field(UserInfo)
    time_spent = graphene.Int(required=True)

    class Meta:
        model = TimeLog
        name = 'CrmTimeLogType'
        fields = ('id', 'description', 'logged_at', 'created_at')


class CrmIssueType(DjangoObjectType):
    status = graphene.Field(IssueStatusEnum, required=True)
    priority = graphene.Field(IssuePriorityEnum, required=True)
    type = graphene.Field(IssueTypeEnum, required=True, source='issue_type')
    project_id = graphene.ID(required=True)
    assignee_id = graphene.ID()
    reporter_id = graphene.ID(required=True)
    sprint_id = graphene.ID()
    parent_id = graphene.ID()
    project = graphene.Field(CrmProjectType)
    assignee = graphene.Field(UserInfo)
    reporter = graphene.Field(UserInfo)
    comments_count = graphene.Int()
    time_logs_count = graphene.Int()

    # Resolved per parent issue; access to the parent was already checked
    comments = graphene.List(graphene.NonNull(CrmCommentType), required=True)
    time_logs = graphene.List(graphene.NonNull(CrmTimeLogType), required=True)
    total_time_spent = graphene.Int(required=True)
    subtasks = graphene.List(graphene.NonNull(lambda: CrmIssueType), required=True)

    class Meta:
        model = Issue
        name = 'CrmIssueType'
        fields = ('id', 'title', 'description', 'story_points', 'due_date', 'created_at', 'updated_at')

    def resolve_comments_count(issue, info):
        count = getattr(issue, 'comments_count', None)
        if count is None:
            count = crm(info).service.count_comments_by_issue(issue.id)
        return count

    def resolve_time_logs_count(issue, info):
        count = getattr(issue, 'time_logs_count', None)
        if count is None:
            count = crm(info).service.count_time_logs_by_issue(issue.id)
        return count

    def resolve_comments(issue, info):
        return crm(info).service.get_comments_by_issue(issue.id)

    def resolve_time_logs(issue, info):
        return crm(info).service.get_time_logs_by_issue(issue.id)

    def resolve_total_time_spent(issue, info):
        return crm(info).service.get_total_time_spent(issue.id)

    def resolve_subtasks(issue, info):
        return crm(info).service.get_subtasks(issue.id)


class CrmSprintType(DjangoObjectType):
    project_id = graphene.ID(required=True)
    issues_count = graphene.Int()
    issues = graphene.List(graphene.NonNull(CrmIssueType), required=True)

    class Meta:
        model = Sprint
        name = 'CrmSprintType'
        fields = ('id', 'name', 'goal', 'start_date', 'end_date', 'is_active', 'created_at', 'updated_at')

    def resolve_issues_count(sprint, info):
        count = getattr(sprint, 'issues_count', None)
        if count is None:
            count = crm(info).service.count_issues_by_sprint(sprint.id)
        return count

    def resolve_issues(sprint, info):
        return sprint.issues.all()


class IssueStatusCount(graphene.ObjectType):
    status = graphene.Field(IssueStatusEnum, required=True)
    count = graphene.Int(required=True)
