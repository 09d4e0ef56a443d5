# ============================================
# crm/schema/inputs.py
# ============================================
import graphene

from crm.schema.types import IssuePriorityEnum, IssueStatusEnum, IssueTypeEnum

# GraphQL ``type`` maps onto the model's ``issue_type``
ISSUE_RENAMES = {'type': 'issue_type'}


class CreateProjectInput(graphene.InputObjectType):
    name = graphene.String(required=True)
    key = graphene.String(required=True)
    description = graphene.String()
    workspace_id = graphene.ID(required=True)
    lead_id = graphene.ID()


class UpdateProjectInput(graphene.InputObjectType):
    name = graphene.String()
    key = graphene.String()
    description = graphene.String()
    lead_id = graphene.ID()


class CreateIssueInput(graphene.InputObjectType):
    title = graphene.String(required=True)
    description = graphene.String()
    project_id = graphene.ID(required=True)
    assignee_id = graphene.ID()
    reporter_id = graphene.ID(description="Defaults to the caller")
    sprint_id = graphene.ID()
    parent_id = graphene.ID()
    status = IssueStatusEnum()
    priority = IssuePriorityEnum()
    type = IssueTypeEnum()
    story_points = graphene.Int()
    due_date = graphene.DateTime()


class UpdateIssueInput(graphene.InputObjectType):
    title = graphene.String()
    description = graphene.String()
    assignee_id = graphene.ID()
    sprint_id = graphene.ID()
    status = IssueStatusEnum()
    priority = IssuePriorityEnum()
    type = IssueTypeEnum()
    story_points = graphene.Int()
    due_date = graphene.DateTime()


class CreateSprintInput(graphene.InputObjectType):
    name = graphene.String(required=True)
    goal = graphene.String()
    project_id = graphene.ID(required=True)
    start_date = graphene.DateTime(required=True)
    end_date = graphene.DateTime(required=True)


class UpdateSprintInput(graphene.InputObjectType):
    name = graphene.String()
    goal = graphene.String()
    start_date = graphene.DateTime()
    end_date = graphene.DateTime()
    is_active = graphene.Boolean()


class CreateCommentInput(graphene.InputObjectType):
    content = graphene.String(required=True)
    issue_id = graphene.ID(required=True)


class UpdateCommentInput(graphene.InputObjectType):
    content = graphene.String(required=True)


class CreateTimeLogInput(graphene.InputObjectType):
    issue_id = graphene.ID(required=True)
    time_spent = graphene.Int(required=True, description="Minutes")
    description = graphene.String()
    logged_at = graphene.DateTime(required=True)


class UpdateTimeLogInput(graphene.InputObjectType):
    time_spent = graphene.Int(description="Minutes")
    description = graphene.String()
    logged_at = graphene.DateTime()
