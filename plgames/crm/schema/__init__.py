import graphene

from crm.schema.comment import CommentMutation, CommentQuery
from crm.schema.issue import IssueMutation, IssueQuery
from crm.schema.project import ProjectMutation, ProjectQuery
from crm.schema.sprint import SprintMutation, SprintQuery
from crm.schema.time_log import TimeLogMutation, TimeLogQuery


class Query(ProjectQuery, IssueQuery, SprintQuery, CommentQuery, TimeLogQuery, graphene.ObjectType):
    pass


class Mutation(ProjectMutation, IssueMutation, SprintMutation, CommentMutation, TimeLogMutation, graphene.ObjectType):
    pass
