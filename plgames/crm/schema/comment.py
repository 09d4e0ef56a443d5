# ============================================
# crm/schema/comment.py
# ============================================
import graphene

from crm.schema.access import authorize_owner, authorize_project, crm, current_user, input_data
from crm.schema.inputs import CreateCommentInput, UpdateCommentInput
from crm.schema.types import CrmCommentType


class CommentQuery(graphene.ObjectType):
    crm_comments_by_issue = graphene.List(
        graphene.NonNull(CrmCommentType),
        required=True,
        issue_id=graphene.ID(required=True),
    )

    def resolve_crm_comments_by_issue(root, info, issue_id):
        current_user(info)
        issue = crm(info).service.get_issue(issue_id)
        authorize_project(info, issue.project, 'No access to this issue')
        return crm(info).service.get_comments_by_issue(issue_id)


class CreateCrmComment(graphene.Mutation):
    class Arguments:
        input = CreateCommentInput(required=True)

    Output = CrmCommentType

    def mutate(root, info, input):
        user = current_user(info)
        data = input_data(input)
        issue = crm(info).service.get_issue(data['issue_id'])
        authorize_project(info, issue.project, 'No access to this issue')
        data['author_id'] = user.pk
        return crm(info).service.create_comment(data)


class UpdateCrmComment(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)
        input = UpdateCommentInput(required=True)

    Output = CrmCommentType

    def mutate(root, info, id, input):
        current_user(info)
        comment = crm(info).service.get_comment(id)
        authorize_project(info, comment.issue.project, 'No access to this issue')
        authorize_owner(info, comment.author_id, 'Can only edit your own comments')
        return crm(info).service.update_comment(id, input_data(input))


class DeleteCrmComment(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)

    Output = CrmCommentType

    def mutate(root, info, id):
        current_user(info)
        comment = crm(info).service.get_comment(id)
        authorize_project(info, comment.issue.project, 'No access to this issue')
        authorize_owner(info, comment.author_id, 'Can only delete your own comments')
        return crm(info).service.delete_comment(id)


class CommentMutation(graphene.ObjectType):
    create_crm_comment = CreateCrmComment.Field()
    update_crm_comment = UpdateCrmComment.Field()
    delete_crm_comment = DeleteCrmComment.Field()
