# ============================================
# crm/schema/time_log.py
# ============================================
import graphene

from crm.exceptions import ConstraintViolation
from crm.schema.access import authorize_owner, authorize_project, crm, current_user, input_data
from crm.schema.inputs import CreateTimeLogInput, UpdateTimeLogInput
from crm.schema.types import CrmTimeLogType


def _check_minutes(time_spent):
    if time_spent is not None and time_spent < 1:
        raise ConstraintViolation('log less than one minute of work')


class TimeLogQuery(graphene.ObjectType):
    crm_time_logs_by_issue = graphene.List(
        graphene.NonNull(CrmTimeLogType),
        required=True,
        issue_id=graphene.ID(required=True),
    )
    crm_issue_total_time = graphene.Int(
        required=True,
        issue_id=graphene.ID(required=True),
    )

    def resolve_crm_time_logs_by_issue(root, info, issue_id):
        current_user(info)
        issue = crm(info).service.get_issue(issue_id)
        authorize_project(info, issue.project, 'No access to this issue')
        return crm(info).service.get_time_logs_by_issue(issue_id)

    def resolve_crm_issue_total_time(root, info, issue_id):
        current_user(info)
        issue = crm(info).service.get_issue(issue_id)
        authorize_project(info, issue.project, 'No access to this issue')
        return crm(info).service.get_total_time_spent(issue_id)


class CreateCrmTimeLog(graphene.Mutation):
    class Arguments:
        input = CreateTimeLogInput(required=True)

    Output = CrmTimeLogType

    def mutate(root, info, input):
        user = current_user(info)
        data = input_data(input)
        issue = crm(info).service.get_issue(data['issue_id'])
        authorize_project(info, issue.project, 'No access to this issue')
        _check_minutes(data['time_spent'])
        data['user_id'] = user.pk
        return crm(info).service.create_time_log(data)


class UpdateCrmTimeLog(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)
        input = UpdateTimeLogInput(required=True)

    Output = CrmTimeLogType

    def mutate(root, info, id, input):
        current_user(info)
        time_log = crm(info).service.get_time_log(id)
        authorize_project(info, time_log.issue.project, 'No access to this issue')
        authorize_owner(info, time_log.user_id, 'Can only edit your own time logs')
        data = input_data(input)
        _check_minutes(data.get('time_spent'))
        return crm(info).service.update_time_log(id, data)


class DeleteCrmTimeLog(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)

    Output = CrmTimeLogType

    def mutate(root, info, id):
        current_user(info)
        time_log = crm(info).service.get_time_log(id)
        authorize_project(info, time_log.issue.project, 'No access to this issue')
        authorize_owner(info, time_log.user_id, 'Can only delete your own time logs')
        return crm(info).service.delete_time_log(id)


class TimeLogMutation(graphene.ObjectType):
    create_crm_time_log = CreateCrmTimeLog.Field()
    update_crm_time_log = UpdateCrmTimeLog.Field()
    delete_crm_time_log = DeleteCrmTimeLog.Field()
