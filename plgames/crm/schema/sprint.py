# ============================================
# crm/schema/sprint.py
# ============================================
import graphene

from crm.exceptions import ConstraintViolation
from crm.schema.access import authorize_project, crm, current_user, input_data
from crm.schema.inputs import CreateSprintInput, UpdateSprintInput
from crm.schema.types import CrmSprintType


def _check_dates(start_date, end_date):
    if start_date and end_date and end_date < start_date:
        raise ConstraintViolation('schedule a sprint that ends before it starts')


class SprintQuery(graphene.ObjectType):
    crm_sprint = graphene.Field(
        CrmSprintType,
        required=True,
        id=graphene.ID(required=True),
    )
    crm_sprints_by_project = graphene.List(
        graphene.NonNull(CrmSprintType),
        required=True,
        project_id=graphene.ID(required=True),
    )

    def resolve_crm_sprint(root, info, id):
        current_user(info)
        sprint = crm(info).service.get_sprint(id)
        authorize_project(info, sprint.project, 'No access to this sprint')
        return sprint

    def resolve_crm_sprints_by_project(root, info, project_id):
        current_user(info)
        project = crm(info).service.get_project(project_id)
        authorize_project(info, project, 'No access to this project')
        return crm(info).service.get_sprints_by_project(project_id)


class CreateCrmSprint(graphene.Mutation):
    class Arguments:
        input = CreateSprintInput(required=True)

    Output = CrmSprintType

    def mutate(root, info, input):
        current_user(info)
        data = input_data(input)
        project = crm(info).service.get_project(data['project_id'])
        authorize_project(info, project, 'No access to this project')
        _check_dates(data['start_date'], data['end_date'])
        return crm(info).service.create_sprint(data)


class UpdateCrmSprint(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)
        input = UpdateSprintInput(required=True)

    Output = CrmSprintType

    def mutate(root, info, id, input):
        current_user(info)
        sprint = crm(info).service.get_sprint(id)
        authorize_project(info, sprint.project, 'No access to this sprint')
        data = input_data(input)
        _check_dates(data.get('start_date', sprint.start_date), data.get('end_date', sprint.end_date))
        return crm(info).service.update_sprint(id, data)


class DeleteCrmSprint(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)

    Output = CrmSprintType

    def mutate(root, info, id):
        current_user(info)
        sprint = crm(info).service.get_sprint(id)
        authorize_project(info, sprint.project, 'No access to this sprint')
        return crm(info).service.delete_sprint(id)


class SprintMutation(graphene.ObjectType):
    create_crm_sprint = CreateCrmSprint.Field()
    update_crm_sprint = UpdateCrmSprint.Field()
    delete_crm_sprint = DeleteCrmSprint.Field()
