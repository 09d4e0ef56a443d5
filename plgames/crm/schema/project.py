# ============================================
# crm/schema/project.py
# ============================================
import graphene

from crm.schema.access import authorize_project, authorize_workspace, crm, current_user, input_data
from crm.schema.inputs import CreateProjectInput, UpdateProjectInput
from crm.schema.types import CrmProjectType


class ProjectQuery(graphene.ObjectType):
    crm_project = graphene.Field(
        CrmProjectType,
        required=True,
        id=graphene.ID(required=True),
    )
    crm_projects_by_workspace = graphene.List(
        graphene.NonNull(CrmProjectType),
        required=True,
        workspace_id=graphene.ID(required=True),
    )

    def resolve_crm_project(root, info, id):
        current_user(info)
        project = crm(info).service.get_project(id)
        authorize_project(info, project, 'No access to this project')
        return project

    def resolve_crm_projects_by_workspace(root, info, workspace_id):
        authorize_workspace(info, workspace_id, 'No access to this workspace')
        return crm(info).service.get_projects_by_workspace(workspace_id)


class CreateCrmProject(graphene.Mutation):
    class Arguments:
        input = CreateProjectInput(required=True)

    Output = CrmProjectType

    def mutate(root, info, input):
        data = input_data(input)
        authorize_workspace(info, data['workspace_id'], 'No access to this workspace')
        return crm(info).service.create_project(data)


class UpdateCrmProject(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)
        input = UpdateProjectInput(required=True)

    Output = CrmProjectType

    def mutate(root, info, id, input):
        current_user(info)
        project = crm(info).service.get_project(id)
        authorize_project(info, project, 'No access to this project')
        return crm(info).service.update_project(id, input_data(input))


class DeleteCrmProject(graphene.Mutation):
    class Arguments:
        id = graphene.ID(required=True)

    Output = CrmProjectType

    def mutate(root, info, id):
        current_user(info)
        project = crm(info).service.get_project(id)
        authorize_project(info, project, 'No access to this project')
        return crm(info).service.delete_project(id)


class ProjectMutation(graphene.ObjectType):
    create_crm_project = CreateCrmProject.Field()
    update_crm_project = UpdateCrmProject.Field()
    delete_crm_project = DeleteCrmProject.Field()
