import graphene

from crm.schema import Query as CrmQuery
from crm.schema import Mutation as CrmMutation


class Query(CrmQuery, graphene.ObjectType):
    """
    Root Query for the GraphQL API.

    Composes every query field exposed by the CRM app into a single
    entry point.
    """
    pass


class Mutation(CrmMutation, graphene.ObjectType):
    """Root Mutation for the GraphQL API."""
    pass


schema = graphene.Schema(
    query=Query,
    mutation=Mutation,
)
