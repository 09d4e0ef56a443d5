# ============================================
# crm/views/graphql_view.py
# ============================================
from graphene_django.views import GraphQLView
from graphql import GraphQLError
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.settings import api_settings

from crm.context import attach_crm
from crm.exceptions import CrmError


class CrmGraphQLView(GraphQLView):
    """
    GraphQL endpoint behind DRF authentication.

    DRF authenticates the request before graphene sees it, so resolvers
    read the caller from ``info.context.user``. The CRM service and
    permission checker are attached per request as ``info.context.crm``.

    Errors raised from the CRM carry a stable ``extensions.code``
    (NOT_FOUND, FORBIDDEN, CONSTRAINT_VIOLATION, STORE_UNAVAILABLE).
    """

    def parse_body(self, request):
        # DRF already consumed the stream
        if isinstance(request, Request):
            return request.data
        return super().parse_body(request)

    def get_context(self, request):
        return attach_crm(request)

    @staticmethod
    def format_error(error):
        formatted = GraphQLView.format_error(error)
        original = error.original_error if isinstance(error, GraphQLError) else None
        if isinstance(original, CrmError):
            formatted.setdefault('extensions', {})['code'] = original.code
        return formatted

    @classmethod
    def as_view(cls, *args, **kwargs):
        view = super().as_view(*args, **kwargs)
        view = permission_classes((IsAuthenticated,))(view)
        view = authentication_classes(api_settings.DEFAULT_AUTHENTICATION_CLASSES)(view)
        view = api_view(['GET', 'POST'])(view)
        return view
