# ============================================
# crm/urls.py
# ============================================
from django.conf import settings
from django.urls import path

from crm.views.graphql_view import CrmGraphQLView

app_name = 'crm'

urlpatterns = [
    path('graphql/', CrmGraphQLView.as_view(graphiql=settings.DEBUG), name='graphql'),
]
