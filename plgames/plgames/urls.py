"""
URL configuration for the plgames project.

The CRM is served over a single GraphQL endpoint; see crm/urls.py.
"""
from django.urls import path, include

urlpatterns = [
    path("", include("crm.urls")),
]
