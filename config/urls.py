"""
URL configuration for the Jesus Connect chat backend.

The front-end calls `/api/chat` without a trailing slash, so the API routes
are declared exactly that way.
"""

from django.urls import path

from core.views import ChatView, TopicsView

urlpatterns = [
    path("api/chat", ChatView.as_view(), name="chat"),
    path("api/topics", TopicsView.as_view(), name="topics"),
]
