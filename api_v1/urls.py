from django.urls import path

from . import views
from .entity import views as entity_views

urlpatterns = [
    path('entity/<int:guid>', entity_views.EntityAPI.as_view()),
    path('group/<int:guid>/members', views.GroupMembersAPI.as_view()),
]
