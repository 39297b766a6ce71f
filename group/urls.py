from django.urls import path

from . import views

app_name = 'group'

urlpatterns = [
    path('create', views.create, name='create'),
    path('do_create', views.do_create, name='do_create'),
    path('<int:group_guid>/join', views.join, name='join'),
    path('<int:group_guid>/leave', views.leave, name='leave'),
]
