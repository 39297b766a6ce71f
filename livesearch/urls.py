from django.urls import path

from . import views

app_name = 'livesearch'

urlpatterns = [
    path('', views.index, name='index'),
]
