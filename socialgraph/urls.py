from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('livesearch', include('livesearch.urls')),
    path('group/', include('group.urls')),
    path('api/v1/', include('api_v1.urls')),
    path('admin/', admin.site.urls),
]
