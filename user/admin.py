from django.contrib import admin

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('guid', 'username', 'name', 'email', 'enabled', 'banned')
    search_fields = ('username', 'name', 'email')
