from django.contrib import admin

from .models import Entity, Metadata


class MetadataInline(admin.TabularInline):
    model = Metadata
    extra = 0


@admin.register(Entity)
class EntityAdmin(admin.ModelAdmin):
    list_display = ('guid', 'type', 'subtype', 'owner_guid', 'container_guid', 'access_id',
                    'enabled')
    list_filter = ('type', 'enabled')
    inlines = [MetadataInline]
