import logging

from django.http import HttpResponse
from django.http.response import JsonResponse

from entity.store import get_entity
from socialgraph.lib.acl import AccessType
from socialgraph.lib.context import get_context
from socialgraph.lib.http import handle_errors, http_get, http_post_form
from socialgraph.lib.input import filter_tags, get_input

from .models import Group

Logger = logging.getLogger(__name__)

STICKY_FORM = 'groups/edit'


@http_get
def create(request):
    context = get_context(request)
    if not context.is_logged_in:
        return HttpResponse('You have to login to execute this operation', status=401)

    values = context.sticky.get_sticky_values(STICKY_FORM)
    if values is None:
        values = {'name': '', 'description': '', 'membership': str(AccessType.Public.id)}

    return JsonResponse({'values': values})


@http_post_form([
    {'name': 'name', 'type': str, 'checker': lambda x: filter_tags(x['name']).strip()},
    {'name': 'description', 'type': str, 'required': False},
    {'name': 'membership', 'type': str, 'required': False, 'checker': lambda x: (
        x['membership'].lstrip('-').isdigit() and AccessType.get(int(x['membership']))
    )},
], sticky_form=STICKY_FORM)
def do_create(request, context):
    group = Group.objects.create(name=get_input(context, 'name'),
                                 description=get_input(context, 'description', ''),
                                 membership=int(get_input(context, 'membership',
                                                          AccessType.Public.id)),
                                 owner_guid=context.viewer.guid,
                                 container_guid=context.viewer.guid)

    # the owner is the first member of the group
    group.join(context.viewer)

    return JsonResponse(group.export())


@http_post_form([])
@handle_errors
def join(request, group_guid, context):
    group = get_entity(group_guid, viewer=context.viewer, type='group')

    if (not group.is_public_membership() and
        not context.viewer.is_admin and
        group.owner_guid != context.viewer.guid):
        return HttpResponse('Membership of this group is closed', status=400)

    return JsonResponse({'result': group.join(context.viewer)})


@http_post_form([])
@handle_errors
def leave(request, group_guid, context):
    group = get_entity(group_guid, viewer=context.viewer, type='group')

    if group.owner_guid == context.viewer.guid:
        return HttpResponse('The owner can not leave the group', status=400)

    return JsonResponse({'result': group.leave(context.viewer)})
