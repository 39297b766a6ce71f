from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.authentication import BasicAuthentication
from rest_framework.authentication import SessionAuthentication

from entity.store import get_entity
from socialgraph.lib.context import get_logged_in_user
from socialgraph.lib.exceptions import NotFound

from .serializers import ExportSerializer
from .serializers import MembersQuerySerializer


class SocialGraphAPIView(APIView):
    def get_viewer(self, request):
        return get_logged_in_user(request)


class GroupMembersAPI(SocialGraphAPIView):
    authentication_classes = (BasicAuthentication, SessionAuthentication,)

    def get(self, request, guid, format=None):
        viewer = self.get_viewer(request)
        if not viewer:
            return Response({'result': 'You have to login to perform this request'},
                            status=status.HTTP_401_UNAUTHORIZED)

        sel = MembersQuerySerializer(data=request.query_params)
        if not sel.is_valid():
            ret = {
                'result': 'Validation Error',
                'details': ['(%s) %s' % (k, ','.join(e)) for k, e in sel.errors.items()],
            }
            return Response(ret, status=status.HTTP_400_BAD_REQUEST)

        try:
            group = get_entity(guid, viewer=viewer, type='group')
        except NotFound:
            return Response({'result': 'Failed to find specified group (%s)' % guid},
                            status=status.HTTP_404_NOT_FOUND)

        if sel.validated_data['count']:
            return Response({'count': group.count_members()})

        members = group.list_members(sel.validated_data['limit'], sel.validated_data['offset'])
        return Response({
            'count': group.count_members(),
            'members': ExportSerializer(members, many=True).data,
        })
