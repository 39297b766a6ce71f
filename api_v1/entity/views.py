from rest_framework import status
from rest_framework.response import Response
from rest_framework.authentication import BasicAuthentication
from rest_framework.authentication import SessionAuthentication

from entity.store import get_entity
from socialgraph.lib.exceptions import NotFound

from ..serializers import ExportSerializer
from ..views import SocialGraphAPIView


class EntityAPI(SocialGraphAPIView):
    authentication_classes = (BasicAuthentication, SessionAuthentication,)

    def get(self, request, guid, format=None):
        try:
            entity = get_entity(guid, viewer=self.get_viewer(request))
        except NotFound:
            return Response({'result': 'Failed to find specified entity (%s)' % guid},
                            status=status.HTTP_404_NOT_FOUND)

        return Response(ExportSerializer(entity).data)
