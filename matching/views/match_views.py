"""Person-facing match endpoints."""

from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework.views import APIView

from matching.serializers import MatchDetailSerializer, UserMatchSerializer
from matching.services import MatchService


@api_view(["GET"])
def user_matches(request):
    """Active matches of the current user, newest first."""
    matches = MatchService().get_user_matches(request.user.id)
    return Response(UserMatchSerializer(matches, many=True).data)


class MatchDetailView(APIView):
    """GET returns the match detail, DELETE declines the match."""

    def get(self, request, match_id):
        match = MatchService().get_match_detail(match_id, request.user.id)
        return Response(MatchDetailSerializer(match).data)

    def delete(self, request, match_id):
        return Response(MatchService().delete_match(match_id, request.user.id))
