"""Company-facing candidate and match endpoints.

The acting company is the one the authenticated staff member belongs to.
"""

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from matching.permissions import IsCompanyMember, company_membership_for
from matching.serializers import CandidateSerializer, CompanyLikeRequestSerializer, CompanyMatchSerializer
from matching.services import CandidateAggregator, CompanyLikeService, MatchService


def _company_id(request):
    return company_membership_for(request.user).company_id


@api_view(["GET"])
@permission_classes([IsAuthenticated, IsCompanyMember])
def company_candidates(request):
    """Everyone who liked the company or one of its job posts."""
    candidates = CandidateAggregator().get_company_candidates(_company_id(request))
    return Response(CandidateSerializer(candidates, many=True).data)


class CandidateLikeView(APIView):
    permission_classes = [IsAuthenticated, IsCompanyMember]

    def post(self, request, user_id):
        serializer = CompanyLikeRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = CompanyLikeService().company_like_user(
            _company_id(request),
            user_id,
            request.user.id,
            job_post_id=serializer.validated_data.get("job_post_id"),
            note=serializer.validated_data.get("note"),
        )
        return Response(result)


class CandidatePassView(APIView):
    permission_classes = [IsAuthenticated, IsCompanyMember]

    def post(self, request, user_id):
        return Response(CompanyLikeService().company_pass_user(_company_id(request), user_id))


@api_view(["GET"])
@permission_classes([IsAuthenticated, IsCompanyMember])
def company_matches(request):
    matches = MatchService().get_company_matches(_company_id(request))
    return Response(CompanyMatchSerializer(matches, many=True).data)
