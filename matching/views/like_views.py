"""Person-facing like endpoints."""

from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework.views import APIView

from matching.serializers import LikedJobSerializer, LikeRequestSerializer, LikeSerializer
from matching.services import LikeService


def _source_from(request):
    serializer = LikeRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data.get("source")


class CompanyLikeView(APIView):
    """POST likes a company, DELETE removes the like."""

    def post(self, request, company_id):
        result = LikeService().like_company(request.user.id, company_id, _source_from(request))
        return Response(result)

    def delete(self, request, company_id):
        return Response(LikeService().unlike_company(request.user.id, company_id))


class JobLikeView(APIView):
    """POST likes a job post, DELETE removes the like."""

    def post(self, request, job_post_id):
        result = LikeService().like_job(request.user.id, job_post_id, _source_from(request))
        return Response(result)

    def delete(self, request, job_post_id):
        return Response(LikeService().unlike_job(request.user.id, job_post_id))


class VideoLikeView(APIView):
    def post(self, request, video_id):
        return Response(LikeService().like_video(request.user.id, video_id))

    def delete(self, request, video_id):
        return Response(LikeService().unlike_video(request.user.id, video_id))


@api_view(["GET"])
def liked_jobs(request):
    """Liked job posts of the current user with their match flag."""
    items = LikeService().get_user_liked_jobs(request.user.id)
    return Response(LikedJobSerializer(items, many=True).data)


@api_view(["GET"])
def all_likes(request):
    likes = LikeService().get_user_likes(request.user.id)
    return Response(LikeSerializer(likes, many=True).data)
