from rest_framework import serializers

from matching.models import Chat, Company, JobPost, Like, Match, Profession, User, Video


class UserSummarySerializer(serializers.ModelSerializer):
    """Person summary shown to companies and inside match payloads."""
    avatar_url = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = ["id", "first_name", "last_name", "avatar_url", "city"]


class CandidateUserSerializer(UserSummarySerializer):
    """Person profile as shown in a company's candidate list."""

    class Meta(UserSummarySerializer.Meta):
        fields = UserSummarySerializer.Meta.fields + [
            "current_school_type",
            "graduation_year",
            "bio",
            "interests",
            "strengths",
            "preferred_professions",
        ]


class CompanyBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Company
        fields = ["id", "name", "slug", "logo_url", "city", "verified"]


class CompanySummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Company
        fields = ["id", "name", "logo_url", "city", "industry", "short_description"]


class CompanyProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = Company
        fields = [
            "id",
            "name",
            "slug",
            "logo_url",
            "cover_image_url",
            "city",
            "postal_code",
            "industry",
            "short_description",
            "description",
            "verified",
            "website",
            "employee_count",
            "founded_year",
            "benefits",
        ]


class JobPostSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = JobPost
        fields = ["id", "title"]


class LikedJobPostSerializer(serializers.ModelSerializer):
    company = CompanyBriefSerializer(read_only=True)

    class Meta:
        model = JobPost
        fields = ["id", "title", "slug", "city", "postal_code", "salary_year1", "status", "company"]


class ProfessionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Profession
        fields = ["id", "name", "slug", "category"]


class VideoSerializer(serializers.ModelSerializer):
    class Meta:
        model = Video
        fields = ["id", "title", "processed_path", "thumbnail_path", "duration_seconds"]


class JobPostDetailSerializer(serializers.ModelSerializer):
    """Full job post for match detail, with profession and active videos."""
    profession = ProfessionSerializer(read_only=True)
    videos = VideoSerializer(source="active_videos", many=True, read_only=True, default=list)

    class Meta:
        model = JobPost
        fields = [
            "id",
            "title",
            "slug",
            "description",
            "city",
            "postal_code",
            "salary_year1",
            "status",
            "like_count",
            "profession",
            "videos",
        ]


class ChatSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Chat
        fields = [
            "id",
            "is_active",
            "last_message_at",
            "last_message_preview",
            "user_unread_count",
            "company_unread_count",
        ]


class UserChatSerializer(ChatSummarySerializer):
    class Meta(ChatSummarySerializer.Meta):
        fields = ["id", "is_active", "last_message_at", "last_message_preview", "user_unread_count"]


class CompanyChatSerializer(ChatSummarySerializer):
    class Meta(ChatSummarySerializer.Meta):
        fields = ["id", "is_active", "last_message_at", "last_message_preview", "company_unread_count"]


MATCH_FIELDS = ["id", "status", "initiated_by", "matched_at", "job_post_id"]


class UserMatchSerializer(serializers.ModelSerializer):
    """A person's match list entry."""
    company = CompanySummarySerializer(read_only=True)
    job_post = JobPostSummarySerializer(read_only=True)
    chat = UserChatSerializer(read_only=True)

    class Meta:
        model = Match
        fields = MATCH_FIELDS + ["company", "job_post", "chat"]


class CompanyMatchSerializer(serializers.ModelSerializer):
    """A company's match list entry."""
    user = CandidateUserSerializer(read_only=True)
    job_post = JobPostSummarySerializer(read_only=True)
    chat = CompanyChatSerializer(read_only=True)

    class Meta:
        model = Match
        fields = MATCH_FIELDS + ["user", "job_post", "chat"]


class MatchDetailSerializer(serializers.ModelSerializer):
    company = CompanyProfileSerializer(read_only=True)
    job_post = JobPostDetailSerializer(read_only=True)
    user = UserSummarySerializer(read_only=True)
    chat = ChatSummarySerializer(read_only=True)

    class Meta:
        model = Match
        fields = MATCH_FIELDS + ["company_id", "user_id", "company", "job_post", "user", "chat"]


class LikedVideoSerializer(serializers.ModelSerializer):
    company = CompanyBriefSerializer(read_only=True)

    class Meta:
        model = Video
        fields = ["id", "title", "thumbnail_path", "company"]


class LikeSerializer(serializers.ModelSerializer):
    """A like with the summary of whichever target it points at."""
    company = CompanySummarySerializer(read_only=True)
    job_post = LikedJobPostSerializer(read_only=True)
    video = LikedVideoSerializer(read_only=True)

    class Meta:
        model = Like
        fields = ["id", "target_type", "source", "created_at", "company", "job_post", "video"]


class LikedJobSerializer(serializers.Serializer):
    liked_at = serializers.DateTimeField()
    is_match = serializers.BooleanField()
    job_post = LikedJobPostSerializer()


class CandidateSerializer(serializers.Serializer):
    user = CandidateUserSerializer()
    like_source = serializers.CharField()
    job_post = JobPostSummarySerializer(allow_null=True)
    liked_at = serializers.DateTimeField()
    company_liked = serializers.BooleanField()
    matched = serializers.BooleanField()


class LikeRequestSerializer(serializers.Serializer):
    """Body of a like request: where in the app the like came from."""
    source = serializers.CharField(max_length=50, required=False, allow_blank=True)


class CompanyLikeRequestSerializer(serializers.Serializer):
    job_post_id = serializers.UUIDField(required=False, allow_null=True)
    note = serializers.CharField(max_length=2000, required=False, allow_blank=True)
