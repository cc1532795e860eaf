from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.utils.html import format_html

from matching.models import (
    Chat,
    Company,
    CompanyLike,
    CompanyMember,
    JobPost,
    Like,
    Match,
    Profession,
    User,
    Video,
)


class CompanyMemberInline(admin.TabularInline):
    """Show staff accounts directly on the Company page in Admin."""
    model = CompanyMember
    extra = 0
    autocomplete_fields = ["user"]


@admin.register(User)
class PersonAdmin(UserAdmin):
    list_display = ("username", "email", "first_name", "last_name", "city", "is_staff")
    search_fields = ("username", "email", "first_name", "last_name")
    fieldsets = UserAdmin.fieldsets + (
        ("Profile", {"fields": ("avatar", "city", "bio", "current_school_type", "graduation_year",
                                "interests", "strengths", "preferred_professions")}),
    )


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ("name", "city", "industry", "verified", "created_at")
    list_filter = ("verified", "industry")
    search_fields = ("name", "slug", "city")
    prepopulated_fields = {"slug": ("name",)}
    inlines = [CompanyMemberInline]


@admin.register(Profession)
class ProfessionAdmin(admin.ModelAdmin):
    list_display = ("name", "category")
    search_fields = ("name",)


@admin.register(JobPost)
class JobPostAdmin(admin.ModelAdmin):
    list_display = ("title", "company", "status", "like_count", "created_at")
    list_filter = ("status",)
    search_fields = ("title", "company__name")
    readonly_fields = ("like_count",)


@admin.register(Video)
class VideoAdmin(admin.ModelAdmin):
    list_display = ("title", "company", "job_post", "status", "like_count")
    list_filter = ("status",)
    readonly_fields = ("like_count",)


@admin.register(Like)
class LikeAdmin(admin.ModelAdmin):
    """Likes are created by the app; admin only inspects them."""
    list_display = ("user", "target_type", "target_display", "source", "created_at")
    list_filter = ("target_type", "source")
    search_fields = ("user__username",)

    def has_add_permission(self, request):
        return False

    def target_display(self, obj):
        """Return the liked object's name."""
        return str(obj.target)
    target_display.short_description = "Target"


@admin.register(CompanyLike)
class CompanyLikeAdmin(admin.ModelAdmin):
    list_display = ("company", "user", "liked_by", "job_post", "created_at")
    search_fields = ("company__name", "user__username")

    def has_add_permission(self, request):
        return False


class ChatInline(admin.StackedInline):
    model = Chat
    extra = 0
    can_delete = False
    readonly_fields = ["is_active", "last_message_at", "last_message_preview",
                       "user_unread_count", "company_unread_count", "created_at"]


@admin.register(Match)
class MatchAdmin(admin.ModelAdmin):
    """Matches are never deleted; the only admin action declines them."""
    list_display = ("user", "company", "job_post", "initiated_by", "status_display", "matched_at")
    list_filter = ("status", "initiated_by")
    search_fields = ("user__username", "company__name")
    readonly_fields = ("user", "company", "job_post", "initiated_by", "matched_at")
    actions = ["decline_matches"]
    inlines = [ChatInline]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def status_display(self, obj):
        """Return the status with declined matches highlighted."""
        if obj.status == Match.STATUS_DECLINED:
            return format_html('<span style="color:red;">{}</span>', obj.status)
        return obj.status
    status_display.short_description = "Status"

    @admin.action(description="Decline selected matches")
    def decline_matches(self, request, queryset):
        """Mark selected matches declined and close their chats."""
        ids = list(queryset.filter(status=Match.STATUS_ACTIVE).values_list("id", flat=True))
        Match.objects.filter(id__in=ids).update(status=Match.STATUS_DECLINED)
        Chat.objects.filter(match_id__in=ids).update(is_active=False)
