"""Mutual-interest pairing and the chat channel created with it."""

from django.conf import settings
from django.db import models
from django.utils import timezone

from matching.utils.ids import new_row_id
from .company import Company
from .job_post import JobPost


class Match(models.Model):
    """Created once per user/company pair; only ever moves ACTIVE → DECLINED."""
    INITIATED_BY_USER = "user"
    INITIATED_BY_COMPANY = "company"

    INITIATORS = [
        (INITIATED_BY_USER, "User"),
        (INITIATED_BY_COMPANY, "Company"),
    ]

    STATUS_ACTIVE = "ACTIVE"
    STATUS_DECLINED = "DECLINED"

    STATUSES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_DECLINED, "Declined"),
    ]

    id = models.UUIDField(primary_key=True, default=new_row_id, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="matches",
    )
    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        related_name="matches",
    )
    job_post = models.ForeignKey(
        JobPost,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="matches",
    )
    initiated_by = models.CharField(max_length=10, choices=INITIATORS)
    status = models.CharField(max_length=10, choices=STATUSES, default=STATUS_ACTIVE)
    matched_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "match"
        constraints = [
            models.UniqueConstraint(fields=["user", "company"], name="uniq_match_user_company"),
        ]
        indexes = [
            models.Index(fields=["company", "status"], name="idx_match_company_status"),
        ]

    @property
    def is_active(self):
        return self.status == self.STATUS_ACTIVE

    def __str__(self) -> str:
        return f"Match({self.user_id} ↔ {self.company_id}, {self.status})"


class Chat(models.Model):
    """Conversation channel; created with its Match, only ever deactivated."""
    id = models.UUIDField(primary_key=True, default=new_row_id, editable=False)
    match = models.OneToOneField(
        Match,
        on_delete=models.CASCADE,
        related_name="chat",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="chats",
    )
    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        related_name="chats",
    )
    is_active = models.BooleanField(default=True)
    last_message_at = models.DateTimeField(null=True, blank=True)
    last_message_preview = models.CharField(max_length=200, blank=True)
    user_unread_count = models.PositiveIntegerField(default=0)
    company_unread_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "chat"

    def __str__(self) -> str:
        return f"Chat(match={self.match_id}, active={self.is_active})"
