"""Model representing a person's one-sided interest in a company, job post, or video."""

from django.conf import settings
from django.db import models
from django.db.models import Q

from matching.utils.ids import new_row_id
from .company import Company
from .job_post import JobPost, Video


class Like(models.Model):
    """Person like on exactly one target.

    `target_type` is the discriminator; only the foreign key named by it is
    set. The check constraint makes any other combination unstorable.
    """
    TARGET_COMPANY = "company"
    TARGET_JOB_POST = "job_post"
    TARGET_VIDEO = "video"

    TARGET_TYPES = [
        (TARGET_COMPANY, "Company"),
        (TARGET_JOB_POST, "Job post"),
        (TARGET_VIDEO, "Video"),
    ]

    # discriminator -> foreign key field holding the target
    TARGET_FIELDS = {
        TARGET_COMPANY: "company",
        TARGET_JOB_POST: "job_post",
        TARGET_VIDEO: "video",
    }

    id = models.UUIDField(primary_key=True, default=new_row_id, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="likes",
    )
    target_type = models.CharField(max_length=20, choices=TARGET_TYPES)
    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="likes",
    )
    job_post = models.ForeignKey(
        JobPost,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="likes",
    )
    video = models.ForeignKey(
        Video,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="likes",
    )
    source = models.CharField(max_length=50, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """One like per user/target pair; exactly one target per row."""
        db_table = "like"
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(target_type="company", company__isnull=False, job_post__isnull=True, video__isnull=True)
                    | Q(target_type="job_post", company__isnull=True, job_post__isnull=False, video__isnull=True)
                    | Q(target_type="video", company__isnull=True, job_post__isnull=True, video__isnull=False)
                ),
                name="chk_like_single_target",
            ),
            models.UniqueConstraint(
                fields=["user", "company"],
                condition=Q(target_type="company"),
                name="uniq_like_user_company",
            ),
            models.UniqueConstraint(
                fields=["user", "job_post"],
                condition=Q(target_type="job_post"),
                name="uniq_like_user_job_post",
            ),
            models.UniqueConstraint(
                fields=["user", "video"],
                condition=Q(target_type="video"),
                name="uniq_like_user_video",
            ),
        ]
        indexes = [
            models.Index(fields=["user", "created_at"], name="idx_like_user_created"),
        ]

    @classmethod
    def target_lookup(cls, target_type, target_id):
        """Return the filter kwargs addressing a target by discriminator and id."""
        field = cls.TARGET_FIELDS[target_type]
        return {"target_type": target_type, f"{field}_id": target_id}

    @property
    def target(self):
        """The liked Company, JobPost, or Video."""
        return getattr(self, self.TARGET_FIELDS[self.target_type])

    @property
    def target_id(self):
        return getattr(self, f"{self.TARGET_FIELDS[self.target_type]}_id")

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} → {self.target_type}:{self.target_id}"
