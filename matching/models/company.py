"""Employer profile and the staff accounts acting on its behalf."""

from django.conf import settings
from django.db import models

from matching.utils.ids import new_row_id


class Company(models.Model):
    """An employer that persons can like and that can like persons back."""
    id = models.UUIDField(primary_key=True, default=new_row_id, editable=False)
    name = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    logo_url = models.URLField(max_length=500, blank=True)
    cover_image_url = models.URLField(max_length=500, blank=True)
    city = models.CharField(max_length=100, blank=True)
    postal_code = models.CharField(max_length=10, blank=True)
    industry = models.CharField(max_length=100, blank=True)
    short_description = models.CharField(max_length=300, blank=True)
    description = models.TextField(blank=True)
    verified = models.BooleanField(default=False)
    website = models.URLField(max_length=300, blank=True)
    employee_count = models.CharField(max_length=20, blank=True)
    founded_year = models.PositiveIntegerField(null=True, blank=True)
    benefits = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "company"
        ordering = ["name"]

    def __str__(self):
        return self.name


class CompanyMember(models.Model):
    """Staff account of a company; source of the company-side actor identity."""
    ROLE_OWNER = "owner"
    ROLE_ADMIN = "admin"
    ROLE_MEMBER = "member"

    ROLES = [
        (ROLE_OWNER, "Owner"),
        (ROLE_ADMIN, "Admin"),
        (ROLE_MEMBER, "Member"),
    ]

    id = models.UUIDField(primary_key=True, default=new_row_id, editable=False)
    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        related_name="members",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="company_memberships",
    )
    role = models.CharField(max_length=20, choices=ROLES, default=ROLE_MEMBER)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "company_member"
        constraints = [
            models.UniqueConstraint(fields=["company", "user"], name="uniq_company_member_company_user"),
        ]

    def __str__(self) -> str:
        return f"CompanyMember({self.user_id} @ {self.company_id}, {self.role})"
