"""Custom user model for job-seekers and company staff."""

from django.contrib.auth.models import AbstractUser
from django.core.validators import MaxLengthValidator
from django.db import models
from libgravatar import Gravatar


class User(AbstractUser):
    """Authenticated person. Staff accounts are linked to a company via CompanyMember."""

    email = models.EmailField(unique=True, blank=False)
    avatar = models.ImageField(upload_to="avatars/", blank=True, null=True)
    city = models.CharField(max_length=100, blank=True)
    bio = models.TextField(
        max_length=500,
        blank=True,
        help_text="short bio shown to companies",
        validators=[MaxLengthValidator(500)]
    )
    current_school_type = models.CharField(max_length=50, blank=True)
    graduation_year = models.PositiveIntegerField(null=True, blank=True)

    # free-form string arrays
    interests = models.JSONField(default=list, blank=True)
    strengths = models.JSONField(default=list, blank=True)
    preferred_professions = models.JSONField(default=list, blank=True)

    class Meta:
        ordering = ['last_name', 'first_name']

    def full_name(self):
        return f'{self.first_name} {self.last_name}'.strip()

    def gravatar(self, size=120):
        return Gravatar(self.email).get_image(size=size, default="identicon")

    def avatar_or_gravatar(self, size=120):
        """Uploaded profile photo if there is one, else the gravatar."""
        if self.avatar:
            return self.avatar.url
        return self.gravatar(size=size)

    @property
    def avatar_url(self):
        """Preferred avatar URL for summaries."""
        return self.avatar_or_gravatar(size=200)

    def company_membership(self):
        """Return the CompanyMember row for staff accounts, or None."""
        return self.company_memberships.select_related("company").first()
