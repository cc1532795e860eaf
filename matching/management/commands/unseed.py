from django.core.management.base import BaseCommand
from django.db import transaction

from matching.models import Company, Profession, User


class Command(BaseCommand):
    """
    Management command to remove (unseed) sample data from the database.

    Deletes companies (cascading to job posts, videos, likes, matches and
    chats), professions and all non-staff users. Administrative accounts are
    preserved.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        with transaction.atomic():
            companies, _ = Company.objects.all().delete()
            Profession.objects.all().delete()
            users, _ = User.objects.filter(is_staff=False).delete()

        self.stdout.write(self.style.SUCCESS(f"Deleted {companies} company-owned rows and {users} user-owned rows."))
