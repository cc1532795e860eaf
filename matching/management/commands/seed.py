"""Management command to seed the database with companies, staff, job posts, persons, likes and matches."""

from random import choice, randint, random, sample

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils.text import slugify
from faker import Faker

from matching.exceptions import Conflict
from matching.models import Company, CompanyMember, JobPost, Profession, User, Video
from matching.services import CompanyLikeService, LikeService

PROFESSIONS = [
    ("Industrial Mechanic", "Metal & Electrical"),
    ("Electronics Technician", "Metal & Electrical"),
    ("IT Specialist", "IT"),
    ("Office Management Clerk", "Business"),
    ("Retail Salesperson", "Retail"),
    ("Nursing Assistant", "Health"),
    ("Carpenter", "Construction"),
    ("Chef", "Hospitality"),
]

SCHOOL_TYPES = ["Grammar school", "Comprehensive school", "Vocational college", "Sixth form"]
LIKE_SOURCES = ["feed", "profile", "search"]


class Command(BaseCommand):
    """Management command to seed the database with sample matching data."""
    COMPANY_COUNT = 10
    JOBS_PER_COMPANY = 5
    PERSON_COUNT = 60
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample matching data'

    def add_arguments(self, parser):
        parser.add_argument(
            "--likes-per-person",
            type=int,
            default=4,
            help="Maximum number of company/job likes created per person.",
        )

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        with transaction.atomic():
            professions = self.seed_professions()
            companies = self.seed_companies(professions)
            persons = self.seed_persons()
        self.seed_likes(persons, companies, max_likes=options["likes_per_person"])
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def seed_professions(self):
        professions = []
        for name, category in PROFESSIONS:
            profession, _ = Profession.objects.get_or_create(
                slug=slugify(name), defaults={"name": name, "category": category}
            )
            professions.append(profession)
        return professions

    def seed_companies(self, professions):
        """Create companies, each with an owner account, job posts and videos."""
        companies = []
        for _ in range(self.COMPANY_COUNT):
            name = self.faker.unique.company()
            company = Company.objects.create(
                name=name,
                slug=slugify(name)[:190] or self.faker.uuid4(),
                city=self.faker.city(),
                postal_code=self.faker.postcode(),
                industry=choice(PROFESSIONS)[1],
                short_description=self.faker.catch_phrase(),
                description=self.faker.paragraph(nb_sentences=5),
                verified=random() < 0.7,
                website=self.faker.url(),
                employee_count=choice(["1-10", "11-50", "51-200", "201-500"]),
                founded_year=randint(1950, 2020),
                benefits=self.faker.words(nb=3),
            )
            owner = self.create_user(is_company_staff=True)
            CompanyMember.objects.create(company=company, user=owner, role=CompanyMember.ROLE_OWNER)
            self.seed_job_posts(company, professions)
            companies.append(company)
        return companies

    def seed_job_posts(self, company, professions):
        for profession in sample(professions, self.JOBS_PER_COMPANY):
            title = f"Apprenticeship {profession.name}"
            job = JobPost.objects.create(
                company=company,
                profession=profession,
                title=title,
                slug=slugify(title),
                description=self.faker.paragraph(nb_sentences=4),
                city=company.city,
                postal_code=company.postal_code,
                salary_year1=randint(800, 1300),
                status=JobPost.STATUS_ACTIVE,
            )
            Video.objects.create(
                company=company,
                job_post=job,
                title=f"A day as {profession.name}",
                processed_path=f"videos/{job.id}.mp4",
                thumbnail_path=f"videos/{job.id}.jpg",
                duration_seconds=randint(20, 90),
                status=Video.STATUS_ACTIVE,
            )

    def seed_persons(self):
        return [self.create_user() for _ in range(self.PERSON_COUNT)]

    def create_user(self, is_company_staff=False):
        first_name = self.faker.first_name()
        last_name = self.faker.last_name()
        user = User.objects.create_user(
            username=self.faker.unique.user_name(),
            email=self.faker.unique.email(),
            password=self.DEFAULT_PASSWORD,
            first_name=first_name,
            last_name=last_name,
            city=self.faker.city(),
        )
        if not is_company_staff:
            user.bio = self.faker.sentence(nb_words=12)
            user.current_school_type = choice(SCHOOL_TYPES)
            user.graduation_year = randint(2024, 2028)
            user.interests = self.faker.words(nb=3)
            user.strengths = self.faker.words(nb=2)
            user.save()
        return user

    def seed_likes(self, persons, companies, max_likes):
        """Persons like companies or jobs; companies like some of their candidates back."""
        like_service = LikeService()
        company_like_service = CompanyLikeService()
        for person in persons:
            for company in sample(companies, min(len(companies), randint(0, max_likes))):
                try:
                    if random() < 0.5:
                        like_service.like_company(person.id, company.id, choice(LIKE_SOURCES))
                    else:
                        job = choice(list(company.job_posts.all()))
                        like_service.like_job(person.id, job.id, choice(LIKE_SOURCES))
                except Conflict:
                    continue

                if random() < 0.4:
                    owner = company.members.first()
                    company_like_service.company_like_user(
                        company.id, person.id, owner.user_id, note=self.faker.sentence()
                    )
