import uuid

from django.utils.text import slugify

from matching.models import Company, CompanyMember, JobPost, Profession, User, Video


def make_user(**kwargs):
    username = kwargs.pop("username", "johndoe")
    email = kwargs.pop(
        "email",
        f"{username}_{uuid.uuid4().hex[:6]}@example.org"
    )
    password = kwargs.pop("password", "Password123")

    return User.objects.create_user(
        username=username,
        email=email,
        password=password,
        first_name=kwargs.pop("first_name", "John"),
        last_name=kwargs.pop("last_name", "Doe"),
        **kwargs,
    )


def make_company(name="Acme Works", **extra):
    return Company.objects.create(
        name=name,
        slug=extra.pop("slug", f"{slugify(name)}-{uuid.uuid4().hex[:6]}"),
        city=extra.pop("city", "Hamburg"),
        **extra,
    )


def make_staff(company, username="recruiter", role=CompanyMember.ROLE_OWNER):
    """Create a user acting on behalf of `company`."""
    user = make_user(username=username, first_name="Rita", last_name="Recruiter")
    CompanyMember.objects.create(company=company, user=user, role=role)
    return user


def make_job_post(company, title="Apprentice Mechanic", **extra):
    return JobPost.objects.create(
        company=company,
        title=title,
        status=extra.pop("status", JobPost.STATUS_ACTIVE),
        **extra,
    )


def make_profession(name="Industrial Mechanic"):
    return Profession.objects.create(name=name, slug=slugify(name), category="Metal")


def make_video(company, job_post=None, title="A day in the workshop", **extra):
    return Video.objects.create(
        company=company,
        job_post=job_post,
        title=title,
        status=extra.pop("status", Video.STATUS_ACTIVE),
        **extra,
    )
