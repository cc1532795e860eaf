import django.contrib.auth.models
import django.contrib.auth.validators
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import matching.utils.ids
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("username", models.CharField(error_messages={"unique": "A user with that username already exists."}, help_text="Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.", max_length=150, unique=True, validators=[django.contrib.auth.validators.UnicodeUsernameValidator()], verbose_name="username")),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("avatar", models.ImageField(blank=True, null=True, upload_to="avatars/")),
                ("city", models.CharField(blank=True, max_length=100)),
                ("bio", models.TextField(blank=True, help_text="short bio shown to companies", max_length=500, validators=[django.core.validators.MaxLengthValidator(500)])),
                ("current_school_type", models.CharField(blank=True, max_length=50)),
                ("graduation_year", models.PositiveIntegerField(blank=True, null=True)),
                ("interests", models.JSONField(blank=True, default=list)),
                ("strengths", models.JSONField(blank=True, default=list)),
                ("preferred_professions", models.JSONField(blank=True, default=list)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "verbose_name": "user",
                "verbose_name_plural": "users",
                "ordering": ["last_name", "first_name"],
                "abstract": False,
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="Company",
            fields=[
                ("id", models.UUIDField(default=matching.utils.ids.new_row_id, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=200)),
                ("slug", models.SlugField(max_length=200, unique=True)),
                ("logo_url", models.URLField(blank=True, max_length=500)),
                ("cover_image_url", models.URLField(blank=True, max_length=500)),
                ("city", models.CharField(blank=True, max_length=100)),
                ("postal_code", models.CharField(blank=True, max_length=10)),
                ("industry", models.CharField(blank=True, max_length=100)),
                ("short_description", models.CharField(blank=True, max_length=300)),
                ("description", models.TextField(blank=True)),
                ("verified", models.BooleanField(default=False)),
                ("website", models.URLField(blank=True, max_length=300)),
                ("employee_count", models.CharField(blank=True, max_length=20)),
                ("founded_year", models.PositiveIntegerField(blank=True, null=True)),
                ("benefits", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "company",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="CompanyMember",
            fields=[
                ("id", models.UUIDField(default=matching.utils.ids.new_row_id, editable=False, primary_key=True, serialize=False)),
                ("role", models.CharField(choices=[("owner", "Owner"), ("admin", "Admin"), ("member", "Member")], default="member", max_length=20)),
                ("joined_at", models.DateTimeField(auto_now_add=True)),
                ("company", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="members", to="matching.company")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="company_memberships", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "company_member",
                "constraints": [
                    models.UniqueConstraint(fields=("company", "user"), name="uniq_company_member_company_user"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Profession",
            fields=[
                ("id", models.UUIDField(default=matching.utils.ids.new_row_id, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=150)),
                ("slug", models.SlugField(max_length=150, unique=True)),
                ("category", models.CharField(blank=True, max_length=100)),
            ],
            options={
                "db_table": "profession",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="JobPost",
            fields=[
                ("id", models.UUIDField(default=matching.utils.ids.new_row_id, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("slug", models.SlugField(blank=True, max_length=255)),
                ("description", models.TextField(blank=True)),
                ("city", models.CharField(blank=True, max_length=100)),
                ("postal_code", models.CharField(blank=True, max_length=10)),
                ("salary_year1", models.PositiveIntegerField(blank=True, null=True)),
                ("status", models.CharField(choices=[("DRAFT", "Draft"), ("ACTIVE", "Active"), ("PAUSED", "Paused"), ("CLOSED", "Closed")], default="DRAFT", max_length=20)),
                ("like_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("company", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="job_posts", to="matching.company")),
                ("profession", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="job_posts", to="matching.profession")),
            ],
            options={
                "db_table": "job_post",
            },
        ),
        migrations.CreateModel(
            name="Video",
            fields=[
                ("id", models.UUIDField(default=matching.utils.ids.new_row_id, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("processed_path", models.CharField(blank=True, max_length=500)),
                ("thumbnail_path", models.CharField(blank=True, max_length=500)),
                ("duration_seconds", models.PositiveIntegerField(blank=True, null=True)),
                ("status", models.CharField(choices=[("PROCESSING", "Processing"), ("ACTIVE", "Active"), ("ARCHIVED", "Archived")], default="PROCESSING", max_length=20)),
                ("like_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("company", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="videos", to="matching.company")),
                ("job_post", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="videos", to="matching.jobpost")),
            ],
            options={
                "db_table": "video",
            },
        ),
        migrations.CreateModel(
            name="Like",
            fields=[
                ("id", models.UUIDField(default=matching.utils.ids.new_row_id, editable=False, primary_key=True, serialize=False)),
                ("target_type", models.CharField(choices=[("company", "Company"), ("job_post", "Job post"), ("video", "Video")], max_length=20)),
                ("source", models.CharField(blank=True, max_length=50)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("company", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="likes", to="matching.company")),
                ("job_post", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="likes", to="matching.jobpost")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="likes", to=settings.AUTH_USER_MODEL)),
                ("video", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="likes", to="matching.video")),
            ],
            options={
                "db_table": "like",
                "indexes": [
                    models.Index(fields=["user", "created_at"], name="idx_like_user_created"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=(
                            models.Q(target_type="company", company__isnull=False, job_post__isnull=True, video__isnull=True)
                            | models.Q(target_type="job_post", company__isnull=True, job_post__isnull=False, video__isnull=True)
                            | models.Q(target_type="video", company__isnull=True, job_post__isnull=True, video__isnull=False)
                        ),
                        name="chk_like_single_target",
                    ),
                    models.UniqueConstraint(condition=models.Q(target_type="company"), fields=("user", "company"), name="uniq_like_user_company"),
                    models.UniqueConstraint(condition=models.Q(target_type="job_post"), fields=("user", "job_post"), name="uniq_like_user_job_post"),
                    models.UniqueConstraint(condition=models.Q(target_type="video"), fields=("user", "video"), name="uniq_like_user_video"),
                ],
            },
        ),
        migrations.CreateModel(
            name="CompanyLike",
            fields=[
                ("id", models.UUIDField(default=matching.utils.ids.new_row_id, editable=False, primary_key=True, serialize=False)),
                ("note", models.TextField(blank=True, max_length=2000)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("company", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="candidate_likes", to="matching.company")),
                ("job_post", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="company_likes", to="matching.jobpost")),
                ("liked_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="company_likes", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "company_like",
                "constraints": [
                    models.UniqueConstraint(fields=("company", "user"), name="uniq_company_like_company_user"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Match",
            fields=[
                ("id", models.UUIDField(default=matching.utils.ids.new_row_id, editable=False, primary_key=True, serialize=False)),
                ("initiated_by", models.CharField(choices=[("user", "User"), ("company", "Company")], max_length=10)),
                ("status", models.CharField(choices=[("ACTIVE", "Active"), ("DECLINED", "Declined")], default="ACTIVE", max_length=10)),
                ("matched_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("company", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="matches", to="matching.company")),
                ("job_post", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="matches", to="matching.jobpost")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="matches", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "match",
                "indexes": [
                    models.Index(fields=["company", "status"], name="idx_match_company_status"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("user", "company"), name="uniq_match_user_company"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Chat",
            fields=[
                ("id", models.UUIDField(default=matching.utils.ids.new_row_id, editable=False, primary_key=True, serialize=False)),
                ("is_active", models.BooleanField(default=True)),
                ("last_message_at", models.DateTimeField(blank=True, null=True)),
                ("last_message_preview", models.CharField(blank=True, max_length=200)),
                ("user_unread_count", models.PositiveIntegerField(default=0)),
                ("company_unread_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("company", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="chats", to="matching.company")),
                ("match", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="chat", to="matching.match")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="chats", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "chat",
            },
        ),
    ]
