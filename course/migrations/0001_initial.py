import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="CourseCategory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, verbose_name="Category name")),
                ("visible", models.BooleanField(default=True, help_text="Hidden categories are only shown to users allowed to view hidden categories.", verbose_name="Visible")),
                ("path", models.CharField(blank=True, editable=False, help_text="Ids of all ancestors and of the category itself, e.g. '/1/4/9'. Maintained automatically.", max_length=255, verbose_name="Path")),
                ("parent", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name="children", to="course.coursecategory", verbose_name="Parent category")),
            ],
            options={
                "verbose_name": "Course category",
                "verbose_name_plural": "Course categories",
                "ordering": ("path",),
            },
        ),
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("shortname", models.CharField(db_index=True, help_text="A short name for the course, e.g. 'CS123-F24'. Letters, numbers, dots, underscores and hyphens only.", max_length=255, unique=True, validators=[django.core.validators.RegexValidator("^(?P<course_shortname>[-_.a-zA-Z0-9]+)$", message="Short name may only contain letters, numbers, dots, underscores and hyphens.")], verbose_name="Course short name")),
                ("fullname", models.CharField(help_text="A human-readable name for the course. (e.g. 'Numerical Methods')", max_length=255, verbose_name="Course full name")),
                ("visible", models.BooleanField(default=True, help_text="Is the course visible to participants without permission to view hidden courses?", verbose_name="Visible")),
                ("start_date", models.DateTimeField(default=django.utils.timezone.now, verbose_name="Start date")),
                ("end_date", models.DateTimeField(blank=True, help_text="Leave blank for courses without an end date.", null=True, verbose_name="End date")),
                ("category", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name="courses", to="course.coursecategory", verbose_name="Category")),
            ],
            options={
                "verbose_name": "Course",
                "verbose_name_plural": "Courses",
                "ordering": ("-start_date", "shortname"),
            },
        ),
        migrations.CreateModel(
            name="Role",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("shortname", models.CharField(help_text="A symbolic name for this role. Lower case letters, digits and underscores.", max_length=100, unique=True, validators=[django.core.validators.RegexValidator("^[a-z][a-z0-9_]*$", message="Should be lower_case_with_underscores, no spaces allowed.")], verbose_name="Role short name")),
                ("name", models.CharField(blank=True, help_text="A human-readable name for this role. May be left blank for built-in roles.", max_length=255, verbose_name="Role name")),
                ("sortorder", models.IntegerField(default=0, verbose_name="Sort order")),
            ],
            options={
                "verbose_name": "Role",
                "verbose_name_plural": "Roles",
                "ordering": ("sortorder", "id"),
            },
        ),
        migrations.CreateModel(
            name="RolePermission",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("permission", models.CharField(choices=[("delete_course", "Delete course"), ("view_hidden_courses", "View hidden courses"), ("view_hidden_categories", "View hidden categories")], db_index=True, max_length=200, verbose_name="Permission")),
                ("role", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="permissions", to="course.role", verbose_name="Role")),
            ],
            options={
                "verbose_name": "Role permission",
                "verbose_name_plural": "Role permissions",
                "unique_together": {("role", "permission")},
            },
        ),
        migrations.CreateModel(
            name="Participation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("enroll_time", models.DateTimeField(default=django.utils.timezone.now, verbose_name="Enroll time")),
                ("status", models.CharField(choices=[("active", "Active"), ("suspended", "Suspended")], default="active", max_length=50, verbose_name="Participation status")),
                ("course", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="participations", to="course.course", verbose_name="Course")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="participations", to=settings.AUTH_USER_MODEL, verbose_name="User ID")),
            ],
            options={
                "verbose_name": "Participation",
                "verbose_name_plural": "Participations",
                "ordering": ("course", "user"),
                "unique_together": {("user", "course")},
            },
        ),
        migrations.AddField(
            model_name="course",
            name="participants",
            field=models.ManyToManyField(through="course.Participation", to=settings.AUTH_USER_MODEL),
        ),
        migrations.CreateModel(
            name="RoleAssignment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("component", models.CharField(blank=True, default="", help_text="What created this assignment. Blank for manual assignments.", max_length=100, verbose_name="Component")),
                ("assign_time", models.DateTimeField(default=django.utils.timezone.now, verbose_name="Assign time")),
                ("participation", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="role_assignments", to="course.participation", verbose_name="Participation")),
                ("role", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assignments", to="course.role", verbose_name="Role")),
            ],
            options={
                "verbose_name": "Role assignment",
                "verbose_name_plural": "Role assignments",
                "ordering": ("participation", "role", "id"),
                "unique_together": {("participation", "role", "component")},
            },
        ),
        migrations.CreateModel(
            name="Favourite",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("component", models.CharField(max_length=100, verbose_name="Component")),
                ("item_type", models.CharField(max_length=100, verbose_name="Item type")),
                ("item_id", models.BigIntegerField(verbose_name="Item ID")),
                ("time_created", models.DateTimeField(default=django.utils.timezone.now, verbose_name="Time created")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="favourites", to=settings.AUTH_USER_MODEL, verbose_name="User ID")),
            ],
            options={
                "verbose_name": "Favourite",
                "verbose_name_plural": "Favourites",
                "unique_together": {("user", "component", "item_type", "item_id")},
            },
        ),
    ]
