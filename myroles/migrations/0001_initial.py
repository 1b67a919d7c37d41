import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="BlockInstance",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("showpast", models.BooleanField(default=True, verbose_name="Show past courses")),
                ("showinprogress", models.BooleanField(default=True, verbose_name="Show courses in progress")),
                ("showfuture", models.BooleanField(default=True, verbose_name="Show future courses")),
                ("onlyfavourite", models.BooleanField(default=False, verbose_name="Only show favourite courses")),
                ("foldonstart", models.BooleanField(default=False, help_text="Show the role sections collapsed when the page is loaded.", verbose_name="Fold on start")),
                ("usetimeranges", models.BooleanField(default=True, help_text="Show start and end date of each course.", verbose_name="Show time ranges")),
                ("usecategories", models.BooleanField(default=True, help_text="Show the top-level category of each course.", verbose_name="Show categories")),
                ("creation_time", models.DateTimeField(auto_now_add=True, verbose_name="Creation time")),
                ("owner", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="myroles_block", to=settings.AUTH_USER_MODEL, verbose_name="Owner")),
            ],
            options={
                "verbose_name": "My roles in courses block",
                "verbose_name_plural": "My roles in courses blocks",
                "permissions": (("view_content", "View the content of the block"),),
            },
        ),
    ]
