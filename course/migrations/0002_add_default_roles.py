from django.db import migrations


def forwards(apps, schema_editor):
    from course.models import add_default_roles_and_permissions

    add_default_roles_and_permissions(
            role_model=apps.get_model("course", "Role"),
            role_permission_model=apps.get_model("course", "RolePermission"))


class Migration(migrations.Migration):

    dependencies = [
        ("course", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(forwards, migrations.RunPython.noop),
    ]
