from django.db import migrations, models

import content_editables.lib.fields


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ContentDetail",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                (
                    "item_key",
                    content_editables.lib.fields.MultiCollationCharField(
                        db_collations={"mysql": "utf8mb4_bin", "sqlite": "BINARY"},
                        max_length=500,
                    ),
                ),
                (
                    "name",
                    content_editables.lib.fields.MultiCollationCharField(
                        db_collations={"mysql": "utf8mb4_bin", "sqlite": "BINARY"},
                        max_length=255,
                    ),
                ),
                (
                    "value_type",
                    models.CharField(
                        choices=[
                            ("bool", "Boolean"),
                            ("int", "Integer"),
                            ("float", "Float"),
                            ("datetime", "Date/time"),
                            ("string", "String"),
                        ],
                        max_length=10,
                    ),
                ),
                ("bool_value", models.BooleanField(blank=True, null=True)),
                ("int_value", models.BigIntegerField(blank=True, null=True)),
                ("float_value", models.FloatField(blank=True, null=True)),
                ("datetime_value", models.DateTimeField(blank=True, null=True)),
                ("string_value", models.TextField(blank=True, null=True)),
            ],
            options={
                "verbose_name": "Content Detail",
                "verbose_name_plural": "Content Details",
            },
        ),
        migrations.AddConstraint(
            model_name="contentdetail",
            constraint=models.UniqueConstraint(
                fields=("item_key", "name"),
                name="content_editables_uniq_item_detail",
            ),
        ),
    ]
