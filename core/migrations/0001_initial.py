from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Document",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("collection", models.CharField(db_index=True, max_length=64)),
                ("record_id", models.CharField(max_length=255)),
                ("position", models.PositiveIntegerField(default=0)),
                ("data", models.JSONField(default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["collection", "position"],
            },
        ),
        migrations.AddConstraint(
            model_name="document",
            constraint=models.UniqueConstraint(fields=("collection", "record_id"), name="document_collection_record_uniq"),
        ),
        migrations.AddIndex(
            model_name="document",
            index=models.Index(fields=["collection", "position"], name="document_coll_pos_idx"),
        ),
    ]
