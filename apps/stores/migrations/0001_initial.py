# Generated manually for the store reviews schema

import uuid
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Store',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=200)),
                ('description', models.TextField(blank=True)),
                ('address', models.CharField(max_length=300)),
                ('opening_hours', models.CharField(blank=True, max_length=200)),
                ('latitude', models.FloatField(validators=[MinValueValidator(-90), MaxValueValidator(90)])),
                ('longitude', models.FloatField(validators=[MinValueValidator(-180), MaxValueValidator(180)])),
                ('google_map_url', models.URLField(blank=True, max_length=500)),
                ('place_id', models.CharField(blank=True, max_length=200)),
                ('is_approved', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'stores',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['is_approved', 'created_at'], name='stores_approved_idx')],
            },
        ),
        migrations.CreateModel(
            name='Menu',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('price', models.PositiveIntegerField(blank=True, null=True)),
                ('description', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('store', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='menus', to='stores.store')),
            ],
            options={
                'db_table': 'menus',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['store', 'name'], name='menus_store_name_idx')],
            },
        ),
        migrations.CreateModel(
            name='File',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('file_kind', models.CharField(choices=[('image', 'Image'), ('video', 'Video'), ('other', 'Other')], default='image', max_length=20)),
                ('file_name', models.CharField(max_length=255)),
                ('file_size', models.PositiveBigIntegerField(blank=True, null=True)),
                ('object_key', models.CharField(max_length=500, unique=True)),
                ('content_type', models.CharField(blank=True, max_length=100)),
                ('is_deleted', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='uploaded_files', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'files',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='StoreFile',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('file', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='store_files', to='stores.file')),
                ('store', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='store_files', to='stores.store')),
            ],
            options={
                'db_table': 'store_files',
                'constraints': [models.UniqueConstraint(fields=('store', 'file'), name='store_files_unique_pair')],
            },
        ),
        migrations.AddField(
            model_name='file',
            name='stores',
            field=models.ManyToManyField(blank=True, related_name='files', through='stores.StoreFile', to='stores.store'),
        ),
    ]
