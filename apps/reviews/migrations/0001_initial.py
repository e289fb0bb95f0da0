# Generated manually for the store reviews schema

import uuid
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion


def score_field():
    return models.PositiveSmallIntegerField(blank=True, null=True, validators=[MinValueValidator(1), MaxValueValidator(5)])


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('stores', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Review',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('rating', models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])),
                ('rating_taste', score_field()),
                ('rating_atmosphere', score_field()),
                ('rating_service', score_field()),
                ('rating_speed', score_field()),
                ('rating_cleanliness', score_field()),
                ('content', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('author', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reviews', to=settings.AUTH_USER_MODEL)),
                ('store', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reviews', to='stores.store')),
            ],
            options={
                'db_table': 'reviews',
                'ordering': ['-created_at'],
                'constraints': [models.CheckConstraint(condition=models.Q(('rating__gte', 1), ('rating__lte', 5)), name='reviews_rating_range')],
                'indexes': [
                    models.Index(fields=['store', 'created_at'], name='reviews_store_created_idx'),
                    models.Index(fields=['author', 'created_at'], name='reviews_author_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ReviewMenu',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('menu', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='review_links', to='stores.menu')),
                ('review', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='menu_links', to='reviews.review')),
            ],
            options={
                'db_table': 'review_menus',
                'constraints': [models.UniqueConstraint(fields=('review', 'menu'), name='review_menus_unique_pair')],
            },
        ),
        migrations.CreateModel(
            name='ReviewFile',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('file', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='review_links', to='stores.file')),
                ('review', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='file_links', to='reviews.review')),
            ],
            options={
                'db_table': 'review_files',
                'constraints': [models.UniqueConstraint(fields=('review', 'file'), name='review_files_unique_pair')],
            },
        ),
        migrations.CreateModel(
            name='ReviewLike',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('review', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='likes', to='reviews.review')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='review_likes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'review_likes',
                'constraints': [models.UniqueConstraint(fields=('review', 'user'), name='review_likes_unique_pair')],
                'indexes': [models.Index(fields=['user', 'created_at'], name='review_likes_user_idx')],
            },
        ),
        migrations.AddField(
            model_name='review',
            name='menus',
            field=models.ManyToManyField(blank=True, related_name='reviews', through='reviews.ReviewMenu', to='stores.menu'),
        ),
        migrations.AddField(
            model_name='review',
            name='files',
            field=models.ManyToManyField(blank=True, related_name='reviews', through='reviews.ReviewFile', to='stores.file'),
        ),
    ]
