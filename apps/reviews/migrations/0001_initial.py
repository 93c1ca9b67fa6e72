# Generated manually for the reviews app

import uuid
import django.core.validators
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
            name='Review',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('book_id', models.CharField(db_index=True, max_length=64)),
                ('rating', models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ('comment', models.TextField(max_length=1000, validators=[django.core.validators.MinLengthValidator(5)])),
                ('likes_count', models.PositiveIntegerField(default=0)),
                ('dislikes_count', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('author', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reviews', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'reviews',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['book_id', 'created_at'], name='reviews_book_created_idx'),
                    models.Index(fields=['author', 'created_at'], name='reviews_author_created_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('author', 'book_id'), name='unique_review_per_book'),
                    models.CheckConstraint(condition=models.Q(('likes_count__gte', 0), ('dislikes_count__gte', 0)), name='review_vote_counters_non_negative'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Vote',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('like', models.BooleanField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('review', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='votes', to='reviews.review')),
                ('voter', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='votes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'review_votes',
                'indexes': [
                    models.Index(fields=['review', 'like'], name='votes_review_like_idx'),
                    models.Index(fields=['voter', 'created_at'], name='votes_voter_created_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('voter', 'review'), name='unique_vote_per_review'),
                ],
            },
        ),
    ]
