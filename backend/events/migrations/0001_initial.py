# Generated migration for events app

from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('user', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, default='', max_length=500)),
                ('venue', models.CharField(blank=True, default='', max_length=255)),
                ('latitude', models.FloatField(blank=True, null=True)),
                ('longitude', models.FloatField(blank=True, null=True)),
                ('status', models.CharField(choices=[('ACTIVE', 'Active'), ('CANCELLED', 'Cancelled'), ('COMPLETED', 'Completed')], default='ACTIVE', help_text='ACTIVE, CANCELLED, COMPLETED. Only ACTIVE events are recommended.', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(help_text='Organizer of the event', on_delete=django.db.models.deletion.CASCADE, related_name='created_events', to='user.userprofile')),
            ],
            options={
                'db_table': 'events_event',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status'], name='events_even_status_5c1b8e_idx'),
                    models.Index(fields=['-created_at'], name='events_even_created_3f0e2a_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='EventTag',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('tag', models.CharField(choices=[('MUSIC_CONCERTS', 'Music & Concerts'), ('ART_SHOWS', 'Art & Shows'), ('SPORTS', 'Sports'), ('TECHNOLOGY', 'Technology'), ('FOOD_DRINK', 'Food & Drink'), ('TRAVEL', 'Travel'), ('EDUCATION', 'Education'), ('OUTDOORS', 'Outdoors'), ('FITNESS', 'Fitness'), ('SPIRITUAL', 'Spiritual')], max_length=30)),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='tags', to='events.event')),
            ],
            options={
                'db_table': 'events_event_tag',
                'unique_together': {('event', 'tag')},
            },
        ),
        migrations.CreateModel(
            name='EventEnrollment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('enrolled_at', models.DateTimeField(auto_now_add=True)),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='enrollments', to='events.event')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='enrollments', to='user.userprofile')),
            ],
            options={
                'db_table': 'events_event_enrollment',
                'unique_together': {('user', 'event')},
            },
        ),
        migrations.CreateModel(
            name='EventInterest',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='interests', to='events.event')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='event_interests', to='user.userprofile')),
            ],
            options={
                'db_table': 'events_event_interest',
                'unique_together': {('user', 'event')},
            },
        ),
    ]
