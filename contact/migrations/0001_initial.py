import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='ContactMessage',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.TextField()),
                ('email', models.EmailField(max_length=254)),
                ('phone', models.TextField(blank=True, null=True)),
                ('message', models.TextField()),
                ('status', models.CharField(choices=[('new', 'New'), ('read', 'Read'), ('replied', 'Replied')], default='new', max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'contact_messages',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status'], name='idx_contact_messages_status'),
                    models.Index(fields=['created_at'], name='idx_contact_messages_created'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('status__in', ['new', 'read', 'replied'])), name='contact_messages_status_check'),
                ],
            },
        ),
    ]
