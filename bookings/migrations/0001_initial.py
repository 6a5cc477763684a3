import uuid

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Booking',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('booking_date', models.DateField()),
                ('booking_time', models.TimeField()),
                ('service_address', models.TextField()),
                ('total_amount', models.DecimalField(decimal_places=2, max_digits=10)),
                ('payment_method', models.CharField(choices=[('cash', 'Cash'), ('card', 'Card')], max_length=10)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('confirmed', 'Confirmed'), ('completed', 'Completed'), ('cancelled', 'Cancelled')], default='pending', max_length=20)),
                ('id_document_url', models.TextField(blank=True, null=True)),
                ('notes', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bookings', to='accounts.profile')),
            ],
            options={
                'db_table': 'bookings',
                'ordering': ['-booking_date', '-booking_time'],
                'indexes': [
                    models.Index(fields=['user'], name='idx_bookings_user_id'),
                    models.Index(fields=['status'], name='idx_bookings_status'),
                    models.Index(fields=['booking_date'], name='idx_bookings_date'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('payment_method__in', ['cash', 'card'])), name='bookings_payment_method_check'),
                    models.CheckConstraint(condition=models.Q(('status__in', ['pending', 'confirmed', 'completed', 'cancelled'])), name='bookings_status_check'),
                ],
            },
        ),
        migrations.CreateModel(
            name='BookingService',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('service_name', models.CharField(max_length=200)),
                ('service_price', models.DecimalField(decimal_places=2, max_digits=10)),
                ('duration', models.CharField(max_length=50)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('booking', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='services', to='bookings.booking')),
            ],
            options={
                'db_table': 'booking_services',
                'ordering': ['created_at'],
                'indexes': [
                    models.Index(fields=['booking'], name='idx_booking_services_booking'),
                ],
            },
        ),
    ]
