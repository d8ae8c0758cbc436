import uuid

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
            name='State',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=80, unique=True)),
            ],
            options={
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='City',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=80)),
                ('state', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='cities', to='spaces.state')),
            ],
            options={
                'ordering': ['name'],
                'constraints': [models.UniqueConstraint(fields=('state', 'name'), name='city_unique_per_state')],
            },
        ),
        migrations.CreateModel(
            name='AdvertisingSpace',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200)),
                ('slug', models.SlugField(blank=True, max_length=255)),
                ('media_type', models.CharField(choices=[('Billboard', 'Billboard'), ('Digital Display', 'Digital Display'), ('Transit', 'Transit'), ('Street Furniture', 'Street Furniture'), ('Mall Display', 'Mall Display')], default='Billboard', max_length=30)),
                ('address', models.CharField(blank=True, max_length=255)),
                ('latitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('longitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('width', models.DecimalField(blank=True, decimal_places=2, max_digits=7, null=True)),
                ('height', models.DecimalField(blank=True, decimal_places=2, max_digits=7, null=True)),
                ('illumination', models.CharField(choices=[('Lit', 'Lit'), ('Non-lit', 'Non-lit'), ('Digital', 'Digital')], default='Non-lit', max_length=10)),
                ('visibility', models.CharField(choices=[('High', 'High'), ('Medium', 'Medium'), ('Low', 'Low')], default='Medium', max_length=10)),
                ('traffic', models.CharField(blank=True, max_length=100)),
                ('monthly_price', models.DecimalField(db_index=True, decimal_places=2, max_digits=12)),
                ('currency', models.CharField(default='INR', max_length=3)),
                ('is_available', models.BooleanField(default=True)),
                ('description', models.TextField(blank=True)),
                ('image_urls', models.JSONField(blank=True, default=list)),
                ('features', models.JSONField(blank=True, default=list)),
                ('footfall', models.CharField(blank=True, max_length=100)),
                ('target_audience', models.CharField(blank=True, max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('city', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='spaces', to='spaces.city')),
                ('managed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='managed_spaces', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['media_type'], name='space_media_type_idx'),
                    models.Index(fields=['latitude', 'longitude'], name='space_lat_lon_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Booking',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('start_date', models.DateField()),
                ('end_date', models.DateField()),
                ('client_name', models.CharField(max_length=150)),
                ('client_email', models.EmailField(max_length=254)),
                ('client_phone', models.CharField(blank=True, max_length=30)),
                ('company_name', models.CharField(blank=True, max_length=150)),
                ('company_gst', models.CharField(blank=True, max_length=20)),
                ('campaign_details', models.TextField(blank=True)),
                ('special_requirements', models.TextField(blank=True)),
                ('booking_price', models.DecimalField(decimal_places=2, max_digits=12)),
                ('period', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True)),
                ('booker', models.CharField(blank=True, max_length=150)),
                ('code', models.PositiveIntegerField(blank=True, db_index=True, null=True)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('confirmed', 'Confirmed'), ('cancelled', 'Cancelled')], default='pending', max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('space', models.ForeignKey(db_column='media_id', on_delete=django.db.models.deletion.CASCADE, related_name='bookings', to='spaces.advertisingspace')),
            ],
            options={
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['space', 'status', 'start_date', 'end_date'], name='booking_overlap_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('start_date__lte', models.F('end_date'))), name='booking_start_before_end'),
                ],
            },
        ),
    ]
