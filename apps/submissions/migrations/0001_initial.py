import apps.submissions.models
from decimal import Decimal
import django.core.validators
from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Submission',
            fields=[
                ('id', models.CharField(default=apps.submissions.models.generate_submission_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ('name', models.CharField(blank=True, max_length=255, null=True)),
                ('email', models.CharField(blank=True, max_length=255, null=True)),
                ('method', models.CharField(choices=[('wire', 'Bank wire'), ('crypto', 'Cryptocurrency')], default='crypto', max_length=10)),
                ('selected_network', models.CharField(blank=True, max_length=50, null=True)),
                ('amount', models.DecimalField(blank=True, decimal_places=2, max_digits=20, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('txid', models.CharField(blank=True, max_length=255, null=True)),
                ('id_file_url', models.CharField(blank=True, max_length=512, null=True)),
                ('payment_proof_url', models.CharField(blank=True, max_length=512, null=True)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('confirmed', 'Confirmed')], default='pending', max_length=20)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'submissions',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['created_at'], name='submissions_created_idx'),
                    models.Index(fields=['status', 'created_at'], name='submissions_status_idx'),
                ],
            },
        ),
    ]
