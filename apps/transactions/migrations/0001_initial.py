import uuid
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('clients', '0001_initial'),
        ('games', '0001_initial'),
        ('sale_sessions', '0001_initial'),
        ('sellers', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Transaction',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('transaction_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('client', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='transactions', to='clients.client')),
                ('label', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='transactions', to='games.depositedgame')),
                ('manager', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='transactions', to=settings.AUTH_USER_MODEL)),
                ('seller', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='transactions', to='sellers.seller')),
                ('session', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='transactions', to='sale_sessions.session')),
            ],
            options={
                'db_table': 'transactions',
                'ordering': ['-transaction_date'],
                'indexes': [
                    models.Index(fields=['session', '-transaction_date'], name='transactions_session_idx'),
                    models.Index(fields=['seller'], name='transactions_seller_idx'),
                    models.Index(fields=['client'], name='transactions_client_idx'),
                ],
            },
        ),
    ]
