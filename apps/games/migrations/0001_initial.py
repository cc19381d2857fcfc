import uuid
from decimal import Decimal
import django.db.models.deletion
from django.core.validators import MinValueValidator
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('sale_sessions', '0001_initial'),
        ('sellers', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='GameDescription',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=200)),
                ('publisher', models.CharField(blank=True, max_length=200)),
                ('photo_url', models.URLField(blank=True, max_length=500)),
                ('description', models.TextField(blank=True)),
                ('min_players', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('max_players', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('age_range', models.CharField(blank=True, max_length=50)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'game_descriptions',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='DepositedGame',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('sale_price', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('for_sale', models.BooleanField(default=False)),
                ('picked_up', models.BooleanField(default=False)),
                ('sold', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('game_description', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='deposited_games', to='games.gamedescription')),
                ('seller', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='deposited_games', to='sellers.seller')),
                ('session', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='deposited_games', to='sale_sessions.session')),
            ],
            options={
                'db_table': 'deposited_games',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['seller', 'session'], name='deposited_seller_session_idx'),
                    models.Index(fields=['session', 'for_sale'], name='deposited_session_sale_idx'),
                ],
            },
        ),
    ]
