from django.contrib.auth.hashers import BCryptPasswordHasher


class BCryptCost10PasswordHasher(BCryptPasswordHasher):
    """bcrypt with cost factor 10 (Django's default is 12)."""

    rounds = 10
