"""Custom user model; the primary key doubles as the caller identity."""

from django.core.validators import RegexValidator
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Model for user auth and public profile info."""

    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[RegexValidator(
            regex=r'^\w{3,}$',
            message='Username must consist of at least three alphanumericals'
        )]
    )
    email = models.EmailField(unique=True, blank=False)

    class Meta:
        """Default ordering for users."""
        ordering = ['username']

    @property
    def display_name(self):
        """Name shown next to ratings and likes."""
        return self.username
