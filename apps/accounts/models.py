from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models
from django.utils import timezone


class AdministratorManager(BaseUserManager):
    """Manager for the single email-authenticated administrator."""

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('Email is required')

        email = self.normalize_email(email)
        admin = self.model(email=email, **extra_fields)
        admin.set_password(password)
        admin.save(using=self._db)
        return admin


class Administrator(AbstractBaseUser):
    """
    The administrator who reviews submissions and edits payout details.

    Exactly one row exists after bootstrap. The password column holds a
    Django password hash; Django sessions bind to this model's id.
    """

    email = models.EmailField(unique=True, max_length=255)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    objects = AdministratorManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'administrators'

    def __str__(self):
        return self.email
