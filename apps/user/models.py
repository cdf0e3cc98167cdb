"""Models for the user app.

User - an account; only the bcrypt hash of the password is stored
"""
from tortoise import fields, models

USERNAME_MAX_LENGTH = 150
NAME_MAX_LENGTH = 255


class User(models.Model):
    id = fields.IntField(pk=True)
    username = fields.CharField(max_length=USERNAME_MAX_LENGTH, unique=True)
    name = fields.CharField(max_length=NAME_MAX_LENGTH, null=True)
    password_hash = fields.CharField(max_length=128)

    class Meta:
        default_connection = "default"
        table = "users"
        ordering = ["id"]
