"""Models for the blog app.

Blog - a bookmarked blog post; the integer primary key doubles as insertion order
"""
from tortoise import fields, models

TITLE_MAX_LENGTH = 500
AUTHOR_MAX_LENGTH = 255
URL_MAX_LENGTH = 2048


class Blog(models.Model):
    id = fields.IntField(pk=True)
    title = fields.CharField(max_length=TITLE_MAX_LENGTH)
    author = fields.CharField(max_length=AUTHOR_MAX_LENGTH, null=True)
    url = fields.CharField(max_length=URL_MAX_LENGTH)
    likes = fields.BigIntField(default=0)

    class Meta:
        default_connection = "default"
        table = "blogs"
        ordering = ["id"]
