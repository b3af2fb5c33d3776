"""Data model for the customers placing orders."""

from tortoise import fields, models


class Client(models.Model):
    id = fields.IntField(primary_key=True)
    name = fields.CharField(max_length=100)
    email = fields.CharField(max_length=100)

    orders: fields.ReverseRelation["Order"]  # Defined in the orders feature

    def __str__(self):
        return f"{self.name} <{self.email}>"

    class Meta:
        table = "clients"
