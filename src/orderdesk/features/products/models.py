"""Data model for the product catalogue."""

from tortoise import fields, models


class Product(models.Model):
    id = fields.IntField(primary_key=True)
    name = fields.CharField(max_length=100)
    description = fields.CharField(max_length=100, null=True)
    price = fields.FloatField(default=0.0, description="Unit price, two fractional digits")

    # String forward reference for inter-feature relation
    order_details: fields.ReverseRelation["OrderDetail"]

    def __str__(self):
        return f"{self.name} (${self.price:.2f})"

    class Meta:
        table = "products"
