from tortoise import fields, models


class Order(models.Model):
    id = fields.IntField(primary_key=True)
    order_date = fields.DatetimeField(description="Timestamp without time zone")

    client: fields.ForeignKeyRelation["Client"] = fields.ForeignKeyField(
        "models.Client", related_name="orders", on_delete=fields.RESTRICT
    )

    details: fields.ReverseRelation["OrderDetail"]  # Local forward reference

    def __str__(self):
        return f"Order {self.id} for client {self.client_id} on {self.order_date}"

    class Meta:
        table = "orders"


class OrderDetail(models.Model):
    """One line item: a quantity of one product within one order."""

    id = fields.IntField(primary_key=True)

    order: fields.ForeignKeyRelation[Order] = fields.ForeignKeyField(
        "models.Order",
        related_name="details",
        on_delete=fields.CASCADE,  # Line items go with their order
    )
    product: fields.ForeignKeyRelation["Product"] = fields.ForeignKeyField(
        "models.Product",
        related_name="order_details",
        on_delete=fields.RESTRICT,
    )

    quantity = fields.IntField()

    def __str__(self):
        return f"{self.quantity} x product {self.product_id} in order {self.order_id}"

    class Meta:
        table = "order_details"
