"""Peewee-описание пяти таблиц мастерской.

Модели не привязаны к базе при импорте: :class:`database.store.ShopStore`
привязывает их к своему соединению на время каждой операции.
"""

from peewee import FloatField, IntegerField, Model, TextField
from playhouse.sqlite_ext import AutoIncrementField


class BaseModel(Model):
    id = AutoIncrementField()

    class Meta:
        database = None


class LedgerEntryRow(BaseModel):
    title = TextField(null=True)
    amount = FloatField(null=True)
    kind = TextField(column_name="type", null=True)
    note = TextField(null=True)
    timestamp = IntegerField(null=True)

    class Meta:
        table_name = "ledger"


class RepairJobRow(BaseModel):
    customer_name = TextField(column_name="customerName", null=True)
    phone = TextField(null=True)
    device_model = TextField(column_name="model", null=True)
    imei = TextField(null=True)
    problem = TextField(null=True)
    status = TextField(null=True)
    image_path = TextField(column_name="imagePath", null=True)
    created_at = IntegerField(column_name="createdAt", null=True)

    class Meta:
        table_name = "repairs"


class InventoryItemRow(BaseModel):
    name = TextField(null=True)
    qty = IntegerField(null=True)
    buy_price = FloatField(column_name="buyPrice", null=True)
    sell_price = FloatField(column_name="sellPrice", null=True)

    class Meta:
        table_name = "inventory"


class CustomerRow(BaseModel):
    name = TextField(null=True)
    phone = TextField(null=True)
    address = TextField(null=True)
    note = TextField(null=True)

    class Meta:
        table_name = "customers"


class MessageLogRow(BaseModel):
    to_number = TextField(column_name="toNumber", null=True)
    message = TextField(null=True)
    sent_at = IntegerField(column_name="sentAt", null=True)
    status = TextField(null=True)

    class Meta:
        table_name = "message_log"


ALL_MODELS = [
    LedgerEntryRow,
    RepairJobRow,
    InventoryItemRow,
    CustomerRow,
    MessageLogRow,
]

TABLES: dict[str, type[BaseModel]] = {
    model._meta.table_name: model for model in ALL_MODELS
}
