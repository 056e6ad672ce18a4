# app/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, Numeric, Text, text
)

metadata = MetaData()

products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column(
        "price",
        Numeric(10, 2),
        nullable=False,
        server_default=text("0.00"),
    ),
)
