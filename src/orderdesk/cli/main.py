import asyncio
import datetime
import logging
import typer
from tortoise import Tortoise
from tortoise.transactions import in_transaction
from tortoise.exceptions import IntegrityError, OperationalError

from ..core import config
from ..core.logging_config import setup_logging
from ..features.clients.models import Client
from ..features.orders.models import Order, OrderDetail
from ..features.products.models import Product

logger = logging.getLogger(__name__)

app = typer.Typer(name="orderdesk", help="CLI for managing Orderdesk application data.")


@app.callback()
def main():
    setup_logging()


# Shared async context manager for database connection
class DBConnection:
    def __init__(self, db_url: str = config.DATABASE_URL):
        self.db_url = db_url

    async def __aenter__(self):
        await Tortoise.init(config=config.tortoise_config(self.db_url))
        await Tortoise.generate_schemas(safe=True)  # Generate schema if it doesn't exist
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await Tortoise.close_connections()


DEMO_CLIENTS = [
    ("Juan Perez", "juan.perez@example.com"),
    ("Maria Lopez", "maria.lopez@example.com"),
    ("Julia Torres", "julia.torres@example.com"),
]

DEMO_PRODUCTS = [
    ("Laptop", "14 inch ultrabook", 1200.00),
    ("Mouse", "Wireless mouse", 25.50),
    ("Keyboard", None, 45.00),
    ("USB Cable", "", 8.99),
]

# (client index, days before today, [(product index, quantity), ...])
DEMO_ORDERS = [
    (0, 30, [(0, 1), (1, 2)]),
    (0, 10, [(1, 3), (3, 1)]),
    (1, 5, [(2, 1)]),
]


async def seed_demo_data() -> dict[str, int]:
    """
    Inserts a small demo data set into an empty store.

    Must run with Tortoise already initialised. Returns the number of rows
    created per table; nothing is written when clients already exist.
    """
    if await Client.all().exists():
        logger.info("Store already has clients, skipping demo data.")
        return {"clients": 0, "products": 0, "orders": 0, "order_details": 0}

    today = datetime.datetime.combine(datetime.date.today(), datetime.time(12, 0))
    detail_count = 0
    # All or nothing
    async with in_transaction() as conn:
        created_clients = [
            await Client.create(name=name, email=email, using_db=conn) for name, email in DEMO_CLIENTS
        ]
        created_products = [
            await Product.create(name=name, description=description, price=price, using_db=conn)
            for name, description, price in DEMO_PRODUCTS
        ]
        for client_index, days_ago, lines in DEMO_ORDERS:
            order = await Order.create(
                client=created_clients[client_index],
                order_date=today - datetime.timedelta(days=days_ago),
                using_db=conn,
            )
            for product_index, quantity in lines:
                await OrderDetail.create(
                    order=order, product=created_products[product_index], quantity=quantity, using_db=conn
                )
                detail_count += 1

    return {
        "clients": len(created_clients),
        "products": len(created_products),
        "orders": len(DEMO_ORDERS),
        "order_details": detail_count,
    }


async def count_rows() -> dict[str, int]:
    return {
        "clients": await Client.all().count(),
        "products": await Product.all().count(),
        "orders": await Order.all().count(),
        "order_details": await OrderDetail.all().count(),
    }


@app.command("init-db")
def init_db_command(
    db_url: str = typer.Option(config.DATABASE_URL, help="Tortoise database URL.")
):
    """Creates the tables if they do not exist yet."""
    asyncio.run(_init_db(db_url))


async def _init_db(db_url: str):
    try:
        async with DBConnection(db_url):
            typer.secho(f"Schema ready at {db_url}", fg=typer.colors.GREEN)
    except OperationalError as e:
        typer.secho(f"Error initialising the database: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)


@app.command("seed-demo-data")
def seed_demo_data_command(
    db_url: str = typer.Option(config.DATABASE_URL, help="Tortoise database URL.")
):
    """Fills an empty store with demo clients, products and orders."""
    asyncio.run(_seed_demo_data(db_url))


async def _seed_demo_data(db_url: str):
    async with DBConnection(db_url):
        try:
            created = await seed_demo_data()
        except IntegrityError as e:
            typer.secho(f"Error seeding demo data: {e}", fg=typer.colors.RED)
            raise typer.Exit(code=1)
        if not any(created.values()):
            typer.secho("Store already has data, nothing seeded.", fg=typer.colors.YELLOW)
            return
        for table, count in created.items():
            typer.echo(f"{table}: {count} created")
        typer.secho("Demo data seeded.", fg=typer.colors.GREEN)


@app.command("test-db-connection")
def test_db_connection_command(
    db_url: str = typer.Option(config.DATABASE_URL, help="Tortoise database URL.")
):
    """Tests the database connection and prints the row count of every table."""
    asyncio.run(_test_db_connection(db_url))


async def _test_db_connection(db_url: str):
    async with DBConnection(db_url):
        typer.echo("Successfully connected to the database.")
        for table, count in (await count_rows()).items():
            typer.echo(f"{table}: {count}")


if __name__ == "__main__":
    app()
