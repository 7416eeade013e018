"""
Seed demo data: products, clients, registry entries, transactions and
one finalized sale.

Skips seeding when products already exist. Run seed_admin.py first so the
demo sale has a seller.

Usage:
    python scripts/seed_demo.py
"""

import asyncio
import sys
from datetime import date
from pathlib import Path

# Add backend directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from sqlalchemy import func, select

from gspro.core.database import async_session_maker, engine
from gspro.models import Client, Product, RegistryEntry, Transaction
from gspro.models.base import Base
from gspro.repositories.user import UserRepository
from gspro.services.checkout import CheckoutLine, CheckoutService


PRODUCTS = [
    {"name": "Sucata de Alumínio", "sku": "SUC-AL-001", "kind": "sucata", "category": "Sucatas",
     "quantity": 1250, "unit": "kg", "price": 7.5, "cost": 5.2, "min_stock": 200, "location": "Box 04"},
    {"name": "Cabos de Cobre Mel", "sku": "SUC-CO-002", "kind": "sucata", "category": "Sucatas",
     "quantity": 15, "unit": "kg", "price": 42.0, "cost": 35.0, "min_stock": 100, "location": "Cofre A"},
    {"name": "Baterias Automotivas", "sku": "BAT-001", "kind": "peca", "category": "Peças",
     "quantity": 42, "unit": "un", "price": 180.0, "cost": 95.0, "min_stock": 50, "location": "Estante 02"},
    {"name": "Motores Elétricos", "sku": "MOT-055", "kind": "peca", "category": "Peças",
     "quantity": 12, "unit": "un", "price": 250.0, "cost": 120.0, "min_stock": 5, "location": "Depósito Sul"},
]

CLIENTS = [
    {"name": "Metalúrgica Silva Ltda", "document": "12.345.678/0001-90", "phone": "(11) 98888-1234"},
    {"name": "João Pereira", "document": "123.456.789-00", "email": "joao@example.com"},
]

REGISTRY = [
    {"kind": "categorias", "name": "Sucatas"},
    {"kind": "categorias", "name": "Peças"},
    {"kind": "localizacoes", "name": "Box 04"},
    {"kind": "localizacoes", "name": "Cofre A"},
    {"kind": "fornecedores", "name": "Desmanche Central", "document": "98.765.432/0001-10"},
    {"kind": "vendedores", "name": "Carlos Souza", "commission_pct": 3.0},
]

TRANSACTIONS = [
    {"description": "Venda de Sucata Cobre", "amount": 4200.0, "kind": "entrada", "category": "Vendas",
     "payment_method": "PIX", "occurred_on": date(2026, 1, 27)},
    {"description": "Pagamento Aluguel Depósito", "amount": 1800.0, "kind": "saida", "category": "Aluguel",
     "payment_method": "Boleto", "occurred_on": date(2026, 1, 25)},
    {"description": "Compra de Lote Baterias", "amount": 3500.0, "kind": "saida", "category": "Compras",
     "payment_method": "Transferência", "occurred_on": date(2026, 1, 24)},
    {"description": "Venda de Motor Elétrico", "amount": 250.0, "kind": "entrada", "category": "Vendas",
     "payment_method": "Dinheiro", "occurred_on": date(2026, 1, 24)},
    {"description": "Pagamento Energia Elétrica", "amount": 450.0, "kind": "saida", "category": "Energia",
     "payment_method": "PIX", "occurred_on": date(2026, 1, 23)},
    {"description": "Fornecedor de Baterias", "amount": 2100.0, "kind": "saida", "category": "Compras",
     "payment_method": "Boleto", "status": "pendente", "occurred_on": date(2026, 1, 20),
     "due_on": date(2026, 2, 10)},
]


async def seed_demo() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_maker() as session:
        try:
            existing = await session.scalar(select(func.count(Product.id)))
            if existing:
                print(f"{existing} products already present. Skipping...")
                return

            products = [Product(**fields) for fields in PRODUCTS]
            clients = [Client(**fields) for fields in CLIENTS]
            session.add_all(products)
            session.add_all(clients)
            session.add_all(RegistryEntry(**fields) for fields in REGISTRY)
            session.add_all(Transaction(**fields) for fields in TRANSACTIONS)
            await session.flush()

            seller = await UserRepository(session).get_by_email("admin@gspro.com.br")
            sale = await CheckoutService(session).finalize_sale(
                [
                    CheckoutLine(product_id=products[0].id, quantity=120),
                    CheckoutLine(product_id=products[3].id, quantity=1),
                ],
                "pix",
                client_id=clients[0].id,
                seller_id=seller.id if seller else None,
            )
            await session.commit()

            print(f"Seeded {len(products)} products, {len(clients)} clients, "
                  f"{len(TRANSACTIONS)} transactions and sale {sale.id[:8]}")

        except Exception as e:
            await session.rollback()
            print(f"Error seeding demo data: {e}")
            raise


if __name__ == "__main__":
    print("Seeding demo data...")
    asyncio.run(seed_demo())
    print("Done!")
