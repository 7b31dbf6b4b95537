# scripts/seed_products.py
from api.db import init_db, session_scope
from api import models

PRODUCTS = [
    {"name": "Wireless Headphones", "price": 79.99, "image": "/images/headphones.jpg",
     "description": "Over-ear Bluetooth headphones with 30 hour battery life."},
    {"name": "Smart Watch", "price": 129.0, "image": "/images/watch.jpg",
     "description": "Fitness tracking, notifications and a week of battery."},
    {"name": "Mechanical Keyboard", "price": 99.5, "image": "/images/keyboard.jpg",
     "description": "Hot-swappable switches and RGB backlight."},
    {"name": "USB-C Charger", "price": 24.99, "image": "/images/charger.jpg",
     "description": "65W GaN charger for laptops and phones."},
]

init_db()
created = 0
with session_scope() as db:
    for data in PRODUCTS:
        if not db.query(models.Product).filter_by(name=data["name"]).first():
            db.add(models.Product(**data))
            created += 1
print(f"Seeded {created} products ({len(PRODUCTS) - created} already present)")
