from __future__ import annotations

import random
from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.utils import timezone

from modules.accounts.constants import AccountRole
from modules.accounts.models import Account
from modules.deliveries.constants import DeliveryStatus
from modules.deliveries.models import Delivery
from modules.drivers.models import Driver
from modules.orders.constants import OrderStatus
from modules.orders.models import Order, Product

# Centre of the seeded driver positions (Tunis).
TUNIS = (36.8065, 10.1815)

CITIES = ["Tunis", "Sfax", "Sousse", "Bizerte", "Nabeul", "Monastir"]


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        api_users = self._seed_api_users()
        customers = self._seed_customers()
        drivers = self._seed_drivers()
        orders_created = self._seed_orders(customers)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"api_users={api_users}, "
                f"customers={len(customers)}, "
                f"drivers={len(drivers)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_api_users(self) -> int:
        """Django users able to obtain JWTs for the API."""
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password="admin123")
            created += 1
        if not User.objects.filter(username="agent").exists():
            User.objects.create_user("agent", password="agent123")
            created += 1
        return created

    def _account(self, name: str, email: str, role: str, location: str) -> Account:
        account, created = Account.objects.get_or_create(
            email=email,
            defaults={
                "name": name,
                "phone": f"+216 {random.randint(20000000, 99999999)}",
                "location": location,
                "role": role,
            },
        )
        if created:
            account.set_password("password123")
            account.save(update_fields=["password_hash"])
        return account

    def _seed_customers(self) -> list[Account]:
        self.stdout.write("Creating customers...")
        seed_customers = [
            ("Amira Ben Salah", "amira@example.com"),
            ("Youssef Trabelsi", "youssef@example.com"),
            ("Salma Gharbi", "salma@example.com"),
            ("Karim Jlassi", "karim@example.com"),
            ("Ines Mansour", "ines@example.com"),
        ]
        customers = [
            self._account(name, email, AccountRole.CLIENT, random.choice(CITIES))
            for name, email in seed_customers
        ]
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_drivers(self) -> list[Driver]:
        self.stdout.write("Creating drivers...")
        seed_drivers = [
            ("Hedi Ayari", "hedi@example.com", "van", "Tunis, Ariana"),
            ("Nour Bouazizi", "nour@example.com", "truck", "Tunis, Sfax"),
            ("Walid Chebbi", "walid@example.com", "motorbike", "Sousse, Monastir"),
            ("Rim Khelifi", "rim@example.com", "van", "Bizerte, Tunis"),
            ("Sami Dridi", "sami@example.com", "car", "Nabeul, Sousse"),
        ]
        drivers: list[Driver] = []
        for name, email, vehicle, area in seed_drivers:
            account = self._account(name, email, AccountRole.DELIVERY_MAN, area)
            driver, _ = Driver.objects.get_or_create(
                user=account,
                defaults={
                    "vehicle_type": vehicle,
                    "service_area": area,
                    "latitude": TUNIS[0] + random.uniform(-0.1, 0.1),
                    "longitude": TUNIS[1] + random.uniform(-0.1, 0.1),
                    "rating": Decimal(str(round(random.uniform(3, 5), 2))),
                    "is_available": random.random() > 0.2,
                },
            )
            drivers.append(driver)
        self.stdout.write(self.style.SUCCESS("Creating drivers... Done!"))
        return drivers

    def _seed_orders(self, customers: list[Account]) -> int:
        self.stdout.write("Creating orders...")
        if not customers or Order.objects.exists():
            self.stdout.write(self.style.WARNING("Skipping orders."))
            return 0

        objects = ["sofa", "fridge", "boxes", "bicycle", "washing machine"]
        # (delivery status, order status)
        outcomes = [
            (DeliveryStatus.PENDING, OrderStatus.PENDING),
            (DeliveryStatus.IN_TRANSIT, OrderStatus.PENDING),
            (DeliveryStatus.DELIVERED, OrderStatus.DELIVERED),
            (DeliveryStatus.FAILED, OrderStatus.CANCELLED),
        ]

        orders_created = 0
        for _ in range(20):
            source, destination = random.sample(CITIES, k=2)
            delivery_status, order_status = random.choice(outcomes)
            price = Decimal(random.randint(10, 120))
            order = Order.objects.create(
                customer=random.choice(customers),
                status=order_status,
                source=source,
                destination=destination,
                total=price,
            )
            Product.objects.create(
                order=order, object_type=random.choice(objects), price=price
            )

            shipping_date = (timezone.now() + timedelta(days=random.randint(-5, 10))).date()
            delivery = Delivery(order=order, shipping_date=shipping_date)
            if delivery_status != DeliveryStatus.PENDING:
                path = {
                    DeliveryStatus.IN_TRANSIT: ["assigned", "in_transit"],
                    DeliveryStatus.DELIVERED: ["assigned", "in_transit", "delivered"],
                    DeliveryStatus.FAILED: ["failed"],
                }[delivery_status]
                for status in path:
                    delivery.record_status(status)
            delivery.save()
            orders_created += 1

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return orders_created
