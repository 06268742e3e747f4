"""
Concurrency tests for inventory operations.

Runs real transactions from several threads against the file-backed test
database, so the row lock (or BEGIN IMMEDIATE on SQLite) is exercised.
"""

import threading
from decimal import Decimal

from django.db import connection
from django.test import TransactionTestCase

from apps.accounts.models import User, UserRole
from apps.inventory.exceptions import InsufficientStockError
from apps.inventory.models import StockTransaction, TransactionType
from apps.inventory.services import InventoryService
from apps.sweets.models import Sweet


class TestConcurrentStockChanges(TransactionTestCase):
    """
    Tests for concurrency protection using TransactionTestCase.

    Note: TransactionTestCase is required here. Regular TestCase wraps each
    test in a transaction that worker threads cannot see.
    """

    def setUp(self):
        """Create test fixtures."""
        self.buyers = [
            User.objects.create_user(username=f'buyer{i}', password='password123')
            for i in range(5)
        ]
        self.admin = User.objects.create_user(
            username='shopadmin',
            password='admin123',
            role=UserRole.ADMIN
        )
        self.sweet = Sweet.objects.create(
            name='Chocolate Bar',
            category='Chocolate',
            price=Decimal('10.00'),
            quantity=5
        )

    def run_in_threads(self, targets):
        threads = [threading.Thread(target=target) for target in targets]

        for thread in threads:
            thread.start()

        for thread in threads:
            thread.join()

    def test_two_purchases_of_three_against_five(self):
        """
        Exactly one of two concurrent purchases of 3 succeeds.

        The loser must see the winner's decrement and fail with
        InsufficientStockError rather than oversell.
        """
        results = []
        errors = []

        def buy(user):
            def target():
                try:
                    results.append(
                        InventoryService.purchase(
                            user_id=user.id,
                            sweet_id=self.sweet.id,
                            quantity=3
                        )
                    )
                except InsufficientStockError as e:
                    errors.append(str(e))
                except Exception as e:
                    errors.append(f"Unexpected error: {e}")
                finally:
                    connection.close()
            return target

        self.run_in_threads([buy(self.buyers[0]), buy(self.buyers[1])])

        assert len(results) == 1, f"Expected 1 successful purchase, got {len(results)}"
        assert len(errors) == 1, f"Expected 1 rejection, got: {errors}"
        assert not errors[0].startswith('Unexpected')

        self.sweet.refresh_from_db()
        assert self.sweet.quantity == 2
        assert StockTransaction.objects.filter(type=TransactionType.PURCHASE).count() == 1

    def test_single_item_purchases_never_oversell(self):
        """Five buyers race for three items; exactly three succeed."""
        Sweet.objects.filter(id=self.sweet.id).update(quantity=3)
        results = []
        errors = []

        def buy(user):
            def target():
                try:
                    results.append(
                        InventoryService.purchase(user_id=user.id, sweet_id=self.sweet.id)
                    )
                except InsufficientStockError as e:
                    errors.append(str(e))
                except Exception as e:
                    errors.append(f"Unexpected error: {e}")
                finally:
                    connection.close()
            return target

        self.run_in_threads([buy(user) for user in self.buyers])

        assert len(results) == 3, f"Expected 3 successful purchases, got {len(results)}"
        assert len(errors) == 2
        assert all(not e.startswith('Unexpected') for e in errors), errors

        self.sweet.refresh_from_db()
        assert self.sweet.quantity == 0
        assert StockTransaction.objects.count() == 3

    def test_concurrent_restock_and_purchase_no_lost_update(self):
        """A restock racing a purchase keeps both changes."""
        errors = []

        def restock():
            try:
                InventoryService.restock(user_id=self.admin.id, sweet_id=self.sweet.id, quantity=10)
            except Exception as e:
                errors.append(str(e))
            finally:
                connection.close()

        def purchase():
            try:
                InventoryService.purchase(user_id=self.buyers[0].id, sweet_id=self.sweet.id, quantity=4)
            except Exception as e:
                errors.append(str(e))
            finally:
                connection.close()

        self.run_in_threads([restock, purchase])

        assert errors == []
        self.sweet.refresh_from_db()
        assert self.sweet.quantity == 5 + 10 - 4
        assert StockTransaction.objects.count() == 2
