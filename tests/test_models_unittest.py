import os
import unittest
import sys
from datetime import datetime
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models.cart import Cart, CartItem
from models.customer import Customer
from models.order import ShippingManifest
from models.product import Product
from utils.clock import InvalidDateFormat


class ProductTests(unittest.TestCase):
    def test_not_expirable_never_expires(self):
        p = Product('TV', 500, 3)
        self.assertFalse(p.has_expired(datetime(9999, 1, 1)))
        self.assertFalse(p.has_expired())

    def test_expiry_boundary_is_inclusive(self):
        p = Product.from_dict({'name': 'Cheese', 'price': 5, 'quantity': 10, 'expiry_date': '2025-06-01'})
        self.assertFalse(p.has_expired(datetime(2025, 5, 31, 23, 59)))
        self.assertTrue(p.has_expired(datetime(2025, 6, 1)))
        self.assertTrue(p.has_expired(datetime(2025, 6, 2)))

    def test_from_dict_sets_optional_attributes(self):
        p = Product.from_dict({'name': 'Cheese', 'price': 5, 'quantity': 10,
                               'expiry_date': '2026-01-01', 'weight': 0.2})
        self.assertTrue(p.is_expirable)
        self.assertEqual(p.expiry_date, datetime(2026, 1, 1))
        self.assertTrue(p.is_shippable)
        self.assertAlmostEqual(p.weight, 0.2)

        card = Product.from_dict({'name': 'E-Book Voucher', 'price': 8, 'quantity': 200})
        self.assertFalse(card.is_expirable)
        self.assertIsNone(card.expiry_date)
        self.assertFalse(card.is_shippable)

    def test_expirable_without_date_rejected(self):
        with self.assertRaises(ValueError) as ctx:
            Product('Milk', 2.5, 15, is_expirable=True)
        self.assertIn('expiry_date', str(ctx.exception))

    def test_from_dict_rejects_bad_expiry(self):
        with self.assertRaises(InvalidDateFormat):
            Product.from_dict({'name': 'Milk', 'price': 2, 'quantity': 1, 'expiry_date': '31-12-2025'})


class CartTests(unittest.TestCase):
    def setUp(self):
        self.cheese = Product('Cheese', 5.0, 10, is_shippable=True, weight=0.2)
        self.tv = Product('TV', 500, 3, is_shippable=True, weight=7.0)
        self.cart = Cart()

    def test_add_keeps_insertion_order(self):
        self.assertTrue(self.cart.add(self.cheese, 2))
        self.assertTrue(self.cart.add(self.tv, 1))
        self.assertTrue(self.cart.add(self.cheese, 1))
        names = [it.product.name for it in self.cart.get_items()]
        self.assertEqual(names, ['Cheese', 'TV', 'Cheese'])
        self.assertIs(self.cart.items[0].product, self.cheese)

    def test_add_over_stock_warns_and_leaves_cart_alone(self):
        self.cart.add(self.cheese, 1)
        with self.assertLogs('checkout.cart', level='WARNING') as logs:
            added = self.cart.add(self.tv, 4)
        self.assertFalse(added)
        self.assertEqual(len(self.cart), 1)
        self.assertIn('Not enough stock for TV', logs.output[0])

    def test_add_exactly_stock_is_allowed(self):
        self.assertTrue(self.cart.add(self.tv, 3))

    def test_add_non_positive_quantity_raises(self):
        with self.assertRaises(ValueError):
            self.cart.add(self.cheese, 0)
        self.assertEqual(len(self.cart), 0)

    def test_remove_in_and_out_of_range(self):
        self.cart.add(self.cheese, 1)
        self.cart.add(self.tv, 1)
        self.cart.remove(5)
        self.cart.remove(-1)
        self.assertEqual(len(self.cart), 2)
        self.cart.remove(0)
        self.assertEqual([it.product.name for it in self.cart.items], ['TV'])

    def test_replace_skips_stock_check(self):
        self.cart.add(self.cheese, 1)
        self.cart.replace(0, self.tv, 99)
        self.assertEqual(self.cart.items[0], CartItem(self.tv, 99))

    def test_clear(self):
        self.cart.add(self.cheese, 1)
        self.cart.clear()
        self.assertEqual(self.cart.get_items(), ())

    def test_line_total(self):
        self.assertAlmostEqual(CartItem(self.cheese, 3).line_total, 15.0)


class CustomerTests(unittest.TestCase):
    def test_deduct(self):
        c = Customer('Ahmed', 1500)
        c.deduct(582)
        self.assertAlmostEqual(c.balance, 918)


class ShippingManifestTests(unittest.TestCase):
    def test_empty_manifest_is_falsy(self):
        m = ShippingManifest()
        self.assertFalse(m)
        self.assertEqual(m.total_weight, 0)

    def test_total_weight(self):
        m = ShippingManifest(weights={'Cheese': 0.4, 'TV': 7.0}, fee=74.0)
        self.assertTrue(m)
        self.assertAlmostEqual(m.total_weight, 7.4)


if __name__ == '__main__':
    unittest.main()
