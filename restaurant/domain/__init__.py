"""Describes the restaurant domain. Centres around the customer order.

- The menu is a fixed price list, it never changes while the process runs.
- An order's total is always computed from the menu, never taken from the
  customer.
- Orders are written once and never modified.

Pricing is lenient: names that are not on the menu cost nothing.
"""
