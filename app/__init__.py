"""
                Food Ordering API

A REST backend for a food-ordering application: a dish menu and
delivery orders with a validated status lifecycle.

Author: Khalil_Bannouri
Version: 3.0.0
License: MIT
"""

__version__ = "3.0.0"
__author__ = "Khalil_Bannouri"
