"""
Benefits Pricing Package

Prices employee benefits products (medical, voluntary life, long term
disability) from a product's rate table and the employee's selected coverage,
net of the employer contribution policy.
"""

__version__ = "1.0.0"
