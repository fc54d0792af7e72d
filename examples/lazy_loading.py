#!/usr/bin/env python3
"""
Lazy initialization example.

A lazy proxy defers expensive setup until the first public method call.
Combining it with interception shows that the initializer runs before
any interceptor sees the call.

Usage:
    python3 lazy_loading.py
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from proxygen import Enhancer, InterceptionGenerator, LazyInitializerGenerator, RegexInterceptionLoader
from proxygen.utils.exceptions import LazyInitializationError


class Catalog:
    """A product catalog that is expensive to load."""

    def __init__(self):
        self.products = {}

    def price(self, sku: str) -> float:
        return self.products[sku]

    def count(self) -> int:
        return len(self.products)


class CatalogLoader:
    def initialize(self, instance):
        print("  [loader] loading catalog...")
        instance.products = {"tea": 3.5, "coffee": 4.25}


class TraceInterceptor:
    def intercept(self, invocation):
        print(f"  [trace] {invocation}")
        return invocation.proceed()


def main():
    """Demonstrate lazy proxies."""
    print("proxygen - Lazy Initialization Example")
    print("=" * 60)

    enhancer = Enhancer(Catalog, generators=[InterceptionGenerator(), LazyInitializerGenerator()])
    catalog = enhancer.create_instance()

    print("\n1. Calling before an initializer is installed:")
    try:
        catalog.count()
    except LazyInitializationError as e:
        print(f"  Expected error: {e}")

    catalog.cg_interception_set_loader(RegexInterceptionLoader({"Catalog::": TraceInterceptor()}))
    catalog.cg_set_lazy_initializer(CatalogLoader())

    print("\n2. First call loads the catalog:")
    print(f"  tea costs {catalog.price('tea')}")

    print("\n3. Later calls do not:")
    print(f"  {catalog.count()} products")


if __name__ == '__main__':
    main()
