#!/usr/bin/env python3
"""
Basic usage example for proxygen interception proxies.

This example generates a proxy for a small service class, installs a
timing interceptor and an audit interceptor, and prints the generated
source.

Usage:
    python3 basic_usage.py
"""

import os
import sys
import time

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from proxygen import Enhancer, InterceptionGenerator, RegexInterceptionLoader
from proxygen.utils.logging import setup_logging


class AccountService:
    """Moves money between accounts."""

    def __init__(self):
        self.balances = {"alice": 100, "bob": 20}

    def transfer(self, source: str, target: str, amount: int) -> None:
        self.balances[source] -= amount
        self.balances[target] += amount

    def balance(self, account: str) -> int:
        return self.balances[account]


class TimingInterceptor:
    def intercept(self, invocation):
        start = time.perf_counter()
        try:
            return invocation.proceed()
        finally:
            elapsed = (time.perf_counter() - start) * 1e6
            print(f"  [timing] {invocation} took {elapsed:.1f}us")


class AuditInterceptor:
    """Refuses transfers above a limit."""

    def __init__(self, limit: int):
        self.limit = limit

    def intercept(self, invocation):
        amount = invocation.get_named_argument("amount")
        if amount > self.limit:
            print(f"  [audit] rejected transfer of {amount}")
            return None
        print(f"  [audit] allowed transfer of {amount}")
        return invocation.proceed()


def main():
    """Demonstrate interception proxies."""
    setup_logging("WARNING")

    print("proxygen - Basic Usage Example")
    print("=" * 60)

    enhancer = Enhancer(AccountService, generators=[InterceptionGenerator()])
    print(f"\n1. Proxy class name: {enhancer.get_class_name()}")

    print("\n2. Generated source:")
    print(enhancer.generate_class())

    service = enhancer.create_instance()
    service.cg_interception_set_loader(RegexInterceptionLoader({
        "AccountService::": TimingInterceptor(),
        "::transfer$": AuditInterceptor(limit=50),
    }))

    print("3. Calling the proxy:")
    service.transfer("alice", "bob", 30)
    service.transfer("alice", "bob", 80)
    print(f"  alice={service.balance('alice')} bob={service.balance('bob')}")


if __name__ == '__main__':
    main()
