"""
Order Flow Simulation Script

Fires concurrent orders at a running server, walks them through the
status lifecycle and checks that the API enforces its rules.
Run from project root: python scripts/simulate.py

Author: Khalil_Bannouri
Version: 3.0.0
"""

import asyncio
import random
import sys
import time
import argparse
from datetime import datetime
from typing import Any, Optional

import httpx

# Configuration
API_BASE_URL = "http://localhost:5000"
TOTAL_ORDERS = 50

# Sample data for random orders
STREETS = ["Main St", "Broadway", "5th Avenue", "Park Ave", "Madison Ave", "Lexington Ave", "Amsterdam Ave"]
MENU_ITEMS = [
    {"name": "Pizza Margherita", "description": "Tomato, mozzarella, basil", "price": 15},
    {"name": "Caesar Salad", "description": "Romaine, parmesan, croutons", "price": 9},
    {"name": "Pasta Carbonara", "description": "Guanciale, egg, pecorino", "price": 14},
    {"name": "Tiramisu", "description": "Espresso-soaked ladyfingers", "price": 8},
]
LIFECYCLE = ["preparing", "out-for-delivery", "delivered"]


def generate_random_customer() -> dict[str, str]:
    """Generate random delivery details."""
    return {
        "deliverTo": f"{random.randint(1, 999)} {random.choice(STREETS)}, New York",
        "mobileNumber": f"555-{random.randint(100,999)}-{random.randint(1000,9999)}",
    }


def generate_random_lines(menu: list[dict]) -> list[dict]:
    """Pick 1-4 dishes from the menu as order lines."""
    lines = []
    for dish in random.sample(menu, k=min(len(menu), random.randint(1, 4))):
        line = dict(dish)
        line["quantity"] = random.randint(1, 3)
        lines.append(line)
    return lines


# =============================================================================
# API CALLS
# =============================================================================

async def seed_menu(client: httpx.AsyncClient) -> list[dict]:
    """Create the sample dishes and return the full menu."""
    for item in MENU_ITEMS:
        payload = dict(item, image_url=f"https://example.com/{item['name'].lower().replace(' ', '-')}.jpg")
        response = await client.post(f"{API_BASE_URL}/dishes", json={"data": payload})
        response.raise_for_status()

    response = await client.get(f"{API_BASE_URL}/dishes")
    response.raise_for_status()
    return response.json()["data"]


async def place_and_deliver(
    client: httpx.AsyncClient,
    menu: list[dict],
    order_num: int,
) -> dict[str, Any]:
    """Place one order and advance it to delivered."""
    customer = generate_random_customer()
    order = {
        "deliverTo": customer["deliverTo"],
        "mobileNumber": customer["mobileNumber"],
        "dishes": generate_random_lines(menu),
    }
    start_time = time.time()

    try:
        response = await client.post(f"{API_BASE_URL}/orders", json={"data": order}, timeout=30.0)
        if response.status_code != 201:
            return _failure(order_num, start_time, response.text)

        created = response.json()["data"]
        for status in LIFECYCLE:
            order["status"] = status
            response = await client.put(
                f"{API_BASE_URL}/orders/{created['id']}",
                json={"data": dict(order, id=created["id"])},
                timeout=30.0,
            )
            if response.status_code != 200:
                return _failure(order_num, start_time, response.text)

        total = sum(line["price"] * line["quantity"] for line in order["dishes"])
        return {
            "order_num": order_num,
            "success": True,
            "order_id": created["id"],
            "total": total,
            "time": round(time.time() - start_time, 3),
        }
    except httpx.HTTPError as e:
        return _failure(order_num, start_time, str(e))


def _failure(order_num: int, start_time: float, error: str) -> dict[str, Any]:
    return {
        "order_num": order_num,
        "success": False,
        "error": error[:100],
        "time": round(time.time() - start_time, 3),
    }


# =============================================================================
# MAIN SIMULATION RUNNER
# =============================================================================

async def run_simulation(num_orders: int = TOTAL_ORDERS) -> dict[str, Any]:
    """
    Run the concurrent order simulation.

    Args:
        num_orders: Number of orders to place and deliver
    """
    print("=" * 70)
    print("🔥 ORDER SIMULATION - CONCURRENT LIFECYCLE TEST")
    print("=" * 70)
    print(f"📋 Total Orders: {num_orders}")
    print(f"🎯 Target: {API_BASE_URL}")
    print(f"⏰ Started: {datetime.now().strftime('%H:%M:%S')}")
    print("=" * 70)

    start_time = time.time()

    async with httpx.AsyncClient() as client:
        menu = await seed_menu(client)
        tasks = [place_and_deliver(client, menu, i + 1) for i in range(num_orders)]
        results = await asyncio.gather(*tasks)

    total_time = round(time.time() - start_time, 2)

    successful = [r for r in results if r["success"]]
    failed = [r for r in results if not r["success"]]
    order_ids = [r["order_id"] for r in successful]

    print("\n" + "=" * 70)
    print("📊 SIMULATION RESULTS")
    print("=" * 70)

    print(f"\n✅ Delivered Orders: {len(successful)}/{num_orders}")
    print(f"❌ Failed Orders: {len(failed)}/{num_orders}")
    print(f"⏱️  Total Time: {total_time}s")

    if len(set(order_ids)) != len(order_ids):
        print("\n⚠️ Duplicate order IDs were issued!")

    if successful:
        avg_time = round(sum(r["time"] for r in successful) / len(successful), 3)
        total_revenue = sum(r["total"] for r in successful)

        print(f"\n📈 Performance Metrics:")
        print(f"   Average Lifecycle: {avg_time}s")
        print(f"   Fastest: {min(r['time'] for r in successful)}s")
        print(f"   Slowest: {max(r['time'] for r in successful)}s")
        print(f"   💰 Total Revenue: ${total_revenue:.2f}")

    if failed:
        print(f"\n⚠️  Failed Order Details (showing first 5):")
        for f in failed[:5]:
            print(f"   Order #{f['order_num']}: {f.get('error', 'Unknown error')}")

    print("=" * 70)

    return {
        "total": num_orders,
        "successful": len(successful),
        "failed": len(failed),
        "total_time": total_time,
        "results": results,
    }


async def expect(
    client: httpx.AsyncClient,
    label: str,
    method: str,
    path: str,
    status: int,
    body: Optional[dict] = None,
) -> Optional[dict]:
    """Send one request and report whether the status code matched."""
    response = await client.request(method, f"{API_BASE_URL}{path}", json=body)
    if response.status_code == status:
        print(f"   ✅ {label}: {status}")
        return response.json() if response.content else None
    print(f"   ❌ {label}: expected {status}, got {response.status_code} {response.text[:100]}")
    return None


async def test_single_flows() -> bool:
    """Check the individual rules before the concurrent run."""
    print("\n" + "=" * 70)
    print("🧪 TESTING INDIVIDUAL FLOWS")
    print("=" * 70)

    async with httpx.AsyncClient() as client:
        print("\n1️⃣ Health Check...")
        try:
            health = await expect(client, "Health", "GET", "/health", 200)
        except httpx.HTTPError as e:
            print(f"   ❌ Server unreachable: {e}")
            return False
        if health is None:
            return False

        print("\n2️⃣ Dish Rules...")
        await expect(client, "Zero price rejected", "POST", "/dishes", 400,
                     {"data": {"name": "Taco", "description": "x", "price": 0, "image_url": "u"}})
        dish = await expect(client, "Dish created", "POST", "/dishes", 201,
                            {"data": {"name": "Taco", "description": "x", "price": 8, "image_url": "u"}})

        print("\n3️⃣ Order Rules...")
        line = dict(dish["data"], quantity=2) if dish else {"quantity": 2}
        order = {"deliverTo": "350 Fifth Avenue", "mobileNumber": "555-123-4567", "dishes": [line]}
        await expect(client, "Empty dishes rejected", "POST", "/orders", 400,
                     {"data": dict(order, dishes=[])})
        created = await expect(client, "Order created", "POST", "/orders", 201, {"data": order})
        if created:
            order_id = created["data"]["id"]
            await expect(client, "Preparing", "PUT", f"/orders/{order_id}", 200,
                         {"data": dict(order, status="preparing")})
            await expect(client, "Delete while preparing rejected", "DELETE", f"/orders/{order_id}", 400)
            await expect(client, "Delivered", "PUT", f"/orders/{order_id}", 200,
                         {"data": dict(order, status="delivered")})
            await expect(client, "Delivered is final", "PUT", f"/orders/{order_id}", 400,
                         {"data": dict(order, status="pending")})

    print("\n" + "=" * 70)
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Order Flow Simulation Script")
    parser.add_argument("--orders", type=int, default=TOTAL_ORDERS, help="Number of orders")
    parser.add_argument("--url", default=API_BASE_URL, help="API base URL")
    parser.add_argument("--skip-tests", action="store_true", help="Skip individual tests")
    args = parser.parse_args()

    API_BASE_URL = args.url.rstrip("/")

    if not args.skip_tests:
        success = asyncio.run(test_single_flows())
        if not success:
            print("\n❌ Pre-flight tests failed. Fix issues before running simulation.")
            sys.exit(1)

        print("\n✅ Pre-flight tests passed!")

    asyncio.run(run_simulation(num_orders=args.orders))
