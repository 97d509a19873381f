import asyncio
import logging

import httpx

from chargily_pay import ChargilyClient, ChargilySettings, HttpError
from chargily_pay.schemas import CheckoutItemParams, CreateCheckoutParams, CreatePriceParams, CreateProductParams

"""
CHARGILY_API_KEY=test_sk_xxx python example/client_example.py
"""

logging.basicConfig(level=logging.DEBUG)


async def main():
    settings = ChargilySettings.from_env()

    async with ChargilyClient.from_settings(
        settings,
        timeout=httpx.Timeout(30.0),
    ) as client:
        balance = await client.get_balance()
        print("Balance:", balance.wallets)

        product = await client.create_product(CreateProductParams(name="Premium plan"))
        price = await client.create_price(
            CreatePriceParams(amount=2500, currency="dzd", product_id=product.id)
        )

        try:
            checkout = await client.create_checkout(CreateCheckoutParams(
                items=[CheckoutItemParams(price=price.id, quantity=1)],
                success_url="https://shop.example.com/thanks",
                failure_url="https://shop.example.com/sorry",
                locale="fr",
            ))
        except HttpError as e:
            print(f"Chargily refused the checkout: {e.status_code} {e.status_text}")
            return None

        return checkout


if __name__ == "__main__":
    checkout = asyncio.run(main())
    if checkout is not None:
        print("Pay at:", checkout.checkout_url)
