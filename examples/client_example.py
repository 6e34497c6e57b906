"""
Client Examples for Tiki SDK
Demonstrates configuring the SDK and calling the API
"""

import logging

from tiki_sdk import (
    ClientOptions,
    RequestOptions,
    SettingsLoader,
    TikiSettings,
    create_client,
    get,
)
from tiki_sdk.services import seller


# =============================================================================
# Example 1: Settings from environment
# =============================================================================

def environment_settings_example() -> TikiSettings:
    """
    Load settings from TIKI_* environment variables

    Environment variables:
        TIKI_CLIENT_ID=your-app-id
        TIKI_CLIENT_SECRET=your-app-secret
        TIKI_PROXY=http://127.0.0.1:9090
        TIKI_TIMEOUT=10000
    """
    return SettingsLoader().load()


# =============================================================================
# Example 2: Custom response handler and middleware
# =============================================================================

def status_only_handler(outcome):
    """Return just the HTTP status, or the error that prevented a response"""
    return outcome.status if outcome.success else outcome.error


def add_user_agent(env, next_):
    return next_(env.put_header("User-Agent", "my-shop/1.0"))


def custom_settings_example() -> TikiSettings:
    return TikiSettings(
        credential={"client_id": "your-app-id", "client_secret": "your-app-secret"},
        timeout=10000,
        response_handler=status_only_handler,
        middlewares=[add_user_agent],
    )


# =============================================================================
# Example 3: Calling the API
# =============================================================================

def call_api_example(settings: TikiSettings) -> None:
    # Per-call options override the process-wide credential
    options = ClientOptions(credential={"access_token": "shop-access-token"})

    created = create_client(options, settings)
    if not created.success:
        print(f"Invalid credential: {created.error.fields}")
        return

    client = created.value
    result = get(client, "/sellers/me/warehouses", RequestOptions(query={"page": 1}))
    if result.success:
        print(result.value)
    else:
        print(f"Request failed: {result.error}")

    # Seller helpers build their own client
    print(seller.me(settings=settings))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    call_api_example(environment_settings_example())
