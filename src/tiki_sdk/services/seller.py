"""
Seller API
Ref: https://open.tiki.vn/docs/docs/current/api-references/seller-api/
"""

from typing import Any, Dict, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from tiki_sdk.client.middleware import Adapter
from tiki_sdk.client.factory import create_client
from tiki_sdk.client.http_client import RequestOptions, get
from tiki_sdk.config.settings import ClientOptions, TikiSettings
from tiki_sdk.exceptions import ValidationError
from tiki_sdk.models.seller import SellerWarehouseQuery
from tiki_sdk.utils.helpers import clean_none
from tiki_sdk.utils.result import Result

Options = Optional[Union[ClientOptions, Dict[str, Any]]]


def me(
    options: Options = None,
    settings: Optional[TikiSettings] = None,
    adapter: Optional[Adapter] = None,
) -> Any:
    """Get seller info"""
    created = create_client(options, settings, adapter)
    if not created.success:
        return created
    return get(created.value, "/sellers/me")


def get_seller_warehouse(
    params: Dict[str, Any],
    options: Options = None,
    settings: Optional[TikiSettings] = None,
    adapter: Optional[Adapter] = None,
) -> Any:
    """
    Return list of seller warehouses

    Args:
        params: Filters, any of ``status``, ``type``, ``limit``, ``page``
        options: Per-call client options
        settings: Process-wide settings

    Returns:
        Result of the request, or ``Result.fail(ValidationError)`` when the
        filters cannot be cast
    """
    try:
        query = SellerWarehouseQuery(**params)
    except PydanticValidationError as e:
        return Result.fail(ValidationError.from_pydantic(e, "Invalid warehouse query"))

    data = clean_none(query.model_dump(mode="json"))

    created = create_client(options, settings, adapter)
    if not created.success:
        return created
    return get(created.value, "/sellers/me/warehouses", RequestOptions(query=data))
