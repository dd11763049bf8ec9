"""Method names served by the trading engine."""

from __future__ import annotations

from enum import Enum


class Method(str, Enum):
    """Engine method catalogue."""

    BALANCE_QUERY = "balance.query"
    BALANCE_UPDATE = "balance.update"
    BALANCE_HISTORY = "balance.history"
    ASSET_LIST = "asset.list"
    ASSET_SUMMARY = "asset.summary"
    ORDER_PUT_LIMIT = "order.put_limit"
    ORDER_PUT_MARKET = "order.put_market"
    ORDER_CANCEL = "order.cancel"
    ORDER_BOOK = "order.book"
    ORDER_DEPTH = "order.depth"
    ORDER_PENDING = "order.pending"
    ORDER_PENDING_DETAIL = "order.pending_detail"
    ORDER_DEALS = "order.deals"
    ORDER_FINISHED = "order.finished"
    ORDER_FINISHED_DETAIL = "order.finished_detail"
    MARKET_LAST = "market.last"
    MARKET_SUMMARY = "market.summary"
    MARKET_LIST = "market.list"
    MARKET_DEALS = "market.deals"
    MARKET_USER_DEALS = "market.user_deals"
    MARKET_KLINE = "market.kline"
    MARKET_STATUS = "market.status"
    MARKET_STATUS_TODAY = "market.status_today"


_KNOWN = {m.value for m in Method}


def is_known_method(name: str) -> bool:
    return name in _KNOWN
