"""Partner API library: fetch and validate hotel and review payloads.

Public API:
    - PartnerClient: authenticated async client with per-request retries
    - PartnerAPIError: transport, status, or payload error
    - PartnerHotel / PartnerReview: validated payload models
"""

from hotel_api.lib.partner.client import REVIEWS_LIMIT, PartnerAPIError, PartnerClient
from hotel_api.lib.partner.parser import PartnerAddress, PartnerHotel, PartnerReview, parse_hotel, parse_reviews

__all__ = [
    "REVIEWS_LIMIT",
    "PartnerAPIError",
    "PartnerAddress",
    "PartnerClient",
    "PartnerHotel",
    "PartnerReview",
    "parse_hotel",
    "parse_reviews",
]
