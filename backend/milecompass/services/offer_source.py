"""
Upstream flight-offer source.

The source is an external service that returns raw offers for a route and
date. Records arrive in two shapes:

    flat:   {"airline": "NH", "airlineName": "ANA", "flightNumber": "NH15",
             "departureTime": "07:00", "arrivalTime": "08:05", "price": 22000, "taxes": 0}
    nested: {"airline": {"code": "NH", "name": "ANA"},
             "pricing": {"totalPrice": 22000, "taxes": 0, "currency": "JPY"},
             "schedule": {"departureTime": "07:00", "arrivalTime": "08:05"},
             "availability": {"availableSeats": 4}}

Fetch failures are reported through FetchResult, never raised.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

import httpx

from milecompass.config import Settings
from milecompass.models.offer import RawOffer

logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    success: bool
    offers: list[RawOffer] = field(default_factory=list)
    source: str = "unknown"
    error: Optional[str] = None


def _to_int(value) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(round(float(value)))
    except (TypeError, ValueError):
        return None


def _block(record: dict, key: str) -> dict:
    value = record.get(key)
    return value if isinstance(value, dict) else {}


def parse_offer_record(record: dict, source: str) -> Optional[RawOffer]:
    """Build a RawOffer from either record shape. Records without a usable price are skipped."""
    if not isinstance(record, dict):
        return None

    airline = record.get("airline")
    if isinstance(airline, dict):
        carrier_code = airline.get("code") or ""
        carrier_name = airline.get("name") or ""
    else:
        carrier_code = airline or record.get("carrierCode") or ""
        carrier_name = record.get("airlineName") or ""

    pricing = _block(record, "pricing")
    price = _to_int(pricing.get("totalPrice", record.get("price")))
    if price is None or price <= 0:
        return None
    taxes = _to_int(pricing.get("taxes", record.get("taxes"))) or 0

    schedule = _block(record, "schedule")
    availability = _block(record, "availability")

    return RawOffer(
        carrier_code=str(carrier_code).strip(),
        carrier_name=str(carrier_name).strip(),
        flight_number=str(record.get("flightNumber") or ""),
        departure_time=str(schedule.get("departureTime") or record.get("departureTime") or ""),
        arrival_time=str(schedule.get("arrivalTime") or record.get("arrivalTime") or ""),
        price=price,
        taxes=taxes,
        currency=str(pricing.get("currency") or record.get("currency") or "JPY"),
        available_seats=_to_int(availability.get("availableSeats", record.get("availableSeats"))) or 0,
        source=str(record.get("source") or source),
        offer_id=str(record.get("id") or ""),
    )


class OfferSource(ABC):
    name: str = "base"

    @abstractmethod
    async def fetch_offers(
        self,
        origin: str,
        destination: str,
        travel_date: date,
        passengers: int,
        return_date: Optional[date] = None,
    ) -> FetchResult:
        pass

    @abstractmethod
    def is_available(self) -> bool:
        pass


class HttpOfferSource(OfferSource):
    name = "upstream"

    def __init__(self, settings: Settings):
        self.settings = settings
        self._client: Optional[httpx.AsyncClient] = None

    def is_available(self) -> bool:
        return bool(self.settings.use_real_api and self.settings.offer_source_url)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            if self.settings.offer_source_api_key:
                headers["Authorization"] = f"Bearer {self.settings.offer_source_api_key}"
            self._client = httpx.AsyncClient(
                headers=headers,
                timeout=self.settings.upstream_timeout_seconds,
            )
        return self._client

    async def close(self):
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def fetch_offers(
        self,
        origin: str,
        destination: str,
        travel_date: date,
        passengers: int,
        return_date: Optional[date] = None,
    ) -> FetchResult:
        if not self.is_available():
            return FetchResult(success=False, source=self.name, error="Offer source not configured")

        payload = {
            "origin": origin,
            "destination": destination,
            "date": travel_date.isoformat(),
            "passengerCount": passengers,
        }
        if return_date:
            payload["returnDate"] = return_date.isoformat()

        client = await self._get_client()
        try:
            response = await client.post(self.settings.offer_source_url, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Offer source error: {e.response.status_code} - {e.response.text[:200]}")
            return FetchResult(success=False, source=self.name, error=f"HTTP {e.response.status_code}")
        except httpx.RequestError as e:
            logger.warning(f"Offer source request failed: {e}")
            return FetchResult(success=False, source=self.name, error=str(e) or type(e).__name__)
        except ValueError as e:
            logger.warning(f"Offer source returned invalid JSON: {e}")
            return FetchResult(success=False, source=self.name, error="Invalid JSON")

        records = data.get("data", []) if isinstance(data, dict) else data
        if not isinstance(records, list):
            return FetchResult(success=False, source=self.name, error="Unexpected response shape")

        offers = []
        for record in records:
            try:
                offer = parse_offer_record(record, self.name)
            except (TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Skipping malformed offer record: {e}")
                continue
            if offer is not None:
                offers.append(offer)

        logger.info(f"{self.name}: {len(offers)}/{len(records)} offers for {origin}-{destination}")
        return FetchResult(success=True, offers=offers, source=self.name)
