"""지도 서비스 — 좌표에 대한 모의 주소 반환.

Maps Service — Returns a mock address for a coordinate pair.
Addresses are drawn at random from a fixed list; coordinates do not
influence the choice.
"""

import random

from pydantic import BaseModel


class AddressResponse(BaseModel):
    """주소 응답 스키마 — Address response schema."""

    address: str  # 도로명 주소 (Street address)
    city: str  # 도시 (City)
    state: str  # 주 (State)
    zip: str  # 우편번호 (Postal code)


# 모의 주소 목록 — Mock address pool
ADDRESSES: tuple[AddressResponse, ...] = (
    AddressResponse(address="777 Brockton Avenue", city="Abington", state="MA", zip="2351"),
    AddressResponse(address="30 Memorial Drive", city="Avon", state="MA", zip="2322"),
    AddressResponse(address="250 Hartford Avenue", city="Bellingham", state="MA", zip="2019"),
    AddressResponse(address="700 Oak Street", city="Brockton", state="MA", zip="2301"),
    AddressResponse(address="66-4 Parkhurst Rd", city="Chelmsford", state="MA", zip="1824"),
    AddressResponse(address="591 Memorial Dr", city="Chicopee", state="MA", zip="1020"),
    AddressResponse(address="55 Brooksby Village Way", city="Danvers", state="MA", zip="1923"),
    AddressResponse(address="137 Teaticket Hwy", city="East Falmouth", state="MA", zip="2536"),
    AddressResponse(address="42 Fairhaven Commons Way", city="Fairhaven", state="MA", zip="2719"),
    AddressResponse(address="374 William S Canning Blvd", city="Fall River", state="MA", zip="2721"),
    AddressResponse(address="121 Worcester Rd", city="Framingham", state="MA", zip="1701"),
    AddressResponse(address="677 Timpany Blvd", city="Gardner", state="MA", zip="1440"),
    AddressResponse(address="337 Russell St", city="Hadley", state="MA", zip="1035"),
    AddressResponse(address="295 Plymouth Street", city="Halifax", state="MA", zip="2338"),
    AddressResponse(address="1775 Washington St", city="Hanover", state="MA", zip="2339"),
)


class MapsService:
    """주소 조회 서비스 — Address lookup service."""

    def get_address(self, lat: float, lon: float) -> AddressResponse:
        """좌표에 대한 임의 주소를 반환합니다 — Return a random address for the coordinates."""
        return random.choice(ADDRESSES)


# 싱글턴 인스턴스 — Singleton instance
maps_service: MapsService = MapsService()
